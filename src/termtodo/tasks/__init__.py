"""
Task subsystem.

Components:
- task_models.py: data structures (Task, MigrationRecord, Migration)
- errors.py: StoreError and its subclasses
- task_store.py: SQLite-backed storage for tasks and migration bookkeeping
- migrations.py: the canonical migration list and the runner applied at startup
"""
