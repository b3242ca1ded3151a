"""
Interactive sessions.

- list_session.py: the main list view (cursor, completion, entry to add mode)
- add_session.py: modal text entry used to create a task
- banner.py: one-shot command help shown at startup
"""
