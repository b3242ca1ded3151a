"""Terminal to-do list backed by a migrated SQLite database."""

__version__ = "0.1.0"
