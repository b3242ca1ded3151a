# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TERMTODO_APP_NAME": "App display name (default: termtodo).",
    "TERMTODO_LOG_LEVEL": "Console logging level (default: WARNING; the file log is always DEBUG).",
    # Paths (gitignored)
    "TERMTODO_DATA_DIR": "Local data directory for the database and log (default: .local/termtodo).",
    "TERMTODO_DB_PATH": "SQLite database path (default: <data_dir>/db.sqlite3).",
    # Interactive timing
    "TERMTODO_BANNER_SECONDS": "How long the command list stays on screen at startup (default: 2).",
    "TERMTODO_NOTICE_SECONDS": "How long the add success/failure notice stays on screen (default: 1).",
    # List view
    "TERMTODO_CURSOR_MODE": "free (cursor may leave the task rows) or clamp (default: free).",
}
