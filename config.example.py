# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name (default: taskboard).",
    "TASKBOARD_LOG_LEVEL": "Log file level (default: INFO). The console only shows warnings.",
    # Paths (gitignored)
    "TASKBOARD_DATA_DIR": "Local data directory (default: .local/taskboard).",
    "TASKBOARD_STORE_PATH": "JSON key-value store file (default: <data_dir>/storage.json).",
    "TASKBOARD_STORAGE_KEY": "Key holding the task collection inside the store (default: tasks).",
    # New-task defaults / UI
    "TASKBOARD_DEFAULT_PRIORITY": "high | medium | low (default: medium).",
    "TASKBOARD_DEFAULT_CATEGORY": "work | personal | shopping | health (default: work).",
    "TASKBOARD_VIEW_MODE": "list | grid (default: list).",
}
