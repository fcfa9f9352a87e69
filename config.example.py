# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "ORION_APP_NAME": "Name used in the greeting (default: Orion).",
    "ORION_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "ORION_LOG_DIR": "Directory of orion.log (default: <data_dir>).",
    # Paths
    "ORION_DATA_DIR": "Local data directory (default: data).",
    "ORION_TASKS_FILE_NAME": "Task file name inside the data directory (default: tasks.json).",
    "ORION_TASKS_PATH": "Full task file path; overrides the two variables above.",
    # Console
    "ORION_SEPARATOR_WIDTH": "Width of the separator line printed after each reply (default: 60).",
}
