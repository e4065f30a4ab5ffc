# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # Storage
    "CHECKLIST_FILE": "Checklist file path (default: checklist.txt). '~' is expanded.",
    # Logging
    "CHECKLIST_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "CHECKLIST_LOG_DIR": "Directory for checklist.log (default: empty => no log file).",
}
