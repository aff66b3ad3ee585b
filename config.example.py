# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "SMARTODO_APP_NAME": "App display name (default: smartodo).",
    "SMARTODO_LOG_LEVEL": "Console logging level (default: INFO).",
    # Console
    "SMARTODO_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # Paths (gitignored)
    "SMARTODO_DATA_DIR": "Local data directory (default: .local/smartodo).",
    "SMARTODO_LOG_DIR": "Directory for smartodo.log (default: <data_dir>).",
    "SMARTODO_PRESETS_PATH": "Saved filters JSON (default: <data_dir>/filter_presets.json).",
}
