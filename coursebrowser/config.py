import os
from typing import Any, Dict


def get_app_config() -> Dict[str, Any]:
    """Get application configuration from environment variables"""
    debug = os.getenv("COURSEBROWSER_DEBUG", "False").lower() == "true"
    return {
        "log_level": "DEBUG" if debug else os.getenv("COURSEBROWSER_LOG_LEVEL", "WARNING").upper(),
        "default_file": os.getenv("COURSEBROWSER_FILE") or None,
    }
