# patternkit/config/defaults.py
from typing import Any, Dict

ENV_PREFIX = "PATTERNKIT_"

DEFAULT_CONFIG: Dict[str, Any] = {
    # Logging configuration
    "logging": {
        "level": "INFO",
        "renderer": "console",
        "format": "%(message)s",
    },
}

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_RENDERER": ("logging", "renderer"),
}
