import os
from pathlib import Path

# Global environment settings
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG_MODE else "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() == "true"
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_FILE = os.getenv("LOG_FILE", "autoscaler-webhook.log")
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(10 * 1024 * 1024)))
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "5"))
LOG_LOCATION = str(Path(LOG_DIR) / LOG_FILE) if LOG_TO_FILE else "webhook server log"
LOG_TAG = "[ sacloud/AutoScaler Webhook ]"

# Outbound request; empty means the HTTP client default (no timeout)
_timeout_env = os.getenv("REQUEST_TIMEOUT_SECONDS", "").strip()
REQUEST_TIMEOUT_SECONDS = float(_timeout_env) if _timeout_env else None

AUTOSCALER_EVENT_TYPES = ("up", "down")
EVENT_SOURCES = (0, 1, 2, 3)
DEFAULT_AUTOSCALER_SOURCE = "default"
DEFAULT_AUTOSCALER_RESOURCE_NAME = "default"

# Index = event_nseverity, 6 is used for resolved events
SEVERITY_COLORS = (
    "#97AAB3",  # Not classified
    "#7499FF",  # Information
    "#FFC859",  # Warning
    "#FFA059",  # Average
    "#E97659",  # High
    "#E45959",  # Disaster
    "#009900",  # Resolved
)
RESOLVED_SEVERITY = "6"

# Embed size limits
TITLE_MAX_LENGTH = 256
DESCRIPTION_MAX_LENGTH = 2048
FIELD_VALUE_MAX_LENGTH = 1024
FOOTER_MAX_LENGTH = 2048
