"""
constants module

Default values shared by the bridge, the HTTP transport and the logging setup.
Environment variables override the server URL and the log level.
"""

import os

# ---------------------------------------------------------------------------
# Remote server
# ---------------------------------------------------------------------------

DEFAULT_PORT = 4444
DEFAULT_HOST = "localhost"
HUB_PATH = "/wd/hub/"

# Client-side read timeout of the default transport (seconds)
DEFAULT_HTTP_TIMEOUT = 60

DEFAULT_BROWSER = "firefox"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

# Log level setting ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_LEVEL = os.environ.get("WEBDRIVER_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Wire format
# ---------------------------------------------------------------------------

# Key of a W3C web element reference object
ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"
# Key used by the legacy JSON wire protocol
LEGACY_ELEMENT_KEY = "ELEMENT"

# Base of the numeric escape used for digit-leading CSS identifiers
UNICODE_CODE_POINT = 30


def get_default_server_url(port: int = DEFAULT_PORT) -> str:
    """Return the remote server URL, preferring ``WEBDRIVER_URL``"""
    return os.environ.get(
        "WEBDRIVER_URL", f"http://{DEFAULT_HOST}:{port}{HUB_PATH}"
    )
