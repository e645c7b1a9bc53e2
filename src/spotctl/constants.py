from __future__ import annotations

from spotctl.version import __version__

DEFAULT_BASE_URL = "https://spot.rackspace.com/apis"
DEFAULT_OAUTH_URL = "https://login.spot.rackspace.com/oauth/token"
DEFAULT_CLIENT_ID = "mwG3lUMV8KyeMqHe4fJ5Bb3nM1vBvRNa"
DEFAULT_TIMEOUT_SECONDS = 30

DEFAULT_CONFIG_DIR = "~/.config/spotctl"
DEFAULT_CONFIG_FILE = f"{DEFAULT_CONFIG_DIR}/config.yaml"

USER_AGENT = f"spotctl/{__version__}"

# Tokens within this many seconds of expiry are refreshed before use.
TOKEN_EXPIRY_BUFFER_SECONDS = 300

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_JSON_PATCH = "application/json-patch+json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
