from pydantic import BaseModel
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Load .env file if it exists (before reading os.getenv)
_env_path = Path(__file__).resolve().parent.parent / ".env"
if _env_path.exists():
    with open(_env_path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()
                # Only set if not already in environment (env vars take precedence)
                if key not in os.environ:
                    os.environ[key] = value


# Exa API
API_BASE_URL = "https://api.exa.ai"
SEARCH_ENDPOINT = "/search"
CONTENTS_ENDPOINT = "/contents"
REQUEST_TIMEOUT_S = 25.0

DEFAULT_NUM_RESULTS = 5
DEFAULT_MAX_CHARACTERS = 3000
MAX_NUM_RESULTS = 100

RECENT_SEARCHES_MAX = 5

SERVER_NAME = "exa-search-server"
SERVER_VERSION = "0.3.2"


class ConfigError(Exception):
    """Raised when the process cannot start with the current environment."""


def _sanitize_ascii(val: str) -> str:
    """Strip non-ASCII characters from config values (prevents header encoding errors)"""
    return val.encode('ascii', errors='ignore').decode('ascii').strip()


class Settings(BaseModel):
    exa_api_key: str = _sanitize_ascii(os.getenv("EXA_API_KEY", ""))
    log_level: str = _sanitize_ascii(os.getenv("EXA_MCP_LOG_LEVEL", "INFO")).upper()

    def masked_key(self) -> str:
        return '***' + self.exa_api_key[-4:] if len(self.exa_api_key) > 4 else 'EMPTY'


settings = Settings()


def require_api_key() -> str:
    """Return the Exa API key or fail start-up.

    Only the tool-listing path may run without a key.
    """
    if not settings.exa_api_key:
        raise ConfigError("EXA_API_KEY environment variable is required")
    logger.info(f"Config: Exa API → {API_BASE_URL} (key={settings.masked_key()})")
    return settings.exa_api_key
