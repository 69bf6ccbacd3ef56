from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_env_path = Path(__file__).resolve().parents[1] / ".env"
if _env_path.is_file():
    load_dotenv(_env_path, override=False)

DEFAULT_HTTP_TIMEOUT = 5.0
DEFAULT_USER_AGENT = "bio_apis/0.1"
DEFAULT_GEOSTD_URL = "https://www.athanorlab.com"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class BioApisSettings:
    """Configuration loaded from BIO_APIS_* environment variables.

      BIO_APIS_HTTP_TIMEOUT=5
      BIO_APIS_USER_AGENT=bio_apis/0.1
      BIO_APIS_GEOSTD_URL=https://www.athanorlab.com
      BIO_APIS_LOG_LEVEL=INFO
    """

    # Global timeout for every request, in seconds
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    # Host serving the Amber GeoStd mirror
    geostd_base_url: str = DEFAULT_GEOSTD_URL

    # Root level used by the CLI (DEBUG shows every request)
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> BioApisSettings:
    """Load settings from environment variables."""
    return BioApisSettings(
        http_timeout=float(os.environ.get("BIO_APIS_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))),
        user_agent=os.environ.get("BIO_APIS_USER_AGENT", DEFAULT_USER_AGENT),
        geostd_base_url=os.environ.get("BIO_APIS_GEOSTD_URL", DEFAULT_GEOSTD_URL).rstrip("/"),
        log_level=os.environ.get("BIO_APIS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
