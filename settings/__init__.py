"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("CONGRESS_LOG_DIR", "logs"))

# API
API_KEY = os.getenv("CONGRESS_API_KEY", "")
API_VERSION = os.getenv("CONGRESS_API_VERSION", "v3")
API_FORMAT = os.getenv("CONGRESS_API_FORMAT", "xml")
API_BASE_URL = os.getenv("CONGRESS_API_BASE_URL", "https://api.nytimes.com/svc/politics")
DEFAULT_TIMEOUT = 60.0
API_TIMEOUT = os.getenv("CONGRESS_API_TIMEOUT", str(DEFAULT_TIMEOUT))  # empty or "none" disables
