"""Application settings."""

import os
from datetime import timedelta
from pathlib import Path

# Database
DB_PATH = os.getenv("FREQ_DB_PATH", "frequency.duckdb")

# Logging
LOG_DIR = Path(os.getenv("FREQ_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("FREQ_LOG_LEVEL", "INFO").upper()

# Upstream API
API_BASE_URL = os.getenv("FREQ_API_URL", "https://api.gdeltproject.org/api/v2/doc/doc")
API_TIMEOUT = int(os.getenv("FREQ_API_TIMEOUT", "30"))

# Rate limiting (upstream limit is undocumented, these values are empirical)
RATE_LIMIT_SECONDS = 5.0
RETRY_DELAY_SECONDS = 6.0
MAX_RETRIES = 2
MAX_REQUESTS_PER_RUN = 25

# Planning
CHUNK_SIZE = 6
MAX_PHRASES = 10
MIN_PHRASE_LENGTH = 3
MAX_PHRASE_LENGTH = 80
EXACT_MATCH_MIN_LENGTH = 5

# Cache (bump CACHE_VERSION whenever allow-lists or aggregation change)
CACHE_VERSION = "v4"
CHUNK_CACHE_TTL = timedelta(days=7)
RESPONSE_CACHE_TTL = timedelta(hours=24)

# Diagnostics
RAW_SNIPPET_LENGTH = 300
PROBE_SNIPPET_LENGTH = 1000
