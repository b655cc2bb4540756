"""Root conftest — shared test configuration."""

import os

# Keep test logs human-readable and independent of any local .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
