"""Root conftest - shared test configuration."""

import os

# Set before customer_api.config is imported (get_settings is cached)
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("API_TOKENS", '["test-token"]')
os.environ.setdefault("LOG_FORMAT", "text")
