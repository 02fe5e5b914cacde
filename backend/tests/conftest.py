"""Root conftest - shared test configuration."""

import os

# Ensure tests never verify against a real signing key or reach a real database
os.environ.setdefault("AUTH_JWT_SECRET", "test-signing-secret-0123456789abcdef")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
