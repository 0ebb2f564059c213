"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or reuse a deployment secret
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
