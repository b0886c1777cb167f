"""Root conftest — shared test configuration."""

import os

# Tests never seed demo fixtures or touch a file database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_DEMO_DATA", "false")
