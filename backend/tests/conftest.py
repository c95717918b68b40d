"""Root conftest — shared test configuration."""

import os

# Importing message_api.main builds the module-level app; keep it off any real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
