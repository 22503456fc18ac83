"""Shared test configuration.

Points the application at a throwaway SQLite database before any
giftshop module reads its settings.
"""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="giftshop-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_DB_DIR}/catalog.db")
os.environ.setdefault("LOG_JSON", "false")
