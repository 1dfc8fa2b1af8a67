import os
from typing import Any, Dict, List, Optional

import pytest

# Configure the environment before importing app modules so the module-level
# settings instance picks it up.
os.environ.setdefault("SUPABASE_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")
os.environ.setdefault("LINKEDIN_WEBHOOK_URL", "https://hooks.example.test/linkedin")
os.environ.setdefault("LOG_LEVEL", "WARNING")


class FakeRowSource:
    """In-memory stand-in for the Supabase client.

    ``tables`` maps a table name to its rows, or to an exception that the read
    should raise.
    """

    def __init__(self, tables: Optional[Dict[str, Any]] = None):
        self.tables = tables or {}
        self.calls: List[str] = []

    async def select_all(self, table: str) -> List[Dict[str, Any]]:
        self.calls.append(table)
        value = self.tables.get(table, [])
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def fake_source_factory():
    return FakeRowSource


@pytest.fixture(autouse=True)
def _reset_request_tracker():
    from creation_hub.services.request_state import request_tracker

    request_tracker.reset()
    yield
    request_tracker.reset()
