"""Shared test fixtures."""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from src.main import create_app  # noqa: E402
from src.pb_ledger.infrastructure.memory_ledger import InMemoryLedger  # noqa: E402
from tests.helpers import OWNER  # noqa: E402


@pytest.fixture
def ledger() -> InMemoryLedger:
    return InMemoryLedger(owner_id=OWNER)


@pytest.fixture
async def client(ledger: InMemoryLedger) -> AsyncClient:
    """Async HTTP client for a fresh app bound to the ``ledger`` fixture."""
    transport = ASGITransport(app=create_app(ledger))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
