"""Shared test fixtures.

Loads .env / .env.test, keeps storage configuration isolated between
tests and provides the HTTP client used by integration tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, AsyncIterator, Generator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

from bmi_tracker.infrastructure.persistence.key_value_store_factory import (
    reset_key_value_store,
)

# Load .env first (default environment variables)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

# Load .env.test (overrides .env values)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


_STORAGE_ENV = [
    "REPOSITORY_BACKEND",
    "BMI_STORAGE_PATH",
    "BMI_STORAGE_KEY",
    "BMI_STRICT_VALIDATION",
    "MONGODB_URI",
    "MONGODB_USER",
    "MONGODB_PASSWORD",
    "MONGODB_DATABASE",
]


@pytest.fixture(autouse=True)
def _isolate_storage_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear storage variables and the store singleton around each test.

    Tests needing a specific backend set it with monkeypatch.setenv.
    """
    for name in _STORAGE_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_key_value_store()
    yield
    reset_key_value_store()


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the FastAPI app (no network)."""
    from bmi_tracker.app import app

    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
