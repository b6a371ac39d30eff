from datetime import date

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from seedtrack.core.deps import get_today
from seedtrack.main import app

# Pinned "today" for every request so derived tasks are deterministic.
TEST_TODAY = date(2024, 5, 20)


@pytest.fixture
def today() -> date:
    return TEST_TODAY


@pytest_asyncio.fixture
async def client(today: date):
    app.dependency_overrides[get_today] = lambda: today

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
