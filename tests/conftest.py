import pytest
from httpx import ASGITransport, AsyncClient

from budget_api.main import app
from budget_api.middleware.validation import current_year

TEST_YEAR = 2026


@pytest.fixture
def pinned_year():
    # Pin the budget year lower bound so HTTP tests do not depend on the clock
    app.dependency_overrides[current_year] = lambda: TEST_YEAR
    yield TEST_YEAR
    app.dependency_overrides.pop(current_year, None)


@pytest.fixture
async def client(pinned_year):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
