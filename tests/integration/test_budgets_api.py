"""
HTTP tests for /api/v1/budgets/validate and /api/v1/budgets/import/validate.

The client fixture pins the year lower bound; tests that need it take pinned_year.
"""

import pytest
from httpx import AsyncClient


VALIDATE_URL = "/api/v1/budgets/validate"
IMPORT_URL = "/api/v1/budgets/import/validate"


# ---------------------------------------------------------------------------
# POST /validate
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_validate_applies_defaults(client: AsyncClient, pinned_year: int):
    response = await client.post(VALIDATE_URL, json={"limit": 500, "month": 6, "year": pinned_year})

    assert response.status_code == 200
    assert response.json() == {
        "category": "Others",
        "currency": "USD",
        "limit": 500,
        "month": 6,
        "year": pinned_year,
    }


@pytest.mark.asyncio
async def test_validate_trims_category(client: AsyncClient, pinned_year: int):
    response = await client.post(
        VALIDATE_URL,
        json={"category": " Food ", "currency": "GBP", "limit": 12.5, "month": 1, "year": pinned_year},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["category"] == "Food"
    assert data["currency"] == "GBP"
    assert data["limit"] == 12.5


@pytest.mark.asyncio
async def test_validate_bad_currency_message(client: AsyncClient, pinned_year: int):
    response = await client.post(
        VALIDATE_URL,
        json={"category": "Food", "currency": "gbp", "limit": 100, "month": 1, "year": pinned_year},
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Currency must be a valid 3-letter currency code (e.g. USD, GBP, JPY)"
    assert error["details"] == [
        {
            "field": "currency",
            "type": "pattern",
            "message": "Currency must be a valid 3-letter currency code (e.g. USD, GBP, JPY)",
        }
    ]


@pytest.mark.asyncio
async def test_validate_reports_every_error(client: AsyncClient):
    response = await client.post(VALIDATE_URL, json={"category": "Travel", "month": 13})

    assert response.status_code == 422
    details = response.json()["error"]["details"]
    assert [d["field"] for d in details] == ["category", "limit", "month", "year"]
    assert [d["type"] for d in details] == ["enum", "required", "range", "required"]


@pytest.mark.asyncio
async def test_validate_year_uses_pinned_lower_bound(client: AsyncClient, pinned_year: int):
    response = await client.post(VALIDATE_URL, json={"limit": 1, "month": 1, "year": pinned_year - 1})

    assert response.status_code == 422
    [detail] = response.json()["error"]["details"]
    assert detail["field"] == "year"
    assert detail["type"] == "range"


@pytest.mark.asyncio
async def test_validate_rejects_non_object_body(client: AsyncClient):
    response = await client.post(VALIDATE_URL, json=[1, 2, 3])

    assert response.status_code == 422
    assert response.json()["error"]["details"][0]["field"] == "value"


@pytest.mark.asyncio
async def test_validate_rejects_invalid_json(client: AsyncClient):
    response = await client.post(
        VALIDATE_URL,
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_JSON"


# ---------------------------------------------------------------------------
# POST /import/validate
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_import_valid_batch(client: AsyncClient):
    response = await client.post(
        IMPORT_URL,
        json={
            "budgets": [
                {"category": "Food", "limit": 500, "currency": "USD"},
                {"category": "Rent", "limit": 1200, "currency": "EUR"},
            ],
            "month": 6,
            "year": 2024,
            "strategy": "replace",
        },
    )

    assert response.status_code == 200
    assert response.json() == {"valid": True, "count": 2}


@pytest.mark.asyncio
async def test_import_invalid_batch(client: AsyncClient):
    response = await client.post(
        IMPORT_URL,
        json={"budgets": [{"category": "Food", "limit": 500}], "month": 0, "year": 2024},
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "IMPORT_VALIDATION_ERROR"
    assert error["errors"] == ["Invalid target month", "Budget 1: Missing currency"]


@pytest.mark.asyncio
async def test_import_body_must_be_object(client: AsyncClient):
    response = await client.post(IMPORT_URL, json=["Food"])

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_import_budgets_not_a_list(client: AsyncClient):
    response = await client.post(IMPORT_URL, json={"budgets": "Food", "month": 6, "year": 2024})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "IMPORT_VALIDATION_ERROR"
    assert error["errors"] == ["Budgets array must not be empty"]


@pytest.mark.asyncio
async def test_import_huge_target_year(client: AsyncClient):
    body = '{"budgets": [{"category": "Food", "limit": 5, "currency": "USD"}], "month": 6, "year": 1' + "0" * 400 + "}"
    response = await client.post(
        IMPORT_URL,
        content=body.encode(),
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 200
    assert response.json() == {"valid": True, "count": 1}


# ---------------------------------------------------------------------------
# Integers beyond float range
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_validate_huge_year(client: AsyncClient):
    body = '{"limit": 1, "month": 1, "year": 1' + "0" * 400 + "}"
    response = await client.post(
        VALIDATE_URL,
        content=body.encode(),
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 200
    assert response.json()["year"] == 10**400


@pytest.mark.asyncio
async def test_validate_huge_limit(client: AsyncClient, pinned_year: int):
    body = '{"limit": 1' + "0" * 400 + ', "month": 1, "year": %d}' % pinned_year
    response = await client.post(
        VALIDATE_URL,
        content=body.encode(),
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
    [detail] = response.json()["error"]["details"]
    assert detail["field"] == "limit"
    assert detail["type"] == "range"
