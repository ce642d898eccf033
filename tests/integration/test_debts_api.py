"""
Integration tests for the debt API endpoints.

These tests verify:
1. POST /v1/debts - Creating debts with a defaulted balance
2. GET /v1/debts/summary - Totals, percentage paid and the upcoming window
3. POST /v1/debts/{debt_id}/payments - Payments reduce the balance
4. Per-user isolation and deletion
"""

from uuid import uuid4

import pytest
from httpx import AsyncClient


async def create_debt(client: AsyncClient, headers: dict, **overrides) -> dict:
    payload = {
        "name": "Maybank Visa",
        "total_amount": "1000.00",
        "due_day": 12,
        "category": "credit_card",
        "minimum_payment": "50.00",
    }
    payload.update(overrides)

    response = await client.post("/v1/debts", json=payload, headers=headers)
    assert response.status_code == 201
    return response.json()


# =============================================================================
# POST /v1/debts Tests
# =============================================================================

class TestCreateDebt:

    @pytest.mark.asyncio
    async def test_balance_defaults_to_total(
        self,
        client: AsyncClient,
        user_headers: dict,
    ):
        data = await create_debt(client, user_headers)

        assert data["current_balance"] == "1000.00"
        assert data["amount_paid"] == "0.00"
        assert data["balance_display"] == "RM 1,000.00"
        assert data["category"] == "credit_card"

    @pytest.mark.asyncio
    async def test_next_due_date_rolls_into_next_month(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
    ):
        """Due day 5 has passed on March 10, so the next one is April 5."""
        response = await client.post(
            "/v1/debts",
            json={"name": "PTPTN", "total_amount": "8000.00", "due_day": 5},
            headers=user_headers,
            params=as_of_params,
        )

        assert response.status_code == 201
        assert response.json()["next_due_date"] == "2025-04-05"

    @pytest.mark.asyncio
    async def test_rejects_invalid_due_day(self, client: AsyncClient, user_headers: dict):
        response = await client.post(
            "/v1/debts",
            json={"name": "Loan", "total_amount": "100.00", "due_day": 32},
            headers=user_headers,
        )

        assert response.status_code == 422


# =============================================================================
# GET /v1/debts/summary Tests
# =============================================================================

class TestDebtSummary:

    @pytest.mark.asyncio
    async def test_summary_totals(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
    ):
        """1500 borrowed with 1000 outstanding is 33.3% paid."""
        await create_debt(client, user_headers, total_amount="1000.00", current_balance="600.00", due_day=12)
        await create_debt(
            client,
            user_headers,
            name="SPayLater",
            total_amount="500.00",
            current_balance="400.00",
            due_day=25,
            minimum_payment="40.00",
        )

        response = await client.get("/v1/debts/summary", headers=user_headers, params=as_of_params)

        assert response.status_code == 200

        data = response.json()
        assert data["total_debt"] == "1000.00"
        assert data["total_original"] == "1500.00"
        assert data["total_paid"] == "500.00"
        assert data["percentage_paid"] == "33.3"
        assert data["debt_count"] == 2
        assert data["window_days"] == 15

        upcoming = data["upcoming"]
        assert [item["due_day"] for item in upcoming] == [12, 25]
        assert upcoming[0]["days_until"] == 2
        assert upcoming[1]["days_until"] == 15
        assert data["total_upcoming"] == "90.00"

    @pytest.mark.asyncio
    async def test_summary_window_crosses_month_end(
        self,
        client: AsyncClient,
        user_headers: dict,
    ):
        """On March 25 a debt due on the 3rd is nine days away."""
        await create_debt(client, user_headers, due_day=3)

        response = await client.get(
            "/v1/debts/summary",
            headers=user_headers,
            params={"as_of": "2025-03-25"},
        )

        upcoming = response.json()["upcoming"]
        assert len(upcoming) == 1
        assert upcoming[0]["due_date"] == "2025-04-03"
        assert upcoming[0]["days_until"] == 9

    @pytest.mark.asyncio
    async def test_summary_custom_window(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
    ):
        await create_debt(client, user_headers, due_day=25)

        response = await client.get(
            "/v1/debts/summary",
            headers=user_headers,
            params={**as_of_params, "window_days": 5},
        )

        assert response.json()["upcoming"] == []

    @pytest.mark.asyncio
    async def test_empty_summary(self, client: AsyncClient, user_headers: dict):
        response = await client.get("/v1/debts/summary", headers=user_headers)

        data = response.json()
        assert data["total_debt"] == "0.00"
        assert data["percentage_paid"] == "0.0"
        assert data["debt_count"] == 0


# =============================================================================
# Payment Tests
# =============================================================================

class TestDebtPayments:

    @pytest.mark.asyncio
    async def test_payment_reduces_balance(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
    ):
        debt = await create_debt(client, user_headers)

        response = await client.post(
            f"/v1/debts/{debt['debt_id']}/payments",
            json={"amount": "250.00", "notes": "March"},
            headers=user_headers,
            params=as_of_params,
        )

        assert response.status_code == 201

        data = response.json()
        assert data["debt"]["current_balance"] == "750.00"
        assert data["debt"]["percentage_paid"] == "25.0"
        assert data["payment"]["amount"] == "250.00"
        assert data["payment"]["payment_date"] == "2025-03-10"

    @pytest.mark.asyncio
    async def test_overpayment_floors_balance_at_zero(
        self,
        client: AsyncClient,
        user_headers: dict,
    ):
        debt = await create_debt(client, user_headers, current_balance="100.00")

        response = await client.post(
            f"/v1/debts/{debt['debt_id']}/payments",
            json={"amount": "150.00"},
            headers=user_headers,
        )

        assert response.json()["debt"]["current_balance"] == "0.00"

    @pytest.mark.asyncio
    async def test_list_payments_newest_first(
        self,
        client: AsyncClient,
        user_headers: dict,
    ):
        debt = await create_debt(client, user_headers)
        for payment_date in ("2025-01-12", "2025-02-12"):
            await client.post(
                f"/v1/debts/{debt['debt_id']}/payments",
                json={"amount": "100.00", "payment_date": payment_date},
                headers=user_headers,
            )

        response = await client.get(f"/v1/debts/{debt['debt_id']}/payments", headers=user_headers)

        assert response.status_code == 200
        assert [p["payment_date"] for p in response.json()] == ["2025-02-12", "2025-01-12"]

    @pytest.mark.asyncio
    async def test_payment_on_unknown_debt(self, client: AsyncClient, user_headers: dict):
        response = await client.post(
            f"/v1/debts/{uuid4()}/payments",
            json={"amount": "10.00"},
            headers=user_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"] == "DEBT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_rejects_non_positive_payment(self, client: AsyncClient, user_headers: dict):
        debt = await create_debt(client, user_headers)

        response = await client.post(
            f"/v1/debts/{debt['debt_id']}/payments",
            json={"amount": "0"},
            headers=user_headers,
        )

        assert response.status_code == 422


# =============================================================================
# Isolation and Deletion Tests
# =============================================================================

class TestDebtOwnership:

    @pytest.mark.asyncio
    async def test_other_user_cannot_read_debt(
        self,
        client: AsyncClient,
        user_headers: dict,
        other_user_headers: dict,
    ):
        debt = await create_debt(client, user_headers)

        response = await client.get(f"/v1/debts/{debt['debt_id']}", headers=other_user_headers)
        assert response.status_code == 404

        response = await client.get(f"/v1/debts/{debt['debt_id']}/payments", headers=other_user_headers)
        assert response.status_code == 404

        response = await client.get("/v1/debts", headers=other_user_headers)
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_delete_debt_with_payments(self, client: AsyncClient, user_headers: dict):
        debt = await create_debt(client, user_headers)
        await client.post(
            f"/v1/debts/{debt['debt_id']}/payments",
            json={"amount": "10.00"},
            headers=user_headers,
        )

        response = await client.delete(f"/v1/debts/{debt['debt_id']}", headers=user_headers)
        assert response.status_code == 204

        response = await client.get(f"/v1/debts/{debt['debt_id']}", headers=user_headers)
        assert response.status_code == 404
