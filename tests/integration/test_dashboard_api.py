"""Integration tests for GET /v1/dashboard."""

import pytest
from httpx import AsyncClient


class TestDashboard:

    @pytest.mark.asyncio
    async def test_empty_dashboard(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
    ):
        response = await client.get("/v1/dashboard", headers=user_headers, params=as_of_params)

        assert response.status_code == 200

        data = response.json()
        assert data["as_of"] == "2025-03-10"
        assert data["debts"]["debt_count"] == 0
        assert data["bnpl"]["plan_count"] == 0
        assert data["ious"]["pending_count"] == 0
        assert data["prayers"]["total"] == 5
        assert data["spending"]["total"] == "0.00"

    @pytest.mark.asyncio
    async def test_dashboard_combines_every_area(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
        scalar_plan_request: dict,
    ):
        await client.post("/v1/bnpl", json=scalar_plan_request, headers=user_headers)
        await client.post(
            "/v1/debts",
            json={"name": "Car loan", "total_amount": "20000.00", "current_balance": "15000.00", "due_day": 15},
            headers=user_headers,
        )
        await client.post(
            "/v1/ious",
            json={"friend_name": "Ali", "amount": "20.00", "direction": "i_owe_them"},
            headers=user_headers,
        )
        await client.put(
            "/v1/ibadah/prayers",
            json={"prayer_name": "subuh"},
            headers=user_headers,
            params=as_of_params,
        )
        await client.post(
            "/v1/expenses",
            json={"amount": "15.00", "category": "food"},
            headers=user_headers,
            params=as_of_params,
        )

        response = await client.get("/v1/dashboard", headers=user_headers, params=as_of_params)

        data = response.json()
        assert data["bnpl"]["total_remaining"] == "900.00"
        assert data["debts"]["total_debt"] == "15000.00"
        assert data["debts"]["percentage_paid"] == "25.0"
        assert data["ious"]["net_position"] == "-20.00"
        assert data["ious"]["net_display"] == "-RM 20.00"
        assert data["prayers"]["completed_count"] == 1
        assert data["spending"]["total"] == "15.00"

    @pytest.mark.asyncio
    async def test_requires_user(self, client: AsyncClient):
        response = await client.get("/v1/dashboard")

        assert response.status_code == 401
