"""
Integration tests for the BNPL API endpoints.

These tests verify:
1. POST /v1/bnpl - Create scalar, generated and explicit-schedule plans
2. GET /v1/bnpl, /v1/bnpl/summary, /v1/bnpl/{plan_id}
3. Paying installments and scalar payments
4. Per-user isolation and error mapping
"""

from uuid import uuid4

import pytest
from httpx import AsyncClient


# =============================================================================
# POST /v1/bnpl Tests
# =============================================================================

class TestCreatePlan:
    """Tests for POST /v1/bnpl endpoint."""

    @pytest.mark.asyncio
    async def test_create_scalar_plan(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
        scalar_plan_request: dict,
    ):
        """1200 over 12 with 3 paid leaves 900 and 25% progress."""
        response = await client.post(
            "/v1/bnpl", json=scalar_plan_request, headers=user_headers, params=as_of_params
        )

        assert response.status_code == 201

        data = response.json()
        assert data["remaining_balance"] == "900.00"
        assert data["remaining_display"] == "RM 900.00"
        assert data["progress_percent"] == 25
        assert data["installments_paid"] == 3
        assert data["installments_remaining"] == 9
        assert data["status"] == "active"
        assert data["due"]["label"] == "Due in 2 days"
        assert data["is_due_soon"] is True
        assert data["has_schedule"] is False
        assert data["installments"] == []

    @pytest.mark.asyncio
    async def test_create_schedule_plan(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
        schedule_plan_request: dict,
    ):
        response = await client.post(
            "/v1/bnpl", json=schedule_plan_request, headers=user_headers, params=as_of_params
        )

        assert response.status_code == 201

        data = response.json()
        assert data["has_schedule"] is True
        assert data["installments_total"] == 5
        assert data["installments_paid"] == 2
        assert data["remaining_balance"] == "300.00"
        assert data["progress_percent"] == 40
        assert data["next_due_date"] == "2025-03-10"
        assert data["due"]["state"] == "due_today"
        assert data["installment_amount"] == "100.00"

    @pytest.mark.asyncio
    async def test_create_generated_schedule(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
    ):
        """An even split hands the spare cent to the first installment."""
        response = await client.post(
            "/v1/bnpl",
            json={
                "merchant": "Grab PayLater",
                "total_amount": "100.00",
                "installments_total": 3,
                "next_due_date": "2025-01-31",
                "generate_schedule": True,
            },
            headers=user_headers,
            params=as_of_params,
        )

        assert response.status_code == 201

        installments = response.json()["installments"]
        assert [inst["amount"] for inst in installments] == ["33.34", "33.33", "33.33"]
        assert [inst["due_date"] for inst in installments] == [
            "2025-01-31",
            "2025-02-28",
            "2025-03-31",
        ]

    @pytest.mark.asyncio
    async def test_create_schedule_sum_mismatch(
        self,
        client: AsyncClient,
        user_headers: dict,
        schedule_plan_request: dict,
    ):
        """A schedule more than 0.05 away from the total is rejected."""
        schedule_plan_request["total_amount"] = "510.00"

        response = await client.post("/v1/bnpl", json=schedule_plan_request, headers=user_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_REQUEST"

    @pytest.mark.asyncio
    async def test_create_schedule_gap_in_sequence(
        self,
        client: AsyncClient,
        user_headers: dict,
        schedule_plan_request: dict,
    ):
        schedule_plan_request["schedule"][4]["sequence"] = 7

        response = await client.post("/v1/bnpl", json=schedule_plan_request, headers=user_headers)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_rejects_non_positive_total(
        self,
        client: AsyncClient,
        user_headers: dict,
        scalar_plan_request: dict,
    ):
        scalar_plan_request["total_amount"] = "0"

        response = await client.post("/v1/bnpl", json=scalar_plan_request, headers=user_headers)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_requires_count_without_schedule(
        self,
        client: AsyncClient,
        user_headers: dict,
    ):
        response = await client.post(
            "/v1/bnpl",
            json={"merchant": "Shopee", "total_amount": "100.00"},
            headers=user_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_without_user_header(
        self,
        client: AsyncClient,
        scalar_plan_request: dict,
    ):
        response = await client.post("/v1/bnpl", json=scalar_plan_request)

        assert response.status_code == 401

        data = response.json()
        assert data["error"] == "MISSING_USER_ID"
        assert "request_id" in data


# =============================================================================
# Read Endpoint Tests
# =============================================================================

class TestReadPlans:

    @pytest.mark.asyncio
    async def test_get_plan(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
        scalar_plan_request: dict,
    ):
        created = await client.post("/v1/bnpl", json=scalar_plan_request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.get(f"/v1/bnpl/{plan_id}", headers=user_headers, params=as_of_params)

        assert response.status_code == 200
        assert response.json()["plan_id"] == plan_id
        assert response.json()["merchant"] == "Shopee"

    @pytest.mark.asyncio
    async def test_get_plan_not_found(self, client: AsyncClient, user_headers: dict):
        response = await client.get(f"/v1/bnpl/{uuid4()}", headers=user_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "PLAN_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_get_plan_of_other_user_is_not_found(
        self,
        client: AsyncClient,
        user_headers: dict,
        other_user_headers: dict,
        scalar_plan_request: dict,
    ):
        created = await client.post("/v1/bnpl", json=scalar_plan_request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.get(f"/v1/bnpl/{plan_id}", headers=other_user_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_list_plans_scoped_to_user(
        self,
        client: AsyncClient,
        user_headers: dict,
        other_user_headers: dict,
        scalar_plan_request: dict,
        schedule_plan_request: dict,
    ):
        await client.post("/v1/bnpl", json=scalar_plan_request, headers=user_headers)
        await client.post("/v1/bnpl", json=schedule_plan_request, headers=user_headers)
        await client.post("/v1/bnpl", json=scalar_plan_request, headers=other_user_headers)

        response = await client.get("/v1/bnpl", headers=user_headers)

        assert response.status_code == 200
        plans = response.json()
        assert len(plans) == 2
        # Soonest due first
        assert [plan["merchant"] for plan in plans] == ["Atome", "Shopee"]

    @pytest.mark.asyncio
    async def test_summary(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
        scalar_plan_request: dict,
        schedule_plan_request: dict,
    ):
        await client.post("/v1/bnpl", json=scalar_plan_request, headers=user_headers)
        await client.post("/v1/bnpl", json=schedule_plan_request, headers=user_headers)

        response = await client.get("/v1/bnpl/summary", headers=user_headers, params=as_of_params)

        assert response.status_code == 200

        data = response.json()
        assert data["plan_count"] == 2
        assert data["active_count"] == 2
        assert data["due_soon_count"] == 2
        assert data["total_remaining"] == "1200.00"
        assert data["monthly_commitment"] == "200.00"
        assert data["total_remaining_display"] == "RM 1,200.00"


# =============================================================================
# Payment Tests
# =============================================================================

class TestPayments:

    @pytest.mark.asyncio
    async def test_pay_installment(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
        schedule_plan_request: dict,
    ):
        created = await client.post("/v1/bnpl", json=schedule_plan_request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.post(
            f"/v1/bnpl/{plan_id}/installments/3/pay", headers=user_headers, params=as_of_params
        )

        assert response.status_code == 200

        data = response.json()
        assert data["installments_paid"] == 3
        assert data["remaining_balance"] == "200.00"
        assert data["next_due_date"] == "2025-04-10"
        assert data["installments"][2]["is_paid"] is True

        reloaded = await client.get(f"/v1/bnpl/{plan_id}", headers=user_headers)
        assert reloaded.json()["installments_paid"] == 3

    @pytest.mark.asyncio
    async def test_pay_installment_twice_conflicts(
        self,
        client: AsyncClient,
        user_headers: dict,
        schedule_plan_request: dict,
    ):
        created = await client.post("/v1/bnpl", json=schedule_plan_request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.post(f"/v1/bnpl/{plan_id}/installments/1/pay", headers=user_headers)

        assert response.status_code == 409
        assert response.json()["error"] == "INSTALLMENT_ALREADY_PAID"

    @pytest.mark.asyncio
    async def test_pay_unknown_installment(
        self,
        client: AsyncClient,
        user_headers: dict,
        schedule_plan_request: dict,
    ):
        created = await client.post("/v1/bnpl", json=schedule_plan_request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.post(f"/v1/bnpl/{plan_id}/installments/9/pay", headers=user_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "INSTALLMENT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_paying_last_installment_completes_plan(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
        schedule_plan_request: dict,
    ):
        created = await client.post("/v1/bnpl", json=schedule_plan_request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        for sequence in (3, 4, 5):
            response = await client.post(
                f"/v1/bnpl/{plan_id}/installments/{sequence}/pay",
                headers=user_headers,
                params=as_of_params,
            )

        data = response.json()
        assert data["status"] == "completed"
        assert data["progress_percent"] == 100
        assert data["remaining_balance"] == "0.00"
        assert data["next_due_date"] is None
        assert data["due"]["label"] == "Completed"

    @pytest.mark.asyncio
    async def test_scalar_payment_advances_due_date(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
        scalar_plan_request: dict,
    ):
        created = await client.post("/v1/bnpl", json=scalar_plan_request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.post(f"/v1/bnpl/{plan_id}/pay", headers=user_headers, params=as_of_params)

        assert response.status_code == 200

        data = response.json()
        assert data["installments_paid"] == 4
        assert data["remaining_balance"] == "800.00"
        assert data["next_due_date"] == "2025-04-12"

    @pytest.mark.asyncio
    async def test_scalar_payments_return_to_month_end(
        self,
        client: AsyncClient,
        user_headers: dict,
        as_of_params: dict,
    ):
        """A plan due on the 31st lands on 28 Feb and then back on 31 Mar."""
        request = {
            "merchant": "Grab PayLater",
            "total_amount": "400.00",
            "installments_total": 4,
            "next_due_date": "2025-01-31",
        }
        created = await client.post("/v1/bnpl", json=request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        first = await client.post(f"/v1/bnpl/{plan_id}/pay", headers=user_headers, params=as_of_params)
        assert first.json()["next_due_date"] == "2025-02-28"

        second = await client.post(f"/v1/bnpl/{plan_id}/pay", headers=user_headers, params=as_of_params)
        assert second.status_code == 200
        assert second.json()["next_due_date"] == "2025-03-31"

        reloaded = await client.get(f"/v1/bnpl/{plan_id}", headers=user_headers, params=as_of_params)
        assert reloaded.json()["next_due_date"] == "2025-03-31"

    @pytest.mark.asyncio
    async def test_paying_undated_installment_advances_due_date(
        self,
        client: AsyncClient,
        user_headers: dict,
    ):
        """Paying the first of an undated schedule moves the plan off its old date."""
        request = {
            "merchant": "SPayLater",
            "total_amount": "200.00",
            "next_due_date": "2025-03-01",
            "schedule": [
                {"sequence": 1, "amount": "100.00"},
                {"sequence": 2, "amount": "100.00"},
            ],
        }
        created = await client.post("/v1/bnpl", json=request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.post(
            f"/v1/bnpl/{plan_id}/installments/1/pay",
            headers=user_headers,
            params={"as_of": "2025-03-05"},
        )

        assert response.status_code == 200

        data = response.json()
        assert data["next_due_date"] == "2025-04-01"
        assert data["status"] == "active"
        assert data["due"]["state"] == "due_in_days"

    @pytest.mark.asyncio
    async def test_paying_later_undated_installment_keeps_due_date(
        self,
        client: AsyncClient,
        user_headers: dict,
    ):
        request = {
            "merchant": "SPayLater",
            "total_amount": "200.00",
            "next_due_date": "2025-03-01",
            "schedule": [
                {"sequence": 1, "amount": "100.00"},
                {"sequence": 2, "amount": "100.00"},
            ],
        }
        created = await client.post("/v1/bnpl", json=request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.post(f"/v1/bnpl/{plan_id}/installments/2/pay", headers=user_headers)

        assert response.json()["next_due_date"] == "2025-03-01"

    @pytest.mark.asyncio
    async def test_scalar_payment_on_completed_plan(
        self,
        client: AsyncClient,
        user_headers: dict,
        scalar_plan_request: dict,
    ):
        scalar_plan_request["installments_paid"] = 12
        created = await client.post("/v1/bnpl", json=scalar_plan_request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.post(f"/v1/bnpl/{plan_id}/pay", headers=user_headers)

        assert response.status_code == 409
        assert response.json()["error"] == "PLAN_COMPLETED"

    @pytest.mark.asyncio
    async def test_scalar_payment_on_schedule_plan(
        self,
        client: AsyncClient,
        user_headers: dict,
        schedule_plan_request: dict,
    ):
        created = await client.post("/v1/bnpl", json=schedule_plan_request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.post(f"/v1/bnpl/{plan_id}/pay", headers=user_headers)

        assert response.status_code == 409
        assert response.json()["error"] == "PLAN_HAS_SCHEDULE"


# =============================================================================
# DELETE /v1/bnpl/{plan_id} Tests
# =============================================================================

class TestDeletePlan:

    @pytest.mark.asyncio
    async def test_delete_plan(
        self,
        client: AsyncClient,
        user_headers: dict,
        schedule_plan_request: dict,
    ):
        created = await client.post("/v1/bnpl", json=schedule_plan_request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.delete(f"/v1/bnpl/{plan_id}", headers=user_headers)
        assert response.status_code == 204

        response = await client.get(f"/v1/bnpl/{plan_id}", headers=user_headers)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_other_users_plan(
        self,
        client: AsyncClient,
        user_headers: dict,
        other_user_headers: dict,
        scalar_plan_request: dict,
    ):
        created = await client.post("/v1/bnpl", json=scalar_plan_request, headers=user_headers)
        plan_id = created.json()["plan_id"]

        response = await client.delete(f"/v1/bnpl/{plan_id}", headers=other_user_headers)
        assert response.status_code == 404

        response = await client.get(f"/v1/bnpl/{plan_id}", headers=user_headers)
        assert response.status_code == 200
