"""
Unit Tests for BNPL plan request validation.

Validation returns a list of messages rather than raising, so the service
can report every problem with a request at once.
"""

from datetime import date
from decimal import Decimal

from command_center.application.dto import CreatePlanRequest, ScheduleItem

TOLERANCE = Decimal("0.05")


def make_request(**overrides) -> CreatePlanRequest:
    defaults = {
        "user_id": "user_1",
        "merchant": "Shopee",
        "total_amount": Decimal("300.00"),
    }
    defaults.update(overrides)
    return CreatePlanRequest(**defaults)


def make_schedule(*amounts: str) -> list:
    return [
        ScheduleItem(sequence=i + 1, amount=Decimal(amount), due_date=date(2025, i + 1, 10))
        for i, amount in enumerate(amounts)
    ]


class TestScheduleValidation:

    def test_valid_schedule(self):
        request = make_request(schedule=make_schedule("100.00", "100.00", "100.00"))

        assert request.validate(TOLERANCE) == []

    def test_sum_within_tolerance(self):
        request = make_request(schedule=make_schedule("100.00", "100.00", "100.04"))

        assert request.validate(TOLERANCE) == []

    def test_sum_outside_tolerance(self):
        request = make_request(schedule=make_schedule("100.00", "100.00", "100.06"))

        errors = request.validate(TOLERANCE)

        assert len(errors) == 1
        assert "schedule sums to" in errors[0]

    def test_duplicate_sequence(self):
        schedule = [
            ScheduleItem(sequence=1, amount=Decimal("150.00")),
            ScheduleItem(sequence=1, amount=Decimal("150.00")),
        ]

        errors = make_request(schedule=schedule).validate(TOLERANCE)

        assert any("contiguous" in error for error in errors)

    def test_sequence_must_start_at_one(self):
        schedule = [
            ScheduleItem(sequence=2, amount=Decimal("150.00")),
            ScheduleItem(sequence=3, amount=Decimal("150.00")),
        ]

        errors = make_request(schedule=schedule).validate(TOLERANCE)

        assert any("contiguous" in error for error in errors)

    def test_count_must_match_schedule(self):
        request = make_request(
            installments_total=4,
            schedule=make_schedule("100.00", "100.00", "100.00"),
        )

        assert request.validate(TOLERANCE) == ["installments_total must match the schedule length"]


class TestScalarValidation:

    def test_valid_scalar(self):
        request = make_request(installments_total=3, installments_paid=1)

        assert request.validate(TOLERANCE) == []

    def test_count_required(self):
        errors = make_request().validate(TOLERANCE)

        assert errors == ["installments_total is required without an explicit schedule"]

    def test_paid_cannot_exceed_total(self):
        errors = make_request(installments_total=3, installments_paid=4).validate(TOLERANCE)

        assert errors == ["installments_paid cannot exceed installments_total"]

    def test_blank_user(self):
        errors = make_request(user_id="  ", installments_total=3).validate(TOLERANCE)

        assert errors == ["user_id is required"]
