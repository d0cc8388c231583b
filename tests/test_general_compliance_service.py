"""
Tests for general compliance records and due-date calculation
"""

from datetime import date

import pytest

from models.compliance import GeneralComplianceRecord
from services.general_compliance_service import GeneralComplianceService


def record(**overrides):
    data = {"id": "r1", "name": "VAT return", "dueDate": "2025-03-31", "frequency": "once", "status": "active"}
    data.update(overrides)
    return GeneralComplianceRecord.model_validate(data)


class TestCalculateNextDueDate:

    def test_once_uses_current_due_date(self):
        assert GeneralComplianceService.calculate_next_due_date(
            "once", current_due_date="2025-03-31", today=date(2025, 1, 1)
        ) == date(2025, 3, 31)

    def test_once_without_due_date_is_today(self):
        assert GeneralComplianceService.calculate_next_due_date("once", today=date(2025, 1, 1)) == date(2025, 1, 1)

    def test_monthly_this_month(self):
        assert GeneralComplianceService.calculate_next_due_date(
            "monthly", due_day=20, today=date(2025, 1, 10)
        ) == date(2025, 1, 20)

    def test_monthly_rolls_to_next_month(self):
        assert GeneralComplianceService.calculate_next_due_date(
            "monthly", due_day=5, today=date(2025, 12, 10)
        ) == date(2026, 1, 5)

    def test_monthly_clamps_to_month_length(self):
        assert GeneralComplianceService.calculate_next_due_date(
            "monthly", due_day=31, today=date(2025, 1, 31)
        ) == date(2025, 1, 31)
        assert GeneralComplianceService.calculate_next_due_date(
            "monthly", due_day=30, today=date(2025, 1, 31)
        ) == date(2025, 2, 28)

    def test_monthly_without_due_day_is_today(self):
        assert GeneralComplianceService.calculate_next_due_date("monthly", today=date(2025, 4, 2)) == date(2025, 4, 2)

    @pytest.mark.parametrize("today,expected", [
        (date(2025, 2, 14), date(2025, 4, 15)),
        (date(2025, 6, 30), date(2025, 7, 15)),
        (date(2025, 11, 1), date(2026, 1, 15)),
    ])
    def test_quarterly_next_calendar_quarter(self, today, expected):
        assert GeneralComplianceService.calculate_next_due_date("quarterly", due_day=15, today=today) == expected

    def test_quarterly_defaults_to_first_day(self):
        assert GeneralComplianceService.calculate_next_due_date(
            "quarterly", today=date(2025, 5, 20)
        ) == date(2025, 7, 1)

    def test_annually_this_year_when_not_passed(self):
        assert GeneralComplianceService.calculate_next_due_date(
            "annually", current_due_date="2023-06-30", today=date(2025, 3, 1)
        ) == date(2025, 6, 30)

    def test_annually_next_year_when_passed(self):
        assert GeneralComplianceService.calculate_next_due_date(
            "annually", current_due_date="2023-01-31", today=date(2025, 3, 1)
        ) == date(2026, 1, 31)

    def test_biennially_two_years_ahead(self):
        assert GeneralComplianceService.calculate_next_due_date(
            "biennially", current_due_date="2023-01-31", today=date(2025, 3, 1)
        ) == date(2027, 1, 31)

    def test_leap_day_is_clamped(self):
        assert GeneralComplianceService.calculate_next_due_date(
            "annually", current_due_date="2024-02-29", today=date(2025, 1, 1)
        ) == date(2025, 2, 28)

    def test_custom_is_today(self):
        assert GeneralComplianceService.calculate_next_due_date("custom", today=date(2025, 8, 8)) == date(2025, 8, 8)


class TestDueStatus:

    def test_overdue_once_record(self):
        assert GeneralComplianceService.is_overdue(record(), today=date(2025, 4, 1))
        assert not GeneralComplianceService.is_overdue(record(), today=date(2025, 3, 31))

    def test_closed_records_are_never_overdue(self):
        assert not GeneralComplianceService.is_overdue(record(status="completed"), today=date(2025, 4, 1))

    def test_due_soon_window(self):
        assert GeneralComplianceService.is_due_soon(record(), today=date(2025, 3, 24))
        assert not GeneralComplianceService.is_due_soon(record(), today=date(2025, 3, 23))
        assert not GeneralComplianceService.is_due_soon(record(status="pending"), today=date(2025, 4, 1))

    def test_recurring_record_uses_next_due_date(self):
        monthly = record(frequency="monthly", dueDay=5, dueDate="2024-01-05")

        assert not GeneralComplianceService.is_overdue(monthly, today=date(2025, 3, 10))
        assert GeneralComplianceService.get_days_until_due_for_record(monthly, today=date(2025, 3, 10)) == 26

    def test_days_until_due(self):
        assert GeneralComplianceService.get_days_until_due("2025-03-31", today=date(2025, 3, 21)) == 10
        assert GeneralComplianceService.get_days_until_due("", today=date(2025, 3, 21)) is None

    @pytest.mark.parametrize("overrides,expected", [
        ({"frequency": "monthly", "dueDay": 1}, "Due: 1st of each month"),
        ({"frequency": "quarterly", "dueDay": 12}, "Due: 12th of each quarter"),
        ({"frequency": "quarterly", "dueDay": 22}, "Due: 22nd of each quarter"),
        ({"frequency": "annually"}, "Due: Mar 31, 2025 annually"),
        ({"frequency": "biennially"}, "Due: Mar 31, 2025 biennially"),
        ({}, "Due: Mar 31, 2025"),
    ])
    def test_display_text(self, overrides, expected):
        assert GeneralComplianceService.get_due_date_display_text(record(**overrides)) == expected


class TestGeneralComplianceRequests:

    @pytest.mark.asyncio
    async def test_unknown_filters_are_dropped(self, api, base_url, httpx_mock):
        httpx_mock.add_response(
            url=f"{base_url}/test/general-compliance?status=active&priority=high",
            json={"success": True, "data": [{"id": "r1", "name": "VAT", "dueDate": "2025-03-31"}]},
        )

        records = await GeneralComplianceService(api).get_compliance_records(
            {"status": "active", "priority": "high", "bogus": "x"}
        )

        assert records[0].due_date == "2025-03-31"

    @pytest.mark.asyncio
    async def test_upcoming_records(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/general-compliance/upcoming?days=30", json={"data": []})

        assert await GeneralComplianceService(api).get_upcoming_due_records() == []

    def test_options(self):
        values = [option.value for option in GeneralComplianceService.get_frequency_options()]

        assert values == ["once", "monthly", "quarterly", "annually", "biennially", "custom"]
        assert GeneralComplianceService.get_compliance_type_color("permit") == "bg-orange-100 text-orange-800"

    def test_select_box_labels(self):
        service = GeneralComplianceService
        assert service.get_compliance_type_options()[1].label == "License Renewal"
        assert [o.value for o in service.get_status_options()] == [
            "active", "pending", "overdue", "completed", "expired",
        ]
        assert [o.label for o in service.get_priority_options()] == ["High", "Medium", "Low"]
