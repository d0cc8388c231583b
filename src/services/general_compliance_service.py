"""
General compliance service - recurring obligations (tax returns, licences, permits ...)

Records are fetched from the backend; everything about *when* a record is
next due is computed client-side from its frequency, due day and due date.
All date helpers take an optional ``today`` so results are reproducible.
"""

import calendar
import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Union

from models.base import FilterOption, build_options
from models.compliance import GeneralComplianceRecord
from models.enums import ComplianceFrequency, ComplianceStatus
from services.api_service import unwrap
from services.base_service import ApiBoundService, Payload, to_payload
from utils.helpers import badge, day_suffix, format_short_date, parse_date

logger = logging.getLogger(__name__)

DUE_SOON_DAYS = 7
OPEN_STATUSES = (ComplianceStatus.ACTIVE, ComplianceStatus.PENDING)

STATUS_COLORS = {
    "active": "green",
    "pending": "yellow",
    "overdue": "red",
    "completed": "blue",
    "expired": "gray",
}

PRIORITY_COLORS = {
    "high": "red",
    "medium": "yellow",
    "low": "green",
}

COMPLIANCE_TYPE_COLORS = {
    "tax_return": "purple",
    "license_renewal": "blue",
    "certification": "green",
    "registration": "indigo",
    "permit": "orange",
    "insurance": "pink",
    "audit": "red",
    "report": "teal",
}

FILTER_KEYS = ("status", "priority", "complianceType", "assignedTo", "departmentId", "dueDateFrom", "dueDateTo")


def _clamped(year: int, month: int, day: int) -> date:
    """date(year, month, day) with day limited to the month's length"""
    return date(year, month, min(max(day, 1), calendar.monthrange(year, month)[1]))


def _add_months(value: date, months: int, day: int) -> date:
    index = value.month - 1 + months
    return _clamped(value.year + index // 12, index % 12 + 1, day)


def _freq(frequency: Union[ComplianceFrequency, str]) -> str:
    return frequency.value if isinstance(frequency, ComplianceFrequency) else frequency


class GeneralComplianceService(ApiBoundService):
    """Client for general compliance records plus due-date logic"""

    async def create_compliance_record(self, data: Payload) -> GeneralComplianceRecord:
        body = to_payload(data)
        logger.info(f"Creating compliance record: {body.get('name')}")
        payload = await self.api.post("/test/general-compliance", body)
        return GeneralComplianceRecord.model_validate(unwrap(payload))

    async def get_compliance_records(self, filters: Optional[Dict[str, Any]] = None) -> List[GeneralComplianceRecord]:
        """
        List records, optionally filtered

        Args:
            filters: any of status, priority, complianceType, assignedTo,
                departmentId, dueDateFrom, dueDateTo

        Returns:
            Matching records
        """
        params = {key: value for key, value in (filters or {}).items() if key in FILTER_KEYS}
        payload = await self.api.get("/test/general-compliance", params=params)
        return [GeneralComplianceRecord.model_validate(row) for row in unwrap(payload) or []]

    async def get_compliance_record_by_id(self, record_id: str) -> GeneralComplianceRecord:
        payload = await self.api.get(f"/general-compliance/{record_id}")
        return GeneralComplianceRecord.model_validate(unwrap(payload))

    async def update_compliance_record(self, record_id: str, data: Payload) -> GeneralComplianceRecord:
        payload = await self.api.put(f"/general-compliance/{record_id}", to_payload(data))
        return GeneralComplianceRecord.model_validate(unwrap(payload))

    async def delete_compliance_record(self, record_id: str) -> None:
        await self.api.delete(f"/general-compliance/{record_id}")

    async def get_overdue_records(self) -> List[GeneralComplianceRecord]:
        payload = await self.api.get("/general-compliance/overdue")
        return [GeneralComplianceRecord.model_validate(row) for row in unwrap(payload) or []]

    async def get_upcoming_due_records(self, days: int = 30) -> List[GeneralComplianceRecord]:
        payload = await self.api.get("/general-compliance/upcoming", params={"days": days})
        return [GeneralComplianceRecord.model_validate(row) for row in unwrap(payload) or []]

    # Options

    @staticmethod
    def get_compliance_type_options() -> List[FilterOption]:
        return build_options([
            ("tax_return", "Tax Return"),
            ("license_renewal", "License Renewal"),
            ("certification", "Certification"),
            ("registration", "Registration"),
            ("permit", "Permit"),
            ("insurance", "Insurance"),
            ("audit", "Audit"),
            ("report", "Report"),
            ("other", "Other"),
        ])

    @staticmethod
    def get_frequency_options() -> List[FilterOption]:
        return build_options([
            ("once", "Once"),
            ("monthly", "Monthly"),
            ("quarterly", "Quarterly"),
            ("annually", "Annually"),
            ("biennially", "Biennially"),
            ("custom", "Custom"),
        ])

    @staticmethod
    def get_status_options() -> List[FilterOption]:
        return build_options([
            ("active", "Active"),
            ("pending", "Pending"),
            ("overdue", "Overdue"),
            ("completed", "Completed"),
            ("expired", "Expired"),
        ])

    @staticmethod
    def get_priority_options() -> List[FilterOption]:
        return build_options([("high", "High"), ("medium", "Medium"), ("low", "Low")])

    # Colours

    @staticmethod
    def get_status_color(status: str) -> str:
        return badge(STATUS_COLORS.get(status, "gray"))

    @staticmethod
    def get_priority_color(priority: str) -> str:
        return badge(PRIORITY_COLORS.get(priority, "gray"))

    @staticmethod
    def get_compliance_type_color(compliance_type: str) -> str:
        return badge(COMPLIANCE_TYPE_COLORS.get(compliance_type, "gray"))

    # Due dates

    @staticmethod
    def calculate_next_due_date(
        frequency: Union[ComplianceFrequency, str],
        due_day: Optional[int] = None,
        current_due_date: Optional[str] = None,
        today: Optional[date] = None
    ) -> date:
        """
        Next occurrence of a compliance obligation.

        - once: the current due date (today when missing)
        - monthly: ``due_day`` this month, or next month once passed
        - quarterly: ``due_day`` (default 1) of the first month of the next
          calendar quarter, rolling into the next year after Q4
        - annually / biennially: the due date's month and day this year,
          pushed 1 / 2 years ahead once passed

        Frequencies without enough data to compute a date yield today.
        """
        today = today or date.today()
        frequency = _freq(frequency)
        current_due = parse_date(current_due_date)

        if frequency == ComplianceFrequency.ONCE.value:
            return current_due or today

        if frequency == ComplianceFrequency.MONTHLY.value and due_day:
            candidate = _clamped(today.year, today.month, due_day)
            if candidate < today:
                candidate = _add_months(today, 1, due_day)
            return candidate

        if frequency == ComplianceFrequency.QUARTERLY.value:
            quarter_start_month = (today.month - 1) // 3 * 3 + 1
            first_of_quarter = date(today.year, quarter_start_month, 1)
            return _add_months(first_of_quarter, 3, due_day or 1)

        years_ahead = {
            ComplianceFrequency.ANNUALLY.value: 1,
            ComplianceFrequency.BIENNIALLY.value: 2,
        }.get(frequency)
        if years_ahead:
            if current_due:
                candidate = _clamped(today.year, current_due.month, current_due.day)
                if candidate < today:
                    candidate = _clamped(today.year + years_ahead, current_due.month, current_due.day)
                return candidate
            return _clamped(today.year + years_ahead, today.month, due_day or 1)

        return today

    @classmethod
    def effective_due_date(cls, record: GeneralComplianceRecord, today: Optional[date] = None) -> Optional[date]:
        """Next due date for recurring records, the stored due date otherwise"""
        if record.frequency != ComplianceFrequency.ONCE:
            return cls.calculate_next_due_date(record.frequency, record.due_day, record.due_date, today)
        return parse_date(record.due_date)

    @classmethod
    def is_overdue(cls, record: GeneralComplianceRecord, today: Optional[date] = None) -> bool:
        today = today or date.today()
        due = cls.effective_due_date(record, today)
        return due is not None and due < today and record.status in OPEN_STATUSES

    @classmethod
    def is_due_soon(cls, record: GeneralComplianceRecord, today: Optional[date] = None) -> bool:
        """Due within the next seven days and still open"""
        today = today or date.today()
        due = cls.effective_due_date(record, today)
        if due is None:
            return False
        return today <= due <= today + timedelta(days=DUE_SOON_DAYS) and record.status in OPEN_STATUSES

    @staticmethod
    def format_due_date(value: Union[str, date]) -> str:
        return format_short_date(value)

    @staticmethod
    def get_days_until_due(value: Union[str, date], today: Optional[date] = None) -> Optional[int]:
        due = parse_date(value)
        if due is None:
            return None
        return (due - (today or date.today())).days

    @classmethod
    def get_days_until_due_for_record(cls, record: GeneralComplianceRecord, today: Optional[date] = None) -> Optional[int]:
        today = today or date.today()
        return cls.get_days_until_due(cls.effective_due_date(record, today), today)

    @classmethod
    def get_due_date_display_text(cls, record: GeneralComplianceRecord) -> str:
        frequency = record.frequency
        if frequency == ComplianceFrequency.MONTHLY and record.due_day:
            return f"Due: {record.due_day}{day_suffix(record.due_day)} of each month"
        if frequency == ComplianceFrequency.QUARTERLY and record.due_day:
            return f"Due: {record.due_day}{day_suffix(record.due_day)} of each quarter"
        if frequency == ComplianceFrequency.ANNUALLY:
            return f"Due: {cls.format_due_date(record.due_date)} annually"
        if frequency == ComplianceFrequency.BIENNIALLY:
            return f"Due: {cls.format_due_date(record.due_date)} biennially"
        return f"Due: {cls.format_due_date(record.due_date)}"

# Global service instance
_general_compliance_service: Optional[GeneralComplianceService] = None

def get_general_compliance_service() -> GeneralComplianceService:
    """Get the global general compliance service instance"""
    global _general_compliance_service
    if _general_compliance_service is None:
        _general_compliance_service = GeneralComplianceService()
    return _general_compliance_service
