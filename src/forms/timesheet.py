"""
Time entry form
"""

from datetime import date
from typing import ClassVar, Dict, Tuple

from pydantic import Field

from forms.base import BaseForm
from models.calendar import CreateTimesheetEntry, TimesheetEntry
from models.enums import TimesheetCategory
from services.timesheet_service import TimesheetService


def hours_between(start_time: str, end_time: str) -> float:
    """'09:00' -> '10:30' is 1.5; negative spans and unparseable times give 0"""
    try:
        start_hour, start_minute = (int(part) for part in start_time.split(":")[:2])
        end_hour, end_minute = (int(part) for part in end_time.split(":")[:2])
    except ValueError:
        return 0
    minutes = max(0, (end_hour * 60 + end_minute) - (start_hour * 60 + start_minute))
    return round(minutes / 60, 2)


class TimeEntryForm(BaseForm):
    action: ClassVar[str] = "create_time_entry"
    failure_message: ClassVar[str] = "Failed to save time entry"
    # Date, times and category carry over to the next entry
    keep_on_reset: ClassVar[Tuple[str, ...]] = ("entry_date", "start_time", "end_time", "category")

    entry_date: str = Field(default_factory=lambda: date.today().isoformat())
    start_time: str = "09:00"
    end_time: str = "10:00"
    description: str = ""
    category: TimesheetCategory = TimesheetCategory.CASE_WORK
    case_id: str = ""
    contract_id: str = ""

    @property
    def computed_hours(self) -> float:
        return hours_between(self.start_time, self.end_time)

    def validation_errors(self) -> Dict[str, str]:
        if not self.entry_date:
            return {"entry_date": "Entry date is required"}
        return {}

    def build_entry(self) -> CreateTimesheetEntry:
        return CreateTimesheetEntry(
            entry_date=self.entry_date,
            start_time=self.start_time,
            end_time=self.end_time,
            description=self.description or None,
            category=self.category,
            case_id=self.case_id or None,
            contract_id=self.contract_id or None,
            hours=self.computed_hours,
        )

    async def perform(self) -> TimesheetEntry:
        return await TimesheetService(self._api).create_entry(self.build_entry())
