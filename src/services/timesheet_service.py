"""
Timesheet service
"""

from typing import List, Optional

from models.calendar import CreateTimesheetEntry, TimesheetEntry
from services.base_service import ApiBoundService, Payload, to_payload

class TimesheetService(ApiBoundService):

    async def get_entries(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> List[TimesheetEntry]:
        payload = await self.api.get("/timesheet", params={"startDate": start_date, "endDate": end_date})
        return [TimesheetEntry.model_validate(row) for row in payload or []]

    async def create_entry(self, data: Payload) -> TimesheetEntry:
        body = to_payload(CreateTimesheetEntry.model_validate(to_payload(data)))
        return TimesheetEntry.model_validate(await self.api.post("/timesheet", body))

# Global service instance
_timesheet_service: Optional[TimesheetService] = None

def get_timesheet_service() -> TimesheetService:
    """Get the global timesheet service instance"""
    global _timesheet_service
    if _timesheet_service is None:
        _timesheet_service = TimesheetService()
    return _timesheet_service
