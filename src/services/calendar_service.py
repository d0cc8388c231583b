"""
Calendar service - events, attendees and display helpers
"""

import calendar
import logging
from typing import List, Optional, Tuple, Union

from models.calendar import CalendarEvent, EventAttendee
from models.enums import ResponseStatus
from services.api_service import unwrap
from services.base_service import ApiBoundService, Payload, to_payload
from utils.helpers import badge, humanize_label

logger = logging.getLogger(__name__)

EVENT_TYPE_COLORS = {
    "court_date": "red",
    "deadline": "yellow",
    "meeting": "green",
    "client_meeting": "blue",
    "internal_meeting": "purple",
}

PRIORITY_COLORS = {
    "high": "red",
    "medium": "yellow",
    "low": "green",
}

class CalendarService(ApiBoundService):
    """Client for /calendar; every response is a {"data": ...} envelope"""

    async def get_events(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> List[CalendarEvent]:
        payload = await self.api.get("/calendar/events", params={"startDate": start_date, "endDate": end_date})
        return [CalendarEvent.model_validate(row) for row in unwrap(payload) or []]

    async def get_event(self, event_id: str) -> Tuple[CalendarEvent, List[EventAttendee]]:
        """Event with its attendee list"""
        data = unwrap(await self.api.get(f"/calendar/events/{event_id}"))
        event = CalendarEvent.model_validate(data["event"])
        attendees = [EventAttendee.model_validate(row) for row in data.get("attendees") or []]
        return event, attendees

    async def create_event(self, data: Payload) -> CalendarEvent:
        body = to_payload(data)
        logger.info(f"Creating calendar event: {body.get('title')}")
        return CalendarEvent.model_validate(unwrap(await self.api.post("/calendar/events", body)))

    async def update_event(self, event_id: str, data: Payload) -> CalendarEvent:
        payload = await self.api.put(f"/calendar/events/{event_id}", to_payload(data))
        return CalendarEvent.model_validate(unwrap(payload))

    async def delete_event(self, event_id: str) -> None:
        await self.api.delete(f"/calendar/events/{event_id}")

    async def update_attendee_response(
        self,
        event_id: str,
        attendee_id: str,
        response_status: Union[ResponseStatus, str]
    ) -> None:
        await self.api.put(
            f"/calendar/events/{event_id}/attendees/{attendee_id}/response",
            {"responseStatus": ResponseStatus(response_status).value}
        )

    async def get_upcoming_events(self, days: int = 7) -> List[CalendarEvent]:
        payload = await self.api.get("/calendar/upcoming", params={"days": days})
        return [CalendarEvent.model_validate(row) for row in unwrap(payload) or []]

    async def get_events_for_month(self, year: int, month: int) -> List[CalendarEvent]:
        last_day = calendar.monthrange(year, month)[1]
        start_date = f"{year}-{month:02d}-01"
        end_date = f"{year}-{month:02d}-{last_day:02d}"
        return await self.get_events(start_date, end_date)

    async def get_events_for_date_range(self, start_date: str, end_date: str) -> List[CalendarEvent]:
        return await self.get_events(start_date, end_date)

    @staticmethod
    def format_event_time(start_time: str, end_time: str) -> str:
        """('14:30', '16:00') -> '2:30 PM - 4:00 PM'"""
        def format_time(value: str) -> str:
            hours, minutes = value.split(":")[:2]
            hour = int(hours)
            suffix = "PM" if hour >= 12 else "AM"
            return f"{hour % 12 or 12}:{minutes} {suffix}"

        return f"{format_time(start_time)} - {format_time(end_time)}"

    @staticmethod
    def get_event_type_color(event_type: str) -> str:
        return badge(EVENT_TYPE_COLORS.get(event_type, "gray"))

    @staticmethod
    def get_event_type_label(event_type: str) -> str:
        return humanize_label(event_type)

    @staticmethod
    def get_priority_color(priority: str) -> str:
        return badge(PRIORITY_COLORS.get(priority, "gray"))

# Global service instance
_calendar_service: Optional[CalendarService] = None

def get_calendar_service() -> CalendarService:
    """Get the global calendar service instance"""
    global _calendar_service
    if _calendar_service is None:
        _calendar_service = CalendarService()
    return _calendar_service
