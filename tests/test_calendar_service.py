"""
Tests for the calendar client
"""

import json

import pytest

from models.enums import EventType, ResponseStatus
from services.calendar_service import CalendarService


def event_row(event_id="ev1", **overrides):
    row = {
        "id": event_id,
        "title": "Hearing",
        "event_type": "court_date",
        "start_date": "2025-02-10",
        "start_time": "09:30",
        "priority": "high",
    }
    row.update(overrides)
    return row


class TestCalendarService:

    @pytest.mark.asyncio
    async def test_events_for_month_covers_whole_month(self, api, base_url, httpx_mock):
        httpx_mock.add_response(
            url=f"{base_url}/calendar/events?startDate=2024-02-01&endDate=2024-02-29",
            json={"success": True, "data": [event_row()]},
        )

        events = await CalendarService(api).get_events_for_month(2024, 2)

        assert events[0].event_type == EventType.COURT_DATE

    @pytest.mark.asyncio
    async def test_get_event_returns_attendees(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/calendar/events/ev1", json={"data": {
            "event": event_row(),
            "attendees": [{"id": "at1", "event_id": "ev1", "user_id": "u1", "response_status": "accepted"}],
        }})

        event, attendees = await CalendarService(api).get_event("ev1")

        assert event.title == "Hearing"
        assert attendees[0].response_status == ResponseStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_update_attendee_response(self, api, base_url, httpx_mock):
        httpx_mock.add_response(
            url=f"{base_url}/calendar/events/ev1/attendees/at1/response", method="PUT", json={"success": True}
        )

        await CalendarService(api).update_attendee_response("ev1", "at1", "declined")

        assert json.loads(httpx_mock.get_request().content) == {"responseStatus": "declined"}

    @pytest.mark.asyncio
    async def test_invalid_attendee_response(self, api):
        with pytest.raises(ValueError):
            await CalendarService(api).update_attendee_response("ev1", "at1", "maybe")

    @pytest.mark.asyncio
    async def test_upcoming_events(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/calendar/upcoming?days=14", json={"data": []})

        assert await CalendarService(api).get_upcoming_events(14) == []

    @pytest.mark.parametrize("start,end,expected", [
        ("14:30", "16:00", "2:30 PM - 4:00 PM"),
        ("00:15:00", "12:00:00", "12:15 AM - 12:00 PM"),
    ])
    def test_format_event_time(self, start, end, expected):
        assert CalendarService.format_event_time(start, end) == expected

    def test_display_helpers(self):
        assert CalendarService.get_event_type_color("court_date") == "bg-red-100 text-red-800"
        assert CalendarService.get_event_type_label("client_meeting") == "Client Meeting"
        assert CalendarService.get_priority_color("low") == "bg-green-100 text-green-800"
