"""
Calendar and timesheet Pydantic models
"""

from typing import List, Optional
from pydantic import Field
from models.base import Record
from models.enums import (
    EventType, EventStatus, Priority, AttendeeRole, ResponseStatus, TimesheetCategory,
)


class CalendarEvent(Record):
    id: str
    title: str
    description: Optional[str] = None
    event_type: EventType = EventType.OTHER
    start_date: str
    start_time: Optional[str] = None
    end_date: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    is_all_day: bool = False
    priority: Priority = Priority.MEDIUM
    status: EventStatus = EventStatus.SCHEDULED
    created_by: Optional[str] = None
    case_id: Optional[str] = None
    contract_id: Optional[str] = None
    reminder_sent: bool = False
    reminder_sent_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class EventAttendee(Record):
    id: str
    event_id: str
    user_id: Optional[str] = None
    external_name: Optional[str] = None
    external_email: Optional[str] = None
    role: AttendeeRole = AttendeeRole.ATTENDEE
    response_status: ResponseStatus = ResponseStatus.PENDING
    reminder_sent: bool = False
    reminder_sent_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    user_full_name: Optional[str] = None
    user_email: Optional[str] = None


class NewAttendee(Record):
    user_id: Optional[str] = None
    external_name: Optional[str] = None
    external_email: Optional[str] = None
    role: Optional[AttendeeRole] = None


class CreateEventData(Record):
    title: str
    description: Optional[str] = None
    event_type: EventType
    start_date: str
    start_time: str
    end_date: str
    end_time: str
    location: Optional[str] = None
    is_all_day: Optional[bool] = None
    priority: Optional[Priority] = None
    case_id: Optional[str] = None
    contract_id: Optional[str] = None
    attendees: List[NewAttendee] = Field(default_factory=list)


class TimesheetEntry(Record):
    id: str
    user_id: Optional[str] = None
    entry_date: str
    start_time: str
    end_time: str
    description: Optional[str] = None
    category: TimesheetCategory = TimesheetCategory.OTHER
    case_id: Optional[str] = None
    contract_id: Optional[str] = None
    hours: float = 0
    created_at: Optional[str] = None


class CreateTimesheetEntry(Record):
    entry_date: str
    start_time: str
    end_time: str
    description: Optional[str] = None
    category: TimesheetCategory
    case_id: Optional[str] = None
    contract_id: Optional[str] = None
    hours: float
