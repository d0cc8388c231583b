"""
Compliance runs, surveys, general compliance records and reminders.

The compliance endpoints speak camelCase JSON; these models accept both
the camelCase key and the Python attribute name.
"""

from typing import Any, Dict, List, Optional
from pydantic import Field
from models.base import Record, CamelRecord
from models.enums import (
    ComplianceRunStatus, ComplianceRunFrequency, QuestionType,
    ComplianceType, ComplianceFrequency, ComplianceStatus, Priority,
    ReminderType, ReminderStatus, ConfirmationType,
)


class ComplianceSurvey(Record):
    id: str
    title: str
    description: Optional[str] = None
    department_id: Optional[str] = None
    due_date: Optional[str] = None
    status: ComplianceRunStatus = ComplianceRunStatus.DRAFT
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ComplianceRun(CamelRecord):
    id: str
    title: str
    description: Optional[str] = None
    frequency: ComplianceRunFrequency = ComplianceRunFrequency.ONCE
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    status: ComplianceRunStatus = ComplianceRunStatus.DRAFT
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    # Aggregates computed by the backend query
    created_by_name: Optional[str] = Field(None, alias="created_by_name")
    total_recipients: Optional[int] = Field(None, alias="total_recipients")
    completed_surveys: Optional[int] = Field(None, alias="completed_surveys")


class ComplianceQuestion(CamelRecord):
    id: str
    compliance_run_id: Optional[str] = None
    question_text: str
    question_type: QuestionType = QuestionType.YESNO
    is_required: bool = False
    options: Optional[List[str]] = None
    max_score: Optional[int] = None
    order_index: int = 0
    created_at: Optional[str] = None


class ComplianceRecipient(CamelRecord):
    id: str
    compliance_run_id: Optional[str] = None
    user_id: Optional[str] = None
    department_id: Optional[str] = None
    email_sent: bool = False
    email_sent_at: Optional[str] = None
    survey_completed: bool = False
    survey_completed_at: Optional[str] = None
    survey_link_token: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    user_name: Optional[str] = Field(None, alias="user_name")
    email: Optional[str] = None
    department_name: Optional[str] = Field(None, alias="department_name")


class ComplianceResponse(CamelRecord):
    id: str
    compliance_run_id: Optional[str] = None
    user_id: Optional[str] = None
    question_id: str
    answer: Optional[str] = None
    score: Optional[int] = None
    comment: Optional[str] = None
    created_at: Optional[str] = None


class RunStatistics(CamelRecord):
    total_recipients: int = 0
    completed_surveys: int = 0
    pending_surveys: int = 0
    completion_rate: float = 0


class ComplianceRunDetails(CamelRecord):
    run: ComplianceRun
    questions: List[ComplianceQuestion] = Field(default_factory=list)
    recipients: List[ComplianceRecipient] = Field(default_factory=list)
    statistics: RunStatistics = Field(default_factory=RunStatistics)


class SurveyData(CamelRecord):
    run: ComplianceRun
    questions: List[ComplianceQuestion] = Field(default_factory=list)
    recipient: Optional[ComplianceRecipient] = None


class SurveyAnswer(CamelRecord):
    question_id: str
    answer: Optional[str] = None
    score: Optional[int] = None
    comment: Optional[str] = None


class GeneralComplianceRecord(CamelRecord):
    id: str
    name: str
    description: Optional[str] = None
    compliance_type: ComplianceType = ComplianceType.OTHER
    due_date: str
    due_day: Optional[int] = None
    expiry_date: Optional[str] = None
    renewal_date: Optional[str] = None
    frequency: ComplianceFrequency = ComplianceFrequency.ONCE
    status: ComplianceStatus = ComplianceStatus.ACTIVE
    priority: Priority = Priority.MEDIUM
    assigned_to: Optional[str] = None
    department_id: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    assigned_to_name: Optional[str] = None
    department_name: Optional[str] = None
    created_by_name: Optional[str] = None


class ComplianceReminderRecipient(CamelRecord):
    id: str
    compliance_record_id: Optional[str] = None
    user_id: Optional[str] = None
    external_user_id: Optional[str] = None
    email: str
    name: str
    role: Optional[str] = None
    created_at: Optional[str] = None


class ComplianceReminder(CamelRecord):
    id: str
    compliance_record_id: Optional[str] = None
    recipient_id: Optional[str] = None
    reminder_type: ReminderType
    scheduled_date: Optional[str] = None
    sent_at: Optional[str] = None
    email_sent: bool = False
    confirmation_token: Optional[str] = None
    confirmed_at: Optional[str] = None
    confirmed_by: Optional[str] = None
    status: ReminderStatus = ReminderStatus.PENDING
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ComplianceConfirmation(CamelRecord):
    """Details behind a confirmation link"""
    reminder: ComplianceReminder
    compliance_record: Optional[Dict[str, Any]] = None
    recipient: Optional[ComplianceReminderRecipient] = None


class ConfirmComplianceData(CamelRecord):
    confirmed_by: str
    confirmed_email: str
    confirmation_type: ConfirmationType
    notes: Optional[str] = None
