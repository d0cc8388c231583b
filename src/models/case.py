"""
Case-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel
from models.base import Record
from models.enums import CaseType, CaseStatus, CasePriority, CaseAssignmentRole, CaseUpdateType


class NewCase(Record):
    """Case fields accepted by POST /cases"""
    case_number: str
    case_name: str
    description: Optional[str] = None
    case_type: CaseType = CaseType.CIVIL
    status: CaseStatus = CaseStatus.OPEN
    priority: CasePriority = CasePriority.MEDIUM
    filing_date: Optional[str] = None
    court_name: Optional[str] = None
    court_case_number: Optional[str] = None
    estimated_completion_date: Optional[str] = None
    actual_completion_date: Optional[str] = None
    assigned_members: Optional[str] = None
    department_id: Optional[str] = None
    law_firm_id: Optional[str] = None
    client_name: Optional[str] = None
    judge_name: Optional[str] = None
    opposing_counsel: Optional[str] = None
    estimated_value: Optional[str] = None
    notes: Optional[str] = None


class Case(NewCase):
    id: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class CaseAssignment(Record):
    id: str
    case_id: str
    user_id: str
    role: CaseAssignmentRole
    assigned_at: Optional[str] = None
    assigned_by: Optional[str] = None


class CaseUpdate(Record):
    id: str
    case_id: str
    user_id: str
    update_type: CaseUpdateType
    title: str
    content: Optional[str] = None
    created_at: Optional[str] = None
    # From JOIN with users
    full_name: Optional[str] = None


class CaseUpdateRequest(BaseModel):
    user_id: str
    update_type: CaseUpdateType
    title: str
    content: Optional[str] = None
