"""
Case forms - new case and case team assignment
"""

import logging
import random
from datetime import date
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import Field

from forms.base import BaseForm, FormResult
from models.case import Case, CaseAssignment
from models.enums import ActiveStatus, CaseAssignmentRole, CasePriority, CaseStatus, CaseType, FirmType
from models.organization import LawFirm, User
from services.api_service import ApiError
from services.cases_service import CasesService
from services.law_firms_service import LawFirmsService
from services.users_service import UsersService
from utils.helpers import is_blank

logger = logging.getLogger(__name__)

IN_HOUSE_FIRM_ID = "in-house"

ROLE_DISPLAY_NAMES = {
    CaseAssignmentRole.LEAD_ATTORNEY.value: "Lead Attorney",
    CaseAssignmentRole.ASSOCIATE_ATTORNEY.value: "Associate Attorney",
    CaseAssignmentRole.PARALEGAL.value: "Paralegal",
    CaseAssignmentRole.ASSISTANT.value: "Assistant",
}


def generate_case_number(today: Optional[date] = None) -> str:
    """CASE-<year>-<0..999>; not guaranteed unique, the backend rejects duplicates"""
    year = (today or date.today()).year
    return f"CASE-{year}-{random.randint(0, 999)}"


def in_house_firm() -> LawFirm:
    return LawFirm(id=IN_HOUSE_FIRM_ID, name="In House", firm_type=FirmType.IN_HOUSE, status=ActiveStatus.ACTIVE)


class NewCaseForm(BaseForm):
    action: ClassVar[str] = "create_case"
    failure_message: ClassVar[str] = "Failed to create case"
    keep_on_reset: ClassVar[Tuple[str, ...]] = ("law_firms",)

    case_name: str = ""
    case_type: CaseType = CaseType.CIVIL
    status: CaseStatus = CaseStatus.OPEN
    filing_date: str = ""
    description: str = ""
    law_firm_id: str = ""
    law_firms: List[LawFirm] = Field(default_factory=list)

    async def load_law_firms(self) -> List[LawFirm]:
        """Law firm choices, with an In House entry first unless the backend has one"""
        try:
            firms = await LawFirmsService(self._api).list()
        except ApiError as e:
            logger.error(f"Error loading law firms: {e}")
            self.law_firms = [in_house_firm()]
            return self.law_firms

        if any(firm.firm_type == FirmType.IN_HOUSE for firm in firms):
            self.law_firms = firms
        else:
            self.law_firms = [in_house_firm()] + firms
        return self.law_firms

    def add_law_firm(self, firm: LawFirm) -> None:
        """Append a firm created from the form and select it"""
        self.law_firms.append(firm)
        self.law_firm_id = firm.id

    def validation_errors(self) -> Dict[str, str]:
        errors = {}
        if is_blank(self.case_name):
            errors["case_name"] = "Case name is required"
        return errors

    def build_payload(self, today: Optional[date] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "case_number": generate_case_number(today),
            "case_name": self.case_name,
            "case_type": (self.case_type or CaseType.CIVIL).value,
            "status": self.status.value,
            "description": self.description,
            "priority": CasePriority.MEDIUM.value,
        }
        if self.filing_date:
            payload["filing_date"] = self.filing_date
        if self.law_firm_id:
            payload["law_firm_id"] = self.law_firm_id
        return payload

    async def perform(self) -> Case:
        return await CasesService(self._api).create_case(self.build_payload())


class CaseAssignmentForm(BaseForm):
    """Case team editor: submit() adds the selected user with the selected role"""
    action: ClassVar[str] = "add_case_assignment"
    failure_message: ClassVar[str] = "Failed to add assignment"
    keep_on_reset: ClassVar[Tuple[str, ...]] = ("case_id", "current_user_id", "users", "assignments")

    case_id: str
    current_user_id: str = ""
    selected_user_id: str = ""
    selected_role: str = ""
    users: List[User] = Field(default_factory=list)
    assignments: List[CaseAssignment] = Field(default_factory=list)

    @property
    def service(self) -> CasesService:
        return CasesService(self._api)

    async def load(self) -> FormResult:
        """Fetch the user directory and the case's current assignments"""
        try:
            self.users = await UsersService(self._api).list()
        except ApiError as e:
            return self.failure(e, "Failed to load users")
        return await self.load_assignments()

    async def load_assignments(self) -> FormResult:
        try:
            self.assignments = await self.service.get_assignments(self.case_id)
        except ApiError as e:
            return self.failure(e, "Failed to load current assignments")
        return FormResult(success=True, data=self.assignments)

    def available_users(self) -> List[User]:
        """Users not yet on the case"""
        assigned = {assignment.user_id for assignment in self.assignments}
        return [user for user in self.users if user.id not in assigned]

    def validation_errors(self) -> Dict[str, str]:
        if not self.selected_user_id or not self.selected_role:
            return {"selection": "Please select both a user and a role"}
        if self.selected_role not in ROLE_DISPLAY_NAMES:
            return {"selected_role": f"Unknown role: {self.selected_role}"}
        if any(assignment.user_id == self.selected_user_id for assignment in self.assignments):
            return {"selected_user_id": "This user is already assigned to this case"}
        return {}

    async def perform(self) -> Any:
        return await self.service.add_assignment(
            self.case_id,
            self.selected_user_id,
            self.selected_role,
            assigned_by=self.current_user_id
        )

    async def add_assignment(self) -> FormResult:
        result = await self.submit()
        if result.success:
            await self.load_assignments()
        return result

    async def remove_assignment(self, assignment_id: str) -> FormResult:
        try:
            await self.service.remove_assignment(self.case_id, assignment_id)
        except ApiError as e:
            return self.failure(e, "Failed to remove assignment")
        return await self.load_assignments()

    @staticmethod
    def get_role_display_name(role: str) -> str:
        return ROLE_DISPLAY_NAMES.get(role, role)

    def get_user_name(self, user_id: str) -> str:
        for user in self.users:
            if user.id == user_id:
                return user.full_name
        return "Unknown User"
