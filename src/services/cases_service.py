"""
Cases service - REST access for case management
"""

import logging
from typing import Any, Dict, List, Optional, Union

from models.case import Case, CaseAssignment, CaseUpdate, CaseUpdateRequest
from models.enums import CaseAssignmentRole, CaseUpdateType
from services.api_service import ApiService
from services.base_service import BaseResourceService

logger = logging.getLogger(__name__)

class CasesService(BaseResourceService[Case]):
    """Service for case management operations"""

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__("cases", Case, api)

    async def get_all_cases(self) -> List[Case]:
        return await self.list()

    async def get_user_cases(self, user_id: str) -> List[Case]:
        """
        Get cases a user is assigned to

        Args:
            user_id: UUID of the user

        Returns:
            List of cases
        """
        return self.parse_list(await self.api.get(f"/cases/user/{user_id}"))

    async def get_case_by_id(self, case_id: str) -> Case:
        return await self.get(case_id)

    async def create_case(self, new_case: Union[Dict[str, Any], Any]) -> Case:
        return await self.create(new_case)

    async def update_case(self, case_id: str, updates: Dict[str, Any]) -> Case:
        return await self.update(case_id, updates)

    async def delete_case(self, case_id: str) -> None:
        await self.delete(case_id)

    # Case updates

    async def get_case_updates(self, case_id: str) -> List[CaseUpdate]:
        payload = await self.api.get(f"/cases/{case_id}/updates")
        return [CaseUpdate.model_validate(row) for row in payload or []]

    async def create_case_update(
        self,
        case_id: str,
        user_id: str,
        update_type: CaseUpdateType,
        title: str,
        content: Optional[str] = None
    ) -> CaseUpdate:
        """
        Post a timeline entry on a case

        Args:
            case_id: UUID of the case
            user_id: author of the update
            update_type: kind of update
            title: short title
            content: optional body text

        Returns:
            The created update
        """
        request = CaseUpdateRequest(user_id=user_id, update_type=update_type, title=title, content=content)
        logger.info(f"Adding {request.update_type.value} update to case {case_id}")
        payload = await self.api.post(
            f"/cases/{case_id}/updates",
            request.model_dump(mode="json", exclude_none=True)
        )
        return CaseUpdate.model_validate(payload)

    # Assignments

    async def get_assignments(self, case_id: str) -> List[CaseAssignment]:
        payload = await self.api.get(f"/cases/{case_id}/assignments")
        return [CaseAssignment.model_validate(row) for row in payload or []]

    async def add_assignment(
        self,
        case_id: str,
        user_id: str,
        role: Union[CaseAssignmentRole, str],
        assigned_by: Optional[str] = None
    ) -> Any:
        role_value = CaseAssignmentRole(role).value
        logger.info(f"Assigning user {user_id} to case {case_id} as {role_value}")
        return await self.api.post(
            f"/cases/{case_id}/assignments",
            {"user_id": user_id, "role": role_value, "assigned_by": assigned_by}
        )

    async def remove_assignment(self, case_id: str, assignment_id: str) -> None:
        logger.info(f"Removing assignment {assignment_id} from case {case_id}")
        await self.api.delete(f"/cases/{case_id}/assignments/{assignment_id}")

# Global service instance
_cases_service: Optional[CasesService] = None

def get_cases_service() -> CasesService:
    """Get the global cases service instance"""
    global _cases_service
    if _cases_service is None:
        _cases_service = CasesService()
    return _cases_service
