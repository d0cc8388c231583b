"""
Users service
"""

import logging
from typing import Any, Dict, List, Optional

from models.enums import UserStatus
from models.organization import User
from services.api_service import ApiService
from services.base_service import BaseResourceService, Payload, to_payload

logger = logging.getLogger(__name__)

class UsersService(BaseResourceService[User]):
    """Service for staff user accounts"""

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__("users", User, api)

    async def get_all_users(self) -> List[User]:
        """Active users only; inactive and suspended accounts are hidden"""
        users = await self.list()
        return [user for user in users if user.status == UserStatus.ACTIVE]

    async def create_user(self, user: Payload) -> User:
        body: Dict[str, Any] = to_payload(user)
        body["status"] = UserStatus.ACTIVE.value
        return await self.create(body)

# Global service instance
_users_service: Optional[UsersService] = None

def get_users_service() -> UsersService:
    """Get the global users service instance"""
    global _users_service
    if _users_service is None:
        _users_service = UsersService()
    return _users_service
