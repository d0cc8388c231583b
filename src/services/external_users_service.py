"""
External users service - people outside the firm who receive compliance reminders
"""

from typing import List, Optional

from models.organization import ExternalUser
from services.api_service import unwrap
from services.base_service import ApiBoundService, Payload, to_payload

class ExternalUsersService(ApiBoundService):

    async def get_external_users(self) -> List[ExternalUser]:
        payload = await self.api.get("/external-users")
        return [ExternalUser.model_validate(row) for row in unwrap(payload) or []]

    async def create_external_user(self, data: Payload) -> ExternalUser:
        return ExternalUser.model_validate(unwrap(await self.api.post("/external-users", to_payload(data))))

    async def get_external_user_by_id(self, user_id: str) -> ExternalUser:
        return ExternalUser.model_validate(unwrap(await self.api.get(f"/external-users/{user_id}")))

    async def update_external_user(self, user_id: str, data: Payload) -> ExternalUser:
        payload = await self.api.put(f"/external-users/{user_id}", to_payload(data))
        return ExternalUser.model_validate(unwrap(payload))

    async def delete_external_user(self, user_id: str) -> bool:
        payload = await self.api.delete(f"/external-users/{user_id}")
        return bool(payload and payload.get("success"))

# Global service instance
_external_users_service: Optional[ExternalUsersService] = None

def get_external_users_service() -> ExternalUsersService:
    """Get the global external users service instance"""
    global _external_users_service
    if _external_users_service is None:
        _external_users_service = ExternalUsersService()
    return _external_users_service
