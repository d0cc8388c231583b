"""
Authentication service - sign up, sign in and session teardown
"""

import logging
from typing import Optional

from models.organization import AuthResponse, SignUpData
from services.api_service import ApiService
from services.base_service import ApiBoundService, Payload, to_payload
from utils.auth import AuthSession, get_auth_session

logger = logging.getLogger(__name__)

class AuthService(ApiBoundService):
    """Wraps /auth endpoints and keeps the session token in step"""

    def __init__(self, api: Optional[ApiService] = None, session: Optional[AuthSession] = None):
        super().__init__(api)
        self._session = session

    @property
    def session(self) -> AuthSession:
        return self._session or self.api.session or get_auth_session()

    async def sign_up(self, data: Payload, persist: bool = False) -> AuthResponse:
        body = to_payload(SignUpData.model_validate(to_payload(data)))
        logger.info(f"AUTH: Signing up {body['email']}")
        response = AuthResponse.model_validate(await self.api.post("/auth/signup", body))
        self.session.set(response.token, response.user, persist=persist)
        return response

    async def sign_in(self, email: str, password: str, persist: bool = False) -> AuthResponse:
        logger.info(f"AUTH: Signing in {email}")
        payload = await self.api.post("/auth/signin", {"email": email, "password": password})
        response = AuthResponse.model_validate(payload)
        self.session.set(response.token, response.user, persist=persist)
        return response

    async def sign_out(self, persist: bool = False) -> None:
        """Tell the backend, then drop the local token"""
        await self.api.post("/auth/signout")
        self.session.clear(persist=persist)
        logger.info("AUTH: Signed out")

    async def reset_password(self, email: str) -> None:
        await self.api.post("/auth/reset-password", {"email": email})

# Global service instance
_auth_service: Optional[AuthService] = None

def get_auth_service() -> AuthService:
    """Get the global auth service instance"""
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService()
    return _auth_service
