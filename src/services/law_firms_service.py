"""
Law firms service
"""

from typing import Any, Dict, List, Optional

from models.organization import LawFirm
from services.api_service import ApiService
from services.base_service import BaseResourceService

class LawFirmsService(BaseResourceService[LawFirm]):
    """Service for external and in-house law firms"""

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__("law-firms", LawFirm, api)

    async def get_law_firm_contracts(self, law_firm_id: str) -> List[Dict[str, Any]]:
        return await self.api.get(f"/law-firms/{law_firm_id}/contracts") or []

    async def get_law_firm_cases(self, law_firm_id: str) -> List[Dict[str, Any]]:
        return await self.api.get(f"/law-firms/{law_firm_id}/cases") or []

# Global service instance
_law_firms_service: Optional[LawFirmsService] = None

def get_law_firms_service() -> LawFirmsService:
    """Get the global law firms service instance"""
    global _law_firms_service
    if _law_firms_service is None:
        _law_firms_service = LawFirmsService()
    return _law_firms_service
