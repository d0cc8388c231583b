"""
Contracts service - REST access for contract management
"""

import logging
from typing import Optional

from models.contract import Contract, ContractStats
from services.api_service import ApiService
from services.base_service import BaseResourceService

logger = logging.getLogger(__name__)

class ContractsService(BaseResourceService[Contract]):
    """Service for contract operations"""

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__("contracts", Contract, api)

    async def get_contract_stats(self) -> ContractStats:
        """Dashboard counters: total, active, expiring soon / this week"""
        return ContractStats.model_validate(await self.api.get("/contracts/stats") or {})

# Global service instance
_contracts_service: Optional[ContractsService] = None

def get_contracts_service() -> ContractsService:
    """Get the global contracts service instance"""
    global _contracts_service
    if _contracts_service is None:
        _contracts_service = ContractsService()
    return _contracts_service
