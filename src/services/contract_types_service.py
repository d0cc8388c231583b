"""
Contract types service
"""

from typing import Optional

from models.contract import ContractType
from services.api_service import ApiService
from services.base_service import BaseResourceService

class ContractTypesService(BaseResourceService[ContractType]):

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__("contract-types", ContractType, api)

# Global service instance
_contract_types_service: Optional[ContractTypesService] = None

def get_contract_types_service() -> ContractTypesService:
    """Get the global contract types service instance"""
    global _contract_types_service
    if _contract_types_service is None:
        _contract_types_service = ContractTypesService()
    return _contract_types_service
