"""
Vendors service
"""

from typing import Optional

from models.organization import Vendor
from services.api_service import ApiService
from services.base_service import BaseResourceService

class VendorsService(BaseResourceService[Vendor]):

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__("vendors", Vendor, api)

# Global service instance
_vendors_service: Optional[VendorsService] = None

def get_vendors_service() -> VendorsService:
    """Get the global vendors service instance"""
    global _vendors_service
    if _vendors_service is None:
        _vendors_service = VendorsService()
    return _vendors_service
