"""
Departments service
"""

from typing import Optional

from models.organization import Department
from services.api_service import ApiService
from services.base_service import BaseResourceService

class DepartmentsService(BaseResourceService[Department]):

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__("departments", Department, api)

# Global service instance
_departments_service: Optional[DepartmentsService] = None

def get_departments_service() -> DepartmentsService:
    """Get the global departments service instance"""
    global _departments_service
    if _departments_service is None:
        _departments_service = DepartmentsService()
    return _departments_service
