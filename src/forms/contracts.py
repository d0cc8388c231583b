"""
Contract creation form
"""

import logging
import random
from datetime import date
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import Field

from forms.base import BaseForm, FormResult
from models.contract import Contract, ContractType
from models.enums import ContractStatus
from models.organization import Department, Vendor
from services.api_service import ApiError
from services.contract_types_service import ContractTypesService
from services.contracts_service import ContractsService
from services.departments_service import DepartmentsService
from services.vendors_service import VendorsService

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "Please fill in all required fields (Contract Title, Type, Start Date, and Department)."


def generate_contract_number(today: Optional[date] = None) -> str:
    year = (today or date.today()).year
    return f"CON-{year}-{random.randint(0, 999)}"


class NewContractForm(BaseForm):
    action: ClassVar[str] = "create_contract"
    failure_message: ClassVar[str] = "Failed to create contract"
    keep_on_reset: ClassVar[Tuple[str, ...]] = ("contract_types", "departments", "vendors")

    title: str = ""
    contract_type_id: str = ""
    vendor_ids: List[str] = Field(default_factory=list)
    value: str = ""
    status: ContractStatus = ContractStatus.ACTIVE
    start_date: str = ""
    end_date: str = ""
    department_id: str = ""
    description: str = ""
    contract_types: List[ContractType] = Field(default_factory=list)
    departments: List[Department] = Field(default_factory=list)
    vendors: List[Vendor] = Field(default_factory=list)

    async def load_options(self) -> FormResult:
        """Contract types, departments and vendors for the select boxes"""
        try:
            self.contract_types = await ContractTypesService(self._api).list()
            self.departments = await DepartmentsService(self._api).list()
            self.vendors = await VendorsService(self._api).list()
        except ApiError as e:
            return self.failure(e, "Failed to load contract types, departments, and vendors")
        return FormResult(success=True)

    def add_vendor(self, vendor: Vendor) -> None:
        """Select a vendor, adding it to the choices when it was just created"""
        if all(existing.id != vendor.id for existing in self.vendors):
            self.vendors.append(vendor)
        if vendor.id not in self.vendor_ids:
            self.vendor_ids.append(vendor.id)

    def remove_vendor(self, vendor_id: str) -> None:
        self.vendor_ids = [existing for existing in self.vendor_ids if existing != vendor_id]

    def validation_errors(self) -> Dict[str, str]:
        if not self.title or not self.contract_type_id or not self.start_date or not self.department_id:
            return {"required": REQUIRED_MESSAGE}
        return {}

    def build_payload(self, today: Optional[date] = None) -> Dict[str, Any]:
        return {
            "contract_number": generate_contract_number(today),
            "title": self.title,
            "contract_type_id": self.contract_type_id,
            "vendor_ids": list(self.vendor_ids),
            "value": self.value,
            "status": self.status.value,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "department_id": self.department_id,
            "description": self.description,
        }

    async def perform(self) -> Contract:
        return await ContractsService(self._api).create(self.build_payload())
