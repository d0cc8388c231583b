"""
Organisation forms - departments, vendors and law firms
"""

from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import model_validator

from forms.base import BaseForm
from models.enums import ActiveStatus, CompanyType, FirmType, VendorStatus
from models.organization import Department, LawFirm, Vendor
from services.departments_service import DepartmentsService
from services.law_firms_service import LawFirmsService
from services.vendors_service import VendorsService
from utils.helpers import is_blank


class DepartmentForm(BaseForm):
    """Create a department, or edit ``department`` when one is given"""
    action: ClassVar[str] = "save_department"
    failure_message: ClassVar[str] = "Failed to save department"
    reset_on_success: ClassVar[bool] = False

    department: Optional[Department] = None
    name: str = ""
    head: str = ""
    email: str = ""
    phone: str = ""

    @model_validator(mode="after")
    def _load_department(self) -> "DepartmentForm":
        # The department head is stored in the description column
        if self.department is not None and not self.name:
            self.name = self.department.name or ""
            self.head = self.department.description or ""
            self.email = self.department.email or ""
            self.phone = self.department.phone or ""
        return self

    @property
    def is_editing(self) -> bool:
        return self.department is not None

    def validation_errors(self) -> Dict[str, str]:
        if is_blank(self.name):
            return {"name": "Department name is required"}
        return {}

    def build_payload(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.head,
            "email": self.email,
            "phone": self.phone,
        }

    async def perform(self) -> Department:
        service = DepartmentsService(self._api)
        payload = self.build_payload()
        if self.department is not None:
            return await service.update(self.department.id, payload)
        payload["status"] = ActiveStatus.ACTIVE.value
        return await service.create(payload)


class ContractVendorForm(BaseForm):
    """Quick vendor creation from the contract screen"""
    action: ClassVar[str] = "create_vendor"
    failure_message: ClassVar[str] = "Failed to create vendor"

    name: str = ""
    address: str = ""
    vat_number: str = ""
    tin_number: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""

    def validation_errors(self) -> Dict[str, str]:
        if is_blank(self.name):
            return {"name": "Vendor name is required."}
        return {}

    def build_payload(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "company_type": CompanyType.CORPORATION.value,
            "address": self.address or None,
            "vat_number": self.vat_number or None,
            "tin_number": self.tin_number or None,
            "contact_person": self.contact_person or None,
            "email": self.email or None,
            "phone": self.phone or None,
            "status": VendorStatus.ACTIVE.value,
        }

    async def perform(self) -> Vendor:
        return await VendorsService(self._api).create(self.build_payload())


class NewLawFirmForm(BaseForm):
    action: ClassVar[str] = "create_law_firm"
    failure_message: ClassVar[str] = "Failed to create law firm"

    name: str = ""
    firm_type: FirmType = FirmType.EXTERNAL
    address: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    specializations: str = ""
    bar_number: str = ""
    status: ActiveStatus = ActiveStatus.ACTIVE

    TEXT_FIELDS: ClassVar[Tuple[str, ...]] = (
        "address", "city", "state", "country", "postal_code", "contact_person",
        "email", "phone", "website", "specializations", "bar_number",
    )

    def validation_errors(self) -> Dict[str, str]:
        if is_blank(self.name):
            return {"name": "Law firm name is required"}
        return {}

    def build_payload(self) -> Dict[str, Any]:
        """Trimmed values; blank optional fields are left out"""
        payload: Dict[str, Any] = {
            "name": self.name.strip(),
            "firm_type": self.firm_type.value,
            "status": self.status.value,
        }
        for name in self.TEXT_FIELDS:
            value = getattr(self, name).strip()
            if value:
                payload[name] = value
        return payload

    async def perform(self) -> LawFirm:
        return await LawFirmsService(self._api).create(self.build_payload())
