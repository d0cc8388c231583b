"""
Users, departments, vendors and law firms
"""

from typing import Optional
from models.base import Record, CamelRecord
from models.enums import (
    UserRole, UserStatus, ActiveStatus, CompanyType, VendorStatus, FirmType,
)


class User(Record):
    id: str
    email: str
    full_name: str
    role: UserRole = UserRole.STAFF
    status: UserStatus = UserStatus.ACTIVE
    phone: Optional[str] = None
    department: Optional[str] = None
    avatar_url: Optional[str] = None
    email_verified: Optional[bool] = None
    last_login: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Department(Record):
    id: str
    name: str
    description: Optional[str] = None
    head_user_id: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: ActiveStatus = ActiveStatus.ACTIVE
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class UserDepartment(Record):
    id: str
    user_id: str
    department_id: str
    position: Optional[str] = None
    is_primary: bool = False
    assigned_at: Optional[str] = None


class Vendor(Record):
    id: str
    name: str
    company_type: CompanyType = CompanyType.CORPORATION
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    vat_number: Optional[str] = None
    tin_number: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    status: VendorStatus = VendorStatus.ACTIVE
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class LawFirm(Record):
    id: str
    name: str
    firm_type: FirmType = FirmType.EXTERNAL
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    specializations: Optional[str] = None
    bar_number: Optional[str] = None
    status: ActiveStatus = ActiveStatus.ACTIVE
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ExternalUser(CamelRecord):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    organization: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class AuditLog(Record):
    id: str
    user_id: Optional[str] = None
    action: str
    table_name: Optional[str] = None
    record_id: Optional[str] = None
    old_values: Optional[dict] = None
    new_values: Optional[dict] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: Optional[str] = None


class AuthResponse(Record):
    user: User
    token: str


class SignUpData(Record):
    email: str
    password: str
    full_name: str
    role: str
    department: str
    position: str
