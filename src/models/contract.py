"""
Contract-related Pydantic models
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from models.base import Record
from models.enums import ContractStatus, ContractAssignmentRole


class Contract(Record):
    id: str
    contract_number: str
    title: str
    description: Optional[str] = None
    vendor_id: Optional[str] = None
    vendor_ids: Optional[List[str]] = None
    contract_type_id: Optional[str] = None
    status: ContractStatus = ContractStatus.DRAFT
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    value: Optional[str] = None
    currency: Optional[str] = None
    payment_terms: Optional[str] = None
    department_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ContractAssignment(Record):
    id: str
    contract_id: str
    user_id: str
    role: ContractAssignmentRole
    assigned_at: Optional[str] = None
    assigned_by: Optional[str] = None


class ContractType(Record):
    id: str
    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ContractStats(BaseModel):
    """Dashboard counters returned by /contracts/stats"""
    model_config = ConfigDict(populate_by_name=True)

    total_contracts: int = Field(0, alias="totalContracts")
    active_contracts: int = Field(0, alias="activeContracts")
    expiring_soon: int = Field(0, alias="expiringSoon")
    expiring_this_week: int = Field(0, alias="expiringThisWeek")
    active_percentage: float = Field(0, alias="activePercentage")
