"""
Budget-related Pydantic models
"""

from typing import List, Optional
from pydantic import Field
from models.base import Record
from models.enums import BudgetPeriod, BudgetStatus, ApprovalStatus


class BudgetCategory(Record):
    id: str
    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    is_active: bool = True
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Budget(Record):
    id: str
    name: str
    description: Optional[str] = None
    period_type: BudgetPeriod = BudgetPeriod.MONTHLY
    start_date: str
    end_date: str
    total_amount: float = 0
    currency: str = "USD"
    status: BudgetStatus = BudgetStatus.DRAFT
    department_id: Optional[str] = None
    department_name: Optional[str] = None
    created_by: Optional[str] = None
    created_by_name: Optional[str] = None
    approved_by: Optional[str] = None
    approved_by_name: Optional[str] = None
    approved_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class BudgetAllocation(Record):
    id: str
    budget_id: str
    category_id: str
    allocated_amount: float
    notes: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    category_name: Optional[str] = None
    category_color: Optional[str] = None


class BudgetExpenditure(Record):
    id: str
    budget_id: str
    category_id: str
    title: str
    description: Optional[str] = None
    amount: float
    expense_date: str
    vendor_id: Optional[str] = None
    vendor_name: Optional[str] = None
    invoice_number: Optional[str] = None
    receipt_url: Optional[str] = None
    status: ApprovalStatus = ApprovalStatus.PENDING
    approved_by: Optional[str] = None
    approved_at: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    category_name: Optional[str] = None
    category_color: Optional[str] = None


class BudgetTransfer(Record):
    id: str
    budget_id: str
    from_category_id: str
    to_category_id: str
    amount: float
    reason: str
    status: ApprovalStatus = ApprovalStatus.PENDING
    approved_by: Optional[str] = None
    approved_at: Optional[str] = None
    created_by: Optional[str] = None
    created_by_name: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    from_category_name: Optional[str] = None
    to_category_name: Optional[str] = None
    approved_by_name: Optional[str] = None


class CategoryBreakdown(Record):
    category_id: str
    category_name: str
    allocated: float = 0
    spent: float = 0
    remaining: float = 0
    utilization_percentage: float = 0


class BudgetSummary(Record):
    total_allocated: float = 0
    total_spent: float = 0
    total_remaining: float = 0
    utilization_percentage: float = 0
    category_breakdown: List[CategoryBreakdown] = Field(default_factory=list)


class CreateBudgetData(Record):
    name: str
    description: Optional[str] = None
    period_type: BudgetPeriod = BudgetPeriod.MONTHLY
    start_date: str
    end_date: str
    total_amount: float
    currency: Optional[str] = None
    department_id: Optional[str] = None


class CreateAllocationData(Record):
    category_id: str
    allocated_amount: float
    notes: Optional[str] = None


class CreateExpenditureData(Record):
    category_id: str
    title: str
    description: Optional[str] = None
    amount: float
    expense_date: str
    vendor_id: Optional[str] = None
    invoice_number: Optional[str] = None
    receipt_url: Optional[str] = None


class CreateTransferData(Record):
    from_category_id: str
    to_category_id: str
    amount: float
    reason: str
