"""
Budget forms - budgets with category allocations, and expenditures
"""

from datetime import date
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from forms.base import BaseForm, FormResult
from models.budget import (
    Budget, BudgetCategory, BudgetExpenditure, CreateAllocationData, CreateBudgetData, CreateExpenditureData,
)
from models.enums import BudgetPeriod
from services.api_service import ApiError
from services.budget_service import BudgetService
from utils.helpers import is_blank


class AllocationDraft(BaseModel):
    """One allocation row being edited"""
    category_id: str = ""
    allocated_amount: float = 0
    notes: str = ""


class BudgetForm(BaseForm):
    """Create a budget and its allocations, or edit ``budget``"""
    action: ClassVar[str] = "save_budget"
    failure_message: ClassVar[str] = "Failed to save budget"
    keep_on_reset: ClassVar[Tuple[str, ...]] = ("budget", "current_user_id", "categories")
    reset_on_success: ClassVar[bool] = False

    budget: Optional[Budget] = None
    name: str = ""
    description: str = ""
    period_type: BudgetPeriod = BudgetPeriod.YEARLY
    start_date: str = ""
    end_date: str = ""
    total_amount: float = 0
    currency: str = "USD"
    department_id: str = ""
    allocations: List[AllocationDraft] = Field(default_factory=list)
    current_user_id: Optional[str] = None
    categories: List[BudgetCategory] = Field(default_factory=list)

    @model_validator(mode="after")
    def _load_budget(self) -> "BudgetForm":
        if self.budget is not None and not self.name:
            self.name = self.budget.name
            self.description = self.budget.description or ""
            self.period_type = self.budget.period_type
            self.start_date = self.budget.start_date[:10]
            self.end_date = self.budget.end_date[:10]
            self.total_amount = self.budget.total_amount
            self.currency = self.budget.currency
            self.department_id = self.budget.department_id or ""
        return self

    @property
    def service(self) -> BudgetService:
        return BudgetService(self._api)

    async def load(self) -> FormResult:
        """Budget categories, plus the existing allocations when editing"""
        try:
            self.categories = await self.service.get_categories()
            if self.budget is not None:
                existing = await self.service.get_allocations(self.budget.id)
                self.allocations = [
                    AllocationDraft(
                        category_id=allocation.category_id,
                        allocated_amount=allocation.allocated_amount,
                        notes=allocation.notes or "",
                    )
                    for allocation in existing
                ]
        except ApiError as e:
            return self.failure(e, "Failed to load budget data")
        return FormResult(success=True)

    def add_allocation(self) -> AllocationDraft:
        draft = AllocationDraft()
        self.allocations.append(draft)
        return draft

    def remove_allocation(self, index: int) -> None:
        del self.allocations[index]

    def total_allocated(self) -> float:
        return sum(allocation.allocated_amount for allocation in self.allocations)

    def remaining_amount(self) -> float:
        return self.total_amount - self.total_allocated()

    def validation_errors(self) -> Dict[str, str]:
        errors = {}
        if is_blank(self.name):
            errors["name"] = "Budget name is required"
        if not self.start_date:
            errors["start_date"] = "Start date is required"
        if not self.end_date:
            errors["end_date"] = "End date is required"
        if self.start_date and self.end_date and self.start_date >= self.end_date:
            errors["end_date"] = "End date must be after start date"
        if self.total_amount <= 0:
            errors["total_amount"] = "Total amount must be greater than 0"
        if self.total_allocated() > self.total_amount:
            errors["allocations"] = "Total allocated amount cannot exceed total budget amount"
        if any(not a.category_id or a.allocated_amount <= 0 for a in self.allocations):
            errors["allocations"] = "All allocations must have a category and amount greater than 0"
        return errors

    def budget_data(self) -> CreateBudgetData:
        return CreateBudgetData(
            name=self.name,
            description=self.description,
            period_type=self.period_type,
            start_date=self.start_date,
            end_date=self.end_date,
            total_amount=self.total_amount,
            currency=self.currency,
            department_id=self.department_id or None,
        )

    async def perform(self) -> Budget:
        if self.budget is not None:
            return await self.service.update_budget(self.budget.id, self.budget_data())

        body: Dict[str, Any] = self.budget_data().to_payload()
        body["created_by"] = self.current_user_id or "system"
        created = await self.service.create_budget(body)
        for allocation in self.allocations:
            await self.service.create_allocation(created.id, CreateAllocationData(
                category_id=allocation.category_id,
                allocated_amount=allocation.allocated_amount,
                notes=allocation.notes or None,
            ))
        return created


class ExpenditureForm(BaseForm):
    """Record a spend against a budget, or edit ``expenditure``"""
    action: ClassVar[str] = "save_expenditure"
    failure_message: ClassVar[str] = "Failed to save expenditure"
    keep_on_reset: ClassVar[Tuple[str, ...]] = ("budget_id", "expenditure")
    reset_on_success: ClassVar[bool] = False

    budget_id: str
    expenditure: Optional[BudgetExpenditure] = None
    category_id: str = ""
    title: str = ""
    description: str = ""
    amount: float = 0
    expense_date: str = Field(default_factory=lambda: date.today().isoformat())
    vendor_id: str = ""
    invoice_number: str = ""
    receipt_url: str = ""

    @model_validator(mode="after")
    def _load_expenditure(self) -> "ExpenditureForm":
        if self.expenditure is not None and not self.title:
            self.category_id = self.expenditure.category_id
            self.title = self.expenditure.title
            self.description = self.expenditure.description or ""
            self.amount = self.expenditure.amount
            self.expense_date = self.expenditure.expense_date[:10]
            self.vendor_id = self.expenditure.vendor_id or ""
            self.invoice_number = self.expenditure.invoice_number or ""
            self.receipt_url = self.expenditure.receipt_url or ""
        return self

    def validation_errors(self) -> Dict[str, str]:
        errors = {}
        if not self.category_id:
            errors["category_id"] = "Category is required"
        if is_blank(self.title):
            errors["title"] = "Title is required"
        if not self.amount or self.amount <= 0:
            errors["amount"] = "Amount must be greater than 0"
        if not self.expense_date:
            errors["expense_date"] = "Expense date is required"
        return errors

    def expenditure_data(self) -> CreateExpenditureData:
        return CreateExpenditureData(
            category_id=self.category_id,
            title=self.title,
            description=self.description or None,
            amount=self.amount,
            expense_date=self.expense_date,
            vendor_id=self.vendor_id or None,
            invoice_number=self.invoice_number or None,
            receipt_url=self.receipt_url or None,
        )

    async def perform(self) -> BudgetExpenditure:
        service = BudgetService(self._api)
        if self.expenditure is not None:
            return await service.update_expenditure(self.expenditure.id, self.expenditure_data())
        return await service.create_expenditure(self.budget_id, self.expenditure_data())
