"""
Budget service - budgets, allocations, expenditures, transfers and analytics
"""

import logging
from typing import Any, Dict, List, Optional

from models.budget import (
    Budget, BudgetAllocation, BudgetCategory, BudgetExpenditure, BudgetSummary, BudgetTransfer,
)
from models.enums import UtilizationStatus
from services.base_service import ApiBoundService, Payload, to_payload
from utils.helpers import badge, humanize_label

logger = logging.getLogger(__name__)

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "CAD": "CA$",
    "AUD": "A$",
}

STATUS_COLORS = {
    "draft": "gray",
    "active": "green",
    "closed": "blue",
    "archived": "purple",
    "pending": "yellow",
    "approved": "green",
    "rejected": "red",
    "paid": "blue",
}

UTILIZATION_COLORS = {
    UtilizationStatus.ON_TRACK: "text-green-600",
    UtilizationStatus.AT_RISK: "text-yellow-600",
    UtilizationStatus.OVER_BUDGET: "text-red-600",
}

class BudgetService(ApiBoundService):
    """Client for the budgeting endpoints"""

    # Budget categories

    async def get_categories(self) -> List[BudgetCategory]:
        payload = await self.api.get("/budget/categories")
        return [BudgetCategory.model_validate(row) for row in payload or []]

    async def create_category(self, data: Payload) -> BudgetCategory:
        return BudgetCategory.model_validate(await self.api.post("/budget/categories", to_payload(data)))

    # Budgets

    async def get_budgets(
        self,
        status: Optional[str] = None,
        department_id: Optional[str] = None,
        period_type: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None
    ) -> List[Budget]:
        params = {
            "status": status,
            "department_id": department_id,
            "period_type": period_type,
            "start_date": start_date,
            "end_date": end_date,
        }
        payload = await self.api.get("/budgets", params=params)
        return [Budget.model_validate(row) for row in payload or []]

    async def create_budget(self, data: Payload) -> Budget:
        body = to_payload(data)
        logger.info(f"Creating budget: {body.get('name')}")
        return Budget.model_validate(await self.api.post("/budgets", body))

    async def get_budget_by_id(self, budget_id: str) -> Budget:
        return Budget.model_validate(await self.api.get(f"/budgets/{budget_id}"))

    async def update_budget(self, budget_id: str, data: Payload) -> Budget:
        return Budget.model_validate(await self.api.put(f"/budgets/{budget_id}", to_payload(data)))

    async def approve_budget(self, budget_id: str) -> Budget:
        logger.info(f"Approving budget {budget_id}")
        return Budget.model_validate(await self.api.post(f"/budgets/{budget_id}/approve"))

    # Allocations

    async def get_allocations(self, budget_id: str) -> List[BudgetAllocation]:
        payload = await self.api.get(f"/budgets/{budget_id}/allocations")
        return [BudgetAllocation.model_validate(row) for row in payload or []]

    async def create_allocation(self, budget_id: str, data: Payload) -> BudgetAllocation:
        payload = await self.api.post(f"/budgets/{budget_id}/allocations", to_payload(data))
        return BudgetAllocation.model_validate(payload)

    # Expenditures

    async def get_expenditures(
        self,
        budget_id: str,
        category_id: Optional[str] = None,
        status: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None
    ) -> List[BudgetExpenditure]:
        params = {
            "category_id": category_id,
            "status": status,
            "start_date": start_date,
            "end_date": end_date,
        }
        payload = await self.api.get(f"/budgets/{budget_id}/expenditures", params=params)
        return [BudgetExpenditure.model_validate(row) for row in payload or []]

    async def create_expenditure(self, budget_id: str, data: Payload) -> BudgetExpenditure:
        payload = await self.api.post(f"/budgets/{budget_id}/expenditures", to_payload(data))
        return BudgetExpenditure.model_validate(payload)

    async def update_expenditure(self, expenditure_id: str, data: Payload) -> BudgetExpenditure:
        payload = await self.api.put(f"/expenditures/{expenditure_id}", to_payload(data))
        return BudgetExpenditure.model_validate(payload)

    async def approve_expenditure(self, expenditure_id: str) -> BudgetExpenditure:
        return BudgetExpenditure.model_validate(await self.api.post(f"/expenditures/{expenditure_id}/approve"))

    # Transfers

    async def get_transfers(self, budget_id: str) -> List[BudgetTransfer]:
        payload = await self.api.get(f"/budgets/{budget_id}/transfers")
        return [BudgetTransfer.model_validate(row) for row in payload or []]

    async def create_transfer(self, budget_id: str, data: Payload) -> BudgetTransfer:
        payload = await self.api.post(f"/budgets/{budget_id}/transfers", to_payload(data))
        return BudgetTransfer.model_validate(payload)

    async def approve_transfer(self, transfer_id: str) -> BudgetTransfer:
        return BudgetTransfer.model_validate(await self.api.post(f"/transfers/{transfer_id}/approve"))

    # Analytics

    async def get_budget_summary(self, budget_id: str) -> BudgetSummary:
        return BudgetSummary.model_validate(await self.api.get(f"/budgets/{budget_id}/summary") or {})

    async def get_monthly_spending(self, budget_id: str, year: int) -> List[Dict[str, Any]]:
        return await self.api.get(f"/budgets/{budget_id}/monthly-spending", params={"year": year}) or []

    async def get_category_spending(self, budget_id: str) -> List[Dict[str, Any]]:
        return await self.api.get(f"/budgets/{budget_id}/category-spending") or []

    # Display helpers

    @staticmethod
    def format_currency(amount: float, currency: str = "USD") -> str:
        """1234.5 -> '$1,234.50'; currencies without a symbol use their code"""
        sign = "-" if amount < 0 else ""
        number = f"{abs(amount):,.2f}"
        symbol = CURRENCY_SYMBOLS.get(currency.upper())
        if symbol:
            return f"{sign}{symbol}{number}"
        return f"{sign}{currency.upper()} {number}"

    @staticmethod
    def format_percentage(value: float) -> str:
        return f"{value:.1f}%"

    @staticmethod
    def get_status_color(status: str) -> str:
        return badge(STATUS_COLORS.get(status, "gray"))

    @staticmethod
    def get_status_label(status: str) -> str:
        return humanize_label(status)

    @staticmethod
    def calculate_utilization(allocated: float, spent: float) -> float:
        if allocated == 0:
            return 0
        return (spent / allocated) * 100

    @staticmethod
    def get_utilization_status(utilization: float) -> UtilizationStatus:
        if utilization >= 100:
            return UtilizationStatus.OVER_BUDGET
        if utilization >= 80:
            return UtilizationStatus.AT_RISK
        return UtilizationStatus.ON_TRACK

    @classmethod
    def get_utilization_color(cls, utilization: float) -> str:
        return UTILIZATION_COLORS.get(cls.get_utilization_status(utilization), "text-gray-600")

# Global service instance
_budget_service: Optional[BudgetService] = None

def get_budget_service() -> BudgetService:
    """Get the global budget service instance"""
    global _budget_service
    if _budget_service is None:
        _budget_service = BudgetService()
    return _budget_service
