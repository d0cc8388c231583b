"""
List views - filter, sort and paginate records fetched from the backend
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

from listing.query import Page, matches_search, paginate
from models.case import Case
from models.contract import Contract
from models.document import Document
from models.enums import CasePriority, CaseStatus, ContractStatus, FirmType, TaskPriority, TaskStatus
from models.organization import LawFirm, Vendor
from models.task import Task
from services.api_service import ApiService
from services.cases_service import CasesService
from services.contracts_service import ContractsService
from services.documents_service import DocumentsService
from services.law_firms_service import LawFirmsService
from services.tasks_service import TasksService
from services.vendors_service import VendorsService
from utils.helpers import parse_date

logger = logging.getLogger(__name__)

T = TypeVar("T")

MY_CASES = "my-cases"
ALL_CASES = "all-cases"

TASK_PRIORITY_ORDER = {
    TaskPriority.HIGH: 3,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 1,
}


class ListView(Generic[T]):
    """Records plus search text and current page; subclasses define ``filtered``"""

    per_page: int = 10

    def __init__(self, records: Optional[Iterable[T]] = None, api: Optional[ApiService] = None):
        self.records: List[T] = list(records or [])
        self.search = ""
        self.page = 1
        self._api = api

    def filtered(self) -> List[T]:
        return [record for record in self.records if matches_search(record, self.search)]

    def current_page(self) -> Page[T]:
        return paginate(self.filtered(), self.page, self.per_page)


@dataclass
class CaseStats:
    total: int
    created_ytd: int
    created_mtd: int
    active: int
    active_share: str
    high_priority: int
    high_priority_open: int
    closed: int
    closed_ytd: int
    closed_mtd: int


class CasesView(ListView[Case]):
    """Cases table with 'my cases' / 'all cases' and open / closed tabs"""

    def __init__(
        self,
        cases: Optional[Iterable[Case]] = None,
        user_cases: Optional[Iterable[Case]] = None,
        api: Optional[ApiService] = None
    ):
        super().__init__(cases, api)
        self.user_cases: List[Case] = list(user_cases or [])
        self.main_tab = ALL_CASES
        self.status_tab = CaseStatus.OPEN.value

    async def load(self, user_id: Optional[str] = None) -> None:
        service = CasesService(self._api)
        self.records = await service.get_all_cases()
        if user_id:
            self.user_cases = await service.get_user_cases(user_id)

    @property
    def current_cases(self) -> List[Case]:
        return self.user_cases if self.main_tab == MY_CASES else self.records

    @staticmethod
    def _in_status_tab(case: Case, tab: str) -> bool:
        if tab == CaseStatus.CLOSED.value:
            return case.status == CaseStatus.CLOSED
        return case.status in (CaseStatus.OPEN, CaseStatus.PENDING)

    def filtered(self) -> List[Case]:
        return [
            case for case in self.current_cases
            if self._in_status_tab(case, self.status_tab) and matches_search(case, self.search)
        ]

    def main_tab_counts(self) -> Dict[str, int]:
        return {MY_CASES: len(self.user_cases), ALL_CASES: len(self.records)}

    def status_tab_counts(self) -> Dict[str, int]:
        cases = self.current_cases
        return {
            CaseStatus.OPEN.value: sum(1 for case in cases if self._in_status_tab(case, CaseStatus.OPEN.value)),
            CaseStatus.CLOSED.value: sum(1 for case in cases if case.status == CaseStatus.CLOSED),
        }

    def stats(self, today: Optional[date] = None) -> CaseStats:
        """Headline counters for the cases in the current main tab"""
        today = today or date.today()
        cases = self.current_cases

        def in_year(value: Optional[str]) -> bool:
            parsed = parse_date(value)
            return parsed is not None and parsed.year == today.year

        def in_month(value: Optional[str]) -> bool:
            parsed = parse_date(value)
            return parsed is not None and (parsed.year, parsed.month) == (today.year, today.month)

        open_cases = [case for case in cases if case.status == CaseStatus.OPEN]
        high = [case for case in cases if case.priority == CasePriority.HIGH]
        closed = [case for case in cases if case.status == CaseStatus.CLOSED]
        share = round(len(open_cases) / len(cases) * 100) if cases else 0

        return CaseStats(
            total=len(cases),
            created_ytd=sum(1 for case in cases if in_year(case.created_at)),
            created_mtd=sum(1 for case in cases if in_month(case.created_at)),
            active=len(open_cases),
            active_share=f"{share}% of total",
            high_priority=len(high),
            high_priority_open=sum(1 for case in high if case.status == CaseStatus.OPEN),
            closed=len(closed),
            closed_ytd=sum(1 for case in closed if in_year(case.updated_at)),
            closed_mtd=sum(1 for case in closed if in_month(case.updated_at)),
        )


class ContractsView(ListView[Contract]):

    def __init__(self, contracts: Optional[Iterable[Contract]] = None, api: Optional[ApiService] = None):
        super().__init__(contracts, api)
        self.tab = ContractStatus.ACTIVE.value

    async def load(self) -> None:
        self.records = await ContractsService(self._api).list()

    def filtered(self) -> List[Contract]:
        return [
            contract for contract in self.records
            if contract.status.value == self.tab and matches_search(contract, self.search)
        ]

    def tab_counts(self) -> Dict[str, int]:
        return {
            status.value: sum(1 for contract in self.records if contract.status == status)
            for status in (ContractStatus.ACTIVE, ContractStatus.EXPIRED)
        }


class DocumentsView(ListView[Document]):
    """Document library; shows everything on one page"""

    per_page = 0
    SEARCH_FIELDS = ("title", "file_name", "file_type", "uploaded_by_name", "uploaded_by")

    def __init__(self, documents: Optional[Iterable[Document]] = None, api: Optional[ApiService] = None):
        super().__init__(documents, api)
        self.category = "all"

    async def load(self) -> None:
        self.records = await DocumentsService(self._api).get_all_documents()

    def filtered(self) -> List[Document]:
        query = self.search.strip()
        return [
            document for document in self.records
            if (self.category == "all" or document.category.value == self.category)
            and matches_search(document, query, self.SEARCH_FIELDS)
        ]

    def group_by_category(self) -> Dict[str, List[Document]]:
        groups: Dict[str, List[Document]] = OrderedDict()
        for document in self.filtered():
            groups.setdefault(document.category.value, []).append(document)
        return groups


class TasksView(ListView[Task]):
    per_page = 5
    SORT_KEYS = ("due_date", "priority", "status")

    def __init__(self, tasks: Optional[Iterable[Task]] = None, api: Optional[ApiService] = None):
        super().__init__(tasks, api)
        self.status_tab = TaskStatus.PENDING.value
        self.sort_by = "due_date"

    async def load(self) -> None:
        self.records = await TasksService(self._api).list()

    def filtered(self) -> List[Task]:
        tasks = [
            task for task in self.records
            if task.status.value == self.status_tab
            and matches_search(task, self.search, ("title", "description"))
        ]
        return self.sort(tasks, self.sort_by)

    @staticmethod
    def sort(tasks: List[Task], sort_by: str) -> List[Task]:
        """due_date ascending with undated last, priority high first, status A-Z"""
        if sort_by == "due_date":
            return sorted(tasks, key=lambda task: (task.due_date is None, parse_date(task.due_date) or date.max))
        if sort_by == "priority":
            return sorted(tasks, key=lambda task: -TASK_PRIORITY_ORDER.get(task.priority, 0))
        if sort_by == "status":
            return sorted(tasks, key=lambda task: task.status.value)
        return list(tasks)

    def status_counts(self) -> Dict[str, int]:
        return {
            status.value: sum(1 for task in self.records if task.status == status)
            for status in (TaskStatus.PENDING, TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED)
        }


class LawFirmsView(ListView[LawFirm]):
    per_page = 0
    SEARCH_FIELDS = ("name", "specializations", "contact_person")

    def __init__(self, law_firms: Optional[Iterable[LawFirm]] = None, api: Optional[ApiService] = None):
        super().__init__(law_firms, api)
        self.firm_type = "all"

    async def load(self) -> None:
        self.records = await LawFirmsService(self._api).list()

    def filtered(self) -> List[LawFirm]:
        return [
            firm for firm in self.records
            if matches_search(firm, self.search, self.SEARCH_FIELDS)
            and (self.firm_type == "all" or firm.firm_type.value == self.firm_type)
        ]

    def stats(self) -> Dict[str, int]:
        return {
            "total": len(self.records),
            "in_house": sum(1 for firm in self.records if firm.firm_type == FirmType.IN_HOUSE),
            "external": sum(1 for firm in self.records if firm.firm_type == FirmType.EXTERNAL),
            "active": sum(1 for firm in self.records if firm.status.value == "active"),
        }


class VendorsView(ListView[Vendor]):
    per_page = 20

    async def load(self) -> None:
        self.records = await VendorsService(self._api).list()
