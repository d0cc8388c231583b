#!/usr/bin/env python3
"""
Command-line front-end for the ProLegal API
"""

import argparse
import asyncio
import getpass
import logging
import sys
from typing import Any, List, Optional, Sequence

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

# Settings read the environment on import; .env is looked up from the working directory
load_dotenv(find_dotenv(usecwd=True))

from config import settings
from listing.case_law import ALL_CATEGORIES, ALL_COURTS, CaseLawView
from listing.query import Page
from listing.views import (
    ALL_CASES, MY_CASES, CasesView, ContractsView, DocumentsView, LawFirmsView, TasksView, VendorsView,
)
from services.api_service import ApiError, ApiService, get_api_service, set_api_service
from services.auth_service import AuthService
from services.budget_service import BudgetService
from services.general_compliance_service import GeneralComplianceService
from utils.error_handling import set_action_context

logger = logging.getLogger(__name__)


def format_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> str:
    """Left-aligned text table; None renders as '-'"""
    cells = [[("-" if value is None else str(value)) for value in row] for row in rows]
    widths = [len(header) for header in headers]
    for row in cells:
        for index, value in enumerate(row):
            widths[index] = max(widths[index], len(value))

    def line(values: Sequence[str]) -> str:
        return "  ".join(value.ljust(widths[index]) for index, value in enumerate(values)).rstrip()

    output = [line(headers), line(["-" * width for width in widths])]
    output.extend(line(row) for row in cells)
    return "\n".join(output)


def print_page(headers: Sequence[str], rows: List[Sequence[Any]], page: Page) -> None:
    print(format_table(headers, rows))
    footer = page.showing_text
    if page.total_pages > 1:
        footer += f" (page {page.page} of {page.total_pages})"
    print(footer)


# Commands

async def cmd_signin(api: ApiService, args: argparse.Namespace) -> None:
    password = args.password or getpass.getpass("Password: ")
    response = await AuthService(api).sign_in(args.email, password, persist=True)
    print(f"✅ Signed in as {response.user.full_name} ({response.user.email})")


async def cmd_signout(api: ApiService, args: argparse.Namespace) -> None:
    await AuthService(api).sign_out(persist=True)
    print("✅ Signed out")


async def cmd_cases(api: ApiService, args: argparse.Namespace) -> None:
    view = CasesView(api=api)
    user_id = None if args.all else (args.user or api.session.user_id())
    await view.load(user_id)
    if user_id is None and not args.all:
        print("No signed-in user; showing all cases")
    view.main_tab = MY_CASES if user_id else ALL_CASES
    view.status_tab = args.status
    view.search = args.search or ""
    view.page = args.page
    page = view.current_page()
    rows = [
        [case.case_number, case.case_name, case.case_type.value, case.status.value, case.priority.value,
         case.filing_date]
        for case in page.items
    ]
    print_page(["Number", "Name", "Type", "Status", "Priority", "Filed"], rows, page)


async def cmd_contracts(api: ApiService, args: argparse.Namespace) -> None:
    view = ContractsView(api=api)
    await view.load()
    view.tab = args.status
    view.search = args.search or ""
    view.page = args.page
    page = view.current_page()
    rows = [
        [contract.contract_number, contract.title, contract.status.value, contract.start_date, contract.end_date,
         contract.value]
        for contract in page.items
    ]
    print_page(["Number", "Title", "Status", "Start", "End", "Value"], rows, page)


async def cmd_vendors(api: ApiService, args: argparse.Namespace) -> None:
    view = VendorsView(api=api)
    await view.load()
    view.search = args.search or ""
    view.page = args.page
    page = view.current_page()
    rows = [[vendor.name, vendor.contact_person, vendor.email, vendor.phone, vendor.status.value]
            for vendor in page.items]
    print_page(["Name", "Contact", "Email", "Phone", "Status"], rows, page)


async def cmd_law_firms(api: ApiService, args: argparse.Namespace) -> None:
    view = LawFirmsView(api=api)
    await view.load()
    view.firm_type = args.type
    view.search = args.search or ""
    page = view.current_page()
    rows = [[firm.name, firm.firm_type.value, firm.contact_person, firm.specializations, firm.status.value]
            for firm in page.items]
    print_page(["Name", "Type", "Contact", "Specializations", "Status"], rows, page)
    stats = view.stats()
    print(f"Total {stats['total']}, in house {stats['in_house']}, external {stats['external']}, "
          f"active {stats['active']}")


async def cmd_tasks(api: ApiService, args: argparse.Namespace) -> None:
    view = TasksView(api=api)
    await view.load()
    view.status_tab = args.status
    view.sort_by = args.sort
    view.search = args.search or ""
    view.page = args.page
    page = view.current_page()
    rows = [[task.title, task.priority.value, task.status.value, task.due_date, task.assigned_to]
            for task in page.items]
    print_page(["Title", "Priority", "Status", "Due", "Assignee"], rows, page)


async def cmd_documents(api: ApiService, args: argparse.Namespace) -> None:
    view = DocumentsView(api=api)
    await view.load()
    view.category = args.category
    view.search = args.search or ""
    page = view.current_page()
    rows = [[document.title, document.file_name, document.category.value, document.uploaded_by_name]
            for document in page.items]
    print_page(["Title", "File", "Category", "Uploaded by"], rows, page)


async def cmd_case_law(api: ApiService, args: argparse.Namespace) -> None:
    view = CaseLawView(api=api)
    view.search = args.search or ""
    view.court = args.court
    view.category = args.category
    await view.fetch(args.page)
    page = view.current_page()
    rows = [[entry.citation, entry.title, entry.court, entry.category, entry.date] for entry in page.items]
    print_page(["Citation", "Title", "Court", "Category", "Date"], rows, page)


async def cmd_compliance(api: ApiService, args: argparse.Namespace) -> None:
    service = GeneralComplianceService(api)
    if args.overdue:
        records = await service.get_overdue_records()
    elif args.upcoming is not None:
        records = await service.get_upcoming_due_records(args.upcoming)
    else:
        records = await service.get_compliance_records()
    rows = [
        [record.name, record.compliance_type.value, record.frequency.value,
         service.get_due_date_display_text(record), record.status.value, record.priority.value]
        for record in records
    ]
    print(format_table(["Name", "Type", "Frequency", "Due", "Status", "Priority"], rows))
    print(f"{len(records)} records")


async def cmd_budgets(api: ApiService, args: argparse.Namespace) -> None:
    service = BudgetService(api)
    budgets = await service.get_budgets(status=args.status)
    rows = [
        [budget.name, budget.period_type.value, budget.start_date[:10], budget.end_date[:10],
         service.format_currency(budget.total_amount, budget.currency), service.get_status_label(budget.status.value)]
        for budget in budgets
    ]
    print(format_table(["Name", "Period", "Start", "End", "Total", "Status"], rows))
    print(f"{len(budgets)} budgets")


COMMANDS = {
    "signin": cmd_signin,
    "signout": cmd_signout,
    "cases": cmd_cases,
    "contracts": cmd_contracts,
    "vendors": cmd_vendors,
    "law-firms": cmd_law_firms,
    "tasks": cmd_tasks,
    "documents": cmd_documents,
    "case-law": cmd_case_law,
    "compliance": cmd_compliance,
    "budgets": cmd_budgets,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prolegal", description="ProLegal practice management client")
    parser.add_argument("--api-url", help=f"API base URL (default {settings.API_BASE_URL})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    signin_parser = subparsers.add_parser("signin", help="Sign in and store the session token")
    signin_parser.add_argument("email")
    signin_parser.add_argument("--password", help=argparse.SUPPRESS)

    subparsers.add_parser("signout", help="Sign out and forget the stored token")

    cases_parser = subparsers.add_parser("cases", help="List cases")
    cases_parser.add_argument("--all", action="store_true", help="All cases, not only yours")
    cases_parser.add_argument("--user", help="Show cases of this user id")
    cases_parser.add_argument("--status", choices=["open", "closed"], default="open")
    cases_parser.add_argument("--search")
    cases_parser.add_argument("--page", type=int, default=1)

    contracts_parser = subparsers.add_parser("contracts", help="List contracts")
    contracts_parser.add_argument("--status", choices=["active", "expired"], default="active")
    contracts_parser.add_argument("--search")
    contracts_parser.add_argument("--page", type=int, default=1)

    vendors_parser = subparsers.add_parser("vendors", help="List vendors")
    vendors_parser.add_argument("--search")
    vendors_parser.add_argument("--page", type=int, default=1)

    firms_parser = subparsers.add_parser("law-firms", help="List law firms")
    firms_parser.add_argument("--type", choices=["all", "in_house", "external"], default="all")
    firms_parser.add_argument("--search")

    tasks_parser = subparsers.add_parser("tasks", help="List tasks")
    tasks_parser.add_argument("--status", choices=["pending", "in_progress", "completed"], default="pending")
    tasks_parser.add_argument("--sort", choices=list(TasksView.SORT_KEYS), default="due_date")
    tasks_parser.add_argument("--search")
    tasks_parser.add_argument("--page", type=int, default=1)

    documents_parser = subparsers.add_parser("documents", help="List documents")
    documents_parser.add_argument("--category", default="all")
    documents_parser.add_argument("--search")

    case_law_parser = subparsers.add_parser("case-law", help="Search case law")
    case_law_parser.add_argument("--search")
    case_law_parser.add_argument("--court", default=ALL_COURTS)
    case_law_parser.add_argument("--category", default=ALL_CATEGORIES)
    case_law_parser.add_argument("--page", type=int, default=1)

    compliance_parser = subparsers.add_parser("compliance", help="List general compliance records")
    compliance_group = compliance_parser.add_mutually_exclusive_group()
    compliance_group.add_argument("--overdue", action="store_true")
    compliance_group.add_argument("--upcoming", type=int, metavar="DAYS")

    budgets_parser = subparsers.add_parser("budgets", help="List budgets")
    budgets_parser.add_argument("--status")

    return parser


async def run(args: argparse.Namespace) -> None:
    if args.api_url:
        set_api_service(ApiService(base_url=args.api_url))
    api = get_api_service()
    api.session.load()
    set_action_context(f"cli.{args.command}")
    try:
        await COMMANDS[args.command](api, args)
    finally:
        await api.close()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main CLI interface"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.LOG_LEVEL)

    if not args.command:
        parser.print_help()
        return

    try:
        asyncio.run(run(args))
    except ApiError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
    except ValidationError as e:
        logger.debug(f"Response validation failed: {e}")
        print(f"❌ Error: Invalid {e.title} in API response")
        sys.exit(1)


if __name__ == "__main__":
    main()
