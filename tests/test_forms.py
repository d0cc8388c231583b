"""
Tests for form validation and the shared submission pipeline
"""

import json
from datetime import date

import httpx
import pytest

from forms.base import (
    API_ERROR, CONFLICT, CONNECTION_ERROR, IN_PROGRESS, NOT_FOUND, UNAUTHORIZED, VALIDATION_ERROR,
)
from forms.budget import BudgetForm, ExpenditureForm
from forms.cases import IN_HOUSE_FIRM_ID, CaseAssignmentForm, NewCaseForm, generate_case_number
from forms.contracts import REQUIRED_MESSAGE, NewContractForm, generate_contract_number
from forms.organization import ContractVendorForm, DepartmentForm, NewLawFirmForm
from forms.tasks import NewTaskForm
from forms.timesheet import TimeEntryForm, hours_between
from models.budget import Budget, BudgetExpenditure
from models.case import CaseAssignment
from models.enums import FirmType, TimesheetCategory
from models.organization import Department, LawFirm, User, Vendor


def case_row(**overrides):
    row = {"id": "c1", "case_number": "CASE-2025-7", "case_name": "Smith v Jones"}
    row.update(overrides)
    return row


def firm_row(firm_id, firm_type="external"):
    return {"id": firm_id, "name": f"Firm {firm_id}", "firm_type": firm_type, "status": "active"}


def user(user_id, name, email=None):
    return User(id=user_id, full_name=name, email=email or f"{user_id}@example.com")


class TestSubmissionPipeline:

    @pytest.mark.asyncio
    async def test_validation_error_sends_nothing(self, api):
        result = await NewCaseForm(api).submit()

        assert not result.success
        assert result.error_type == VALIDATION_ERROR
        assert result.error == "Case name is required"
        assert result.field_errors == {"case_name": "Case name is required"}

    @pytest.mark.asyncio
    async def test_second_submit_is_rejected(self, api):
        form = NewCaseForm(api, case_name="Smith v Jones")
        form._submitting = True

        result = await form.submit()

        assert result.error_type == IN_PROGRESS
        assert result.error == "Submission already in progress"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code,error_type", [
        (404, NOT_FOUND),
        (409, CONFLICT),
        (401, UNAUTHORIZED),
        (403, UNAUTHORIZED),
        (500, API_ERROR),
    ])
    async def test_api_errors_are_classified(self, api, base_url, httpx_mock, status_code, error_type):
        httpx_mock.add_response(url=f"{base_url}/cases", method="POST", status_code=status_code,
                                json={"error": "Duplicate case number"})
        form = NewCaseForm(api, case_name="Smith v Jones")

        result = await form.submit()

        assert result.error_type == error_type
        assert result.error == "Failed to create case: Duplicate case number"
        assert form.case_name == "Smith v Jones"
        assert not form.is_submitting

    @pytest.mark.asyncio
    async def test_connection_error_message(self, api, base_url, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("refused"), url=f"{base_url}/cases", method="POST")

        result = await NewCaseForm(api, case_name="Smith v Jones").submit()

        assert result.error_type == CONNECTION_ERROR
        assert result.error == "Cannot connect to http://test/api. Please ensure the backend is running."

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, api, base_url, httpx_mock, caplog):
        httpx_mock.add_response(url=f"{base_url}/cases", method="POST", status_code=409, json={"error": "Exists"})

        with caplog.at_level("ERROR", logger="utils.error_handling"):
            await NewCaseForm(api, case_name="Smith v Jones").submit()

        assert any("form_conflict" in record.getMessage() for record in caplog.records)


class TestNewCaseForm:

    def test_case_number_format(self):
        number = generate_case_number(date(2025, 5, 1))

        prefix, year, sequence = number.split("-")
        assert (prefix, year) == ("CASE", "2025")
        assert 0 <= int(sequence) <= 999

    def test_payload_omits_unset_optionals(self):
        payload = NewCaseForm(case_name="Smith v Jones").build_payload(date(2025, 1, 1))

        assert payload["priority"] == "medium"
        assert payload["case_type"] == "civil"
        assert payload["status"] == "open"
        assert "filing_date" not in payload
        assert "law_firm_id" not in payload

    @pytest.mark.asyncio
    async def test_submit_creates_case_and_resets(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/cases", method="POST", json=case_row())
        form = NewCaseForm(api, case_name="Smith v Jones", filing_date="2025-02-01", law_firm_id="f1")
        form.law_firms = [LawFirm.model_validate(firm_row("f1"))]

        result = await form.submit()

        assert result.success
        assert result.data.id == "c1"
        body = json.loads(httpx_mock.get_request().content)
        assert body["filing_date"] == "2025-02-01"
        assert body["law_firm_id"] == "f1"
        assert form.case_name == ""
        assert form.law_firm_id == ""
        assert [firm.id for firm in form.law_firms] == ["f1"]

    @pytest.mark.asyncio
    async def test_in_house_firm_is_prepended(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/law-firms", json=[firm_row("f1")])

        firms = await NewCaseForm(api).load_law_firms()

        assert [firm.id for firm in firms] == [IN_HOUSE_FIRM_ID, "f1"]

    @pytest.mark.asyncio
    async def test_backend_in_house_firm_is_used(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/law-firms", json=[firm_row("own", "in_house"), firm_row("f1")])

        firms = await NewCaseForm(api).load_law_firms()

        assert [firm.id for firm in firms] == ["own", "f1"]

    @pytest.mark.asyncio
    async def test_law_firm_load_failure_falls_back(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/law-firms", status_code=500)

        firms = await NewCaseForm(api).load_law_firms()

        assert [firm.firm_type for firm in firms] == [FirmType.IN_HOUSE]

    def test_add_law_firm_selects_it(self):
        form = NewCaseForm()
        form.add_law_firm(LawFirm.model_validate(firm_row("new")))

        assert form.law_firm_id == "new"


class TestCaseAssignmentForm:

    def assignment_row(self, assignment_id, user_id):
        return {"id": assignment_id, "case_id": "c1", "user_id": user_id, "role": "paralegal"}

    @pytest.mark.asyncio
    async def test_load_users_and_assignments(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/users", json=[
            {"id": "u1", "email": "a@example.com", "full_name": "Ada"},
            {"id": "u2", "email": "b@example.com", "full_name": "Ben"},
        ])
        httpx_mock.add_response(url=f"{base_url}/cases/c1/assignments", json=[self.assignment_row("a1", "u1")])
        form = CaseAssignmentForm(api, case_id="c1")

        result = await form.load()

        assert result.success
        assert [u.id for u in form.available_users()] == ["u2"]
        assert form.get_user_name("u1") == "Ada"
        assert form.get_user_name("nobody") == "Unknown User"

    @pytest.mark.asyncio
    async def test_load_users_failure(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/users", status_code=500)

        result = await CaseAssignmentForm(api, case_id="c1").load()

        assert result.error == "Failed to load users: HTTP 500"

    @pytest.mark.parametrize("user_id,role,message", [
        ("", "paralegal", "Please select both a user and a role"),
        ("u2", "", "Please select both a user and a role"),
        ("u2", "judge", "Unknown role: judge"),
        ("u1", "paralegal", "This user is already assigned to this case"),
    ])
    def test_validation(self, user_id, role, message):
        form = CaseAssignmentForm(case_id="c1", selected_user_id=user_id, selected_role=role)
        form.assignments = [CaseAssignment.model_validate(self.assignment_row("a1", "u1"))]

        assert list(form.validation_errors().values()) == [message]

    @pytest.mark.asyncio
    async def test_add_assignment_reloads(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/cases/c1/assignments", method="POST", json={"id": "a2"})
        httpx_mock.add_response(url=f"{base_url}/cases/c1/assignments", method="GET", json=[
            self.assignment_row("a2", "u2"),
        ])
        form = CaseAssignmentForm(api, case_id="c1", current_user_id="me",
                                  selected_user_id="u2", selected_role="lead_attorney")

        result = await form.add_assignment()

        assert result.success
        assert json.loads(httpx_mock.get_requests()[0].content) == {
            "user_id": "u2", "role": "lead_attorney", "assigned_by": "me"
        }
        assert form.selected_user_id == ""
        assert form.case_id == "c1"
        assert [a.id for a in form.assignments] == ["a2"]

    @pytest.mark.asyncio
    async def test_remove_assignment_failure(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/cases/c1/assignments/a1", method="DELETE", status_code=404)

        result = await CaseAssignmentForm(api, case_id="c1").remove_assignment("a1")

        assert result.error_type == NOT_FOUND
        assert result.error.startswith("Failed to remove assignment")

    def test_role_display_name(self):
        assert CaseAssignmentForm.get_role_display_name("associate_attorney") == "Associate Attorney"
        assert CaseAssignmentForm.get_role_display_name("other") == "other"


class TestNewTaskForm:

    def test_required_fields(self):
        errors = NewTaskForm(title="Draft brief").validation_errors()

        assert errors == {"required": "Please fill in all required fields."}

    def test_hours_must_be_numeric(self):
        form = NewTaskForm(title="Draft brief", assigned_to="u1", estimated_hours="two")

        assert form.validation_errors() == {"estimated_hours": "Estimated hours must be a number"}

    @pytest.mark.parametrize("hours", ["nan", "inf", "-Infinity"])
    @pytest.mark.asyncio
    async def test_non_finite_hours_are_not_sent(self, api, httpx_mock, hours):
        form = NewTaskForm(api, title="Draft brief", assigned_to="u1", estimated_hours=hours)

        result = await form.submit()

        assert result.error_type == VALIDATION_ERROR
        assert result.field_errors == {"estimated_hours": "Estimated hours must be a number"}
        assert httpx_mock.get_requests() == []

    def test_filter_users(self):
        form = NewTaskForm(users=[user("u1", "Ada Lovelace"), user("u2", "Ben", "ben@firm.example")])

        assert [u.id for u in form.filter_users("ada")] == ["u1"]
        assert [u.id for u in form.filter_users("FIRM")] == ["u2"]

    @pytest.mark.asyncio
    async def test_submit_payload(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/tasks", method="POST", json={"id": "t1", "title": "Draft brief"})
        form = NewTaskForm(api, title="Draft brief", assigned_to="u1", estimated_hours="2.5",
                           current_user_id="me", users=[user("u1", "Ada")])

        result = await form.submit()

        assert result.success
        body = json.loads(httpx_mock.get_request().content)
        assert body["estimated_hours"] == 2.5
        assert body["assigned_by"] == "me"
        assert body["due_date"] is None
        assert body["case_id"] is None
        assert body["priority"] == "medium"
        assert form.title == ""
        assert form.current_user_id == "me"
        assert len(form.users) == 1


class TestNewContractForm:

    def test_contract_number_format(self):
        assert generate_contract_number(date(2026, 1, 1)).startswith("CON-2026-")

    def test_required_fields(self):
        form = NewContractForm(title="NDA", contract_type_id="ct1", start_date="2025-01-01")

        assert form.validation_errors() == {"required": REQUIRED_MESSAGE}

    def test_vendor_selection(self):
        form = NewContractForm()
        vendor = Vendor(id="v1", name="Acme")

        form.add_vendor(vendor)
        form.add_vendor(vendor)
        assert form.vendor_ids == ["v1"]
        assert len(form.vendors) == 1

        form.remove_vendor("v1")
        assert form.vendor_ids == []
        assert len(form.vendors) == 1

    @pytest.mark.asyncio
    async def test_load_options_failure(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/contract-types", status_code=500)

        result = await NewContractForm(api).load_options()

        assert result.error == "Failed to load contract types, departments, and vendors: HTTP 500"

    @pytest.mark.asyncio
    async def test_submit(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/contracts", method="POST", json={
            "id": "k1", "contract_number": "CON-2025-1", "title": "NDA", "status": "active",
        })
        form = NewContractForm(api, title="NDA", contract_type_id="ct1", start_date="2025-01-01",
                               department_id="d1", vendor_ids=["v1", "v2"])

        result = await form.submit()

        assert result.success
        body = json.loads(httpx_mock.get_request().content)
        assert body["vendor_ids"] == ["v1", "v2"]
        assert body["status"] == "active"
        assert body["contract_number"].startswith("CON-")
        assert form.vendor_ids == []


class TestOrganizationForms:

    def test_department_fields_from_record(self):
        department = Department(id="d1", name="Litigation", description="Ada", email="lit@example.com")

        form = DepartmentForm(department=department)

        assert (form.name, form.head, form.email, form.phone) == ("Litigation", "Ada", "lit@example.com", "")
        assert form.is_editing

    @pytest.mark.asyncio
    async def test_department_edit_updates(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/departments/d1", method="PUT",
                                json={"id": "d1", "name": "Disputes"})
        form = DepartmentForm(api, department=Department(id="d1", name="Litigation"))
        form.name = "Disputes"

        result = await form.submit()

        assert result.success
        assert json.loads(httpx_mock.get_request().content) == {
            "name": "Disputes", "description": "", "email": "", "phone": ""
        }
        assert form.name == "Disputes"

    @pytest.mark.asyncio
    async def test_department_create_is_active(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/departments", method="POST", json={"id": "d2", "name": "Tax"})

        await DepartmentForm(api, name="Tax").submit()

        assert json.loads(httpx_mock.get_request().content)["status"] == "active"

    def test_department_name_required(self):
        assert DepartmentForm(name="  ").validation_errors() == {"name": "Department name is required"}

    def test_vendor_payload(self):
        form = ContractVendorForm(name="Acme", email="sales@acme.example")

        payload = form.build_payload()

        assert payload["company_type"] == "corporation"
        assert payload["status"] == "active"
        assert payload["email"] == "sales@acme.example"
        assert payload["vat_number"] is None

    def test_vendor_name_required(self):
        assert ContractVendorForm().validation_errors() == {"name": "Vendor name is required."}

    def test_law_firm_payload_is_trimmed(self):
        form = NewLawFirmForm(name="  Acme LLP ", city=" Leeds ", website="   ")

        assert form.build_payload() == {
            "name": "Acme LLP", "firm_type": "external", "status": "active", "city": "Leeds"
        }

    @pytest.mark.asyncio
    async def test_law_firm_submit(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/law-firms", method="POST", json=firm_row("f9"))

        result = await NewLawFirmForm(api, name="Acme LLP").submit()

        assert result.data.id == "f9"


class TestBudgetForm:

    def valid_form(self, api=None, **overrides):
        values = {"name": "Legal 2025", "start_date": "2025-01-01", "end_date": "2025-12-31", "total_amount": 1000}
        values.update(overrides)
        return BudgetForm(api, **values)

    def test_all_errors_reported(self):
        errors = BudgetForm().validation_errors()

        assert errors == {
            "name": "Budget name is required",
            "start_date": "Start date is required",
            "end_date": "End date is required",
            "total_amount": "Total amount must be greater than 0",
        }

    def test_end_before_start(self):
        errors = self.valid_form(end_date="2024-12-31").validation_errors()

        assert errors == {"end_date": "End date must be after start date"}

    def test_over_allocation(self):
        form = self.valid_form()
        form.add_allocation().category_id = "cat1"
        form.allocations[0].allocated_amount = 1500

        assert form.validation_errors() == {"allocations": "Total allocated amount cannot exceed total budget amount"}
        assert form.remaining_amount() == -500

        form.remove_allocation(0)
        assert form.validation_errors() == {}
        assert form.remaining_amount() == 1000

    def test_incomplete_allocation_message_wins(self):
        form = self.valid_form()
        form.add_allocation().allocated_amount = 1500

        assert form.validation_errors() == {
            "allocations": "All allocations must have a category and amount greater than 0"
        }

    def test_fields_from_budget(self):
        budget = Budget(id="b1", name="Ops", start_date="2025-01-01T00:00:00Z", end_date="2025-06-30T00:00:00Z",
                        total_amount=300, currency="EUR")

        form = BudgetForm(budget=budget)

        assert (form.start_date, form.end_date, form.currency) == ("2025-01-01", "2025-06-30", "EUR")

    @pytest.mark.asyncio
    async def test_create_with_allocations(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/budgets", method="POST", json={
            "id": "b1", "name": "Legal 2025", "start_date": "2025-01-01", "end_date": "2025-12-31",
            "total_amount": 1000,
        })
        for allocation_id in ("a1", "a2"):
            httpx_mock.add_response(url=f"{base_url}/budgets/b1/allocations", method="POST", json={
                "id": allocation_id, "budget_id": "b1", "category_id": "cat", "allocated_amount": 100,
            })
        form = self.valid_form(api)
        first = form.add_allocation()
        first.category_id, first.allocated_amount, first.notes = "cat1", 600, "Counsel"
        second = form.add_allocation()
        second.category_id, second.allocated_amount = "cat2", 400

        result = await form.submit()

        assert result.success
        requests = httpx_mock.get_requests()
        budget_body = json.loads(requests[0].content)
        assert budget_body["created_by"] == "system"
        assert budget_body["period_type"] == "yearly"
        assert json.loads(requests[1].content) == {"category_id": "cat1", "allocated_amount": 600.0, "notes": "Counsel"}
        assert json.loads(requests[2].content) == {"category_id": "cat2", "allocated_amount": 400.0}
        assert form.name == "Legal 2025"

    @pytest.mark.asyncio
    async def test_load_existing_allocations(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/budget/categories", json=[{"id": "cat1", "name": "Counsel"}])
        httpx_mock.add_response(url=f"{base_url}/budgets/b1/allocations", json=[
            {"id": "a1", "budget_id": "b1", "category_id": "cat1", "allocated_amount": 250},
        ])
        budget = Budget(id="b1", name="Ops", start_date="2025-01-01", end_date="2025-12-31", total_amount=300)
        form = BudgetForm(api, budget=budget)

        await form.load()

        assert form.total_allocated() == 250
        assert form.categories[0].name == "Counsel"


class TestExpenditureForm:

    def test_validation(self):
        errors = ExpenditureForm(budget_id="b1").validation_errors()

        assert errors == {
            "category_id": "Category is required",
            "title": "Title is required",
            "amount": "Amount must be greater than 0",
        }

    def test_defaults_to_today(self):
        assert ExpenditureForm(budget_id="b1").expense_date == date.today().isoformat()

    @pytest.mark.asyncio
    async def test_edit_updates_expenditure(self, api, base_url, httpx_mock):
        expenditure = BudgetExpenditure(id="e1", budget_id="b1", category_id="cat1", title="Fees", amount=50,
                                        expense_date="2025-02-02T10:00:00Z")
        httpx_mock.add_response(url=f"{base_url}/expenditures/e1", method="PUT", json={
            "id": "e1", "budget_id": "b1", "category_id": "cat1", "title": "Fees", "amount": 75,
            "expense_date": "2025-02-02",
        })
        form = ExpenditureForm(api, budget_id="b1", expenditure=expenditure)
        form.amount = 75

        result = await form.submit()

        assert result.data.amount == 75
        assert json.loads(httpx_mock.get_request().content) == {
            "category_id": "cat1", "title": "Fees", "amount": 75.0, "expense_date": "2025-02-02"
        }


class TestTimeEntryForm:

    @pytest.mark.parametrize("start,end,hours", [
        ("09:00", "10:30", 1.5),
        ("09:00", "09:20", 0.33),
        ("17:00", "09:00", 0),
        ("nine", "10:00", 0),
    ])
    def test_hours_between(self, start, end, hours):
        assert hours_between(start, end) == hours

    @pytest.mark.asyncio
    async def test_submit_keeps_times(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/timesheet", method="POST", json={
            "id": "t1", "entry_date": "2025-03-03", "start_time": "13:00", "end_time": "14:30",
            "category": "Research", "hours": 1.5,
        })
        form = TimeEntryForm(api, entry_date="2025-03-03", start_time="13:00", end_time="14:30",
                             category=TimesheetCategory.RESEARCH, description="Precedents", case_id="c1")

        result = await form.submit()

        assert result.success
        body = json.loads(httpx_mock.get_request().content)
        assert body["hours"] == 1.5
        assert body["category"] == "Research"
        assert body["case_id"] == "c1"
        assert "contract_id" not in body
        assert (form.start_time, form.end_time, form.category) == ("13:00", "14:30", TimesheetCategory.RESEARCH)
        assert form.description == ""
        assert form.case_id == ""

    def test_entry_date_required(self):
        assert TimeEntryForm(entry_date="").validation_errors() == {"entry_date": "Entry date is required"}
