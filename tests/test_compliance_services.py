"""
Tests for compliance runs, surveys, reminders and external users
"""

import json

import pytest

from models.compliance import SurveyAnswer
from models.enums import ComplianceRunStatus, ReminderType
from services.compliance_reminder_service import ComplianceReminderService
from services.compliance_service import ComplianceService
from services.external_users_service import ExternalUsersService


def run_row(**overrides):
    row = {"id": "run1", "title": "Annual ethics survey", "status": "draft", "dueDate": "2025-06-30"}
    row.update(overrides)
    return row


class TestComplianceService:

    @pytest.mark.asyncio
    async def test_runs_accept_camel_and_snake_keys(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/compliance/runs", json={"success": True, "data": [
            run_row(created_by_name="Ada", total_recipients=4, completed_surveys=1),
        ]})

        runs = await ComplianceService(api).get_compliance_runs()

        assert runs[0].due_date == "2025-06-30"
        assert runs[0].created_by_name == "Ada"
        assert runs[0].total_recipients == 4

    @pytest.mark.asyncio
    async def test_paused_recurring_run_is_listed(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/compliance/runs", json={"success": True, "data": [
            run_row(id="run2", status="paused", frequency="monthly", isRecurring=True),
            run_row(),
        ]})

        runs = await ComplianceService(api).get_compliance_runs()

        assert [run.status for run in runs] == [ComplianceRunStatus.PAUSED, ComplianceRunStatus.DRAFT]

    @pytest.mark.asyncio
    async def test_run_details(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/compliance/runs/run1", json={"data": {
            "run": run_row(status="active"),
            "questions": [{"id": "q1", "questionText": "Any conflicts?", "questionType": "yesno", "isRequired": True}],
            "recipients": [],
            "statistics": {"totalRecipients": 3, "completedSurveys": 2, "pendingSurveys": 1, "completionRate": 66.7},
        }})

        details = await ComplianceService(api).get_compliance_run_details("run1")

        assert details.run.status == ComplianceRunStatus.ACTIVE
        assert details.questions[0].is_required
        assert details.statistics.pending_surveys == 1

    @pytest.mark.asyncio
    async def test_survey_is_fetched_without_auth(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/compliance/survey/tok123", json={"data": {
            "run": run_row(status="active"), "questions": [],
        }})

        survey = await ComplianceService(api).get_compliance_survey("tok123")

        assert survey.run.title == "Annual ethics survey"
        assert "Authorization" not in httpx_mock.get_request().headers

    @pytest.mark.asyncio
    async def test_submit_survey_sends_camel_case(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/compliance/survey/tok123/submit", method="POST", json={"success": True})

        result = await ComplianceService(api).submit_compliance_survey("tok123", [
            SurveyAnswer(question_id="q1", answer="yes"),
            {"questionId": "q2", "score": 4, "comment": "Fine"},
        ])

        assert result == {"success": True}
        request = httpx_mock.get_request()
        assert "Authorization" not in request.headers
        assert json.loads(request.content) == {"responses": [
            {"questionId": "q1", "answer": "yes"},
            {"questionId": "q2", "score": 4, "comment": "Fine"},
        ]}

    @pytest.mark.asyncio
    async def test_download_survey_report(self, api, base_url, httpx_mock, tmp_path):
        httpx_mock.add_response(url=f"{base_url}/compliance/runs/run1/report", json={"data": {"completionRate": 50}})

        path = await ComplianceService(api).download_survey_report("run1", tmp_path / "reports")

        assert path.name == "compliance-survey-report-run1.json"
        assert json.loads(path.read_text(encoding="utf-8")) == {"completionRate": 50}

    @pytest.mark.asyncio
    async def test_activate_run(self, api, base_url, httpx_mock):
        httpx_mock.add_response(
            url=f"{base_url}/compliance/runs/run1/activate", method="POST", json={"success": True, "emailsSent": 3}
        )

        assert (await ComplianceService(api).activate_compliance_run("run1"))["emailsSent"] == 3


class TestComplianceReminderService:

    @pytest.mark.asyncio
    async def test_add_recipient_requires_record_id(self, api):
        with pytest.raises(ValueError, match="complianceRecordId is required"):
            await ComplianceReminderService(api).add_recipient({"email": "a@example.com", "name": "A"})

    @pytest.mark.asyncio
    async def test_add_recipient(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/compliance-records/r1/recipients", method="POST", json={"data": {
            "id": "rc1", "complianceRecordId": "r1", "email": "a@example.com", "name": "A",
        }})

        recipient = await ComplianceReminderService(api).add_recipient(
            {"complianceRecordId": "r1", "email": "a@example.com", "name": "A"}
        )

        assert recipient.compliance_record_id == "r1"

    @pytest.mark.asyncio
    async def test_unknown_confirmation_token(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/compliance-confirm/expired-token", status_code=404,
                                json={"error": "Invalid or expired token"})

        assert await ComplianceReminderService(api).get_confirmation_by_token("expired-token") is None

    @pytest.mark.asyncio
    async def test_confirmation_details(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/compliance-confirm/tok", json={"data": {
            "reminder": {"id": "rem1", "reminderType": "one_week", "status": "sent"},
            "complianceRecord": {"name": "VAT return"},
        }})

        confirmation = await ComplianceReminderService(api).get_confirmation_by_token("tok")

        assert confirmation.reminder.reminder_type == ReminderType.ONE_WEEK
        assert confirmation.compliance_record == {"name": "VAT return"}

    @pytest.mark.asyncio
    async def test_confirm_compliance(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/compliance-confirm/tok", method="POST", json={"success": True})

        confirmed = await ComplianceReminderService(api).confirm_compliance("tok", {
            "confirmed_by": "Ada", "confirmed_email": "ada@example.com", "confirmation_type": "renewed",
        })

        assert confirmed
        assert json.loads(httpx_mock.get_request().content) == {
            "confirmedBy": "Ada", "confirmedEmail": "ada@example.com", "confirmationType": "renewed",
        }

    @pytest.mark.asyncio
    async def test_schedule_reminders_failure(self, api, base_url, httpx_mock):
        httpx_mock.add_response(
            url=f"{base_url}/compliance-records/r1/schedule-reminders", method="POST", json={"success": False}
        )

        assert not await ComplianceReminderService(api).schedule_reminders("r1")


class TestExternalUsersService:

    @pytest.mark.asyncio
    async def test_list_and_delete(self, api, base_url, httpx_mock):
        httpx_mock.add_response(url=f"{base_url}/external-users", json={"data": [
            {"id": "x1", "name": "Auditor", "email": "audit@example.com", "organization": "Audit Co"},
        ]})
        httpx_mock.add_response(url=f"{base_url}/external-users/x1", method="DELETE", json={"success": True})

        service = ExternalUsersService(api)
        users = await service.get_external_users()

        assert users[0].organization == "Audit Co"
        assert await service.delete_external_user("x1")
