"""
Compliance service - compliance runs and the surveys sent to recipients
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from models.compliance import ComplianceRun, ComplianceRunDetails, SurveyAnswer, SurveyData
from services.api_service import unwrap
from services.base_service import ApiBoundService, Payload, to_payload

logger = logging.getLogger(__name__)

class ComplianceService(ApiBoundService):
    """Client for /compliance runs, public surveys and reports"""

    async def create_compliance_run(self, data: Payload) -> ComplianceRun:
        """
        Create a run with its questions and target departments

        Args:
            data: title, description, frequency, startDate, dueDate,
                departmentIds and questions

        Returns:
            The created run
        """
        body = to_payload(data)
        logger.info(f"Creating compliance run: {body.get('title')}")
        return ComplianceRun.model_validate(unwrap(await self.api.post("/compliance/runs", body)))

    async def get_compliance_runs(self) -> List[ComplianceRun]:
        payload = await self.api.get("/compliance/runs")
        return [ComplianceRun.model_validate(row) for row in unwrap(payload) or []]

    async def get_compliance_run_details(self, run_id: str) -> ComplianceRunDetails:
        payload = await self.api.get(f"/compliance/runs/{run_id}")
        return ComplianceRunDetails.model_validate(unwrap(payload))

    async def activate_compliance_run(self, run_id: str) -> Dict[str, Any]:
        """Activate a run; the backend emails every recipient"""
        logger.info(f"Activating compliance run {run_id}")
        return await self.api.post(f"/compliance/runs/{run_id}/activate") or {}

    async def get_compliance_survey(self, token: str) -> SurveyData:
        payload = await self.api.get(f"/compliance/survey/{token}", skip_auth=True)
        return SurveyData.model_validate(unwrap(payload))

    async def submit_compliance_survey(
        self,
        token: str,
        responses: List[Union[SurveyAnswer, Dict[str, Any]]]
    ) -> Dict[str, Any]:
        body = {"responses": [to_payload(SurveyAnswer.model_validate(to_payload(r))) for r in responses]}
        return await self.api.post(f"/compliance/survey/{token}/submit", body, skip_auth=True) or {}

    async def get_survey_responses(self, run_id: str) -> Any:
        return unwrap(await self.api.get(f"/compliance/runs/{run_id}/responses"))

    async def generate_survey_report(self, run_id: str) -> Any:
        return unwrap(await self.api.get(f"/compliance/runs/{run_id}/report"))

    async def share_survey_report(self, run_id: str, email: str, message: Optional[str] = None) -> Dict[str, Any]:
        payload = await self.api.post(
            f"/compliance/runs/{run_id}/share-report",
            {"email": email, "message": message}
        )
        return payload or {}

    async def download_survey_report(self, run_id: str, directory: Union[str, Path] = ".") -> Path:
        """Write the run's report as indented JSON and return the file path"""
        report = await self.generate_survey_report(run_id)
        path = Path(directory) / f"compliance-survey-report-{run_id}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        logger.info(f"Saved compliance survey report: {path}")
        return path

# Global service instance
_compliance_service: Optional[ComplianceService] = None

def get_compliance_service() -> ComplianceService:
    """Get the global compliance service instance"""
    global _compliance_service
    if _compliance_service is None:
        _compliance_service = ComplianceService()
    return _compliance_service
