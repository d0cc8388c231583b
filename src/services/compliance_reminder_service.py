"""
Compliance reminder service - reminder recipients and confirmation links
"""

import logging
from typing import List, Optional

from models.compliance import (
    ComplianceConfirmation, ComplianceReminderRecipient, ConfirmComplianceData,
)
from services.api_service import ApiError, unwrap
from services.base_service import ApiBoundService, Payload, to_payload

logger = logging.getLogger(__name__)

class ComplianceReminderService(ApiBoundService):
    """Client for reminder scheduling on general compliance records"""

    async def get_recipients(self, compliance_record_id: str) -> List[ComplianceReminderRecipient]:
        payload = await self.api.get(f"/compliance-records/{compliance_record_id}/recipients")
        return [ComplianceReminderRecipient.model_validate(row) for row in unwrap(payload) or []]

    async def add_recipient(self, data: Payload) -> ComplianceReminderRecipient:
        body = to_payload(data)
        record_id = body.get("complianceRecordId") or body.get("compliance_record_id")
        if not record_id:
            raise ValueError("complianceRecordId is required")
        payload = await self.api.post(f"/compliance-records/{record_id}/recipients", body)
        return ComplianceReminderRecipient.model_validate(unwrap(payload))

    async def remove_recipient(self, recipient_id: str) -> bool:
        payload = await self.api.delete(f"/compliance-records/recipients/{recipient_id}")
        return bool(payload and payload.get("success"))

    async def schedule_reminders(self, compliance_record_id: str) -> bool:
        payload = await self.api.post(f"/compliance-records/{compliance_record_id}/schedule-reminders")
        return bool(payload and payload.get("success"))

    async def confirm_compliance(self, token: str, data: Payload) -> bool:
        body = to_payload(ConfirmComplianceData.model_validate(to_payload(data)))
        payload = await self.api.post(f"/compliance-confirm/{token}", body)
        return bool(payload and payload.get("success"))

    async def get_confirmation_by_token(self, token: str) -> Optional[ComplianceConfirmation]:
        """Details behind a confirmation link; None when the token is unknown or expired"""
        try:
            payload = await self.api.get(f"/compliance-confirm/{token}")
        except ApiError as e:
            logger.warning(f"Confirmation lookup failed for token {token[:8]}...: {e}")
            return None
        data = unwrap(payload)
        if not data:
            return None
        return ComplianceConfirmation.model_validate(data)

    async def send_reminder_emails(self) -> bool:
        """Trigger the backend's reminder job"""
        payload = await self.api.post("/compliance-reminders/send")
        return bool(payload and payload.get("success"))

# Global service instance
_compliance_reminder_service: Optional[ComplianceReminderService] = None

def get_compliance_reminder_service() -> ComplianceReminderService:
    """Get the global compliance reminder service instance"""
    global _compliance_reminder_service
    if _compliance_reminder_service is None:
        _compliance_reminder_service = ComplianceReminderService()
    return _compliance_reminder_service
