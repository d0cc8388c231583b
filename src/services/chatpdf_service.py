"""
ChatPDF service - AI assistant conversations grounded on uploaded documents
"""

import logging
import mimetypes
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from models.report import ChatMessage, ChatResponse
from services.base_service import ApiBoundService

logger = logging.getLogger(__name__)

NO_CONTENT = "No response content"

class ChatPdfError(Exception):
    """Document chat answered without the expected data"""


def source_id_from(payload: Any) -> str:
    source_id = payload.get("sourceId") if isinstance(payload, dict) else None
    if not source_id:
        raise ChatPdfError("Document chat did not return a source id")
    return source_id


class ChatPdfService(ApiBoundService):
    """Client for /chatpdf; sources are identified by the id the backend returns"""

    async def add_source_from_url(self, url: str) -> str:
        payload = await self.api.post("/chatpdf/add-url", {"url": url})
        return source_id_from(payload)

    async def upload_file(self, file_path: Union[str, Path]) -> str:
        path = Path(file_path)
        mime_type = mimetypes.guess_type(path.name)[0] or "application/pdf"
        logger.info(f"Uploading {path.name} to document chat")
        with path.open("rb") as handle:
            payload = await self.api.post(
                "/chatpdf/add-file",
                files={"file": (path.name, handle.read(), mime_type)}
            )
        return source_id_from(payload)

    async def send_message(
        self,
        source_id: str,
        messages: List[Union[ChatMessage, Dict[str, Any]]],
        reference_sources: bool = True
    ) -> ChatResponse:
        """
        Ask a question about a source

        Args:
            source_id: id returned by add_source_from_url / upload_file
            messages: conversation so far, oldest first
            reference_sources: ask for page references in the answer

        Returns:
            ChatResponse with the answer text and page references
        """
        body = {
            "sourceId": source_id,
            "messages": [ChatMessage.model_validate(m).model_dump() for m in messages],
            "referenceSources": reference_sources,
            "stream": False,
        }
        payload = await self.api.post("/chatpdf/chat", body) or {}
        return ChatResponse.model_validate({
            "content": payload.get("content") or NO_CONTENT,
            "references": payload.get("references") or [],
        })

    async def delete_source(self, source_id: str) -> None:
        await self.delete_multiple_sources([source_id])

    async def delete_multiple_sources(self, source_ids: List[str]) -> None:
        await self.api.delete("/chatpdf/sources", data={"sources": source_ids})

# Global service instance
_chatpdf_service: Optional[ChatPdfService] = None

def get_chatpdf_service() -> ChatPdfService:
    """Get the global ChatPDF service instance"""
    global _chatpdf_service
    if _chatpdf_service is None:
        _chatpdf_service = ChatPdfService()
    return _chatpdf_service
