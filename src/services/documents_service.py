"""
Documents service - uploads, listings and display helpers for documents
"""

import logging
import math
import mimetypes
from pathlib import Path
from typing import List, Optional, Union

from config import settings
from models.document import Document
from models.enums import DocumentType, DocumentCategory
from services.api_service import ApiService
from services.base_service import BaseResourceService

logger = logging.getLogger(__name__)

FILE_SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]

class DocumentsService(BaseResourceService[Document]):
    """Service for case, contract and general documents"""

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__("documents", Document, api)

    async def get_all_documents(self) -> List[Document]:
        return await self.list()

    async def get_case_documents(self, case_id: str) -> List[Document]:
        return self.parse_list(await self.api.get(f"/cases/{case_id}/documents"))

    async def get_contract_documents(self, contract_id: str) -> List[Document]:
        return self.parse_list(await self.api.get(f"/contracts/{contract_id}/documents"))

    async def _upload(
        self,
        endpoint: str,
        file_path: Union[str, Path],
        title: str,
        document_type: Union[DocumentType, str],
        category: Union[DocumentCategory, str],
        uploaded_by: str
    ) -> Document:
        path = Path(file_path)
        mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        fields = {
            "title": title,
            "document_type": DocumentType(document_type).value,
            "category": DocumentCategory(category).value,
            "uploaded_by": uploaded_by,
        }
        logger.info(f"Uploading {path.name} ({mime_type}) to {endpoint}")
        with path.open("rb") as handle:
            payload = await self.api.post(
                endpoint,
                data=fields,
                files={"file": (path.name, handle.read(), mime_type)}
            )
        return self.parse(payload)

    async def upload_document(
        self,
        case_id: str,
        file_path: Union[str, Path],
        title: str,
        document_type: Union[DocumentType, str],
        category: Union[DocumentCategory, str],
        uploaded_by: str
    ) -> Document:
        """
        Upload a document attached to a case

        Args:
            case_id: UUID of the case
            file_path: local file to send
            title: display title
            document_type: kind of document
            category: filing category
            uploaded_by: UUID of the uploading user

        Returns:
            The stored document record
        """
        return await self._upload(
            f"/cases/{case_id}/documents/upload", file_path, title, document_type, category, uploaded_by
        )

    async def upload_contract_document(
        self,
        contract_id: str,
        file_path: Union[str, Path],
        title: str,
        document_type: Union[DocumentType, str],
        category: Union[DocumentCategory, str],
        uploaded_by: str
    ) -> Document:
        return await self._upload(
            f"/contracts/{contract_id}/documents/upload", file_path, title, document_type, category, uploaded_by
        )

    async def upload_general_document(
        self,
        file_path: Union[str, Path],
        title: str,
        document_type: Union[DocumentType, str],
        category: Union[DocumentCategory, str],
        uploaded_by: str
    ) -> Document:
        return await self._upload(
            "/documents/upload", file_path, title, document_type, category, uploaded_by
        )

    async def delete_document(self, document_id: str) -> None:
        await self.delete(document_id)

    @staticmethod
    def get_document_url(document: Document, public_base_url: Optional[str] = None) -> str:
        """Absolute URL for a document; relative paths are served from the public origin"""
        if not document.file_url:
            return ""
        if document.file_url.startswith("/"):
            return f"{public_base_url or settings.PUBLIC_BASE_URL}{document.file_url}"
        return document.file_url

    @staticmethod
    def get_file_icon(file_type: str) -> str:
        if "pdf" in file_type:
            return "📄"
        if "word" in file_type or "document" in file_type:
            return "📝"
        if "powerpoint" in file_type or "presentation" in file_type:
            return "📊"
        if "image" in file_type:
            return "🖼️"
        if "text" in file_type:
            return "📄"
        return "📎"

    @staticmethod
    def format_file_size(size: int) -> str:
        """1536 -> '1.5 KB'"""
        if size <= 0:
            return "0 Bytes"
        exponent = int(math.floor(math.log(size) / math.log(1024)))
        exponent = max(0, min(exponent, len(FILE_SIZE_UNITS) - 1))
        value = f"{size / 1024 ** exponent:.2f}".rstrip("0").rstrip(".")
        return f"{value} {FILE_SIZE_UNITS[exponent]}"

# Global service instance
_documents_service: Optional[DocumentsService] = None

def get_documents_service() -> DocumentsService:
    """Get the global documents service instance"""
    global _documents_service
    if _documents_service is None:
        _documents_service = DocumentsService()
    return _documents_service
