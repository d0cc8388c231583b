"""
Document-related Pydantic models
"""

from typing import Optional
from models.base import Record
from models.enums import DocumentType, DocumentCategory, DocumentStatus


class Document(Record):
    id: str
    title: str
    file_name: str
    file_type: str = ""
    file_size: int = 0
    file_path: Optional[str] = None
    file_url: Optional[str] = None
    mime_type: Optional[str] = None
    document_type: DocumentType = DocumentType.OTHER
    category: DocumentCategory = DocumentCategory.OTHER
    status: DocumentStatus = DocumentStatus.FINAL
    uploaded_by: Optional[str] = None
    case_id: Optional[str] = None
    contract_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    # From JOIN with users
    uploaded_by_name: Optional[str] = None


class DocumentVersion(Record):
    id: str
    document_id: str
    version_number: int
    file_path: str
    file_size: int
    uploaded_by: str
    change_notes: Optional[str] = None
    created_at: Optional[str] = None
