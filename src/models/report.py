"""
Report and AI assistant response models
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ReportResponse(BaseModel):
    data: List[Dict[str, Any]] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 0
    pages: int = 0


class ReportFilterOptions(BaseModel):
    departments: Optional[List[str]] = None
    users: Optional[List[str]] = None
    statuses: Optional[List[str]] = None
    types: Optional[List[str]] = None
    categories: Optional[List[str]] = None


class ChatMessage(BaseModel):
    role: str
    content: str


class ChatReference(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    page_number: int = Field(alias="pageNumber")


class ChatResponse(BaseModel):
    content: str
    references: List[ChatReference] = Field(default_factory=list)
