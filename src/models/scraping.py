"""
Models for scraped legal content and the sources it comes from
"""

import json
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from models.base import Record
from models.enums import SourceType

# Backend source_type <-> client-facing type
SOURCE_TYPE_TO_CLIENT = {
    "case_law": "case-law",
    "legislation": "legislation",
    "regulation": "regulation",
    "gazette": "gazette",
}
CLIENT_TYPE_TO_SOURCE = {value: key for key, value in SOURCE_TYPE_TO_CLIENT.items()}


class ScrapedData(Record):
    id: str
    title: str
    content: Optional[str] = None
    source_type: Optional[SourceType] = None
    source_url: Optional[str] = None
    source_name: Optional[str] = None
    date_published: Optional[str] = None
    reference_number: Optional[str] = None
    jurisdiction: Optional[str] = None
    keywords: Optional[str] = None
    scraped_at: Optional[str] = None


class ScrapingSource(BaseModel):
    """Client-side view of a scraping source"""
    id: str
    name: str
    url: str
    type: Optional[str] = None
    enabled: bool = False
    selectors: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("selectors", mode="before")
    @classmethod
    def decode_selectors(cls, value):
        if not value:
            return {}
        if isinstance(value, str):
            return json.loads(value)
        return value

    @classmethod
    def from_backend(cls, row: Dict[str, Any]) -> "ScrapingSource":
        return cls(
            id=row["id"],
            name=row["name"],
            url=row["url"],
            type=SOURCE_TYPE_TO_CLIENT.get(row.get("source_type")),
            enabled=bool(row.get("is_active")),
            selectors=row.get("selectors"),
        )


class ScrapedDataStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int = 0
    by_type: Dict[str, int] = Field(default_factory=dict, alias="byType")
    by_source: Dict[str, int] = Field(default_factory=dict, alias="bySource")


class ScrapedDataPage(BaseModel):
    data: List[ScrapedData] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    pages: int = 1


class ScrapeJob(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    status: str
    job_id: Optional[str] = Field(None, alias="jobId")
