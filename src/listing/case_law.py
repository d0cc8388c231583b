"""
Case law view - judgments from scraped legal resources

Court, judge, category and parties are not structured in scraped content;
they are pulled out of the judgment text with the patterns below.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from listing.query import Page, matches_search
from models.enums import SourceType
from models.scraping import ScrapedData
from services.api_service import ApiService
from services.scraping_service import ScrapingService

logger = logging.getLogger(__name__)

ALL_COURTS = "All Courts"
ALL_CATEGORIES = "All Categories"
UNKNOWN_COURT = "Unknown Court"
UNKNOWN_JUDGE = "Unknown Judge"
GENERAL_LAW = "General Law"
SUMMARY_LENGTH = 300

COURTS = [ALL_COURTS, "Constitutional Court", "Supreme Court", "Commercial Court", "High Court", UNKNOWN_COURT]
CATEGORIES = [
    ALL_CATEGORIES, "Criminal Law", "Civil Law", "Commercial Law",
    "Constitutional Law", "Administrative Law", GENERAL_LAW,
]

COURT_PATTERNS = [
    re.compile(r"constitutional court", re.IGNORECASE),
    re.compile(r"supreme court", re.IGNORECASE),
    re.compile(r"commercial court", re.IGNORECASE),
    re.compile(r"high court", re.IGNORECASE),
]
JUDGE_PATTERN = re.compile(r"(?:judge|justice|hon\.)\s+([a-zA-Z\s]+)", re.IGNORECASE)
CATEGORY_PATTERNS = [
    (re.compile(r"criminal", re.IGNORECASE), "Criminal Law"),
    (re.compile(r"civil", re.IGNORECASE), "Civil Law"),
    (re.compile(r"commercial|corporate", re.IGNORECASE), "Commercial Law"),
    (re.compile(r"constitutional", re.IGNORECASE), "Constitutional Law"),
    (re.compile(r"administrative", re.IGNORECASE), "Administrative Law"),
]
PLAINTIFF_PATTERN = re.compile(r"(?:plaintiff|applicant):\s*([a-zA-Z\s&]+)", re.IGNORECASE)
DEFENDANT_PATTERN = re.compile(r"(?:defendant|respondent):\s*([a-zA-Z\s&]+)", re.IGNORECASE)


def extract_court(content: str) -> str:
    """First court named in the text, as written"""
    for pattern in COURT_PATTERNS:
        match = pattern.search(content)
        if match:
            return match.group(0)
    return UNKNOWN_COURT


def extract_judge(content: str) -> str:
    match = JUDGE_PATTERN.search(content)
    return match.group(1).strip() if match else UNKNOWN_JUDGE


def determine_category(content: str) -> str:
    for pattern, category in CATEGORY_PATTERNS:
        if pattern.search(content):
            return category
    return GENERAL_LAW


def extract_parties(content: str) -> Tuple[Optional[str], Optional[str]]:
    """(plaintiff or applicant, defendant or respondent)"""
    plaintiff = PLAINTIFF_PATTERN.search(content)
    defendant = DEFENDANT_PATTERN.search(content)
    return (
        plaintiff.group(1).strip() if plaintiff else None,
        defendant.group(1).strip() if defendant else None,
    )


@dataclass
class CaseLawEntry:
    id: str
    title: str
    date: Optional[str]
    summary: str
    full_content: str
    court: str = UNKNOWN_COURT
    judge: str = UNKNOWN_JUDGE
    category: str = GENERAL_LAW
    citation: Optional[str] = None
    source_url: Optional[str] = None
    plaintiff: Optional[str] = None
    defendant: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_scraped(cls, item: ScrapedData) -> "CaseLawEntry":
        content = item.content or ""
        plaintiff, defendant = extract_parties(content)
        return cls(
            id=item.id,
            title=item.title,
            citation=item.reference_number,
            court=extract_court(content),
            date=item.date_published or item.scraped_at,
            summary=content[:SUMMARY_LENGTH] + "...",
            full_content=content,
            source_url=item.source_url,
            judge=extract_judge(content),
            category=determine_category(content),
            tags=[keyword.strip() for keyword in item.keywords.split(",")] if item.keywords else [],
            plaintiff=plaintiff,
            defendant=defendant,
        )


class CaseLawView:
    """Server-paginated judgments, filtered client-side by court and category"""

    per_page = 10

    def __init__(self, api: Optional[ApiService] = None):
        self._api = api
        self.search = ""
        self.court = ALL_COURTS
        self.category = ALL_CATEGORIES
        self.sort_order = "desc"
        self.page = 1
        self.entries: List[CaseLawEntry] = []
        self.total = 0
        self.total_pages = 0

    async def fetch(self, page: Optional[int] = None) -> List[CaseLawEntry]:
        if page is not None:
            self.page = page
        result = await ScrapingService(self._api).get_scraped_data(filters={
            "source_type": SourceType.CASE_LAW.value,
            "search": self.search or None,
            "page": self.page,
            "limit": self.per_page,
            "sort_by": "date_published",
            "sort_order": self.sort_order,
        })
        self.entries = [CaseLawEntry.from_scraped(item) for item in result.data]
        self.total = result.total
        self.total_pages = result.pages
        logger.info(f"Loaded {len(self.entries)} case law entries (page {self.page} of {self.total_pages})")
        return self.entries

    def filtered(self) -> List[CaseLawEntry]:
        court = self.court.lower()
        return [
            entry for entry in self.entries
            if (self.court == ALL_COURTS or entry.court.lower() == court)
            and (self.category == ALL_CATEGORIES or entry.category == self.category)
            and matches_search({"title": entry.title, "citation": entry.citation}, self.search)
        ]

    def current_page(self) -> Page[CaseLawEntry]:
        """The fetched page after client-side filters; paging counters come from the backend"""
        items = self.filtered()
        start = (self.page - 1) * self.per_page
        return Page(
            items=items,
            total=self.total,
            page=self.page,
            per_page=self.per_page,
            total_pages=self.total_pages,
            start_index=start,
            end_index=start + len(items),
        )
