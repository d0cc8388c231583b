"""
Client-side search and pagination over fetched records
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterable, List, Optional, Sequence, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def record_values(record: Any) -> Dict[str, Any]:
    """Field values of a model (extras included) or a dict, JSON-typed"""
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json")
    return dict(record)


def matches_search(record: Any, query: Optional[str], fields: Optional[Iterable[str]] = None) -> bool:
    """
    Case-insensitive substring match

    Args:
        record: model or dict
        query: search text; empty matches everything
        fields: fields to look at, every non-empty value when None

    Returns:
        True when any looked-at value contains the query
    """
    if not query:
        return True
    needle = query.lower()
    values = record_values(record)
    if fields is not None:
        candidates = [values.get(name) for name in fields]
    else:
        candidates = list(values.values())
    return any(value is not None and needle in str(value).lower() for value in candidates)


@dataclass
class Page(Generic[T]):
    """One page of a filtered list"""
    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    per_page: int = 0
    total_pages: int = 0
    start_index: int = 0
    end_index: int = 0

    @property
    def showing_text(self) -> str:
        if not self.items:
            return f"Showing 0 of {self.total} results"
        return f"Showing {self.start_index + 1} to {self.end_index} of {self.total} results"


def paginate(items: Sequence[T], page: int = 1, per_page: int = 10) -> Page[T]:
    """Slice ``items`` into 1-based pages; per_page <= 0 shows everything"""
    total = len(items)
    page = max(page, 1)
    if per_page <= 0:
        return Page(items=list(items), total=total, page=1, per_page=total,
                    total_pages=1 if total else 0, start_index=0, end_index=total)

    start = (page - 1) * per_page
    end = min(start + per_page, total)
    return Page(
        items=list(items[start:end]),
        total=total,
        page=page,
        per_page=per_page,
        total_pages=math.ceil(total / per_page),
        start_index=start,
        end_index=max(end, start),
    )
