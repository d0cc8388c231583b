"""
Base Pydantic models shared by all backend records
"""

from typing import Any, Dict, List, Tuple
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Backend row. Unknown columns (JOINed names, counters) are kept."""
    model_config = ConfigDict(extra="allow", use_enum_values=False)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for a request body, dropping unset optional fields"""
        return self.model_dump(mode="json", exclude_none=True)


class CamelRecord(Record):
    """Record whose JSON keys are camelCase (compliance endpoints)"""
    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)


class FilterOption(BaseModel):
    """Value/label pair for a select box"""
    value: str
    label: str


def build_options(pairs: List[Tuple[str, str]]) -> List[FilterOption]:
    return [FilterOption(value=value, label=label) for value, label in pairs]
