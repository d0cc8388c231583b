"""
Base service layer for REST resource access
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from services.api_service import ApiService, get_api_service

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

Payload = Union[BaseModel, Dict[str, Any]]


def to_payload(data: Payload) -> Dict[str, Any]:
    """Request body from a model or a plain dict"""
    if isinstance(data, BaseModel):
        to_payload_method = getattr(data, "to_payload", None)
        if to_payload_method is not None:
            return to_payload_method()
        return data.model_dump(mode="json", exclude_none=True)
    return dict(data)


class ApiBoundService:
    """Service holding an optional ApiService, falling back to the global one"""

    def __init__(self, api: Optional[ApiService] = None):
        self._api = api

    @property
    def api(self) -> ApiService:
        return self._api or get_api_service()


class BaseResourceService(ApiBoundService, Generic[T]):
    """CRUD over one REST collection, validating rows into ``model``"""

    def __init__(self, resource_path: str, model: Type[T], api: Optional[ApiService] = None):
        super().__init__(api)
        self.resource_path = "/" + resource_path.strip("/")
        self.model = model
        logger.debug(f"BaseResourceService initialized for resource: {self.resource_path}")

    def _item_path(self, record_id: str) -> str:
        return f"{self.resource_path}/{record_id}"

    def parse(self, payload: Any) -> T:
        return self.model.model_validate(payload)

    def parse_list(self, payload: Any) -> List[T]:
        if not payload:
            return []
        return [self.model.model_validate(row) for row in payload]

    async def list(self, params: Optional[Dict[str, Any]] = None) -> List[T]:
        """
        Fetch every record of the resource

        Args:
            params: optional query filters

        Returns:
            List of parsed records
        """
        return self.parse_list(await self.api.get(self.resource_path, params=params))

    async def get(self, record_id: str) -> T:
        return self.parse(await self.api.get(self._item_path(record_id)))

    async def create(self, data: Payload) -> T:
        body = to_payload(data)
        logger.info(f"Creating record in {self.resource_path}")
        return self.parse(await self.api.post(self.resource_path, body))

    async def update(self, record_id: str, data: Payload) -> T:
        body = to_payload(data)
        logger.info(f"Updating {self._item_path(record_id)}")
        return self.parse(await self.api.put(self._item_path(record_id), body))

    async def delete(self, record_id: str) -> None:
        logger.info(f"Deleting {self._item_path(record_id)}")
        await self.api.delete(self._item_path(record_id))
