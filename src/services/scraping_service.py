"""
Scraping service - client for legal-resource sources and scraped content

Reads degrade to empty results when the backend misbehaves so resource
pages still render; scraping itself raises ScrapingError.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from config import settings
from models.scraping import (
    CLIENT_TYPE_TO_SOURCE, ScrapedData, ScrapedDataPage, ScrapedDataStats, ScrapeJob, ScrapingSource,
)
from services.api_service import ApiConnectionError, ApiError
from services.base_service import ApiBoundService
from utils.error_handling import StructuredLogger

logger = logging.getLogger(__name__)

class ScrapingError(Exception):
    """Scrape request could not be started"""


def _to_source_type(client_type: str) -> str:
    return CLIENT_TYPE_TO_SOURCE.get(client_type, client_type)


class ScrapingService(ApiBoundService):
    """Client for /scraping-sources, /scraped-data and /scrape"""

    # Sources

    async def get_sources(self, source_type: Optional[str] = None) -> List[ScrapingSource]:
        """All sources, optionally only those of a client type such as 'case-law'"""
        try:
            rows = await self.api.get("/scraping-sources") or []
            sources = [ScrapingSource.from_backend(row) for row in rows]
        except (ApiError, ValidationError, ValueError, KeyError) as e:
            logger.error(f"Error fetching sources: {e}")
            return []
        if source_type:
            return [source for source in sources if source.type == source_type]
        return sources

    async def get_source(self, source_id: str) -> Optional[ScrapingSource]:
        try:
            row = await self.api.get(f"/scraping-sources/{source_id}")
            return ScrapingSource.from_backend(row) if row else None
        except (ApiError, ValidationError, ValueError, KeyError) as e:
            logger.error(f"Error fetching source {source_id}: {e}")
            return None

    async def create_source(
        self,
        name: str,
        url: str,
        source_type: str,
        selectors: Optional[Dict[str, Any]] = None
    ) -> Optional[ScrapingSource]:
        body = {
            "name": name,
            "url": url,
            "source_type": _to_source_type(source_type),
            "selectors": selectors or {},
        }
        try:
            row = await self.api.post("/scraping-sources", body)
            return ScrapingSource.from_backend(row) if row else None
        except (ApiError, ValidationError, ValueError, KeyError) as e:
            logger.error(f"Error creating source: {e}")
            return None

    async def update_source(
        self,
        source_id: str,
        name: Optional[str] = None,
        url: Optional[str] = None,
        source_type: Optional[str] = None,
        enabled: Optional[bool] = None,
        selectors: Optional[Dict[str, Any]] = None
    ) -> Optional[ScrapingSource]:
        """Send only the fields that were given"""
        body: Dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if url is not None:
            body["url"] = url
        if source_type is not None:
            body["source_type"] = _to_source_type(source_type)
        if enabled is not None:
            body["is_active"] = enabled
        if selectors is not None:
            body["selectors"] = selectors
        try:
            row = await self.api.put(f"/scraping-sources/{source_id}", body)
            return ScrapingSource.from_backend(row) if row else None
        except (ApiError, ValidationError, ValueError, KeyError) as e:
            logger.error(f"Error updating source {source_id}: {e}")
            return None

    async def delete_source(self, source_id: str) -> bool:
        try:
            await self.api.delete(f"/scraping-sources/{source_id}")
            return True
        except ApiError as e:
            logger.error(f"Error deleting source {source_id}: {e}")
            return False

    # Scraped data

    async def get_scraped_data(
        self,
        query: Optional[str] = None,
        filters: Optional[Dict[str, Any]] = None
    ) -> ScrapedDataPage:
        """
        Search scraped content

        Args:
            query: free-text search, sent as ``q``
            filters: extra params (source_type, search, page, limit, sort_by, sort_order ...)

        Returns:
            A page of results; a bare list from the backend becomes a single page
        """
        params: Dict[str, Any] = {"q": query}
        params.update(filters or {})
        try:
            payload = await self.api.get("/scraped-data", params=params)
            return self._to_page(payload)
        except (ApiError, ValidationError) as e:
            logger.error(f"Error fetching scraped data: {e}")
            return ScrapedDataPage()

    @staticmethod
    def _to_page(payload: Any) -> ScrapedDataPage:
        if not payload:
            return ScrapedDataPage()
        if isinstance(payload, list):
            rows = [ScrapedData.model_validate(row) for row in payload]
            return ScrapedDataPage(data=rows, total=len(rows), page=1, pages=1)
        rows = [ScrapedData.model_validate(row) for row in payload.get("data") or []]
        pagination = payload.get("pagination") or {}
        return ScrapedDataPage(
            data=rows,
            total=pagination.get("total", len(rows)),
            page=pagination.get("page", 1),
            pages=pagination.get("pages", pagination.get("totalPages", 1)),
        )

    async def get_scraped_data_by_id(self, data_id: str) -> Optional[ScrapedData]:
        try:
            payload = await self.api.get(f"/scraped-data/{data_id}")
            return ScrapedData.model_validate(payload) if payload else None
        except (ApiError, ValidationError) as e:
            logger.error(f"Error fetching scraped data {data_id}: {e}")
            return None

    async def get_scraped_data_stats(self) -> Optional[ScrapedDataStats]:
        try:
            payload = await self.api.get("/scraped-data/stats")
            return ScrapedDataStats.model_validate(payload) if payload else None
        except (ApiError, ValidationError) as e:
            logger.error(f"Error fetching scraped data stats: {e}")
            return None

    # Scraping

    async def check_backend_health(self) -> bool:
        try:
            response = await self.api.send("GET", "/health", timeout=settings.HEALTH_TIMEOUT)
        except ApiError as e:
            logger.error(f"Health check failed: {e}")
            return False
        logger.info(f"Health check response: {response.status_code}")
        return response.status_code == 200

    async def scrape_content(
        self,
        source_id: str,
        search_params: Optional[Dict[str, str]] = None
    ) -> ScrapeJob:
        """
        Ask the backend to scrape a source

        Args:
            source_id: UUID of an enabled source
            search_params: source-specific search terms

        Returns:
            ScrapeJob; status 'queued' with a job id when the backend accepted it (202)

        Raises:
            ScrapingError: disabled source, backend down, or request rejected
        """
        source = await self.get_source(source_id)
        if source is None or not source.enabled:
            raise ScrapingError("Invalid or disabled source")

        if not await self.check_backend_health():
            raise ScrapingError("Backend service is not available")

        body = {"source": source.model_dump(mode="json"), "searchParams": search_params}
        try:
            response = await self.api.send("POST", "/scrape", data=body)
        except ApiConnectionError as e:
            StructuredLogger.log_error("scraping_error", "Cannot reach scraping service", exception=e,
                                       extra_context={"source_id": source_id}, include_traceback=False)
            raise ScrapingError("Cannot connect to scraping service. Please ensure the backend is running.") from e
        except ApiError as e:
            StructuredLogger.log_error("scraping_error", "Scrape request rejected", exception=e,
                                       extra_context={"source_id": source_id}, include_traceback=False)
            raise ScrapingError(f"Scraping failed: {e.message or 'Unknown error'}") from e

        payload = self.api.decode_body(response) or {}
        if not isinstance(payload, dict):
            payload = {"message": payload}
        logger.info(f"Scrape response: {response.status_code}")
        if response.status_code == 202:
            return ScrapeJob(status="queued", job_id=payload.get("jobId"))
        return ScrapeJob.model_validate({"status": "completed", **payload})

    async def get_scraping_status(self, job_id: str) -> Dict[str, Any]:
        try:
            return await self.api.get(f"/scrape/status/{job_id}") or {}
        except ApiError as e:
            logger.error(f"Error getting scraping status for {job_id}: {e}")
            raise ScrapingError("Failed to get scraping status") from e

# Global service instance
_scraping_service: Optional[ScrapingService] = None

def get_scraping_service() -> ScrapingService:
    """Get the global scraping service instance"""
    global _scraping_service
    if _scraping_service is None:
        _scraping_service = ScrapingService()
    return _scraping_service
