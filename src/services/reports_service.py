"""
Reports service - paginated report queries and exports
"""

import logging
from typing import Any, Dict, Optional

from models.report import ReportFilterOptions, ReportResponse
from services.base_service import ApiBoundService

logger = logging.getLogger(__name__)

REPORT_TYPES = ("cases", "financial", "activity", "performance", "compliance", "contracts")
EXPORT_FORMATS = ("csv", "pdf")

class ReportsService(ApiBoundService):
    """Client for /reports"""

    async def get_report(self, report_type: str, filters: Optional[Dict[str, Any]] = None) -> ReportResponse:
        """
        Fetch one page of a report

        Args:
            report_type: one of cases, financial, activity, performance, compliance, contracts
            filters: report filters plus page / limit; empty values are dropped

        Returns:
            ReportResponse with rows and paging counters
        """
        if report_type not in REPORT_TYPES:
            raise ValueError(f"Unknown report type: {report_type}")
        clean = {key: value for key, value in (filters or {}).items() if value}
        payload = await self.api.get(f"/reports/{report_type}", params=clean)
        return ReportResponse.model_validate(payload or {})

    async def get_case_summary_report(self, **filters: Any) -> ReportResponse:
        return await self.get_report("cases", filters)

    async def get_financial_summary_report(self, **filters: Any) -> ReportResponse:
        return await self.get_report("financial", filters)

    async def get_user_activity_report(self, **filters: Any) -> ReportResponse:
        return await self.get_report("activity", filters)

    async def get_performance_metrics_report(self, **filters: Any) -> ReportResponse:
        return await self.get_report("performance", filters)

    async def get_compliance_report(self, **filters: Any) -> ReportResponse:
        return await self.get_report("compliance", filters)

    async def get_contracts_report(self, **filters: Any) -> ReportResponse:
        return await self.get_report("contracts", filters)

    async def get_filter_options(self, report_type: str) -> ReportFilterOptions:
        payload = await self.api.get(f"/reports/filter-options/{report_type}")
        return ReportFilterOptions.model_validate(payload or {})

    async def export_report(
        self,
        report_type: str,
        export_format: str,
        filters: Optional[Dict[str, Any]] = None
    ) -> bytes:
        """Raw CSV or PDF bytes for a report"""
        if export_format not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported export format: {export_format}")
        params: Dict[str, Any] = {"format": export_format}
        params.update({key: value for key, value in (filters or {}).items() if value})
        logger.info(f"Exporting {report_type} report as {export_format}")
        return await self.api.get_bytes(f"/reports/export/{report_type}", params=params)

# Global service instance
_reports_service: Optional[ReportsService] = None

def get_reports_service() -> ReportsService:
    """Get the global reports service instance"""
    global _reports_service
    if _reports_service is None:
        _reports_service = ReportsService()
    return _reports_service
