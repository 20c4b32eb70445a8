"""Report data domain entity."""

from enum import StrEnum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ReportDataType(StrEnum):
    """Analytic reports a report data record can belong to."""

    ENTITY_REPORT_DATA = "entityReportData"
    WEB_ANALYTIC_USER_ACTIVITY_REPORT_DATA = "webAnalyticUserActivityReportData"
    WEB_ANALYTIC_ENTITY_VIEW_REPORT_DATA = "webAnalyticEntityViewReportData"
    RAW_COST_ANALYSIS_REPORT_DATA = "rawCostAnalysisReportData"
    AGGREGATED_COST_ANALYSIS_REPORT_DATA = "aggregatedCostAnalysisReportData"


class ReportData(BaseModel):
    """A timestamped analytic record produced by the analytics subsystem.

    The payload in `data` is owned by the analytics subsystem and is never
    interpreted here. Every field may be missing; well-formedness is checked
    upstream.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID | None = None
    timestamp: int | None = None
    # Report types unknown to this enum are kept as plain strings
    report_data_type: ReportDataType | str | None = Field(default=None, alias="reportDataType")
    data: Any = None
