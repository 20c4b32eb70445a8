"""Transform typed domain entities into OpenSearch documents."""

from search_index.entities import ReportData, ReportDataType
from search_index.indexes import ReportDataIndex, SearchIndex, SearchIndexRegistry, default_registry

__all__ = [
    "ReportData",
    "ReportDataIndex",
    "ReportDataType",
    "SearchIndex",
    "SearchIndexRegistry",
    "default_registry",
]
