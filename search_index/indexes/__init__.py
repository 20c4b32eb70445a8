"""
Search indexes.

One search index per entity type, each turning its entity into the
document stored in OpenSearch.
"""

from search_index.indexes.base_index import SearchIndex
from search_index.indexes.registry import SearchIndexRegistry, default_registry
from search_index.indexes.report_data import ReportDataIndex

__all__ = [
    "ReportDataIndex",
    "SearchIndex",
    "SearchIndexRegistry",
    "default_registry",
]
