"""Report data search index."""

from typing import Any

from search_index.entities.report_data import ReportData
from search_index.indexes.base_index import SearchIndex


class ReportDataIndex(SearchIndex[ReportData]):
    """Search index for analytics report data.

    Fields are written through as they are on the entity. The payload is not
    flattened: the search engine's own mapping decides how to index it.
    """

    def build_search_index_doc_internal(self, doc: dict[str, Any]) -> dict[str, Any]:
        # Filled in by the document id resolver at ingestion time
        doc["id"] = None
        doc["timestamp"] = self._entity.timestamp
        doc["reportDataType"] = self._entity.report_data_type
        doc["data"] = self._entity.data
        return doc
