"""OpenSearch transport for indexed documents."""

from search_index.opensearch.transport import DocumentSerializer, OpenSearchBulkTransport

__all__ = [
    "DocumentSerializer",
    "OpenSearchBulkTransport",
]
