"""Bulk transport backed by an opensearch-py client."""

from collections.abc import Sequence
from enum import Enum
from typing import Any

from opensearchpy import OpenSearch
from opensearchpy.serializer import JSONSerializer
from pydantic import BaseModel

from search_index.interfaces import IBulkTransport, IndexedDocument


class DocumentSerializer(JSONSerializer):
    """JSON serializer for report payloads.

    Extends the opensearch-py serializer (dates, UUIDs, decimals) with
    pydantic models and enums, which analytics payloads may carry.
    """

    def default(self, data: Any) -> Any:
        if isinstance(data, BaseModel):
            return data.model_dump(mode="json", by_alias=True)
        if isinstance(data, Enum):
            return data.value
        return super().default(data)


class OpenSearchBulkTransport(IBulkTransport):
    """Index documents through the bulk API of an existing OpenSearch client.

    Building and authenticating the client is left to the caller.
    """

    def __init__(self, *, client: OpenSearch, serializer: JSONSerializer | None = None) -> None:
        self._client = client
        self._serializer = serializer or DocumentSerializer()

    def build_body(self, *, index_name: str, documents: Sequence[IndexedDocument]) -> str:
        """Create the newline-delimited bulk body for documents.

        Documents without an id are sent without `_id` so OpenSearch generates one.

        Raises:
            SerializationError: If a document holds a value that cannot be turned into JSON
        """
        lines: list[str] = []
        for document in documents:
            action: dict[str, Any] = {"_index": index_name}
            if document.doc_id is not None:
                action["_id"] = document.doc_id
            lines.append(self._serializer.dumps({"index": action}))
            lines.append(self._serializer.dumps(document.source))
        return "\n".join(lines) + "\n"

    def send(
        self,
        *,
        index_name: str,
        documents: Sequence[IndexedDocument],
        pipeline_name: str | None = None,
    ) -> dict[str, Any]:
        params = {}
        if pipeline_name:
            params["pipeline"] = pipeline_name
        body = self.build_body(index_name=index_name, documents=documents)
        return self._client.bulk(body=body, params=params)
