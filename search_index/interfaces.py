"""Interfaces of the collaborators around the search indexes."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from search_index.indexes.base_index import SearchIndex


@dataclass
class IndexedDocument:
    """A built document and the id it is indexed under."""

    doc_id: str | None
    source: dict[str, Any]


class ICommonAttributesProvider(ABC):
    """Supplies fields shared by every indexed document, whatever the entity type."""

    @abstractmethod
    def get_common_attributes(self, *, entity: Any, entity_type: str) -> dict[str, Any]:
        """Return a fresh dict of shared fields for the given entity."""


class IDocumentIdResolver(ABC):
    """Assigns the identifier a document is indexed under."""

    @abstractmethod
    def resolve(self, search_index: "SearchIndex[Any]") -> str | None:
        """Return the document id, or None to let the search engine generate one."""


class IBulkTransport(ABC):
    """Sends built documents to the search engine in one bulk request."""

    @abstractmethod
    def send(
        self,
        *,
        index_name: str,
        documents: Sequence[IndexedDocument],
        pipeline_name: str | None = None,
    ) -> dict[str, Any]:
        """Index documents and return the bulk response.

        The response follows the OpenSearch bulk API: an `errors` flag and one
        entry per document under `items`.
        """
