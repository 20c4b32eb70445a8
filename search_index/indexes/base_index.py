"""Base class for search indexes, the per-entity-type document builders."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class SearchIndex(ABC, Generic[T]):
    """Abstract base class turning one domain entity into a search document.

    Each entity type gets its own subclass, which decides which of the
    entity's fields end up in the document and how they are laid out.

    Subclasses must:
    - Implement build_search_index_doc_internal(), writing their fields into
      the document they are given and returning that same document

    The document passed in may already hold common attributes. Subclasses
    overwrite keys they own and leave every other key alone.
    """

    def __init__(self, entity: T) -> None:
        if entity is None:
            raise ValueError(f"{type(self).__name__} requires an entity, got None")
        self._entity = entity

    def get_entity(self) -> T:
        """Return the wrapped domain entity.

        Used by collaborators that need entity-level metadata, such as the
        document id, independently of the document itself.
        """
        return self._entity

    def build_search_index_doc(self, doc: dict[str, Any] | None = None) -> dict[str, Any]:
        """Build the document for the wrapped entity.

        Args:
            doc: Partially populated document to extend (default: a new empty dict)

        Returns:
            The document, including this entity type's fields
        """
        return self.build_search_index_doc_internal({} if doc is None else doc)

    @abstractmethod
    def build_search_index_doc_internal(self, doc: dict[str, Any]) -> dict[str, Any]:
        """Add this entity type's fields to doc.

        Args:
            doc: Document to write into, never None

        Returns:
            The same doc instance
        """
