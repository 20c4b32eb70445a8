"""Document id resolvers."""

from typing import Any

from search_index.indexes.base_index import SearchIndex
from search_index.interfaces import IDocumentIdResolver


class EntityIdResolver(IDocumentIdResolver):
    """Use the entity's own `id` attribute as the document id."""

    def resolve(self, search_index: SearchIndex[Any]) -> str | None:
        entity_id = getattr(search_index.get_entity(), "id", None)
        return None if entity_id is None else str(entity_id)
