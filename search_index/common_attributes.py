"""Common attributes providers."""

from typing import Any

from search_index.interfaces import ICommonAttributesProvider


class EntityTypeAttributesProvider(ICommonAttributesProvider):
    """Stamps every document with the type of the entity it was built from."""

    def get_common_attributes(self, *, entity: Any, entity_type: str) -> dict[str, Any]:  # noqa: ARG002
        return {"entityType": entity_type}
