"""Registry selecting the search index for an entity."""

from dataclasses import dataclass
from typing import Any

from search_index.common_attributes import EntityTypeAttributesProvider
from search_index.entities.report_data import ReportData
from search_index.indexes.base_index import SearchIndex
from search_index.indexes.report_data import ReportDataIndex
from search_index.interfaces import ICommonAttributesProvider
from search_index.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Registration:
    """Search index registered for an entity class."""

    entity_type: str
    index_class: type[SearchIndex[Any]]


class SearchIndexRegistry:
    """Maps entity classes to the search index that builds their documents.

    Callers hand any registered entity to build_document() and get back a
    single document merging the common attributes with the fields of the
    entity's own search index.
    """

    def __init__(self, *, providers: list[ICommonAttributesProvider] | None = None) -> None:
        self._registrations: dict[type, Registration] = {}
        self._providers = list(providers or [])

    def register(
        self,
        *,
        entity_class: type,
        entity_type: str,
        index_class: type[SearchIndex[Any]],
    ) -> None:
        """Register the search index for an entity class, replacing any previous one."""
        if entity_class in self._registrations:
            logger.debug(f"Replacing search index for {entity_class.__name__}")
        self._registrations[entity_class] = Registration(entity_type=entity_type, index_class=index_class)
        logger.debug(f"Registered {index_class.__name__} for {entity_class.__name__} ({entity_type})")

    def add_provider(self, provider: ICommonAttributesProvider) -> None:
        """Append a common attributes provider, applied after the existing ones."""
        self._providers.append(provider)

    def entity_types(self) -> list[str]:
        """List registered entity type names."""
        return [registration.entity_type for registration in self._registrations.values()]

    def entity_type_of(self, entity: Any) -> str:
        """Return the registered entity type name of an entity."""
        return self._lookup(entity).entity_type

    def build(self, entity: Any) -> SearchIndex[Any]:
        """Wrap an entity in its registered search index."""
        return self._lookup(entity).index_class(entity)

    def build_document(self, entity: Any) -> dict[str, Any]:
        """Build the full document for an entity.

        Common attributes are applied first, in provider order, then the
        entity's search index writes its own fields over them.
        """
        return self.build(entity).build_search_index_doc(self.common_attributes(entity))

    def common_attributes(self, entity: Any) -> dict[str, Any]:
        """Collect the common attributes of an entity into a new document."""
        entity_type = self._lookup(entity).entity_type
        doc: dict[str, Any] = {}
        for provider in self._providers:
            doc.update(provider.get_common_attributes(entity=entity, entity_type=entity_type))
        return doc

    def _lookup(self, entity: Any) -> Registration:
        if entity is None:
            raise ValueError("Cannot select a search index for a None entity")
        registration = self._registrations.get(type(entity))
        if registration is None:
            raise ValueError(f"No search index registered for entity type '{type(entity).__name__}'")
        return registration


def default_registry(providers: list[ICommonAttributesProvider] | None = None) -> SearchIndexRegistry:
    """Create a registry with every built-in search index registered.

    Args:
        providers: Common attributes providers (default: entity type only)
    """
    registry = SearchIndexRegistry(
        providers=providers if providers is not None else [EntityTypeAttributesProvider()]
    )
    registry.register(entity_class=ReportData, entity_type="reportData", index_class=ReportDataIndex)
    return registry
