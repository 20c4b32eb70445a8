"""Bulk ingestion of entities into a search index."""

from collections.abc import Sequence
from typing import Any

from search_index.config import IndexingSettings
from search_index.ids import EntityIdResolver
from search_index.indexes.registry import SearchIndexRegistry, default_registry
from search_index.interfaces import IBulkTransport, IDocumentIdResolver, IndexedDocument
from search_index.logging import get_logger

logger = get_logger(__name__)


def build_documents(
    *,
    entities: Sequence[Any],
    registry: SearchIndexRegistry,
    id_resolver: IDocumentIdResolver,
) -> list[IndexedDocument]:
    """Build the documents for a sequence of entities.

    The resolved id overwrites the document's `id` field unless it is None.
    """
    documents: list[IndexedDocument] = []
    for entity in entities:
        search_index = registry.build(entity)
        doc_id = id_resolver.resolve(search_index)
        source = search_index.build_search_index_doc(registry.common_attributes(entity))
        if doc_id is not None:
            source["id"] = doc_id
        documents.append(IndexedDocument(doc_id=doc_id, source=source))
    return documents


def _parse_bulk_errors(*, response: dict[str, Any], batch_num: int) -> None:
    """Raise if a bulk response holds failed items. Every item error fails the batch."""
    if not response.get("errors"):
        return

    errors: dict[str, dict[str | None, Any]] = {}
    for item in response["items"]:
        result = item.get("index")
        if result is None or "error" not in result:
            continue
        errors.setdefault(result["error"]["type"], {})[result.get("_id")] = result["error"]

    error_count = sum(len(failed) for failed in errors.values())
    if error_count > 0:
        logger.warning(errors)
        raise Exception(f"Batch {batch_num} has {error_count} errors ({list(errors)})")


def ingest(
    *,
    entities: Sequence[Any],
    id_resolver: IDocumentIdResolver | None = None,
    registry: SearchIndexRegistry | None = None,
    settings: IndexingSettings,
    transport: IBulkTransport,
) -> int:
    """Index entities through a bulk transport.

    Args:
        entities: Entities to index, each with a search index in the registry
        id_resolver: Document id resolver (default: the entity's own id)
        registry: Search index registry (default: built-in search indexes)
        settings: Target index, batch size and ingest pipeline
        transport: Bulk transport the batches are sent through

    Returns:
        Number of documents indexed

    Raises:
        ValueError: If an entity has no search index
        Exception: If a batch comes back with failed items; later batches are not sent
    """
    if not entities:
        logger.info("No entities to ingest")
        return 0

    documents = build_documents(
        entities=entities,
        registry=registry or default_registry(),
        id_resolver=id_resolver or EntityIdResolver(),
    )

    batch_size = settings.batch_size
    batches = [documents[i : i + batch_size] for i in range(0, len(documents), batch_size)]
    logger.info(f"Sending {len(documents)} documents to {settings.index_name} in {len(batches)} batches")

    for batch_num, batch in enumerate(batches, 1):
        response = transport.send(
            index_name=settings.index_name,
            documents=batch,
            pipeline_name=settings.pipeline_name,
        )
        logger.debug(response)
        _parse_bulk_errors(response=response, batch_num=batch_num)

    logger.info(f"Indexed {len(documents)} documents into {settings.index_name}")
    return len(documents)
