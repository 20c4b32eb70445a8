"""Pytest fixtures shared by the search index tests."""

from unittest.mock import MagicMock
from uuid import UUID

import pytest

from search_index.config import IndexingSettings
from search_index.entities.report_data import ReportData, ReportDataType
from search_index.opensearch.transport import OpenSearchBulkTransport


@pytest.fixture
def report_data() -> ReportData:
    """Create an entity report data record."""
    return ReportData(
        id=UUID("6f0e3c4e-1d7a-4c1e-9f3b-2a8d5e7c9b10"),
        timestamp=1700000000,
        report_data_type=ReportDataType.ENTITY_REPORT_DATA,
        data={"entityType": "table", "team": "analytics", "entityCount": 12},
    )


@pytest.fixture
def mock_opensearch_client() -> MagicMock:
    """Create a mock opensearch-py client whose bulk calls succeed."""
    mock_client = MagicMock()
    mock_client.bulk.return_value = {"errors": False, "items": []}
    return mock_client


@pytest.fixture
def transport(mock_opensearch_client: MagicMock) -> OpenSearchBulkTransport:
    """Create a bulk transport backed by the mock client."""
    return OpenSearchBulkTransport(client=mock_opensearch_client)


@pytest.fixture
def settings() -> IndexingSettings:
    """Create settings targeting the report data index."""
    return IndexingSettings(index_name="report_data_index")
