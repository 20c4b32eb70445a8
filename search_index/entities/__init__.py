"""
Domain entities eligible for search indexing.

Entities are read-only records; turning them into documents is the job
of their search index (see search_index.indexes).
"""

from search_index.entities.report_data import ReportData, ReportDataType

__all__ = [
    "ReportData",
    "ReportDataType",
]
