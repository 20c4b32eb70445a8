"""Ingestion settings."""

import os
from typing import Self

from pydantic import BaseModel, Field

DEFAULT_BATCH_SIZE = 500


class IndexingSettings(BaseModel):
    """Where documents go and how many are sent per bulk request."""

    index_name: str = Field(min_length=1)
    batch_size: int = Field(default=DEFAULT_BATCH_SIZE, gt=0)
    pipeline_name: str | None = None

    @classmethod
    def from_env(cls) -> Self:
        """Load settings from SEARCH_INDEX_NAME, SEARCH_INDEX_BATCH_SIZE and SEARCH_INDEX_PIPELINE.

        Raises:
            ValueError: If SEARCH_INDEX_NAME is unset or SEARCH_INDEX_BATCH_SIZE is not an integer
        """
        index_name = os.getenv("SEARCH_INDEX_NAME")
        if not index_name:
            raise ValueError(
                "SEARCH_INDEX_NAME environment variable is not set. Please export it before indexing."
            )

        batch_size_str = os.getenv("SEARCH_INDEX_BATCH_SIZE")
        try:
            batch_size = int(batch_size_str) if batch_size_str else DEFAULT_BATCH_SIZE
        except ValueError:
            raise ValueError(
                f"SEARCH_INDEX_BATCH_SIZE must be a valid integer, got: {batch_size_str}"
            ) from None

        return cls(
            index_name=index_name,
            batch_size=batch_size,
            pipeline_name=os.getenv("SEARCH_INDEX_PIPELINE") or None,
        )
