"""Module loggers for the search indexing library.

The library only emits records. Handlers and levels belong to the
application embedding it.
"""

import logging

LIBRARY_LOGGER = "search_index"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get the logger of a search_index module.

    Args:
        name: Logger name (typically __name__)

    """
    return logging.getLogger(name)
