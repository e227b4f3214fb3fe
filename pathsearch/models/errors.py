"""
Error types raised by the search engine and graph adapters.

Unreachable goals are not errors: they come back as a ``NotFound`` result.
"""


class SearchError(Exception):
    """Base class for all path search failures."""


class InvalidNodeError(SearchError, ValueError):
    """
    Raised when a source or goal identifier is outside the graph's domain.

    Attributes:
        node: The offending identifier as supplied by the caller
    """

    def __init__(self, node, message: str = None):
        self.node = node
        super().__init__(message or f"Invalid node identifier: {node!r}")


class MalformedGraphError(SearchError, ValueError):
    """
    Raised when the graph breaks its contract during a search.

    Detected lazily, e.g. a neighbor index outside the graph or a
    negative edge weight reached while relaxing.
    """
