"""Linkgraph custom exceptions."""


class LinkGraphError(Exception):
    """Base exception for linkgraph errors."""


class UnknownLabelError(LinkGraphError, KeyError):
    """Label was never added to the graph."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message
        return str(self.args[0]) if self.args else ""


class NoPathError(LinkGraphError):
    """Destination is not reachable from the source."""


class GraphTooLargeError(LinkGraphError):
    """Graph has more vertices than the bitmask search supports."""


class EdgeFileError(LinkGraphError):
    """Error reading an edge list file."""
