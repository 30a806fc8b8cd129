"""Exceptions raised by the dagpath engines."""

from __future__ import annotations

from typing import Any


class NoPathError(LookupError):
    """No path exists from the start to a vertex satisfying the target.

    Also raised for targets that are unreachable by definition: a negative
    index, or an ``end`` vertex ordered before ``start``.

    Attributes:
        target: The requested target (index or ``end`` vertex).
    """

    def __init__(self, target: Any, message: str = "no path exists") -> None:
        super().__init__(message)
        self.target = target


class ContractViolationError(ValueError):
    """An edge does not lead strictly forward from its source vertex.

    Only raised when the search runs with ``SearchConfig(strict=True)``.

    Attributes:
        source: Vertex the edge leaves.
        target: Vertex the edge leads to.
    """

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(
            f"Edge from {source!r} to {target!r} does not lead strictly forward."
        )
        self.source = source
        self.target = target
