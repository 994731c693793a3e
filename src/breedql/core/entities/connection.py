"""Relay connection entities.

These follow the Relay cursor connection model: a connection is an ordered
list of edges, each pairing an opaque cursor with a node, plus page metadata.

See: https://relay.dev/graphql/connections.htm
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Edge(Generic[T]):
    """A node paired with the cursor that identifies its position.

    Attributes:
        cursor: Opaque token, unique within one edge list.
        node: The domain value.
    """

    cursor: str
    node: T


@dataclass(frozen=True)
class PageInfo:
    """Whether pages exist before or after the returned edges."""

    has_previous_page: bool = False
    has_next_page: bool = False


@dataclass(frozen=True)
class PaginationArgs:
    """Cursor pagination arguments.

    ``first`` pages forward, ``last`` pages backward. They are mutually
    exclusive; see ``validate_pagination_arguments``.
    """

    first: int | None = None
    last: int | None = None
    before: str | None = None
    after: str | None = None

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any]) -> "PaginationArgs":
        """Build from resolver keyword arguments, ignoring unrelated keys."""
        return cls(
            first=arguments.get("first"),
            last=arguments.get("last"),
            before=arguments.get("before"),
            after=arguments.get("after"),
        )


@dataclass(frozen=True)
class Connection(Generic[T]):
    """A windowed list of edges with its page info."""

    edges: Sequence[Edge[T]] = field(default_factory=tuple)
    page_info: PageInfo = field(default_factory=PageInfo)

    @property
    def nodes(self) -> list[T]:
        """The nodes of the edges, in order."""
        return [edge.node for edge in self.edges]
