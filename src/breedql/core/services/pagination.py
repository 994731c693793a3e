"""In-memory cursor pagination.

Implements the Relay cursor connections pagination algorithm over a
complete, ordered edge list. A database would page
with ``WHERE id > :after`` / ``WHERE id < :before`` (note the absence of
"or equal to"); here the whole set is already in memory, so the same
semantics are applied by slicing.

See: https://relay.dev/graphql/connections.htm#sec-Pagination-algorithm
"""

from collections.abc import Sequence
from typing import TypeVar

from breedql.core.entities.connection import (
    Connection,
    Edge,
    PageInfo,
    PaginationArgs,
)
from breedql.exceptions import InvalidArgument

T = TypeVar("T")


def validate_pagination_arguments(
    first: int | None = None,
    last: int | None = None,
    before: str | None = None,
    after: str | None = None,
) -> PaginationArgs:
    """Reject paging forward and backward at once.

    Relay connections allow ``first`` together with ``last`` but
    discourage it; this API refuses it.

    Returns:
        The arguments as a PaginationArgs.

    Raises:
        InvalidArgument: If both ``first`` and ``last`` are given.
    """
    if first is not None and last is not None:
        raise InvalidArgument("Cannot page both forward and backward")

    return PaginationArgs(first=first, last=last, before=before, after=after)


def apply_cursors_to_edges(
    all_edges: Sequence[Edge[T]],
    before: str | None = None,
    after: str | None = None,
) -> Connection[T]:
    """Trim edges outside the ``after``/``before`` cursors.

    Drops everything up to and including ``after``, then everything from
    ``before`` onwards. A cursor that matches no edge is ignored, so a
    cursor pointing at an item that has since disappeared doesn't break
    paging.

    Args:
        all_edges: The complete, ordered edge list. Not modified.
        before: Keep only edges strictly before this cursor.
        after: Keep only edges strictly after this cursor.

    Returns:
        The trimmed edges with page info reflecting what was trimmed.
    """
    edges = list(all_edges)
    has_previous_page = False
    has_next_page = False

    if after is not None:
        index = _find_cursor(edges, after)
        if index is not None:
            start_length = len(edges)
            edges = edges[index + 1 :]
            if len(edges) < start_length:
                has_previous_page = True

    if before is not None:
        index = _find_cursor(edges, before)
        if index is not None:
            start_length = len(edges)
            edges = edges[:index]
            if len(edges) < start_length:
                has_next_page = True

    return Connection(
        edges=edges,
        page_info=PageInfo(
            has_previous_page=has_previous_page,
            has_next_page=has_next_page,
        ),
    )


def edges_to_return(
    all_edges: Sequence[Edge[T]],
    first: int | None = None,
    last: int | None = None,
    before: str | None = None,
    after: str | None = None,
) -> Connection[T]:
    """Apply the cursors, then cut the list down to ``first`` or ``last``.

    The edges keep their original order when paging backward. Limits
    don't change the page info.

    Raises:
        InvalidArgument: If ``first`` or ``last`` is negative.
    """
    connection = apply_cursors_to_edges(all_edges, before=before, after=after)
    edges = list(connection.edges)

    if first is not None:
        if first < 0:
            raise InvalidArgument("first must be greater than or equal to 0")
        if len(edges) > first:
            edges = edges[:first]

    if last is not None:
        if last < 0:
            raise InvalidArgument("last must be greater than or equal to 0")
        if len(edges) > last:
            edges = edges[len(edges) - last :]

    return Connection(edges=edges, page_info=connection.page_info)


def paginate(
    all_edges: Sequence[Edge[T]],
    args: PaginationArgs | None = None,
) -> Connection[T]:
    """Window a complete edge list according to pagination arguments.

    Args:
        all_edges: The complete, ordered edge list.
        args: The pagination arguments. None returns every edge.

    Returns:
        The selected edges and their page info.

    Raises:
        InvalidArgument: If the arguments are invalid.

    Example:
        >>> edges = [Edge(cursor=f"c{i}", node=i) for i in range(1, 6)]
        >>> page = paginate(edges, PaginationArgs(after="c2", first=2))
        >>> [edge.cursor for edge in page.edges]
        ['c3', 'c4']
    """
    args = args or PaginationArgs()
    validate_pagination_arguments(
        first=args.first, last=args.last, before=args.before, after=args.after
    )
    return edges_to_return(
        all_edges,
        first=args.first,
        last=args.last,
        before=args.before,
        after=args.after,
    )


def _find_cursor(edges: Sequence[Edge[T]], cursor: str) -> int | None:
    for index, edge in enumerate(edges):
        if edge.cursor == cursor:
            return index
    return None
