"""GraphQL error formatting."""

import logging
from typing import Any

from ariadne import format_error as default_format_error
from ariadne import unwrap_graphql_error
from graphql import GraphQLError

from breedql.exceptions import BreedNotFound, BreedQLError, FetchFailure, InvalidArgument

logger = logging.getLogger(__name__)

# Stable codes clients can match on instead of messages.
ERROR_CODES: dict[type[BreedQLError], str] = {
    InvalidArgument: "BAD_USER_INPUT",
    FetchFailure: "UPSTREAM_FETCH_FAILED",
    BreedNotFound: BreedNotFound.code,
}


def format_error(error: GraphQLError, debug: bool = False) -> dict[str, Any]:
    """Format a GraphQL error, adding ``extensions.code`` for breedql errors.

    Errors that don't come from breedql are logged with their traceback,
    since nothing upstream will have reported them.

    Args:
        error: The error raised while executing the query.
        debug: Include the exception and traceback in extensions.

    Returns:
        The error as a JSON-serializable dict.
    """
    formatted = default_format_error(error, debug)
    original = unwrap_graphql_error(error)

    code = _error_code(original)
    if code is not None:
        extensions = dict(formatted.get("extensions") or {})
        extensions["code"] = code
        formatted["extensions"] = extensions
    elif original is not None and not isinstance(original, GraphQLError):
        logger.error(
            "Unexpected error resolving %s",
            ".".join(str(part) for part in error.path or []),
            exc_info=original,
        )

    return formatted


def _error_code(error: Any) -> str | None:
    for error_type, code in ERROR_CODES.items():
        if isinstance(error, error_type):
            return code
    return None
