"""Cursor and Relay global id encoding."""

import base64
import binascii

from breedql.exceptions import InvalidArgument


def encode_cursor(value: str) -> str:
    """Encode a unique node attribute as an opaque cursor."""
    return base64.b64encode(value.encode()).decode("ascii")


def to_global_id(type_name: str, id_: str) -> str:
    """Build a Relay global id from a type name and a type-local id.

    Args:
        type_name: The GraphQL type name, e.g. ``"Breed"``.
        id_: The id within that type.

    Returns:
        base64 of ``"<type_name>:<id_>"``.
    """
    return base64.b64encode(f"{type_name}:{id_}".encode()).decode("ascii")


def from_global_id(global_id: str) -> tuple[str, str]:
    """Split a Relay global id into its type name and type-local id.

    Args:
        global_id: The id produced by ``to_global_id``.

    Returns:
        A ``(type_name, id)`` tuple.

    Raises:
        InvalidArgument: If the id is not valid base64 or has no type prefix.
    """
    try:
        decoded = base64.b64decode(global_id, validate=True).decode()
    except (binascii.Error, UnicodeDecodeError) as e:
        raise InvalidArgument(f"Malformed global id: {global_id!r}") from e

    type_name, sep, id_ = decoded.partition(":")
    if not sep or not type_name or not id_:
        raise InvalidArgument(f"Malformed global id: {global_id!r}")
    return type_name, id_
