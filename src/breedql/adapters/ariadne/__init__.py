"""Ariadne GraphQL layer for breedql."""

from breedql.adapters.ariadne.app import create_app
from breedql.adapters.ariadne.errors import format_error
from breedql.adapters.ariadne.invocation import handle_invocation, make_handler
from breedql.adapters.ariadne.schema import TYPE_DEFS, schema

__all__ = [
    "TYPE_DEFS",
    "schema",
    "create_app",
    "format_error",
    "handle_invocation",
    "make_handler",
]
