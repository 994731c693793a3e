"""Breed domain entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Breed:
    """A dog breed as exposed by the API.

    The dog API identifies breeds by name only, so ``id`` and ``name``
    carry the same value.
    """

    id: str
    name: str
    fluffy: bool
    favorite: bool


@dataclass(frozen=True)
class Image:
    url: str
    title: str


@dataclass(frozen=True)
class Viewer:
    """The consumer on whose behalf a request runs.

    ``id`` is None for anonymous viewers.
    """

    id: str | None = None
