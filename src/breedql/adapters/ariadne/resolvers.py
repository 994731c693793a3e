"""GraphQL resolvers.

Resolvers only translate between the API shape and the loaders on
``info.context``; business logic lives in the loaders. Arguments arrive
in snake_case.
"""

from typing import Any

from ariadne import InterfaceType, MutationType, ObjectType, QueryType, UnionType

from breedql.core.entities.breed import Breed
from breedql.core.entities.connection import Connection, Edge
from breedql.core.services.pagination import paginate, validate_pagination_arguments
from breedql.exceptions import BreedNotFound, InvalidArgument
from breedql.utils.encoding import encode_cursor, from_global_id, to_global_id

# =============================================================================
# Query Resolvers
# =============================================================================

query = QueryType()


@query.field("breedById")
async def resolve_breed_by_id(_, info, id: str) -> Breed | None:
    # GraphQL enforces the type, not the length.
    if not id:
        raise InvalidArgument("breedById requires an ID to be provided")

    _type_name, breed_name = from_global_id(id)
    return await info.context.loaders.breeds.load(breed_name)


@query.field("breeds")
async def resolve_breeds(
    _, info, fluffy: bool | None = None, favorite: bool | None = None
) -> dict[str, Any]:
    breeds = await info.context.loaders.breeds.list_breeds(
        fluffy=fluffy, favorite=favorite
    )
    return {"breeds": breeds}


@query.field("node")
async def resolve_node(_, info, id: str) -> Any:
    type_name, node_id = from_global_id(id)
    if type_name == "Breed":
        return await info.context.loaders.breeds.load(node_id)
    return None


# =============================================================================
# Mutation Resolvers
# =============================================================================

mutation = MutationType()


@mutation.field("viewerSaveFavoriteBreed")
async def resolve_viewer_save_favorite_breed(_, info, input: dict) -> dict[str, Any]:
    client_mutation_id = input.get("client_mutation_id")
    _type_name, breed_name = from_global_id(input["breed_id"])

    try:
        breed_name = await info.context.loaders.breeds.make_favorite(breed_name)
    except BreedNotFound as error:
        return {"client_mutation_id": client_mutation_id, "error": error}

    return {"client_mutation_id": client_mutation_id, "breed_name": breed_name}


save_favorite_payload = UnionType("ViewerSaveFavoriteBreedPayload")


@save_favorite_payload.type_resolver
def resolve_save_favorite_payload_type(obj: dict[str, Any], *_) -> str:
    if obj.get("error") is not None:
        return "ViewerSaveFavoriteBreedError"
    return "ViewerSaveFavoriteBreedSuccess"


save_favorite_error = ObjectType("ViewerSaveFavoriteBreedError")


@save_favorite_error.field("error")
def resolve_save_favorite_error(payload: dict[str, Any], info) -> dict[str, Any]:
    error = payload["error"]
    return {
        "code": error.code,
        "message": str(error),
        "friendly_message": error.friendly_message,
    }


save_favorite_success = ObjectType("ViewerSaveFavoriteBreedSuccess")


@save_favorite_success.field("breed")
async def resolve_saved_breed(payload: dict[str, Any], info) -> Breed | None:
    return await info.context.loaders.breeds.load(payload["breed_name"])


@save_favorite_success.field("favorites")
async def resolve_favorites(payload: dict[str, Any], info) -> dict[str, Any]:
    breeds = await info.context.loaders.breeds.list_breeds(favorite=True)
    return {"breeds": breeds}


# =============================================================================
# Object Type Resolvers
# =============================================================================

node = InterfaceType("Node")


@node.type_resolver
def resolve_node_type(obj: Any, *_) -> str | None:
    if isinstance(obj, Breed):
        return "Breed"
    return None


breed_type = ObjectType("Breed")


@breed_type.field("id")
def resolve_breed_id(breed: Breed, info) -> str:
    return to_global_id("Breed", breed.id)


@breed_type.field("photos")
async def resolve_breed_photos(
    breed: Breed,
    info,
    first: int | None = None,
    last: int | None = None,
    before: str | None = None,
    after: str | None = None,
) -> Connection | None:
    """Page through a breed's photos.

    The dog API returns every photo at once, so the full edge list is
    built and windowed in memory.
    """
    args = validate_pagination_arguments(
        first=first, last=last, before=before, after=after
    )
    images = await info.context.loaders.breeds.load_photos(breed.name)
    if images is None:
        return None

    all_edges = [Edge(cursor=encode_cursor(image.url), node=image) for image in images]
    return paginate(all_edges, args)


photos_connection = ObjectType("BreedPhotosConnection")


@photos_connection.field("images")
def resolve_photos_connection_images(connection: Connection, info) -> list[Any]:
    return connection.nodes


breeds_connection = ObjectType("ViewerBreedsConnection")


@breeds_connection.field("edges")
def resolve_breeds_connection_edges(parent: dict[str, Any], info) -> list[Breed]:
    # Each breed is its own edge: the edge fields are derived from it.
    return parent["breeds"]


breeds_edge = ObjectType("ViewerBreedsEdge")


@breeds_edge.field("cursor")
def resolve_breeds_edge_cursor(breed: Breed, info) -> str:
    return encode_cursor(breed.id)


@breeds_edge.field("node")
def resolve_breeds_edge_node(breed: Breed, info) -> Breed:
    return breed


@breeds_edge.field("favorited")
def resolve_breeds_edge_favorited(breed: Breed, info) -> bool:
    return breed.favorite


# Export all resolvers
resolvers = [
    query,
    mutation,
    save_favorite_payload,
    save_favorite_error,
    save_favorite_success,
    node,
    breed_type,
    photos_connection,
    breeds_connection,
    breeds_edge,
]
