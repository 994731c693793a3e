"""GraphQL schema definitions.

Types are ordered Query, Mutation, then everything else alphabetically.
Field names are camelCase in the schema and snake_case in Python; the
executable schema converts between them.
"""

from ariadne import make_executable_schema

from breedql.adapters.ariadne.resolvers import resolvers

TYPE_DEFS = '''
type Query {
    """
    Look up a breed by its Relay global id.
    Null when the breed doesn't exist.
    """
    breedById(id: ID!): Breed

    """All breeds visible to the viewer, optionally filtered."""
    breeds(fluffy: Boolean, favorite: Boolean): ViewerBreedsConnection!

    """Refetch any object implementing Node by its global id."""
    node(id: ID!): Node
}

type Mutation {
    """Add a breed to the viewer's favorites."""
    viewerSaveFavoriteBreed(
        input: ViewerSaveFavoriteBreedInput!
    ): ViewerSaveFavoriteBreedPayload!
}

type Breed implements Node {
    id: ID!
    name: String!
    fluffy: Boolean!
    favorite: Boolean!

    """
    Photos of the breed, paginated with Relay cursors.
    first and last can't be combined.
    """
    photos(first: Int, last: Int, before: ID, after: ID): BreedPhotosConnection
}

type BreedPhotosConnection {
    pageInfo: PageInfo!
    edges: [BreedPhotosEdge!]!
    images: [Image!]!
}

type BreedPhotosEdge {
    cursor: ID!
    node: Image!
}

type Error {
    message: String!
    friendlyMessage: String
    """Stable identifier of the cause. Never changes for a given cause."""
    code: String!
}

type Image {
    url: String!
    title: String!
}

interface MutationError {
    clientMutationId: String
    error: Error!
}

interface MutationSuccess {
    clientMutationId: String
}

interface Node {
    id: ID!
}

type PageInfo {
    hasPreviousPage: Boolean!
    hasNextPage: Boolean!
}

type ViewerBreedsConnection {
    edges: [ViewerBreedsEdge!]!
    breeds: [Breed!]!
}

type ViewerBreedsEdge {
    cursor: ID!
    node: Breed!
    favorited: Boolean!
}

type ViewerSaveFavoriteBreedError implements MutationError {
    clientMutationId: String
    error: Error!
}

input ViewerSaveFavoriteBreedInput {
    clientMutationId: String
    breedId: ID!
}

union ViewerSaveFavoriteBreedPayload =
    ViewerSaveFavoriteBreedError
    | ViewerSaveFavoriteBreedSuccess

type ViewerSaveFavoriteBreedSuccess implements MutationSuccess {
    clientMutationId: String
    breed: Breed!
    favorites: ViewerBreedsConnection!
}
'''

schema = make_executable_schema(TYPE_DEFS, *resolvers, convert_names_case=True)
