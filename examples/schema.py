from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)


CHARACTERS = {
    "1": {"id": "1", "name": "Luke Skywalker", "friends": ["2", "3"]},
    "2": {"id": "2", "name": "Han Solo", "friends": ["1"]},
    "3": {"id": "3", "name": "Leia Organa", "friends": ["1", "2"]},
}


def resolve_friends(character, info):
    return [CHARACTERS[i] for i in character["friends"]]


def resolve_character(root, info, id):
    return CHARACTERS.get(id)


def resolve_characters(root, info):
    return list(CHARACTERS.values())


def resolve_viewer(root, info):
    return info.context.get("user")


CHARACTER_TYPE = GraphQLObjectType(
    "Character",
    lambda: {
        "id": GraphQLField(GraphQLNonNull(GraphQLString)),
        "name": GraphQLField(GraphQLString),
        "friends": GraphQLField(
            GraphQLList(CHARACTER_TYPE), resolve=resolve_friends
        ),
    },
)

SCHEMA = GraphQLSchema(
    query=GraphQLObjectType(
        "Query",
        {
            "character": GraphQLField(
                CHARACTER_TYPE,
                args={"id": GraphQLArgument(GraphQLNonNull(GraphQLString))},
                resolve=resolve_character,
            ),
            "characters": GraphQLField(
                GraphQLList(CHARACTER_TYPE), resolve=resolve_characters
            ),
            "viewer": GraphQLField(GraphQLString, resolve=resolve_viewer),
        },
    )
)
