import json

import pytest

from gqlhttp.utils.immutable import ImmutableDict
from gqlhttp.writers.json import dumps


RESULT = {"data": {"user": {"name": "Zoë", "tags": ["a", "b"]}}}


def test_compact():
    assert dumps(RESULT) == (
        '{"data":{"user":{"name":"Zoë","tags":["a","b"]}}}'.encode("utf-8")
    )


def test_pretty():
    content = dumps(RESULT, pretty=True).decode("utf-8")
    assert content.splitlines() == [
        "{",
        '\t"data": {',
        '\t\t"user": {',
        '\t\t\t"name": "Zoë",',
        '\t\t\t"tags": [',
        '\t\t\t\t"a",',
        '\t\t\t\t"b"',
        "\t\t\t]",
        "\t\t}",
        "\t}",
        "}",
    ]
    assert json.loads(content) == RESULT


def test_immutable_values():
    result = {"extensions": ImmutableDict({"cost": 1})}
    assert dumps(result) == b'{"extensions":{"cost":1}}'


def test_unsupported_value():
    with pytest.raises(TypeError, match="Can not encode this type"):
        dumps({"data": object()})
