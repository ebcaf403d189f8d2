import pytest

from prometheus_client import CollectorRegistry, Counter, Summary
from werkzeug.test import Client

from gqlhttp.handler import Config, GraphQLHandler
from gqlhttp.telemetry.prometheus import GraphQLMetrics

from .base import SCHEMA


@pytest.fixture(name="registry")
def registry_fixture():
    return CollectorRegistry()


@pytest.fixture(name="client")
def client_fixture(registry):
    metrics = GraphQLMetrics(
        "tests",
        requests_metric=Counter(
            "graphql_requests",
            "GraphQL requests",
            ["handler", "operation", "status"],
            registry=registry,
        ),
        response_size_metric=Summary(
            "graphql_response_size_bytes",
            "GraphQL response size (bytes)",
            ["handler"],
            registry=registry,
        ),
    )
    handler = GraphQLHandler(
        Config(schema=SCHEMA, pretty=False, result_callback_fn=metrics)
    )
    return Client(handler)


def test_requests(client, registry):
    client.post(
        "/", json={"query": "query Hello { hello }", "operationName": "Hello"}
    )
    client.post("/", json={"query": "{ fail }"})
    client.post("/", json={"query": "{ fail }"})

    def requests(operation, status):
        return registry.get_sample_value(
            "graphql_requests_total",
            {"handler": "tests", "operation": operation, "status": status},
        )

    assert requests("Hello", "success") == 1
    assert requests("", "error") == 2
    assert requests("Hello", "error") is None


def test_response_size(client, registry):
    response = client.get("/", query_string={"query": "{ hello }"})
    assert registry.get_sample_value(
        "graphql_response_size_bytes_count", {"handler": "tests"}
    ) == 1
    assert registry.get_sample_value(
        "graphql_response_size_bytes_sum", {"handler": "tests"}
    ) == len(response.get_data())
