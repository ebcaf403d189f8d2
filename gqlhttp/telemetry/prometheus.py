from typing import Any, Optional

from prometheus_client import Counter, Summary

from ..execution import ExecutionParams, GraphQLResponse


_REQUESTS_METRIC = None
_RESPONSE_SIZE_METRIC = None


def _get_default_requests_metric() -> Counter:
    global _REQUESTS_METRIC
    if _REQUESTS_METRIC is None:
        _REQUESTS_METRIC = Counter(
            "graphql_requests",
            "GraphQL requests",
            ["handler", "operation", "status"],
        )
    return _REQUESTS_METRIC


def _get_default_response_size_metric() -> Summary:
    global _RESPONSE_SIZE_METRIC
    if _RESPONSE_SIZE_METRIC is None:
        _RESPONSE_SIZE_METRIC = Summary(
            "graphql_response_size_bytes",
            "GraphQL response size (bytes)",
            ["handler"],
        )
    return _RESPONSE_SIZE_METRIC


class GraphQLMetrics:
    """Result callback which records request metrics

    Example:

    .. code-block:: python

        handler = GraphQLHandler(Config(
            schema=schema,
            result_callback_fn=GraphQLMetrics("public"),
        ))

    Requests are labeled by operation name and by ``status``, which is
    ``"error"`` when the response contains at least one error.
    """

    def __init__(
        self,
        name: str,
        *,
        requests_metric: Optional[Counter] = None,
        response_size_metric: Optional[Summary] = None,
    ):
        self._name = name
        self._requests = requests_metric or _get_default_requests_metric()
        self._response_size = (
            response_size_metric or _get_default_response_size_metric()
        )

    def __call__(
        self,
        context: Any,
        params: ExecutionParams,
        response: GraphQLResponse,
        body: bytes,
    ) -> None:
        status = "error" if response.get("errors") else "success"
        self._requests.labels(
            self._name, params.operation_name or "", status
        ).inc()
        self._response_size.labels(self._name).observe(len(body))
