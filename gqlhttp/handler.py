"""
    gqlhttp.handler
    ~~~~~~~~~~~~~~~

    WSGI application serving a GraphQL schema over HTTP.

    Example:

    .. code-block:: python

        from wsgiref.simple_server import make_server

        handler = GraphQLHandler(Config(schema=schema, pretty=False))
        make_server("localhost", 8080, handler).serve_forever()

"""
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from graphql import GraphQLSchema
from werkzeug.wrappers import Request as _Request, Response

from .console.ui import DEFAULT_TITLE, ConsolePage, accepts_console
from .error import ConfigurationError
from .execution import (
    ExecutionParams,
    FormatErrorFn,
    GraphQLResponse,
    execute,
    process_result,
)
from .options import RequestOptions, get_request_options
from .request import DEFAULT_MAX_UPLOAD_MEMORY_SIZE, Request
from .writers.json import dumps


JSON_CONTENT_TYPE = "application/json; charset=utf-8"

ContextFn = Callable[[_Request], Any]
RootObjectFn = Callable[[Any, _Request, RequestOptions], Any]
ResultCallbackFn = Callable[
    [Any, ExecutionParams, GraphQLResponse, bytes], None
]


@dataclass(frozen=True)
class Config:
    schema: Optional[GraphQLSchema] = None
    #: console page title
    title: str = DEFAULT_TITLE
    #: indent JSON responses
    pretty: bool = True
    #: serve GraphQL Playground to browsers
    graphiql: bool = True
    max_upload_memory_size: int = DEFAULT_MAX_UPLOAD_MEMORY_SIZE
    #: builds execution context from the request
    context_fn: Optional[ContextFn] = None
    #: builds root value from the context, request and resolved options
    root_object_fn: Optional[RootObjectFn] = None
    #: called with context, params, response and serialized response body
    result_callback_fn: Optional[ResultCallbackFn] = None
    #: replaces every reported error with its formatted representation
    format_error_fn: Optional[FormatErrorFn] = None


class GraphQLHandler:
    """Serves GraphQL requests

    Handler is a WSGI application and holds no per-request state, so a
    single instance can be shared between threads.

    :param config: :py:class:`Config` with a schema
    :raises ConfigurationError: when schema is not configured
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        if config is None:
            config = Config()
        if config.schema is None:
            raise ConfigurationError("undefined GraphQL schema")
        self.config = config
        self.schema: GraphQLSchema = config.schema
        self._console = ConsolePage(config.title or DEFAULT_TITLE)

    def get_context(self, request: _Request) -> Any:
        if self.config.context_fn is not None:
            return self.config.context_fn(request)
        return {}

    def build_params(
        self,
        context: Any,
        request: _Request,
        options: RequestOptions,
    ) -> ExecutionParams:
        params = ExecutionParams(
            schema=self.schema,
            request_string=options.query,
            variable_values=options.variables,
            operation_name=options.operation_name,
            context=context,
        )
        if self.config.root_object_fn is not None:
            params.root_object = self.config.root_object_fn(
                context, request, options
            )
        return params

    def handle(self, request: _Request, context: Any = None) -> Response:
        """Executes GraphQL request and builds a response

        Requests of other classes are re-read from their WSGI environ as a
        :py:class:`gqlhttp.request.Request`, so configured upload limits
        apply to them too. Their body must not be consumed beforehand.

        :param request: any :py:class:`werkzeug.wrappers.Request`,
            including Flask's ``request`` object
        :param context: execution context, built by ``context_fn`` when
            not provided
        :return: :py:class:`werkzeug.wrappers.Response`
        """
        if isinstance(request, Request):
            return self._handle(request, context)

        bounded = Request(
            request.environ,
            max_upload_memory_size=self.config.max_upload_memory_size,
        )
        try:
            return self._handle(bounded, context)
        finally:
            bounded.close()

    def _handle(self, request: Request, context: Any) -> Response:
        if context is None:
            context = self.get_context(request)

        options = get_request_options(request)
        params = self.build_params(context, request, options)
        result = execute(params)
        response = process_result(result, self.config.format_error_fn)

        if self.config.graphiql and accepts_console(request):
            return self._console.response()

        body = dumps(response, pretty=self.config.pretty)
        http_response = Response(
            body, status=200, content_type=JSON_CONTENT_TYPE
        )
        if self.config.result_callback_fn is not None:
            self.config.result_callback_fn(context, params, response, body)
        return http_response

    def __call__(
        self,
        environ: dict[str, Any],
        start_response: Callable[..., Any],
    ) -> Iterable[bytes]:
        request = Request(
            environ, max_upload_memory_size=self.config.max_upload_memory_size
        )
        try:
            response = self.handle(request)
        finally:
            request.close()
        return response(environ, start_response)
