"""
    gqlhttp.options
    ~~~~~~~~~~~~~~~

    Resolves GraphQL request options (query, variables, operation name and
    uploaded files) from an incoming HTTP request.

    Resolution never fails: malformed payloads are replaced with empty
    values and the engine reports the resulting empty query as a regular
    GraphQL error.
"""
import json
import logging

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from werkzeug.datastructures import FileStorage, MultiDict
from werkzeug.exceptions import HTTPException
from werkzeug.wrappers import Request

from .utils.immutable import ImmutableDict, to_immutable_dict


log = logging.getLogger(__name__)


CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_GRAPHQL = "application/graphql"
CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded"
CONTENT_TYPE_MULTIPART_FORM_DATA = "multipart/form-data"


@dataclass(frozen=True)
class RequestOptions:
    query: str = ""
    variables: Mapping[str, Any] = field(default_factory=ImmutableDict)
    operation_name: str = ""
    #: uploaded files by form field name, only for multipart requests
    files: Mapping[str, list[FileStorage]] = field(
        default_factory=ImmutableDict
    )


Resolver = Callable[[Request], Optional[RequestOptions]]


def _load_variables(value: Optional[str]) -> ImmutableDict[str, Any]:
    if not value:
        return ImmutableDict()
    try:
        variables = json.loads(value)
    except ValueError:
        log.debug("Ignoring malformed variables: %r", value, exc_info=True)
        return ImmutableDict()
    if not isinstance(variables, dict):
        log.debug("Ignoring variables of type %s", type(variables).__name__)
        return ImmutableDict()
    return to_immutable_dict(variables)


def _from_values(
    values: MultiDict,
    files: Optional[MultiDict] = None,
) -> Optional[RequestOptions]:
    query = values.get("query")
    if not query:
        return None

    if files:
        uploaded = ImmutableDict(
            {name: files.getlist(name) for name in files.keys()}
        )
    else:
        uploaded = ImmutableDict()

    return RequestOptions(
        query=query,
        variables=_load_variables(values.get("variables")),
        operation_name=values.get("operationName") or "",
        files=uploaded,
    )


def _from_mapping(data: Any) -> RequestOptions:
    if not isinstance(data, dict):
        return RequestOptions()

    query = data.get("query")
    variables = data.get("variables")
    operation_name = data.get("operationName")
    return RequestOptions(
        query=query if isinstance(query, str) else "",
        variables=(
            to_immutable_dict(variables)
            if isinstance(variables, dict)
            else ImmutableDict()
        ),
        operation_name=(
            operation_name if isinstance(operation_name, str) else ""
        ),
    )


def _read_graphql(request: Request) -> Optional[RequestOptions]:
    return RequestOptions(query=request.get_data(as_text=True))


def _read_form(request: Request) -> Optional[RequestOptions]:
    try:
        form = request.form
    except HTTPException:
        log.debug("Unable to parse form body", exc_info=True)
        return None
    return _from_values(form)


def _read_multipart_form(request: Request) -> Optional[RequestOptions]:
    try:
        form, files = request.form, request.files
    except HTTPException:
        log.debug("Unable to parse multipart form body", exc_info=True)
        return None
    return _from_values(form, files)


def _read_json(request: Request) -> Optional[RequestOptions]:
    data = request.get_json(force=True, silent=True)
    if data is None:
        log.debug("Request body is not a valid JSON document")
        return None
    return _from_mapping(data)


_BODY_READERS: dict[str, Resolver] = {
    CONTENT_TYPE_GRAPHQL: _read_graphql,
    CONTENT_TYPE_FORM_URLENCODED: _read_form,
    CONTENT_TYPE_MULTIPART_FORM_DATA: _read_multipart_form,
    CONTENT_TYPE_JSON: _read_json,
}


def from_query_string(request: Request) -> Optional[RequestOptions]:
    return _from_values(request.args)


def from_empty_request(request: Request) -> Optional[RequestOptions]:
    if request.method != "POST" or request.content_length == 0:
        return RequestOptions()
    return None


def from_body(request: Request) -> Optional[RequestOptions]:
    reader = _BODY_READERS.get(request.mimetype, _read_json)
    return reader(request) or RequestOptions()


#: resolvers are tried in order, the first one returning options wins
RESOLVERS: tuple[Resolver, ...] = (
    from_query_string,
    from_empty_request,
    from_body,
)


def get_request_options(request: Request) -> RequestOptions:
    """Returns options of the GraphQL request

    :param request: incoming :py:class:`gqlhttp.request.Request`
    :return: :py:class:`RequestOptions`, empty when nothing usable found
    """
    for resolver in RESOLVERS:
        options = resolver(request)
        if options is not None:
            return options
    return RequestOptions()
