from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, TypedDict

from graphql import (
    ExecutionResult,
    GraphQLError,
    GraphQLFormattedError,
    GraphQLSchema,
    graphql_sync,
)


FormatErrorFn = Callable[[Exception], GraphQLFormattedError]


class GraphQLResponse(TypedDict, total=False):
    data: dict[str, Any] | None
    errors: list[GraphQLFormattedError]
    extensions: dict[str, Any]


@dataclass
class ExecutionParams:
    schema: GraphQLSchema
    request_string: str
    variable_values: Mapping[str, Any] = field(default_factory=dict)
    operation_name: Optional[str] = None
    context: Any = None
    root_object: Any = None


def execute(params: ExecutionParams) -> ExecutionResult:
    """Executes GraphQL request synchronously

    Syntax, validation and resolver errors are not raised, they are
    reported in :py:attr:`graphql.ExecutionResult.errors`.
    """
    return graphql_sync(
        params.schema,
        params.request_string,
        root_value=params.root_object,
        context_value=params.context,
        variable_values=dict(params.variable_values),
        operation_name=params.operation_name or None,
    )


def format_errors(
    errors: list[GraphQLError],
    format_error_fn: FormatErrorFn,
) -> list[GraphQLFormattedError]:
    # errors without an underlying cause are syntax or validation errors
    return [
        format_error_fn(error.original_error or error) for error in errors
    ]


def process_result(
    result: ExecutionResult,
    format_error_fn: Optional[FormatErrorFn] = None,
) -> GraphQLResponse:
    data: GraphQLResponse = {"data": result.data}

    if result.errors:
        if format_error_fn is not None:
            data["errors"] = format_errors(result.errors, format_error_fn)
        else:
            data["errors"] = [e.formatted for e in result.errors]

    if result.extensions is not None:
        data["extensions"] = result.extensions

    return data
