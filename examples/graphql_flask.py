import logging

from flask import Flask, request
from prometheus_client import make_wsgi_app
from werkzeug.middleware.dispatcher import DispatcherMiddleware

from gqlhttp.handler import Config, GraphQLHandler
from gqlhttp.telemetry.prometheus import GraphQLMetrics

from schema import SCHEMA


log = logging.getLogger(__name__)


def format_error(error):
    log.error("GraphQL request failed: %s", error)
    return {"message": str(error)}


graphql_handler = GraphQLHandler(
    Config(
        schema=SCHEMA,
        pretty=False,
        result_callback_fn=GraphQLMetrics("flask"),
        format_error_fn=format_error,
    )
)

app = Flask(__name__)
app.wsgi_app = DispatcherMiddleware(  # type: ignore[method-assign]
    app.wsgi_app, {"/metrics": make_wsgi_app()}
)


@app.route("/graphql", methods={"GET", "POST"})
def handle_graphql():
    context = {"user": request.headers.get("X-User")}
    return graphql_handler.handle(request, context)


def main():
    logging.basicConfig()
    log.setLevel(logging.INFO)
    log.info("GraphQL endpoint is running on http://localhost:5000/graphql")
    log.info("Metrics are available on http://localhost:5000/metrics")
    app.run(host="0.0.0.0", port=5000)


if __name__ == "__main__":
    main()
