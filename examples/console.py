import logging

from wsgiref.simple_server import make_server

from gqlhttp.handler import Config, GraphQLHandler

from schema import SCHEMA


log = logging.getLogger(__name__)


def get_context(request):
    return {"user": request.remote_addr}


def main():
    logging.basicConfig()
    log.setLevel(logging.INFO)

    handler = GraphQLHandler(
        Config(
            schema=SCHEMA,
            title="Star Wars",
            context_fn=get_context,
        )
    )
    log.info("GraphQL Playground is available on http://localhost:5000")
    http_server = make_server("localhost", 5000, handler)
    http_server.serve_forever()


if __name__ == "__main__":
    main()
