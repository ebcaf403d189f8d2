import html
import logging
import pkgutil
import string

from typing import Optional

from werkzeug.wrappers import Request, Response


log = logging.getLogger(__name__)

DEFAULT_TITLE = "GraphQL Playground"


def _decode(b: Optional[bytes], charset: str = "utf-8") -> str:
    if b is None:
        raise LookupError("Console template is not available")
    return b.decode(charset)


def load_template() -> str:
    return _decode(
        pkgutil.get_data("gqlhttp.console", "assets/playground.html")
    )


class ConsolePage:
    """GraphQL Playground page

    The page is static: query, variables and results are managed by the
    Playground application in the browser, only the title is rendered
    on the server.

    :param str title: page title
    :param str template: ``string.Template`` source with a ``$title``
        placeholder, bundled Playground page is used by default
    """

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        template: str | None = None,
    ):
        self.title = title
        if template is None:
            template = load_template()
        self._template = string.Template(template)

    def render(self) -> str:
        return self._template.substitute(title=html.escape(self.title))

    def response(self) -> Response:
        try:
            content = self.render()
        except (KeyError, ValueError) as err:
            log.error("Unable to render console page: %s", err)
            return Response(
                "{}\n".format(err),
                status=500,
                mimetype="text/plain",
                headers={"X-Content-Type-Options": "nosniff"},
            )
        return Response(content, mimetype="text/html")


def accepts_console(request: Request) -> bool:
    """Checks whether request is a browser navigation to the console

    Explicit ``raw`` query parameter or ``application/json`` in the
    ``Accept`` header always ask for a JSON response.
    """
    if "raw" in request.args:
        return False
    accept = request.headers.get("Accept", "")
    return "application/json" not in accept and "text/html" in accept
