"""Single-page HTTP handler for the ``--web`` mode."""

from __future__ import annotations

import http.server
import logging
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


def make_page_handler(html: str) -> type[http.server.BaseHTTPRequestHandler]:
    """Build a request handler class that serves ``html`` at ``/``.

    The page is encoded once; every GET on ``/`` gets the same bytes.
    Any other path is a 404.
    """
    body = html.encode("utf-8")

    class PageHandler(http.server.BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            if urlsplit(self.path).path != "/":
                self.send_error(404, "Not Found")
                return
            self.send_response(200)
            self.send_header("Content-Type", "text/html; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format: str, *args: object) -> None:  # noqa: A002
            logger.debug("%s - %s", self.address_string(), format % args)

    return PageHandler
