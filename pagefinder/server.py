"""HTTP front end serving keyword suggestions and page search."""

from __future__ import annotations

import argparse
import logging
import signal
import threading
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Optional, Protocol, Sequence, Union
from urllib.parse import parse_qs, urlsplit

from pagefinder.dictionary import Dictionary
from pagefinder.recommender import KeyRecommender

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"
DEFAULT_PAGE = "../resource/static/view/search.html"
DEFAULT_PORT = 1234


class _PageQuery(Protocol):
    def query(self, key: str) -> str: ...


@dataclass(frozen=True)
class Response:
    """Status, content type and body of a reply."""

    status: int
    content_type: str = ""
    body: bytes = b""


def _is_form(content_type: str) -> bool:
    return content_type.split(";", 1)[0].strip().lower() == FORM_CONTENT_TYPE


def _form_query(body: Union[str, bytes]) -> str:
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return parse_qs(body, keep_blank_values=True).get("query", [""])[0]


class SearchEngineServer:
    """Routes ``/candidate`` and ``/search``: GET serves the page, POST answers a query."""

    def __init__(self, dictionary: Dictionary, page_query: _PageQuery, page_path: str = DEFAULT_PAGE) -> None:
        self.dictionary = dictionary
        self.page_query = page_query
        self.page_path = page_path
        self.address: Optional[tuple] = None
        self.ready = threading.Event()
        self._stopped = threading.Event()

    def handle_candidate(self, content_type: str, body: Union[str, bytes]) -> Response:
        """Suggest dictionary words for the form field ``query``."""
        if not _is_form(content_type):
            return Response(400)
        word = _form_query(body)
        logger.info("candidate query: %s", word)
        recommender = KeyRecommender(word, self.dictionary)
        recommender.query()
        return Response(200, JSON_CONTENT_TYPE, recommender.candidate_json().encode("utf-8"))

    def handle_search(self, content_type: str, body: Union[str, bytes]) -> Response:
        """Search pages for the form field ``query``."""
        if not _is_form(content_type):
            return Response(400)
        key = _form_query(body)
        logger.info("search query: %s", key)
        result = self.page_query.query(key)
        return Response(200, JSON_CONTENT_TYPE, result.encode("utf-8"))

    def static_page(self) -> Response:
        """The search page, or 404 when its file is missing."""
        try:
            with open(self.page_path, "rb") as handle:
                return Response(200, HTML_CONTENT_TYPE, handle.read())
        except FileNotFoundError:
            return Response(404)

    def _dispatch(self, method: str, path: str, content_type: str, body: bytes) -> Response:
        route = urlsplit(path).path
        try:
            if route in ("/candidate", "/search"):
                if method == "GET":
                    return self.static_page()
                if method == "POST":
                    handler = self.handle_candidate if route == "/candidate" else self.handle_search
                    return handler(content_type, body)
                return Response(405)
            return Response(404)
        except Exception:
            logger.exception("request %s %s failed", method, path)
            return Response(500)

    def _handler_class(self) -> type:
        server = self

        class _Handler(BaseHTTPRequestHandler):
            def do_GET(self) -> None:
                self._reply(server._dispatch("GET", self.path, "", b""))

            def do_POST(self) -> None:
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length)
                content_type = self.headers.get("Content-Type", "")
                self._reply(server._dispatch("POST", self.path, content_type, body))

            def _reply(self, response: Response) -> None:
                self.send_response(response.status)
                if response.content_type:
                    self.send_header("Content-Type", response.content_type)
                self.send_header("Content-Length", str(len(response.body)))
                self.end_headers()
                self.wfile.write(response.body)

            def log_message(self, format: str, *args) -> None:
                logger.debug(format, *args)

        return _Handler

    def start(self, port: int = DEFAULT_PORT) -> None:
        """Serve on ``port`` until ``stop`` is called."""
        self._stopped.clear()
        httpd = ThreadingHTTPServer(("", port), self._handler_class())
        self.address = httpd.server_address
        worker = threading.Thread(target=httpd.serve_forever, daemon=True)
        worker.start()
        logger.info("listening on port %s", self.address[1])
        self.ready.set()
        try:
            self._stopped.wait()
        finally:
            httpd.shutdown()
            httpd.server_close()
            worker.join()
            self.ready.clear()

    def stop(self) -> None:
        """Make a running ``start`` return."""
        self._stopped.set()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the dictionaries and indexes, then serve until interrupted."""
    from pagefinder.config import DEFAULT_CONFIG_PATH, Configuration
    from pagefinder.dictionary import load_dictionary
    from pagefinder.segment.jieba import Jieba
    from pagefinder.split_tool import JiebaSplitTool
    from pagefinder.web_info import load_web_info
    from pagefinder.web_query import WebPageQuery

    parser = argparse.ArgumentParser(description="Serve keyword suggestions and page search.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--page", default=DEFAULT_PAGE)
    parser.add_argument("--data-dir", default="../data")
    parser.add_argument("--jieba-dir", default="../resource/dict")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    config = Configuration(args.config)
    jieba = Jieba(
        f"{args.jieba_dir}/jieba.dict.utf8",
        f"{args.jieba_dir}/hmm_model.utf8",
        f"{args.jieba_dir}/user.dict.utf8",
        f"{args.jieba_dir}/idf.utf8",
        f"{args.jieba_dir}/stop_words.utf8",
    )
    page_query = WebPageQuery(JiebaSplitTool(jieba), load_web_info(config), config)
    server = SearchEngineServer(load_dictionary(args.data_dir), page_query, args.page)

    def _interrupt(signum, frame) -> None:
        logger.info("interrupt signal (%d) received", signum)
        server.stop()

    signal.signal(signal.SIGINT, _interrupt)
    server.start(args.port)
    return 0