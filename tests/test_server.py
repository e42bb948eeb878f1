import json
import threading
import urllib.error
import urllib.request

import pytest

from pagefinder.dictionary import Dictionary
from pagefinder.server import SearchEngineServer

FORM = "application/x-www-form-urlencoded"


class RecordingQuery:
    def __init__(self):
        self.keys = []

    def query(self, key):
        self.keys.append(key)
        return json.dumps({"result": [], "key": key}, ensure_ascii=False)


def _dictionary():
    dictionary = Dictionary()
    dictionary.entries = [("hello", 5), ("help", 3)]
    dictionary.index = {
        "h": {0, 1},
        "e": {0, 1},
        "l": {0, 1},
        "o": {0},
        "p": {1},
    }
    return dictionary


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "search.html"
    path.write_text("<html>search</html>", encoding="utf-8")
    return path


def test_candidate_rejects_other_content_types(page):
    server = SearchEngineServer(_dictionary(), RecordingQuery(), str(page))
    assert server.handle_candidate("application/json", b"query=hel").status == 400


def test_candidate_returns_suggestions(page):
    server = SearchEngineServer(_dictionary(), RecordingQuery(), str(page))
    response = server.handle_candidate(FORM + "; charset=UTF-8", b"query=hel")
    assert response.status == 200
    assert response.content_type == "application/json; charset=utf-8"
    assert json.loads(response.body) == {"query": ["help", "hello"]}


def test_candidate_without_matches_is_null(page):
    server = SearchEngineServer(_dictionary(), RecordingQuery(), str(page))
    response = server.handle_candidate(FORM, b"query=zzz")
    assert json.loads(response.body) is None


def test_search_decodes_query_and_returns_result(page):
    page_query = RecordingQuery()
    server = SearchEngineServer(_dictionary(), page_query, str(page))
    response = server.handle_search(FORM, b"query=%E4%BD%A0%E5%A5%BD")
    assert page_query.keys == ["你好"]
    assert json.loads(response.body.decode("utf-8")) == {"result": [], "key": "你好"}


def test_search_rejects_other_content_types(page):
    page_query = RecordingQuery()
    server = SearchEngineServer(_dictionary(), page_query, str(page))
    assert server.handle_search("text/plain", "query=x").status == 400
    assert page_query.keys == []


def test_static_page(page, tmp_path):
    server = SearchEngineServer(_dictionary(), RecordingQuery(), str(page))
    response = server.static_page()
    assert (response.status, response.body) == (200, b"<html>search</html>")
    missing = SearchEngineServer(_dictionary(), RecordingQuery(), str(tmp_path / "none.html"))
    assert missing.static_page().status == 404


def test_start_serves_until_stopped(page):
    server = SearchEngineServer(_dictionary(), RecordingQuery(), str(page))
    thread = threading.Thread(target=server.start, args=(0,), daemon=True)
    thread.start()
    assert server.ready.wait(5)
    base = f"http://127.0.0.1:{server.address[1]}"
    try:
        with urllib.request.urlopen(f"{base}/candidate", timeout=5) as resp:
            assert resp.read() == b"<html>search</html>"
        request = urllib.request.Request(
            f"{base}/candidate", data=b"query=hel", headers={"Content-Type": FORM}
        )
        with urllib.request.urlopen(request, timeout=5) as resp:
            assert json.loads(resp.read()) == {"query": ["help", "hello"]}
        with pytest.raises(urllib.error.HTTPError) as excinfo:
            urllib.request.urlopen(f"{base}/nowhere", timeout=5)
        assert excinfo.value.code == 404
    finally:
        server.stop()
        thread.join(5)
    assert not thread.is_alive()