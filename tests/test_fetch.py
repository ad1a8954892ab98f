import re
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from exemplar.fetch import fetch, fetch_all, main

BODY = b"hello, world\n"
MISSING = b"nothing here\n"


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        status, body = (200, BODY) if self.path == "/" else (404, MISSING)
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def base():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    threading.Thread(target=server.serve_forever, daemon=True).start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


_LINE = re.compile(r"(\d+\.\d\d)s  +(\d+)  (\S+)")


def test_fetch_body(base):
    assert fetch(base + "/") == BODY


def test_fetch_error_status_returns_body(base):
    assert fetch(base + "/missing") == MISSING


def test_fetch_bad_url():
    with pytest.raises(ValueError):
        fetch("notaurl")


def test_main_reports_error(capsys):
    assert main(["notaurl"]) == 1
    assert capsys.readouterr().err.startswith("fetch: ")


def test_fetch_all_lines(base):
    urls = [base + "/", base + "/missing"]
    lines = list(fetch_all(urls))
    assert len(lines) == 2
    sizes = {}
    for line in lines:
        m = _LINE.fullmatch(line)
        assert m is not None
        sizes[m.group(3)] = int(m.group(2))
    assert sizes == {urls[0]: len(BODY), urls[1]: len(MISSING)}


def test_fetch_all_size_field_width(base):
    (line,) = fetch_all([base + "/"])
    assert f"s  {len(BODY):7d}  {base}/" in line


def test_fetch_all_error_line(base):
    lines = list(fetch_all(["notaurl", base + "/"]))
    assert len(lines) == 2
    assert sum(1 for line in lines if _LINE.fullmatch(line)) == 1


def test_fetch_all_empty():
    assert list(fetch_all([])) == []


def test_main_all(base, capsys):
    assert main(["--all", base + "/"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[0].endswith(base + "/")
    assert re.fullmatch(r"\d+\.\d\ds elapsed", out[1])