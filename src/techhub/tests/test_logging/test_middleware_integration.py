# src/techhub/tests/test_logging/test_middleware_integration.py
import json
import logging

from fastapi import FastAPI
from starlette.testclient import TestClient

from techhub.core.logging.builder import setup_logging
from techhub.core.logging.middleware import REQUEST_ID_HEADER, RequestIDMiddleware, resolve_request_id

from ..conftest import make_test_settings


def _hello_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/hello")
    def hello():
        logging.getLogger("techhub.hello").info("handling hello")
        return {"ok": True}

    return app


def test_request_id_in_response_and_logs(tmp_path, capsys, restore_logging):
    setup_logging(make_test_settings(LOG_FORMAT="json", LOG_TO_STDOUT=True, LOG_DIR=tmp_path))

    resp = TestClient(_hello_app()).get("/hello")
    assert resp.status_code == 200

    rid = resp.headers.get(REQUEST_ID_HEADER)
    assert rid

    stderr = capsys.readouterr().err.strip()
    assert stderr, "Expected logs on stderr but nothing was captured."

    records = []
    for line in stderr.splitlines():
        try:
            records.append(json.loads(line))
        except ValueError:
            continue

    handled = [r for r in records if r.get("message") == "handling hello"]
    assert handled and handled[0]["request_id"] == rid

    access = [r for r in records if r.get("message") == "http.request"]
    assert access
    assert access[0]["request_id"] == rid
    assert access[0]["status_code"] == 200
    assert access[0]["path"] == "/hello"


def test_incoming_request_id_is_echoed():
    resp = TestClient(_hello_app()).get("/hello", headers={REQUEST_ID_HEADER: "client-42"})

    assert resp.headers[REQUEST_ID_HEADER] == "client-42"


def test_unsafe_request_id_is_replaced():
    assert resolve_request_id("ok.id:1") == "ok.id:1"
    assert resolve_request_id("bad\nid") != "bad\nid"
    assert resolve_request_id("x" * 65) != "x" * 65
    assert len(resolve_request_id(None)) == 36


def test_failing_request_still_logs_one_line(caplog):
    """
    Behavior:
      - A route raising an unexpected exception still produces exactly one
        `http.request` record, with status 500.

    Importance:
      - Server errors are the requests that most need to be traced.
    """
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/explode")
    def explode():
        raise RuntimeError("boom")

    with caplog.at_level(logging.INFO, logger="techhub.core.logging.middleware"):
        resp = TestClient(app, raise_server_exceptions=False).get(
            "/explode", headers={REQUEST_ID_HEADER: "trace-500"}
        )

    assert resp.status_code == 500
    lines = [r for r in caplog.records if r.getMessage() == "http.request"]
    assert len(lines) == 1
    assert lines[0].status_code == 500
    assert lines[0].path == "/explode"
    assert lines[0].duration_ms >= 0
