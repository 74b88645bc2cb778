from starlette.responses import JSONResponse

from kanaedge.core.cors import attach_cors, cors_headers

ALLOWED_ORIGIN = "https://sotsuken-odai.pages.dev"


def test_headers_for_allowed_origin(monkeypatch):
    from kanaedge.core.config import settings

    monkeypatch.setattr(settings, "ALLOWED_ORIGIN", ALLOWED_ORIGIN)
    headers = cors_headers(ALLOWED_ORIGIN)
    assert headers["Access-Control-Allow-Origin"] == ALLOWED_ORIGIN
    assert headers["Access-Control-Allow-Methods"] == "GET,POST,OPTIONS"
    assert headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"
    assert headers["Access-Control-Max-Age"] == "86400"
    assert headers["Vary"] == "Origin"


def test_no_headers_for_other_origins(monkeypatch):
    from kanaedge.core.config import settings

    monkeypatch.setattr(settings, "ALLOWED_ORIGIN", ALLOWED_ORIGIN)
    assert cors_headers("https://evil.example") == {}
    assert cors_headers(None) == {}
    assert cors_headers(ALLOWED_ORIGIN + "/") == {}


def test_attach_cors_keeps_response(monkeypatch):
    from kanaedge.core.config import settings

    monkeypatch.setattr(settings, "ALLOWED_ORIGIN", ALLOWED_ORIGIN)
    original = JSONResponse({"ok": True}, status_code=201, headers={"X-Custom": "1"})
    wrapped = attach_cors(original, ALLOWED_ORIGIN)
    assert wrapped is not original
    assert wrapped.status_code == 201
    assert wrapped.body == original.body
    assert wrapped.headers["X-Custom"] == "1"
    assert wrapped.headers["content-type"] == "application/json"
    assert wrapped.headers["Access-Control-Allow-Origin"] == ALLOWED_ORIGIN
    assert "access-control-allow-origin" not in original.headers


def test_preflight_allowed(client):
    resp = client.options("/v1/chat/completions", headers={"Origin": ALLOWED_ORIGIN})
    assert resp.status_code == 204
    assert resp.content == b""
    assert resp.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    assert resp.headers["access-control-max-age"] == "86400"


def test_preflight_rejected(client):
    resp = client.options("/", headers={"Origin": "https://evil.example"})
    assert resp.status_code == 403
    assert "access-control-allow-origin" not in resp.headers
    assert "vary" not in resp.headers


def test_routed_responses_carry_cors(client):
    resp = client.get("/", headers={"Origin": ALLOWED_ORIGIN})
    assert resp.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    resp = client.get("/nope", headers={"Origin": ALLOWED_ORIGIN})
    assert resp.status_code == 404
    assert resp.headers["access-control-allow-origin"] == ALLOWED_ORIGIN


def test_routed_responses_from_other_origin(client):
    resp = client.get("/", headers={"Origin": "https://evil.example"})
    assert resp.status_code == 200
    assert "access-control-allow-origin" not in resp.headers
