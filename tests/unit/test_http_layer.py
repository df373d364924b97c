# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import ssl

import httpx

from wsmanprobe.config import HttpSettings
from wsmanprobe.http import HttpRequest, HttpResponse, StubHttpClient, create_default_http_client
from wsmanprobe.http.httpx_client import HttpxClient, _verify_option


def _mock_client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_httpx_client_posts_body_and_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["content"] = request.content
        seen["headers"] = request.headers
        return httpx.Response(200, text="<ok/>")

    client = HttpxClient(HttpSettings(user_agent="UA/1.0"), client=_mock_client(handler))
    resp = client.request(
        HttpRequest(url="http://winhost:5985/wsman", method="POST", headers={"Content-Type": "application/soap+xml"}, body=b"<x/>")
    )
    assert resp.ok is True
    assert resp.status_code == 200
    assert resp.text == "<ok/>"
    assert resp.content == b"<ok/>"
    assert resp.meta["body_truncated"] is False
    assert seen["method"] == "POST"
    assert seen["content"] == b"<x/>"
    assert seen["headers"]["User-Agent"] == "UA/1.0"
    assert seen["headers"]["Content-Type"] == "application/soap+xml"


def test_httpx_client_keeps_error_status_responses():
    client = HttpxClient(HttpSettings(), client=_mock_client(lambda request: httpx.Response(500, text="fault")))
    resp = client.request(HttpRequest(url="http://winhost:5985/wsman", method="POST"))
    assert resp.ok is True
    assert resp.status_code == 500
    assert resp.text == "fault"


def test_httpx_client_truncates_large_bodies():
    client = HttpxClient(HttpSettings(max_body_bytes=4), client=_mock_client(lambda request: httpx.Response(200, content=b"0123456789")))
    resp = client.request(HttpRequest(url="http://winhost:5985/wsman"))
    assert resp.content == b"0123"
    assert resp.meta["body_truncated"] is True


def test_httpx_client_reports_exceptions():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    client = HttpxClient(HttpSettings(), client=_mock_client(handler))
    resp = client.request(HttpRequest(url="http://winhost:5985/wsman"))
    assert resp.ok is False
    assert resp.status_code is None
    assert resp.error_message == "Connection refused"
    assert resp.error_type == "ConnectError"
    assert isinstance(resp.exception, httpx.ConnectError)


def test_verify_option(tmp_path, monkeypatch):
    assert _verify_option(HttpSettings()) is True
    assert _verify_option(HttpSettings(verify_ssl=False, ca_trust_file="ignored.pem")) is False

    calls = {}

    def fake_context(cafile=None):
        calls["cafile"] = cafile
        return ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)

    monkeypatch.setattr(ssl, "create_default_context", fake_context)
    ca_file = str(tmp_path / "ca.pem")
    assert isinstance(_verify_option(HttpSettings(ca_trust_file=ca_file)), ssl.SSLContext)
    assert calls["cafile"] == ca_file


def test_create_default_http_client_uses_settings():
    client = create_default_http_client(HttpSettings(timeout=3.0))
    try:
        assert isinstance(client, HttpxClient)
        assert client.settings.timeout == 3.0
    finally:
        client.close()


def test_stub_http_client_records_requests():
    client = StubHttpClient()
    client.add("http://a/wsman", HttpResponse(ok=True, status_code=200))
    assert client.request(HttpRequest(url="http://a/wsman")).status_code == 200
    missing = client.request(HttpRequest(url="http://b/wsman"))
    assert missing.ok is False
    assert len(client.requests) == 2


def test_httpx_client_redirects_follow_settings():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/wsman":
            return httpx.Response(302, headers={"Location": "http://winhost:5985/elsewhere"})
        return httpx.Response(200, text="moved")

    default_client = HttpxClient(HttpSettings(), client=_mock_client(handler))
    assert default_client.request(HttpRequest(url="http://winhost:5985/wsman", method="POST")).status_code == 302

    following = HttpxClient(HttpSettings(allow_redirects=True), client=_mock_client(handler))
    assert following.request(HttpRequest(url="http://winhost:5985/wsman", method="POST")).status_code == 200
