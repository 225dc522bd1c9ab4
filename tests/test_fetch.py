import httpx
import pytest

from ingest_service.errors import FetchError
from ingest_service.fetch.snapshot import candidate_urls, fetch_source

PAGE = b"<html><body><p>PROPOSITIO I</p></body></html>"


def transport(handler):
    return httpx.MockTransport(handler)


def test_candidate_urls():
    assert candidate_urls("https://example.org/a") == ["https://example.org/a", "http://example.org/a"]
    assert candidate_urls("http://example.org/a") == ["http://example.org/a"]


def test_stores_bytes_as_served(tmp_path):
    def handler(request):
        assert request.headers["User-Agent"] == "ethica-test"
        return httpx.Response(200, content=PAGE, headers={"content-type": "text/html; charset=iso-8859-1"})

    target = tmp_path / "raw" / "latin.html"
    snap = fetch_source("https://example.org/a", target, user_agent="ethica-test", transport=transport(handler))
    assert target.read_bytes() == PAGE
    assert snap.size == len(PAGE)
    assert snap.url == "https://example.org/a"
    assert snap.content_type.startswith("text/html")
    assert len(snap.sha256) == 64


def test_falls_back_to_http(tmp_path):
    seen = []

    def handler(request):
        seen.append(request.url.scheme)
        if request.url.scheme == "https":
            raise httpx.ConnectError("tls handshake failed", request=request)
        return httpx.Response(200, content=PAGE)

    snap = fetch_source("https://example.org/a", tmp_path / "a.html", user_agent="t", transport=transport(handler))
    assert seen == ["https", "http"]
    assert snap.url == "http://example.org/a"


def test_every_candidate_failing(tmp_path):
    def handler(request):
        return httpx.Response(404)

    target = tmp_path / "a.html"
    with pytest.raises(FetchError) as excinfo:
        fetch_source("https://example.org/a", target, user_agent="t", transport=transport(handler))
    assert "https://example.org/a" in excinfo.value.message
    assert "http://example.org/a" in excinfo.value.message
    assert not target.exists()


def test_oversized_response_rejected(tmp_path):
    def handler(request):
        return httpx.Response(200, content=PAGE)

    target = tmp_path / "a.html"
    with pytest.raises(FetchError, match="max_bytes=10"):
        fetch_source("https://example.org/a", target, user_agent="t", max_bytes=10, transport=transport(handler))
    assert not target.exists()
