import httpx
import pytest

from ringconnect.modules.link_preview.service import (
    LinkPreviewFetchError,
    LinkPreviewService,
    extract_preview,
    get_link_preview_service,
)
from ringconnect.core.exceptions import InvalidOperationError

PREVIEW = "/api/v1/link-preview"


def service_for(handler):
    return LinkPreviewService(transport=httpx.MockTransport(handler))


@pytest.fixture()
def upstream(app):
    """Install a MockTransport-backed preview service; returns a setter for the handler"""
    state = {}

    def handler(request):
        return state["handler"](request)

    app.dependency_overrides[get_link_preview_service] = lambda: service_for(handler)
    yield lambda h: state.__setitem__("handler", h)
    app.dependency_overrides.pop(get_link_preview_service, None)


def test_open_graph_tags_win():
    page = """
    <title>Plain title</title>
    <meta property="og:title" content="OG &amp; title">
    <meta property='og:site_name' content='Lutas BR'>
    <meta name="description" content="plain description">
    <meta property="og:description" content="og description">
    """

    preview = extract_preview(page, "https://lutas.example.org/a")

    assert preview.title == "OG & title"
    assert preview.site == "Lutas BR"
    assert preview.description == "og description"
    assert preview.image == ""


def test_fallbacks_to_plain_tags_and_hostname():
    page = '<html><head><meta name="description" content="Só a descrição"></head></html>'

    preview = extract_preview(page, "https://www.ringside.example.com/x")

    assert preview.title == "ringside.example.com"
    assert preview.site == "ringside.example.com"
    assert preview.description == "Só a descrição"


def test_title_tag_is_used_before_hostname():
    preview = extract_preview("<title> Noite de lutas </title>", "https://example.org")

    assert preview.title == "Noite de lutas"


def test_service_sends_user_agent_and_follows_redirects():
    seen = []

    def handler(request):
        seen.append((str(request.url), request.headers.get("user-agent")))
        if request.url.path == "/old":
            return httpx.Response(301, headers={"location": "https://example.org/new"})
        return httpx.Response(200, text='<meta property="og:title" content="Nova">')

    preview = service_for(handler).fetch("https://example.org/old")

    assert preview.title == "Nova"
    assert [url for url, _ in seen] == ["https://example.org/old", "https://example.org/new"]
    assert all("RingConnect" in agent for _, agent in seen)


def test_service_errors():
    with pytest.raises(InvalidOperationError):
        service_for(lambda r: httpx.Response(200)).fetch("ftp://example.org/file")

    with pytest.raises(LinkPreviewFetchError) as excinfo:
        service_for(lambda r: httpx.Response(404)).fetch("https://example.org/missing")
    assert excinfo.value.status_code == 404

    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(LinkPreviewFetchError):
        service_for(refuse).fetch("https://example.org")
    assert service_for(refuse).try_fetch("https://example.org") is None


def test_endpoint_status_codes(client, upstream):
    upstream(lambda r: httpx.Response(200, text="<title>Evento</title>"))
    response = client.get(PREVIEW, params={"url": "https://example.org/evento"})
    assert response.status_code == 200
    assert response.json()["title"] == "Evento"
    assert response.json()["url"] == "https://example.org/evento"

    assert client.get(PREVIEW).status_code == 422
    assert client.get(PREVIEW, params={"url": "javascript:alert(1)"}).status_code == 400

    upstream(lambda r: httpx.Response(503))
    assert client.get(PREVIEW, params={"url": "https://example.org/down"}).status_code == 502
