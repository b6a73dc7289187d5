"""
Link preview fetching.

Downloads a page and reads its Open Graph tags for the card shown under a
post link, falling back to plain meta tags, the <title> and the host name.
"""
import html
import logging
import re
from typing import Optional
from urllib.parse import urlparse

import httpx

from ringconnect.core.config import settings
from ringconnect.core.exceptions import InvalidOperationError, RingConnectError
from ringconnect.modules.link_preview.schemas import LinkPreview

logger = logging.getLogger(__name__)

class LinkPreviewFetchError(RingConnectError):
    """The target page could not be fetched"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, code="LINK_PREVIEW_UPSTREAM", details={"status_code": status_code})
        self.status_code = status_code

_CONTENT = r"""content=(?:"([^"]*)"|'([^']*)')"""

def _meta(page: str, attr: str, name: str) -> Optional[str]:
    """Content of <meta {attr}="{name}" content="...">, in either attribute order"""
    key = rf"""{attr}=["']{re.escape(name)}["']"""
    patterns = (
        rf"<meta\s+[^>]*?{key}[^>]*?\s{_CONTENT}",
        rf"<meta\s+[^>]*?{_CONTENT}[^>]*?\s{key}",
    )
    for pattern in patterns:
        match = re.search(pattern, page, re.IGNORECASE)
        if match:
            value = (match.group(1) if match.group(1) is not None else match.group(2)).strip()
            if value:
                return html.unescape(value)
    return None

def _title(page: str) -> Optional[str]:
    match = re.search(r"<title[^>]*>([^<]*)</title>", page, re.IGNORECASE)
    if match and match.group(1).strip():
        return html.unescape(match.group(1).strip())
    return None

def extract_preview(page: str, url: str) -> LinkPreview:
    """Build a preview from already-downloaded HTML"""
    host = (urlparse(url).hostname or "").lower()
    domain = host[4:] if host.startswith("www.") else host

    return LinkPreview(
        title=_meta(page, "property", "og:title") or _title(page) or domain,
        description=_meta(page, "property", "og:description") or _meta(page, "name", "description") or "",
        image=_meta(page, "property", "og:image") or "",
        site=_meta(page, "property", "og:site_name") or domain,
        url=url,
    )

def validate_url(url: str) -> str:
    url = (url or "").strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise InvalidOperationError("URL must be an absolute http(s) URL", details={"url": url})
    return url

class LinkPreviewService:
    """Fetches pages for link previews; no retries"""

    def __init__(self, transport: Optional[httpx.BaseTransport] = None, timeout: Optional[float] = None):
        self.transport = transport
        self.timeout = timeout if timeout is not None else settings.LINK_PREVIEW_TIMEOUT
        self.headers = {"User-Agent": settings.LINK_PREVIEW_USER_AGENT}

    def fetch(self, url: str) -> LinkPreview:
        """
        Fetch ``url`` and extract its preview.

        Raises:
            InvalidOperationError: the URL is not http(s)
            LinkPreviewFetchError: transport failure or a non-2xx answer
        """
        url = validate_url(url)
        try:
            with httpx.Client(
                transport=self.transport,
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
            ) as client:
                response = client.get(url)
        except httpx.HTTPError as e:
            logger.warning(f"Link preview fetch failed for {url}: {e}")
            raise LinkPreviewFetchError(f"Failed to fetch URL: {e}") from e

        if not response.is_success:
            logger.warning(f"Link preview fetch for {url} returned {response.status_code}")
            raise LinkPreviewFetchError(f"Failed to fetch URL: {response.status_code}", response.status_code)

        preview = extract_preview(response.text, url)
        logger.debug(f"Link preview for {url}: {preview.title!r}")
        return preview

    def try_fetch(self, url: str) -> Optional[LinkPreview]:
        """Best-effort variant used when creating posts"""
        try:
            return self.fetch(url)
        except RingConnectError as e:
            logger.info(f"No link preview for {url}: {e}")
            return None

def get_link_preview_service() -> LinkPreviewService:
    return LinkPreviewService()
