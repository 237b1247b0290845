"""HTTP preview fetcher — implements the PreviewFetcher port with httpx + BeautifulSoup.

Fetches the linked page with a bounded timeout and size cap, then extracts
Open Graph metadata, falling back to Twitter card tags and plain HTML
``<title>`` / ``<meta name="description">``.
"""

import asyncio
import logging
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from link_uploader.application.interfaces import PreviewFetcher
from link_uploader.domain.entities import LinkPreview

logger = logging.getLogger(__name__)

_HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")
_MAX_FIELD_LENGTH = 1000


def _meta_content(soup: BeautifulSoup, *keys: str) -> str | None:
    """Return the first non-empty ``content`` of a <meta property|name=key> tag."""
    for key in keys:
        tag = soup.find("meta", attrs={"property": key}) or soup.find("meta", attrs={"name": key})
        if tag is None:
            continue
        content = tag.get("content")
        if isinstance(content, str) and content.strip():
            return " ".join(content.split())[:_MAX_FIELD_LENGTH]
    return None


def parse_preview(html: str, base_url: str) -> LinkPreview | None:
    """Extract preview fields from an HTML document.

    Returns None when the page carries neither a title, a description nor an image.
    """
    soup = BeautifulSoup(html, "html.parser")

    title = _meta_content(soup, "og:title", "twitter:title")
    if title is None and soup.title is not None and soup.title.string:
        title = " ".join(soup.title.string.split())[:_MAX_FIELD_LENGTH] or None

    description = _meta_content(soup, "og:description", "twitter:description", "description")

    image_url = _meta_content(soup, "og:image", "og:image:url", "twitter:image")
    if image_url is not None:
        image_url = urljoin(base_url, image_url)

    preview = LinkPreview(title=title, description=description, image_url=image_url)
    return None if preview.is_empty() else preview


class HttpPreviewFetcher(PreviewFetcher):
    """Infrastructure adapter — fetches link previews over HTTP.

    Uses an injected ``httpx.AsyncClient`` when provided (shared connection
    pool), otherwise a short-lived client per fetch. Never raises: any
    network, status, content-type or parse failure yields None.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        max_bytes: int = 1_000_000,
        user_agent: str = "LinkUploaderPreviewBot/1.0",
        http_client: httpx.AsyncClient | None = None,
    ):
        self._timeout = timeout
        self._max_bytes = max_bytes
        self._user_agent = user_agent
        self._http_client = http_client

    def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or a fresh one (caller closes it)."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout),
            follow_redirects=True,
        )

    async def fetch_preview(self, url: str) -> LinkPreview | None:
        client = self._get_client()
        should_close = self._http_client is None
        try:
            return await asyncio.wait_for(self._fetch(client, url), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.info("Preview fetch timed out after %.1fs: %s", self._timeout, url)
        except httpx.HTTPError as exc:
            logger.info("Preview fetch failed for %s: %s", url, exc)
        except Exception:
            logger.debug("Preview extraction failed for %s", url, exc_info=True)
        finally:
            if should_close:
                await client.aclose()
        return None

    async def _fetch(self, client: httpx.AsyncClient, url: str) -> LinkPreview | None:
        headers = {
            "User-Agent": self._user_agent,
            "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.5",
        }
        async with client.stream("GET", url, headers=headers) as response:
            if not response.is_success:
                logger.info("Preview fetch for %s returned HTTP %d", url, response.status_code)
                return None

            content_type = response.headers.get("content-type", "").lower()
            if not content_type.startswith(_HTML_CONTENT_TYPES):
                logger.debug("Skipping non-HTML preview target %s (%s)", url, content_type)
                return None

            body = bytearray()
            async for chunk in response.aiter_bytes():
                body.extend(chunk)
                if len(body) >= self._max_bytes:
                    break

            html = bytes(body[: self._max_bytes]).decode(
                response.encoding or "utf-8", errors="replace"
            )
            return parse_preview(html, str(response.url))
