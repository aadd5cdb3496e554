"""Page fetcher: download the HTML of a single URL for analysis.

Follows redirects and refuses anything that is not a reasonably sized HTML
document. Every failure is raised as FetchError with a message fit to show
the user. Does NOT crawl further pages.
"""

import logging
import os
from pathlib import Path

import requests
from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

logger = logging.getLogger(__name__)

FETCH_TIMEOUT_SECONDS = float(os.getenv("SEO_FETCH_TIMEOUT_SECONDS", "15"))
MAX_CONTENT_LENGTH = int(os.getenv("SEO_MAX_CONTENT_LENGTH", str(5 * 1024 * 1024)))
USER_AGENT = os.getenv(
    "SEO_USER_AGENT",
    "Mozilla/5.0 (compatible; SEOMetaChecker/1.0; +https://seo-checker.app)",
).strip()

_REQUEST_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

HTML_CONTENT_TYPES = ("text/html", "application/xhtml")

TOO_LARGE_MESSAGE = "Page content is too large to analyze"


class FetchError(Exception):
    """The page could not be fetched or is not analyzable HTML."""


def _declared_length(response: requests.Response) -> int | None:
    raw = response.headers.get("content-length")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def fetch_html(url: str) -> str:
    """Fetch `url` and return its HTML text, or raise FetchError."""
    logger.info("Fetching %s", url)
    try:
        response = requests.get(
            url,
            headers=_REQUEST_HEADERS,
            timeout=FETCH_TIMEOUT_SECONDS,
            allow_redirects=True,
        )
    except requests.Timeout as exc:
        logger.warning("Fetch timed out for %s", url)
        raise FetchError("Request timed out. The website took too long to respond.") from exc
    except requests.RequestException as exc:
        logger.warning("Fetch failed for %s: %s", url, exc)
        raise FetchError(f"Failed to fetch URL: {exc}") from exc

    if not response.ok:
        logger.warning("Fetch of %s returned HTTP %s", url, response.status_code)
        raise FetchError(f"Failed to fetch URL: {response.status_code} {response.reason}")

    declared = _declared_length(response)
    if declared is not None and declared > MAX_CONTENT_LENGTH:
        raise FetchError(TOO_LARGE_MESSAGE)

    content_type = (response.headers.get("content-type") or "").lower()
    if not any(kind in content_type for kind in HTML_CONTENT_TYPES):
        raise FetchError("URL does not return HTML content")

    if "charset" not in content_type:
        # Without a declared charset requests falls back to ISO-8859-1; detect instead.
        response.encoding = response.apparent_encoding or "utf-8"
    html = response.text

    if len(html) > MAX_CONTENT_LENGTH:
        raise FetchError(TOO_LARGE_MESSAGE)

    logger.info("Fetched %s (%d characters)", response.url or url, len(html))
    return html
