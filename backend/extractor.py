"""Extract SEO-relevant tags from raw HTML.

Works on the markup as served (no scripts are run). The parser is tolerant:
broken markup degrades to missing values, never to an exception.
"""

import logging
import re

from bs4 import BeautifulSoup, Tag

from models import ExtractedTags
from schemas import RawTag

logger = logging.getLogger(__name__)

_CHARSET_PARAM = re.compile(r"charset=([^\"'\s;]+)", re.I)
_TITLE = re.compile(r"<title(?:\s[^>]*)?>(.*?)</title\s*>", re.I | re.S)


def empty_extraction() -> ExtractedTags:
    return {
        "title": None,
        "charset": None,
        "canonical": None,
        "named": {},
        "propertied": {},
        "raw_tags": [],
    }


def _parse(html: str) -> BeautifulSoup:
    # Keep attribute values as plain strings (rel="canonical" stays a str).
    return BeautifulSoup(html, "html.parser", multi_valued_attributes=None)


def _attr(tag: Tag, name: str) -> str | None:
    value = tag.get(name)
    if value is None:
        return None
    return str(value)


def extract_title(html: str) -> str | None:
    """First <title> text exactly as written in the source (entities stay encoded)."""
    match = _TITLE.search(html)
    if match is None:
        return None
    return match.group(1).strip() or None


def extract_charset(metas: list[Tag]) -> str | None:
    for meta in metas:
        charset = (_attr(meta, "charset") or "").strip()
        if charset:
            return charset

    for meta in metas:
        if (_attr(meta, "http-equiv") or "").strip().lower() != "content-type":
            continue
        match = _CHARSET_PARAM.search(_attr(meta, "content") or "")
        if match:
            return match.group(1)
    return None


def extract_canonical(soup: BeautifulSoup) -> str | None:
    for link in soup.find_all("link"):
        if (_attr(link, "rel") or "").strip().lower() != "canonical":
            continue
        href = _attr(link, "href")
        if href:
            return href
    return None


def _index_metas(metas: list[Tag], attribute: str) -> dict[str, str | None]:
    index: dict[str, str | None] = {}
    for meta in metas:
        key = _attr(meta, attribute)
        content = _attr(meta, "content")
        if key is None or content is None:
            continue
        index.setdefault(key, content or None)
    return index


def _collect_raw_tags(
    metas: list[Tag],
    title: str | None,
    charset: str | None,
    canonical: str | None,
) -> list[RawTag]:
    raw_tags: list[RawTag] = []
    if title:
        raw_tags.append(RawTag(name="title", content=title))
    if charset:
        raw_tags.append(RawTag(name="charset", content=charset))

    for meta in metas:
        name = _attr(meta, "name")
        prop = _attr(meta, "property")
        content = _attr(meta, "content")
        if content is None:
            continue
        if name:
            raw_tags.append(RawTag(name=name, content=content))
        elif prop:
            raw_tags.append(RawTag(name=prop, content=content, property=prop))

    if canonical:
        raw_tags.append(RawTag(name="canonical", content=canonical))
    return raw_tags


def extract(html: str) -> ExtractedTags:
    """Scan `html` once and return every value the analysis needs."""
    try:
        soup = _parse(html or "")
    except Exception as exc:
        logger.warning("HTML parse failed, treating page as empty: %s", exc)
        return empty_extraction()

    metas = [meta for meta in soup.find_all("meta") if isinstance(meta, Tag)]
    title = extract_title(html or "")
    charset = extract_charset(metas)
    canonical = extract_canonical(soup)

    return {
        "title": title,
        "charset": charset,
        "canonical": canonical,
        "named": _index_metas(metas, "name"),
        "propertied": _index_metas(metas, "property"),
        "raw_tags": _collect_raw_tags(metas, title, charset, canonical),
    }
