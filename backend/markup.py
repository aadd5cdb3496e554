"""Render extracted raw tags back into copyable HTML."""

from html import escape

from schemas import RawTag


def _quoted(value: str | None) -> str:
    return escape(value or "", quote=True)


def render_tag(tag: RawTag) -> str:
    content = _quoted(tag.content)
    if tag.property:
        return f'<meta property="{_quoted(tag.property)}" content="{content}" />'
    if tag.name == "title":
        # Title text is kept as written in the source, entities included.
        return f"<title>{tag.content or ''}</title>"
    if tag.name == "charset":
        return f'<meta charset="{_quoted(tag.content or "UTF-8")}" />'
    if tag.name == "canonical":
        return f'<link rel="canonical" href="{content}" />'
    return f'<meta name="{_quoted(tag.name)}" content="{content}" />'


def render_tags(tags: list[RawTag]) -> str:
    """All tags, one per line, in extraction order."""
    return "\n".join(render_tag(tag) for tag in tags)
