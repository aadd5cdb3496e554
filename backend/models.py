"""Internal data types passed between pipeline stages.

API response models live in schemas.py.
"""

from typing import TypedDict

from schemas import RawTag


class ExtractedTags(TypedDict):
    """Structured output of the tag extractor."""

    title: str | None
    charset: str | None
    canonical: str | None
    named: dict[str, str | None]
    propertied: dict[str, str | None]
    raw_tags: list[RawTag]
