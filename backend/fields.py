"""Catalog of the SEO fields the checker knows about.

Every known field has a fixed evaluation rule and a fixed place in the page
it is read from. Evaluator, scorer and recommendation checks all index by
SeoField, so adding a field means updating each of their tables.
"""

from enum import Enum
from typing import NamedTuple

from pydantic.alias_generators import to_camel

DEFAULT_CHARSET = "UTF-8"


class SeoField(str, Enum):
    TITLE = "title"
    DESCRIPTION = "description"
    CANONICAL = "canonical"
    ROBOTS = "robots"
    VIEWPORT = "viewport"
    CHARSET = "charset"
    OG_TITLE = "og_title"
    OG_DESCRIPTION = "og_description"
    OG_IMAGE = "og_image"
    OG_URL = "og_url"
    OG_TYPE = "og_type"
    OG_SITE_NAME = "og_site_name"
    TWITTER_CARD = "twitter_card"
    TWITTER_TITLE = "twitter_title"
    TWITTER_DESCRIPTION = "twitter_description"
    TWITTER_IMAGE = "twitter_image"
    TWITTER_SITE = "twitter_site"

    @property
    def key(self) -> str:
        """JSON key of the field, e.g. ``ogSiteName``."""
        return to_camel(self.value)


class FieldRule(NamedTuple):
    label: str
    required: bool = False
    optimal_min: int | None = None
    optimal_max: int | None = None


class FieldSource(NamedTuple):
    """Where a field's value lives in the page.

    kind is one of "title", "charset", "canonical" (dedicated lookups),
    "name" (``<meta name=...>``) or "property" (``<meta property=...>``).
    """

    kind: str
    attribute: str | None = None


FIELD_RULES: dict[SeoField, FieldRule] = {
    SeoField.TITLE: FieldRule("Title", required=True, optimal_min=30, optimal_max=60),
    SeoField.DESCRIPTION: FieldRule("Meta Description", required=True, optimal_min=120, optimal_max=160),
    SeoField.CANONICAL: FieldRule("Canonical URL"),
    SeoField.ROBOTS: FieldRule("Robots"),
    SeoField.VIEWPORT: FieldRule("Viewport", required=True),
    SeoField.CHARSET: FieldRule("Character Set"),
    SeoField.OG_TITLE: FieldRule("OG Title", optimal_min=30, optimal_max=60),
    SeoField.OG_DESCRIPTION: FieldRule("OG Description", optimal_min=80, optimal_max=200),
    SeoField.OG_IMAGE: FieldRule("OG Image"),
    SeoField.OG_URL: FieldRule("OG URL"),
    SeoField.OG_TYPE: FieldRule("OG Type"),
    SeoField.OG_SITE_NAME: FieldRule("OG Site Name"),
    SeoField.TWITTER_CARD: FieldRule("Twitter Card"),
    SeoField.TWITTER_TITLE: FieldRule("Twitter Title"),
    SeoField.TWITTER_DESCRIPTION: FieldRule("Twitter Description"),
    SeoField.TWITTER_IMAGE: FieldRule("Twitter Image"),
    SeoField.TWITTER_SITE: FieldRule("Twitter Site"),
}

FIELD_SOURCES: dict[SeoField, FieldSource] = {
    SeoField.TITLE: FieldSource("title"),
    SeoField.DESCRIPTION: FieldSource("name", "description"),
    SeoField.CANONICAL: FieldSource("canonical"),
    SeoField.ROBOTS: FieldSource("name", "robots"),
    SeoField.VIEWPORT: FieldSource("name", "viewport"),
    SeoField.CHARSET: FieldSource("charset"),
    SeoField.OG_TITLE: FieldSource("property", "og:title"),
    SeoField.OG_DESCRIPTION: FieldSource("property", "og:description"),
    SeoField.OG_IMAGE: FieldSource("property", "og:image"),
    SeoField.OG_URL: FieldSource("property", "og:url"),
    SeoField.OG_TYPE: FieldSource("property", "og:type"),
    SeoField.OG_SITE_NAME: FieldSource("property", "og:site_name"),
    SeoField.TWITTER_CARD: FieldSource("name", "twitter:card"),
    SeoField.TWITTER_TITLE: FieldSource("name", "twitter:title"),
    SeoField.TWITTER_DESCRIPTION: FieldSource("name", "twitter:description"),
    SeoField.TWITTER_IMAGE: FieldSource("name", "twitter:image"),
    SeoField.TWITTER_SITE: FieldSource("name", "twitter:site"),
}
