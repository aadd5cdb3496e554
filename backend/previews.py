"""Map extracted values onto the search result and social card previews.

Each surface has its own fallback chain; the first non-empty source wins.
"""

from urllib.parse import urlparse

from evaluator import field_content
from fields import SeoField
from models import ExtractedTags
from schemas import GooglePreview, LinkedInPreview, SocialPreview, TwitterPreview

DEFAULT_TWITTER_CARD = "summary_large_image"
DEFAULT_OG_TYPE = "website"


def _first(*values: str | None) -> str | None:
    for value in values:
        if value:
            return value
    return None


def _hostname(url: str) -> str:
    return urlparse(url).hostname or url


def google_preview(url: str, extracted: ExtractedTags) -> GooglePreview:
    title = field_content(extracted, SeoField.TITLE)
    description = field_content(extracted, SeoField.DESCRIPTION)
    return GooglePreview(
        title=_first(title, field_content(extracted, SeoField.OG_TITLE)) or "No title",
        url=url,
        description=_first(description, field_content(extracted, SeoField.OG_DESCRIPTION))
        or "No description available",
    )


def facebook_preview(url: str, extracted: ExtractedTags) -> SocialPreview:
    og_type = field_content(extracted, SeoField.OG_TYPE)
    linkedin = linkedin_preview(url, extracted)
    return SocialPreview(
        title=linkedin.title,
        description=linkedin.description,
        image=linkedin.image,
        url=url,
        site_name=linkedin.site_name,
        type=og_type or DEFAULT_OG_TYPE,
    )


def linkedin_preview(url: str, extracted: ExtractedTags) -> LinkedInPreview:
    title = _first(
        field_content(extracted, SeoField.OG_TITLE),
        field_content(extracted, SeoField.TITLE),
    )
    description = _first(
        field_content(extracted, SeoField.OG_DESCRIPTION),
        field_content(extracted, SeoField.DESCRIPTION),
    )
    return LinkedInPreview(
        title=title or "No title",
        description=description or "No description",
        image=field_content(extracted, SeoField.OG_IMAGE),
        url=url,
        site_name=field_content(extracted, SeoField.OG_SITE_NAME) or _hostname(url),
    )


def twitter_preview(url: str, extracted: ExtractedTags) -> TwitterPreview:
    og_title = field_content(extracted, SeoField.OG_TITLE)
    og_description = field_content(extracted, SeoField.OG_DESCRIPTION)
    title = _first(
        field_content(extracted, SeoField.TWITTER_TITLE),
        og_title,
        field_content(extracted, SeoField.TITLE),
    )
    description = _first(
        field_content(extracted, SeoField.TWITTER_DESCRIPTION),
        og_description,
        field_content(extracted, SeoField.DESCRIPTION),
    )
    image = _first(
        field_content(extracted, SeoField.TWITTER_IMAGE),
        field_content(extracted, SeoField.OG_IMAGE),
    )
    return TwitterPreview(
        card=field_content(extracted, SeoField.TWITTER_CARD) or DEFAULT_TWITTER_CARD,
        title=title or "No title",
        description=description or "No description",
        image=image,
        site=field_content(extracted, SeoField.TWITTER_SITE),
    )
