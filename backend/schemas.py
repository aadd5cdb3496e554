"""Pydantic schemas for API request/response.

Response models are frozen value objects. They keep snake_case attributes in
Python and serialize with camelCase keys; optional values are emitted as
explicit nulls.
"""

from collections.abc import Iterator
from datetime import datetime
from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from fields import SeoField

TagStatus = Literal["success", "warning", "error", "missing"]
Severity = Literal["critical", "warning", "suggestion"]


class AnalyzeRequest(BaseModel):
    """Request body for POST /api/analyze."""

    url: str

    @field_validator("url", mode="before")
    @classmethod
    def normalize_url(cls, value: object) -> str:
        return str(value or "").strip()

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("Please enter a valid URL")
        return value


class ResultModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class RawTag(ResultModel):
    """One tag occurrence as found in the page."""

    name: str
    content: str | None = None
    property: str | None = None


class TagAnalysis(ResultModel):
    """Evaluation of a single known SEO field."""

    key: str
    label: str
    content: str | None
    status: TagStatus
    character_count: int
    optimal_min: int | None = None
    optimal_max: int | None = None
    message: str
    required: bool


class SeoTags(ResultModel):
    """The fixed set of evaluated fields, one attribute per SeoField."""

    title: TagAnalysis
    description: TagAnalysis
    canonical: TagAnalysis
    robots: TagAnalysis
    viewport: TagAnalysis
    charset: TagAnalysis
    og_title: TagAnalysis
    og_description: TagAnalysis
    og_image: TagAnalysis
    og_url: TagAnalysis
    og_type: TagAnalysis
    og_site_name: TagAnalysis
    twitter_card: TagAnalysis
    twitter_title: TagAnalysis
    twitter_description: TagAnalysis
    twitter_image: TagAnalysis
    twitter_site: TagAnalysis

    def get(self, field: SeoField) -> TagAnalysis:
        return getattr(self, field.value)

    def by_field(self) -> Iterator[tuple[SeoField, TagAnalysis]]:
        """Yield (field, analysis) pairs in declaration order."""
        for name in type(self).model_fields:
            yield SeoField(name), getattr(self, name)


class Recommendation(ResultModel):
    id: str
    severity: Severity
    title: str
    description: str
    current_value: str | None = None
    suggested_value: str | None = None


class GooglePreview(ResultModel):
    title: str
    url: str
    description: str


class SocialPreview(ResultModel):
    """Facebook / Open Graph card."""

    title: str
    description: str
    image: str | None
    url: str
    site_name: str
    type: str


class TwitterPreview(ResultModel):
    card: str
    title: str
    description: str
    image: str | None
    site: str | None


class LinkedInPreview(ResultModel):
    title: str
    description: str
    image: str | None
    url: str
    site_name: str


class AnalysisResult(ResultModel):
    """Full analysis returned by POST /api/analyze."""

    url: str
    fetched_at: datetime
    score: int
    score_label: str
    tags: SeoTags
    recommendations: list[Recommendation]
    google_preview: GooglePreview
    facebook_preview: SocialPreview
    twitter_preview: TwitterPreview
    linkedin_preview: LinkedInPreview
    raw_tags: list[RawTag]
