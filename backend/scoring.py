"""Weighted 0-100 SEO score computed from the evaluated tag set."""

from typing import NamedTuple

from fields import SeoField
from schemas import SeoTags


class ScoreWeight(NamedTuple):
    weight: int  # lost when the field is missing or in error
    penalty: int  # lost when the field has a warning


SCORE_WEIGHTS: dict[SeoField, ScoreWeight] = {
    SeoField.TITLE: ScoreWeight(15, 5),
    SeoField.DESCRIPTION: ScoreWeight(15, 5),
    SeoField.CANONICAL: ScoreWeight(5, 0),
    SeoField.ROBOTS: ScoreWeight(3, 0),
    SeoField.VIEWPORT: ScoreWeight(8, 3),
    SeoField.CHARSET: ScoreWeight(4, 0),
    SeoField.OG_TITLE: ScoreWeight(8, 2),
    SeoField.OG_DESCRIPTION: ScoreWeight(8, 2),
    SeoField.OG_IMAGE: ScoreWeight(10, 3),
    SeoField.OG_URL: ScoreWeight(4, 0),
    SeoField.OG_TYPE: ScoreWeight(3, 0),
    SeoField.OG_SITE_NAME: ScoreWeight(3, 0),
    SeoField.TWITTER_CARD: ScoreWeight(5, 0),
    SeoField.TWITTER_TITLE: ScoreWeight(3, 0),
    SeoField.TWITTER_DESCRIPTION: ScoreWeight(3, 0),
    SeoField.TWITTER_IMAGE: ScoreWeight(3, 0),
    SeoField.TWITTER_SITE: ScoreWeight(2, 0),
}

SCORE_LABELS = [
    (90, "Excellent"),
    (80, "Good"),
    (60, "Fair"),
    (40, "Needs Work"),
]


def calculate_score(tags: SeoTags) -> int:
    """Start at 100 and subtract each field's weight or penalty by status."""
    score = 100
    for field, tag in tags.by_field():
        weights = SCORE_WEIGHTS[field]
        if tag.status in ("error", "missing"):
            score -= weights.weight
        elif tag.status == "warning":
            score -= weights.penalty
    return max(0, min(100, round(score)))


def score_label(score: int) -> str:
    for threshold, label in SCORE_LABELS:
        if score >= threshold:
            return label
    return "Poor"
