"""Analysis pipeline: extract -> evaluate -> score / recommend / preview."""

import logging
from datetime import datetime, timezone

from evaluator import evaluate_tags
from extractor import extract
from previews import facebook_preview, google_preview, linkedin_preview, twitter_preview
from recommendations import generate_recommendations
from schemas import AnalysisResult
from scoring import calculate_score, score_label
from scraper import fetch_html

logger = logging.getLogger(__name__)


def analyze_html(url: str, html: str, fetched_at: datetime | None = None) -> AnalysisResult:
    """
    Build the full analysis of an already fetched page.
    Never fails on bad markup; missing data shows up as missing tags.
    """
    extracted = extract(html)
    tags = evaluate_tags(extracted)
    score = calculate_score(tags)

    result = AnalysisResult(
        url=url,
        fetched_at=fetched_at or datetime.now(timezone.utc),
        score=score,
        score_label=score_label(score),
        tags=tags,
        recommendations=generate_recommendations(tags),
        google_preview=google_preview(url, extracted),
        facebook_preview=facebook_preview(url, extracted),
        twitter_preview=twitter_preview(url, extracted),
        linkedin_preview=linkedin_preview(url, extracted),
        raw_tags=extracted["raw_tags"],
    )
    logger.info(
        "Analyzed %s: score=%d recommendations=%d",
        url,
        score,
        len(result.recommendations),
    )
    return result


def analyze_url(url: str) -> AnalysisResult:
    """Fetch `url` and analyze it. Raises scraper.FetchError if the fetch fails."""
    html = fetch_html(url)
    return analyze_html(url, html)
