"""Turn the evaluated tag set into an ordered list of improvement suggestions.

Checks run in a fixed order and each adds at most one recommendation, so the
output order is the check order, not severity order. Use sort_by_severity
when grouping is needed.
"""

from collections.abc import Callable

from schemas import Recommendation, SeoTags, Severity

TITLE_DISPLAY_LIMIT = 60
DESCRIPTION_DISPLAY_LIMIT = 160

SEVERITY_ORDER: dict[Severity, int] = {"critical": 0, "warning": 1, "suggestion": 2}


def _check_title(tags: SeoTags) -> Recommendation | None:
    title = tags.title
    if title.content is None:
        return Recommendation(
            id="missing-title",
            severity="critical",
            title="Missing page title",
            description=(
                "The title tag is essential for SEO and social sharing. "
                "It appears in search results and browser tabs."
            ),
            suggested_value="<title>Your Page Title | Brand Name</title>",
        )
    if title.character_count > TITLE_DISPLAY_LIMIT:
        return Recommendation(
            id="title-too-long",
            severity="warning",
            title="Title may be truncated",
            description="Search engines typically display 50-60 characters. Consider shortening your title.",
            current_value=title.content,
            suggested_value=title.content[:57] + "...",
        )
    return None


def _check_description(tags: SeoTags) -> Recommendation | None:
    description = tags.description
    if description.content is None:
        return Recommendation(
            id="missing-description",
            severity="critical",
            title="Missing meta description",
            description=(
                "Meta descriptions provide a summary for search engines. "
                "They influence click-through rates from search results."
            ),
            suggested_value=(
                '<meta name="description" content="A compelling description of your page in 150-160 characters." />'
            ),
        )
    if description.character_count > DESCRIPTION_DISPLAY_LIMIT:
        return Recommendation(
            id="description-too-long",
            severity="warning",
            title="Description may be truncated",
            description=(
                "Search engines typically display 150-160 characters. Consider shortening your description."
            ),
            current_value=description.content,
        )
    return None


def _check_open_graph(tags: SeoTags) -> Recommendation | None:
    og_tags = (tags.og_title, tags.og_description, tags.og_image)
    if any(tag.content is not None for tag in og_tags):
        return None
    return Recommendation(
        id="missing-og-tags",
        severity="warning",
        title="Missing Open Graph tags",
        description=(
            "Open Graph tags control how your content appears when shared on "
            "Facebook, LinkedIn, and other platforms."
        ),
        suggested_value=(
            '<meta property="og:title" content="Your Title" />\n'
            '<meta property="og:description" content="Your description" />\n'
            '<meta property="og:image" content="https://example.com/image.jpg" />'
        ),
    )


def _check_og_image(tags: SeoTags) -> Recommendation | None:
    if tags.og_image.content is not None:
        return None
    return Recommendation(
        id="missing-og-image",
        severity="suggestion",
        title="No Open Graph image set",
        description=(
            "Adding an og:image makes your content more visually appealing when "
            "shared on social media. Recommended size: 1200x630 pixels."
        ),
        suggested_value='<meta property="og:image" content="https://example.com/og-image.jpg" />',
    )


def _check_twitter_card(tags: SeoTags) -> Recommendation | None:
    if tags.twitter_card.content is not None:
        return None
    return Recommendation(
        id="missing-twitter-card",
        severity="suggestion",
        title="Missing Twitter Card meta tag",
        description=(
            "Twitter Cards enhance how your content appears when shared on Twitter/X. "
            "Use 'summary_large_image' for maximum impact."
        ),
        suggested_value='<meta name="twitter:card" content="summary_large_image" />',
    )


def _check_canonical(tags: SeoTags) -> Recommendation | None:
    if tags.canonical.content is not None:
        return None
    return Recommendation(
        id="missing-canonical",
        severity="suggestion",
        title="No canonical URL specified",
        description=(
            "A canonical URL helps prevent duplicate content issues by specifying "
            "the preferred version of a page."
        ),
        suggested_value='<link rel="canonical" href="https://example.com/your-page" />',
    )


def _check_viewport(tags: SeoTags) -> Recommendation | None:
    if tags.viewport.content is not None:
        return None
    return Recommendation(
        id="missing-viewport",
        severity="warning",
        title="Missing viewport meta tag",
        description="The viewport tag is essential for responsive design and mobile-friendliness.",
        suggested_value='<meta name="viewport" content="width=device-width, initial-scale=1" />',
    )


CHECKS: list[Callable[[SeoTags], Recommendation | None]] = [
    _check_title,
    _check_description,
    _check_open_graph,
    _check_og_image,
    _check_twitter_card,
    _check_canonical,
    _check_viewport,
]


def generate_recommendations(tags: SeoTags) -> list[Recommendation]:
    recommendations: list[Recommendation] = []
    for check in CHECKS:
        recommendation = check(tags)
        if recommendation is not None:
            recommendations.append(recommendation)
    return recommendations


def sort_by_severity(recommendations: list[Recommendation]) -> list[Recommendation]:
    """Critical first, then warnings, then suggestions; check order kept within a group."""
    return sorted(recommendations, key=lambda rec: SEVERITY_ORDER[rec.severity])


def count_by_severity(recommendations: list[Recommendation]) -> dict[Severity, int]:
    counts: dict[Severity, int] = {"critical": 0, "warning": 0, "suggestion": 0}
    for rec in recommendations:
        counts[rec.severity] += 1
    return counts
