"""Classify each known field's extracted value into a status and message."""

from fields import DEFAULT_CHARSET, FIELD_RULES, FIELD_SOURCES, FieldRule, SeoField
from models import ExtractedTags
from schemas import SeoTags, TagAnalysis, TagStatus


def _range_text(optimal_min: int | None, optimal_max: int | None) -> str:
    if optimal_min is not None and optimal_max is not None:
        return f"{optimal_min}-{optimal_max} characters"
    if optimal_min is not None:
        return f"at least {optimal_min} characters"
    return f"at most {optimal_max} characters"


def evaluate_tag(key: str, label: str, content: str | None, rule: FieldRule) -> TagAnalysis:
    """Evaluate one field value against its rule. The first matching branch wins."""
    character_count = len(content) if content is not None else 0
    status: TagStatus = "success"

    if content is None:
        status = "error" if rule.required else "missing"
        message = "This tag is required but missing" if rule.required else "This tag is not set"
    elif rule.optimal_min is not None and character_count < rule.optimal_min:
        status = "warning"
        message = f"Too short. Recommended: {_range_text(rule.optimal_min, rule.optimal_max)}"
    elif rule.optimal_max is not None and character_count > rule.optimal_max:
        status = "warning"
        message = f"Too long. May be truncated. Recommended: {_range_text(rule.optimal_min, rule.optimal_max)}"
    elif rule.optimal_max is not None:
        message = f"Good length ({character_count}/{rule.optimal_max} characters)"
    else:
        message = "Properly configured"

    return TagAnalysis(
        key=key,
        label=label,
        content=content,
        status=status,
        character_count=character_count,
        optimal_min=rule.optimal_min,
        optimal_max=rule.optimal_max,
        message=message,
        required=rule.required,
    )


def field_content(extracted: ExtractedTags, field: SeoField) -> str | None:
    """Raw extracted value of `field`, before any defaulting."""
    source = FIELD_SOURCES[field]
    if source.kind == "name":
        return extracted["named"].get(source.attribute)
    if source.kind == "property":
        return extracted["propertied"].get(source.attribute)
    return extracted[source.kind]


def evaluate_tags(extracted: ExtractedTags) -> SeoTags:
    evaluated: dict[str, TagAnalysis] = {}
    for field in SeoField:
        rule = FIELD_RULES[field]
        content = field_content(extracted, field)
        if field is SeoField.CHARSET and content is None:
            # Pages without a declared charset are read as UTF-8.
            content = DEFAULT_CHARSET
        evaluated[field.value] = evaluate_tag(field.key, rule.label, content, rule)
    return SeoTags(**evaluated)
