"""Heuristic SEO audit over :class:`ExtractedFields`.

:func:`evaluate` always returns exactly nine results, in this order:

1. Title Tag
2. Meta Description
3. Canonical Tag
4. H1 Tag
5. Language Attribute
6. Robots Meta Tag
7. Viewport Meta Tag
8. Open Graph Tags
9. Twitter Card Tags
"""

from typing import List, Optional

from app.models.audit import AuditResult, AuditStatus
from app.models.fields import ExtractedFields

LOOKS_GOOD = "Looks good!"

TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
DESCRIPTION_MIN_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 160


def _presence(
    name: str,
    value: Optional[str],
    missing_suggestion: str,
    found_suggestion: str = LOOKS_GOOD,
    detail: Optional[str] = None,
) -> AuditResult:
    if value is None:
        return AuditResult(name=name, status=AuditStatus.MISSING, suggestion=missing_suggestion)
    return AuditResult(
        name=name, status=AuditStatus.FOUND, suggestion=found_suggestion, detail=detail
    )


def _length_suggestion(
    value: Optional[str], low: int, high: int, message: str
) -> str:
    if value is not None and not low <= len(value) <= high:
        return message
    return LOOKS_GOOD


def _completeness(name: str, tags: dict, missing_suggestion: str) -> AuditResult:
    if all(value is not None for value in tags.values()):
        return AuditResult(name=name, status=AuditStatus.COMPLETE, suggestion=LOOKS_GOOD)
    return AuditResult(name=name, status=AuditStatus.INCOMPLETE, suggestion=missing_suggestion)


def _audit_title(fields: ExtractedFields) -> AuditResult:
    return _presence(
        "Title Tag",
        fields.title,
        "Add a <title> tag to the page.",
        _length_suggestion(
            fields.title,
            TITLE_MIN_LENGTH,
            TITLE_MAX_LENGTH,
            f"Title length should be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters.",
        ),
    )


def _audit_description(fields: ExtractedFields) -> AuditResult:
    return _presence(
        "Meta Description",
        fields.meta_description,
        "Add a meta description for better SEO.",
        _length_suggestion(
            fields.meta_description,
            DESCRIPTION_MIN_LENGTH,
            DESCRIPTION_MAX_LENGTH,
            "Meta description should be between "
            f"{DESCRIPTION_MIN_LENGTH} and {DESCRIPTION_MAX_LENGTH} characters.",
        ),
    )


def _audit_open_graph(fields: ExtractedFields) -> AuditResult:
    og = fields.open_graph
    tags = {
        "og:title": og.title,
        "og:description": og.description,
        "og:image": og.image,
        "og:url": og.url,
    }
    missing = ", ".join(key for key, value in tags.items() if value is None)
    return _completeness(
        "Open Graph Tags",
        tags,
        f"Ensure all required OG tags are present: {missing}.",
    )


def _audit_twitter_card(fields: ExtractedFields) -> AuditResult:
    twitter = fields.twitter_card
    tags = {
        "twitter:card": twitter.card,
        "twitter:title": twitter.title,
        "twitter:description": twitter.description,
        "twitter:image": twitter.image,
    }
    return _completeness(
        "Twitter Card Tags",
        tags,
        "Consider adding Twitter Card tags for better social sharing.",
    )


def evaluate(fields: ExtractedFields) -> List[AuditResult]:
    """Score *fields* into the nine audit results shown in the report."""
    return [
        _audit_title(fields),
        _audit_description(fields),
        _presence(
            "Canonical Tag",
            fields.canonical,
            "Add a canonical tag to avoid duplicate content issues.",
        ),
        _presence(
            "H1 Tag",
            fields.first_heading,
            "Add at least one <h1> tag for the main heading.",
        ),
        _presence(
            "Language Attribute",
            fields.language,
            'Specify the language attribute in the <html> tag, e.g., <html lang="en">.',
            detail=fields.language,
        ),
        _presence(
            "Robots Meta Tag",
            fields.robots,
            "Add a robots meta tag to control search engine crawling, "
            'e.g., <meta name="robots" content="index,follow">.',
        ),
        _presence(
            "Viewport Meta Tag",
            fields.viewport,
            "Add a viewport meta tag to ensure mobile responsiveness.",
        ),
        _audit_open_graph(fields),
        _audit_twitter_card(fields),
    ]
