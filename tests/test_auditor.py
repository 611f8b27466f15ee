"""Tests for app.services.auditor.evaluate."""

from app.models.audit import AuditStatus
from app.models.fields import ExtractedFields, OpenGraph, TwitterCard
from app.services.auditor import LOOKS_GOOD, evaluate

AUDIT_ORDER = [
    "Title Tag",
    "Meta Description",
    "Canonical Tag",
    "H1 Tag",
    "Language Attribute",
    "Robots Meta Tag",
    "Viewport Meta Tag",
    "Open Graph Tags",
    "Twitter Card Tags",
]

_COMPLETE_OG = OpenGraph(
    title="OG title", description="OG description", image="https://e.com/i.png", url="https://e.com/"
)
_COMPLETE_TWITTER = TwitterCard(
    card="summary", title="TW title", description="TW description", image="https://e.com/i.png"
)


def _by_name(fields: ExtractedFields) -> dict:
    return {result.name: result for result in evaluate(fields)}


# ---------------------------------------------------------------------------
# Shape of the result
# ---------------------------------------------------------------------------

class TestAuditShape:
    def test_empty_fields_yield_nine_results_in_order(self):
        assert [r.name for r in evaluate(ExtractedFields())] == AUDIT_ORDER

    def test_full_fields_yield_nine_results_in_order(self):
        fields = ExtractedFields(
            title="t" * 40,
            meta_description="d" * 80,
            canonical="https://e.com/",
            first_heading="Heading",
            language="en",
            robots="index",
            viewport="width=device-width",
            open_graph=_COMPLETE_OG,
            twitter_card=_COMPLETE_TWITTER,
        )
        results = evaluate(fields)
        assert [r.name for r in results] == AUDIT_ORDER
        assert all(r.suggestion == LOOKS_GOOD for r in results)

    def test_evaluate_is_deterministic(self):
        fields = ExtractedFields(title="Home")
        assert evaluate(fields) == evaluate(fields)


# ---------------------------------------------------------------------------
# Title / description length bounds
# ---------------------------------------------------------------------------

class TestTitleLength:
    def test_lower_bound_is_inclusive(self):
        assert _by_name(ExtractedFields(title="a" * 30))["Title Tag"].suggestion == LOOKS_GOOD

    def test_upper_bound_is_inclusive(self):
        assert _by_name(ExtractedFields(title="a" * 60))["Title Tag"].suggestion == LOOKS_GOOD

    def test_too_short(self):
        result = _by_name(ExtractedFields(title="a" * 29))["Title Tag"]
        assert result.status == AuditStatus.FOUND
        assert result.suggestion == "Title length should be between 30 and 60 characters."

    def test_too_long(self):
        result = _by_name(ExtractedFields(title="a" * 61))["Title Tag"]
        assert result.status == AuditStatus.FOUND
        assert "30" in result.suggestion and "60" in result.suggestion

    def test_missing(self):
        result = _by_name(ExtractedFields())["Title Tag"]
        assert result.status == AuditStatus.MISSING
        assert result.suggestion == "Add a <title> tag to the page."


class TestDescriptionLength:
    def test_bounds_are_inclusive(self):
        for length in (50, 160):
            result = _by_name(ExtractedFields(meta_description="d" * length))["Meta Description"]
            assert result.suggestion == LOOKS_GOOD

    def test_out_of_bounds(self):
        for length in (49, 161):
            result = _by_name(ExtractedFields(meta_description="d" * length))["Meta Description"]
            assert result.status == AuditStatus.FOUND
            assert result.suggestion == "Meta description should be between 50 and 160 characters."

    def test_missing(self):
        result = _by_name(ExtractedFields())["Meta Description"]
        assert result.status == AuditStatus.MISSING
        assert result.suggestion == "Add a meta description for better SEO."


# ---------------------------------------------------------------------------
# Presence checks
# ---------------------------------------------------------------------------

class TestPresenceChecks:
    def test_missing_suggestions(self):
        results = _by_name(ExtractedFields())
        assert "canonical tag" in results["Canonical Tag"].suggestion
        assert "<h1>" in results["H1 Tag"].suggestion
        assert "robots meta tag" in results["Robots Meta Tag"].suggestion
        assert "viewport meta tag" in results["Viewport Meta Tag"].suggestion

    def test_found_checks_look_good(self):
        results = _by_name(
            ExtractedFields(canonical="https://e.com/", first_heading="H", robots="noindex", viewport="w")
        )
        for name in ("Canonical Tag", "H1 Tag", "Robots Meta Tag", "Viewport Meta Tag"):
            assert results[name].status == AuditStatus.FOUND
            assert results[name].suggestion == LOOKS_GOOD

    def test_language_found_embeds_value(self):
        result = _by_name(ExtractedFields(language="en"))["Language Attribute"]
        assert result.status == AuditStatus.FOUND
        assert result.status_text == "Found (en)"
        assert result.suggestion == LOOKS_GOOD

    def test_language_missing(self):
        result = _by_name(ExtractedFields())["Language Attribute"]
        assert result.status == AuditStatus.MISSING
        assert result.status_text == "Missing"
        assert '<html lang="en">' in result.suggestion


# ---------------------------------------------------------------------------
# Composite checks
# ---------------------------------------------------------------------------

class TestOpenGraphCompleteness:
    def test_complete(self):
        result = _by_name(ExtractedFields(open_graph=_COMPLETE_OG))["Open Graph Tags"]
        assert result.status == AuditStatus.COMPLETE
        assert result.suggestion == LOOKS_GOOD

    def test_missing_title_is_incomplete(self):
        og = _COMPLETE_OG.model_copy(update={"title": None})
        result = _by_name(ExtractedFields(open_graph=og))["Open Graph Tags"]
        assert result.status == AuditStatus.INCOMPLETE
        assert result.suggestion == "Ensure all required OG tags are present: og:title."

    def test_suggestion_lists_every_missing_tag(self):
        result = _by_name(ExtractedFields())["Open Graph Tags"]
        assert result.suggestion == (
            "Ensure all required OG tags are present: "
            "og:title, og:description, og:image, og:url."
        )


class TestTwitterCompleteness:
    def test_complete(self):
        result = _by_name(ExtractedFields(twitter_card=_COMPLETE_TWITTER))["Twitter Card Tags"]
        assert result.status == AuditStatus.COMPLETE

    def test_missing_card_is_incomplete(self):
        tw = _COMPLETE_TWITTER.model_copy(update={"card": None})
        result = _by_name(ExtractedFields(twitter_card=tw))["Twitter Card Tags"]
        assert result.status == AuditStatus.INCOMPLETE
        assert result.suggestion == "Consider adding Twitter Card tags for better social sharing."
