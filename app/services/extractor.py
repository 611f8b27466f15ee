"""Field extraction: turns parsed HTML into :class:`ExtractedFields`.

Extraction happens in two stages.  :func:`extract_raw_fields` reads the
document and leaves every absent value as ``None``.  :func:`apply_defaults`
then fills the preview fallbacks (Open Graph image and URL, Twitter image),
so the auditor only ever sees post-default values.
"""

from typing import Dict, Optional

from bs4 import BeautifulSoup

from app.models.fields import ExtractedFields, OpenGraph, TwitterCard

PLACEHOLDER_IMAGE = "https://via.placeholder.com/600x315.png?text=No+Image"

_SOCIAL_PREFIXES = ("og:", "twitter:")

# Keys already exposed through OpenGraph / TwitterCard
_NAMED_SOCIAL_KEYS = frozenset(
    {
        "og:title",
        "og:description",
        "og:image",
        "og:url",
        "twitter:card",
        "twitter:title",
        "twitter:description",
        "twitter:image",
    }
)


def parse_document(html: str) -> BeautifulSoup:
    """Parse *html* into a queryable tree (best effort for malformed markup)."""
    return BeautifulSoup(html, "lxml")


def _clean(value) -> Optional[str]:
    """Return *value* stripped, or ``None`` when it is missing or blank."""
    if value is None:
        return None
    # Multi-valued attributes (rel, class) come back as lists
    if isinstance(value, list):
        value = " ".join(value)
    value = str(value).strip()
    return value or None


def _first_text(soup: BeautifulSoup, selector: str) -> Optional[str]:
    node = soup.select_one(selector)
    if node is None:
        return None
    return _clean(node.get_text())


def _first_attr(soup: BeautifulSoup, selector: str, attr: str) -> Optional[str]:
    node = soup.select_one(selector)
    if node is None:
        return None
    return _clean(node.get(attr))


def _meta_content(soup: BeautifulSoup, key: str, attr: str = "name") -> Optional[str]:
    return _first_attr(soup, f'meta[{attr}="{key}"]', "content")


def _extract_language(soup: BeautifulSoup) -> Optional[str]:
    html = soup.find("html")
    if html is None:
        return None
    return _clean(html.get("lang"))


def _collect_social_meta(soup: BeautifulSoup) -> Dict[str, str]:
    """Fold every ``og:*`` / ``twitter:*`` meta entry into an ordered mapping.

    Both the ``property`` and ``name`` attribute are inspected, so a single
    element may contribute two keys.  A later duplicate overwrites the value
    but the key keeps its first position.
    """
    collected: Dict[str, str] = {}
    for meta in soup.find_all("meta"):
        content = _clean(meta.get("content"))
        if content is None:
            continue
        for attr in ("property", "name"):
            key = meta.get(attr)
            if not key or not key.startswith(_SOCIAL_PREFIXES):
                continue
            if key in _NAMED_SOCIAL_KEYS:
                continue
            collected[key] = content
    return collected


def extract_raw_fields(soup: BeautifulSoup) -> ExtractedFields:
    """Read every field from *soup* without applying any fallback."""
    open_graph = OpenGraph(
        title=_meta_content(soup, "og:title", attr="property"),
        description=_meta_content(soup, "og:description", attr="property"),
        image=_meta_content(soup, "og:image", attr="property"),
        url=_meta_content(soup, "og:url", attr="property"),
    )
    twitter_card = TwitterCard(
        card=_meta_content(soup, "twitter:card"),
        title=_meta_content(soup, "twitter:title"),
        description=_meta_content(soup, "twitter:description"),
        image=_meta_content(soup, "twitter:image"),
    )
    return ExtractedFields(
        title=_first_text(soup, "title"),
        meta_description=_meta_content(soup, "description"),
        canonical=_first_attr(soup, 'link[rel="canonical"]', "href"),
        first_heading=_first_text(soup, "h1"),
        language=_extract_language(soup),
        robots=_meta_content(soup, "robots"),
        viewport=_meta_content(soup, "viewport"),
        open_graph=open_graph,
        twitter_card=twitter_card,
        extra_social_meta=_collect_social_meta(soup),
    )


def apply_defaults(raw: ExtractedFields, source_url: str) -> ExtractedFields:
    """Return a copy of *raw* with the preview fallbacks filled in.

    ``og:image`` falls back to :data:`PLACEHOLDER_IMAGE`, ``og:url`` to the
    analysed URL, and ``twitter:image`` to the (defaulted) Open Graph image.
    As a consequence these three never make a completeness check fail.
    """
    og_image = raw.open_graph.image or PLACEHOLDER_IMAGE
    open_graph = raw.open_graph.model_copy(
        update={"image": og_image, "url": raw.open_graph.url or source_url}
    )
    twitter_card = raw.twitter_card.model_copy(
        update={"image": raw.twitter_card.image or og_image}
    )
    return raw.model_copy(update={"open_graph": open_graph, "twitter_card": twitter_card})


def extract_fields(soup: BeautifulSoup, source_url: str) -> ExtractedFields:
    """Extract all fields from *soup*, with fallbacks applied."""
    return apply_defaults(extract_raw_fields(soup), source_url)
