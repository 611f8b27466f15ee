from types import MappingProxyType
from typing import Annotated, Dict, Mapping, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer


def _freeze(value: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


def _thaw(value: Mapping[str, str]) -> Dict[str, str]:
    return dict(value)


# Read-only ordered mapping; serialized as a plain JSON object
FrozenMeta = Annotated[
    Mapping[str, str],
    AfterValidator(_freeze),
    PlainSerializer(_thaw, return_type=Dict[str, str]),
]


class OpenGraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None


class TwitterCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    card: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None


class ExtractedFields(BaseModel):
    """Snapshot of the SEO and social-sharing metadata of one document.

    Every string is trimmed; an empty value is stored as ``None``.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    meta_description: Optional[str] = None
    canonical: Optional[str] = None
    first_heading: Optional[str] = None
    language: Optional[str] = None
    robots: Optional[str] = None
    viewport: Optional[str] = None
    open_graph: OpenGraph = Field(default_factory=OpenGraph)
    twitter_card: TwitterCard = Field(default_factory=TwitterCard)
    extra_social_meta: FrozenMeta = Field(default_factory=lambda: MappingProxyType({}))
    """Additional ``og:*`` / ``twitter:*`` meta entries, in document order."""
