"""Value types shared by the extractor, scorer, advisor and preview builder.

API request/response models are in schemas.py.
All types here are immutable once built.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _frozen_mapping(values: Mapping[str, str] | None = None) -> Mapping[str, str]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class ParsedTags:
    """SEO tags extracted from a single HTML document."""

    title: str | None = None
    description: str | None = None
    canonical: str | None = None
    robots: str | None = None
    open_graph: Mapping[str, str] = field(default_factory=_frozen_mapping)
    twitter_card: Mapping[str, str] = field(default_factory=_frozen_mapping)

    def __post_init__(self) -> None:
        # Callers may pass plain dicts; store read-only copies.
        object.__setattr__(self, "open_graph", _frozen_mapping(self.open_graph))
        object.__setattr__(self, "twitter_card", _frozen_mapping(self.twitter_card))


@dataclass(frozen=True)
class ScoreResult:
    """Score in [0, 100] plus the issues that lowered it, in rule order."""

    score: int
    issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class SerpPreview:
    """Data behind a Google result snippet."""

    title: str
    description: str
    url: str
    hostname: str


@dataclass(frozen=True)
class SocialCard:
    """Data behind a social share card."""

    network: str
    title: str
    description: str
    url: str
    image: str | None = None


@dataclass(frozen=True)
class Previews:
    serp: SerpPreview
    open_graph: SocialCard
    twitter: SocialCard
