"""Pydantic schemas for API request/response."""

from pydantic import BaseModel, Field, field_validator

from models import ParsedTags, Previews, ScoreResult, SerpPreview, SocialCard


class AnalyzeRequest(BaseModel):
    """Request body for POST /analyze."""

    url: str

    @field_validator("url", mode="before")
    @classmethod
    def normalize_text_fields(cls, value: object) -> str:
        return str(value or "").strip()


class AnalyzeHtmlRequest(BaseModel):
    """Request body for POST /analyze/html."""

    html: str
    url: str = ""

    @field_validator("url", mode="before")
    @classmethod
    def normalize_url_field(cls, value: object) -> str:
        return str(value or "").strip()


class TagsOut(BaseModel):
    """Extracted tags. Missing scalars are null."""

    title: str | None = None
    description: str | None = None
    canonical: str | None = None
    robots: str | None = None
    open_graph: dict[str, str] = Field(default_factory=dict)
    twitter_card: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_tags(cls, tags: ParsedTags) -> "TagsOut":
        return cls(
            title=tags.title,
            description=tags.description,
            canonical=tags.canonical,
            robots=tags.robots,
            open_graph=dict(tags.open_graph),
            twitter_card=dict(tags.twitter_card),
        )


class SerpPreviewOut(BaseModel):
    title: str
    description: str
    url: str
    hostname: str

    @classmethod
    def from_preview(cls, preview: SerpPreview) -> "SerpPreviewOut":
        return cls(
            title=preview.title,
            description=preview.description,
            url=preview.url,
            hostname=preview.hostname,
        )


class SocialCardOut(BaseModel):
    network: str
    title: str
    description: str
    url: str
    image: str | None = None

    @classmethod
    def from_card(cls, card: SocialCard) -> "SocialCardOut":
        return cls(
            network=card.network,
            title=card.title,
            description=card.description,
            url=card.url,
            image=card.image,
        )


class PreviewsOut(BaseModel):
    """Google SERP snippet and social card preview data."""

    serp: SerpPreviewOut
    open_graph: SocialCardOut
    twitter: SocialCardOut


class AnalysisResponse(BaseModel):
    """Full tag analysis returned by the analyze endpoints."""

    url: str
    tags: TagsOut
    score: int
    issues: list[str]
    suggestions: list[str]
    previews: PreviewsOut

    @classmethod
    def build(
        cls,
        url: str,
        tags: ParsedTags,
        result: ScoreResult,
        suggestions: list[str],
        previews: Previews,
    ) -> "AnalysisResponse":
        return cls(
            url=url,
            tags=TagsOut.from_tags(tags),
            score=result.score,
            issues=list(result.issues),
            suggestions=suggestions,
            previews=PreviewsOut(
                serp=SerpPreviewOut.from_preview(previews.serp),
                open_graph=SocialCardOut.from_card(previews.open_graph),
                twitter=SocialCardOut.from_card(previews.twitter),
            ),
        )
