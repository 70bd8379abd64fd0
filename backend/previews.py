"""Preview data for the Google result snippet and the social share cards."""

from urllib.parse import urlparse

from models import ParsedTags, Previews, SerpPreview, SocialCard


def _first(*values: str | None) -> str | None:
    for value in values:
        if value:
            return value
    return None


def hostname_of(url: str) -> str:
    try:
        return urlparse(url).hostname or url
    except ValueError:
        return url


def build_previews(tags: ParsedTags, url: str) -> Previews:
    """Build SERP and social card previews, filling gaps from related tags."""
    og = tags.open_graph
    tw = tags.twitter_card
    display_url = tags.canonical or url

    serp = SerpPreview(
        title=tags.title or "Example Website",
        description=tags.description or "No description provided.",
        url=display_url,
        hostname=hostname_of(display_url),
    )
    open_graph = SocialCard(
        network="Facebook/LinkedIn",
        title=_first(og.get("title"), tags.title) or "Open Graph title",
        description=_first(og.get("description"), tags.description) or "Open Graph description",
        url=display_url,
        image=_first(og.get("image"), tw.get("image")),
    )
    twitter = SocialCard(
        network="Twitter",
        title=_first(tw.get("title"), tags.title) or "Twitter title",
        description=_first(tw.get("description"), tags.description) or "Twitter description",
        url=display_url,
        image=_first(tw.get("image"), og.get("image")),
    )
    return Previews(serp=serp, open_graph=open_graph, twitter=twitter)
