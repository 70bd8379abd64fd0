"""Tag extractor: parse raw HTML and pull out the SEO tags the checker scores.

Extracts title, meta description, canonical link, robots directive,
Open Graph (og:*) and Twitter Card (twitter:*) tags.
Never raises on malformed markup; missing elements come back as None.
"""

import logging
import re

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from models import ParsedTags

logger = logging.getLogger(__name__)

OG_PREFIX = "og:"
TWITTER_PREFIX = "twitter:"


def _outside_title(tag: Tag) -> bool:
    # Markup inside <title> is title text, not page metadata.
    return tag.find_parent("title") is None


def _find(soup: BeautifulSoup, name: str, attrs: dict) -> Tag | None:
    for tag in soup.find_all(name, attrs=attrs):
        if _outside_title(tag):
            return tag
    return None


def _content_of(soup: BeautifulSoup, name: str) -> str | None:
    tag = _find(soup, "meta", {"name": name})
    if tag is None:
        return None
    return tag.get("content") or None


def _prefixed_meta(soup: BeautifulSoup, attr: str, prefix: str) -> dict[str, str]:
    """Map suffix -> content for every <meta> whose `attr` starts with `prefix`.

    The first tag seen for a given suffix wins.
    """
    found: dict[str, str] = {}
    pattern = re.compile("^" + re.escape(prefix))
    for tag in soup.find_all("meta", attrs={attr: pattern}):
        key = (tag.get(attr) or "")[len(prefix):]
        if not key or key in found or not _outside_title(tag):
            continue
        found[key] = tag.get("content") or ""
    return found


def _title_text(title_tag: Tag) -> str:
    if title_tag.find(True) is None:
        return title_tag.get_text()
    # The parser split markup inside <title> into elements; keep it as literal text.
    return title_tag.decode_contents(formatter=None)


def extract(html: str) -> ParsedTags:
    """Parse `html` permissively and return the page's SEO tags."""
    try:
        soup = BeautifulSoup(html or "", "html.parser")
    except ParserRejectedMarkup as exc:
        logger.warning("HTML parser rejected markup, treating page as tagless: %s", exc)
        return ParsedTags()

    # --- Title ---
    title = None
    title_tag = soup.find("title")
    if title_tag is not None:
        title = _title_text(title_tag) or None

    # --- Canonical URL ---
    canonical = None
    canonical_tag = _find(soup, "link", {"rel": "canonical"})
    if canonical_tag is not None:
        canonical = canonical_tag.get("href") or None

    # --- Open Graph / Twitter Card ---
    open_graph = _prefixed_meta(soup, "property", OG_PREFIX)
    twitter_card = _prefixed_meta(soup, "name", TWITTER_PREFIX)
    # Some sites put twitter:* in the property attribute; name-based tags take precedence.
    for key, value in _prefixed_meta(soup, "property", TWITTER_PREFIX).items():
        twitter_card.setdefault(key, value)

    tags = ParsedTags(
        title=title,
        description=_content_of(soup, "description"),
        canonical=canonical,
        robots=_content_of(soup, "robots"),
        open_graph=open_graph,
        twitter_card=twitter_card,
    )
    logger.debug(
        "Extracted tags: title=%s description=%s og=%d twitter=%d",
        tags.title is not None,
        tags.description is not None,
        len(tags.open_graph),
        len(tags.twitter_card),
    )
    return tags
