"""Actionable improvement tips for a set of extracted tags.

Conditions are evaluated from the tags directly, not from the scorer's
issue list. Unlike the scorer, og:site_name does not replace og:title.
"""

from models import ParsedTags
from scorer import DESCRIPTION_LENGTH_RANGE, TITLE_LENGTH_RANGE, blocks_indexing

REQUIRED_SOCIAL_KEYS = ("title", "description", "image")


def _title_tip(title: str | None) -> str | None:
    if title is None:
        return "Add a concise <title> around 50–60 characters including a primary keyword."
    low, high = TITLE_LENGTH_RANGE
    length = len(title.strip())
    if length < low:
        return "Lengthen your title toward 50–60 characters for better display in SERP."
    if length > high:
        return "Shorten your title to ~50–60 characters to avoid truncation."
    return None


def _description_tip(description: str | None) -> str | None:
    if description is None:
        return "Add a compelling meta description around 150–160 characters."
    low, high = DESCRIPTION_LENGTH_RANGE
    length = len(description.strip())
    if length < low:
        return "Expand meta description toward 150–160 characters to improve CTR."
    if length > high:
        return "Trim meta description to ~155 characters to avoid truncation."
    return None


def suggest(tags: ParsedTags) -> list[str]:
    """Return improvement tips for `tags`, at most one per rule, in rule order."""
    tips = [_title_tip(tags.title), _description_tip(tags.description)]

    if tags.canonical is None:
        tips.append('Add <link rel="canonical" href="https://example.com/page"> to consolidate duplicates.')

    if blocks_indexing(tags.robots):
        tips.append("Remove noindex/nofollow from robots meta if the page should be indexed.")

    if any(key not in tags.open_graph for key in REQUIRED_SOCIAL_KEYS):
        tips.append("Provide Open Graph tags: og:title, og:description, og:image (1200×630).")

    if any(key not in tags.twitter_card for key in REQUIRED_SOCIAL_KEYS):
        tips.append(
            "Provide Twitter Card tags (summary_large_image) with title, description, and image."
        )

    return [tip for tip in tips if tip]
