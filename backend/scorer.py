"""Fixed-penalty SEO score for a set of extracted tags.

Starts at 100, subtracts a penalty per failed rule and floors at 0.
Issues are reported in rule order.
"""

import re
from collections.abc import Mapping

from models import ParsedTags, ScoreResult

TITLE_LENGTH_RANGE = (50, 60)
DESCRIPTION_LENGTH_RANGE = (150, 160)

ROBOTS_BLOCKING_PATTERN = re.compile(r"noindex|nofollow", re.IGNORECASE)

MAX_SCORE = 100


def blocks_indexing(robots: str | None) -> bool:
    """True when a robots directive contains noindex or nofollow."""
    return bool(robots) and ROBOTS_BLOCKING_PATTERN.search(robots) is not None


def within(text: str, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return low <= len(text.strip()) <= high


def open_graph_complete(open_graph: Mapping[str, str]) -> bool:
    # site_name stands in for a missing og:title here only.
    has_title = "title" in open_graph or "site_name" in open_graph
    return has_title and "description" in open_graph and "image" in open_graph


def twitter_card_complete(twitter_card: Mapping[str, str]) -> bool:
    return all(key in twitter_card for key in ("title", "description", "image"))


def score(tags: ParsedTags) -> ScoreResult:
    """Score `tags` against the fixed SEO heuristics."""
    penalty = 0
    issues: list[str] = []

    if tags.title is None:
        penalty += 20
        issues.append("Missing title")
    elif not within(tags.title, TITLE_LENGTH_RANGE):
        penalty += 5
        issues.append("Title length suboptimal (50–60)")

    if tags.description is None:
        penalty += 20
        issues.append("Missing meta description")
    elif not within(tags.description, DESCRIPTION_LENGTH_RANGE):
        penalty += 5
        issues.append("Description length suboptimal (150–160)")

    if tags.canonical is None:
        penalty += 10
        issues.append("Missing canonical link")

    if blocks_indexing(tags.robots):
        penalty += 10
        issues.append("Robots prevents indexing")

    if not open_graph_complete(tags.open_graph):
        penalty += 10
        issues.append("Incomplete Open Graph tags")

    if not twitter_card_complete(tags.twitter_card):
        penalty += 10
        issues.append("Incomplete Twitter Card tags")

    return ScoreResult(score=max(0, MAX_SCORE - penalty), issues=tuple(issues))
