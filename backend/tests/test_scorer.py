"""Tests for scorer.score."""

import pytest

from extractor import extract
from models import ParsedTags
from scorer import open_graph_complete, score, twitter_card_complete

GOOD_TITLE = "T" * 55
GOOD_DESCRIPTION = "D" * 155
FULL_OG = {"title": "t", "description": "d", "image": "i.png"}
FULL_TWITTER = {"title": "t", "description": "d", "image": "i.png"}


def complete_tags(**overrides) -> ParsedTags:
    values = {
        "title": GOOD_TITLE,
        "description": GOOD_DESCRIPTION,
        "canonical": "https://example.com/",
        "robots": "index, follow",
        "open_graph": FULL_OG,
        "twitter_card": FULL_TWITTER,
    }
    values.update(overrides)
    return ParsedTags(**values)


def test_complete_page_scores_100() -> None:
    result = score(complete_tags())

    assert result.score == 100
    assert result.issues == ()


def test_empty_document() -> None:
    result = score(extract("<html><head></head><body></body></html>"))

    assert result.score == 30
    assert list(result.issues) == [
        "Missing title",
        "Missing meta description",
        "Missing canonical link",
        "Incomplete Open Graph tags",
        "Incomplete Twitter Card tags",
    ]


def test_every_rule_failing_gives_floor_of_penalties() -> None:
    result = score(ParsedTags(robots="noindex,nofollow"))

    assert result.score == 20
    assert len(result.issues) == 6
    assert result.issues[3] == "Robots prevents indexing"


@pytest.mark.parametrize("length", [50, 55, 60])
def test_title_length_within_bounds(length: int) -> None:
    result = score(complete_tags(title="x" * length))

    assert result.score == 100


@pytest.mark.parametrize("length", [1, 49, 61, 200])
def test_title_length_out_of_bounds(length: int) -> None:
    result = score(complete_tags(title="x" * length))

    assert result.score == 95
    assert result.issues == ("Title length suboptimal (50–60)",)


def test_title_length_is_measured_after_trimming() -> None:
    result = score(complete_tags(title="   " + "x" * 49 + "\n"))

    assert result.issues == ("Title length suboptimal (50–60)",)


@pytest.mark.parametrize("length,penalized", [(149, True), (150, False), (160, False), (161, True)])
def test_description_length_bounds(length: int, penalized: bool) -> None:
    result = score(complete_tags(description="y" * length))

    assert (result.score == 95) is penalized
    assert ("Description length suboptimal (150–160)" in result.issues) is penalized


def test_missing_canonical() -> None:
    result = score(complete_tags(canonical=None))

    assert result.score == 90
    assert result.issues == ("Missing canonical link",)


@pytest.mark.parametrize("robots", ["noindex", "NoIndex", "index, NOFOLLOW", "max-snippet:-1, noindex"])
def test_robots_blocking(robots: str) -> None:
    result = score(complete_tags(robots=robots))

    assert result.score == 90
    assert result.issues == ("Robots prevents indexing",)


@pytest.mark.parametrize("robots", [None, "index, follow", "all"])
def test_robots_not_blocking(robots) -> None:
    assert score(complete_tags(robots=robots)).score == 100


def test_site_name_substitutes_for_og_title() -> None:
    og = {"site_name": "Example", "description": "d", "image": "i.png"}

    assert score(complete_tags(open_graph=og)).score == 100


@pytest.mark.parametrize("missing", ["description", "image"])
def test_incomplete_open_graph(missing: str) -> None:
    og = {k: v for k, v in FULL_OG.items() if k != missing}

    result = score(complete_tags(open_graph=og))

    assert result.issues == ("Incomplete Open Graph tags",)
    assert result.score == 90


@pytest.mark.parametrize("missing", ["title", "description", "image"])
def test_incomplete_twitter_card(missing: str) -> None:
    tw = {k: v for k, v in FULL_TWITTER.items() if k != missing}

    result = score(complete_tags(twitter_card=tw))

    assert result.issues == ("Incomplete Twitter Card tags",)


def test_empty_social_values_count_as_present() -> None:
    tags = complete_tags(
        open_graph={"title": "", "description": "", "image": ""},
        twitter_card={"title": "", "description": "", "image": ""},
    )

    assert score(tags).score == 100


def test_score_is_deterministic() -> None:
    tags = complete_tags(title="short", canonical=None)

    assert score(tags) == score(tags)


def test_completeness_checks_accept_any_mapping() -> None:
    og = {"site_name": "Example", "description": "d", "image": "i.png"}

    assert open_graph_complete(og)
    assert open_graph_complete(ParsedTags(open_graph=og).open_graph)
    assert not twitter_card_complete({"title": "t", "image": "i.png"})
    assert twitter_card_complete(ParsedTags(twitter_card=FULL_TWITTER).twitter_card)
