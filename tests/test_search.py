import pytest

from keyword_ranker.scanner import Occurrence
from keyword_ranker.search import DEFAULT_LIMIT, top_matches


def _entry(*pairs: tuple[str, int]) -> list[Occurrence]:
    return [Occurrence(document, frequency) for document, frequency in pairs]


@pytest.fixture
def index():
    return {
        "kw1": _entry(("d1", 10), ("d2", 5)),
        "kw2": _entry(("d3", 10), ("d2", 5), ("d4", 1)),
        "many": _entry(*[(f"m{idx}", 20 - idx) for idx in range(8)]),
    }


def test_default_limit():
    assert DEFAULT_LIMIT == 5


def test_merge_breaks_ties_for_first_keyword_and_dedupes(index):
    assert top_matches(index, "kw1", "kw2") == ["d1", "d3", "d2", "d4"]


def test_tie_break_depends_on_keyword_order(index):
    assert top_matches(index, "kw2", "kw1") == ["d3", "d1", "d2", "d4"]


@pytest.mark.parametrize(
    "limit,expected",
    [
        (1, ["d1"]),
        (2, ["d1", "d3"]),
        (3, ["d1", "d3", "d2"]),
        (10, ["d1", "d3", "d2", "d4"]),
        (0, []),
        (-1, []),
    ],
)
def test_limit(index, limit, expected):
    assert top_matches(index, "kw1", "kw2", limit=limit) == expected


def test_neither_keyword_indexed(index):
    assert top_matches(index, "missing", "absent") == []


@pytest.mark.parametrize("kw1,kw2", [("many", "missing"), ("missing", "many")])
def test_one_keyword_indexed(index, kw1, kw2):
    assert top_matches(index, kw1, kw2) == ["m0", "m1", "m2", "m3", "m4"]
    assert top_matches(index, kw1, kw2, limit=2) == ["m0", "m1"]


def test_keywords_are_case_insensitive(index):
    assert top_matches(index, "KW1", "Kw2") == ["d1", "d3", "d2", "d4"]


def test_punctuation_is_not_stripped_from_query(index):
    assert top_matches(index, "kw1!", "kw2?") == []


def test_duplicates_do_not_count_towards_limit():
    index = {
        "x": _entry(("a", 4), ("b", 3)),
        "y": _entry(("a", 4), ("b", 3), ("c", 1)),
    }
    assert top_matches(index, "x", "y", limit=3) == ["a", "b", "c"]


def test_same_keyword_twice(index):
    assert top_matches(index, "kw2", "kw2") == ["d3", "d2", "d4"]


def test_second_list_drains_after_first(index):
    index = {
        "x": _entry(("a", 9)),
        "y": _entry(("b", 8), ("c", 7), ("d", 6)),
    }
    assert top_matches(index, "x", "y") == ["a", "b", "c", "d"]
    assert top_matches(index, "y", "x") == ["a", "b", "c", "d"]
