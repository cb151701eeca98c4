import pytest

from pickles.utils.flatten import Entry, flatten
from pickles.utils.search import (
    EMPTY_MATCH,
    find_suggestions,
    inline_prediction,
    match,
    query_words,
    split_results,
)


def _paths(entries):
    return [e.path for e in entries]


@pytest.fixture
def theme():
    return flatten({
        "theme": {"colors": {"primary": "#336699", "secondary": "#ff0000"}},
        "spacing": {"small": "4px"},
    })


def test_empty_query_yields_nothing(theme):
    assert match(theme, "", -1) == EMPTY_MATCH
    assert match(theme, "") == ([], [], "")


def test_no_entries_yield_nothing():
    assert match([], "anything", -1) == EMPTY_MATCH


def test_query_words():
    assert query_words("Colors.Primary  main") == {"colors", "primary", "main"}
    assert query_words(" . ") == set()


def test_exact_value_match_short_circuits():
    entries = [Entry("a", "x"), Entry("b", "X"), Entry("box", 3)]
    result = match(entries, "x", -1)
    assert result.results == [Entry("a", "x"), Entry("b", "X")]
    assert _paths(result.suggestions) == ["a", "b", "box"]


def test_integral_float_matches_exactly():
    entries = flatten({"scale": 1.0, "ratio": 1.5})
    assert match(entries, "1", -1).results == [Entry("scale", 1.0)]


def test_active_suggestion_expands_subtree():
    entries = flatten({"a": {"b": 1, "c": 2}})
    result = match(entries, "a", 0)
    assert _paths(result.suggestions) == ["a", "a.b", "a.c"]
    assert _paths(result.results) == ["a", "a.b", "a.c"]


def test_active_primitive_suggestion_is_the_only_result(theme):
    result = match(theme, "primary", 0)
    assert _paths(result.results) == ["theme.colors.primary"]


def test_suggestions_ordered_by_path_length():
    entries = [
        Entry("color", "red"),
        Entry("colors.primary", "#f00"),
        Entry("colors", {"primary": "#f00"}),
    ]
    result = match(entries, "color", -1)
    assert _paths(result.suggestions) == ["color", "colors", "colors.primary"]


def test_suggestion_ties_keep_document_order():
    entries = [Entry("bb", 1), Entry("aa", 2), Entry("a", 3)]
    assert _paths(find_suggestions(entries, "a")) == ["a", "aa"]
    assert _paths(find_suggestions(entries, "b")) == ["bb"]
    entries = [Entry("xb", 1), Entry("xa", 2)]
    assert _paths(find_suggestions(entries, "x")) == ["xb", "xa"]


def test_words_match_in_any_order_and_dots_split_words(theme):
    for query in ("primary colors", "colors.primary", "COLORS primary"):
        assert _paths(match(theme, query).suggestions) == ["theme.colors.primary"]


def test_words_can_match_values(theme):
    result = match(theme, "small 4p", -1)
    assert _paths(result.suggestions) == ["spacing.small"]


def test_exact_value_query(theme):
    result = match(theme, "4PX", -1)
    assert _paths(result.results) == ["spacing.small"]


def test_structured_matches_bring_their_children():
    entries = flatten({"tags": ["red", "green"], "misc": {"k": "v"}})
    result = match(entries, "gre", -1)
    assert _paths(result.results) == ["tags", "tags.1", "tags.0"]


def test_fuzzy_results_are_deduplicated(theme):
    result = match(theme, "colors", -1)
    assert _paths(result.results) == [
        "theme.colors",
        "theme.colors.primary",
        "theme.colors.secondary",
    ]


def test_blank_words_match_everything(theme):
    result = match(theme, " . ", -1)
    assert sorted(_paths(result.suggestions)) == sorted(_paths(theme))
    assert result.results == theme
    assert result.inline_prediction == ""


@pytest.mark.parametrize("index", [99, 5, -1, -7])
def test_out_of_range_index_means_no_selection(theme, index):
    assert match(theme, "colors", index) == match(theme, "colors", -1)


def test_inline_prediction_completes_prefix():
    entries = flatten({"colors": {"primary": "#fff"}})
    assert match(entries, "col").inline_prediction == "ors"
    assert match(entries, "Col").inline_prediction == "ors"
    assert match(entries, "colors").inline_prediction == ""


def test_inline_prediction_needs_a_real_prefix():
    entries = flatten({"colors": {"primary": "#fff"}})
    result = match(entries, "prim")
    assert _paths(result.suggestions) == ["colors.primary"]
    assert result.inline_prediction == ""
    assert inline_prediction([], "x") == ""


def test_match_does_not_touch_entries(theme):
    before = list(theme)
    first = match(theme, "colors", 1)
    second = match(theme, "colors", 1)
    assert first == second
    assert theme == before


def test_split_results(theme):
    objects, primitives = split_results(theme)
    assert _paths(objects) == ["theme", "theme.colors", "spacing"]
    assert _paths(primitives) == ["theme.colors.primary", "theme.colors.secondary", "spacing.small"]
