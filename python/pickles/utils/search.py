"""Match engine: turn a free-text query into suggestions and results.

Everything here is a pure function of ``(entries, query, active_index)``;
nothing is cached between calls, so a newly loaded document needs no
invalidation step.
"""
from typing import List, NamedTuple

from .flatten import Entry, descendants, is_structured, value_text


class MatchResult(NamedTuple):
    suggestions: List[Entry]
    results: List[Entry]
    inline_prediction: str


EMPTY_MATCH = MatchResult([], [], "")


def query_words(query):
    """Lower-case the query, treat dots as spaces and split into words."""
    return set(query.lower().replace(".", " ").split())


def matches_words(entry, words):
    """True when every word occurs in the entry's path or its value text."""
    path = entry.path.lower().replace(".", " ")
    value = value_text(entry.value).lower()
    return all(word in path or word in value for word in words)


def find_suggestions(entries, query):
    """Word-matching entries, shortest path first."""
    words = query_words(query)
    candidates = [entry for entry in entries if matches_words(entry, words)]
    return sorted(candidates, key=lambda entry: len(entry.path))


def inline_prediction(suggestions, query):
    """Completion text that would turn ``query`` into the top suggestion.

    Only offered when the top suggestion's path actually starts with the
    query (ignoring case); a mid-path match has nothing sensible to complete.
    """
    if not suggestions or not query:
        return ""
    path = suggestions[0].path
    if not path.lower().startswith(query.lower()):
        return ""
    return path[len(query):]


def expand_subtree(entries, selected):
    """The selected entry followed by all of its flattened descendants."""
    return [selected] + descendants(entries, selected.path)


def exact_value_matches(entries, query):
    target = query.lower()
    return [entry for entry in entries if value_text(entry.value).lower() == target]


def find_results(entries, query):
    """Results for a query with no active suggestion.

    Exact value matches win outright. Otherwise the word matches are returned
    in document order, with the children of every matched object or array
    appended after them.
    """
    exact = exact_value_matches(entries, query)
    if exact:
        return exact

    words = query_words(query)
    matched = [entry for entry in entries if matches_words(entry, words)]
    seen = {entry.path for entry in matched}
    results = list(matched)
    for parent in matched:
        if not is_structured(parent.value):
            continue
        for entry in descendants(entries, parent.path):
            if entry.path not in seen:
                seen.add(entry.path)
                results.append(entry)
    return results


def match(entries, query, active_index=-1):
    """Compute suggestions, results and the inline prediction for a query."""
    if not query or not entries:
        return EMPTY_MATCH

    suggestions = find_suggestions(entries, query)
    if 0 <= active_index < len(suggestions):
        results = expand_subtree(entries, suggestions[active_index])
    else:
        results = find_results(entries, query)
    return MatchResult(suggestions, results, inline_prediction(suggestions, query))


def split_results(entries):
    """Partition results into (objects, primitives) for the two panels."""
    objects = [entry for entry in entries if is_structured(entry.value)]
    primitives = [entry for entry in entries if not is_structured(entry.value)]
    return objects, primitives
