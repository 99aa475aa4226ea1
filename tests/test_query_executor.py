import pytest

from Autocomplete.Business.AutocompleteExtension import AutocompleteExtension
from Autocomplete.Business.QueryExecutor import QueryExecutor, unique_ordered
from Autocomplete.Events.event_dispatcher import EventDispatcher
from Autocomplete.Model.Query import Query
from Autocomplete.Model.Suggestion import Suggestion


def make_extension(provider=None, limit=0):
    return AutocompleteExtension("city", suggestion_provider=provider, suggestion_limit=limit)


def values(suggestions):
    return [s.value for s in suggestions]


def test_no_provider_returns_empty():
    ext = make_extension()
    assert ext.QuerySuggestions("ca") == []


def test_provider_returning_none_returns_empty():
    ext = make_extension(lambda query: None, limit=3)
    assert ext.QuerySuggestions("ca") == []


def test_duplicates_collapse_preserving_order():
    ext = make_extension(lambda query: [Suggestion("cat"), Suggestion("car"), Suggestion("cat")], limit=5)
    assert ext.QuerySuggestions("ca") == [Suggestion("cat"), Suggestion("car")]


def test_limit_keeps_first_entries_in_provider_order():
    items = [Suggestion(f"item{i}") for i in range(10)]
    ext = make_extension(lambda query: items, limit=3)
    assert values(ext.QuerySuggestions("item")) == ["item0", "item1", "item2"]


@pytest.mark.parametrize("limit", [0, -1, -50])
def test_non_positive_limit_is_unbounded(limit):
    items = [Suggestion(str(i)) for i in range(250)]
    ext = make_extension(lambda query: items, limit=limit)
    assert len(ext.QuerySuggestions("")) == 250


def test_limit_counts_distinct_entries():
    raw = [Suggestion("a"), Suggestion("a"), Suggestion("b"), Suggestion("a"), Suggestion("c"), Suggestion("d")]
    ext = make_extension(lambda query: raw, limit=3)
    assert values(ext.QuerySuggestions("")) == ["a", "b", "c"]


def test_provider_within_limit_is_unchanged():
    raw = [Suggestion("b"), Suggestion("a")]
    ext = make_extension(lambda query: raw, limit=5)
    assert ext.QuerySuggestions("") == raw


def test_provider_receives_query_with_term_limit_and_extension():
    seen = []

    def provider(query):
        seen.append(query)
        return []

    ext = make_extension(provider, limit=7)
    ext.QuerySuggestions("")
    assert seen[0].term == ""
    assert seen[0].limit == 7
    assert seen[0].extension is ext


def test_generator_results_are_materialized():
    ext = make_extension(lambda query: (Suggestion(v) for v in ["x", "y", "x"]))
    assert values(ext.QuerySuggestions("")) == ["x", "y"]


def test_plain_strings_are_wrapped():
    ext = make_extension(lambda query: ["one", "two"])
    assert ext.QuerySuggestions("") == [Suggestion("one"), Suggestion("two")]


def test_provider_exception_propagates():
    class Boom(Exception):
        pass

    def provider(query):
        raise Boom("provider failed")

    ext = make_extension(provider, limit=3)
    with pytest.raises(Boom):
        ext.QuerySuggestions("ca")


def test_limit_change_applies_to_next_query():
    ext = make_extension(lambda query: ["a", "b", "c"], limit=1)
    assert len(ext.QuerySuggestions("")) == 1
    ext.suggestion_limit = 0
    assert len(ext.QuerySuggestions("")) == 3


def test_execute_uses_query_limit():
    ext = make_extension(lambda query: ["a", "b", "c"], limit=0)
    executor = QueryExecutor(ext)
    assert values(executor.Execute(Query(ext, "", 2))) == ["a", "b"]


def test_truncation_emits_event():
    dispatcher = EventDispatcher()
    events = []
    dispatcher.subscribe("suggestions_truncated", lambda **kw: events.append(kw["dropped"]))
    ext = AutocompleteExtension("city", suggestion_provider=lambda q: ["a", "b", "c", "d"], suggestion_limit=2, dispatcher=dispatcher)
    ext.QuerySuggestions("")
    assert events == [2]


def test_failing_listener_does_not_break_query():
    dispatcher = EventDispatcher()

    def broken(**kwargs):
        raise RuntimeError("listener bug")

    dispatcher.subscribe("query_completed", broken)
    ext = AutocompleteExtension("city", suggestion_provider=lambda q: ["a"], dispatcher=dispatcher)
    assert values(ext.QuerySuggestions("")) == ["a"]


def test_unique_ordered_handles_unhashable_items():
    assert unique_ordered([{"v": 1}, {"v": 2}, {"v": 1}]) == [{"v": 1}, {"v": 2}]


def test_style_names_do_not_affect_hashability():
    s1 = Suggestion("cat", style_names=["a", None])
    s2 = Suggestion("cat", style_names=("a", None))
    assert s1 == s2
    assert len({s1, s2}) == 1
