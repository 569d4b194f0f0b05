import itertools

from langstats.config import DEFAULT_EXCLUDED_LANGUAGES
from langstats.schemas import RepositoryRecord
from langstats.services.aggregator import aggregate_languages, merge_totals

from tests.helpers import make_repo


def test_two_repositories_excluding_html():
    repos = [
        make_repo({"JavaScript": 800, "HTML": 200}),
        make_repo({"JavaScript": 200, "Python": 100}),
    ]
    assert aggregate_languages(repos, DEFAULT_EXCLUDED_LANGUAGES) == {"JavaScript": 1000, "Python": 100}


def test_excluded_languages_never_counted():
    repos = [make_repo({"CSS": 10**9, "SCSS": 5, "HTML": 7, "Go": 3})]
    totals = aggregate_languages(repos, DEFAULT_EXCLUDED_LANGUAGES)
    assert totals == {"Go": 3}


def test_custom_exclusion_set():
    repos = [make_repo({"HTML": 5, "Go": 3})]
    assert aggregate_languages(repos, frozenset({"Go"})) == {"HTML": 5}


def test_order_does_not_change_totals():
    repos = [
        make_repo({"Rust": 10, "Go": 5}),
        make_repo({"Go": 7, "Python": 1}),
        make_repo({"Python": 2, "Rust": 3, "C": 4}),
    ]
    expected = aggregate_languages(repos, DEFAULT_EXCLUDED_LANGUAGES)
    for ordering in itertools.permutations(repos):
        assert aggregate_languages(ordering, DEFAULT_EXCLUDED_LANGUAGES) == expected


def test_language_order_within_repository_irrelevant():
    forward = make_repo({"Go": 1, "Rust": 2, "C": 3})
    backward = make_repo({"C": 3, "Rust": 2, "Go": 1})
    assert aggregate_languages([forward], set()) == aggregate_languages([backward], set())


def test_repository_without_languages():
    repos = [RepositoryRecord(name="empty"), make_repo({})]
    assert aggregate_languages(repos, DEFAULT_EXCLUDED_LANGUAGES) == {}


def test_merge_totals_adds_key_wise():
    totals = {"Go": 5, "Rust": 1}
    result = merge_totals(totals, {"Go": 2, "Python": 9})
    assert result is totals
    assert totals == {"Go": 7, "Rust": 1, "Python": 9}
