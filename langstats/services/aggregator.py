from typing import AbstractSet, Dict, Iterable

from ..schemas import RepositoryRecord


def aggregate_languages(
    repos: Iterable[RepositoryRecord], excluded_languages: AbstractSet[str]
) -> Dict[str, int]:
    """Sum the byte size of every non-excluded language across ``repos``."""
    language_bytes: Dict[str, int] = {}
    for repo in repos:
        for language, size in repo.language_sizes():
            if language in excluded_languages:
                continue
            language_bytes[language] = language_bytes.get(language, 0) + size
    return language_bytes


def merge_totals(totals: Dict[str, int], partial: Dict[str, int]) -> Dict[str, int]:
    """Add ``partial`` into ``totals`` key by key; returns ``totals``."""
    for language, size in partial.items():
        totals[language] = totals.get(language, 0) + size
    return totals
