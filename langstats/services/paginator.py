from typing import AbstractSet, AsyncIterator, Dict, Optional

from loguru import logger

from ..datasources.base import RepositorySource
from ..schemas import LanguageSummary, RepositoryPage
from .aggregator import aggregate_languages, merge_totals


class PaginationError(RuntimeError):
    pass


async def iter_repository_pages(source: RepositorySource) -> AsyncIterator[RepositoryPage]:
    """Yield pages one after another until the source reports no next page."""
    cursor: Optional[str] = None
    has_next_page = True
    page_number = 0
    while has_next_page:
        page = await source.fetch_page(cursor)
        page_number += 1
        logger.debug(f"[pagination] page {page_number}: {len(page.nodes)} repositories")
        yield page

        has_next_page = page.page_info.has_next_page
        cursor = page.page_info.end_cursor
        if has_next_page and not cursor:
            raise PaginationError(f"Page {page_number} reports a next page but no end cursor")


async def collect_language_summary(
    source: RepositorySource, excluded_languages: AbstractSet[str]
) -> LanguageSummary:
    language_bytes: Dict[str, int] = {}
    total_repos = 0
    login: Optional[str] = None

    async for page in iter_repository_pages(source):
        total_repos += len(page.nodes)
        login = login or page.login
        merge_totals(language_bytes, aggregate_languages(page.nodes, excluded_languages))

    logger.info(
        f"[pagination] aggregated {len(language_bytes)} languages across {total_repos} repositories"
    )
    return LanguageSummary(language_bytes=language_bytes, total_repos=total_repos, login=login)
