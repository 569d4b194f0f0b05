from typing import Dict, List, Optional

from langstats.schemas import PageInfo, RepositoryPage, RepositoryRecord


def make_repo(languages: Dict[str, int], name: Optional[str] = None) -> RepositoryRecord:
    return RepositoryRecord.model_validate(
        {
            "name": name,
            "languages": {
                "edges": [{"size": size, "node": {"name": lang}} for lang, size in languages.items()]
            },
        }
    )


def make_page(
    repos: List[RepositoryRecord],
    has_next_page: bool = False,
    end_cursor: Optional[str] = None,
    login: Optional[str] = "octocat",
) -> RepositoryPage:
    return RepositoryPage(
        nodes=repos,
        page_info=PageInfo(has_next_page=has_next_page, end_cursor=end_cursor),
        login=login,
    )


class FakeSource:
    """Serves canned pages and records the cursor of every request."""

    def __init__(self, pages: List[RepositoryPage]):
        self.pages = list(pages)
        self.cursors: List[Optional[str]] = []

    async def fetch_page(self, cursor: Optional[str] = None) -> RepositoryPage:
        self.cursors.append(cursor)
        return self.pages[len(self.cursors) - 1]
