from typing import Optional, Protocol

from ..schemas import RepositoryPage


class RepositorySource(Protocol):
    async def fetch_page(self, cursor: Optional[str] = None) -> RepositoryPage:
        ...
