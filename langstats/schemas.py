from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class LanguageNode(BaseModel):
    name: str


class LanguageEdge(BaseModel):
    size: int
    node: LanguageNode


class RepositoryLanguages(BaseModel):
    edges: List[LanguageEdge] = []


class RepositoryRecord(BaseModel):
    """One repository node as returned by the GraphQL ``repositories`` connection."""

    name: Optional[str] = None
    languages: Optional[RepositoryLanguages] = None

    def language_sizes(self) -> Iterator[Tuple[str, int]]:
        if self.languages is None:
            return
        for edge in self.languages.edges:
            yield edge.node.name, edge.size


class PageInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    has_next_page: bool = Field(alias="hasNextPage")
    end_cursor: Optional[str] = Field(default=None, alias="endCursor")


class RepositoryPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nodes: List[RepositoryRecord]
    page_info: PageInfo = Field(alias="pageInfo")
    login: Optional[str] = None


class LanguageSummary(BaseModel):
    language_bytes: Dict[str, int]
    total_repos: int
    login: Optional[str] = None


class RankedLanguage(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: str
    bytes: int
    percentage: float
