from typing import Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..schemas import RepositoryPage
from .base import RepositorySource

REPOSITORIES_QUERY = """
query($cursor: String, $pageSize: Int!, $languageCount: Int!) {
  viewer {
    login
    repositories(first: $pageSize, after: $cursor, ownerAffiliations: OWNER, isFork: false) {
      nodes {
        name
        languages(first: $languageCount) {
          edges {
            size
            node {
              name
            }
          }
        }
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""


class GitHubAPIError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GitHubGraphQLAdapter(RepositorySource):
    """Fetches pages of the viewer's own, non-fork repositories over GraphQL."""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings or get_settings()
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.settings.user_agent,
        }
        if self.settings.github_token:
            headers["Authorization"] = f"Bearer {self.settings.github_token}"
        self.headers = headers
        if client is None:
            client_kwargs = {
                "base_url": str(self.settings.github_base_url),
            }
            if self.settings.github_proxy:
                client_kwargs["proxy"] = self.settings.github_proxy
            client = httpx.AsyncClient(**client_kwargs)
        self.client = client

    async def __aenter__(self) -> "GitHubGraphQLAdapter":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch_page(self, cursor: Optional[str] = None) -> RepositoryPage:
        body = {
            "query": REPOSITORIES_QUERY,
            "variables": {
                "cursor": cursor,
                "pageSize": self.settings.page_size,
                "languageCount": self.settings.languages_per_repo,
            },
        }
        logger.debug(f"[github] POST /graphql cursor={cursor}")
        try:
            resp = await self.client.post(
                "/graphql", json=body, headers=self.headers, timeout=self.settings.request_timeout
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise GitHubAPIError(
                f"GitHub GraphQL API responded with status {status}: {exc.response.text}",
                status_code=status,
            ) from exc
        except httpx.RequestError as exc:
            raise GitHubAPIError(f"GitHub request error: {type(exc).__name__} {repr(exc)}") from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise GitHubAPIError(
                f"GitHub GraphQL response is not JSON: {resp.text[:200]}", status_code=resp.status_code
            ) from exc
        if not isinstance(payload, dict):
            raise GitHubAPIError("Unexpected GitHub GraphQL response format.", status_code=resp.status_code)
        if payload.get("errors"):
            raise GitHubAPIError(f"GitHub GraphQL error: {payload['errors']}", status_code=resp.status_code)

        viewer = (payload.get("data") or {}).get("viewer")
        if not isinstance(viewer, dict) or not isinstance(viewer.get("repositories"), dict):
            raise GitHubAPIError("Unexpected GitHub GraphQL response format.", status_code=resp.status_code)

        try:
            page = RepositoryPage.model_validate(viewer["repositories"])
        except ValidationError as exc:
            raise GitHubAPIError(f"Unexpected GitHub GraphQL response format: {exc}") from exc
        return page.model_copy(update={"login": viewer.get("login")})
