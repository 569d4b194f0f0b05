import asyncio
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import Settings, get_settings
from .datasources.base import RepositorySource
from .datasources.github_adapter import GitHubGraphQLAdapter
from .services.paginator import collect_language_summary
from .services.ranker import rank_languages
from .services.renderer import DEFAULT_TITLE, render_svg


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def terminal_title(settings: Settings, login: Optional[str]) -> str:
    if settings.terminal_title:
        return settings.terminal_title
    if login:
        return f"{login}@github ~ language-stats"
    return DEFAULT_TITLE


async def build_svg(source: RepositorySource, settings: Settings) -> str:
    summary = await collect_language_summary(source, settings.excluded_languages)
    top_languages = rank_languages(summary.language_bytes, limit=settings.top_n)
    logger.info(
        f"[ranking] top languages: {', '.join(item.language for item in top_languages) or '-'}"
    )
    return render_svg(top_languages, summary.total_repos, title=terminal_title(settings, summary.login))


async def create_svg(settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    async with GitHubGraphQLAdapter(settings) as source:
        return await build_svg(source, settings)


def write_svg(svg: str, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(svg, encoding="utf-8")
    return output_path


def main() -> None:
    try:
        settings = get_settings()
        configure_logging(settings.log_level)
        svg = asyncio.run(create_svg(settings))
        path = write_svg(svg, settings.output_path)
    except Exception:
        logger.exception("[driver] Error generating SVG")
        sys.exit(1)
    logger.info(f"[driver] SVG generated successfully: {path}")


if __name__ == "__main__":
    main()
