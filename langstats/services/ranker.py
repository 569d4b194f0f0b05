from typing import Dict, List

from loguru import logger

from ..schemas import RankedLanguage

TOP_LANGUAGES = 10


def rank_languages(language_bytes: Dict[str, int], limit: int = TOP_LANGUAGES) -> List[RankedLanguage]:
    """Rank languages by share of total bytes, largest first.

    Ties are broken by language name. A zero byte total yields an empty list.
    """
    total_bytes = sum(language_bytes.values())
    if total_bytes <= 0:
        logger.warning(
            f"[ranking] no language bytes to rank ({len(language_bytes)} languages, total 0)"
        )
        return []

    ranked = [
        RankedLanguage(language=language, bytes=size, percentage=100 * size / total_bytes)
        for language, size in language_bytes.items()
    ]
    ranked.sort(key=lambda item: (-item.percentage, item.language))
    return ranked[:limit]
