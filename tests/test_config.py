from pathlib import Path

import pytest
from pydantic import ValidationError

from langstats.config import DEFAULT_EXCLUDED_LANGUAGES, Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GH_TOKEN", raising=False)
    settings = Settings(_env_file=None)
    assert settings.github_token is None
    assert settings.excluded_languages == DEFAULT_EXCLUDED_LANGUAGES
    assert settings.top_n == 10
    assert settings.page_size == 100
    assert settings.output_path == Path("dist") / "language-stats.svg"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GH_TOKEN", "from-env")
    monkeypatch.setenv("LANGSTATS_EXCLUDED_LANGUAGES", '["HTML", "Jupyter Notebook"]')
    monkeypatch.setenv("LANGSTATS_TOP_N", "5")
    settings = Settings(_env_file=None)
    assert settings.github_token == "from-env"
    assert settings.excluded_languages == frozenset({"HTML", "Jupyter Notebook"})
    assert settings.top_n == 5


@pytest.mark.parametrize("value", ["-1", "0", "11"])
def test_top_n_outside_one_to_ten_rejected(monkeypatch, value):
    monkeypatch.setenv("LANGSTATS_TOP_N", value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
