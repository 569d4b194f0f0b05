import pytest

from langstats.config import Settings


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        GH_TOKEN="test-token",
        LANGSTATS_OUTPUT_DIR=tmp_path / "dist",
    )
