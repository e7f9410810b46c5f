"""
Tests for settings loading and validation.
"""

import pytest
from pydantic import ValidationError

from pantheon_scoreboard.core.config import DEFAULT_PLAYER_ALIASES, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("SCOREBOARD_FIRST_YEAR", "SCOREBOARD_DATA_FOLDER", "SCOREBOARD_BASE_URL"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)

        assert settings.first_year == 2024
        assert settings.data_folder == "data"
        assert settings.base_url == "http://127.0.0.1:8000"
        assert settings.http_timeout is None

    def test_default_aliases_are_copied(self):
        settings = Settings(_env_file=None)
        settings.player_aliases["Someone"] = "Bear"
        assert "Someone" not in DEFAULT_PLAYER_ALIASES

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SCOREBOARD_FIRST_YEAR", "2022")
        monkeypatch.setenv("SCOREBOARD_DATA_FOLDER", "scores/")
        monkeypatch.setenv("SCOREBOARD_PLAYER_ALIASES", '{"Teresa": "Lioness"}')
        settings = Settings(_env_file=None)

        assert settings.first_year == 2022
        assert settings.data_folder == "scores/"
        assert settings.player_aliases == {"Teresa": "Lioness"}

    def test_base_url_trailing_slash_stripped(self):
        settings = Settings(_env_file=None, base_url="https://example.org/club/")
        assert settings.base_url == "https://example.org/club"

    @pytest.mark.parametrize(
        "url",
        ["file:///home/alex/site", "scoreboard.html", "ftp://example.org"],
    )
    def test_rejects_non_network_base_url(self, url):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, base_url=url)

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, http_timeout=0)
