"""
Tests for environment-driven settings.
"""

from pathlib import Path

import pytest

from dansk_mentor.config import MentorSettings, load_settings
from dansk_mentor.vocabulary import DEFAULT_VOCABULARY_PATH

ENV_VARS = (
    "DANSK_MENTOR_VOCABULARY",
    "DANSK_MENTOR_LEVEL",
    "DANSK_MENTOR_WORD_BANK_SIZE",
    "DANSK_MENTOR_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:

    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.vocabulary_path == DEFAULT_VOCABULARY_PATH
        assert settings.default_level == "A1"
        assert settings.word_bank_size == 15
        assert settings.log_level == "INFO"

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("DANSK_MENTOR_VOCABULARY", str(tmp_path / "words.json"))
        monkeypatch.setenv("DANSK_MENTOR_LEVEL", "B1")
        monkeypatch.setenv("DANSK_MENTOR_WORD_BANK_SIZE", "8")
        monkeypatch.setenv("DANSK_MENTOR_LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.vocabulary_path == tmp_path / "words.json"
        assert settings.default_level == "B1"
        assert settings.word_bank_size == 8
        assert settings.log_level == "DEBUG"

    def test_empty_values_are_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DANSK_MENTOR_LEVEL", "")
        assert load_settings().default_level == "A1"

    @pytest.mark.parametrize(
        "name, value",
        [
            ("DANSK_MENTOR_WORD_BANK_SIZE", "many"),
            ("DANSK_MENTOR_WORD_BANK_SIZE", "0"),
            ("DANSK_MENTOR_LOG_LEVEL", "loud"),
        ],
    )
    def test_invalid_values_fall_back_to_defaults(
        self, monkeypatch: pytest.MonkeyPatch, name: str, value: str
    ) -> None:
        monkeypatch.setenv(name, value)
        monkeypatch.setenv("DANSK_MENTOR_LEVEL", "A2")
        assert load_settings() == MentorSettings()
