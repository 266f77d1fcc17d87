"""
Pytest configuration and fixtures for dansk-mentor tests.
"""

import copy
import sys
from pathlib import Path
from typing import Any

import pytest

# Add src directory to Python path to allow importing dansk_mentor
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dansk_mentor.engine import MentorEngine  # noqa: E402
from dansk_mentor.grammar import GrammarAnalyzer  # noqa: E402
from dansk_mentor.translation import Translator  # noqa: E402
from dansk_mentor.vocabulary import TokenResolver, VocabularyIndex  # noqa: E402


# Small, fully controlled dataset in the compact shape of the bundled YAML
SAMPLE_VOCABULARY: dict[str, Any] = {
    "A1": {
        "verbs": {
            "spise": {
                "en": "to eat",
                "conjugations": {"present": "spiser", "past": "spiste"},
                "example": "Jeg spiser et æble.",
                "translated": "I am eating an apple.",
            },
            "være": {
                "en": "to be",
                "conjugations": {"present": "er", "past": "var"},
            },
            "drikke": {
                "en": "to drink",
                "conjugations": {"present": "drikker", "past": "drak"},
            },
            "kunne": {
                "en": "can",
                "conjugations": {"present": "kan", "past": "kunne"},
            },
            "sove": {
                "en": "to sleep",
            },
        },
        "nouns": {
            "æble": {"et": "apple"},
            "hus": {"et": "house"},
            "bil": {"en": "car"},
            "hund": {
                "en": "dog",
                "example": "Hunden sover.",
                "translated": "The dog is sleeping.",
            },
        },
        "adjectives": {
            "stor": {"en": "big", "et_form": "stort"},
            "lille": {"en": "small"},
        },
        "other": {
            "jeg": {"en": "I"},
            "en": {"en": "a"},
            "et": {"en": "a"},
        },
    },
    "A2": {
        "verbs": {
            "arbejde": {
                "en": "to work",
                "conjugations": {"present": "arbejder", "past": "arbejdede"},
            },
        },
        "nouns": {
            "vindue": {"et": "window"},
        },
    },
}


@pytest.fixture
def sample_vocabulary() -> dict[str, Any]:
    """A fresh deep copy of the sample dataset."""
    return copy.deepcopy(SAMPLE_VOCABULARY)


@pytest.fixture
def index(sample_vocabulary: dict[str, Any]) -> VocabularyIndex:
    return VocabularyIndex.from_raw(sample_vocabulary)


@pytest.fixture
def resolver(index: VocabularyIndex) -> TokenResolver:
    return TokenResolver(index)


@pytest.fixture
def analyzer(index: VocabularyIndex) -> GrammarAnalyzer:
    return GrammarAnalyzer(index)


@pytest.fixture
def translator(index: VocabularyIndex) -> Translator:
    return Translator(index)


@pytest.fixture
def engine(index: VocabularyIndex) -> MentorEngine:
    return MentorEngine(index)
