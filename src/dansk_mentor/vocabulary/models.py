"""
Data models for vocabulary entries and the forms derived from them.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class WordCategory(str, Enum):
    """Closed set of word categories the analysis code relies on.

    UNKNOWN is never stored in a dataset; it marks tokens that could not be
    resolved to any entry.
    """
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    OTHER = "other"
    UNKNOWN = "unknown"

    @classmethod
    def from_dataset_key(cls, key: str) -> "WordCategory":
        """Map a dataset category key ("verbs", "nouns", ...) to a category.

        Keys that are not one of the three inflecting categories map to OTHER.

        Example:
            >>> WordCategory.from_dataset_key("verbs")
            <WordCategory.VERB: 'verb'>
            >>> WordCategory.from_dataset_key("pronouns")
            <WordCategory.OTHER: 'other'>
        """
        return _CATEGORY_KEYS.get(key.strip().lower(), cls.OTHER)


_CATEGORY_KEYS: dict[str, WordCategory] = {
    "noun": WordCategory.NOUN,
    "nouns": WordCategory.NOUN,
    "verb": WordCategory.VERB,
    "verbs": WordCategory.VERB,
    "adjective": WordCategory.ADJECTIVE,
    "adjectives": WordCategory.ADJECTIVE,
}


class Gender(str, Enum):
    """Noun gender class, named after the indefinite article it takes."""
    COMMON = "en"
    NEUTER = "et"

    @property
    def article(self) -> str:
        return self.value


class VocabularyEntry(BaseModel):
    """A dictionary root word with its glosses and inflection data.

    Attributes:
        word: Root surface form (infinitive for verbs, base form otherwise)
        category: Word category
        level: Proficiency tier the word belongs to (opaque tag, e.g. "A1")
        translations: English glosses, primary gloss first
        gender: Gender class (nouns only)
        conjugations: Tense name -> conjugated form (verbs only)
        neuter_form: Adjective form used with neuter nouns (adjectives only)
        example: Example sentence in Danish
        example_translation: English translation of the example
    """
    model_config = {"frozen": True}

    word: str = Field(..., min_length=1, description="Root surface form")
    category: WordCategory = Field(..., description="Word category")
    level: str = Field(..., description="Proficiency level")
    translations: list[str] = Field(default_factory=list, description="English glosses")
    gender: Optional[Gender] = Field(default=None, description="Noun gender class")
    conjugations: dict[str, str] = Field(default_factory=dict, description="Tense -> form")
    neuter_form: Optional[str] = Field(default=None, description="Neuter adjective form")
    example: Optional[str] = None
    example_translation: Optional[str] = None

    @property
    def primary_gloss(self) -> Optional[str]:
        """First English gloss, or None when the entry has none."""
        return self.translations[0] if self.translations else None

    @property
    def present_form(self) -> Optional[str]:
        return self.conjugations.get("present")

    @classmethod
    def from_raw(cls, word: str, category_key: str, level: str, data: dict[str, Any]) -> "VocabularyEntry":
        """Build an entry from one raw dataset record.

        Understands the compact dataset shape where the ``en`` key carries the
        English gloss and, on nouns, doubles as the common-gender marker while
        ``et`` carries the gloss of a neuter noun. The explicit keys
        ``translations``, ``gender``, ``neuter_form`` and
        ``example_translation`` take precedence when present.

        Args:
            word: Root word (the dataset key)
            category_key: Dataset category key (e.g. "verbs")
            level: Level key the record was found under
            data: Raw record

        Returns:
            A validated VocabularyEntry

        Raises:
            pydantic.ValidationError: If the record cannot form a valid entry
        """
        category = WordCategory.from_dataset_key(category_key)

        gender = data.get("gender")
        if gender is None and category is WordCategory.NOUN:
            if "en" in data:
                gender = Gender.COMMON
            elif "et" in data:
                gender = Gender.NEUTER

        translations = data.get("translations")
        if translations is None:
            gloss = data.get("translation") or data.get("en") or data.get("et")
            translations = [gloss] if gloss else []
        elif isinstance(translations, str):
            translations = [translations]

        conjugations = data.get("conjugations") or {}
        if isinstance(conjugations, dict):
            conjugations = {
                str(tense): form
                for tense, form in conjugations.items()
                if isinstance(form, str) and form
            }

        return cls(
            word=word,
            category=category,
            level=level,
            translations=translations,
            gender=gender,
            conjugations=conjugations,
            neuter_form=data.get("neuter_form") or data.get("et_form"),
            example=data.get("example"),
            example_translation=data.get("example_translation") or data.get("translated"),
        )


class ResolvedForm(BaseModel):
    """Index record linking a surface form back to its root entry.

    Attributes:
        form: The surface form this record is keyed by
        root: Root word the form derives from (equal to ``form`` for roots)
        category: Category of the root
        level: Level of the root
        inflection: Which inflection the form represents (a tense name such as
            "present", or "neuter" for adjectives); None for root forms
        entry: The full root entry
    """
    model_config = {"frozen": True}

    form: str
    root: str
    category: WordCategory
    level: str
    inflection: Optional[str] = None
    entry: VocabularyEntry

    @property
    def is_root(self) -> bool:
        return self.inflection is None

    @classmethod
    def for_root(cls, entry: VocabularyEntry) -> "ResolvedForm":
        return cls(
            form=entry.word,
            root=entry.word,
            category=entry.category,
            level=entry.level,
            entry=entry,
        )

    @classmethod
    def for_inflection(cls, form: str, inflection: str, entry: VocabularyEntry) -> "ResolvedForm":
        return cls(
            form=form,
            root=entry.word,
            category=entry.category,
            level=entry.level,
            inflection=inflection,
            entry=entry,
        )
