"""
Multi-form lookup index over a vocabulary dataset.
"""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Optional

from pydantic import ValidationError

from .models import ResolvedForm, VocabularyEntry, WordCategory

logger = logging.getLogger("dansk-mentor")

Levels = Mapping[str, Mapping[str, Mapping[str, VocabularyEntry]]]

_EMPTY: Mapping[str, Mapping[str, VocabularyEntry]] = MappingProxyType({})


class VocabularyIndex:
    """Owns an immutable vocabulary dataset and the lookups derived from it.

    The dataset is a level -> category key -> root word -> entry mapping.
    Derived structures (the all-forms map and the per-category root sets) are
    built lazily on first access and cached for the lifetime of the index.
    Rebuilding is never needed since the dataset cannot change; a new dataset
    means a new index.

    The all-forms map contains every root plus every distinct conjugated verb
    form and neuter adjective form. A root always maps to itself; an inflected
    form never replaces a key that is already present, so a surface form that
    is also some other word's root keeps resolving to that root.

    Example:
        >>> index = VocabularyIndex.from_raw({
        ...     "A1": {"verbs": {"spise": {"en": "to eat",
        ...                                "conjugations": {"present": "spiser"}}}}
        ... })
        >>> index.get_word_data("spiser").root
        'spise'
        >>> sorted(index.get_all_verbs())
        ['spise']
    """

    def __init__(self, levels: Levels) -> None:
        """Wrap an already-parsed dataset.

        Args:
            levels: Level -> category key -> root word -> VocabularyEntry
        """
        self._levels: Mapping[str, Mapping[str, Mapping[str, VocabularyEntry]]] = MappingProxyType({
            level: MappingProxyType({
                category_key: MappingProxyType(dict(words))
                for category_key, words in categories.items()
            })
            for level, categories in levels.items()
        })
        self._all_forms: Optional[Mapping[str, ResolvedForm]] = None
        self._roots: dict[WordCategory, frozenset[str]] = {}

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "VocabularyIndex":
        """Parse a raw nested mapping into entries and index it.

        Malformed parts of the dataset are skipped with a warning rather than
        failing the whole load.

        Args:
            raw: Level -> category key -> root word -> raw record

        Returns:
            A new VocabularyIndex
        """
        levels: dict[str, dict[str, dict[str, VocabularyEntry]]] = {}

        for level, categories in (raw or {}).items():
            level = str(level)
            if not isinstance(categories, Mapping):
                logger.warning(f"Skipping level '{level}': expected a mapping of categories")
                continue

            parsed_level = levels.setdefault(level, {})
            for category_key, words in categories.items():
                category_key = str(category_key)
                if not isinstance(words, Mapping):
                    logger.warning(f"Skipping {level}/{category_key}: expected a mapping of words")
                    continue

                parsed_words = parsed_level.setdefault(category_key, {})
                for word, data in words.items():
                    word = str(word)
                    if not isinstance(data, Mapping):
                        logger.warning(f"Skipping {level}/{category_key}/{word}: entry is not a mapping")
                        continue
                    try:
                        parsed_words[word] = VocabularyEntry.from_raw(word, category_key, level, dict(data))
                    except ValidationError as e:
                        logger.warning(f"Skipping {level}/{category_key}/{word}: {e.error_count()} validation error(s)")

        return cls(levels)

    # ------------------------------------------------------------------
    # Dataset access
    # ------------------------------------------------------------------

    @property
    def levels(self) -> list[str]:
        """Level tags in dataset order."""
        return list(self._levels)

    def is_empty(self) -> bool:
        """True when the dataset holds no words at all."""
        return not any(words for categories in self._levels.values() for words in categories.values())

    def get_words_for_level(self, level: str) -> Mapping[str, Mapping[str, VocabularyEntry]]:
        """Return the category -> root -> entry mapping for a level.

        Unknown levels yield an empty mapping.
        """
        return self._levels.get(level, _EMPTY)

    def iter_entries(self) -> Iterator[tuple[str, VocabularyEntry]]:
        """Yield (category key, entry) for every root, level by level."""
        for categories in self._levels.values():
            for category_key, words in categories.items():
                for entry in words.values():
                    yield category_key, entry

    # ------------------------------------------------------------------
    # Cached lookups
    # ------------------------------------------------------------------

    def get_all_words(self) -> Mapping[str, ResolvedForm]:
        """Return the surface form -> ResolvedForm map, building it on first call."""
        if self._all_forms is None:
            self._all_forms = MappingProxyType(self._build_all_forms())
            logger.debug(f"📚 Vocabulary index built ({len(self._all_forms)} surface forms)")
        return self._all_forms

    def get_all_verbs(self) -> frozenset[str]:
        return self._roots_for(WordCategory.VERB)

    def get_all_nouns(self) -> frozenset[str]:
        return self._roots_for(WordCategory.NOUN)

    def get_all_adjectives(self) -> frozenset[str]:
        return self._roots_for(WordCategory.ADJECTIVE)

    def get_word_data(self, form: str) -> Optional[ResolvedForm]:
        """Look up any surface form. Returns None when the form is unknown."""
        return self.get_all_words().get(form)

    def get_root_entry(self, form: str) -> Optional[VocabularyEntry]:
        """Return the root entry behind a surface form, if any."""
        record = self.get_word_data(form)
        return record.entry if record else None

    def find_inflection(self, form: str) -> Optional[VocabularyEntry]:
        """Scan the raw dataset for a verb or adjective inflected as ``form``.

        Unlike :meth:`get_word_data` this walks every entry, so it also finds
        inflections that lost a key collision in the all-forms map.
        """
        for _, entry in self.iter_entries():
            if entry.category is WordCategory.VERB and form in entry.conjugations.values():
                return entry
            if entry.category is WordCategory.ADJECTIVE and entry.neuter_form == form:
                return entry
        return None

    def _roots_for(self, category: WordCategory) -> frozenset[str]:
        roots = self._roots.get(category)
        if roots is None:
            roots = frozenset(
                entry.word
                for category_key, entry in self.iter_entries()
                if WordCategory.from_dataset_key(category_key) is category
            )
            self._roots[category] = roots
        return roots

    def _build_all_forms(self) -> dict[str, ResolvedForm]:
        forms: dict[str, ResolvedForm] = {}

        for _, entry in self.iter_entries():
            existing = forms.get(entry.word)
            # The first root seen for a word wins; roots displace inflections.
            if existing is None or not existing.is_root:
                forms[entry.word] = ResolvedForm.for_root(entry)

            if entry.category is WordCategory.VERB:
                for tense, form in entry.conjugations.items():
                    if form != entry.word and form not in forms:
                        forms[form] = ResolvedForm.for_inflection(form, tense, entry)

            elif entry.category is WordCategory.ADJECTIVE and entry.neuter_form:
                form = entry.neuter_form
                if form != entry.word and form not in forms:
                    forms[form] = ResolvedForm.for_inflection(form, "neuter", entry)

        return forms
