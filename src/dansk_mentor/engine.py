"""
Mentor engine: the single owner of a vocabulary dataset and everything derived from it.

The boundary layer (the MCP server in ``main.py``, or any other front end)
supplies the dataset once and then calls the operations here per sentence.
Nothing in this module raises for user input; unknown words, empty sentences
and thin vocabularies all come back as plain messages.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from .grammar import GrammarAnalyzer, GrammarReport
from .translation import Translator
from .vocabulary import (
    DEFAULT_VOCABULARY_PATH,
    ResolvedForm,
    TokenInfo,
    TokenResolver,
    VocabularyEntry,
    VocabularyIndex,
    WordCategory,
    load_vocabulary,
)

logger = logging.getLogger("dansk-mentor")

DEFAULT_WORD_BANK_SIZE = 15

SUGGESTION_INSUFFICIENT = "I need more words in this level to give you a good suggestion!"
SUGGESTION_TEMPLATE = "Try to create a sentence using '{noun}' and '{verb}'."


class MentorEngine:
    """Lexical resolution, grammar analysis and translation over one dataset.

    Example:
        >>> engine = MentorEngine.from_file()
        >>> engine.analyze_sentence("Jeg spiser et æble.")
        ['Fantastisk! Your sentence looks good to me. Keep up the great work! 🎉']
        >>> engine.translate_sentence("Jeg spiser et æble.")
        'I am eating an apple.'
    """

    def __init__(self, index: VocabularyIndex) -> None:
        self.index = index
        self.resolver = TokenResolver(index)
        self.analyzer = GrammarAnalyzer(index, self.resolver)
        self.translator = Translator(index)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "MentorEngine":
        """Build an engine from a raw level -> category -> word -> record mapping."""
        return cls(VocabularyIndex.from_raw(raw))

    @classmethod
    def from_file(cls, path: Path | str = DEFAULT_VOCABULARY_PATH) -> "MentorEngine":
        """Build an engine from a JSON/YAML vocabulary file.

        Raises:
            VocabularyLoadError: If the file cannot be read or parsed
        """
        return cls(load_vocabulary(path))

    # ------------------------------------------------------------------
    # Vocabulary lookups
    # ------------------------------------------------------------------

    @property
    def levels(self) -> list[str]:
        return self.index.levels

    def get_words_for_level(self, level: str) -> Mapping[str, Mapping[str, VocabularyEntry]]:
        return self.index.get_words_for_level(level)

    def get_all_words(self) -> Mapping[str, ResolvedForm]:
        return self.index.get_all_words()

    def get_all_verbs(self) -> frozenset[str]:
        return self.index.get_all_verbs()

    def get_all_nouns(self) -> frozenset[str]:
        return self.index.get_all_nouns()

    def get_all_adjectives(self) -> frozenset[str]:
        return self.index.get_all_adjectives()

    def get_word_data(self, form: str) -> Optional[ResolvedForm]:
        return self.index.get_word_data(form)

    def resolve(self, token: str) -> TokenInfo:
        return self.resolver.resolve(token.strip().lower())

    # ------------------------------------------------------------------
    # Sentence operations
    # ------------------------------------------------------------------

    def check_grammar(self, raw_sentence: str | None) -> GrammarReport:
        return self.analyzer.check(raw_sentence)

    def analyze_sentence(self, raw_sentence: str | None) -> list[str]:
        """Diagnostic messages for a sentence, or the single success message."""
        return self.check_grammar(raw_sentence).messages()

    def translate_sentence(self, raw_sentence: str | None) -> str:
        return self.translator.translate(raw_sentence)

    def example_for(self, word: str) -> Optional[tuple[str, str, str]]:
        """Return (root word, example sentence, its translation) for a word.

        Any surface form of the word works, e.g. "spiser" finds the example
        stored on "spise" and reports "spise" as the root. Returns None if the
        word is unknown or has no example.
        """
        record = self.index.get_word_data(word.strip().lower())
        if record is None or not record.entry.example:
            return None
        example = record.entry.example
        return record.root, example, self.translate_sentence(example)

    # ------------------------------------------------------------------
    # Practice helpers
    # ------------------------------------------------------------------

    def suggest_sentence(self, level: str, rng: Optional[random.Random] = None) -> str:
        """Suggest a practice sentence from a random noun and verb of a level.

        A stored example of the noun is preferred, then one of the verb;
        otherwise the learner is asked to build a sentence from the two words.
        """
        rng = rng or random.Random()
        nouns, verbs = self._level_entries(level, WordCategory.NOUN), self._level_entries(level, WordCategory.VERB)

        if not nouns or not verbs:
            logger.debug(f"Not enough nouns/verbs in level '{level}' for a suggestion")
            return SUGGESTION_INSUFFICIENT

        noun = rng.choice(nouns)
        verb = rng.choice(verbs)

        if noun.example:
            return noun.example
        if verb.example:
            return verb.example

        noun_phrase = f"{noun.gender.article} {noun.word}" if noun.gender else noun.word
        return SUGGESTION_TEMPLATE.format(noun=noun_phrase, verb=verb.present_form or verb.word)

    def word_bank(
        self,
        level: str,
        size: int = DEFAULT_WORD_BANK_SIZE,
        rng: Optional[random.Random] = None,
    ) -> list[str]:
        """Shuffled practice words for a level, at most ``size`` of them.

        Verbs appear in their present tense form when the dataset has one.
        """
        rng = rng or random.Random()
        words: list[str] = []
        for category_key, entries in self.get_words_for_level(level).items():
            category = WordCategory.from_dataset_key(category_key)
            for entry in entries.values():
                if category is WordCategory.VERB:
                    words.append(entry.present_form or entry.word)
                else:
                    words.append(entry.word)

        rng.shuffle(words)
        return words[:max(size, 0)]

    def _level_entries(self, level: str, category: WordCategory) -> list[VocabularyEntry]:
        return [
            entry
            for category_key, entries in self.get_words_for_level(level).items()
            if WordCategory.from_dataset_key(category_key) is category
            for entry in entries.values()
        ]
