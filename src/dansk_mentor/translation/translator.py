"""
Danish -> English sentence translation over the vocabulary dataset.
"""

import logging
from typing import Optional

from ..tokenization import normalize_sentence, tokenize_for_translation
from ..vocabulary import VocabularyIndex
from .phrase_repair import repair_phrases

logger = logging.getLogger("dansk-mentor")


class Translator:
    """Translates sentences using stored examples, then word-by-word glosses.

    1. If the sentence equals a stored example sentence (ignoring case), the
       example's stored translation is returned as-is.
    2. Otherwise each token is glossed on its own: an exact index lookup
       gives the root entry's primary gloss; failing that, a scan over every
       verb conjugation and neuter adjective form is tried; failing that, the
       token is kept unchanged.
    3. The joined glosses go through :func:`repair_phrases`.
    """

    def __init__(self, index: VocabularyIndex) -> None:
        self.index = index

    def translate(self, raw_sentence: str | None) -> str:
        sentence = normalize_sentence(raw_sentence)
        if not sentence:
            return ""

        stored = self.find_example_translation(sentence)
        if stored is not None:
            logger.debug(f"Using stored example translation for '{sentence}'")
            return stored

        glosses = [self.translate_token(token) for token in tokenize_for_translation(sentence)]
        return repair_phrases(" ".join(glosses))

    def find_example_translation(self, sentence: str) -> Optional[str]:
        """Stored translation of the example equal to ``sentence``, if any."""
        target = sentence.lower()
        for _, entry in self.index.iter_entries():
            if entry.example and entry.example_translation and entry.example.lower() == target:
                return entry.example_translation
        return None

    def translate_token(self, token: str) -> str:
        """Gloss a single lowercase token, falling back to the token itself."""
        record = self.index.get_word_data(token)
        if record is not None:
            return record.entry.primary_gloss or token

        entry = self.index.find_inflection(token)
        if entry is not None and entry.primary_gloss:
            return entry.primary_gloss

        return token
