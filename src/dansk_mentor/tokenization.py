"""
Sentence normalisation and tokenization.
"""

import re

# Punctuation stripped from token edges before grammar analysis
_EDGE_PUNCTUATION = ".,?!;:"

# Punctuation removed everywhere before word-by-word translation
_TRANSLATION_PUNCTUATION_RE = re.compile(r"[.,?!;]")


def normalize_sentence(text: str | None) -> str:
    """Trim and lowercase user input. None becomes an empty string."""
    return (text or "").strip().lower()


def tokenize_for_analysis(sentence: str) -> list[str]:
    """Split on whitespace and strip punctuation from each token's edges.

    Example:
        >>> tokenize_for_analysis("jeg spiser, et æble!")
        ['jeg', 'spiser', 'et', 'æble']
    """
    tokens = (word.strip(_EDGE_PUNCTUATION) for word in sentence.split())
    return [token for token in tokens if token]


def tokenize_for_translation(sentence: str) -> list[str]:
    """Drop punctuation anywhere in the sentence, then split on whitespace."""
    return _TRANSLATION_PUNCTUATION_RE.sub("", sentence).split()
