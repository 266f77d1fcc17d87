"""
Token resolver: maps a surface token back to its dictionary root.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from .index import VocabularyIndex
from .models import ResolvedForm, WordCategory

# Best-effort suffix stripping, tried in this order after an exact lookup
# fails. Each rule only applies when something is left after stripping.
SUFFIX_RULES: tuple[tuple[str, str], ...] = (
    ("er", "present tense / agent noun"),     # spiser -> spis
    ("ede", "weak past tense"),               # arbejdede -> arbejd
    ("te", "weak past tense"),                # kørte -> kør
    ("et", "neuter definite"),                # huset -> hus
    ("t", "neuter adjective"),                # stort -> stor
)


@dataclass
class TokenInfo:
    """Resolution result for one token of a sentence.

    Attributes:
        token: The surface token as it appeared (lowercased)
        root: Root word it resolved to, or None when unknown. For a
            suffix-stripped match this is the stripped candidate itself, even
            when the candidate is an inflected form of another root.
        category: Category of the root, UNKNOWN when unresolved
        record: The index record the token (or its stripped form) matched
        stripped_suffix: The suffix removed to find the record, if any
    """
    token: str
    root: Optional[str] = None
    category: WordCategory = WordCategory.UNKNOWN
    record: Optional[ResolvedForm] = None
    stripped_suffix: Optional[str] = None

    @property
    def is_known(self) -> bool:
        return self.category is not WordCategory.UNKNOWN


class TokenResolver:
    """Resolves lowercase tokens against a VocabularyIndex.

    Resolution order, first match wins:

    1. Exact lookup of the token in the all-forms map.
    2. Lookup of each suffix-stripped candidate from ``SUFFIX_RULES``.
    3. Otherwise the token is unknown.

    The suffix rules are a fixed heuristic, not a morphological analyser: short
    or ambiguous tokens can resolve to the wrong root.

    Example:
        >>> resolver = TokenResolver(index)
        >>> info = resolver.resolve("huset")
        >>> info.root, info.category.value, info.stripped_suffix
        ('hus', 'noun', 'et')
    """

    def __init__(self, index: VocabularyIndex) -> None:
        self.index = index

    def candidates(self, token: str) -> list[tuple[str, str]]:
        """Return (candidate root, stripped suffix) pairs in rule order."""
        return [
            (token[:-len(suffix)], suffix)
            for suffix, _ in SUFFIX_RULES
            if token.endswith(suffix) and len(token) > len(suffix)
        ]

    def resolve(self, token: str) -> TokenInfo:
        """Resolve a single token. Never raises; unknown tokens get category UNKNOWN."""
        record = self.index.get_word_data(token)
        if record is not None:
            return TokenInfo(token=token, root=record.root, category=record.category, record=record)

        for candidate, suffix in self.candidates(token):
            record = self.index.get_word_data(candidate)
            if record is not None:
                return TokenInfo(
                    token=token,
                    root=candidate,
                    category=record.category,
                    record=record,
                    stripped_suffix=suffix,
                )

        return TokenInfo(token=token)

    def resolve_all(self, tokens: Iterable[str]) -> list[TokenInfo]:
        return [self.resolve(token) for token in tokens]
