"""
Vocabulary dataset indexing and token resolution.

Provides O(1) lookup from any surface form (root, conjugated verb form, neuter
adjective form) back to its dictionary root, with suffix-stripping fallback for
inflections the dataset does not list.
"""

from .index import VocabularyIndex
from .loader import DEFAULT_VOCABULARY_PATH, VocabularyLoadError, load_vocabulary, read_vocabulary_file
from .models import Gender, ResolvedForm, VocabularyEntry, WordCategory
from .resolver import SUFFIX_RULES, TokenInfo, TokenResolver

__all__ = [
    "DEFAULT_VOCABULARY_PATH",
    "Gender",
    "ResolvedForm",
    "SUFFIX_RULES",
    "TokenInfo",
    "TokenResolver",
    "VocabularyEntry",
    "VocabularyIndex",
    "VocabularyLoadError",
    "WordCategory",
    "load_vocabulary",
    "read_vocabulary_file",
]
