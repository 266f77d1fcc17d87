"""
Dansk Mentor - lexical resolution, grammar feedback and translation for Danish learners.
"""

from .engine import MentorEngine
from .grammar import Diagnostic, DiagnosticKind, GrammarAnalyzer, GrammarReport
from .translation import Translator
from .vocabulary import (
    ResolvedForm,
    TokenInfo,
    TokenResolver,
    VocabularyEntry,
    VocabularyIndex,
    VocabularyLoadError,
    WordCategory,
    load_vocabulary,
)

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("dansk-mentor")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "GrammarAnalyzer",
    "GrammarReport",
    "MentorEngine",
    "ResolvedForm",
    "TokenInfo",
    "TokenResolver",
    "Translator",
    "VocabularyEntry",
    "VocabularyIndex",
    "VocabularyLoadError",
    "WordCategory",
    "load_vocabulary",
]
