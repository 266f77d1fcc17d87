"""
Best-effort sentence translation: stored examples first, then word-by-word glosses with phrase repair.
"""

from .phrase_repair import (
    COMMON_SUBJECTS,
    COMMON_VERB_GLOSSES,
    MODAL_GLOSSES,
    collapse_articles,
    repair_phrases,
)
from .translator import Translator

__all__ = [
    "COMMON_SUBJECTS",
    "COMMON_VERB_GLOSSES",
    "MODAL_GLOSSES",
    "Translator",
    "collapse_articles",
    "repair_phrases",
]
