"""
Diagnostic messages produced by the grammar analyzer.

Diagnostics are informational feedback for a learner, never errors: every
problem found in a sentence becomes one human-readable message, collected in
the order the checks run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# =============================================================================
# Message templates
# =============================================================================

EMPTY_SENTENCE = "Write a sentence first!"
INSUFFICIENT_VOCABULARY = "I need more words in my vocabulary before I can check your sentence!"
SUCCESS = "Fantastisk! Your sentence looks good to me. Keep up the great work! 🎉"
FEEDBACK_PREFIX = "I found a few things to work on: "

UNKNOWN_WORD = "I don't recognize the word '{word}'. Are you sure it's correct?"
VERB_POSITION = (
    "Hmm, try to place the verb in the second position of your sentence. "
    "That's a classic Danish rule for main clauses!"
)
NO_VERB = "I can't find a verb in your sentence. A sentence usually needs one!"
INFINITIVE_USED = (
    "The verb '{word}' is in its infinitive form. "
    "For this sentence, you likely need the present tense form: '{expected}'."
)
WRONG_CONJUGATION = (
    "The verb '{word}' might be conjugated incorrectly. "
    "The present tense form is '{expected}'."
)
ARTICLE_GENDER = "The noun '{noun}' should typically use '{expected}', not '{article}'."
ARTICLE_GENDER_AFTER_ADJECTIVE = (
    "The noun '{noun}' (following adjective '{adjective}') "
    "should use '{expected}', not '{article}'."
)
ADJECTIVE_NEUTER_FORM = (
    "The adjective '{adjective}' (form: '{word}') should be its 'et-form' "
    "('{expected}') when used with '{article}'."
)
ADJECTIVE_BASE_FORM = (
    "The adjective '{adjective}' (form: '{word}') should be its base form "
    "('{expected}') when used with '{article}'."
)


class DiagnosticKind(Enum):
    """Which check produced a diagnostic."""
    EMPTY_SENTENCE = "empty_sentence"
    INSUFFICIENT_VOCABULARY = "insufficient_vocabulary"
    UNKNOWN_WORD = "unknown_word"
    VERB_POSITION = "verb_position"
    NO_VERB = "no_verb"
    INFINITIVE_USED = "infinitive_used"
    WRONG_CONJUGATION = "wrong_conjugation"
    ARTICLE_GENDER = "article_gender"
    ADJECTIVE_FORM = "adjective_form"


@dataclass
class Diagnostic:
    """A single piece of feedback about a sentence."""
    kind: DiagnosticKind
    message: str
    position: Optional[int] = None  # token index the diagnostic refers to

    def __str__(self) -> str:
        return self.message


@dataclass
class GrammarReport:
    """
    Result of one grammar check.

    The sentence passes when no diagnostics were produced. Reports are created
    fresh per call and hold nothing shared with other calls.
    """
    sentence: str
    tokens: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def kinds(self) -> list[DiagnosticKind]:
        return [d.kind for d in self.diagnostics]

    def messages(self) -> list[str]:
        """Diagnostic texts in order, or the single success message."""
        if self.ok:
            return [SUCCESS]
        return [d.message for d in self.diagnostics]

    def feedback(self) -> str:
        """Render the mentor's reply for this sentence."""
        if self.ok:
            return SUCCESS
        if len(self.diagnostics) == 1 and self.diagnostics[0].kind in _STANDALONE_KINDS:
            return self.diagnostics[0].message
        return FEEDBACK_PREFIX + " ".join(d.message for d in self.diagnostics)


# Reported on their own, without the "things to work on" prefix
_STANDALONE_KINDS = {DiagnosticKind.EMPTY_SENTENCE, DiagnosticKind.INSUFFICIENT_VOCABULARY}
