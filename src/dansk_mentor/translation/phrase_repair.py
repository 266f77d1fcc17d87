"""
Best-effort phrase repair for word-by-word translations.

These are string-level patches over the joined English tokens, driven by the
fixed word lists below. They are not grammatical analysis: verbs outside
``COMMON_VERB_GLOSSES`` are left alone, and verbs inside it are rewritten
mechanically ("make" becomes "is makeing"). Outputs are deterministic so they
can be pinned exactly in tests.
"""

import re

# English verb glosses the repairs recognise, in match order
COMMON_VERB_GLOSSES: tuple[str, ...] = (
    "eat", "read", "see", "have", "be", "call", "come", "live", "can", "will",
    "must", "may", "know", "take", "give", "find", "speak", "understand",
    "love", "drive", "work", "visit", "make", "buy", "think/find", "help",
    "sell", "ask", "answer", "study", "develop", "discuss", "explain",
    "suggest", "decide", "analyze", "argue", "contribute", "consider",
    "criticize", "conclude", "abstract", "articulate", "legitimize",
    "synthesize", "decipher", "internalize", "proliferate", "illuminate",
    "evaluate", "imply", "reflect", "specify", "emphasize",
)

# Subjects that turn "<subject> to <verb>" into "<subject> <verb>s"
COMMON_SUBJECTS: frozenset[str] = frozenset({
    "jeg", "du", "han", "hun", "vi", "de", "pigen", "drengen", "huset", "bilen",
})

# Glosses that never take the continuous form
MODAL_GLOSSES: frozenset[str] = frozenset({"can", "will", "must", "may"})

COPULA_GLOSS = "be"

_VERBS = "|".join(re.escape(gloss) for gloss in COMMON_VERB_GLOSSES)

_INFINITIVE_AFTER_SUBJECT_RE = re.compile(rf"(\b\w+\b) to ({_VERBS})\b")
_BARE_VERB_RE = re.compile(rf"\b({_VERBS})s?\b")

# Applied repeatedly until the text stops changing
ARTICLE_REPAIRS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bthe an?\b"), "the"),        # "the a house" -> "the house"
    (re.compile(r"\ban? (an?)\b"), r"\1"),      # "a an apple" -> "an apple"
)


def _third_person(match: re.Match[str]) -> str:
    subject, verb = match.group(1), match.group(2)
    if "to" not in subject.lower() and subject.lower() in COMMON_SUBJECTS:
        return f"{subject} {verb}s"
    return match.group(0)


def _continuous(match: re.Match[str]) -> str:
    verb = match.group(1)
    if verb == COPULA_GLOSS:
        return "is"
    if verb in MODAL_GLOSSES:
        return match.group(0)
    return f"is {verb}ing"


def collapse_articles(text: str) -> str:
    """Reduce runs of articles to the article nearest the noun ("the" wins over "a")."""
    previous = None
    while previous != text:
        previous = text
        for pattern, replacement in ARTICLE_REPAIRS:
            text = pattern.sub(replacement, text)
    return text


def repair_phrases(text: str) -> str:
    """Apply all repairs to a joined word-by-word translation.

    1. ``<subject> to <verb>`` becomes ``<subject> <verb>s`` for the subjects
       in ``COMMON_SUBJECTS``.
    2. A known verb gloss becomes ``is <verb>ing``; the copula becomes
       ``is``; modals are kept.
    3. Conflicting article sequences collapse to one article.

    Example:
        >>> repair_phrases("jeg to eat the a apple")
        'jeg is eating the apple'
    """
    text = _INFINITIVE_AFTER_SUBJECT_RE.sub(_third_person, text)
    text = _BARE_VERB_RE.sub(_continuous, text)
    return collapse_articles(text)
