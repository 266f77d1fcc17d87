"""
Rule-based grammar checks for learner sentences.

Three independent rule classes run over a resolved sentence: verb position
(the V2 rule) and conjugation, and article agreement with nouns and
adjectives. Unrecognised words are reported first. The checks are
heuristics over the vocabulary dataset, not a parser.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..tokenization import normalize_sentence, tokenize_for_analysis
from ..vocabulary import Gender, TokenInfo, TokenResolver, VocabularyEntry, VocabularyIndex, WordCategory
from . import diagnostics as msg
from .diagnostics import Diagnostic, DiagnosticKind, GrammarReport

logger = logging.getLogger("dansk-mentor")

# Position the finite verb should take in a main clause (zero-based)
V2_POSITION = 1

ARTICLES: dict[str, Gender] = {gender.article: gender for gender in Gender}


class GrammarAnalyzer:
    """
    Produces ordered diagnostics for a sentence.

    Checks, in output order:

    1. Unknown words, one diagnostic per unresolved token.
    2. Verb position: the first recognised verb should be the second word.
       A sentence without any verb gets a "no verb" diagnostic instead.
    3. Conjugation of that verb against its present tense form.
    4. Article agreement: ``en``/``et`` against the following noun's gender,
       and against an adjective plus noun, including the adjective's form.

    The analyzer holds no per-sentence state; ``check`` can be called any
    number of times.
    """

    def __init__(self, index: VocabularyIndex, resolver: Optional[TokenResolver] = None):
        """
        Initialize the analyzer.

        Args:
            index: Vocabulary index to check against
            resolver: Token resolver; one over ``index`` is created if omitted
        """
        self.index = index
        self.resolver = resolver or TokenResolver(index)

    def check(self, raw_sentence: str | None) -> GrammarReport:
        """
        Check a sentence.

        Args:
            raw_sentence: The learner's input, any case, with punctuation

        Returns:
            GrammarReport with all diagnostics found
        """
        sentence = normalize_sentence(raw_sentence)
        tokens = tokenize_for_analysis(sentence)
        report = GrammarReport(sentence=sentence, tokens=tokens)

        if not tokens:
            report.diagnostics.append(Diagnostic(DiagnosticKind.EMPTY_SENTENCE, msg.EMPTY_SENTENCE))
            return report

        if self.index.is_empty():
            logger.warning("Grammar check requested against an empty vocabulary")
            report.diagnostics.append(
                Diagnostic(DiagnosticKind.INSUFFICIENT_VOCABULARY, msg.INSUFFICIENT_VOCABULARY)
            )
            return report

        infos = self.resolver.resolve_all(tokens)

        report.diagnostics.extend(self._check_unknown_words(infos))

        verb_position = self._find_verb(infos)
        report.diagnostics.extend(self._check_verb_position(infos, verb_position))
        if verb_position is not None:
            report.diagnostics.extend(self._check_conjugation(infos[verb_position], verb_position))

        report.diagnostics.extend(self._check_agreement(infos))

        logger.debug(f"Checked '{sentence}': {len(report.diagnostics)} diagnostic(s)")
        return report

    # ------------------------------------------------------------------
    # Individual checks
    # ------------------------------------------------------------------

    def _check_unknown_words(self, infos: list[TokenInfo]) -> list[Diagnostic]:
        return [
            Diagnostic(DiagnosticKind.UNKNOWN_WORD, msg.UNKNOWN_WORD.format(word=info.token), position)
            for position, info in enumerate(infos)
            if not info.is_known
        ]

    def _find_verb(self, infos: list[TokenInfo]) -> Optional[int]:
        """Position of the first token resolving to a known verb root."""
        verbs = self.index.get_all_verbs()
        for position, info in enumerate(infos):
            if info.category is WordCategory.VERB and info.root in verbs:
                return position
        return None

    def _check_verb_position(self, infos: list[TokenInfo], verb_position: Optional[int]) -> list[Diagnostic]:
        if verb_position is None:
            return [Diagnostic(DiagnosticKind.NO_VERB, msg.NO_VERB)]
        if len(infos) > 1 and verb_position != V2_POSITION:
            return [Diagnostic(DiagnosticKind.VERB_POSITION, msg.VERB_POSITION, verb_position)]
        return []

    def _check_conjugation(self, verb: TokenInfo, position: int) -> list[Diagnostic]:
        """Compare the verb as written with its root's present tense form.

        Verbs without a present form in the dataset are not checked.
        """
        entry = _entry(verb)
        if entry is None or entry.category is not WordCategory.VERB:
            return []

        expected = entry.present_form
        if not expected or verb.token == expected:
            return []

        if verb.token == entry.word:
            text = msg.INFINITIVE_USED.format(word=verb.token, expected=expected)
            return [Diagnostic(DiagnosticKind.INFINITIVE_USED, text, position)]

        text = msg.WRONG_CONJUGATION.format(word=verb.token, expected=expected)
        return [Diagnostic(DiagnosticKind.WRONG_CONJUGATION, text, position)]

    def _check_agreement(self, infos: list[TokenInfo]) -> list[Diagnostic]:
        issues: list[Diagnostic] = []

        for position, info in enumerate(infos):
            article = ARTICLES.get(info.token)
            if article is None:
                continue

            following = _at(infos, position + 1)
            if following is None or not following.is_known:
                continue

            if following.category is WordCategory.NOUN:
                expected = self._noun_gender(following)
                if expected is not None and expected is not article:
                    text = msg.ARTICLE_GENDER.format(
                        noun=following.root, expected=expected.article, article=article.article
                    )
                    issues.append(Diagnostic(DiagnosticKind.ARTICLE_GENDER, text, position + 1))

            elif following.category is WordCategory.ADJECTIVE:
                noun = _at(infos, position + 2)
                if noun is None or noun.category is not WordCategory.NOUN:
                    continue

                expected = self._noun_gender(noun)
                if expected is not None and expected is not article:
                    text = msg.ARTICLE_GENDER_AFTER_ADJECTIVE.format(
                        noun=noun.root,
                        adjective=following.root,
                        expected=expected.article,
                        article=article.article,
                    )
                    issues.append(Diagnostic(DiagnosticKind.ARTICLE_GENDER, text, position + 2))

                issues.extend(self._check_adjective_form(following, article, position + 1))

        return issues

    def _check_adjective_form(self, adjective: TokenInfo, article: Gender, position: int) -> list[Diagnostic]:
        """The adjective takes its neuter form after ``et`` when it has one, its base form otherwise."""
        entry = _entry(adjective)
        if entry is None or entry.category is not WordCategory.ADJECTIVE:
            return []

        if article is Gender.NEUTER and entry.neuter_form:
            if adjective.token == entry.neuter_form:
                return []
            text = msg.ADJECTIVE_NEUTER_FORM.format(
                adjective=entry.word, word=adjective.token, expected=entry.neuter_form, article=article.article
            )
            return [Diagnostic(DiagnosticKind.ADJECTIVE_FORM, text, position)]

        if adjective.token == entry.word:
            return []
        text = msg.ADJECTIVE_BASE_FORM.format(
            adjective=entry.word, word=adjective.token, expected=entry.word, article=article.article
        )
        return [Diagnostic(DiagnosticKind.ADJECTIVE_FORM, text, position)]

    def _noun_gender(self, noun: TokenInfo) -> Optional[Gender]:
        entry = _entry(noun)
        return entry.gender if entry is not None else None


def _at(infos: list[TokenInfo], position: int) -> Optional[TokenInfo]:
    return infos[position] if position < len(infos) else None


def _entry(info: TokenInfo) -> Optional[VocabularyEntry]:
    """Entry of the record the token matched; a root lookup may hit a homograph."""
    return info.record.entry if info.record is not None else None
