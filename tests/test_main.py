"""
Tests for the MCP tool implementations.

The ``_xxx_impl`` functions take the engine explicitly so they can be
exercised without starting the server.
"""

import pytest

from dansk_mentor.engine import SUGGESTION_INSUFFICIENT, MentorEngine
from dansk_mentor.grammar import diagnostics as msg


class TestCheckGrammarTool:

    def test_success(self, engine: MentorEngine) -> None:
        from dansk_mentor.main import _check_grammar_impl
        assert _check_grammar_impl(engine, "Jeg spiser et æble.") == msg.SUCCESS

    def test_empty_sentence(self, engine: MentorEngine) -> None:
        from dansk_mentor.main import _check_grammar_impl
        assert _check_grammar_impl(engine, "  ") == "Write a sentence first!"

    def test_issues_are_prefixed(self, engine: MentorEngine) -> None:
        from dansk_mentor.main import _check_grammar_impl
        assert _check_grammar_impl(engine, "et hus") == msg.FEEDBACK_PREFIX + msg.NO_VERB


class TestTranslateTool:

    def test_translation(self, engine: MentorEngine) -> None:
        from dansk_mentor.main import _translate_sentence_impl
        result = _translate_sentence_impl(engine, "Jeg spiser et æble.")
        assert result == 'Translation: "I am eating an apple."'

    @pytest.mark.parametrize("sentence", ["", "   "])
    def test_blank(self, engine: MentorEngine, sentence: str) -> None:
        from dansk_mentor.main import _translate_sentence_impl
        assert _translate_sentence_impl(engine, sentence) == "Write a sentence first to translate!"


class TestSuggestTool:

    def test_suggestion(self) -> None:
        from dansk_mentor.main import _suggest_sentence_impl
        engine = MentorEngine.from_mapping({
            "A1": {
                "nouns": {"hus": {"et": "house"}},
                "verbs": {"spise": {"en": "to eat", "conjugations": {"present": "spiser"}}},
            }
        })
        result = _suggest_sentence_impl(engine, "A1")
        assert result == "Suggestion: \"Try to create a sentence using 'et hus' and 'spiser'.\""

    def test_insufficient(self, engine: MentorEngine) -> None:
        from dansk_mentor.main import _suggest_sentence_impl
        assert _suggest_sentence_impl(engine, "C2") == SUGGESTION_INSUFFICIENT


class TestExampleTool:

    def test_example(self, engine: MentorEngine) -> None:
        from dansk_mentor.main import _show_example_impl
        result = _show_example_impl(engine, "spiser")
        assert result == (
            '"Jeg spiser et æble." (I am eating an apple.) '
            "Here is an example of how to use the word 'spise'."
        )

    def test_no_example(self, engine: MentorEngine) -> None:
        from dansk_mentor.main import _show_example_impl
        assert _show_example_impl(engine, "bil") == "I don't have an example for 'bil' yet."


class TestWordBankTool:

    def test_words(self, engine: MentorEngine) -> None:
        from dansk_mentor.main import _word_bank_impl
        result = _word_bank_impl(engine, "A2", 15)
        assert sorted(result.split(" · ")) == ["arbejder", "vindue"]

    def test_unknown_level(self, engine: MentorEngine) -> None:
        from dansk_mentor.main import _word_bank_impl
        assert _word_bank_impl(engine, "C1", 15) == "No words found for level 'C1'."


class TestListVocabularyTool:

    def test_listing(self, engine: MentorEngine) -> None:
        from dansk_mentor.main import _list_vocabulary_impl
        assert _list_vocabulary_impl(engine, "A2") == (
            "Verbs:\n"
            "- arbejde (present: arbejder) - to work\n"
            "Nouns:\n"
            "- et vindue - window"
        )

    def test_missing_gloss(self) -> None:
        from dansk_mentor.main import _list_vocabulary_impl
        engine = MentorEngine.from_mapping({"A1": {"other": {"ikke": {}}}})
        assert _list_vocabulary_impl(engine, "A1") == "Other:\n- ikke - translation not found"

    def test_unknown_level(self, engine: MentorEngine) -> None:
        from dansk_mentor.main import _list_vocabulary_impl
        result = _list_vocabulary_impl(engine, "C1")
        assert result == "No vocabulary for level 'C1'. Available levels: A1, A2"
