"""
Dansk Mentor MCP Server
Grammar feedback and translation for Danish learners, served over FastMCP.
"""

import logging
from typing import Annotated, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

from .config import load_settings
from .engine import SUGGESTION_INSUFFICIENT, MentorEngine
from .vocabulary import VocabularyLoadError, WordCategory

logger = logging.getLogger("dansk-mentor")

if not load_dotenv():
    logger.debug(".env file not found, using environment and defaults")

settings = load_settings()

logging.basicConfig(level=settings.log_level)

try:
    engine = MentorEngine.from_file(settings.vocabulary_path)
    logger.debug(f"✅ Vocabulary loaded from {settings.vocabulary_path}")
except VocabularyLoadError as e:
    logger.error(f"❌ Could not load vocabulary ({e}); starting with an empty vocabulary")
    engine = MentorEngine.from_mapping({})

mcp = FastMCP(
    name="dansk-mentor"
)


# ----------------------------------------------------------------------
# Tool implementations
# ----------------------------------------------------------------------

def _check_grammar_impl(engine_ref: MentorEngine, sentence: str) -> str:
    return engine_ref.check_grammar(sentence).feedback()


def _translate_sentence_impl(engine_ref: MentorEngine, sentence: str) -> str:
    if not sentence or not sentence.strip():
        return "Write a sentence first to translate!"
    return f'Translation: "{engine_ref.translate_sentence(sentence)}"'


def _suggest_sentence_impl(engine_ref: MentorEngine, level: str) -> str:
    suggestion = engine_ref.suggest_sentence(level)
    if suggestion == SUGGESTION_INSUFFICIENT:
        return suggestion
    return f'Suggestion: "{suggestion}"'


def _show_example_impl(engine_ref: MentorEngine, word: str) -> str:
    found = engine_ref.example_for(word)
    if found is None:
        return f"I don't have an example for '{word}' yet."
    root, example, translation = found
    return f'"{example}" ({translation}) Here is an example of how to use the word \'{root}\'.'


def _word_bank_impl(engine_ref: MentorEngine, level: str, size: int) -> str:
    words = engine_ref.word_bank(level, size=size)
    if not words:
        return f"No words found for level '{level}'."
    return " · ".join(words)


def _list_vocabulary_impl(engine_ref: MentorEngine, level: str) -> str:
    categories = engine_ref.get_words_for_level(level)
    if not categories:
        return f"No vocabulary for level '{level}'. Available levels: {', '.join(engine_ref.levels) or 'none'}"

    lines: list[str] = []
    for category_key, entries in categories.items():
        lines.append(f"{category_key.capitalize()}:")
        category = WordCategory.from_dataset_key(category_key)
        for entry in entries.values():
            word = entry.word
            if category is WordCategory.NOUN and entry.gender:
                word = f"{entry.gender.article} {word}"
            elif category is WordCategory.VERB and entry.present_form:
                word = f"{word} (present: {entry.present_form})"
            lines.append(f"- {word} - {entry.primary_gloss or 'translation not found'}")
    return "\n".join(lines)


# ----------------------------------------------------------------------
# Tools
# ----------------------------------------------------------------------

@mcp.tool
def check_grammar(
    sentence: Annotated[str, Field(description="Danish sentence to check")],
) -> str:
    """Check word recognition, verb position, conjugation and article agreement in a Danish sentence."""
    return _check_grammar_impl(engine, sentence)


@mcp.tool
def translate_sentence(
    sentence: Annotated[str, Field(description="Danish sentence to translate")],
) -> str:
    """Translate a Danish sentence into English (best effort)."""
    return _translate_sentence_impl(engine, sentence)


@mcp.tool
def suggest_sentence(
    level: Annotated[Optional[str], Field(description="Vocabulary level, e.g. A1")] = None,
) -> str:
    """Suggest a practice sentence from the level's vocabulary."""
    return _suggest_sentence_impl(engine, level or settings.default_level)


@mcp.tool
def show_example(
    word: Annotated[str, Field(description="Danish word (any form)")],
) -> str:
    """Show the stored example sentence for a word, with its translation."""
    return _show_example_impl(engine, word)


@mcp.tool
def get_word_bank(
    level: Annotated[Optional[str], Field(description="Vocabulary level, e.g. A1")] = None,
    size: Annotated[Optional[int], Field(description="Number of words", ge=1)] = None,
) -> str:
    """Get a shuffled set of practice words for a level."""
    return _word_bank_impl(engine, level or settings.default_level, size or settings.word_bank_size)


@mcp.tool
def list_vocabulary(
    level: Annotated[Optional[str], Field(description="Vocabulary level, e.g. A1")] = None,
) -> str:
    """List the vocabulary of a level with articles, present forms and translations."""
    return _list_vocabulary_impl(engine, level or settings.default_level)


def main() -> None:
    """Main entry point for the Dansk Mentor MCP Server."""
    mcp.run()

if __name__ == "__main__":
    main()
