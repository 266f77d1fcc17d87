"""
Loading vocabulary datasets from local JSON/YAML files.

The expected file structure is the nested level -> category -> word mapping
the index consumes, optionally wrapped in a ``vocabulary`` key:

```yaml
A1:
  verbs:
    spise:
      en: to eat
      conjugations: {present: spiser, past: spiste}
      example: Jeg spiser et æble.
      translated: I am eating an apple.
  nouns:
    æble:
      et: apple
```
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .index import VocabularyIndex

logger = logging.getLogger("dansk-mentor")

SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}

DEFAULT_VOCABULARY_PATH = Path(__file__).resolve().parent.parent / "data" / "vocabulary.yaml"


class VocabularyLoadError(Exception):
    """Error reading or parsing a vocabulary file."""
    pass


def read_vocabulary_file(path: Path | str) -> dict[str, Any]:
    """Read a vocabulary file into its raw nested mapping.

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        Level -> category -> word -> raw record mapping

    Raises:
        VocabularyLoadError: If the file is missing, unreadable, of an
            unsupported type, or not a mapping at the top level
    """
    path = Path(path)
    if not path.exists():
        raise VocabularyLoadError(f"Vocabulary file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise VocabularyLoadError(
            f"Unsupported file format: {suffix}. "
            f"Supported: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
        )

    try:
        raw_content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise VocabularyLoadError(f"Failed to read file: {e}") from e

    try:
        if suffix == ".json":
            data = json.loads(raw_content)
        else:
            data = yaml.safe_load(raw_content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise VocabularyLoadError(f"Failed to parse {suffix} file: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise VocabularyLoadError("Vocabulary must be a JSON/YAML object at the top level")

    # Support both wrapped and flat structure
    vocabulary = data.get("vocabulary", data)
    if not isinstance(vocabulary, dict):
        raise VocabularyLoadError("'vocabulary' must map levels to categories")
    return vocabulary


def load_vocabulary(path: Path | str = DEFAULT_VOCABULARY_PATH) -> VocabularyIndex:
    """Load a vocabulary file and wrap it in a VocabularyIndex."""
    raw = read_vocabulary_file(path)
    index = VocabularyIndex.from_raw(raw)
    logger.debug(f"📂 Loaded vocabulary from {path} (levels: {', '.join(index.levels) or 'none'})")
    return index
