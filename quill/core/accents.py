"""
Accents — Accented character transliteration table

Maps accented code points to their unaccented base-letter sequences
(é -> e, ß -> ss, Đ -> D). Used for diacritic-tolerant keyword matching
and for producing ASCII-friendly text.

The table is static data shipped as data/foreign_chars.yaml. It is read
once, lazily, and never mutated afterwards:

    table = get_accent_table()           # shared, loaded on first use
    table.fold("Hà Nội")                 # -> "Ha Noi"

Callers that need a different table construct one explicitly and pass it
where a `table` parameter is offered:

    table = AccentTable.from_yaml(Path("my_chars.yaml"))
    convert_accented_characters("Zürich", table=table)
"""

import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

import yaml


logger = logging.getLogger(__name__)


DEFAULT_TABLE_PATH = Path(__file__).parent.parent / "data" / "foreign_chars.yaml"


class AccentTable:
    """
    Read-only mapping from accented characters to base letters.

    Keys are single code points. Values may be longer than one character,
    so folded text can be longer than its source; fold_with_offsets()
    keeps track of where each folded character came from.
    """

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        self._mapping = MappingProxyType(dict(mapping or {}))

    @classmethod
    def from_yaml(cls, path: Path) -> 'AccentTable':
        """
        Load a table from a YAML mapping file.

        A missing or malformed file yields an empty table (logged), which
        makes every fold a no-op.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not load accent table %s: %s", path, e)
            return cls()

        if not isinstance(data, dict):
            logger.warning("Accent table %s is not a mapping, ignoring", path)
            return cls()

        mapping: Dict[str, str] = {}
        for key, value in data.items():
            key, value = str(key), str(value)
            if len(key) != 1:
                logger.debug("Skipping multi-character accent key %r", key)
                continue
            mapping[key] = value

        logger.debug("Loaded %d accent mappings from %s", len(mapping), path)
        return cls(mapping)

    @property
    def mapping(self) -> Mapping[str, str]:
        return self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def __bool__(self) -> bool:
        return bool(self._mapping)

    def __contains__(self, char: str) -> bool:
        return char in self._mapping

    def fold(self, text: str) -> str:
        """Replace every mapped character with its base sequence."""
        if not text or not self._mapping:
            return text
        return "".join(self._mapping.get(char, char) for char in text)

    def fold_with_offsets(self, text: str, lower: bool = False) -> Tuple[str, List[int]]:
        """
        Fold text and report the source index of every folded character.

        Args:
            text: Input text
            lower: Also lower-case each folded piece

        Returns:
            (folded text, owners) where owners[i] is the index in `text`
            of the character that produced folded[i]
        """
        pieces = []
        owners: List[int] = []
        for index, char in enumerate(text):
            piece = self._mapping.get(char, char)
            if lower:
                piece = piece.lower()
            pieces.append(piece)
            owners.extend([index] * len(piece))
        return "".join(pieces), owners


# =============================================================================
# Shared Instance (lazy, initialised at most once)
# =============================================================================

_accent_table: Optional[AccentTable] = None
_accent_table_lock = threading.Lock()


def get_accent_table() -> AccentTable:
    """
    Get the shared accent table, loading the bundled file on first use.
    """
    global _accent_table

    if _accent_table is None:
        with _accent_table_lock:
            if _accent_table is None:
                _accent_table = AccentTable.from_yaml(DEFAULT_TABLE_PATH)

    return _accent_table


def reset_accent_table() -> None:
    """
    Drop the shared table so the next call reloads it.

    Useful for testing.
    """
    global _accent_table

    with _accent_table_lock:
        _accent_table = None


def convert_accented_characters(text: str, table: Optional[AccentTable] = None) -> str:
    """
    Transliterate accented characters to their base letters.

    Args:
        text: Input text
        table: Table to use (default: shared bundled table)

    Returns:
        Folded text; unchanged when the table is empty

    Examples:
        convert_accented_characters("Crème brûlée")  -> "Creme brulee"
        convert_accented_characters("Straße")        -> "Strasse"
    """
    if not text:
        return text
    table = table if table is not None else get_accent_table()
    return table.fold(text)
