import re
import sys
from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Hashable, Optional

from pydantic.alias_generators import to_snake

from .config import settings


# to_snake splits "line1" into "line_1"; digits stay attached to the word before them
_LETTER_DIGIT = re.compile(r"(?<=[a-z])_(?=[0-9])")


@lru_cache(maxsize=settings.key_cache_size)
def _normalize_text(key: str) -> str:
    # Separators already present in the key are kept as they are
    segments = key.replace("-", "_").split("_")
    return sys.intern("_".join(_LETTER_DIGIT.sub("", to_snake(segment)) for segment in segments))


def normalize_key(key: Hashable) -> str:
    """ Convert a key in any casing convention (camelCase, PascalCase,
    kebab-case, snake_case) to its interned snake_case form """
    if isinstance(key, Enum):
        key = key.value
    if not isinstance(key, str):
        key = str(key)
    return _normalize_text(key)


def normalize_shallow(mapping: Mapping) -> Dict[str, Any]:
    return {normalize_key(key): value for key, value in mapping.items()}


def normalize_deep(value: Any, sequences: Optional[bool] = None) -> Any:
    """
    Normalize every key of ``value`` at every nesting level.

    Mappings found inside lists and tuples are normalized as well unless
    ``sequences`` is false (defaults to ``settings.deep_normalize_sequences``).
    Values that are neither mappings nor sequences are returned unchanged.
    """
    if sequences is None:
        sequences = settings.deep_normalize_sequences
    return _normalize_deep(value, sequences)


def _normalize_deep(value: Any, sequences: bool) -> Any:
    if isinstance(value, Mapping):
        return {
            normalize_key(key): _normalize_deep(item, sequences)
            for key, item in value.items()
        }
    if sequences and isinstance(value, (list, tuple)):
        items = [_normalize_deep(item, sequences) for item in value]
        return items if isinstance(value, list) else tuple(items)
    return value
