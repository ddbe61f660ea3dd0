"""Translation keys and the uppercase/underscore key convention."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

SEPARATOR = "_"


def normalize(segment: Any, previous: str = "") -> str:
    """Append *segment* to *previous* using the key convention.

    ``normalize("b", "A")`` gives ``"A_B"``. Segments are not validated, so a
    segment that already holds ``_`` is indistinguishable from a nested path.
    """
    upper = str(segment).upper()
    if not previous:
        return upper
    return f"{previous}{SEPARATOR}{upper}"


@dataclass(frozen=True)
class TranslationKey:
    """A normalized, hierarchical translation key such as ``MENU_FILE_OPEN``."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"Translation key must be a string, got {type(self.value).__name__}")
        normalized = self.value.strip().upper()
        if not normalized:
            raise ValueError("Translation key must not be empty")
        object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, key: KeyLike) -> TranslationKey:
        if isinstance(key, TranslationKey):
            return key
        if isinstance(key, Enum):
            return cls(key.name)
        return cls(key)

    def __str__(self) -> str:
        return self.value


KeyLike = Union[TranslationKey, str, Enum]
