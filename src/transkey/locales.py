"""Locale tags such as ``en_US`` parsed into language and region."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from transkey.errors import InvalidLocaleError

# ISO-639 language (2-3 letters), optional ISO-3166 alpha-2 or UN M.49 region
_TAG_RE = re.compile(r"^([A-Za-z]{2,3})(?:[_-]([A-Za-z]{2}|[0-9]{3}))?$")


@dataclass(frozen=True)
class LocaleSource:
    """A language with an optional region."""
    language: str
    region: Optional[str] = None

    @property
    def tag(self) -> str:
        if self.region:
            return f"{self.language}_{self.region}"
        return self.language

    @classmethod
    def of(cls, value: LocaleLike) -> LocaleSource:
        if isinstance(value, LocaleSource):
            return value
        return parse_locale(value)

    def __str__(self) -> str:
        return self.tag


LocaleLike = Union[LocaleSource, str]


def parse_locale(tag: str) -> LocaleSource:
    """Parse ``en``, ``en_US`` or ``en-US`` into a :class:`LocaleSource`."""
    if not isinstance(tag, str):
        raise InvalidLocaleError(f"Locale tag must be a string, got {type(tag).__name__}")
    match = _TAG_RE.match(tag.strip())
    if not match:
        raise InvalidLocaleError(f"Malformed locale tag: {tag!r}")
    language, region = match.groups()
    return LocaleSource(language.lower(), region.upper() if region else None)
