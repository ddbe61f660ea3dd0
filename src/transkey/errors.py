"""Exceptions raised while loading and resolving translations."""

from __future__ import annotations

from typing import Optional


class TranslationError(Exception):
    """Base class for every error raised by transkey."""


class TranslationFileError(TranslationError):
    """A single translation file could not be turned into translations."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class MalformedInputError(TranslationFileError):
    """File content is not parseable by its backend."""


class UnsupportedRootKindError(TranslationFileError):
    """The root of a file is not an object."""


class InvalidTextValueError(TranslationFileError, ValueError):
    """A scalar leaf is blank or not a string."""

    def __init__(self, message: str, key: str = "", path: Optional[str] = None):
        super().__init__(message, path)
        self.key = key


class InvalidMessageValueError(TranslationFileError, ValueError):
    """An array leaf is empty or holds something other than strings."""

    def __init__(self, message: str, key: str = "", path: Optional[str] = None):
        super().__init__(message, path)
        self.key = key


class InvalidLocaleError(TranslationError, ValueError):
    """A locale tag could not be parsed."""


class LocaleNotFoundError(TranslationError, LookupError):
    """No translation file matches the requested locale."""


class TranslationNotFoundError(TranslationError, LookupError):
    """A key is absent from both the requested and the default locale."""

    def __init__(self, key, locale=None):
        self.key = key
        self.locale = locale
        where = f" for locale {locale}" if locale is not None else ""
        super().__init__(f"Translation not found: {key}{where}")
