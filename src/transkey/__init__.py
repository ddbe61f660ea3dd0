"""transkey — locale files flattened into uppercase translation keys."""

from transkey.content import LocaleTranslations, Message, Replacer, Text, Translation
from transkey.errors import (
    InvalidLocaleError,
    InvalidMessageValueError,
    InvalidTextValueError,
    LocaleNotFoundError,
    MalformedInputError,
    TranslationError,
    TranslationFileError,
    TranslationNotFoundError,
    UnsupportedRootKindError,
)
from transkey.flatten import flatten
from transkey.keys import TranslationKey, normalize
from transkey.locales import LocaleSource, parse_locale
from transkey.services.reader import load, load_all, read_file, resource_root
from transkey.services.settings import Settings
from transkey.services.translation import TranslationService, fill

__version__ = "0.1.0"

__all__ = [
    "InvalidLocaleError",
    "InvalidMessageValueError",
    "InvalidTextValueError",
    "LocaleNotFoundError",
    "LocaleSource",
    "LocaleTranslations",
    "MalformedInputError",
    "Message",
    "Replacer",
    "Settings",
    "Text",
    "Translation",
    "TranslationError",
    "TranslationFileError",
    "TranslationKey",
    "TranslationNotFoundError",
    "TranslationService",
    "UnsupportedRootKindError",
    "fill",
    "flatten",
    "load",
    "load_all",
    "normalize",
    "parse_locale",
    "read_file",
    "resource_root",
]
