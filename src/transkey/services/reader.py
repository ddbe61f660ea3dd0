"""Read translation files from a directory or from bundled package resources.

A root is either a filesystem directory (``str`` or path-like) or an
``importlib.resources`` Traversable, which covers resources shipped inside an
installed package or a zip archive. Files are visited in sorted order so that
"first match" is stable between runs.
"""

from __future__ import annotations

import logging
import os
from importlib import resources
from pathlib import Path
from typing import Any, Iterator, List, Optional, Union

from transkey.content import LocaleTranslations
from transkey.errors import (
    InvalidLocaleError,
    LocaleNotFoundError,
    MalformedInputError,
    TranslationFileError,
)
from transkey.flatten import flatten
from transkey.locales import parse_locale
from transkey.parsers import parse_tree
from transkey.services.settings import Settings

log = logging.getLogger(__name__)

Root = Union[str, "os.PathLike[str]", Any]


def resource_root(package: str, *parts: str):
    """Return the Traversable for a directory bundled inside *package*."""
    root = resources.files(package)
    for part in parts:
        root = root.joinpath(part)
    return root


def _as_root(root: Root):
    if isinstance(root, (str, os.PathLike)):
        root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Translation directory not found: {root}")
    return root


def _split_name(name: str) -> tuple[str, str]:
    stem, dot, suffix = name.rpartition(".")
    if not dot:
        return name, ""
    return stem, f".{suffix}"


def iter_files(root: Root, settings: Optional[Settings] = None) -> Iterator[Any]:
    """Yield every regular file below *root*, depth-first in name order."""
    settings = settings or Settings()
    skip_hidden = settings["skip_hidden_files"]

    def walk(directory) -> Iterator[Any]:
        for entry in sorted(directory.iterdir(), key=lambda e: e.name):
            if skip_hidden and entry.name.startswith("."):
                continue
            if entry.is_dir():
                yield from walk(entry)
            elif entry.is_file():
                yield entry

    yield from walk(_as_root(root))


def read_file(path, *, settings: Optional[Settings] = None) -> LocaleTranslations:
    """Decode one translation file into :class:`LocaleTranslations`.

    The locale comes from the file name without its extension, so
    ``pl_PL.json`` holds Polish translations for Poland.
    """
    settings = settings or Settings()
    if isinstance(path, (str, os.PathLike)):
        path = Path(path)
    stem, suffix = _split_name(path.name)

    try:
        locale = parse_locale(stem)
        try:
            text = path.read_bytes().decode(settings["encoding"])
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Could not decode as {settings['encoding']}: {e}") from e
        tree = parse_tree(text, suffix)
        translations = LocaleTranslations.from_flat(locale, flatten(tree))
    except TranslationFileError as e:
        e.path = str(path)
        raise
    except InvalidLocaleError as e:
        raise MalformedInputError(str(e), path=str(path)) from e

    log.debug(
        "Loaded %s from %s: %d texts, %d messages",
        locale, path, translations.number_of_texts, translations.number_of_messages,
    )
    return translations


def load(root: Root, name: str, *, settings: Optional[Settings] = None) -> LocaleTranslations:
    """Load the first file under *root* whose name contains *name*.

    First match in sorted order wins; a closer match further down is ignored.
    """
    for path in iter_files(root, settings):
        if name in path.name:
            return read_file(path, settings=settings)
    raise LocaleNotFoundError(f"Translation file for locale '{name}' not found in {root}")


def load_all(root: Root, *, settings: Optional[Settings] = None) -> List[LocaleTranslations]:
    """Load every file under *root*. One bad file fails the whole call."""
    loaded = [read_file(path, settings=settings) for path in iter_files(root, settings)]
    log.debug("Loaded %d locale files from %s", len(loaded), root)
    return loaded
