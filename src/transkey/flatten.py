"""Flatten a parsed translation tree into ``TranslationKey -> Translation``."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from transkey.content import Message, Text, Translation
from transkey.errors import (
    InvalidMessageValueError,
    InvalidTextValueError,
    MalformedInputError,
    UnsupportedRootKindError,
)
from transkey.keys import TranslationKey, normalize

log = logging.getLogger(__name__)


def _to_text(key: str, value: Any) -> Text:
    if not isinstance(value, str):
        raise InvalidTextValueError(
            f"Expected a string for {key}, got {type(value).__name__}", key=key
        )
    if not value.strip():
        raise InvalidTextValueError(f"Text for {key} must not be blank", key=key)
    return Text(value)


def _to_message(key: str, value: list) -> Message:
    if not value:
        raise InvalidMessageValueError(f"Message for {key} must not be empty", key=key)
    for index, line in enumerate(value):
        if not isinstance(line, str):
            raise InvalidMessageValueError(
                f"Line {index} of {key} must be a string, got {type(line).__name__}",
                key=key,
            )
    return Message(tuple(value))


def _flatten_object(
    node: Mapping, previous: str, result: Dict[TranslationKey, Translation]
) -> None:
    for segment, value in node.items():
        key = normalize(segment, previous)
        if not key.strip():
            raise MalformedInputError("Translation keys must not be empty")
        if isinstance(value, Mapping):
            _flatten_object(value, key, result)
            continue

        if isinstance(value, (list, tuple)):
            translation: Translation = _to_message(key, list(value))
        else:
            translation = _to_text(key, value)

        tkey = TranslationKey(key)
        if tkey in result:
            log.warning("Duplicate translation key %s, keeping the later value", tkey)
        result[tkey] = translation


def flatten(root: Any) -> Dict[TranslationKey, Translation]:
    """Flatten *root* depth-first.

    ``{"menu": {"open": "Open"}, "help": ["a", "b"]}`` becomes
    ``{MENU_OPEN: Text("Open"), HELP: Message(("a", "b"))}``. Strings become
    texts, lists of strings become messages; anything else raises. Nothing
    is returned unless the whole tree is valid.
    """
    if not isinstance(root, Mapping):
        raise UnsupportedRootKindError(
            f"Translation root must be an object, got {type(root).__name__}"
        )
    result: Dict[TranslationKey, Translation] = {}
    try:
        _flatten_object(root, "", result)
    except RecursionError:
        raise MalformedInputError("Translation tree is nested too deeply") from None
    return result
