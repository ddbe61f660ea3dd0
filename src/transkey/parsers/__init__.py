"""Parser backends turning file text into a tree of mappings, lists and strings."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from transkey.errors import MalformedInputError

log = logging.getLogger(__name__)

ParseFunc = Callable[[str], Any]

_PARSERS: Dict[str, ParseFunc] = {}


def _normalize_suffix(suffix: str) -> str:
    suffix = suffix.lower()
    return suffix if suffix.startswith(".") else f".{suffix}"


def register_parser(suffix: str, func: ParseFunc) -> None:
    """Use *func* for files ending in *suffix*, replacing any earlier backend."""
    _PARSERS[_normalize_suffix(suffix)] = func


def parser_for(suffix: str) -> ParseFunc:
    try:
        return _PARSERS[_normalize_suffix(suffix)]
    except KeyError:
        raise MalformedInputError(f"No parser registered for '{suffix}' files") from None


def supported_suffixes() -> list[str]:
    return sorted(_PARSERS)


def parse_tree(text: str, suffix: str) -> Any:
    """Parse *text* with the backend registered for *suffix*."""
    func = parser_for(suffix)
    log.debug("Parsing %s content with %s", suffix, func.__module__)
    return func(text)


def _register_defaults() -> None:
    from transkey.parsers.json_parser import parse_json
    from transkey.parsers.properties_parser import parse_properties
    from transkey.parsers.yaml_parser import parse_yaml

    register_parser(".json", parse_json)
    register_parser(".yaml", parse_yaml)
    register_parser(".yml", parse_yaml)
    register_parser(".properties", parse_properties)


_register_defaults()
