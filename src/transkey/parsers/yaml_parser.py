"""YAML translation file backend (Rails i18n style files work as-is)."""

from __future__ import annotations

from typing import Any

import yaml

from transkey.errors import MalformedInputError


def parse_yaml(text: str) -> Any:
    """Parse YAML text with the safe loader.

    Only plain mappings, sequences and scalars are produced; tags that would
    construct arbitrary objects are rejected as malformed input.
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedInputError(f"Invalid YAML: {e}") from e
    except RecursionError:
        raise MalformedInputError("YAML is nested too deeply") from None
