"""JSON translation file backend."""

from __future__ import annotations

import json
from typing import Any

from transkey.errors import MalformedInputError


def parse_json(text: str) -> Any:
    """Parse JSON text into plain dicts, lists and scalars."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Invalid JSON: {e}") from e
    except RecursionError:
        raise MalformedInputError("JSON is nested too deeply") from None
