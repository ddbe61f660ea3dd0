"""Java .properties backend.

Dotted keys become nested objects, so ``menu.open = Open`` flattens to
``MENU_OPEN`` just like ``{"menu": {"open": "Open"}}`` in JSON. Properties
files can only express texts.
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, List, Optional, Tuple

from transkey.errors import MalformedInputError

_ESCAPES = {
    'n': '\n',
    'r': '\r',
    't': '\t',
    'f': '\f',
}


def _unescape(value: str) -> str:
    """Unescape a properties key or value (\\uXXXX, \\n, \\t, \\=, ...)."""
    def replace(match: re.Match) -> str:
        escaped = match.group(1)
        if escaped.startswith('u'):
            return chr(int(escaped[1:], 16))
        return _ESCAPES.get(escaped, escaped)

    return re.sub(r'\\(u[0-9a-fA-F]{4}|.)', replace, value)


def _ends_with_continuation(line: str) -> bool:
    # An odd number of trailing backslashes continues the value
    trailing = len(line) - len(line.rstrip('\\'))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, line) with continuation lines joined."""
    buffer: List[str] = []
    start = 0
    for line_num, raw in enumerate(text.splitlines(), 1):
        line = raw.lstrip() if buffer else raw
        if not buffer:
            start = line_num
            stripped = line.strip()
            if not stripped or stripped[0] in '#!':
                continue
        if _ends_with_continuation(line):
            buffer.append(line[:-1])
            continue
        buffer.append(line)
        yield start, "".join(buffer)
        buffer = []
    if buffer:
        yield start, "".join(buffer)


def _split_line(line: str) -> Tuple[str, str]:
    """Split a logical line at the first unescaped '=', ':' or whitespace."""
    line = line.lstrip()
    separator_pos = -1
    in_escape = False
    for i, char in enumerate(line):
        if in_escape:
            in_escape = False
            continue
        if char == '\\':
            in_escape = True
            continue
        if char in '=:' or char.isspace():
            separator_pos = i
            break

    if separator_pos == -1:
        return line, ""

    key = line[:separator_pos]
    rest = line[separator_pos:].lstrip(' \t\f')
    if rest[:1] in ('=', ':'):
        rest = rest[1:].lstrip(' \t\f')
    return key, rest


def parse_properties(text: str) -> Dict[str, object]:
    """Parse properties text into a nested dict keyed on dotted segments."""
    root: Dict[str, object] = {}
    leaves: Dict[str, int] = {}
    for line_num, line in _logical_lines(text):
        raw_key, raw_value = _split_line(line)
        key = _unescape(raw_key)
        value = _unescape(raw_value)
        segments = key.split('.')
        if not all(segments):
            raise MalformedInputError(f"Line {line_num}: invalid key {key!r}")

        node = root
        for depth, segment in enumerate(segments[:-1]):
            child: Optional[object] = node.get(segment)
            if child is None:
                child = node[segment] = {}
            elif not isinstance(child, dict):
                path = '.'.join(segments[:depth + 1])
                raise MalformedInputError(
                    f"Line {line_num}: {key!r} nests under {path!r} "
                    f"which already has a value (line {leaves[path]})"
                )
            node = child

        last = segments[-1]
        if isinstance(node.get(last), dict):
            raise MalformedInputError(
                f"Line {line_num}: {key!r} is already used as a parent key"
            )
        node[last] = value
        leaves[key] = line_num
    return root
