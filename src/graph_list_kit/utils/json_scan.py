"""Member-level scanning of JSON objects that keeps each value's raw text.

``json.loads`` throws away the exact upstream formatting. Paginated reads
need both: the parsed value to find keys and cursors, and the original text
of the item array so pages can be concatenated without re-serializing.
"""

import json
from typing import Any, NamedTuple

_decoder = json.JSONDecoder()
_WHITESPACE = " \t\n\r"


class JsonMember(NamedTuple):
    """One ``"key": value`` pair of a JSON object."""

    key: str
    value: Any
    raw: str


def _skip_ws(text: str, idx: int) -> int:
    while idx < len(text) and text[idx] in _WHITESPACE:
        idx += 1
    return idx


def scan_object(text: str) -> list[JsonMember]:
    """Parse a JSON object into its members, keeping each value's source text.

    Args:
        text: Document whose top level must be a JSON object

    Returns:
        Members in document order (duplicate keys are all kept)

    Raises:
        ValueError: If the text is not a single well-formed JSON object

    Example:
        >>> scan_object('{"value": [1,  2]}')[0].raw
        '[1,  2]'
    """
    idx = _skip_ws(text, 0)
    if text[idx : idx + 1] != "{":
        raise ValueError("Expected a JSON object")
    idx = _skip_ws(text, idx + 1)

    members: list[JsonMember] = []
    if text[idx : idx + 1] == "}":
        idx += 1
    else:
        while True:
            if text[idx : idx + 1] != '"':
                raise ValueError(f"Expected a member name at position {idx}")
            key, idx = _decoder.raw_decode(text, idx)
            idx = _skip_ws(text, idx)
            if text[idx : idx + 1] != ":":
                raise ValueError(f"Expected ':' at position {idx}")
            start = _skip_ws(text, idx + 1)
            value, idx = _decoder.raw_decode(text, start)
            members.append(JsonMember(key, value, text[start:idx]))

            idx = _skip_ws(text, idx)
            separator = text[idx : idx + 1]
            if separator == ",":
                idx = _skip_ws(text, idx + 1)
            elif separator == "}":
                idx += 1
                break
            else:
                raise ValueError(f"Expected ',' or '}}' at position {idx}")

    if _skip_ws(text, idx) != len(text):
        raise ValueError("Unexpected data after the JSON object")
    return members


def find_member(members: list[JsonMember], name: str) -> JsonMember | None:
    """Return the first member whose key equals ``name`` ignoring case."""
    wanted = name.casefold()
    for member in members:
        if member.key.casefold() == wanted:
            return member
    return None
