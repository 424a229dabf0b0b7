from __future__ import annotations

from ini_parser.parsers.common import (
    is_empty_or_comment,
    is_indented,
    is_key_value,
    is_section,
)
from ini_parser.parsers.types import LineType, ParserState


def classify(line: str, state: ParserState) -> LineType:
    """
    Map a raw line to exactly one LineType. Rules are checked in order and
    the first match wins; `state` is only read.

    Once a section is open, no line is ever classified as a global key.
    """
    trimmed = line.strip()

    if is_empty_or_comment(trimmed):
        return LineType.SKIP

    if is_section(trimmed):
        return LineType.SECTION

    # indentation continues the last key in either scope
    if is_indented(line) and state.current_key:
        return LineType.INDENTED_VALUE

    if state.current_section is None:
        if is_key_value(line):
            return LineType.GLOBAL_KEY_VALUE
        if state.current_key and state.expecting_continuation:
            return LineType.UNINDENTED_CONTINUATION
        # malformed line outside any section
        return LineType.SKIP

    if is_key_value(line):
        return LineType.KEY_VALUE

    if state.current_key and state.expecting_continuation:
        return LineType.UNINDENTED_CONTINUATION

    return LineType.SKIP
