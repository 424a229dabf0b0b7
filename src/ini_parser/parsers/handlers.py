from __future__ import annotations

import logging
from typing import Callable, Dict

from ini_parser.core.models import ConfigurationEntry, SectionEntry
from ini_parser.parsers.common import section_name, split_key_value, split_values
from ini_parser.parsers.types import LineType, ParserState

logger = logging.getLogger(__name__)

LineHandler = Callable[[str, ParserState], None]


def _entry(state: ParserState, key: str) -> ConfigurationEntry:
    """Get or create the entry for `key` in the current scope. Never resets."""
    if state.current_section is None:
        entry = state.result.setdefault(key, ConfigurationEntry())
    else:
        section = state.result[state.current_section]
        entry = section.keys.setdefault(key, ConfigurationEntry())  # type: ignore[union-attr]
    return entry  # type: ignore[return-value]


def _append(state: ParserState, key: str, text: str) -> None:
    if not text:
        return
    _entry(state, key).values.extend(split_values(text))


def handle_skip(line: str, state: ParserState) -> None:
    pass


def handle_section(line: str, state: ParserState) -> None:
    name = section_name(line.strip())
    existing = state.result.get(name)

    if isinstance(existing, ConfigurationEntry):
        # last write wins: the section takes over the global key's slot
        logger.warning(
            "Section [%s] replaces global key %r (%d value(s) dropped)",
            name,
            name,
            len(existing.values),
        )
        existing = None

    if existing is None:
        state.result[name] = SectionEntry()

    state.current_section = name
    state.current_key = None
    state.expecting_continuation = False


def handle_key_value(line: str, state: ParserState) -> None:
    # serves both GLOBAL_KEY_VALUE and KEY_VALUE; scope comes from state
    key, value = split_key_value(line)
    _entry(state, key)
    state.current_key = key

    # empty value: key declared, values follow on the next lines
    if not value:
        state.expecting_continuation = True
        return

    _append(state, key, value)
    state.expecting_continuation = False


def handle_indented_value(line: str, state: ParserState) -> None:
    trimmed = line.strip()
    if not state.current_key or not trimmed:
        return

    _append(state, state.current_key, trimmed)
    state.expecting_continuation = False


def handle_unindented_continuation(line: str, state: ParserState) -> None:
    if not state.current_key:
        return
    _append(state, state.current_key, line.strip())


HANDLERS: Dict[LineType, LineHandler] = {
    LineType.SKIP: handle_skip,
    LineType.SECTION: handle_section,
    LineType.GLOBAL_KEY_VALUE: handle_key_value,
    LineType.KEY_VALUE: handle_key_value,
    LineType.INDENTED_VALUE: handle_indented_value,
    LineType.UNINDENTED_CONTINUATION: handle_unindented_continuation,
}
