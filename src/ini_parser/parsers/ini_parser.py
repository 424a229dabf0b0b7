from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ini_parser.core.formatter import format_output
from ini_parser.core.models import ParseOptions, ResultTree
from ini_parser.parsers.classifier import classify
from ini_parser.parsers.common import is_empty_or_comment
from ini_parser.parsers.handlers import HANDLERS
from ini_parser.parsers.types import LineType, ParserState

logger = logging.getLogger(__name__)

BOM = "\ufeff"

OptionsLike = Union[ParseOptions, Mapping[str, Any], None]


def _resolve_options(options: OptionsLike, meta: Optional[bool]) -> ParseOptions:
    if meta is not None:
        return ParseOptions(meta=meta is True)
    if isinstance(options, ParseOptions):
        return options
    if isinstance(options, Mapping):
        # only a literal True switches to meta output
        return ParseOptions(meta=options.get("meta") is True)
    return ParseOptions()


def parse_lines(lines: Iterable[str]) -> ResultTree:
    """
    Single forward pass: classify each line, then hand it to its handler.
    """
    state = ParserState()
    skipped = 0

    for line in lines:
        line_type = classify(line, state)
        if line_type is LineType.SKIP and not is_empty_or_comment(line.strip()):
            skipped += 1
            logger.debug("skipped malformed line: %r", line)
        HANDLERS[line_type](line, state)

    logger.debug("parsed %d top-level entries, %d malformed line(s) skipped", len(state.result), skipped)
    return state.result


def parse_tree(content: Any) -> ResultTree:
    """
    Parse INI text into the tagged tree of entry models.

    Anything that is not a non-empty `str` yields an empty tree.
    """
    if not isinstance(content, str) or not content:
        return {}
    if content.startswith(BOM):
        content = content[1:]
    return parse_lines(content.split("\n"))


def parse(
    content: Any = None,
    options: OptionsLike = None,
    *,
    meta: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Parse INI text into a JSON-ready dict. Never raises.

    Supported:
      [section] headers (reopening one merges into it)
      key=value lines, global before the first section
      indented continuation lines
      unindented continuation lines after `key=` with an empty value
      # and ; comment lines, and inline comments after a value

    Examples:
      parse("[app]\\nname=demo")              -> {"app": {"name": ["demo"]}}
      parse("[app]\\nname=demo", meta=True)   ->
        {"app": {"type": "section",
                 "content": {"name": {"type": "configuration", "content": ["demo"]}}}}
    """
    opts = _resolve_options(options, meta)
    return format_output(parse_tree(content), opts)
