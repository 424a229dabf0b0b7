from __future__ import annotations

from ini_parser.parsers.classifier import classify
from ini_parser.parsers.handlers import HANDLERS
from ini_parser.parsers.ini_parser import parse, parse_lines, parse_tree
from ini_parser.parsers.types import LineType, ParserState

__all__ = [
    "HANDLERS",
    "LineType",
    "ParserState",
    "classify",
    "parse",
    "parse_lines",
    "parse_tree",
]
