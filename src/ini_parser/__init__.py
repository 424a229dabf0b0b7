"""Parse INI-style configuration text into ordered, JSON-ready dicts."""

from ini_parser.core.formatter import simplify
from ini_parser.core.models import ConfigurationEntry, ParseOptions, SectionEntry
from ini_parser.core.stats import count_stats
from ini_parser.parsers import parse, parse_tree

__version__ = "1.0.0"

__all__ = [
    "ConfigurationEntry",
    "ParseOptions",
    "SectionEntry",
    "count_stats",
    "parse",
    "parse_tree",
    "simplify",
]
