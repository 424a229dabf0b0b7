from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from ini_parser.core.models import Entry


class LineType(str, Enum):
    SKIP = "skip"
    SECTION = "section"
    GLOBAL_KEY_VALUE = "global_key_value"
    KEY_VALUE = "key_value"
    INDENTED_VALUE = "indented_value"
    UNINDENTED_CONTINUATION = "unindented_continuation"


@dataclass
class ParserState:
    """
    Mutable state threaded through a single parse pass.

    A fresh instance is created per `parse` call and never shared.
    """
    result: Dict[str, Entry] = field(default_factory=dict)
    current_section: Optional[str] = None
    current_key: Optional[str] = None
    expecting_continuation: bool = False
