from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.text import Text

from ini_parser.core.models import ParseStats


# ----------------------------
# Message labels
# ----------------------------

_LABELS = {
    "error": ("[  ERROR  ]", "msg.error"),
    "success": ("[ SUCCESS ]", "msg.success"),
    "warning": ("[ WARNING ]", "msg.warning"),
}


def render_message(console: Console, msg: str, kind: str = "error") -> None:
    """
    Print `msg` after a colored, fixed-width label:
      [  ERROR  ] File not found or not readable: config.ini

    Unknown kinds fall back to "error". Only the label is colored.
    """
    label, style = _LABELS.get(kind, _LABELS["error"])
    # Text, not markup: labels and paths contain square brackets
    console.print(Text.assemble((label, style), " ", msg), soft_wrap=True)


# ----------------------------
# JSON output
# ----------------------------


def format_json(data: Any, *, indent: int = 2) -> str:
    return json.dumps(data, indent=indent, ensure_ascii=False)


# ----------------------------
# Check mode
# ----------------------------


def render_check_summary(console: Console, file: str, stats: ParseStats) -> None:
    render_message(console, f"File found: {file}", "success")
    render_message(console, "File readable: yes", "success")
    render_message(
        console,
        f"Parsed successfully: {stats.sections} sections, {stats.keys} keys",
        "success",
    )
