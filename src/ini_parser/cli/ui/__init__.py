from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from ini_parser.cli.ui.formatters import (
    format_json,
    render_check_summary,
    render_message,
)

THEME = Theme(
    {
        "msg.error": "bold red",
        "msg.success": "bold green",
        "msg.warning": "bold yellow",
    }
)

PACKAGE_LOGGER = "ini_parser"


@dataclass(frozen=True)
class UI:
    console: Console
    verbose: bool = False

    def error(self, msg: str) -> None:
        render_message(self.console, msg, "error")

    def success(self, msg: str) -> None:
        render_message(self.console, msg, "success")

    def warning(self, msg: str) -> None:
        render_message(self.console, msg, "warning")


def setup_logging(verbose: bool) -> None:
    """
    Route package logs to stderr through Rich when verbose, so stdout stays
    clean JSON. Silent otherwise.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        if isinstance(h, (RichHandler, logging.NullHandler)):
            logger.removeHandler(h)

    if not verbose:
        logger.setLevel(logging.WARNING)
        logger.addHandler(logging.NullHandler())
        return

    handler = RichHandler(
        console=Console(stderr=True, theme=THEME),
        show_time=False,
        show_path=False,
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def get_ui(*, verbose: bool = False, color: bool = True) -> UI:
    setup_logging(verbose)
    console = Console(theme=THEME, highlight=False, no_color=not color)
    return UI(console=console, verbose=verbose)


__all__ = [
    "UI",
    "format_json",
    "get_ui",
    "render_check_summary",
    "render_message",
    "setup_logging",
]
