from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console

from ini_parser import __version__
from ini_parser.cli.ui import THEME, format_json, get_ui, render_check_summary, render_message
from ini_parser.cli.utils.files import is_file_valid, read_file, write_file
from ini_parser.core.config import load_config
from ini_parser.core.errors import ExitCode, IniParserError
from ini_parser.core.stats import count_stats
from ini_parser.parsers import parse


def _typer_exception(name: str) -> type:
    # typer may ship its own click; take the classes from its hierarchy
    for cls in typer.BadParameter.__mro__:
        if cls.__name__ == name:
            return cls
    raise LookupError(name)


UsageError = _typer_exception("UsageError")
ClickException = _typer_exception("ClickException")


app = typer.Typer(
    name="ini-parser",
    help="Parse INI files into JSON format.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ini-parser {__version__}")
        raise typer.Exit(0)


def _cli_overrides(meta: Optional[bool], indent: Optional[int]) -> Dict[str, Any]:
    output: Dict[str, Any] = {}
    if meta is not None:
        output["meta"] = meta
    if indent is not None:
        output["indent"] = indent
    return {"output": output}


@app.command()
def parse_cmd(
    file: Path = typer.Argument(..., help="Path to INI file (relative or absolute)."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", dir_okay=False, help="Save output to JSON file."
    ),
    meta: Optional[bool] = typer.Option(
        None,
        "--meta/--no-meta",
        help="Return metadata format with type information (overrides config if set).",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress stdout output when saving to file."
    ),
    check: bool = typer.Option(
        False, "--check", help="Check INI file and display statistics without full output."
    ),
    indent: Optional[int] = typer.Option(
        None, "--indent", min=0, max=16, help="JSON indent width (default 2)."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log parser diagnostics to stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Output the current version.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    try:
        loaded = load_config(Path.cwd(), cli_overrides=_cli_overrides(meta, indent))
    except IniParserError as e:
        get_ui(verbose=verbose).error(str(e))
        raise typer.Exit(code=int(e.exit_code))

    ui = get_ui(verbose=verbose, color=loaded.ui.color)
    out_cfg = loaded.output

    if ui.verbose and (loaded.global_path or loaded.project_path):
        ui.warning(f"Config: global={loaded.global_path or '-'} project={loaded.project_path or '-'}")

    if not is_file_valid(file):
        ui.error(f"File not found or not readable: {file}")
        raise typer.Exit(code=int(ExitCode.ERROR))

    try:
        content = read_file(file)
        parsed = parse(content, meta=out_cfg.meta)

        if check:
            render_check_summary(ui.console, str(file), count_stats(parsed))
            raise typer.Exit(code=int(ExitCode.OK))

        formatted = format_json(parsed, indent=out_cfg.indent)

        if output is not None:
            write_file(output, formatted)
            if quiet:
                return

        typer.echo(formatted)

    except IniParserError as e:
        ui.error(str(e))
        raise typer.Exit(code=int(e.exit_code))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI and return its exit code. Usage errors are reported with
    the same colored labels as runtime errors and map to exit code 2.
    """
    command = typer.main.get_command(app)
    try:
        rv = command.main(args=argv, prog_name="ini-parser", standalone_mode=False)
    except UsageError as e:
        render_message(Console(theme=THEME, highlight=False), e.format_message(), "error")
        return int(ExitCode.USAGE)
    except ClickException as e:
        render_message(Console(theme=THEME, highlight=False), e.format_message(), "error")
        return int(ExitCode.ERROR)
    except typer.Abort:
        return int(ExitCode.ERROR)
    return rv if isinstance(rv, int) else int(ExitCode.OK)


def run() -> None:
    sys.exit(main())
