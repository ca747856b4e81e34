import json
import logging
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path

import typer
from oneliner_css.engine import create_default_engine, mode_for_path
from oneliner_css.models import MODES

from .config import DEFAULT_CONFIG_FILE, LINE_ENDING_NAMES, FormatConfig
from .converters import format_result_to_file_report

app = typer.Typer(help="oneliner-css - Collapse single-declaration CSS rules onto one line")


@app.command("format")
def format_files(
    files: list[Path] = typer.Argument(..., help="CSS or HTML files to format"),
    check: bool = typer.Option(False, help="Report files that would change without writing them"),
    stdout: bool = typer.Option(False, help="Print formatted output instead of writing files"),
    json_output: bool = typer.Option(False, "--json", help="Print a JSON report"),
    mode: str | None = typer.Option(None, help="Force a mode (css or html) instead of using the file extension"),
    max_line_length: int | None = typer.Option(None, help="Longest one-liner a rule may be collapsed into"),
    line_ending: str | None = typer.Option(None, help="Line ending for new line breaks: auto, lf or crlf"),
    split_attributes: bool | None = typer.Option(None, "--split-attributes/--no-split-attributes", help="Split attribute selectors onto their own lines"),
    tabs: bool | None = typer.Option(None, "--tabs/--no-tabs", help="Convert leading spaces to tabs in CSS files"),
    config_file: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Format CSS files and <style> blocks in HTML files"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if mode is not None and mode not in MODES:
        typer.echo(f"Error: Unknown mode '{mode}' (expected css or html)", err=True)
        raise typer.Exit(code=1)
    if line_ending is not None and line_ending not in LINE_ENDING_NAMES:
        typer.echo(f"Error: Unknown line ending '{line_ending}' (expected auto, lf or crlf)", err=True)
        raise typer.Exit(code=1)

    config = FormatConfig(config_file).override(
        max_line_length=max_line_length,
        line_ending=line_ending,
        split_attribute_selectors=split_attributes,
        convert_indentation=tabs,
    )
    try:
        engine = create_default_engine(config.to_formatter_config())
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    targets = []
    for file_path in files:
        if mode is None and mode_for_path(file_path) is None:
            typer.echo(f"Skipping {file_path}: unsupported file type", err=True)
            continue
        targets.append(file_path)

    if not targets:
        typer.echo("Error: No CSS or HTML files to format", err=True)
        raise typer.Exit(code=1)

    results = engine.format_files(targets, mode=mode, write=not (check or stdout))

    for result in results.results:
        for error in result.errors:
            typer.echo(f"Error formatting {result.file_path}: {error.splitlines()[0] if error else error}", err=True)

    if json_output:
        reports = [format_result_to_file_report(r).model_dump() for r in results.results]
        typer.echo(json.dumps(reports, indent=2))
    elif stdout:
        for result in results.results:
            if not result.errors:
                typer.echo(result.source, nl=False)
    else:
        verb = "Would reformat" if check else "Reformatted"
        for result in results.results:
            if result.modified and not result.errors:
                typer.echo(f"{verb} {result.file_path}")
        typer.echo(
            f"\n{results.modified_files} of {results.total_files} files "
            f"{'would change' if check else 'changed'}, {results.error_files} errors"
        )

    if results.error_files or (check and results.modified_files):
        raise typer.Exit(code=1)


@app.command()
def version():
    """Show the installed version"""
    try:
        typer.echo(f"oneliner-css {package_version('oneliner-css')}")
    except PackageNotFoundError:
        from oneliner_css import __version__

        typer.echo(f"oneliner-css {__version__}")


if __name__ == "__main__":
    app()
