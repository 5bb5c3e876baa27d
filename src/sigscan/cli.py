import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from sigscan import __version__
from sigscan.batch import extract_files
from sigscan.config import load_extraction_config
from sigscan.extractors import EXTRACTORS, LANGUAGE_NAMES

app = typer.Typer(
    help="sigscan - heuristic function and class signature extraction",
    no_args_is_help=True,
)

console = Console()


@app.command()
def extract(
    files: List[Path] = typer.Argument(..., help="Source files to scan"),
    config_root: Optional[Path] = typer.Option(
        None,
        "--config-root",
        help="Directory containing the .sigscan config file (default: current directory)",
    ),
    workers: int = typer.Option(1, "--workers", "-w", min=1, help="Files processed in parallel"),
):
    """Extract function, method and class signatures from source files.

    Prints a JSON array with one entry per file, sorted by path.

    Args:
        files: Source files to scan
        config_root: Directory containing .sigscan
        workers: Thread pool size
    """
    missing = [str(f) for f in files if not f.is_file()]
    if missing:
        typer.echo(f"Error: File not found: {', '.join(missing)}", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_extraction_config(config_root)
        results = extract_files(files, config=config, max_workers=workers)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    typer.echo(json.dumps([result.to_dict() for result in results], indent=2))


@app.command()
def languages():
    """List supported file extensions and the language each one is parsed as."""
    mapping = {ext: LANGUAGE_NAMES[extractor] for ext, extractor in sorted(EXTRACTORS.items())}
    typer.echo(json.dumps(mapping, indent=2))


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"sigscan version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    )):
    pass
