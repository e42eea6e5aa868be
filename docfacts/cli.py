"""CLI entry point for Docfacts."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from docfacts.core.config import (
    DocfactsConfig,
    load_config,
    render_config,
    resolve_config_path,
)
from docfacts.core.exceptions import DocfactsError
from docfacts.core.extractor import DeclarationExtractor
from docfacts.core.models import DeclarationFacts, DeclarationKind

app = typer.Typer(
    name="docfacts",
    help="Extract documentation facts from C# declarations.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

_MAX_MESSAGE_DISPLAY = 60
_CALLABLE_KINDS = (DeclarationKind.METHOD, DeclarationKind.CONSTRUCTOR)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def get_config(config_path: str | None) -> DocfactsConfig:
    """Load the config from --config, the environment, or defaults."""
    try:
        return load_config(resolve_config_path(config_path))
    except DocfactsError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def format_signature(facts: DeclarationFacts) -> str:
    """Format a declaration as `Name{T}(a, b)`."""
    signature = facts.signature
    text = f"[cyan]{escape(signature.identifier)}[/cyan]"
    if signature.type_parameters and facts.kind != DeclarationKind.CONSTRUCTOR:
        text += escape("{" + ",".join(signature.type_parameters) + "}")
    if signature.parameters or facts.kind in _CALLABLE_KINDS:
        text += escape(f"({', '.join(signature.parameters)})")
    return text


def print_facts(facts: DeclarationFacts, base: Path) -> None:
    """Print one declaration in human-readable form."""
    location = facts.file or Path("<snippet>")
    try:
        rel_path: Path | str = location.relative_to(base)
    except ValueError:
        rel_path = location.name

    documented = " [green](documented)[/]" if facts.is_documented else ""
    console.print(
        f"\n[bold]{facts.kind.value}[/] {format_signature(facts)}{documented} "
        f"[dim]{rel_path}:{facts.line}[/]"
    )

    if facts.signature.base_types:
        console.print(f"  [dim]bases:[/] {escape(', '.join(facts.signature.base_types))}")
    for exception in facts.exceptions:
        message = exception.message
        if len(message) > _MAX_MESSAGE_DISPLAY:
            message = message[: _MAX_MESSAGE_DISPLAY - 3] + "..."
        suffix = f" [dim]{escape(repr(message))}[/]" if message else ""
        console.print(f"  [red]throws[/] {escape(exception.spelled_type)}{suffix}")
    for identifier in facts.body.returns:
        console.print(f"  [green]returns[/] {escape(identifier)}")
    for comment in facts.body.comments:
        console.print(f"  [yellow]//[/] {escape(comment)}")


@app.command()
def extract(
    path: Annotated[Path, typer.Argument(help="C# file or directory")] = Path("."),
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to a JSON config file")
    ] = None,
    exclude: Annotated[
        list[str] | None, typer.Option("--exclude", "-e", help="Patterns to exclude")
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose logging")] = False,
) -> None:
    """Extract documentation facts for every declaration."""
    configure_logging(verbose)
    path = path.resolve()
    extractor = DeclarationExtractor(get_config(config))

    if path.is_file():
        try:
            results = extractor.extract_file(path)
        except DocfactsError as e:
            err_console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(code=1) from e
        errors: list[str] = []
        base = path.parent
    elif path.is_dir():
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=err_console,
            transient=True,
        ) as progress:
            task = progress.add_task(f"Scanning [cyan]{path.name}[/]", total=None)

            def on_progress(file: Path, current: int, total: int) -> None:
                progress.update(task, total=total, completed=current)
                progress.update(task, description=f"[cyan]{file.name}[/]")

            results, stats = extractor.extract_directory(
                path, exclude_patterns=exclude or [], on_progress=on_progress
            )
        errors = stats.errors
        base = path
    else:
        err_console.print(f"[red]No such file or directory: {escape(str(path))}[/red]")
        raise typer.Exit(code=1)

    if output_json:
        print(json.dumps({"declarations": [f.to_dict() for f in results], "errors": errors}))
        return

    if not results:
        console.print("No declarations found")
    for facts in results:
        print_facts(facts, base)

    if errors:
        console.print(f"\n[red]Errors: {len(errors)}[/red]")
        for error in errors:
            console.print(f"  {escape(error)}")


@app.command("config")
def show_config(
    default: Annotated[
        bool, typer.Option("--default", "-d", help="Print the default configuration")
    ] = False,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to a JSON config file")
    ] = None,
) -> None:
    """Print the current (or default) configuration as JSON."""
    current = DocfactsConfig() if default else get_config(config)
    print(render_config(current), end="")


if __name__ == "__main__":
    app()
