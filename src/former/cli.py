"""CLI interface for former using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from former import __description__, __version__
from former.config import FormerConfig, LogLevel, load_config
from former.dispatcher import MethodDispatcher
from former.exceptions import FormerError
from former.former import Former
from former.framework import Capability, available_frameworks, get_framework
from former.live_validation import LiveValidation, parse_rules, to_rules

app = typer.Typer(
    name="former",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

# Attributes every field carries, left out of rule reports
IDENTITY_ATTRIBUTES = ("name", "id")


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"former version {__version__}")
        raise typer.Exit()


def _setup_logging(config: FormerConfig) -> None:
    """Configure the root logger unless --verbose already did."""
    logging.basicConfig(level=LOG_LEVELS.get(config.logging.level, logging.WARNING))


def _load_config(config_path: Path | None) -> FormerConfig:
    try:
        former_config = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _setup_logging(former_config)
    return former_config


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log debug information")
    ] = False,
) -> None:
    """former - Fluent HTML form builder with live validation."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def rules(
    rules: Annotated[str, typer.Argument(help="Rules to apply, e.g. 'required|email|between:3,10'")],
    field_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Field method to apply the rules to (default: text)")
    ] = "text",
    format: Annotated[str, typer.Option("--format", "-f", help="Output format: table, json (default: table)")] = "table",
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .former.json)")
    ] = None,
) -> None:
    """Show the live validation attributes produced by validation rules."""
    valid_formats = ["table", "json"]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    former = Former(_load_config(config))
    rule_set = parse_rules(rules)
    supported = {rule.name for rule in to_rules(rule_set)}
    skipped = [name for name in rule_set if name not in supported]

    try:
        field = former.field(field_type, "field")
        LiveValidation(field).apply(rule_set)
    except (ValueError, FormerError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    attributes = {
        name: value for name, value in field.attributes.items()
        if name not in IDENTITY_ATTRIBUTES
    }
    max_size = getattr(field, "get_max_size_bytes", lambda: None)()
    if max_size is not None:
        attributes["MAX_FILE_SIZE"] = max_size

    if format == "json":
        print(jsonlib.dumps({
            "type": field.type,
            "attributes": attributes,
            "skipped": skipped
        }, indent=2, default=str))
        return

    table = Table(title="Live validation attributes", show_header=True, header_style="bold magenta")
    table.add_column("Attribute", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("type", field.type, end_section=True)
    for name, value in attributes.items():
        table.add_row(name, Text(str(value)))

    console.print(table)

    if skipped:
        console.print(f"[dim]Skipped rules without client-side equivalent: {', '.join(skipped)}[/dim]")


@app.command()
def resolve(
    name: Annotated[str, typer.Argument(help="Field method, e.g. 'checkboxes'")],
    repository: Annotated[
        Optional[list[str]],
        typer.Option("--repository", "-r", help="Namespace to search, repeatable (default: configured repositories)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .former.json)")
    ] = None,
) -> None:
    """Show the field builder class a method name resolves to."""
    former_config = _load_config(config)
    dispatcher = MethodDispatcher(repository if repository else former_config.fields_repositories)

    console.print(dispatcher.get_class_from_method(name), markup=False, highlight=False)


@app.command()
def render(
    method: Annotated[str, typer.Argument(help="Field method, e.g. 'email', 'select', 'checkboxes'")],
    name: Annotated[str, typer.Argument(help="Field name")],
    label: Annotated[Optional[str], typer.Option("--label", "-l", help="Label text")] = None,
    rules: Annotated[Optional[str], typer.Option("--rules", "-r", help="Validation rules, e.g. 'required|max:20'")] = None,
    framework: Annotated[Optional[str], typer.Option("--framework", "-f", help="Framework strategy to use")] = None,
    error: Annotated[Optional[str], typer.Option("--error", "-e", help="Error message to show on the field")] = None,
    help_text: Annotated[Optional[str], typer.Option("--help-text", help="Inline help text")] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .former.json)")
    ] = None,
) -> None:
    """Render a field with its group."""
    former_config = _load_config(config)

    try:
        former = Former(former_config, framework=framework)
        if rules:
            former.with_rules({name: rules})
        if error:
            former.with_errors({name: [error]})

        field = former.field(method, name, label)
        if help_text:
            field.help(help_text)

        markup = field.wrap_and_render()
    except (ValueError, FormerError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    print(markup)


@app.command()
def frameworks() -> None:
    """List the available framework strategies."""
    table = Table(title="Framework strategies", show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Group markup", justify="center")
    table.add_column("Block help", justify="center")
    table.add_column("Horizontal", justify="center")

    for name in available_frameworks():
        strategy = get_framework(name)
        table.add_row(
            name,
            *("yes" if strategy.supports(capability) else "no" for capability in (
                Capability.GROUP_MARKUP,
                Capability.BLOCK_HELP,
                Capability.HORIZONTAL,
            ))
        )

    console.print(table)
