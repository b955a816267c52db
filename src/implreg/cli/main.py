"""CLI entry point for implreg.

Invoked as::

    implreg [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m implreg.cli.main

Commands
--------
version     Show version information
tables      List registered implementor tables
show        Print the fragments of a table
export      Write a table as JSON, YAML or a loader script
inspect     Load a JSON, YAML or loader-script file and summarize it
publish     Run the publish step against a simulated host
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from implreg.core.registry import ImplementorRegistry

console = Console()
err_console = Console(stderr=True)

_POLICY_CHOICES = ["last-write-wins", "merge-by-key"]


def _read_source(path: str) -> str:
    """Read a file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _load_table_or_exit(trait_path: str) -> "ImplementorRegistry":
    """Build a registered table, exiting with the known names on failure."""
    from implreg.plugins import PluginNotFoundError
    from implreg.tables import available_tables, load_table

    try:
        return load_table(trait_path)
    except PluginNotFoundError:
        err_console.print(f"[red]Error:[/red] No table registered for {trait_path!r}.")
        err_console.print(f"Available: {', '.join(available_tables()) or '(none)'}")
        sys.exit(1)


def _load_file_or_exit(path: str) -> "ImplementorRegistry":
    """Load a registry from a .js, .json, .yaml or .yml file."""
    from implreg.codec import (
        RegistryDocumentError,
        RegistrySerializer,
        ScriptFormatError,
        parse_script,
        trait_path_from_filename,
    )
    from implreg.core.registry import MalformedRegistryError

    source = _read_source(path)
    suffix = Path(path).suffix.lower()
    serializer = RegistrySerializer()
    try:
        if suffix == ".js":
            return parse_script(source, trait_path=trait_path_from_filename(path))
        if suffix in (".yaml", ".yml"):
            return serializer.from_yaml(source)
        return serializer.from_json(source)
    except (ScriptFormatError, RegistryDocumentError, MalformedRegistryError) as exc:
        err_console.print(f"[red]Cannot load[/red] {path}: {exc}")
        sys.exit(1)


def _summary_table(registry: "ImplementorRegistry", title: str) -> Table:
    table = Table(title=title)
    table.add_column("Library", style="bold", no_wrap=True)
    table.add_column("Fragments", justify="right")
    for library, fragments in registry.items():
        count = len(fragments)
        table.add_row(library, str(count) if count else "[dim]0[/dim]")
    return table


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="implreg")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Static trait-implementor tables and their load-time publish step."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from implreg import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]implreg[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# tables command
# ---------------------------------------------------------------------------


@cli.command(name="tables")
def tables_command() -> None:
    """List registered implementor tables, including entry-point plugins."""
    from implreg.tables import available_tables, load_table

    names = available_tables()
    if not names:
        console.print("(No tables registered.)")
        return

    table = Table(title="Implementor tables")
    table.add_column("Trait", style="bold")
    table.add_column("Libraries", justify="right")
    table.add_column("Fragments", justify="right")
    for name in names:
        registry = load_table(name)
        table.add_row(name, str(len(registry)), str(registry.fragment_count))
    console.print(table)


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("trait_path")
@click.option("--library", "-l", default=None, help="Only show this library")
def show_command(trait_path: str, library: str | None) -> None:
    """Print the fragments of a table.

    TRAIT_PATH is the trait the table belongs to, e.g. core::ops::SubAssign.
    """
    registry = _load_table_or_exit(trait_path)

    if library is not None:
        if library not in registry:
            err_console.print(f"[red]Error:[/red] {trait_path} has no library {library!r}.")
            sys.exit(1)
        libraries = [library]
    else:
        libraries = registry.libraries()

    table = Table(title=trait_path, show_lines=True)
    table.add_column("Library", style="bold", no_wrap=True)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Fragment")
    for name in libraries:
        fragments = registry[name]
        if not fragments:
            table.add_row(name, "", Text("(none)", style="dim"))
        for index, fragment in enumerate(fragments, start=1):
            table.add_row(name, str(index), Text(fragment))
    console.print(table)


# ---------------------------------------------------------------------------
# export command
# ---------------------------------------------------------------------------


@cli.command(name="export")
@click.argument("trait_path")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "script"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def export_command(trait_path: str, output_format: str, output: str | None) -> None:
    """Write a table as JSON, YAML or a rustdoc loader script.

    TRAIT_PATH is the trait the table belongs to.
    """
    from implreg.codec import RegistrySerializer, render_script

    registry = _load_table_or_exit(trait_path)
    output_format = output_format.lower()
    serializer = RegistrySerializer()

    if output_format == "json":
        text = serializer.to_json(registry) + "\n"
    elif output_format == "yaml":
        text = serializer.to_yaml(registry)
    else:
        text = render_script(registry)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Table written to[/green] {output}")
    else:
        click.echo(text, nl=False)


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


@cli.command(name="inspect")
@click.argument("file", type=click.Path(exists=False))
def inspect_command(file: str) -> None:
    """Load a registry file and summarize it.

    FILE may be a rustdoc loader script (.js), JSON or YAML.
    """
    registry = _load_file_or_exit(file)
    console.print(_summary_table(registry, file))
    if registry.trait_path:
        console.print(f"Trait: [bold]{registry.trait_path}[/bold]")
    console.print(
        f"\n[bold]{len(registry)}[/bold] librar{'y' if len(registry) == 1 else 'ies'}, "
        f"[bold]{registry.fragment_count}[/bold] fragment(s)"
    )


# ---------------------------------------------------------------------------
# publish command
# ---------------------------------------------------------------------------


@cli.command(name="publish")
@click.argument("trait_path")
@click.option(
    "--hook/--no-hook",
    default=False,
    help="Whether the simulated host has register_implementors installed",
)
@click.option(
    "--policy",
    type=click.Choice(_POLICY_CHOICES, case_sensitive=False),
    default="last-write-wins",
    help="How repeated buffered publications combine",
)
@click.option("--times", type=click.IntRange(min=1), default=1, help="Number of loads to simulate")
def publish_command(trait_path: str, hook: bool, policy: str, times: int) -> None:
    """Publish a table into a fresh simulated host and report the path taken.

    TRAIT_PATH is the trait the table belongs to.
    """
    from implreg.publish import HostEnvironment, PublicationOutcome, ReloadPolicy, publish_to_host

    registry = _load_table_or_exit(trait_path)
    received: list["ImplementorRegistry"] = []
    host = HostEnvironment(
        register_implementors=received.append if hook else None,
        reload_policy=ReloadPolicy(policy.lower()),
    )

    for _ in range(times):
        outcome = publish_to_host(registry, host)
        if outcome is PublicationOutcome.DELIVERED:
            console.print("[green]DELIVERED[/green] to register_implementors")
        else:
            console.print(f"[yellow]BUFFERED[/yellow] in {host.pending_implementors.name}")

    if hook:
        console.print(f"\nHook called [bold]{len(received)}[/bold] time(s)")
        return
    slot = host.pending_implementors
    console.print(_summary_table(slot.take(), f"{slot.name} ({host.reload_policy.value})"))


if __name__ == "__main__":
    cli()
