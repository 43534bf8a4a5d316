"""CLI command for validating agent files."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from claude_agents.agents.loader import find_agent_files
from claude_agents.agents.parser import load_record, save_record
from claude_agents.agents.validator import AgentValidator
from claude_agents.cli.utils import exit_with_error
from claude_agents.core.config import AgentsConfig
from claude_agents.core.exceptions import AgentsError

console = Console()


def validate_command(
    path: Annotated[Path, typer.Argument(help="Agent file or directory")],
    strict: Annotated[
        bool, typer.Option("--strict", "-s", help="Treat warnings as failures")
    ] = False,
    fix: Annotated[
        bool, typer.Option("--fix", "-f", help="Auto-fix common issues and rewrite files")
    ] = False,
) -> None:
    """Validate agent files."""
    if not path.exists():
        exit_with_error(f"Path not found: {path}")

    root = path if path.is_dir() else path.parent
    files = find_agent_files(path) if path.is_dir() else [path]
    if not files:
        exit_with_error("No agent files found")

    try:
        config = AgentsConfig.load(root)
    except AgentsError as e:
        exit_with_error(str(e))

    validator = AgentValidator(config.validation)
    console.print(f"[cyan]Validating {len(files)} agent(s)...[/cyan]")
    console.print()

    failed = False
    total_errors = 0
    total_warnings = 0

    for file_path in files:
        try:
            record = load_record(file_path)
            if fix:
                record = save_record(validator.auto_fix(record), file_path)
            result = validator.validate_record(record)
        except (AgentsError, OSError) as e:
            console.print(f"[red]✗ {escape(str(file_path))}[/red]", highlight=False)
            console.print(f"  └─ {e}", style="red", markup=False, highlight=False)
            failed = True
            total_errors += 1
            continue

        total_errors += len(result.errors)
        total_warnings += len(result.warnings)

        if not result.valid:
            console.print(
                f"[red]✗ {escape(str(file_path))} ({len(result.errors)} errors)[/red]",
                highlight=False,
            )
            failed = True
        elif result.warnings:
            console.print(
                f"[yellow]⚠ {escape(str(file_path))} ({len(result.warnings)} warnings)[/yellow]",
                highlight=False,
            )
            if strict:
                failed = True
        else:
            console.print(f"[green]✓ {escape(str(file_path))}[/green]", highlight=False)

        for error in result.errors:
            console.print(f"  └─ {error}", style="red", markup=False, highlight=False)
        for warning in result.warnings:
            console.print(f"  └─ {warning}", style="yellow", markup=False, highlight=False)

    console.print()
    console.print("[cyan]Validation Summary:[/cyan]")
    console.print(f"  Files validated: {len(files)}")
    if total_errors:
        console.print(f"  [red]Errors: {total_errors}[/red]")
    if total_warnings:
        console.print(f"  [yellow]Warnings: {total_warnings}[/yellow]")
    if not failed and not total_warnings:
        console.print("  [green]All agents are valid![/green]")

    if failed:
        raise typer.Exit(1)
