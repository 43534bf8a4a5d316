"""CLI commands for deploying agents to the local Claude directory."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from claude_agents.agents.collection import AgentCollection
from claude_agents.cli.utils import exit_with_error, get_claude_dir, model_badge
from claude_agents.core.exceptions import AgentsError
from claude_agents.integrations.claude import ClaudeIntegration, DeploymentStatus

console = Console()


def deploy_command(
    ctx: typer.Context,
    names: Annotated[
        Optional[list[str]],
        typer.Argument(help="Agents to deploy (all if not specified)"),
    ] = None,
    path: Annotated[
        Optional[Path], typer.Option("--path", "-p", help="Path to agents directory")
    ] = None,
    status: Annotated[
        bool, typer.Option("--status", "-s", help="Show integration status")
    ] = False,
) -> None:
    """Deploy agents to the Claude agents directory."""
    integration = ClaudeIntegration(get_claude_dir(ctx))

    if status:
        _print_status(integration.status())
        return

    if not integration.is_installed():
        console.print(
            f"[yellow]Claude directory not found at {integration.claude_dir}, creating it[/yellow]",
            highlight=False,
        )

    collection = AgentCollection(path)
    try:
        collection.load_all()
    except OSError as e:
        exit_with_error(f"Cannot load agents: {e}")

    if names:
        records = []
        for name in names:
            record = collection.get_by_name(name)
            if record is None:
                console.print(f"[yellow]Agent '{name}' not found[/yellow]", highlight=False)
                continue
            records.append(record)
    else:
        records = collection.get_all()

    if not records:
        exit_with_error("No agents to deploy")

    try:
        integration.deploy(records)
    except (AgentsError, OSError) as e:
        exit_with_error(f"Deployment failed: {e}")

    console.print(f"[green]Deployed {len(records)} agent(s) to {integration.agents_path}[/green]", highlight=False)
    for record in records:
        console.print(f"  [green]•[/green] {record.name} ({model_badge(record.model)})", highlight=False)
    console.print("[cyan]Restart Claude to load the new agents[/cyan]")


def sync_command(
    ctx: typer.Context,
    path: Annotated[
        Optional[Path], typer.Option("--path", "-p", help="Path to agents directory")
    ] = None,
    pull: Annotated[
        bool, typer.Option("--pull", help="Pull agents from the Claude directory")
    ] = False,
) -> None:
    """Sync local agents with the Claude agents directory."""
    integration = ClaudeIntegration(get_claude_dir(ctx))

    if pull:
        console.print("[yellow]Pull is not supported yet[/yellow]")
        console.print(
            f"Copy files manually: cp {integration.agents_path}/*.md <your-path>",
            highlight=False,
            markup=False,
        )
        return

    collection = AgentCollection(path)
    try:
        collection.load_all()
        integration.sync(collection)
    except (AgentsError, OSError) as e:
        exit_with_error(f"Sync failed: {e}")

    stats = collection.stats()
    console.print("[green]Sync completed![/green]")
    console.print(f"  Total agents: {stats.total}")
    console.print(f"  Location: {integration.agents_path}", highlight=False)
    for model, count in stats.by_model.items():
        console.print(f"  • {model_badge(model)}: {count}")


def _print_status(status: DeploymentStatus) -> None:
    yes, no = "[green]✓ Yes[/green]", "[red]✗ No[/red]"
    console.print("[cyan]Claude Integration Status[/cyan]")
    console.print(f"Installed: {yes if status.installed else no}")
    console.print(f"Config exists: {yes if status.config_exists else no}")
    console.print(f"Agents path: {status.agents_path}", highlight=False)

    if status.deployed_agents:
        console.print(f"Deployed agents ({len(status.deployed_agents)}):")
        for name in status.deployed_agents:
            console.print(f"  [green]•[/green] {name}", highlight=False)
    else:
        console.print("[yellow]No agents deployed yet[/yellow]")
