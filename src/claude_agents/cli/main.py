"""Main CLI entrypoint for claude-agents."""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from claude_agents.agents.collection import AgentCollection
from claude_agents.agents.parser import save_record, serialize_agent
from claude_agents.agents.validator import AgentValidator
from claude_agents.cli.deploy import deploy_command, sync_command
from claude_agents.cli.init import init_command
from claude_agents.cli.tester import agent_test_command
from claude_agents.cli.utils import check_model, exit_with_error, model_badge
from claude_agents.cli.validate import validate_command
from claude_agents.core.config import AgentsConfig
from claude_agents.core.constants import AGENT_FILE_EXTENSION
from claude_agents.core.exceptions import AgentsError
from claude_agents.generators.generator import AgentGenerator
from claude_agents.models.agent import AgentExample

console = Console()

PREVIEW_LENGTH = 200

# Create main app
app = typer.Typer(
    name="claude-agents",
    help="Create, validate, test and deploy Claude agent definitions",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
    claude_dir: Annotated[
        Optional[Path],
        typer.Option("--claude-dir", help="Claude root directory (default: ~/.claude)"),
    ] = None,
) -> None:
    """Manage Claude agent definition files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = {"claude_dir": claude_dir}


# Add subcommands
app.command("init")(init_command)
app.command("validate")(validate_command)
app.command("test")(agent_test_command)
app.command("deploy")(deploy_command)
app.command("sync")(sync_command)


@app.command("create")
def create_command(
    name: Annotated[str, typer.Argument(help="Agent name")],
    description: Annotated[
        Optional[str], typer.Option("--description", "-d", help="Agent description")
    ] = None,
    model: Annotated[
        Optional[str], typer.Option("--model", "-m", help="Model type (opus, sonnet, haiku)")
    ] = None,
    template: Annotated[
        Optional[str], typer.Option("--template", "-t", help="Template to use")
    ] = None,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Output directory")
    ] = None,
    examples: Annotated[
        Optional[list[str]],
        typer.Option("--example", "-e", help="Example interaction as 'input::output'"),
    ] = None,
) -> None:
    """Create a new agent from a template."""
    check_model(model)
    output_dir = output or Path.cwd()

    try:
        config = AgentsConfig.load(output_dir)
        generator = AgentGenerator(config)
        record = generator.generate(
            name,
            description=description,
            model=model,
            template_name=template,
            examples=[_parse_example(e) for e in examples or []],
        )

        if config.settings.validate_on_save:
            result = AgentValidator(config.validation).validate_record(record)
            if not result.valid:
                for error in result.errors:
                    console.print(f"  └─ {error}", style="red", markup=False, highlight=False)
                exit_with_error(f"Agent '{name}' is not valid")

        agent_path = output_dir / f"{name}{AGENT_FILE_EXTENSION}"
        record = save_record(record, agent_path)
    except (AgentsError, OSError) as e:
        exit_with_error(f"Failed to create agent: {e}")

    console.print(f"[green]Agent '{name}' created successfully![/green]", highlight=False)
    console.print(f"Location: {agent_path}", highlight=False)
    console.print()
    preview = serialize_agent(record)[:PREVIEW_LENGTH] + "..."
    console.print(Panel(Text(preview), title="Agent Preview", border_style="cyan"))


@app.command("templates")
def templates_command() -> None:
    """List available agent templates."""
    generator = AgentGenerator()

    table = Table(title="Agent Templates")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Tags", style="dim")

    for template_name in generator.list_templates():
        info = generator.get_template_info(template_name)
        table.add_row(info["name"], info["description"], ", ".join(info["tags"]))

    console.print(table)


@app.command("list")
def list_command(
    path: Annotated[
        Optional[Path], typer.Option("--path", "-p", help="Path to agents directory")
    ] = None,
    model: Annotated[
        Optional[str], typer.Option("--model", "-m", help="Filter by model type")
    ] = None,
    tags: Annotated[
        Optional[str], typer.Option("--tags", "-t", help="Filter by tags (comma-separated)")
    ] = None,
    search: Annotated[
        Optional[str], typer.Option("--search", "-s", help="Search name, description and tags")
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON")
    ] = False,
) -> None:
    """List available agents."""
    collection = AgentCollection(path)
    try:
        collection.load_all()
    except OSError as e:
        exit_with_error(f"Failed to list agents: {e}")

    # Filters combine; each narrows the names kept so far
    selected = {r.name for r in collection.get_all()}
    if model:
        selected &= {r.name for r in collection.filter_by_model(model)}
    if tags:
        wanted = [t.strip() for t in tags.split(",") if t.strip()]
        selected &= {r.name for r in collection.filter_by_tags(wanted)}
    if search:
        selected &= {r.name for r in collection.search(search)}
    records = [r for r in collection.get_all() if r.name in selected]

    if not records:
        console.print("[yellow]No agents found matching criteria[/yellow]")
        return

    if json_output:
        output = [
            {
                "name": r.name,
                "description": r.description,
                "model": r.model,
                "version": r.metadata.version,
                "tags": r.tags,
            }
            for r in records
        ]
        console.print(
            json.dumps(output, indent=2, default=str),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        return

    table = Table(title="Available Agents")
    table.add_column("Name", style="green")
    table.add_column("Description")
    table.add_column("Model")
    table.add_column("Tags", style="dim")

    for record in records:
        description = str(record.description or "")
        if len(description) > 50:
            description = description[:47] + "..."
        table.add_row(
            Text(str(record.name)),
            Text(description),
            model_badge(record.model),
            Text(", ".join(str(t) for t in record.tags)),
        )

    console.print(table)

    stats = collection.stats()
    by_model = ", ".join(f"{m} ({count})" for m, count in stats.by_model.items())
    console.print()
    console.print("[cyan]Statistics:[/cyan]")
    console.print(f"  Total agents: {stats.total}")
    console.print(f"  By model: {by_model}", highlight=False)


def _parse_example(value: str) -> AgentExample:
    """Parse an ``input::output`` example option."""
    if "::" not in value:
        raise typer.BadParameter(
            f"Example must look like 'input::output', got '{value}'",
            param_hint="--example",
        )
    example_input, example_output = value.split("::", 1)
    return AgentExample(input=example_input.strip(), output=example_output.strip())


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
