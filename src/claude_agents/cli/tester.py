"""CLI command for smoke testing an agent."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from claude_agents.agents.parser import load_record
from claude_agents.cli.utils import exit_with_error
from claude_agents.core.exceptions import AgentsError
from claude_agents.testing.runner import AgentTester

console = Console()


def agent_test_command(
    agent_file: Annotated[Path, typer.Argument(help="Agent file path")],
    test_file: Annotated[
        Optional[Path], typer.Option("--test-file", "-t", help="YAML or JSON test cases")
    ] = None,
    write_template: Annotated[
        Optional[Path],
        typer.Option("--write-template", help="Write a starter test file and exit"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show agent output for each test")
    ] = False,
) -> None:
    """Test an agent with predefined test cases."""
    tester = AgentTester()

    if write_template is not None:
        try:
            tester.create_test_template(write_template)
        except OSError as e:
            exit_with_error(f"Cannot write test template: {e}")
        console.print(f"[green]Test template written to {write_template}[/green]", highlight=False)
        return

    try:
        record = load_record(agent_file)
        if test_file is not None:
            test_cases = tester.load_test_file(test_file)
        else:
            test_cases = tester.generate_default_tests(record)
    except (AgentsError, OSError) as e:
        exit_with_error(f"Test execution failed: {e}")

    console.print(f"Loaded agent: [bold]{record.name}[/bold]", highlight=False)

    if not test_cases:
        console.print("[yellow]No test cases found[/yellow]")
        return

    console.print(f"[cyan]Running {len(test_cases)} test(s)...[/cyan]")
    console.print()

    results = tester.run_tests(record, test_cases)

    for result in results:
        if result.passed:
            console.print(f"[green]✓ {result.test_case.name}[/green]", highlight=False)
        else:
            console.print(f"[red]✗ {result.test_case.name}[/red]", highlight=False)
            if result.error:
                console.print(f"  Error: {result.error}", style="red", markup=False, highlight=False)

        if verbose and result.output:
            console.print(f"  Output: {result.output}", style="dim", markup=False, highlight=False)
        console.print(f"  Duration: {result.duration_ms:.2f}ms", style="dim")

    passed = sum(1 for r in results if r.passed)
    failed = len(results) - passed
    average = sum(r.duration_ms for r in results) / len(results)

    console.print()
    console.print("[cyan]Test Summary:[/cyan]")
    console.print(f"  Total: {len(results)}")
    console.print(f"  [green]Passed: {passed}[/green]")
    if failed:
        console.print(f"  [red]Failed: {failed}[/red]")
    console.print(f"  Average duration: {average:.2f}ms")

    if failed:
        raise typer.Exit(1)

    console.print()
    console.print("[green]All tests passed![/green]")
