"""Shared helpers for CLI commands."""

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from claude_agents.core.constants import ModelType

err_console = Console(stderr=True)

MODEL_COLORS = {
    ModelType.OPUS.value: "magenta",
    ModelType.SONNET.value: "blue",
    ModelType.HAIKU.value: "green",
}


def exit_with_error(message: str) -> NoReturn:
    """Print an error on stderr and exit with status 1."""
    err_console.print(f"[red]Error: {escape(message)}[/red]", markup=True, highlight=False)
    raise typer.Exit(1)


def get_claude_dir(ctx: typer.Context) -> Optional[Path]:
    """Claude root set by the global ``--claude-dir`` option, if any."""
    if ctx.obj is None:
        return None
    return ctx.obj.get("claude_dir")


def model_badge(model: object) -> str:
    """Model name wrapped in its display color."""
    color = MODEL_COLORS.get(str(model), "dim")
    return f"[{color}]{model}[/{color}]"


def check_model(model: Optional[str]) -> None:
    """Exit with an error when ``model`` is not a known model tier."""
    if model is None:
        return
    valid = [m.value for m in ModelType]
    if model not in valid:
        exit_with_error(f"Invalid model '{model}'. Valid models: {', '.join(valid)}")
