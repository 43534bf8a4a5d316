"""CLI command for initializing an agents directory."""

import os
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from claude_agents import __version__
from claude_agents.cli.utils import exit_with_error
from claude_agents.core.config import AgentsConfig
from claude_agents.core.constants import (
    DEFAULT_AUTHOR,
    EXAMPLE_AGENT_FILE,
    EXAMPLES_DIR,
    GITIGNORE_FILE,
    README_FILE,
    get_default_agents_path,
)

console = Console()

README_TEMPLATE = """# Claude Agents

This directory contains specialized AI agents for Claude.

## Structure

```
agents/
├── config.json       # Configuration file
├── examples/         # Example agents
└── *.md              # Your custom agents
```

## Creating Agents

Use the CLI to create new agents:

```bash
claude-agents create my-agent
```

## Validating Agents

```bash
claude-agents validate .
```

Created with claude-agents v{version}
"""

EXAMPLE_AGENT = """---
name: example-agent
description: An example agent showing the structure and capabilities
model: sonnet
version: 1.0.0
tags: [example, demo]
---

You are an example agent demonstrating the Claude agents file format.

## Capabilities

- Show users how to structure agent files
- Explain best practices
- Provide helpful examples

## Guidelines

1. Be clear and concise
2. Use examples to illustrate points
3. Follow the framework conventions

## Example Usage

When users ask about creating agents, provide clear examples:

```markdown
---
name: my-specialist
description: Specialized in specific domain
model: sonnet
---

You are a specialist in [domain]...
```

Remember: Good agents are focused, well-documented, and easy to understand.
"""

GITIGNORE = """# Claude Agents
*.log
*.tmp
.DS_Store
"""


def init_command(
    path: Annotated[
        Optional[Path], typer.Option("--path", "-p", help="Custom path for agents")
    ] = None,
    global_: Annotated[
        bool, typer.Option("--global", "-g", help="Initialize in ~/.claude/agents")
    ] = False,
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite existing files")
    ] = False,
) -> None:
    """Initialize an agents directory."""
    if path is not None and global_:
        exit_with_error("Use either --path or --global, not both")

    if path is not None:
        target = path.resolve()
    elif global_:
        target = get_default_agents_path()
    else:
        target = Path("agents").resolve()

    config = AgentsConfig.create(author=os.environ.get("USER") or DEFAULT_AUTHOR)
    files = {
        target / README_FILE: README_TEMPLATE.format(version=__version__),
        target / EXAMPLES_DIR / EXAMPLE_AGENT_FILE: EXAMPLE_AGENT,
        target / GITIGNORE_FILE: GITIGNORE,
    }

    try:
        (target / EXAMPLES_DIR).mkdir(parents=True, exist_ok=True)

        if force or not config.config_path(target).exists():
            config.save(target)
        else:
            console.print(f"[yellow]Keeping existing config in {target}[/yellow]")

        for file_path, content in files.items():
            if file_path.exists() and not force:
                console.print(f"[yellow]Skipping existing {file_path.name}[/yellow]")
                continue
            file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        exit_with_error(f"Initialization failed: {e}")

    console.print("[green]Claude agents initialized successfully![/green]")
    console.print(f"Location: {target}", highlight=False)
    console.print()
    console.print("[cyan]Next steps:[/cyan]")
    console.print("1. Create your first agent:")
    console.print("   claude-agents create my-first-agent", highlight=False)
    console.print("2. Validate your agents:")
    console.print(f"   claude-agents validate {target}", highlight=False)
