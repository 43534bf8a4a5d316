"""Claude Agents - manage agent definition files for Claude.

Agents are markdown files with a YAML frontmatter header. This package
creates them from templates, validates them, runs static smoke tests
and deploys them into ~/.claude/agents.
"""

__version__ = "0.1.0"

from claude_agents.core import (
    AgentsConfig,
    AgentsError,
    ModelType,
)

__all__ = [
    "__version__",
    # Core enum
    "ModelType",
    # Config
    "AgentsConfig",
    # Base exception
    "AgentsError",
]
