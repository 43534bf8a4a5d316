"""Agent generation from templates."""

from claude_agents.generators.generator import AgentGenerator, substitute
from claude_agents.generators.templates import (
    DEFAULT_TEMPLATE,
    TEMPLATES,
    AgentTemplate,
    TemplateSection,
)

__all__ = [
    "AgentGenerator",
    "AgentTemplate",
    "DEFAULT_TEMPLATE",
    "TEMPLATES",
    "TemplateSection",
    "substitute",
]
