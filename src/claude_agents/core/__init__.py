"""Core constants, configuration, and exceptions."""

from claude_agents.core.config import AgentsConfig, SettingsConfig, ValidationConfig
from claude_agents.core.constants import ModelType
from claude_agents.core.exceptions import (
    AgentFileError,
    AgentsError,
    ConfigurationError,
    FormatError,
    NotFoundError,
    RuleViolation,
    SchemaError,
)

__all__ = [
    "ModelType",
    "AgentsConfig",
    "SettingsConfig",
    "ValidationConfig",
    "AgentsError",
    "AgentFileError",
    "ConfigurationError",
    "FormatError",
    "NotFoundError",
    "RuleViolation",
    "SchemaError",
]
