"""Data models for agent records, validation results, and smoke tests."""

from claude_agents.models.agent import AgentExample, AgentMetadata, AgentRecord
from claude_agents.models.testing import AgentTestCase, AgentTestResult
from claude_agents.models.validation import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

__all__ = [
    "AgentExample",
    "AgentMetadata",
    "AgentRecord",
    "AgentTestCase",
    "AgentTestResult",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
