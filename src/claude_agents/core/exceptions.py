"""Claude Agents custom exception hierarchy."""

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from claude_agents.models.validation import ValidationResult


class AgentsError(Exception):
    """Base exception for all Claude Agents errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(AgentsError):
    """Raised when configuration is invalid or missing."""

    pass


class AgentFileError(AgentsError):
    """Base exception for agent file operations."""

    def __init__(
        self, message: str, path: Path | None = None, details: dict[str, Any] | None = None
    ) -> None:
        details = details or {}
        if path:
            details["path"] = str(path)
        super().__init__(message, details)
        self.path = path


class FormatError(AgentFileError):
    """Raised when the frontmatter delimiter structure or YAML is malformed."""

    pass


class SchemaError(AgentFileError):
    """Raised when agent metadata has the wrong shape."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        path: Path | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, path, details)
        self.field = field


class RuleViolation(AgentsError):
    """Raised by strict validation when an agent fails one or more rules."""

    def __init__(self, name: str, result: "ValidationResult") -> None:
        messages = "; ".join(f"{e.field}: {e.message}" for e in result.errors)
        super().__init__(
            f"Agent '{name or '<unnamed>'}' validation failed: {messages}",
            {"errors": len(result.errors), "warnings": len(result.warnings)},
        )
        self.name = name
        self.result = result


class NotFoundError(AgentsError):
    """Raised when a referenced agent or template does not exist."""

    def __init__(self, name: str, kind: str = "Agent") -> None:
        super().__init__(f"{kind} '{name}' not found")
        self.name = name
        self.kind = kind
