"""Validation result models."""

from dataclasses import dataclass, field
from typing import Any, Literal


@dataclass(frozen=True)
class ValidationError:
    """A rule failure that blocks acceptance."""

    field: str
    message: str
    severity: Literal["error"] = "error"

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass(frozen=True)
class ValidationWarning:
    """A rule finding that never blocks acceptance."""

    field: str
    message: str
    severity: Literal["warning"] = "warning"

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating an agent.

    Attributes:
        errors: Ordered errors; any error makes the result invalid.
        warnings: Ordered warnings.
    """

    errors: tuple[ValidationError, ...] = field(default_factory=tuple)
    warnings: tuple[ValidationWarning, ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        """True when there are no errors."""
        return not self.errors

    @classmethod
    def failure(cls, field_name: str, message: str) -> "ValidationResult":
        """Build an invalid result with a single error."""
        return cls(errors=(ValidationError(field_name, message),))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "valid": self.valid,
            "errors": [{"field": e.field, "message": e.message} for e in self.errors],
            "warnings": [{"field": w.field, "message": w.message} for w in self.warnings],
        }
