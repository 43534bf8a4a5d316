"""Rule-based validation for agent records.

Validation never raises for rule failures: every finding is collected into
a ValidationResult. Rules run in a fixed order (shape, name, content,
description) so results are reproducible.
"""

import logging
import re
from typing import Any

from claude_agents.core.config import ValidationConfig
from claude_agents.core.constants import (
    ACTION_WORDS,
    DEFAULT_VERSION,
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    DESCRIPTION_MIN_WORDS,
    EXAMPLE_MARKER,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NAME_PATTERN,
    RESERVED_NAMES,
    SCHEMA_NAME_MAX_LENGTH,
    SCHEMA_NAME_MIN_LENGTH,
    SECTION_MARKER,
    ModelType,
)
from claude_agents.core.exceptions import RuleViolation, SchemaError
from claude_agents.models.agent import AgentExample, AgentMetadata, AgentRecord
from claude_agents.models.validation import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(NAME_PATTERN)
_INVALID_NAME_CHARS = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-{2,}")


class AgentValidator:
    """Validates agent metadata and content."""

    VALID_MODELS = tuple(m.value for m in ModelType)

    def __init__(self, config: ValidationConfig | None = None) -> None:
        """Initialize the validator.

        Args:
            config: Content length thresholds. Uses defaults if None.
        """
        self.config = config or ValidationConfig()

    def validate(self, metadata: AgentMetadata, content: Any) -> ValidationResult:
        """Validate metadata and content.

        Args:
            metadata: Agent header values, possibly ill-typed.
            content: Agent body.

        Returns:
            ValidationResult with ordered errors and warnings.
        """
        errors: list[ValidationError] = []
        warnings: list[ValidationWarning] = []

        errors.extend(self._validate_shape(metadata, content))

        if isinstance(metadata.name, str):
            errors.extend(self._validate_name(metadata.name))

        if isinstance(content, str):
            content_errors, content_warnings = self._validate_content(content)
            errors.extend(content_errors)
            warnings.extend(content_warnings)

        if isinstance(metadata.description, str):
            warnings.extend(self._validate_description(metadata.description))

        result = ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
        logger.debug(
            f"Validated agent {metadata.name!r}: "
            f"{len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result

    def validate_record(self, record: AgentRecord) -> ValidationResult:
        """Validate a complete record."""
        return self.validate(record.metadata, record.content)

    def validate_strict(self, record: AgentRecord) -> ValidationResult:
        """Validate a record and raise if it has errors.

        Raises:
            RuleViolation: If any rule produced an error.
        """
        result = self.validate_record(record)
        if not result.valid:
            raise RuleViolation(str(record.name or ""), result)
        return result

    def auto_fix(self, record: AgentRecord) -> AgentRecord:
        """Return a copy of the record with common issues repaired.

        Normalizes the name, fills a missing version, and trims the
        description and content. Model, tags and examples are untouched.

        Raises:
            SchemaError: If the name normalizes to an empty string.
        """
        name = sanitize_name("" if record.name is None else str(record.name))
        if not name:
            raise SchemaError(
                f"Name {record.name!r} cannot be normalized to a valid identifier",
                field="name",
                path=record.path,
            )

        overrides: dict[str, Any] = {"name": name}
        if not record.metadata.version:
            overrides["version"] = DEFAULT_VERSION
        if isinstance(record.description, str):
            overrides["description"] = record.description.strip()

        content = record.content.strip() if isinstance(record.content, str) else record.content
        return record.with_overrides(metadata=overrides, content=content)

    def _validate_shape(self, metadata: AgentMetadata, content: Any) -> list[ValidationError]:
        """Check field types, bounds and enum membership."""
        errors: list[ValidationError] = []

        errors.extend(
            _check_string(
                "name", metadata.name, SCHEMA_NAME_MIN_LENGTH, SCHEMA_NAME_MAX_LENGTH
            )
        )
        errors.extend(
            _check_string(
                "description",
                metadata.description,
                DESCRIPTION_MIN_LENGTH,
                DESCRIPTION_MAX_LENGTH,
            )
        )

        if metadata.model is None:
            errors.append(ValidationError("model", "Required"))
        elif metadata.model not in self.VALID_MODELS:
            expected = " | ".join(f"'{m}'" for m in self.VALID_MODELS)
            errors.append(ValidationError(
                "model",
                f"Invalid enum value. Expected {expected}, received '{metadata.model}'",
            ))

        for field_name in ("version", "author"):
            value = getattr(metadata, field_name)
            if value is not None and not isinstance(value, str):
                errors.append(ValidationError(field_name, _expected("string", value)))

        if not isinstance(metadata.tags, list):
            errors.append(ValidationError("tags", _expected("array", metadata.tags)))
        else:
            for i, tag in enumerate(metadata.tags):
                if not isinstance(tag, str):
                    errors.append(ValidationError(f"tags.{i}", _expected("string", tag)))

        if metadata.examples is not None:
            errors.extend(self._validate_examples(metadata.examples))

        if not isinstance(content, str):
            errors.append(ValidationError("content", _expected("string", content)))

        return errors

    def _validate_examples(self, examples: Any) -> list[ValidationError]:
        """Check that examples is a list of input/output string pairs."""
        if not isinstance(examples, list):
            return [ValidationError("examples", _expected("array", examples))]

        errors: list[ValidationError] = []
        for i, example in enumerate(examples):
            if not isinstance(example, AgentExample):
                errors.append(ValidationError(f"examples.{i}", _expected("object", example)))
                continue
            for key in ("input", "output"):
                value = getattr(example, key)
                if value is None:
                    errors.append(ValidationError(f"examples.{i}.{key}", "Required"))
                elif not isinstance(value, str):
                    errors.append(
                        ValidationError(f"examples.{i}.{key}", _expected("string", value))
                    )
        return errors

    def _validate_name(self, name: str) -> list[ValidationError]:
        """Apply naming rules. Each failing check adds its own error."""
        errors: list[ValidationError] = []

        if name.lower() in RESERVED_NAMES:
            errors.append(ValidationError(
                "name", f"Name '{name}' is reserved and cannot be used"
            ))

        if not _NAME_RE.match(name):
            errors.append(ValidationError(
                "name", "Name must contain only lowercase letters, numbers, and hyphens"
            ))

        if len(name) < NAME_MIN_LENGTH:
            errors.append(ValidationError(
                "name", f"Name must be at least {NAME_MIN_LENGTH} characters long"
            ))

        if len(name) > NAME_MAX_LENGTH:
            errors.append(ValidationError(
                "name", f"Name must not exceed {NAME_MAX_LENGTH} characters"
            ))

        return errors

    def _validate_content(
        self, content: str
    ) -> tuple[list[ValidationError], list[ValidationWarning]]:
        """Apply content length and structure rules."""
        errors: list[ValidationError] = []
        warnings: list[ValidationWarning] = []
        min_length = self.config.min_content_length
        max_length = self.config.max_content_length

        if len(content) < min_length:
            errors.append(ValidationError(
                "content", f"Content must be at least {min_length} characters"
            ))

        if len(content) > max_length:
            warnings.append(ValidationWarning(
                "content", f"Content exceeds recommended length of {max_length} characters"
            ))

        if SECTION_MARKER not in content:
            warnings.append(ValidationWarning(
                "content",
                "Content should include section headers (##) for better organization",
            ))

        if EXAMPLE_MARKER not in content.lower():
            warnings.append(ValidationWarning(
                "content", "Consider adding examples to help users understand the agent"
            ))

        return errors, warnings

    def _validate_description(self, description: str) -> list[ValidationWarning]:
        """Apply description quality rules."""
        warnings: list[ValidationWarning] = []

        if len(description.split(" ")) < DESCRIPTION_MIN_WORDS:
            warnings.append(ValidationWarning(
                "description", "Description is too short. Consider adding more detail"
            ))

        lowered = description.lower()
        if not any(word in lowered for word in ACTION_WORDS):
            warnings.append(ValidationWarning(
                "description",
                "Description should include action words to clarify agent capabilities",
            ))

        return warnings


def sanitize_name(name: str) -> str:
    """Normalize a free-form name into ``[a-z0-9-]`` form.

    >>> sanitize_name("My Agent!!")
    'my-agent'
    """
    name = _INVALID_NAME_CHARS.sub("-", name.lower())
    name = _HYPHEN_RUNS.sub("-", name)
    return name.strip("-")


def _check_string(field_name: str, value: Any, min_length: int, max_length: int) -> list[ValidationError]:
    if value is None:
        return [ValidationError(field_name, "Required")]
    if not isinstance(value, str):
        return [ValidationError(field_name, _expected("string", value))]
    if len(value) < min_length:
        return [ValidationError(
            field_name, f"String must contain at least {min_length} character(s)"
        )]
    if len(value) > max_length:
        return [ValidationError(
            field_name, f"String must contain at most {max_length} character(s)"
        )]
    return []


def _expected(kind: str, value: Any) -> str:
    return f"Expected {kind}, received {_type_name(value)}"


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, (dict, AgentExample)):
        return "object"
    return type(value).__name__
