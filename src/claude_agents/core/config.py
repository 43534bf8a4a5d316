"""Agents directory configuration loading and validation."""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Self

from claude_agents.core.constants import (
    AGENTS_CONFIG_FILE,
    DEFAULT_MODEL,
    MAX_CONTENT_LENGTH,
    MIN_CONTENT_LENGTH,
    ModelType,
    get_default_agents_path,
)
from claude_agents.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class SettingsConfig:
    """Authoring settings."""

    default_model: str = DEFAULT_MODEL.value
    validate_on_save: bool = True
    auto_format: bool = True

    def __post_init__(self) -> None:
        if self.default_model not in {m.value for m in ModelType}:
            raise ValueError(f"default_model must be one of {[m.value for m in ModelType]}")


@dataclass(frozen=True)
class ValidationConfig:
    """Content length thresholds used by the validator."""

    min_content_length: int = MIN_CONTENT_LENGTH
    max_content_length: int = MAX_CONTENT_LENGTH


@dataclass(frozen=True)
class AgentsConfig:
    """Complete agents directory configuration."""

    version: str = "1.0.0"
    created: str | None = None
    author: str | None = None
    settings: SettingsConfig = field(default_factory=SettingsConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    @classmethod
    def create(cls, author: str | None = None) -> Self:
        """Create a fresh config stamped with the current time."""
        return cls(
            created=datetime.now(timezone.utc).isoformat(),
            author=author,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create config from dictionary."""
        return cls(
            version=data.get("version", "1.0.0"),
            created=data.get("created"),
            author=data.get("author"),
            settings=SettingsConfig(**data.get("settings", {})),
            validation=ValidationConfig(**data.get("validation", {})),
        )

    @staticmethod
    def config_path(agents_dir: Path | None = None) -> Path:
        """Path of the config file inside an agents directory."""
        return (agents_dir or get_default_agents_path()) / AGENTS_CONFIG_FILE

    @classmethod
    def load(cls, agents_dir: Path | None = None) -> Self:
        """Load configuration from file or use defaults."""
        config_path = cls.config_path(agents_dir)

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls.from_dict(data)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                details={"path": str(config_path)},
            ) from e
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(
                f"Invalid configuration values: {e}",
                details={"path": str(config_path)},
            ) from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "version": self.version,
            "created": self.created,
            "author": self.author,
            "settings": {
                "default_model": self.settings.default_model,
                "validate_on_save": self.settings.validate_on_save,
                "auto_format": self.settings.auto_format,
            },
            "validation": {
                "min_content_length": self.validation.min_content_length,
                "max_content_length": self.validation.max_content_length,
            },
        }

    def save(self, agents_dir: Path | None = None) -> Path:
        """Save configuration to file."""
        config_path = self.config_path(agents_dir)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        return config_path
