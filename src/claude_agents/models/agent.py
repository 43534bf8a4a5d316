"""Agent data models.

This module defines the value objects for an agent definition file:
- AgentExample: an input/output pair shown to users
- AgentMetadata: the frontmatter header block
- AgentRecord: metadata plus the markdown body

Records are immutable. Changes are made by building a new record with
``with_overrides``.
"""

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from claude_agents.core.constants import METADATA_FIELDS
from claude_agents.core.exceptions import SchemaError


@dataclass(frozen=True)
class AgentExample:
    """An example interaction.

    Attributes:
        input: What the user says.
        output: What the agent is expected to answer.
    """

    input: Any
    output: Any

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {"input": self.input, "output": self.output}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AgentExample":
        """Create AgentExample from dictionary."""
        return cls(input=data.get("input"), output=data.get("output"))


@dataclass(frozen=True)
class AgentMetadata:
    """Frontmatter metadata of an agent.

    Values are stored as read from the header so the validator can report
    type problems; nothing is coerced here.

    Attributes:
        name: Unique agent identifier (lowercase, digits, hyphens).
        description: What the agent does.
        model: Model tier, one of ``ModelType`` values.
        version: Agent version, None when absent.
        author: Optional author name.
        tags: Free-form tags used for search and filtering.
        examples: Optional example interactions.
    """

    name: Any = ""
    description: Any = ""
    model: Any = ""
    version: Optional[Any] = None
    author: Optional[Any] = None
    tags: Any = field(default_factory=list)
    examples: Optional[Any] = None

    def __post_init__(self) -> None:
        # Store enum members as plain values
        if isinstance(self.model, Enum):
            object.__setattr__(self, "model", self.model.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to an ordered dictionary, omitting absent optional fields."""
        data: dict[str, Any] = {}
        for name in METADATA_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if name == "examples" and isinstance(value, list):
                value = [
                    e.to_dict() if isinstance(e, AgentExample) else e for e in value
                ]
            data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AgentMetadata":
        """Create AgentMetadata from a parsed header mapping.

        Unknown keys are ignored.
        """
        tags = data.get("tags")
        return cls(
            name=data.get("name"),
            description=data.get("description"),
            model=data.get("model"),
            version=data.get("version"),
            author=data.get("author"),
            tags=[] if tags is None else tags,
            examples=_coerce_examples(data.get("examples")),
        )

    def with_overrides(self, **overrides: Any) -> "AgentMetadata":
        """Return a copy with the given fields replaced.

        Sequence fields are replaced wholesale.
        """
        unknown = set(overrides) - set(METADATA_FIELDS)
        if unknown:
            name = sorted(unknown)[0]
            raise SchemaError(f"Unknown metadata field: {name}", field=name)
        if "examples" in overrides:
            overrides["examples"] = _coerce_examples(overrides["examples"])
        return dataclasses.replace(self, **overrides)


@dataclass(frozen=True)
class AgentRecord:
    """A complete agent definition.

    Attributes:
        metadata: The frontmatter header.
        content: The markdown instructions body.
        path: Where the record was loaded from or saved to, if anywhere.
    """

    metadata: AgentMetadata
    content: Any = ""
    path: Optional[Path] = field(default=None, compare=False)

    @property
    def name(self) -> Any:
        """Agent name."""
        return self.metadata.name

    @property
    def description(self) -> Any:
        """Agent description."""
        return self.metadata.description

    @property
    def model(self) -> Any:
        """Agent model tier."""
        return self.metadata.model

    @property
    def tags(self) -> list[str]:
        """Agent tags, empty when the header holds something else."""
        tags = self.metadata.tags
        return list(tags) if isinstance(tags, list) else []

    def with_overrides(
        self,
        metadata: Optional[dict[str, Any]] = None,
        content: Optional[str] = None,
        path: Optional[Path] = None,
    ) -> "AgentRecord":
        """Return a new record merging metadata fields and replacing content."""
        new_metadata = self.metadata.with_overrides(**metadata) if metadata else self.metadata
        return AgentRecord(
            metadata=new_metadata,
            content=self.content if content is None else content,
            path=self.path if path is None else path,
        )

    def summary(self) -> dict[str, Any]:
        """Short form used by listings and the deployment manifest."""
        return {
            "name": self.name,
            "model": self.model,
            "description": self.description,
        }


def _coerce_examples(value: Any) -> Any:
    """Turn example mappings into AgentExample objects, leaving the rest alone."""
    if not isinstance(value, list):
        return value
    return [
        AgentExample.from_dict(item) if isinstance(item, dict) else item
        for item in value
    ]
