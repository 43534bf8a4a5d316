"""Name-keyed collection of agent records.

The collection is an explicit object: callers create one, load it, and
pass it around. Adds and updates go through the validator and only
mutate the collection when the result is valid.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional

from claude_agents.agents.loader import AgentLoader
from claude_agents.agents.parser import save_record
from claude_agents.agents.validator import AgentValidator
from claude_agents.core.constants import AGENT_FILE_EXTENSION
from claude_agents.core.exceptions import NotFoundError
from claude_agents.models.agent import AgentRecord
from claude_agents.models.validation import ValidationResult

logger = logging.getLogger(__name__)


@dataclass
class CollectionStats:
    """Statistics about a collection.

    Attributes:
        total: Number of records.
        by_model: Record count per model.
        by_tag: Record count per tag.
    """

    total: int = 0
    by_model: dict[str, int] = field(default_factory=dict)
    by_tag: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "total": self.total,
            "by_model": dict(self.by_model),
            "by_tag": dict(self.by_tag),
        }


class AgentCollection:
    """In-memory collection of agents keyed by name."""

    def __init__(
        self,
        agents_dir: Optional[Path] = None,
        validator: Optional[AgentValidator] = None,
        loader: Optional[AgentLoader] = None,
    ) -> None:
        """Initialize an empty collection.

        Args:
            agents_dir: Directory used by ``load_all`` when none is given.
            validator: Validator for add and update. Uses defaults if None.
            loader: Loader for reading files. Built from agents_dir if None.
        """
        self._loader = loader or AgentLoader(agents_dir)
        self._validator = validator or AgentValidator()
        self._agents: dict[str, AgentRecord] = {}

    @property
    def agents_dir(self) -> Path:
        """Default directory for loading."""
        return self._loader.agents_dir

    def __len__(self) -> int:
        return len(self._agents)

    def __contains__(self, name: object) -> bool:
        return name in self._agents

    # === Loading ===

    def load_all(self, directory: Optional[Path] = None) -> list[AgentRecord]:
        """Replace the collection with every agent found in a directory.

        Loaded records are not validated. When two files share a name the
        later one in path order wins.

        Args:
            directory: Directory to scan. Defaults to ``agents_dir``.

        Returns:
            Records now held by the collection.
        """
        self._agents.clear()

        for record in self._loader.load_directory(directory or self.agents_dir):
            if not isinstance(record.name, str) or not record.name:
                logger.warning(f"Skipping agent without a usable name: {record.path}")
                continue
            if record.name in self._agents:
                logger.debug(f"Agent '{record.name}' at {record.path} replaces earlier file")
            self._agents[record.name] = record

        return self.get_all()

    # === Lookup ===

    def get_by_name(self, name: str) -> Optional[AgentRecord]:
        """Get an agent by name, or None."""
        return self._agents.get(name)

    def require(self, name: str) -> AgentRecord:
        """Get an agent by name.

        Raises:
            NotFoundError: If no agent has this name.
        """
        record = self._agents.get(name)
        if record is None:
            raise NotFoundError(name)
        return record

    def get_all(self) -> list[AgentRecord]:
        """All records in insertion order."""
        return list(self._agents.values())

    def search(self, query: str) -> list[AgentRecord]:
        """Find agents whose name, description or tags contain the query.

        Matching is case-insensitive.
        """
        query_lower = query.lower()
        results: list[AgentRecord] = []

        for record in self._agents.values():
            if query_lower in str(record.name).lower():
                results.append(record)
            elif query_lower in str(record.description or "").lower():
                results.append(record)
            elif any(query_lower in str(tag).lower() for tag in record.tags):
                results.append(record)

        return results

    def filter_by_model(self, model: str) -> list[AgentRecord]:
        """Agents using the given model."""
        return [r for r in self._agents.values() if r.model == model]

    def filter_by_tags(self, tags: Iterable[str]) -> list[AgentRecord]:
        """Agents carrying at least one of the given tags."""
        wanted = set(tags)
        return [
            r
            for r in self._agents.values()
            if any(tag in wanted for tag in r.tags if isinstance(tag, str))
        ]

    # === Mutation ===

    def add(self, record: AgentRecord) -> ValidationResult:
        """Validate and add a record.

        The record is stored only when valid. If it has a path, it is also
        written to disk. An existing agent with the same name is replaced.

        Returns:
            The validation result.
        """
        result = self._validator.validate_record(record)
        if not result.valid:
            logger.debug(f"Rejected agent {record.name!r}: {len(result.errors)} errors")
            return result

        if record.path is not None:
            record = save_record(record, record.path)
        self._agents[record.name] = record
        return result

    def update(
        self,
        name: str,
        metadata: Optional[dict[str, Any]] = None,
        content: Optional[str] = None,
    ) -> ValidationResult:
        """Merge changes into an existing agent.

        Metadata fields are merged shallowly; content is replaced if given.
        The collection and the file on disk change only when the merged
        record is valid. A rename re-keys the record under its new name.

        Raises:
            NotFoundError: If no agent has this name.
        """
        existing = self.require(name)
        updated = existing.with_overrides(metadata=metadata, content=content)

        result = self._validator.validate_record(updated)
        if not result.valid:
            return result

        if updated.path is not None:
            updated = save_record(updated, updated.path)
        if updated.name != name:
            del self._agents[name]
        self._agents[updated.name] = updated
        return result

    def remove(self, name: str) -> bool:
        """Remove an agent from the collection. Files are left in place.

        Returns:
            True if the agent was present.
        """
        return self._agents.pop(name, None) is not None

    # === Bulk operations ===

    def validate_all(self) -> dict[str, ValidationResult]:
        """Validate every record."""
        return {
            name: self._validator.validate_record(record)
            for name, record in self._agents.items()
        }

    def export(self, output_dir: Path, names: Optional[Iterable[str]] = None) -> list[Path]:
        """Write agents to ``<output_dir>/<name>.md``.

        Args:
            output_dir: Destination directory, created if missing.
            names: Agents to export. Unknown names are skipped. All if None.

        Returns:
            Paths written.
        """
        if names is None:
            records = self.get_all()
        else:
            records = []
            for name in names:
                record = self._agents.get(name)
                if record is None:
                    logger.warning(f"Cannot export unknown agent '{name}'")
                    continue
                records.append(record)

        written: list[Path] = []
        for record in records:
            path = output_dir / f"{record.name}{AGENT_FILE_EXTENSION}"
            save_record(record, path)
            written.append(path)

        return written

    def stats(self) -> CollectionStats:
        """Count agents in total, per model and per tag."""
        by_model: Counter[str] = Counter()
        by_tag: Counter[str] = Counter()

        for record in self._agents.values():
            by_model[str(record.model)] += 1
            for tag in record.tags:
                by_tag[str(tag)] += 1

        return CollectionStats(
            total=len(self._agents),
            by_model=dict(by_model),
            by_tag=dict(by_tag),
        )
