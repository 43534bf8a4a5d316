"""Agent file loader.

Reads agent definition files from an agents directory. Directory scans
are recursive and skip files that fail to load.
"""

import logging
from pathlib import Path
from typing import Optional

from claude_agents.agents.parser import load_record
from claude_agents.core.constants import (
    AGENT_FILE_EXTENSION,
    NESTED_AGENT_FILE,
    README_FILE,
    get_default_agents_path,
)
from claude_agents.core.exceptions import AgentFileError
from claude_agents.models.agent import AgentRecord

logger = logging.getLogger(__name__)


class AgentLoader:
    """Loader for agent definition files.

    Agent files are markdown documents with a YAML frontmatter header.
    An agent named ``foo`` may live at any of:
    - ``<agents_dir>/foo.md``
    - ``<agents_dir>/foo/agent.md``
    - ``<agents_dir>/foo/foo.md``
    """

    def __init__(self, agents_dir: Optional[Path] = None) -> None:
        """Initialize the loader.

        Args:
            agents_dir: Directory to resolve names against.
                Defaults to ~/.claude/agents.
        """
        self.agents_dir = agents_dir or get_default_agents_path()

    def load(self, path: Path) -> AgentRecord:
        """Load a single agent file.

        Raises:
            OSError: If the file cannot be read.
            AgentFileError: If the file is malformed.
        """
        return load_record(path)

    def load_all(self) -> list[AgentRecord]:
        """Load every agent under the configured directory."""
        return self.load_directory(self.agents_dir)

    def load_directory(self, directory: Path) -> list[AgentRecord]:
        """Load all agents from a directory tree.

        Files are visited in sorted path order. Files that cannot be read
        or parsed are logged and skipped.

        Args:
            directory: Directory to scan recursively for ``*.md`` files.

        Returns:
            List of loaded records.
        """
        records: list[AgentRecord] = []

        if not directory.is_dir():
            logger.debug(f"Agents directory does not exist: {directory}")
            return records

        for path in find_agent_files(directory):
            try:
                records.append(self.load(path))
            except (AgentFileError, OSError) as e:
                logger.warning(f"Failed to load agent from {path}: {e}")
                continue

        logger.debug(f"Loaded {len(records)} agents from {directory}")
        return records

    def candidate_paths(self, name: str) -> list[Path]:
        """Paths tried, in order, when resolving an agent by name."""
        return [
            self.agents_dir / f"{name}{AGENT_FILE_EXTENSION}",
            self.agents_dir / name / NESTED_AGENT_FILE,
            self.agents_dir / name / f"{name}{AGENT_FILE_EXTENSION}",
        ]

    def load_by_name(self, name: str) -> Optional[AgentRecord]:
        """Load an agent by name.

        Returns:
            The first candidate path that loads successfully, or None.
        """
        for path in self.candidate_paths(name):
            if not path.is_file():
                continue
            try:
                return self.load(path)
            except (AgentFileError, OSError) as e:
                logger.warning(f"Failed to load agent from {path}: {e}")

        return None

    def agent_path(self, name: str) -> Path:
        """Canonical file path for a new agent."""
        return self.agents_dir / f"{name}{AGENT_FILE_EXTENSION}"

    def exists(self, name: str) -> bool:
        """Check whether an agent with this name can be loaded."""
        return self.load_by_name(name) is not None


def find_agent_files(directory: Path) -> list[Path]:
    """Agent files under a directory, recursively, in sorted order.

    README files are not agents and are left out.
    """
    return sorted(
        path
        for path in directory.rglob(f"*{AGENT_FILE_EXTENSION}")
        if path.is_file() and path.name.lower() != README_FILE.lower()
    )
