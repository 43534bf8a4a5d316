"""Deployment of agents into the local Claude directory.

Deploying writes each agent to ``<claude_dir>/agents/<name>.md`` and
records the deployed set under the ``agents`` key of
``<claude_dir>/config.json``. Other keys in that document are preserved.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

from claude_agents.agents.collection import AgentCollection
from claude_agents.agents.parser import save_record
from claude_agents.core.constants import (
    AGENT_FILE_EXTENSION,
    AGENTS_DIR,
    get_claude_config_path,
    get_claude_root,
)
from claude_agents.models.agent import AgentRecord

logger = logging.getLogger(__name__)


@dataclass
class DeploymentStatus:
    """Snapshot of the local Claude integration.

    Attributes:
        installed: Whether the Claude directory exists.
        agents_path: Directory agents are deployed to.
        deployed_agents: Names of deployed agent files.
        config_exists: Whether the Claude config file exists.
    """

    installed: bool
    agents_path: Path
    deployed_agents: list[str] = field(default_factory=list)
    config_exists: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "installed": self.installed,
            "agents_path": str(self.agents_path),
            "deployed_agents": list(self.deployed_agents),
            "config_exists": self.config_exists,
        }


class ClaudeIntegration:
    """Deploys agents to a Claude directory and maintains its manifest."""

    def __init__(self, claude_dir: Optional[Path] = None) -> None:
        """Initialize the integration.

        Args:
            claude_dir: Claude root directory. Defaults to ~/.claude.
        """
        self.claude_dir = claude_dir or get_claude_root()
        self.agents_path = self.claude_dir / AGENTS_DIR
        self.config_path = get_claude_config_path(self.claude_dir)

    def is_installed(self) -> bool:
        """Check whether the Claude directory exists."""
        return self.claude_dir.is_dir()

    def deploy(self, records: Iterable[AgentRecord]) -> list[Path]:
        """Write agents into the agents directory and update the manifest.

        Existing files with the same name are overwritten.

        Returns:
            Paths written.
        """
        records = list(records)
        paths = [self.deploy_agent(record) for record in records]
        self._update_manifest(records)
        logger.info(f"Deployed {len(paths)} agents to {self.agents_path}")
        return paths

    def deploy_agent(self, record: AgentRecord) -> Path:
        """Write a single agent without touching the manifest."""
        target = self.agents_path / f"{record.name}{AGENT_FILE_EXTENSION}"
        save_record(record, target)
        logger.debug(f"Deployed agent '{record.name}' to {target}")
        return target

    def sync(self, collection: AgentCollection) -> list[Path]:
        """Deploy every agent in the collection."""
        return self.deploy(collection.get_all())

    def list_deployed(self) -> list[str]:
        """Names of agent files in the agents directory, sorted."""
        if not self.agents_path.is_dir():
            return []
        return sorted(
            p.stem
            for p in self.agents_path.iterdir()
            if p.is_file() and p.suffix == AGENT_FILE_EXTENSION
        )

    def remove(self, name: str) -> bool:
        """Delete a deployed agent file.

        Returns:
            True if a file was removed.
        """
        target = self.agents_path / f"{name}{AGENT_FILE_EXTENSION}"
        if not target.is_file():
            return False
        target.unlink()
        logger.debug(f"Removed deployed agent '{name}'")
        return True

    def status(self) -> DeploymentStatus:
        """Report installation and deployment state."""
        return DeploymentStatus(
            installed=self.is_installed(),
            agents_path=self.agents_path,
            deployed_agents=self.list_deployed(),
            config_exists=self.config_path.is_file(),
        )

    def read_config(self) -> dict[str, Any]:
        """Read the Claude config document.

        A missing file yields an empty document. An unreadable or non-object
        document is replaced by an empty one.
        """
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring unreadable config {self.config_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring non-object config {self.config_path}")
            return {}
        return data

    def _update_manifest(self, records: list[AgentRecord]) -> None:
        config = self.read_config()

        section = config.get("agents")
        if not isinstance(section, dict):
            section = {}

        section["enabled"] = True
        section["path"] = str(self.agents_path)
        section["loaded"] = [record.summary() for record in records]
        section["lastSync"] = datetime.now(timezone.utc).isoformat()
        config["agents"] = section

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
