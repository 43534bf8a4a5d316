"""Tests for the agent loader."""

import logging
from pathlib import Path

import pytest

from claude_agents.agents.loader import AgentLoader, find_agent_files
from claude_agents.core.constants import get_default_agents_path
from claude_agents.core.exceptions import FormatError


class TestAgentLoader:
    """Tests for AgentLoader."""

    @pytest.fixture
    def loader(self, agents_dir: Path) -> AgentLoader:
        return AgentLoader(agents_dir)

    def test_default_directory(self):
        assert AgentLoader().agents_dir == get_default_agents_path()

    def test_load_single_file(self, loader, agents_dir):
        record = loader.load(agents_dir / "alpha.md")
        assert record.name == "alpha"
        assert record.path == agents_dir / "alpha.md"

    def test_load_malformed_file(self, loader, agents_dir):
        bad = agents_dir / "bad.md"
        bad.write_text("not an agent")
        with pytest.raises(FormatError):
            loader.load(bad)

    def test_load_directory_recursive_and_sorted(self, loader, agents_dir):
        records = loader.load_directory(agents_dir)
        assert [r.name for r in records] == ["alpha", "beta", "gamma"]

    def test_load_all_uses_configured_directory(self, loader):
        assert len(loader.load_all()) == 3

    def test_load_directory_skips_bad_files(self, loader, agents_dir, caplog):
        (agents_dir / "broken.md").write_text("no frontmatter at all")

        with caplog.at_level(logging.WARNING):
            records = loader.load_directory(agents_dir)

        assert [r.name for r in records] == ["alpha", "beta", "gamma"]
        assert "broken.md" in caplog.text

    def test_load_directory_skips_undecodable_file(self, loader, agents_dir, caplog):
        (agents_dir / "binary.md").write_bytes(b"---\nname: bad\xff\xfe\n---\nbody")

        with caplog.at_level(logging.WARNING):
            records = loader.load_directory(agents_dir)

        assert [r.name for r in records] == ["alpha", "beta", "gamma"]
        assert "binary.md" in caplog.text

    def test_load_undecodable_file(self, loader, agents_dir):
        bad = agents_dir / "binary.md"
        bad.write_bytes(b"\xff\xfe")
        with pytest.raises(FormatError) as exc_info:
            loader.load(bad)
        assert exc_info.value.path == bad

    def test_load_by_name_skips_undecodable_candidate(self, loader, agents_dir):
        (agents_dir / "gamma.md").write_bytes(b"\xff")
        assert loader.load_by_name("gamma").path == agents_dir / "gamma" / "gamma.md"

    def test_load_directory_ignores_readme(self, loader, agents_dir, caplog):
        (agents_dir / "README.md").write_text("# Agents\n")

        with caplog.at_level(logging.WARNING):
            records = loader.load_directory(agents_dir)

        assert len(records) == 3
        assert "README" not in caplog.text

    def test_load_directory_missing(self, loader, temp_dir):
        assert loader.load_directory(temp_dir / "nope") == []

    def test_load_by_name_layouts(self, loader, agents_dir):
        assert loader.load_by_name("alpha").path == agents_dir / "alpha.md"
        assert loader.load_by_name("beta").path == agents_dir / "beta" / "agent.md"
        assert loader.load_by_name("gamma").path == agents_dir / "gamma" / "gamma.md"

    def test_load_by_name_missing(self, loader):
        assert loader.load_by_name("nobody") is None

    def test_load_by_name_falls_through_broken_candidate(self, loader, agents_dir):
        (agents_dir / "gamma.md").write_text("broken")
        assert loader.load_by_name("gamma").path == agents_dir / "gamma" / "gamma.md"

    def test_agent_path(self, loader, agents_dir):
        assert loader.agent_path("delta") == agents_dir / "delta.md"

    def test_exists(self, loader):
        assert loader.exists("beta")
        assert not loader.exists("delta")


class TestFindAgentFiles:
    """Tests for find_agent_files."""

    def test_only_markdown(self, agents_dir):
        (agents_dir / "notes.txt").write_text("ignored")
        (agents_dir / "readme.md").write_text("ignored too")

        files = find_agent_files(agents_dir)
        assert [f.name for f in files] == ["alpha.md", "agent.md", "gamma.md"]
