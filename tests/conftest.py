"""Pytest configuration and fixtures for claude-agents tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Any, Callable, Generator

import pytest

from claude_agents.agents.parser import parse_agent, save_record
from claude_agents.agents.validator import AgentValidator
from claude_agents.models.agent import AgentMetadata, AgentRecord

VALID_CONTENT = """You are react-helper, an assistant for React development.

## Responsibilities

- Review components
- Suggest performance fixes

## Examples

Ask about hooks, rendering, or state management."""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def valid_content() -> str:
    """Agent body that passes every content rule without warnings."""
    return VALID_CONTENT


@pytest.fixture
def sample_agent_content() -> str:
    """Sample agent file content."""
    return """---
name: react-helper
description: Helps developers build React components and optimize rendering
model: sonnet
version: 1.0.0
author: tester
tags:
- frontend
- react
examples:
- input: How do I memoize a component?
  output: Wrap it with React.memo.
---

You are react-helper, an assistant for React development.

## Responsibilities

- Review components
- Suggest performance fixes

## Examples

Ask about hooks, rendering, or state management.
"""


@pytest.fixture
def sample_record(sample_agent_content: str) -> AgentRecord:
    """Parsed sample agent."""
    return parse_agent(sample_agent_content)


@pytest.fixture
def make_record() -> Callable[..., AgentRecord]:
    """Factory for valid records; keyword arguments override metadata or content."""

    def _make(content: Any = VALID_CONTENT, **metadata: Any) -> AgentRecord:
        fields: dict[str, Any] = {
            "name": "react-helper",
            "description": "Helps developers build React components and optimize rendering",
            "model": "sonnet",
            "version": "1.0.0",
            "tags": ["frontend", "react"],
        }
        fields.update(metadata)
        return AgentRecord(metadata=AgentMetadata(**fields), content=content)

    return _make


@pytest.fixture
def validator() -> AgentValidator:
    """Create validator with default thresholds."""
    return AgentValidator()


@pytest.fixture
def agents_dir(temp_dir: Path, make_record: Callable[..., AgentRecord]) -> Path:
    """Agents directory with three valid agents in the supported layouts."""
    root = temp_dir / "agents"
    save_record(
        make_record(name="alpha", tags=["frontend", "react"]),
        root / "alpha.md",
    )
    save_record(
        make_record(
            name="beta",
            description="Assists backend teams to design robust REST APIs",
            model="opus",
            tags=["backend", "api"],
        ),
        root / "beta" / "agent.md",
    )
    save_record(
        make_record(
            name="gamma",
            description="Analyze data pipelines and generate quality reports",
            model="haiku",
            tags=[],
        ),
        root / "gamma" / "gamma.md",
    )
    return root
