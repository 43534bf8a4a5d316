"""Agent file handling.

This package provides:
- Frontmatter parsing and serialization of agent files
- Rule-based validation and auto-fix
- Loading agents from a directory tree
- A name-keyed collection with search, filters and stats
"""

from claude_agents.agents.collection import AgentCollection, CollectionStats
from claude_agents.agents.loader import AgentLoader
from claude_agents.agents.parser import (
    load_record,
    parse_agent,
    save_record,
    serialize_agent,
)
from claude_agents.agents.validator import AgentValidator, sanitize_name

__all__ = [
    "AgentCollection",
    "AgentLoader",
    "AgentValidator",
    "CollectionStats",
    "load_record",
    "parse_agent",
    "sanitize_name",
    "save_record",
    "serialize_agent",
]
