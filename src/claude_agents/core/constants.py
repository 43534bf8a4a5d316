"""Claude Agents system constants and default values."""

from enum import Enum
from pathlib import Path
from typing import Final


class ModelType(str, Enum):
    """Model tiers an agent can run on."""

    OPUS = "opus"
    SONNET = "sonnet"
    HAIKU = "haiku"


DEFAULT_MODEL: Final[ModelType] = ModelType.SONNET
DEFAULT_VERSION: Final[str] = "1.0.0"
DEFAULT_AUTHOR: Final[str] = "unknown"

# Directory structure
CLAUDE_ROOT_DIR: Final[str] = ".claude"
AGENTS_DIR: Final[str] = "agents"
EXAMPLES_DIR: Final[str] = "examples"

# Files
AGENT_FILE_EXTENSION: Final[str] = ".md"
AGENTS_CONFIG_FILE: Final[str] = "config.json"
CLAUDE_CONFIG_FILE: Final[str] = "config.json"
NESTED_AGENT_FILE: Final[str] = "agent.md"
README_FILE: Final[str] = "README.md"
GITIGNORE_FILE: Final[str] = ".gitignore"
EXAMPLE_AGENT_FILE: Final[str] = "example-agent.md"

# Frontmatter
FRONTMATTER_DELIMITER: Final[str] = "---"

# Field order used when rendering the header block
METADATA_FIELDS: Final[tuple[str, ...]] = (
    "name",
    "description",
    "model",
    "version",
    "author",
    "tags",
    "examples",
)

# Name rules
NAME_PATTERN: Final[str] = r"^[a-z0-9-]+$"
NAME_MIN_LENGTH: Final[int] = 3
NAME_MAX_LENGTH: Final[int] = 50
RESERVED_NAMES: Final[frozenset[str]] = frozenset(
    {"help", "test", "debug", "admin", "root", "system", "claude"}
)

# Schema bounds
SCHEMA_NAME_MIN_LENGTH: Final[int] = 1
SCHEMA_NAME_MAX_LENGTH: Final[int] = 50
DESCRIPTION_MIN_LENGTH: Final[int] = 10
DESCRIPTION_MAX_LENGTH: Final[int] = 500

# Content rules
MIN_CONTENT_LENGTH: Final[int] = 50
MAX_CONTENT_LENGTH: Final[int] = 10000
SECTION_MARKER: Final[str] = "##"
EXAMPLE_MARKER: Final[str] = "example"

# Description rules
DESCRIPTION_MIN_WORDS: Final[int] = 5
ACTION_WORDS: Final[tuple[str, ...]] = (
    "build",
    "create",
    "analyze",
    "optimize",
    "help",
    "assist",
    "generate",
)

# Test files
TEST_FILE_YAML_SUFFIXES: Final[tuple[str, ...]] = (".yaml", ".yml")
TEST_FILE_JSON_SUFFIX: Final[str] = ".json"
FORBIDDEN_CAPABILITY_WORDS: Final[tuple[str, ...]] = ("cannot", "unable", "don't")


def get_claude_root(home: Path | None = None) -> Path:
    """Get the ~/.claude directory path."""
    if home is None:
        home = Path.home()
    return home / CLAUDE_ROOT_DIR


def get_default_agents_path(home: Path | None = None) -> Path:
    """Get the default agents directory (~/.claude/agents)."""
    return get_claude_root(home) / AGENTS_DIR


def get_claude_config_path(claude_root: Path | None = None) -> Path:
    """Get the Claude tool config.json path."""
    if claude_root is None:
        claude_root = get_claude_root()
    return claude_root / CLAUDE_CONFIG_FILE
