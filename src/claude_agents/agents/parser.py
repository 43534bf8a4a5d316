"""Agent file parser and serializer.

Agent files are a YAML header wrapped in ``---`` lines followed by a
markdown body. Only the first pair of delimiters separates header from
body; later ``---`` sequences belong to the body.
"""

from pathlib import Path
from typing import Any

import frontmatter
import yaml

from claude_agents.core.constants import FRONTMATTER_DELIMITER
from claude_agents.core.exceptions import FormatError, SchemaError
from claude_agents.models.agent import AgentMetadata, AgentRecord


def parse_agent(text: str, path: Path | None = None) -> AgentRecord:
    """Parse agent file text into an AgentRecord.

    Args:
        text: Full file content.
        path: Optional origin path, recorded on the record and used in errors.

    Returns:
        The parsed record. Metadata values are kept as read.

    Raises:
        FormatError: If there is no header block or the YAML is malformed.
        SchemaError: If the header is not a mapping.
    """
    parts = text.split(FRONTMATTER_DELIMITER)
    if parts and not parts[0].strip():
        parts = parts[1:]

    if len(parts) < 2:
        raise FormatError("Invalid agent file format: missing frontmatter", path=path)

    header = _parse_header(parts[0], path)
    content = FRONTMATTER_DELIMITER.join(parts[1:]).strip()

    return AgentRecord(
        metadata=AgentMetadata.from_dict(header),
        content=content,
        path=path,
    )


def serialize_agent(record: AgentRecord) -> str:
    """Render a record as agent file text.

    The header keeps field order and omits absent optional fields. The
    body follows a blank line after the closing delimiter.
    """
    post = frontmatter.Post(str(record.content))
    post.metadata.update(record.metadata.to_dict())
    return frontmatter.dumps(post, sort_keys=False) + "\n"


def load_record(path: Path) -> AgentRecord:
    """Read and parse an agent file.

    Raises:
        OSError: If the file cannot be read.
        FormatError: If the file is not UTF-8 or is malformed.
        SchemaError: If the header is not a mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FormatError(f"Agent file is not valid UTF-8: {e}", path=path) from e
    return parse_agent(text, path)


def save_record(record: AgentRecord, path: Path) -> AgentRecord:
    """Write a record to ``path``, overwriting any existing file.

    Returns:
        The record with its path set to ``path``.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize_agent(record), encoding="utf-8")
    return record.with_overrides(path=path)


def _parse_header(header: str, path: Path | None) -> dict[str, Any]:
    """Parse the YAML header into a mapping."""
    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as e:
        raise FormatError(f"Invalid YAML frontmatter: {e}", path=path) from e

    if not isinstance(data, dict):
        raise SchemaError(
            f"Frontmatter must be a mapping, got {type(data).__name__}",
            field="frontmatter",
            path=path,
        )
    return data
