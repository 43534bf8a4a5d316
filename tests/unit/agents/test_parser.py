"""Tests for agent file parsing and serialization."""

from pathlib import Path

import pytest

from claude_agents.agents.parser import (
    load_record,
    parse_agent,
    save_record,
    serialize_agent,
)
from claude_agents.core.constants import ModelType
from claude_agents.core.exceptions import FormatError, SchemaError
from claude_agents.models.agent import AgentExample


class TestParseAgent:
    """Tests for parse_agent."""

    def test_parse_sample(self, sample_agent_content):
        record = parse_agent(sample_agent_content)

        assert record.name == "react-helper"
        assert record.model == "sonnet"
        assert record.metadata.version == "1.0.0"
        assert record.metadata.author == "tester"
        assert record.tags == ["frontend", "react"]
        assert record.metadata.examples == [
            AgentExample(
                input="How do I memoize a component?",
                output="Wrap it with React.memo.",
            )
        ]
        assert record.content.startswith("You are react-helper")
        assert record.content.endswith("state management.")
        assert record.path is None

    def test_body_may_contain_delimiter(self):
        text = (
            "---\nname: splitter\ndescription: Has a rule in the body\nmodel: sonnet\n---\n\n"
            "Part one\n\n---\n\nPart two\n"
        )
        record = parse_agent(text)
        assert record.content == "Part one\n\n---\n\nPart two"

    def test_leading_whitespace_is_ignored(self):
        record = parse_agent("\n\n---\nname: spaced\n---\nbody text\n")
        assert record.name == "spaced"
        assert record.content == "body text"

    def test_header_without_opening_delimiter(self):
        record = parse_agent("name: bare\n---\nbody\n")
        assert record.name == "bare"
        assert record.content == "body"

    def test_missing_frontmatter(self):
        with pytest.raises(FormatError):
            parse_agent("Just some markdown without a header.")

    def test_invalid_yaml(self):
        with pytest.raises(FormatError) as exc_info:
            parse_agent("---\nname: [unclosed\n---\nbody\n")
        assert "Invalid YAML" in str(exc_info.value)

    def test_header_must_be_mapping(self):
        with pytest.raises(SchemaError) as exc_info:
            parse_agent("---\n- one\n- two\n---\nbody\n")
        assert exc_info.value.field == "frontmatter"

    def test_values_kept_as_read(self):
        record = parse_agent("---\nname: 42\ntags: frontend\n---\nbody\n")
        assert record.name == 42
        assert record.metadata.tags == "frontend"
        assert record.tags == []

    def test_unknown_keys_ignored(self):
        record = parse_agent("---\nname: extra\ncolor: blue\n---\nbody\n")
        assert record.name == "extra"
        assert "color" not in record.metadata.to_dict()

    def test_missing_tags_default_to_empty(self):
        record = parse_agent("---\nname: notags\n---\nbody\n")
        assert record.metadata.tags == []


class TestSerializeAgent:
    """Tests for serialize_agent."""

    def test_layout(self, make_record, valid_content):
        text = serialize_agent(make_record())

        assert text.startswith("---\nname: react-helper\n")
        assert f"\n---\n\n{valid_content}" in text
        assert text.endswith("\n")
        assert not text.endswith("\n\n")

    def test_field_order(self, make_record):
        text = serialize_agent(make_record(author="someone"))

        positions = [
            text.index(f"{key}:")
            for key in ("name", "description", "model", "version", "author", "tags")
        ]
        assert positions == sorted(positions)

    def test_absent_fields_omitted(self, make_record):
        text = serialize_agent(make_record(version=None))

        assert "version:" not in text
        assert "author:" not in text
        assert "examples:" not in text

    def test_examples_rendered(self, make_record):
        record = make_record(examples=[AgentExample(input="hi", output="hello")])
        text = serialize_agent(record)

        assert "examples:" in text
        assert "input: hi" in text
        assert "output: hello" in text


class TestRoundTrip:
    """Tests for parse/serialize round trips."""

    def test_record_round_trip(self, make_record):
        record = make_record(
            author="someone",
            examples=[AgentExample(input="Build a form", output="Here is a form")],
        )
        assert parse_agent(serialize_agent(record)) == record

    def test_parsed_file_round_trip(self, sample_record):
        assert parse_agent(serialize_agent(sample_record)) == sample_record

    def test_content_is_trimmed(self, make_record):
        record = make_record(content="\n\n  padded body  \n\n")
        assert parse_agent(serialize_agent(record)).content == "padded body"

    def test_body_with_delimiter_round_trip(self, make_record):
        record = make_record(content="Intro\n\n---\n\nOutro")
        assert parse_agent(serialize_agent(record)) == record

    @pytest.mark.parametrize("model", list(ModelType))
    def test_enum_model_round_trip(self, make_record, model):
        record = make_record(model=model)
        parsed = parse_agent(serialize_agent(record))

        assert parsed == record
        assert type(parsed.model) is str
        assert parsed.model == model.value

    @pytest.mark.parametrize(
        "overrides",
        [
            {"description": "Aide les développeurs à créer des composants"},
            {"author": "Zoë Ångström"},
            {"tags": ["日本語", "ü"]},
            {"examples": [AgentExample(input="¿Qué tal?", output="Très bien ✓")]},
        ],
    )
    def test_non_ascii_round_trip(self, make_record, valid_content, overrides):
        record = make_record(content=valid_content + "\n\nÜnïcödé ✓ 日本語", **overrides)
        assert parse_agent(serialize_agent(record)) == record

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": "yes"},
            {"name": "123"},
            {"name": "null"},
            {"name": "true"},
            {"description": "null"},
            {"description": "~"},
            {"version": "1.0"},
            {"author": "no"},
            {"tags": ["on", "42", "3.14", "null"]},
            {"examples": [AgentExample(input="yes", output="false")]},
        ],
    )
    def test_yaml_lookalike_strings_round_trip(self, make_record, overrides):
        record = make_record(**overrides)
        parsed = parse_agent(serialize_agent(record))

        assert parsed == record
        for key, value in overrides.items():
            assert getattr(parsed.metadata, key) == value


class TestLoadSave:
    """Tests for load_record and save_record."""

    def test_save_creates_parents(self, temp_dir: Path, make_record):
        path = temp_dir / "nested" / "deeper" / "agent.md"
        saved = save_record(make_record(), path)

        assert path.exists()
        assert saved.path == path

    def test_non_ascii_file_round_trip(self, temp_dir: Path, make_record):
        path = temp_dir / "agent.md"
        record = make_record(description="Aide à créer des composants ✓")
        save_record(record, path)

        assert load_record(path) == record

    def test_load_invalid_utf8(self, temp_dir: Path):
        path = temp_dir / "agent.md"
        path.write_bytes(b"---\nname: bad\xff\xfe\n---\nbody")

        with pytest.raises(FormatError) as exc_info:
            load_record(path)
        assert exc_info.value.path == path

    def test_save_enum_model(self, temp_dir: Path, make_record):
        path = temp_dir / "agent.md"
        save_record(make_record(model=ModelType.HAIKU), path)

        assert "model: haiku\n" in path.read_text(encoding="utf-8")

    def test_load_sets_path(self, temp_dir: Path, make_record):
        path = temp_dir / "agent.md"
        original = make_record()
        save_record(original, path)

        loaded = load_record(path)
        assert loaded == original
        assert loaded.path == path

    def test_save_overwrites(self, temp_dir: Path, make_record):
        path = temp_dir / "agent.md"
        save_record(make_record(), path)
        save_record(make_record(description="Replaced description that helps"), path)

        assert load_record(path).description == "Replaced description that helps"

    def test_load_missing_file(self, temp_dir: Path):
        with pytest.raises(OSError):
            load_record(temp_dir / "missing.md")

    def test_load_error_carries_path(self, temp_dir: Path):
        path = temp_dir / "broken.md"
        path.write_text("no header here")

        with pytest.raises(FormatError) as exc_info:
            load_record(path)
        assert exc_info.value.path == path
