"""Tests for the static agent test runner."""

import json
from pathlib import Path

import pytest

from claude_agents.core.exceptions import FormatError
from claude_agents.models.testing import AgentTestCase
from claude_agents.testing.runner import AgentTester


@pytest.fixture
def tester() -> AgentTester:
    return AgentTester()


@pytest.fixture
def record(make_record):
    return make_record()


class TestSimulateResponse:
    """Tests for canned responses."""

    def test_greeting(self, tester, record):
        assert tester.simulate_response(record, "Hello there") == (
            f"Hello! I'm react-helper, {record.description}"
        )

    def test_help(self, tester, record):
        assert tester.simulate_response(record, "HELP me out") == (
            f"I can help you with: {record.description}"
        )

    def test_test(self, tester, record):
        assert tester.simulate_response(record, "run a test") == "This is a test response"

    def test_greeting_wins_over_help(self, tester, record):
        assert tester.simulate_response(record, "hello, help!").startswith("Hello!")

    def test_echo(self, tester, record):
        assert tester.simulate_response(record, "What is JSX?") == (
            f'As react-helper, I understand you\'re asking about "What is JSX?". '
            f"{record.description}"
        )


class TestRunTest:
    """Tests for checking one case."""

    def test_all_checks_pass(self, tester, record):
        case = AgentTestCase(
            name="combined",
            input="run a test",
            expected_output="This is a test response",
            should_contain=["test"],
            should_not_contain=["error"],
        )
        result = tester.run_test(record, case)

        assert result.passed
        assert result.error is None
        assert result.output == "This is a test response"

    def test_expected_output_mismatch(self, tester, record):
        case = AgentTestCase(name="exact", input="run a test", expected_output="Other")
        result = tester.run_test(record, case)

        assert not result.passed
        assert result.error == 'Expected output "Other" but got "This is a test response"'

    def test_expected_output_checked_first(self, tester, record):
        case = AgentTestCase(
            name="first", input="run a test", expected_output="Other", should_contain=["zzz"]
        )
        assert tester.run_test(record, case).error.startswith("Expected output")

    def test_should_contain(self, tester, record):
        case = AgentTestCase(name="contain", input="run a test", should_contain=["test", "zzz"])
        result = tester.run_test(record, case)

        assert not result.passed
        assert result.error == 'Output should contain "zzz"'

    def test_should_not_contain(self, tester, record):
        case = AgentTestCase(name="forbid", input="run a test", should_not_contain=["test"])
        result = tester.run_test(record, case)

        assert not result.passed
        assert result.error == 'Output should not contain "test"'


class TestRunTests:
    """Tests for running suites."""

    def test_results_in_order(self, tester, record):
        cases = [
            AgentTestCase(name="one", input="hello"),
            AgentTestCase(name="two", input="run a test", expected_output="nope"),
        ]
        results = tester.run_tests(record, cases)

        assert [r.test_case.name for r in results] == ["one", "two"]
        assert [r.passed for r in results] == [True, False]
        assert all(r.duration_ms >= 0 for r in results)

    def test_exception_marks_failure(self, tester, record):
        case = AgentTestCase(name="broken", input="hello", should_contain=[5])
        results = tester.run_tests(record, [case])

        assert not results[0].passed
        assert "requires string" in results[0].error
        assert results[0].output is None


class TestDefaultTests:
    """Tests for generate_default_tests."""

    def test_basic_suite(self, tester, record):
        cases = tester.generate_default_tests(record)

        assert [c.name for c in cases] == ["Basic greeting", "Help request", "Capability check"]
        assert cases[0].should_contain == ["react-helper"]
        assert cases[1].should_contain == [record.description[:20]]
        assert cases[2].input == "Can you help with frontend?"
        assert cases[2].should_not_contain == ["cannot", "unable", "don't"]

    def test_no_tags(self, tester, make_record):
        cases = tester.generate_default_tests(make_record(tags=[]))
        assert cases[2].input == "Can you help with tasks?"

    def test_example_cases(self, tester, sample_record):
        cases = tester.generate_default_tests(sample_record)

        assert len(cases) == 4
        assert cases[3].name == "Example 1"
        assert cases[3].input == "How do I memoize a component?"
        assert cases[3].expected_output == "Wrap it with React.memo."

    def test_default_suite_passes(self, tester, record):
        results = tester.run_tests(record, tester.generate_default_tests(record))
        assert all(r.passed for r in results)


class TestTestFiles:
    """Tests for loading and writing test files."""

    def test_load_yaml_camel_case(self, tester, temp_dir: Path):
        path = temp_dir / "cases.yaml"
        path.write_text(
            "- name: greet\n"
            "  input: Hello\n"
            "  shouldContain: [react]\n"
            "- name: exact\n"
            "  input: test\n"
            "  expectedOutput: This is a test response\n"
        )
        cases = tester.load_test_file(path)

        assert cases[0] == AgentTestCase(name="greet", input="Hello", should_contain=["react"])
        assert cases[1].expected_output == "This is a test response"

    def test_load_json(self, tester, temp_dir: Path):
        path = temp_dir / "cases.json"
        path.write_text(json.dumps([{"name": "j", "input": "x", "should_not_contain": ["y"]}]))

        assert tester.load_test_file(path) == [
            AgentTestCase(name="j", input="x", should_not_contain=["y"])
        ]

    def test_load_yml_extension(self, tester, temp_dir: Path):
        path = temp_dir / "cases.yml"
        path.write_text("- name: a\n  input: b\n")
        assert len(tester.load_test_file(path)) == 1

    def test_empty_file(self, tester, temp_dir: Path):
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert tester.load_test_file(path) == []

    def test_unsupported_extension(self, tester, temp_dir: Path):
        path = temp_dir / "cases.txt"
        path.write_text("[]")
        with pytest.raises(FormatError):
            tester.load_test_file(path)

    def test_not_a_list(self, tester, temp_dir: Path):
        path = temp_dir / "cases.yaml"
        path.write_text("name: single\n")
        with pytest.raises(FormatError):
            tester.load_test_file(path)

    def test_invalid_json(self, tester, temp_dir: Path):
        path = temp_dir / "cases.json"
        path.write_text("[{")
        with pytest.raises(FormatError):
            tester.load_test_file(path)

    def test_undecodable_file(self, tester, temp_dir: Path):
        path = temp_dir / "cases.yaml"
        path.write_bytes(b"- name: \xff\xfe\n")
        with pytest.raises(FormatError):
            tester.load_test_file(path)

    def test_template_round_trip(self, tester, temp_dir: Path):
        path = tester.create_test_template(temp_dir / "tests" / "agent.test.yaml")
        cases = tester.load_test_file(path)

        assert [c.name for c in cases] == ["Test case 1", "Test case 2", "Test case 3"]
        assert cases[0].expected_output == "Expected output"
        assert cases[1].should_contain == ["keyword1", "keyword2"]
        assert cases[2].should_not_contain == ["error", "fail"]
