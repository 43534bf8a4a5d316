"""Smoke test case and result models."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class AgentTestCase:
    """A single smoke test for an agent.

    Attributes:
        name: Human readable test name.
        input: Message sent to the agent.
        expected_output: Exact output expected, if any.
        expected_behavior: Free-form notes, never checked.
        should_contain: Substrings that must all appear.
        should_not_contain: Substrings that must not appear.
    """

    name: str
    input: str
    expected_output: Optional[str] = None
    expected_behavior: list[str] = field(default_factory=list)
    should_contain: list[str] = field(default_factory=list)
    should_not_contain: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, dropping empty expectations."""
        data: dict[str, Any] = {"name": self.name, "input": self.input}
        if self.expected_output is not None:
            data["expected_output"] = self.expected_output
        if self.expected_behavior:
            data["expected_behavior"] = self.expected_behavior
        if self.should_contain:
            data["should_contain"] = self.should_contain
        if self.should_not_contain:
            data["should_not_contain"] = self.should_not_contain
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AgentTestCase":
        """Create a test case from a mapping.

        Accepts both snake_case and camelCase expectation keys.
        """
        def pick(snake: str, camel: str, default: Any) -> Any:
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        return cls(
            name=str(data.get("name", "unnamed")),
            input=str(data.get("input", "")),
            expected_output=pick("expected_output", "expectedOutput", None),
            expected_behavior=list(pick("expected_behavior", "expectedBehavior", []) or []),
            should_contain=list(pick("should_contain", "shouldContain", []) or []),
            should_not_contain=list(pick("should_not_contain", "shouldNotContain", []) or []),
        )


@dataclass
class AgentTestResult:
    """Outcome of running one test case."""

    test_case: AgentTestCase
    passed: bool
    output: Optional[str] = None
    error: Optional[str] = None
    duration_ms: float = 0.0
