"""Static smoke testing for agents."""

from claude_agents.testing.runner import AgentTester

__all__ = ["AgentTester"]
