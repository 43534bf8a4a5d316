"""Integration with the local Claude directory."""

from claude_agents.integrations.claude import ClaudeIntegration, DeploymentStatus

__all__ = ["ClaudeIntegration", "DeploymentStatus"]
