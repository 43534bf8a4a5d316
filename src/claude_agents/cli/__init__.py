"""Command line interface for claude-agents."""
