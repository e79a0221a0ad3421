"""Agents for optional prose generation."""

from roadforge.agents.prose import ProseWriter, write_prose

__all__ = ["ProseWriter", "write_prose"]
