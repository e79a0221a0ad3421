"""Rule-based project analysis and roadmap engine."""

__version__ = "0.1.0"
