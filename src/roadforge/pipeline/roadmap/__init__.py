"""Roadmap expansion."""

from roadforge.pipeline.roadmap.builder import build_roadmap

__all__ = ["build_roadmap"]
