"""Recipe expansion."""

from roadforge.pipeline.recipe.builder import build_recipe

__all__ = ["build_recipe"]
