"""Read/write artifact files to the .roadforge directory."""

import re
from pathlib import Path

import aiofiles
from pydantic import ValidationError

from roadforge.exceptions import ArtifactError
from roadforge.models.analysis import Analysis
from roadforge.models.recipe import Recipe
from roadforge.models.roadmap import Roadmap
from roadforge.pipeline.synthesis import render_recipe, render_roadmap
from roadforge.settings import get_settings

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lower-case the name and collapse runs of non-alphanumerics into "-"."""
    slug = _NON_ALNUM.sub("-", name.lower()).strip("-")
    return slug or "project"


def get_artifact_path(base_dir: Path, project_name: str, filename: str) -> Path:
    """Get path to an artifact file.

    Args:
        base_dir: Directory that holds the cache directory.
        project_name: Project name, slugified into a subdirectory.
        filename: Artifact filename (analysis.json, recipe.md, etc.)

    Returns:
        Full path to artifact file.
    """
    settings = get_settings()
    return base_dir / settings.cache_dir / slugify(project_name) / filename


async def _write(path: Path, content: str) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(path, "w") as f:
            await f.write(content)
    except OSError as e:
        raise ArtifactError(f"Failed to write {path}: {e}") from e
    return path


async def _read(path: Path) -> str | None:
    if not path.exists():
        return None
    async with aiofiles.open(path) as f:
        return await f.read()


async def write_analysis(base_dir: Path, project_name: str, analysis: Analysis) -> Path:
    """Write analysis.json artifact."""
    path = get_artifact_path(base_dir, project_name, "analysis.json")
    return await _write(path, analysis.model_dump_json(indent=2))


async def read_analysis(base_dir: Path, project_name: str) -> Analysis | None:
    """Read analysis.json artifact.

    Returns:
        Analysis if file exists, None otherwise.

    Raises:
        ArtifactError: If the file does not hold a valid Analysis.
    """
    path = get_artifact_path(base_dir, project_name, "analysis.json")
    content = await _read(path)
    if content is None:
        return None
    try:
        return Analysis.model_validate_json(content)
    except ValidationError as e:
        raise ArtifactError(f"Invalid analysis artifact {path}: {e}") from e


async def write_recipe(base_dir: Path, recipe: Recipe) -> Path:
    """Write recipe.md artifact."""
    path = get_artifact_path(base_dir, recipe.project_name, "recipe.md")
    return await _write(path, render_recipe(recipe))


async def read_recipe(base_dir: Path, project_name: str) -> str:
    """Read recipe.md artifact content.

    Raises:
        FileNotFoundError: If recipe.md doesn't exist.
    """
    path = get_artifact_path(base_dir, project_name, "recipe.md")
    async with aiofiles.open(path) as f:
        return await f.read()


async def write_roadmap(base_dir: Path, roadmap: Roadmap) -> list[Path]:
    """Write roadmap.md and roadmap.json artifacts."""
    md_path = get_artifact_path(base_dir, roadmap.project_name, "roadmap.md")
    json_path = get_artifact_path(base_dir, roadmap.project_name, "roadmap.json")
    return [
        await _write(md_path, render_roadmap(roadmap)),
        await _write(json_path, roadmap.model_dump_json(indent=2)),
    ]


async def read_roadmap(base_dir: Path, project_name: str) -> Roadmap | None:
    """Read roadmap.json artifact.

    Returns:
        Roadmap if file exists, None otherwise.

    Raises:
        ArtifactError: If the file does not hold a valid Roadmap.
    """
    path = get_artifact_path(base_dir, project_name, "roadmap.json")
    content = await _read(path)
    if content is None:
        return None
    try:
        return Roadmap.model_validate_json(content)
    except ValidationError as e:
        raise ArtifactError(f"Invalid roadmap artifact {path}: {e}") from e
