"""
Project identity for log records (`service` and `version` fields).

The installed distribution metadata wins; a source checkout falls back to the
nearest pyproject.toml above this package.
"""

from functools import lru_cache
from importlib import metadata as importlib_metadata
from pathlib import Path
import tomllib

DEFAULT_PROJECT_NAME = "blog-api"


@lru_cache()
def _pyproject_project_table(max_up: int = 5) -> dict:
    here = Path(__file__).resolve().parent
    for directory in [here, *here.parents][:max_up]:
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            try:
                with candidate.open("rb") as f:
                    return tomllib.load(f).get("project", {})
            except (OSError, tomllib.TOMLDecodeError):
                return {}
    return {}


def get_project_name() -> str:
    return _pyproject_project_table().get("name") or DEFAULT_PROJECT_NAME


def get_project_version(default: str = "unknown") -> str:
    try:
        return importlib_metadata.version(get_project_name())
    except importlib_metadata.PackageNotFoundError:
        return _pyproject_project_table().get("version") or default


__all__ = ["get_project_name", "get_project_version"]
