"""
Path resolution for project configurations.

Compass resolves each directory option against the project root and
derives the public asset URLs by joining http_path with the directory.
"""
from pathlib import Path
from typing import Dict, List, Union

from compass_config.model import REQUIRED_PATH_OPTIONS, ProjectConfig


_HTTP_DERIVED = {
    "http_stylesheets_path": "css_dir",
    "http_images_path": "images_dir",
    "http_javascripts_path": "javascripts_dir",
}


def resolve_directories(config: ProjectConfig, project_root: Union[str, Path]) -> Dict[str, Path]:
    """
    Resolve the directory options against a project root.

    Absolute directories are kept as-is. Unset directories are skipped.
    """
    root = Path(project_root)
    resolved = {}
    for name in REQUIRED_PATH_OPTIONS:
        if not config.is_set(name):
            continue
        path = Path(getattr(config, name))
        resolved[name] = path if path.is_absolute() else root / path
    return resolved


def _join_url(base: str, path: str) -> str:
    if not base.endswith("/"):
        base += "/"
    return base + path.lstrip("/")


def http_asset_paths(config: ProjectConfig) -> Dict[str, str]:
    """
    Public URL prefixes for stylesheets, images and scripts.

    Example:
        http_path="_site/", css_dir="stylesheets"
        -> {"http_stylesheets_path": "_site/stylesheets", ...}
    """
    base = config.effective("http_path")
    return {
        derived: _join_url(base, getattr(config, source))
        for derived, source in _HTTP_DERIVED.items()
        if config.is_set(source)
    }


def missing_directories(config: ProjectConfig, project_root: Union[str, Path]) -> List[str]:
    """Option names whose resolved directory does not exist on disk."""
    return [
        name
        for name, path in resolve_directories(config, project_root).items()
        if not path.is_dir()
    ]


__all__ = ["resolve_directories", "http_asset_paths", "missing_directories"]
