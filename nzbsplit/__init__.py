"""nzbsplit: split NZB files into smaller parts by size or by count."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as load_pkg_version
from pathlib import Path
import tomllib

from .models import FileEntry, Manifest, MetaEntry, Segment
from .orchestrator import SplitConstraint, split_manifest
from .splitters import split_by_capacity, split_by_count

__all__ = [
    "FileEntry",
    "Manifest",
    "MetaEntry",
    "Segment",
    "SplitConstraint",
    "__version__",
    "split_by_capacity",
    "split_by_count",
    "split_manifest",
]


def _read_local_project_version() -> str:
    """Read the project version from pyproject.toml when the package is uninstalled."""
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return "0.0.0"
    return data.get("project", {}).get("version", "0.0.0")


try:
    __version__ = load_pkg_version("nzbsplit")
except PackageNotFoundError:
    __version__ = _read_local_project_version()
