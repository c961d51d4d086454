"""
Version management for FuzzyVis.

Reads the version from pyproject.toml, which serves as the single source
of truth, falling back to a fixed version when the file is not shipped.
"""

from pathlib import Path

import tomli

_FALLBACK_VERSION = "0.1.0"


def _find_project_root() -> Path:
    """
    Find the project root directory containing pyproject.toml.

    Returns:
        Path: Path to the project root directory (or the best guess)
    """
    project_root = Path(__file__).resolve().parent.parent
    if (project_root / "pyproject.toml").exists():
        return project_root

    cwd = Path.cwd()
    if (cwd / "pyproject.toml").exists():
        return cwd

    return project_root


PROJECT_ROOT = _find_project_root()
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def get_version_from_pyproject() -> str:
    """
    Read the version string from pyproject.toml.

    Returns:
        str: Version string, or the fallback version if unavailable
    """
    try:
        with open(PYPROJECT_PATH, "rb") as f:
            pyproject_data = tomli.load(f)
        if pyproject_data["project"]["name"] != "fuzzyvis":
            return _FALLBACK_VERSION
        return pyproject_data["project"]["version"]
    except FileNotFoundError:
        return _FALLBACK_VERSION
    except (KeyError, tomli.TOMLDecodeError):
        return _FALLBACK_VERSION


__version__ = get_version_from_pyproject()


def get_version() -> str:
    """Get the current version of the FuzzyVis package."""
    return __version__
