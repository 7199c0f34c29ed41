"""Locating bundled asset files relative to the working and program directories."""

from __future__ import annotations

import os
from pathlib import Path

_MAX_SEARCH_DEPTH = 6


def _has_parent(path: Path) -> bool:
    if path.is_absolute():
        return path.parent != path
    return len(path.parts) > 1


def _find_under_root(root: Path, relative_path: Path) -> Path | None:
    candidate_root = root
    for _ in range(_MAX_SEARCH_DEPTH):
        candidate = candidate_root / relative_path
        if candidate.exists():
            return candidate.resolve()
        if not _has_parent(candidate_root):
            break
        parent = candidate_root.parent
        if parent == candidate_root:
            break
        candidate_root = parent
    return None


def resolve_asset_path(
    relative_path: str | os.PathLike[str],
    current_dir: str | os.PathLike[str],
    executable_dir: str | os.PathLike[str],
) -> Path:
    """Find an asset under the current or executable directory or their ancestors.

    Each root and up to five of its ancestors are searched, current directory
    first. When nothing is found the relative path is returned unchanged.
    """
    relative = Path(relative_path)
    if relative.is_absolute() and relative.exists():
        return relative.resolve()

    for root in (Path(current_dir), Path(executable_dir)):
        found = _find_under_root(root, relative)
        if found is not None:
            return found

    return relative