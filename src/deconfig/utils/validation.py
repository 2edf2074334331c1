"""Validation helpers for filesystem inputs."""
from __future__ import annotations

from pathlib import Path


def _normalise_path(path: Path | str) -> Path:
    return Path(path).expanduser().resolve(strict=False)


def resolve_and_check_path(path: Path | str) -> Path:
    """Resolve a storage directory ``path`` safely.

    Parameters
    ----------
    path:
        Storage directory. Relative paths are resolved against the working
        directory and may not contain ``..`` components. The directory does not
        have to exist yet.

    Raises
    ------
    ValueError
        If ``path`` traverses upwards or names an existing non-directory.
    """

    candidate = Path(path).expanduser()
    if not candidate.is_absolute():
        if any(part == ".." for part in candidate.parts):
            raise ValueError(f"Path traversal is not allowed: {path}")
        resolved = _normalise_path(Path.cwd() / candidate)
    else:
        resolved = _normalise_path(candidate)

    if resolved.exists() and not resolved.is_dir():
        raise ValueError(f"Expected directory path but found file: {resolved}")

    return resolved


__all__ = ["resolve_and_check_path"]
