"""
Provides the directory walker and the path mirrorer.

The walker finds every regular file below an input root; the mirrorer turns a
discovered file into the output directory that preserves its subdirectory.
Neither looks at file contents or extensions: every file under a raw-assets
root is treated as a conversion candidate.
"""

from pathlib import Path
from typing import List

from loguru import logger

from ..domain.exceptions import FileSystemException
from ..domain.media import RelativeIdentity


def list_files(root: Path) -> List[Path]:
    """
    Recursively lists all regular files under `root`.

    Entries of each directory are visited in lexicographic order of their
    names, depth-first, so the result is deterministic for a given tree.
    Directories are never part of the result. Symlinked directories are
    followed but keep their place in the tree: files below `root/alias`
    are returned as `root/alias/...`, never under the link target. A
    symlink cycle is not detected and recurses until the OS rejects the
    path.

    Args:
        root: The directory to scan. Made absolute, but not resolved.

    Returns:
        Absolute paths of all files, or an empty list if `root` does not exist.

    Raises:
        FileSystemException: If an existing directory or entry cannot be read.
    """
    root = root.absolute()
    if not root.is_dir():
        logger.debug(f"Directory {root} does not exist. Nothing to list.")
        return []

    results: List[Path] = []
    _collect_files(root, results)
    return results


def _collect_files(directory: Path, results: List[Path]):
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FileSystemException(f"Cannot list directory {directory}: {e}") from e

    for entry in entries:
        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
        except OSError as e:
            raise FileSystemException(f"Cannot stat {entry}: {e}") from e
        if is_dir:
            _collect_files(entry, results)
        elif is_file:
            results.append(entry)


def ensure_mirrored_dir(input_root: Path, output_root: Path, file_path: Path) -> Path:
    """
    Creates (if needed) and returns the output directory mirroring `file_path`.

    `input_root/a/b/c.png` maps to `output_root/a/b`. Calling this again with
    the same arguments is a no-op returning the same path.

    Raises:
        FileSystemException: If `file_path` is not under `input_root`, or the
            directory cannot be created (permissions, disk full, a file in the
            way...).
    """
    identity = RelativeIdentity.from_path(input_root, file_path)
    target_dir = output_root / identity.relative_dir
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemException(f"Cannot create output directory {target_dir}: {e}") from e
    return target_dir
