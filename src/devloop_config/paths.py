"""Workspace path resolution.

Helpers for turning user-supplied references and glob patterns into
concrete files under a project root. Remote references (git or http URLs)
are recognised syntactically and never touch the filesystem.
"""

import glob
import logging
import os
import re
from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path

from .exceptions import DirectoryNotFileError
from .exceptions import PathNotFoundError

logger = logging.getLogger(__name__)

# scheme://... (https, git, ssh, ...)
_URL_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
# user@host:path or user@host/path
_SSH_SHORTHAND = re.compile(r"^[\w.-]+@[\w.-]+[:/]")


def is_remote(reference: str) -> bool:
    """Check whether a reference points at a remote source.

    Args:
        reference: Path or URI as written by the user

    Returns:
        True for URL-style and ssh-style git references
    """
    return bool(_URL_SCHEME.match(reference) or _SSH_SHORTHAND.match(reference))


def is_local_file(reference: str, root: str | Path) -> bool:
    """Check whether a reference names an existing entry in the workspace.

    Remote references return False without any filesystem access.

    Args:
        reference: Relative (to root) or absolute path, or a remote URI
        root: Workspace root directory

    Returns:
        True if the reference is local and exists
    """
    if is_remote(reference):
        return False
    return (Path(root) / reference).exists()


def abs_file(root: str | Path, name: str) -> Path:
    """Resolve name against root to the absolute path of a regular file.

    Args:
        root: Workspace root directory
        name: Relative (to root) or absolute file name

    Returns:
        Absolute, normalized path to the file

    Raises:
        PathNotFoundError: If nothing exists at the path
        DirectoryNotFileError: If the path is a directory
    """
    path = Path(os.path.abspath(os.path.join(root, name)))
    if not path.exists():
        raise PathNotFoundError(f"{path} does not exist")
    if path.is_dir():
        raise DirectoryNotFileError(f"{path} is a directory")
    return path


def expand_paths_glob(root: str | Path, patterns: Iterable[str]) -> list[Path]:
    """Expand glob patterns into the regular files they match under root.

    Matching rules:
    - A path naming an existing file matches that file, even if its name
      contains glob characters.
    - A path without wildcards that names a directory matches nothing.
    - A leaf glob (``dir/sub/*``) matches the files directly inside ``dir/sub``;
      sub-directories it matches are skipped.
    - Directories matched by any other glob (``dir*``, ``d*/sub``) are walked
      and every file nested under them is included.

    Dot-files are matched like any other file.

    Args:
        root: Workspace root directory
        patterns: Glob patterns relative to root

    Returns:
        Absolute paths in first-seen order; a physical file reached through
        several paths appears once

    Raises:
        OSError: If a matched directory cannot be walked
    """
    root = Path(os.path.abspath(root))
    seen: dict[Path, Path] = {}

    def _add(path: Path) -> None:
        seen.setdefault(path.resolve(), path)

    for pattern in patterns:
        literal = Path(os.path.normpath(root / pattern))
        if literal.is_file():
            _add(literal)
            continue
        if not glob.has_magic(pattern):
            if literal.is_dir():
                logger.debug(f"Skipping directory {literal} named by '{pattern}'")
            continue

        matches = sorted(glob.glob(pattern, root_dir=root, include_hidden=True))
        if not matches:
            logger.debug(f"Pattern '{pattern}' matched nothing under {root}")
            continue

        leaf = _is_leaf_glob(pattern)
        for match in matches:
            path = Path(os.path.normpath(root / match))
            if path.is_dir():
                if leaf:
                    logger.debug(f"Skipping directory {path} matched by leaf glob '{pattern}'")
                    continue
                for file in _walk_files(path):
                    _add(file)
            elif path.is_file():
                _add(path)

    return list(seen.values())


def _is_leaf_glob(pattern: str) -> bool:
    """Check whether only the last segment of a pattern has a wildcard."""
    parent, _, leaf = pattern.replace(os.sep, "/").rstrip("/").rpartition("/")
    return bool(parent) and glob.has_magic(leaf) and not glob.has_magic(parent)


def _walk_files(directory: Path) -> Iterator[Path]:
    """Yield regular files under directory in sorted order."""

    def _raise(error: OSError) -> None:
        raise error

    for current, dirnames, filenames in os.walk(directory, onerror=_raise):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(current) / filename
            if path.is_file():
                yield path
