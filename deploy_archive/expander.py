"""
Source Expander for deploy-archive

Turns a source root (file or directory) into the flat list of files to
archive. Directories are walked depth-first with siblings in lexical
order, so a directory's files appear at the position of its name.

Ignore rules are paths relative to the root being walked. They match by
exact relative path after normalization: "ignore/" prunes the directory
"ignore" directly under the root, and "file.txt" only skips the file
"file.txt" directly under the root, not every file with that name.

Only regular files (and symlinks to them) are listed. Symlinked
directories are not descended into and are left out, as are fifos,
sockets and device files.
"""

import os
import stat
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Set

from .errors import PathError, TraversalError

log = logging.getLogger("deploy-archive")


def load_ignore_set(ignore: Optional[Iterable[str]]) -> Set[str]:
    """
    Normalize ignore rules into a lookup set.

    Args:
        ignore: Paths relative to the walked root (may be None)

    Returns:
        Set of normalized relative paths

    Raises:
        PathError: If a rule is not a string or contains a NUL byte
    """
    lookup = set()
    for rule in ignore or ():
        if not isinstance(rule, str) or "\x00" in rule:
            raise PathError(f"Invalid ignore rule: {rule!r}")
        lookup.add(os.path.normpath(rule))
    return lookup


def _walk(directory: str, rel: str, ignore_set: Set[str], found: List[Path]) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise TraversalError(f"Cannot read directory '{directory}': {e}") from e

    for entry in entries:
        entry_rel = os.path.join(rel, entry.name) if rel else entry.name
        ignored = entry_rel in ignore_set

        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = not is_dir and entry.is_file()
        except OSError as e:
            raise TraversalError(f"Cannot stat '{entry.path}': {e}") from e

        if is_dir:
            if ignored:
                log.debug(f"Pruning ignored directory: {entry_rel}")
                continue
            _walk(entry.path, entry_rel, ignore_set, found)
        elif ignored:
            log.debug(f"Skipping ignored file: {entry_rel}")
        elif is_file:
            found.append(Path(entry.path))
        else:
            # directory symlinks, fifos, sockets, devices
            log.debug(f"Skipping non-regular file: {entry_rel}")


def expand_source(root, ignore: Optional[Iterable[str]] = None) -> List[Path]:
    """
    Recursively list the files under a source root.

    Args:
        root: File or directory to expand
        ignore: Rules relative to root; matching directories are pruned
            with their whole subtree, matching files are skipped

    Returns:
        Absolute file paths in traversal order. A root that is a single
        file is returned as-is, without any ignore check.

    Raises:
        TraversalError: If root does not exist or a directory cannot be read
        PathError: If an ignore rule is invalid
    """
    ignore_set = load_ignore_set(ignore)
    root_path = os.path.abspath(os.fspath(root))

    try:
        st = os.stat(root_path)
    except FileNotFoundError as e:
        raise TraversalError(f"Source does not exist: '{root_path}'") from e
    except (OSError, ValueError) as e:
        raise TraversalError(f"Cannot access source '{root_path}': {e}") from e

    if not stat.S_ISDIR(st.st_mode):
        return [Path(root_path)]

    found: List[Path] = []
    _walk(root_path, "", ignore_set, found)
    log.debug(f"Expanded '{root_path}' to {len(found)} files")
    return found


def expand_sources(roots: Iterable, ignore: Optional[Iterable[str]] = None) -> List[Path]:
    """
    Expand several roots and concatenate the results in root order.

    The same ignore rules are applied to each root, relative to that root.
    Files reachable from two roots are listed twice.
    """
    ignore = list(ignore or [])
    files: List[Path] = []
    for root in roots:
        files.extend(expand_source(root, ignore))
    return files
