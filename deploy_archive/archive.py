"""
Archive Builder for deploy-archive

Writes an expanded file list into a zip archive. Entry names are the
file paths made relative to a base path, which is how the caller chooses
whether the source directory itself appears as a top-level folder.
"""

import os
import logging
import zipfile
from dataclasses import dataclass
from typing import Iterable

from .errors import ArchiveIOError, PathError

log = logging.getLogger("deploy-archive")


@dataclass(frozen=True)
class ArchiveLocation:
    """Where a finished archive was written"""

    output_path: str
    entry_count: int = 0


def archive_entry_name(path, base_path) -> str:
    """
    Compute the in-archive name of a file.

    Args:
        path: File to store
        base_path: Directory the entry name is relative to

    Returns:
        Forward-slash separated relative path

    Raises:
        PathError: If path does not lie under base_path
    """
    abs_path = os.path.abspath(os.fspath(path))
    abs_base = os.path.abspath(os.fspath(base_path))

    try:
        rel = os.path.relpath(abs_path, abs_base)
    except ValueError as e:
        # different drives on Windows
        raise PathError(f"Cannot make '{abs_path}' relative to '{abs_base}': {e}") from e

    if rel in (os.curdir, os.pardir) or rel.startswith(os.pardir + os.sep):
        raise PathError(f"'{abs_path}' is not under base path '{abs_base}'")

    return rel.replace(os.sep, "/")


def build_archive(files: Iterable, base_path, output_path) -> ArchiveLocation:
    """
    Create a zip archive from a list of files.

    The output file is created or truncated. Files are stored in the
    given order with deflate compression. A file that resolves to the
    output path itself is skipped so the archive never contains itself.

    On failure the partially written archive is left on disk.

    Args:
        files: Files to store, each under base_path
        base_path: Directory entry names are relative to
        output_path: Archive file to write

    Returns:
        ArchiveLocation of the written archive

    Raises:
        PathError: If a file is not under base_path
        ArchiveIOError: If the archive cannot be written or a file cannot be read
    """
    output = os.path.abspath(os.fspath(output_path))
    count = 0

    try:
        with zipfile.ZipFile(output, "w", zipfile.ZIP_DEFLATED, strict_timestamps=False) as zf:
            for f in files:
                abs_f = os.path.abspath(os.fspath(f))

                # the archive may live inside one of the sources
                if abs_f == output:
                    log.debug(f"Skipping output archive: {abs_f}")
                    continue

                name = archive_entry_name(abs_f, base_path)
                log.debug(f"Adding: {name}")
                zf.write(abs_f, name)
                count += 1
    except OSError as e:
        log.error(f"✗ Writing archive '{output}' failed: {e}")
        raise ArchiveIOError(f"Writing archive '{output}' failed: {e}") from e

    size_mb = os.path.getsize(output) / 1024 / 1024
    log.info(f"✓ Created {os.path.basename(output)} ({count} entries, {size_mb:.2f} MB)")

    return ArchiveLocation(output_path=output, entry_count=count)
