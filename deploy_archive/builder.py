"""
Build step for deploy-archive

Resolves the application directory against a working directory, expands
every source, picks the base path for entry names and writes the archive
into the application directory.
"""

import os
import logging
from typing import Optional

from .archive import ArchiveLocation, build_archive
from .config import get_config
from .errors import ArchiveError, ConflictError
from .expander import expand_sources
from .request import BuildRequest
from .status import STATUS_ERROR, STATUS_OK, LogStatus, Status

log = logging.getLogger("deploy-archive")


def resolve_base_path(app_dir: str, collapse_top_level_folder: bool) -> str:
    """
    Directory that archive entry names are relative to.

    With collapse_top_level_folder the archive holds only the contents of
    app_dir; otherwise app_dir's own name is the top-level folder.
    """
    if collapse_top_level_folder:
        return app_dir
    return os.path.dirname(app_dir)


def run_build(
    request: BuildRequest,
    source_path: str = ".",
    work_dir: Optional[str] = None,
    status: Optional[Status] = None,
) -> ArchiveLocation:
    """
    Package the request's sources into a zip archive.

    Args:
        request: Validated build options
        source_path: Application path, relative to work_dir
        work_dir: Working directory (default: from config, else process cwd)
        status: Progress reporter (default: LogStatus)

    Returns:
        ArchiveLocation of the written archive

    Raises:
        ConflictError: If the output exists and overwrite_existing is false
        TraversalError: If a source cannot be expanded
        PathError: If a source lies outside the base path
        ArchiveIOError: If writing the archive fails
    """
    log.debug(f"Creating a new archive: {request.model_dump()}")

    with status or LogStatus() as st:
        st.update("Creating archive")

        cwd = os.path.abspath(work_dir) if work_dir else get_config().resolve_work_dir()
        app_dir = os.path.normpath(os.path.join(cwd, source_path))
        output_path = os.path.join(app_dir, request.output_name)

        if not request.overwrite_existing and os.path.exists(output_path):
            st.step(STATUS_ERROR, "Output file already exists")
            raise ConflictError(f"Output file already exists: '{output_path}'")

        roots = [os.path.join(app_dir, src) for src in request.sources]
        try:
            files = expand_sources(roots, request.ignore)
        except ArchiveError:
            st.step(STATUS_ERROR, "Error expanding source")
            raise
        log.info(f"Expanded {len(roots)} sources to {len(files)} files")

        base_path = resolve_base_path(app_dir, request.collapse_top_level_folder)

        try:
            location = build_archive(files, base_path, output_path)
        except ArchiveError:
            st.step(STATUS_ERROR, "Archive failed")
            raise

        st.step(STATUS_OK, f"Archive saved to '{location.output_path}'")

    return location
