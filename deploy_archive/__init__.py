"""
deploy-archive

Packages files and directories into a single zip archive for deployment.

Modules:
- expander: Recursive source expansion with ignore rules
- archive: Zip archive construction
- builder: The complete build step (overwrite policy, base path, status)
- request: Validated build options
- status: Progress reporting
- config: Runtime configuration
"""

__version__ = "1.0.0"

from .archive import ArchiveLocation, archive_entry_name, build_archive
from .builder import run_build
from .config import Config, get_config, reset_config
from .errors import ArchiveError, ArchiveIOError, ConflictError, PathError, TraversalError
from .expander import expand_source, expand_sources, load_ignore_set
from .request import BuildRequest, describe

__all__ = [
    "ArchiveLocation",
    "archive_entry_name",
    "build_archive",
    "run_build",
    "Config",
    "get_config",
    "reset_config",
    "ArchiveError",
    "ArchiveIOError",
    "ConflictError",
    "PathError",
    "TraversalError",
    "expand_source",
    "expand_sources",
    "load_ignore_set",
    "BuildRequest",
    "describe",
]
