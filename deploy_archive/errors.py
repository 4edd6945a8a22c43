"""
Error types for deploy-archive

Every failure of a build is reported as a single ArchiveError subclass.
None of them are retried internally; callers decide whether to run the
whole build again.
"""


class ArchiveError(Exception):
    """Base class for all build failures"""


class TraversalError(ArchiveError):
    """A source root is missing or a directory could not be read"""


class PathError(ArchiveError):
    """A path could not be made relative to the base path, or an ignore rule is invalid"""


class ArchiveIOError(ArchiveError):
    """Creating, writing or closing the archive (or reading a source file) failed"""


class ConflictError(ArchiveError):
    """The output archive already exists and overwriting is not allowed"""
