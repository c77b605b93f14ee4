"""Custom exceptions for git-tree-status"""

from pathlib import Path
from typing import Optional, Union


class GitTreeStatusError(Exception):
    """Base exception for all git-tree-status errors."""
    pass


class ScanError(GitTreeStatusError):
    """Exception raised when a directory cannot be listed."""

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause

        error_msg = f"Error scanning for folders in '{path}'"
        if cause is not None:
            error_msg += f": {cause}"

        super().__init__(error_msg)


class PathEncodingError(GitTreeStatusError):
    """Exception raised when a path name cannot be displayed as text."""

    def __init__(self, path: Union[str, Path]):
        self.path = path
        super().__init__(f"Cannot get file name as a string: {path!r}")


class VcsBackendError(GitTreeStatusError):
    """Exception raised for errors in version control queries."""

    def __init__(
        self,
        operation: str,
        path: Optional[Union[str, Path]] = None,
        message: Optional[str] = None,
    ):
        self.operation = operation
        self.path = path
        self.message = message

        error_msg = f"VCS operation '{operation}' failed"
        if path is not None:
            error_msg += f" for '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class NotARepositoryError(VcsBackendError):
    """Exception raised when a path is not a repository."""

    def __init__(self, path: Union[str, Path]):
        super().__init__("open", path, "Not a repository")
