"""
Sync Errors

Exception taxonomy for a sync run. Local read failures are not wrapped:
the builtin OSError raised by the filesystem propagates as is.

Author: bucket_mirror Project
License: MIT
"""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .core.models import Action, ActionOutcome


class SyncError(Exception):
    """Base class for errors raised by a sync run."""


class SourceNotFoundError(SyncError, FileNotFoundError):
    """The local source root does not exist."""
    
    def __init__(self, path: str):
        super().__init__(f"Source directory not found: {path}")
        self.path = path


class RemoteError(SyncError):
    """
    A bucket operation (list, put or delete) failed.
    
    Attributes:
        operation: Name of the bucket operation that failed
        key: Full object key involved, if any
    """
    
    def __init__(self, message: str, operation: Optional[str] = None, key: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
        self.key = key


class ApplyError(RemoteError):
    """
    One or more actions failed while applying a diff.
    
    Every action is attempted before this is raised, so ``completed`` lists
    the actions that did reach the bucket and stay applied.
    """
    
    def __init__(self, failures: List["ActionOutcome"], completed: List["Action"]):
        keys = ", ".join(outcome.action.key for outcome in failures[:5])
        if len(failures) > 5:
            keys += ", ..."
        super().__init__(
            f"{len(failures)} of {len(failures) + len(completed)} actions failed: {keys}",
            operation="apply"
        )
        self.failures = failures
        self.completed = completed
