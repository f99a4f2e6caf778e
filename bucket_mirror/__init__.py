"""
bucket_mirror

One-way synchronization of a local directory to an object storage bucket.

Author: bucket_mirror Project
License: MIT
"""

from .core import Action, ActionType, SyncOrchestrator, sync
from .errors import SyncError, SourceNotFoundError, RemoteError, ApplyError

__version__ = "0.1.0"
__all__ = [
    'Action', 'ActionType', 'SyncOrchestrator', 'sync',
    'SyncError', 'SourceNotFoundError', 'RemoteError', 'ApplyError'
]
