"""
bucket_mirror Core Module

Scan, index, diff and apply stages of a sync, and the orchestrator that
runs them in order.

Author: bucket_mirror Project
License: MIT
"""

from .models import Action, ActionType, FileEntry, RemoteObject, ActionOutcome, SyncSummary
from .fingerprint import calculate_file_hash, fingerprint
from .scanner import scan_tree
from .remote_index import build_remote_index
from .reconciler import diff, normalize_digest, summarize
from .applier import Applier, apply_actions
from .orchestrator import SyncOrchestrator, sync

__all__ = [
    'Action', 'ActionType', 'FileEntry', 'RemoteObject', 'ActionOutcome', 'SyncSummary',
    'calculate_file_hash', 'fingerprint', 'scan_tree', 'build_remote_index',
    'diff', 'normalize_digest', 'summarize', 'Applier', 'apply_actions',
    'SyncOrchestrator', 'sync'
]
