"""
Reconciler

Pure diff between the local scan and the remote index. No I/O happens
here; the only side effect is that matched keys are claimed (popped) from
the index, which belongs to the caller's sync run.

Author: bucket_mirror Project
License: MIT
"""

from typing import Dict, Iterable, List

from .models import Action, ActionType, FileEntry, RemoteObject, SyncSummary


def normalize_digest(value: str) -> str:
    """Strip surrounding quotes from an etag and lowercase it."""
    return value.strip('"').lower()


def diff(local_entries: Iterable[FileEntry], remote_index: Dict[str, RemoteObject]) -> List[Action]:
    """
    Compute the actions that make the remote side match the local side.
    
    Create/Update/Unchanged follow the local order; Delete actions for the
    unclaimed remote keys are appended in index order.
    
    Args:
        local_entries: Scanned local files
        remote_index: Remote objects by key; consumed by this call
        
    Returns:
        One action per key in the union of local and remote keys
    """
    actions: List[Action] = []
    
    for entry in local_entries:
        remote = remote_index.pop(entry.key, None)
        if remote is None:
            action_type = ActionType.CREATE
        elif normalize_digest(remote.stored_digest) == entry.digest:
            action_type = ActionType.UNCHANGED
        else:
            action_type = ActionType.UPDATE
        actions.append(Action(type=action_type, key=entry.key, digest=entry.digest))
    
    actions.extend(Action(type=ActionType.DELETE, key=key) for key in remote_index)
    remote_index.clear()
    
    return actions


def summarize(actions: Iterable[Action]) -> SyncSummary:
    """Count actions by type."""
    summary = SyncSummary()
    for action in actions:
        summary.counts[action.type] += 1
    return summary
