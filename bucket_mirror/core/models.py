"""
Sync Data Model

Immutable records flowing through the scan, diff and apply stages.

Author: bucket_mirror Project
License: MIT
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class ActionType(str, Enum):
    """Kind of change an action applies. The value is its report symbol."""
    CREATE = "+"
    UPDATE = "*"
    DELETE = "-"
    UNCHANGED = "="


@dataclass(frozen=True)
class FileEntry:
    """A regular file found under the source root."""
    key: str  # relative path, '/' separated
    digest: str  # lowercase hex MD5


@dataclass(frozen=True)
class RemoteObject:
    """An object listed under the target prefix, with the prefix stripped."""
    key: str
    stored_digest: str  # etag as reported, may be quoted/uppercase
    size: Optional[int] = None


@dataclass(frozen=True)
class Action:
    """A single reconciliation step for one key."""
    type: ActionType
    key: str
    digest: Optional[str] = None
    
    @property
    def needs_upload(self) -> bool:
        return self.type in (ActionType.CREATE, ActionType.UPDATE)
    
    def report_line(self) -> str:
        """Render as '<symbol> <key>'."""
        return f"{self.type.value} {self.key}"


@dataclass(frozen=True)
class ActionOutcome:
    """Result of dispatching one action against the bucket."""
    action: Action
    error: Optional[BaseException] = None
    
    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class SyncSummary:
    """Per-type action counts for a sync run."""
    counts: Dict[ActionType, int] = field(
        default_factory=lambda: {action_type: 0 for action_type in ActionType}
    )
    
    @property
    def created(self) -> int:
        return self.counts[ActionType.CREATE]
    
    @property
    def updated(self) -> int:
        return self.counts[ActionType.UPDATE]
    
    @property
    def deleted(self) -> int:
        return self.counts[ActionType.DELETE]
    
    @property
    def unchanged(self) -> int:
        return self.counts[ActionType.UNCHANGED]
    
    @property
    def total(self) -> int:
        return sum(self.counts.values())
    
    def __str__(self) -> str:
        return (
            f"{self.created} created, {self.updated} updated, "
            f"{self.deleted} deleted, {self.unchanged} unchanged"
        )
