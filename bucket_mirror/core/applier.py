"""
Action Applier

Dispatches a diff against the bucket on a worker pool. Every action is
attempted; failures are collected and raised together once all work has
finished.

Author: bucket_mirror Project
License: MIT
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from ..storage.base import BucketClient
from ..utils.logger import get_logger
from ..errors import ApplyError
from .models import Action, ActionOutcome, ActionType

logger = get_logger(__name__)

DEFAULT_MAX_WORKERS = 8

ActionCallback = Callable[[Action], None]


class Applier:
    """
    Applies actions to a bucket under a key prefix.
    
    Uploads read from the source directory; Delete removes prefix+key;
    Unchanged makes no network call.
    """
    
    def __init__(
        self,
        bucket: BucketClient,
        source: str,
        prefix: str = "",
        headers: Optional[Dict[str, str]] = None,
        max_workers: int = DEFAULT_MAX_WORKERS
    ):
        """
        Initialize applier.
        
        Args:
            bucket: Bucket client to write to
            source: Local source root the keys are relative to
            prefix: Key prefix prepended to every remote key
            headers: Transport headers applied to every upload
            max_workers: Maximum concurrent bucket operations
        """
        self.bucket = bucket
        self.source = Path(source)
        self.prefix = prefix
        self.headers = dict(headers or {})
        self.max_workers = max_workers
    
    def apply_one(self, action: Action) -> ActionOutcome:
        """Dispatch a single action and capture its outcome."""
        remote_key = self.prefix + action.key
        try:
            if action.needs_upload:
                self.bucket.put(remote_key, str(self.source / action.key), self.headers)
            elif action.type == ActionType.DELETE:
                self.bucket.delete(remote_key)
        except Exception as e:
            logger.error(f"{action.report_line()} failed: {e}")
            return ActionOutcome(action=action, error=e)
        
        logger.info(action.report_line())
        return ActionOutcome(action=action)
    
    def apply(self, actions: Sequence[Action], on_action: Optional[ActionCallback] = None) -> List[Action]:
        """
        Apply all actions concurrently and wait for every one of them.
        
        Args:
            actions: Diff produced by the reconciler
            on_action: Called with each successfully applied action
            
        Returns:
            The actions, in input order
            
        Raises:
            ApplyError: If any action failed, after all were attempted
        """
        if not actions:
            return []
        
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="apply") as pool:
            outcomes = list(pool.map(self.apply_one, actions))
        
        completed = [outcome.action for outcome in outcomes if outcome.succeeded]
        failures = [outcome for outcome in outcomes if not outcome.succeeded]
        
        if on_action:
            for action in completed:
                on_action(action)
        
        if failures:
            logger.error(f"{len(failures)} of {len(outcomes)} actions failed")
            raise ApplyError(failures, completed)
        
        return list(actions)


def apply_actions(
    bucket: BucketClient,
    source: str,
    prefix: str,
    actions: Sequence[Action],
    headers: Optional[Dict[str, str]] = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
    on_action: Optional[ActionCallback] = None
) -> List[Action]:
    """Convenience wrapper around Applier.apply."""
    applier = Applier(bucket, source, prefix=prefix, headers=headers, max_workers=max_workers)
    return applier.apply(actions, on_action=on_action)
