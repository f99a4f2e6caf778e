"""
Bucket Client Interface

The three operations the sync core needs from object storage: paginated
listing, upload of a local file and deletion. Implementations raise
RemoteError for every failure.

Author: bucket_mirror Project
License: MIT
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class ListedObject:
    """An object as reported by a listing page (full key, raw etag)."""
    name: str
    etag: str
    size: Optional[int] = None


@dataclass(frozen=True)
class ListPage:
    """One page of a listing. next_marker is None on the last page."""
    objects: List[ListedObject] = field(default_factory=list)
    next_marker: Optional[str] = None


class BucketClient(ABC):
    """Minimal object storage interface consumed by the sync core."""
    
    @abstractmethod
    def list_page(self, prefix: str, max_keys: int, marker: Optional[str] = None) -> ListPage:
        """List up to max_keys objects under prefix, resuming after marker."""
    
    @abstractmethod
    def put(self, key: str, file_path: str, headers: Optional[Dict[str, str]] = None) -> None:
        """Upload the local file at file_path to key."""
    
    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the object stored at key."""
