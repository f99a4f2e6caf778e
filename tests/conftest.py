"""
Shared Test Fixtures

In-memory bucket used by the applier and orchestrator tests.

Author: bucket_mirror Project
License: MIT
"""

import hashlib
import threading
from collections import Counter
from typing import Dict, Optional, Set

import pytest

from bucket_mirror.errors import RemoteError
from bucket_mirror.storage.base import BucketClient, ListedObject, ListPage


class MemoryBucket(BucketClient):
    """
    Bucket kept in a dict. Etags are stored quoted and uppercase, the way
    some backends report them, so digest normalization is exercised.
    """
    
    def __init__(self, objects: Optional[Dict[str, bytes]] = None):
        self.objects: Dict[str, bytes] = {}
        self.etags: Dict[str, str] = {}
        self.headers: Dict[str, Dict[str, str]] = {}
        self.calls = Counter()
        self.put_keys = []
        self.deleted_keys = []
        self.fail_keys: Set[str] = set()
        self.fail_listing = False
        self._lock = threading.Lock()
        
        for key, data in (objects or {}).items():
            self._store(key, data)
    
    def _store(self, key: str, data: bytes):
        self.objects[key] = data
        self.etags[key] = '"' + hashlib.md5(data).hexdigest().upper() + '"'
    
    def list_page(self, prefix: str, max_keys: int, marker: Optional[str] = None) -> ListPage:
        with self._lock:
            self.calls["list"] += 1
            if self.fail_listing:
                raise RemoteError("listing unavailable", operation="list", key=prefix)
            
            keys = sorted(k for k in self.objects if k.startswith(prefix) and (marker is None or k > marker))
            page_keys = keys[:max_keys]
            objects = [ListedObject(name=k, etag=self.etags[k], size=len(self.objects[k])) for k in page_keys]
            next_marker = page_keys[-1] if len(keys) > max_keys else None
            return ListPage(objects=objects, next_marker=next_marker)
    
    def put(self, key: str, file_path: str, headers: Optional[Dict[str, str]] = None) -> None:
        with self._lock:
            self.calls["put"] += 1
            if key in self.fail_keys:
                raise RemoteError(f"upload of {key} rejected", operation="put", key=key)
        
        with open(file_path, "rb") as f:
            data = f.read()
        
        with self._lock:
            self._store(key, data)
            self.headers[key] = dict(headers or {})
            self.put_keys.append(key)
    
    def delete(self, key: str) -> None:
        with self._lock:
            self.calls["delete"] += 1
            if key in self.fail_keys:
                raise RemoteError(f"delete of {key} rejected", operation="delete", key=key)
            self.objects.pop(key, None)
            self.etags.pop(key, None)
            self.deleted_keys.append(key)


@pytest.fixture
def memory_bucket():
    """Empty in-memory bucket."""
    return MemoryBucket()


@pytest.fixture
def source_tree(tmp_path):
    """Small local tree with a nested directory."""
    root = tmp_path / "site"
    (root / "css").mkdir(parents=True)
    (root / "index.html").write_text("<html>home</html>")
    (root / "about.html").write_text("<html>about</html>")
    (root / "css" / "main.css").write_text("body { margin: 0 }")
    return root
