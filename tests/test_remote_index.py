"""
Unit Tests for Remote Index Builder

Author: bucket_mirror Project
License: MIT
"""

import pytest

from bucket_mirror.core.remote_index import build_remote_index
from bucket_mirror.errors import RemoteError
from bucket_mirror.storage.base import BucketClient, ListedObject, ListPage


class ScriptedBucket(BucketClient):
    """Returns pre-built listing pages keyed by marker."""
    
    def __init__(self, pages, fail_on_marker=None):
        self.pages = pages
        self.fail_on_marker = fail_on_marker
        self.requests = []
    
    def list_page(self, prefix, max_keys, marker=None):
        self.requests.append((prefix, max_keys, marker))
        if marker is not None and marker == self.fail_on_marker:
            raise RemoteError("page failed", operation="list", key=prefix)
        return self.pages[marker]
    
    def put(self, key, file_path, headers=None):
        raise AssertionError("put must not be called while indexing")
    
    def delete(self, key):
        raise AssertionError("delete must not be called while indexing")


def make_objects(prefix, start, count):
    return [
        ListedObject(name=f"{prefix}file{i:05d}.txt", etag=f'"{i:032x}"', size=i)
        for i in range(start, start + count)
    ]


class TestBuildRemoteIndex:
    """Test suite for remote index building."""
    
    def test_prefix_is_stripped(self):
        """Test that keys are relative to the prefix."""
        bucket = ScriptedBucket({
            None: ListPage(objects=[
                ListedObject(name="www/index.html", etag='"ABC"'),
                ListedObject(name="www/css/main.css", etag='"DEF"'),
            ])
        })
        
        index = build_remote_index(bucket, "www/")
        
        assert set(index) == {"index.html", "css/main.css"}
        assert index["index.html"].stored_digest == '"ABC"'
        assert bucket.requests == [("www/", 1000, None)]
    
    def test_two_pages(self):
        """Test 1500 objects across two pages of 1000."""
        bucket = ScriptedBucket({
            None: ListPage(objects=make_objects("p/", 0, 1000), next_marker="p/file00999.txt"),
            "p/file00999.txt": ListPage(objects=make_objects("p/", 1000, 500)),
        })
        
        index = build_remote_index(bucket, "p/", page_size=1000)
        
        assert len(index) == 1500
        assert "file00000.txt" in index
        assert "file01499.txt" in index
        assert [request[2] for request in bucket.requests] == [None, "p/file00999.txt"]
    
    def test_empty_listing(self):
        bucket = ScriptedBucket({None: ListPage()})
        
        assert build_remote_index(bucket, "p/") == {}
    
    def test_empty_prefix_keeps_full_names(self):
        bucket = ScriptedBucket({None: ListPage(objects=[ListedObject(name="a/b.txt", etag="x")])})
        
        assert list(build_remote_index(bucket, "")) == ["a/b.txt"]
    
    def test_failed_page_aborts_build(self):
        """Test that no partial index is returned when a page fails."""
        bucket = ScriptedBucket(
            {None: ListPage(objects=make_objects("p/", 0, 10), next_marker="m1")},
            fail_on_marker="m1"
        )
        
        with pytest.raises(RemoteError):
            build_remote_index(bucket, "p/")
    
    def test_duplicate_keys_keep_later_page(self):
        """Test that a key listed twice keeps the last listing."""
        bucket = ScriptedBucket({
            None: ListPage(objects=[ListedObject(name="p/a.txt", etag='"old"')], next_marker="m1"),
            "m1": ListPage(objects=[ListedObject(name="p/a.txt", etag='"new"')]),
        })
        
        index = build_remote_index(bucket, "p/")
        
        assert len(index) == 1
        assert index["a.txt"].stored_digest == '"new"'


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
