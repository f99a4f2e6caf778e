"""
Remote Index Builder

Pages through the bucket listing under a prefix and indexes the objects
by their prefix-relative key.

Author: bucket_mirror Project
License: MIT
"""

from typing import Dict

from ..storage.base import BucketClient
from ..utils.logger import get_logger
from ..errors import RemoteError
from .models import RemoteObject

logger = get_logger(__name__)

PAGE_SIZE = 1000


def build_remote_index(bucket: BucketClient, prefix: str, page_size: int = PAGE_SIZE) -> Dict[str, RemoteObject]:
    """
    Build the key -> RemoteObject index for everything under prefix.
    
    Pages are requested in a loop until the backend returns no continuation
    marker. A key seen on more than one page keeps the last listing.
    
    Args:
        bucket: Bucket client to list from
        prefix: Key prefix the sync is scoped to (stripped from keys)
        page_size: Objects requested per page
        
    Returns:
        Index of remote objects keyed by relative key
        
    Raises:
        RemoteError: If any page fails; no partial index is returned
    """
    logger.info(f"Listing remote objects under '{prefix}'")
    index: Dict[str, RemoteObject] = {}
    marker = None
    pages = 0
    
    while True:
        try:
            page = bucket.list_page(prefix, page_size, marker)
        except RemoteError as e:
            logger.error(f"Listing failed after {pages} pages: {e}")
            raise
        pages += 1
        
        for listed in page.objects:
            key = listed.name[len(prefix):] if listed.name.startswith(prefix) else listed.name
            if key in index:
                logger.warning(f"Duplicate key in listing, keeping the later entry: {key}")
            index[key] = RemoteObject(key=key, stored_digest=listed.etag, size=listed.size)
        
        if page.next_marker is None:
            break
        marker = page.next_marker
    
    logger.info(f"Indexed {len(index)} remote objects from {pages} pages")
    return index
