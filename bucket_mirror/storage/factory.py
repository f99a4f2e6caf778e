"""
Bucket Client Factory

Author: bucket_mirror Project
License: MIT
"""

from ..config.target import TargetLocator
from .base import BucketClient
from .s3_bucket import S3Bucket


def create_bucket_client(locator: TargetLocator) -> BucketClient:
    """Build the bucket client for a parsed target."""
    return S3Bucket(
        bucket_name=locator.bucket,
        endpoint_url=locator.endpoint_url,
        access_key_id=locator.access_key_id,
        access_key_secret=locator.access_key_secret,
    )
