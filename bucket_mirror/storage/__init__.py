"""
bucket_mirror Storage Module

Object storage clients used by the sync core.

Author: bucket_mirror Project
License: MIT
"""

from .base import BucketClient, ListedObject, ListPage
from .s3_bucket import S3Bucket
from .factory import create_bucket_client

__all__ = ['BucketClient', 'ListedObject', 'ListPage', 'S3Bucket', 'create_bucket_client']
