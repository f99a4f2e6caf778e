"""
S3-Compatible Bucket Client

BucketClient backed by boto3. Works against AWS S3 and the S3-compatible
APIs of other providers (Aliyun OSS, MinIO, SeaweedFS) through a custom
endpoint URL.

Author: bucket_mirror Project
License: MIT
"""

import mimetypes
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from ..errors import RemoteError
from ..utils.logger import get_logger
from .base import BucketClient, ListedObject, ListPage

logger = get_logger(__name__)

# Transport header -> put_object parameter
HEADER_PARAMS = {
    "cache-control": "CacheControl",
    "content-type": "ContentType",
    "content-disposition": "ContentDisposition",
    "content-encoding": "ContentEncoding",
    "content-language": "ContentLanguage",
    "expires": "Expires",
    "x-amz-acl": "ACL",
    "x-amz-storage-class": "StorageClass",
}
METADATA_HEADER_PREFIX = "x-amz-meta-"


def is_supported_header(name: str) -> bool:
    """Whether a transport header can be applied to uploads."""
    lowered = name.lower()
    return lowered in HEADER_PARAMS or (
        lowered.startswith(METADATA_HEADER_PREFIX) and len(lowered) > len(METADATA_HEADER_PREFIX)
    )


def headers_to_put_params(headers: Optional[Dict[str, str]]) -> Dict[str, Any]:
    """
    Translate transport headers into put_object keyword arguments.
    
    Args:
        headers: Header name -> value, names matched case-insensitively
        
    Returns:
        Keyword arguments for put_object
        
    Raises:
        ValueError: If a header has no put_object equivalent
    """
    params: Dict[str, Any] = {}
    metadata: Dict[str, str] = {}
    
    for name, value in (headers or {}).items():
        lowered = name.lower()
        if lowered in HEADER_PARAMS:
            params[HEADER_PARAMS[lowered]] = value
        elif is_supported_header(lowered):
            metadata[lowered[len(METADATA_HEADER_PREFIX):]] = value
        else:
            raise ValueError(f"Unsupported upload header: {name}")
    
    if metadata:
        params["Metadata"] = metadata
    return params


class S3Bucket(BucketClient):
    """S3-compatible bucket client."""
    
    def __init__(
        self,
        bucket_name: str,
        endpoint_url: Optional[str] = None,
        access_key_id: Optional[str] = None,
        access_key_secret: Optional[str] = None,
        region: Optional[str] = None,
        client: Optional[Any] = None
    ):
        """
        Initialize the bucket client.
        
        Args:
            bucket_name: Bucket to operate on
            endpoint_url: Custom endpoint (None uses AWS)
            access_key_id: Access key identity
            access_key_secret: Access key secret
            region: Region name for request signing
            client: Pre-built boto3 S3 client (overrides the other options)
        """
        self.bucket_name = bucket_name
        
        if client is not None:
            self._client = client
            return
        
        kwargs: Dict[str, Any] = {
            "config": BotoConfig(
                region_name=region,
                signature_version="s3v4",
                retries={"max_attempts": 3, "mode": "standard"},
            ),
        }
        if access_key_id and access_key_secret:
            kwargs["aws_access_key_id"] = access_key_id
            kwargs["aws_secret_access_key"] = access_key_secret
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        
        self._client = boto3.client("s3", **kwargs)
        logger.debug(f"S3Bucket initialized for {bucket_name} ({endpoint_url or 'aws'})")
    
    def list_page(self, prefix: str, max_keys: int, marker: Optional[str] = None) -> ListPage:
        params: Dict[str, Any] = {
            "Bucket": self.bucket_name,
            "Prefix": prefix,
            "MaxKeys": max_keys,
        }
        if marker:
            params["ContinuationToken"] = marker
        
        try:
            response = self._client.list_objects_v2(**params)
        except (BotoCoreError, ClientError) as e:
            raise RemoteError(f"Listing {self.bucket_name}/{prefix} failed: {e}", operation="list", key=prefix) from e
        
        objects = [
            ListedObject(name=obj["Key"], etag=obj.get("ETag", ""), size=obj.get("Size"))
            for obj in response.get("Contents", [])
        ]
        next_marker = response.get("NextContinuationToken") if response.get("IsTruncated") else None
        return ListPage(objects=objects, next_marker=next_marker)
    
    def put(self, key: str, file_path: str, headers: Optional[Dict[str, str]] = None) -> None:
        params = headers_to_put_params(headers)
        if "ContentType" not in params:
            guessed, _ = mimetypes.guess_type(file_path)
            if guessed:
                params["ContentType"] = guessed
        
        try:
            with open(file_path, "rb") as body:
                self._client.put_object(Bucket=self.bucket_name, Key=key, Body=body, **params)
        except (BotoCoreError, ClientError) as e:
            raise RemoteError(f"Upload of {key} failed: {e}", operation="put", key=key) from e
    
    def delete(self, key: str) -> None:
        try:
            self._client.delete_object(Bucket=self.bucket_name, Key=key)
        except (BotoCoreError, ClientError) as e:
            raise RemoteError(f"Delete of {key} failed: {e}", operation="delete", key=key) from e
