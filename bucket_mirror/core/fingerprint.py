"""
Content Fingerprinting

Streams a file through an incremental hash. MD5 is the default because
S3-compatible stores report the MD5 of a single-part upload as its etag,
so local and remote digests can be compared directly.

Author: bucket_mirror Project
License: MIT
"""

import os
import hashlib

from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ALGORITHM = "md5"
CHUNK_SIZE = 65536  # 64KB chunks for hashing


def calculate_file_hash(file_path: str, algorithm: str = DEFAULT_ALGORITHM, chunk_size: int = CHUNK_SIZE) -> str:
    """
    Calculate hash of a file without loading it into memory.
    
    Args:
        file_path: Path to the file
        algorithm: Hash algorithm (md5, sha1, sha256, etc.)
        chunk_size: Size of chunks to read (bytes)
        
    Returns:
        Lowercase hexadecimal hash string
        
    Raises:
        FileNotFoundError: If file doesn't exist
        OSError: If the file cannot be opened or a read fails
        ValueError: If algorithm is unsupported
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")
    
    try:
        hash_func = hashlib.new(algorithm)
    except ValueError:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")
    
    try:
        with open(file_path, 'rb') as f:
            while chunk := f.read(chunk_size):
                hash_func.update(chunk)
    except OSError as e:
        logger.error(f"Error reading {file_path}: {e}")
        raise
    
    return hash_func.hexdigest()


def fingerprint(file_path: str) -> str:
    """Content-MD5 compatible fingerprint of a file."""
    return calculate_file_hash(file_path)
