"""
Local Tree Scanner

Walks the source root and fingerprints every regular file on a worker
pool. Discovery is iterative, so deep trees do not grow the call stack.

Author: bucket_mirror Project
License: MIT
"""

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePath
from typing import List

from ..utils.logger import get_logger
from ..errors import SourceNotFoundError
from .fingerprint import fingerprint
from .models import FileEntry

logger = get_logger(__name__)

DEFAULT_MAX_WORKERS = 8


def _raise_walk_error(error: OSError):
    """os.walk swallows listing errors unless told otherwise."""
    logger.error(f"Cannot read directory {error.filename}: {error}")
    raise error


def discover_files(root_path: str) -> List[str]:
    """
    List every regular file under root_path as a '/'-separated relative key.
    
    Symlinked directories are not descended into; symlinks to files are
    kept and later read through the link.
    
    Args:
        root_path: Directory to walk
        
    Returns:
        Sorted list of relative keys
        
    Raises:
        SourceNotFoundError: If root_path does not exist
        NotADirectoryError: If root_path is not a directory
        OSError: If a directory cannot be read
    """
    root = Path(root_path)
    
    if not root.exists():
        raise SourceNotFoundError(root_path)
    if not root.is_dir():
        raise NotADirectoryError(f"Source is not a directory: {root_path}")
    
    keys = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        for filename in filenames:
            file_path = Path(dirpath) / filename
            if not file_path.is_file():
                # sockets, fifos, dangling links
                logger.debug(f"Skipping non-regular file: {file_path}")
                continue
            keys.append(PurePath(file_path.relative_to(root)).as_posix())
    
    keys.sort()
    return keys


def scan_tree(root_path: str, max_workers: int = DEFAULT_MAX_WORKERS) -> List[FileEntry]:
    """
    Scan a directory tree into fingerprinted entries.
    
    Returns only once every file has been hashed; the first hashing error
    propagates and no partial list is returned.
    
    Args:
        root_path: Source directory
        max_workers: Number of files hashed concurrently
        
    Returns:
        FileEntry list ordered by key
    """
    logger.info(f"Scanning local tree: {root_path}")
    keys = discover_files(root_path)
    root = Path(root_path)
    
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="fingerprint") as pool:
        digests = list(pool.map(lambda key: fingerprint(str(root / key)), keys))
    
    entries = [FileEntry(key=key, digest=digest) for key, digest in zip(keys, digests)]
    logger.info(f"Scanned {len(entries)} files under {root_path}")
    return entries
