"""
bucket_mirror Utilities

Logging helpers shared by every module.

Author: bucket_mirror Project
License: MIT
"""

from .logger import get_logger, setup_logging

__all__ = ['get_logger', 'setup_logging']
