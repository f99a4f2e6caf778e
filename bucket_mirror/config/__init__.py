"""
bucket_mirror Configuration Module

Configuration loading and validation: YAML file, environment overrides
and target URL parsing.

Author: bucket_mirror Project
License: MIT
"""

from .target import TargetLocator
from .schema import Config, SyncConfig, LoggingConfig, LogLevel
from .config_loader import ConfigLoader, load_config

__all__ = [
    'TargetLocator', 'Config', 'SyncConfig', 'LoggingConfig', 'LogLevel',
    'ConfigLoader', 'load_config'
]
