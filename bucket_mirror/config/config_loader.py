"""
Configuration Loader

Loads the YAML config file, merges environment variables and explicit
overrides, and validates the result.

Author: bucket_mirror Project
License: MIT
"""

import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dotenv import load_dotenv

from .schema import Config

ENV_PREFIX = "BUCKET_MIRROR_"


class ConfigLoader:
    """
    Configuration loader.
    
    Precedence, lowest to highest: YAML file, environment variables,
    explicit overrides (command-line arguments).
    """
    
    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration loader.
        
        Args:
            config_path: Path to the YAML config file. If None, uses
                BUCKET_MIRROR_CONFIG when set; otherwise no file is read.
        """
        # Load environment variables from .env if present
        load_dotenv()
        
        self.config_path = config_path or os.getenv(f"{ENV_PREFIX}CONFIG")
        self._config: Optional[Config] = None
    
    def load(self, overrides: Optional[Dict[str, Any]] = None) -> Config:
        """
        Load and validate configuration.
        
        Args:
            overrides: Nested dict merged over file and environment values
        
        Returns:
            Validated Config object
            
        Raises:
            FileNotFoundError: If an explicit config file doesn't exist
            ValueError: If YAML parsing or validation fails
        """
        config_data = self._load_yaml()
        config_data = self._merge_env_vars(config_data)
        config_data = self._merge_overrides(config_data, overrides or {})
        
        self._config = Config(**config_data)
        return self._config
    
    def _load_yaml(self) -> Dict[str, Any]:
        """
        Load YAML configuration file.
        
        Returns:
            Dictionary with configuration data
        """
        if not self.config_path:
            return {}
        
        config_file = Path(self.config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")
        
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML config: {e}")
        
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {self.config_path}")
        return data
    
    def _merge_env_vars(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge environment variables into configuration.
        
        Naming convention: BUCKET_MIRROR_<KEY> (e.g. BUCKET_MIRROR_TARGET).
        
        Args:
            config_data: Configuration dictionary from file
            
        Returns:
            Merged configuration dictionary
        """
        if os.getenv(f"{ENV_PREFIX}SOURCE"):
            config_data.setdefault("sync", {})["source"] = os.getenv(f"{ENV_PREFIX}SOURCE")
        if os.getenv(f"{ENV_PREFIX}TARGET"):
            config_data.setdefault("sync", {})["target"] = os.getenv(f"{ENV_PREFIX}TARGET")
        if os.getenv(f"{ENV_PREFIX}MAX_WORKERS"):
            config_data.setdefault("sync", {})["max_workers"] = int(os.getenv(f"{ENV_PREFIX}MAX_WORKERS"))
        
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            config_data.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL").upper()
        if os.getenv(f"{ENV_PREFIX}LOG_JSON"):
            config_data.setdefault("logging", {})["json_format"] = os.getenv(f"{ENV_PREFIX}LOG_JSON").lower() == "true"
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            logging_data = config_data.setdefault("logging", {})
            logging_data["log_to_file"] = True
            logging_data["log_file_path"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")
        
        return config_data
    
    def _merge_overrides(self, config_data: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Merge explicit overrides section by section, skipping None values."""
        for section, values in overrides.items():
            target = config_data.setdefault(section, {})
            for key, value in values.items():
                if value is None:
                    continue
                if isinstance(value, dict) and isinstance(target.get(key), dict):
                    target[key] = {**target[key], **value}
                else:
                    target[key] = value
        return config_data
    
    @property
    def config(self) -> Optional[Config]:
        """Get the current configuration object."""
        return self._config


def load_config(config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Config:
    """
    Convenience function to load configuration.
    
    Args:
        config_path: Optional path to config file
        overrides: Optional explicit overrides
        
    Returns:
        Loaded and validated Config object
    """
    loader = ConfigLoader(config_path)
    return loader.load(overrides)
