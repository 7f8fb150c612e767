#!/usr/bin/env python3
"""
Configuration Manager for ddlscribe
Handles environment variables and runtime defaults centrally
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class DDLConfig:
    """ddlscribe configuration settings"""

    # Runtime settings
    log_level: str = "INFO"

    # Statement defaults
    mysql_user_host: str = "%"
    max_name_length: int = 64

    # Profile settings
    profile: str = "dev"  # dev, prod

    def __post_init__(self):
        """Apply environment overrides"""
        self.profile = os.environ.get('DDLSCRIBE_PROFILE', self.profile)
        self.log_level = os.environ.get('DDLSCRIBE_LOG_LEVEL', self.log_level).upper()
        self.mysql_user_host = os.environ.get('DDLSCRIBE_MYSQL_USER_HOST', self.mysql_user_host)
        self.max_name_length = int(os.environ.get('DDLSCRIBE_MAX_NAME_LENGTH', str(self.max_name_length)))

        if self.max_name_length < 1:
            raise ValueError(f"DDLSCRIBE_MAX_NAME_LENGTH must be positive, got {self.max_name_length}")

        # Apply profile defaults if not overridden
        if self.profile == 'prod':
            self.log_level = 'WARNING'

    def get_safe_dict(self) -> Dict[str, Any]:
        """Get configuration as dict (side-effect free)"""
        return {
            'profile': self.profile,
            'log_level': self.log_level,
            'mysql_user_host': self.mysql_user_host,
            'max_name_length': self.max_name_length,
        }


class ConfigManager:
    """Singleton configuration manager"""

    _instance: Optional['ConfigManager'] = None
    _config: Optional[DDLConfig] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._config is None:
            self.load_config()

    def load_config(self, env_file: Optional[Path] = None):
        """Load configuration from environment.

        Priority (highest to lowest):
        1. Environment variables (DDLSCRIBE_*)
        2. .env file (loaded into os.environ before config creation)
        3. DDLConfig dataclass defaults
        """
        if env_file is not None and env_file.exists():
            self._load_env_file(env_file)
        ConfigManager._config = DDLConfig()

    def _load_env_file(self, env_file: Path):
        """Only sets keys not already in os.environ"""
        with open(env_file, 'r') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#') and '=' in line:
                    key, value = line.split('=', 1)
                    key = key.strip()
                    if key not in os.environ:
                        os.environ[key] = value.strip()

    @property
    def config(self) -> DDLConfig:
        if self._config is None:
            self.load_config()
        return self._config

    @classmethod
    def reset(cls):
        """Drop the cached configuration so the next access re-reads the environment"""
        cls._config = None


def get_config() -> DDLConfig:
    """Get the global configuration instance"""
    return ConfigManager().config


def configure_logging(config: Optional[DDLConfig] = None):
    """Configure root logging for applications embedding ddlscribe"""
    config = config or get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
