from ddlscribe.config.settings import ConfigManager, DDLConfig, configure_logging, get_config

__all__ = ["ConfigManager", "DDLConfig", "configure_logging", "get_config"]
