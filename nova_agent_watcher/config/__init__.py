"""Module de configuration."""

from nova_agent_watcher.config.loader import (
    ConfigLoader,
    FileConfigLoader,
)
from nova_agent_watcher.config.settings import (
    AgentSettings,
    WatcherSettings,
    DeploySettings,
    SystemdSettings,
    LoggingSettings,
    load_settings,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "AgentSettings",
    "WatcherSettings",
    "DeploySettings",
    "SystemdSettings",
    "LoggingSettings",
    "load_settings",
]
