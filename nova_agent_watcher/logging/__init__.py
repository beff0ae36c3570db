"""Module de logging."""

from nova_agent_watcher.logging.base import Logger
from nova_agent_watcher.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
