"""Module de gestion des erreurs."""

from nova_agent_watcher.errors.base import ErrorHandler, ErrorHandlerChain
from nova_agent_watcher.errors.exceptions import (ApplicationError,
                                                  ConfigurationError,
                                                  FileConfigurationError,
                                                  ValidationError,
                                                  CloudConfigError,
                                                  TranslationError,
                                                  ServiceManagerError,
                                                  HandlerNotFoundError,
                                                  WatchError)
from nova_agent_watcher.errors.console_handler import ConsoleErrorHandler
from nova_agent_watcher.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ValidationError",
    "CloudConfigError",
    "TranslationError",
    "ServiceManagerError",
    "HandlerNotFoundError",
    "WatchError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
