"""Implémentation concrète du logger avec fichier et/ou console."""

import logging
import os
from typing import Optional, TYPE_CHECKING

from nova_agent_watcher.logging.base import Logger

if TYPE_CHECKING:
    from nova_agent_watcher.config.settings import LoggingSettings


DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
CONSOLE_LOGGER_NAME = "nova_agent_watcher"


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier, sur la console, ou les deux.

    Caractéristiques:
    - Logger unique par destination (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Sans fichier, seule la sortie console (stderr) est utilisée :
      sous systemd, journald la capture
    """

    def __init__(
        self,
        log_file: Optional[str] = None,
        level: str = "INFO",
        log_format: str = DEFAULT_FORMAT,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log (None ou "" pour la
                console uniquement)
            level: Niveau de log (DEBUG, INFO, WARNING, ERROR)
            log_format: Format des messages (syntaxe logging)
            console_output: Activer la sortie console en plus du fichier
        """
        self.log_file = log_file or None
        if self.log_file is None:
            console_output = True

        # Créer le répertoire de logs si nécessaire
        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir, exist_ok=True)

        log_level = getattr(logging, level.upper(), logging.INFO)

        # Créer un logger unique par destination
        self.logger = logging.getLogger(
            self.log_file or CONSOLE_LOGGER_NAME
        )
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            formatter = logging.Formatter(log_format)
            if self.log_file:
                file_handler = logging.FileHandler(
                    self.log_file, encoding='utf-8'
                )
                file_handler.setLevel(log_level)
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)

        self.handler = self.logger.handlers[0]

        # Ne pas propager pour éviter les logs en double
        self.logger.propagate = False

    @classmethod
    def from_settings(
        cls,
        settings: "LoggingSettings",
        console_output: bool = False
    ) -> "FileLogger":
        """
        Construit un logger depuis la section [logging] de la configuration.

        Args:
            settings: Section de configuration du logging
            console_output: Forcer la sortie console en plus du fichier

        Returns:
            Instance de FileLogger configurée
        """
        return cls(
            log_file=settings.file or None,
            level=settings.level,
            log_format=settings.format,
            console_output=console_output,
        )

    def _flush(self) -> None:
        """Force l'écriture immédiate."""
        for handler in self.logger.handlers:
            handler.flush()

    def log_debug(self, message: str) -> None:
        """Log un message de debug."""
        self.logger.debug(message)
        self._flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
        self._flush()
