"""Placement des fichiers d'unité dans l'arborescence systemd."""

import os

from nova_agent_watcher.logging.base import Logger
from nova_agent_watcher.systemd.base import Unit


DIRECTORY_MODE = 0o755
UNIT_FILE_MODE = 0o644


class UnitPlacer:
    """Écrit les unités sous <root>/etc/systemd ou <root>/run/systemd.

    Les unités persistantes vont dans etc/systemd/<groupe>, les unités
    éphémères (runtime) dans run/systemd/<groupe>, le groupe étant
    "network" ou "system".

    Attributes:
        logger: Instance de Logger pour le logging.
    """

    def __init__(self, logger: Logger) -> None:
        """
        Initialise le placeur d'unités.

        Args:
            logger: Instance de Logger pour le logging
        """
        self.logger = logger

    @staticmethod
    def unit_directory(unit: Unit, root: str) -> str:
        """
        Calcule le répertoire de destination d'une unité.

        Args:
            unit: Unité à placer
            root: Racine du système de fichiers cible

        Returns:
            Chemin du répertoire (ex: /etc/systemd/network)
        """
        tree = "run" if unit.runtime else "etc"
        return os.path.join(root, tree, "systemd", unit.group)

    def place(self, unit: Unit, root: str = "/") -> str:
        """
        Écrit le contenu d'une unité sur disque.

        Le répertoire est créé au besoin ; un fichier existant est
        écrasé directement.

        Args:
            unit: Unité à placer
            root: Racine du système de fichiers cible

        Returns:
            Chemin du fichier écrit

        Raises:
            OSError: Si la création du répertoire ou l'écriture échoue
        """
        directory = self.unit_directory(unit, root)
        destination = os.path.join(directory, unit.name)
        try:
            os.makedirs(directory, mode=DIRECTORY_MODE, exist_ok=True)
            with open(destination, "w", encoding="utf-8") as f:
                f.write(unit.content)
            os.chmod(destination, UNIT_FILE_MODE)
        except OSError as e:
            self.logger.log_error(
                f"Erreur lors de l'écriture de {destination}: {e}"
            )
            raise
        self.logger.log_info(f"Fichier unit écrit: {destination}")
        return destination
