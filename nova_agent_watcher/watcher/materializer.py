"""Exécution différée d'un document dans une unité transitoire."""

import os
import tempfile
from typing import Optional

from nova_agent_watcher.cloudconfig.document import CloudConfig
from nova_agent_watcher.errors.exceptions import ServiceManagerError
from nova_agent_watcher.logging.base import Logger
from nova_agent_watcher.systemd.base import ServiceManager, TransientUnit


DEFAULT_DEPLOY_COMMAND = "/usr/bin/coreos-cloudinit"
DEFAULT_TEMP_PREFIX = "rackspace-cloudinit-"


class RunMaterializer:
    """Écrit un document dans un fichier temporaire et le fait déployer.

    Le déploiement n'est pas fait dans le processus de surveillance :
    une unité transitoire relance l'outil de déploiement avec
    `--from-file <fichier>`, et systemd sérialise ces jobs. Le fichier
    temporaire appartient ensuite au processus relancé.

    Attributes:
        manager: Gestionnaire de services.
        logger: Instance de Logger pour le logging.
        deploy_command: Outil de déploiement relancé.
        temp_prefix: Préfixe des fichiers temporaires.
        temp_dir: Répertoire des fichiers temporaires (None: défaut
            du système).
    """

    def __init__(
        self,
        manager: ServiceManager,
        logger: Logger,
        deploy_command: str = DEFAULT_DEPLOY_COMMAND,
        temp_prefix: str = DEFAULT_TEMP_PREFIX,
        temp_dir: Optional[str] = None
    ) -> None:
        self.manager = manager
        self.logger = logger
        self.deploy_command = deploy_command
        self.temp_prefix = temp_prefix
        self.temp_dir = temp_dir

    def write_document(self, config: CloudConfig) -> str:
        """
        Écrit le document dans un nouveau fichier temporaire.

        Args:
            config: Document à écrire

        Returns:
            Chemin du fichier temporaire
        """
        with tempfile.NamedTemporaryFile(
            "w",
            prefix=self.temp_prefix,
            dir=self.temp_dir,
            delete=False,
            encoding="utf-8",
        ) as f:
            self.logger.log_info(f"Écriture dans: {f.name}")
            f.write(config.to_yaml())
        return f.name

    def materialize(self, config: CloudConfig) -> str:
        """
        Lance le déploiement d'un document dans une unité transitoire.

        Args:
            config: Document à déployer

        Returns:
            Nom de l'unité transitoire

        Raises:
            OSError: Si le fichier temporaire ne peut être écrit
            ServiceManagerError: Si systemd refuse l'unité
        """
        path = self.write_document(config)
        unit = TransientUnit(
            name=f"{os.path.basename(path)}.service",
            argv=(self.deploy_command, "--from-file", path),
        )
        try:
            self.manager.start_transient_unit(unit, "replace")
        except ServiceManagerError:
            self.logger.log_error(
                f"Unité {unit.name} non lancée, fichier laissé: {path}"
            )
            raise
        return unit.name
