"""Déploiement d'un document cloud-config : placement puis activation.

C'est le travail effectué par `nova-agent-deploy --from-file`, lancé
dans une unité transitoire par le RunMaterializer.
"""

from pathlib import Path
from typing import Union

from nova_agent_watcher.cloudconfig.document import CloudConfig
from nova_agent_watcher.logging.base import Logger
from nova_agent_watcher.systemd.activation import UnitActivator
from nova_agent_watcher.systemd.base import ServiceManager
from nova_agent_watcher.systemd.placement import UnitPlacer


class UnitDeployer:
    """Place, active, recharge et redémarre les unités d'un document.

    Séquence:
    1. placement de chaque unité, dans l'ordre du document
    2. EnableUnitFiles pour les unités marquées `enable`
    3. un seul daemon-reload
    4. activation (UnitActivator)

    La première erreur interrompt le déploiement.

    Attributes:
        placer: Placeur de fichiers d'unité.
        manager: Gestionnaire de services.
        activator: Activateur du lot d'unités.
        logger: Instance de Logger pour le logging.
        root: Racine du système de fichiers cible.
    """

    def __init__(
        self,
        placer: UnitPlacer,
        manager: ServiceManager,
        activator: UnitActivator,
        logger: Logger,
        root: str = "/"
    ) -> None:
        self.placer = placer
        self.manager = manager
        self.activator = activator
        self.logger = logger
        self.root = root

    def deploy(self, config: CloudConfig) -> list[str]:
        """
        Déploie les unités d'un document.

        Args:
            config: Document cloud-config

        Returns:
            Chemins des fichiers d'unité écrits

        Raises:
            OSError: Si un placement échoue
            ServiceManagerError: Si systemd refuse une opération
        """
        if not config.units:
            self.logger.log_info("Aucune unité à déployer.")
            return []

        placed = []
        for unit in config.units:
            path = self.placer.place(unit, self.root)
            placed.append(path)
            if unit.enable:
                self.manager.enable_unit_files(
                    [path], runtime=unit.runtime, force=True
                )

        self.manager.daemon_reload()
        self.activator.activate(config.units)
        self.logger.log_info(f"{len(placed)} unité(s) déployée(s).")
        return placed

    def deploy_file(self, path: Union[str, Path]) -> list[str]:
        """
        Lit un fichier cloud-config et déploie ses unités.

        Args:
            path: Chemin du fichier cloud-config

        Returns:
            Chemins des fichiers d'unité écrits

        Raises:
            OSError: Si le fichier est illisible
            CloudConfigError: Si le document est mal formé
        """
        text = Path(path).read_text(encoding="utf-8")
        self.logger.log_info(f"Déploiement depuis {path}")
        return self.deploy(CloudConfig.from_yaml(text))
