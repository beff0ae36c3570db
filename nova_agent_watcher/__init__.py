"""
nova-agent-watcher - Agent de reconfiguration réseau pour systemd.

Surveille les fichiers de configuration de l'hôte (ex: /etc/conf.d/net),
les traduit en unités systemd et les déploie.

Modules disponibles:
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
- config: Chargement de la configuration (TOML, JSON, Pydantic)
- commands: Exécution de commandes externes (LinuxCommandExecutor)
- cloudconfig: Document déclaratif des unités (CloudConfig)
- systemd: Unités, placement, gestionnaire de services, activation
- watcher: Surveillance, synthèse et déploiement différé
"""

__version__ = "1.0.0"

from nova_agent_watcher.logging import Logger, FileLogger
from nova_agent_watcher.config import AgentSettings, load_settings
from nova_agent_watcher.cloudconfig import CloudConfig
from nova_agent_watcher.systemd import (
    Unit,
    TransientUnit,
    UnitPlacer,
    ServiceManager,
    DbusServiceManager,
    SystemctlServiceManager,
    UnitActivator,
    execute_script,
)
from nova_agent_watcher.systemd.deployer import UnitDeployer
from nova_agent_watcher.watcher import (
    NetConfigSynthesizer,
    PathChangeDispatcher,
    RunMaterializer,
    build_registry,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "AgentSettings",
    "load_settings",
    # Cloud-config
    "CloudConfig",
    # Systemd
    "Unit",
    "TransientUnit",
    "UnitPlacer",
    "ServiceManager",
    "DbusServiceManager",
    "SystemctlServiceManager",
    "UnitActivator",
    "UnitDeployer",
    "execute_script",
    # Surveillance
    "NetConfigSynthesizer",
    "PathChangeDispatcher",
    "RunMaterializer",
    "build_registry",
]
