"""Module de gestion des unités systemd.

Ce module fournit:
- Unit: Descripteur d'unité (nom, contenu, runtime) et sa classification
- UnitPlacer: Écriture des unités sous /etc/systemd ou /run/systemd
- ServiceManager: Interface du gestionnaire de services
- DbusServiceManager: Implémentation D-Bus (pydbus)
- SystemctlServiceManager: Implémentation systemctl / systemd-run
- UnitActivator: Redémarrage d'un lot d'unités
- execute_script: Exécution d'un script dans une unité transitoire

Le déploiement complet d'un document (UnitDeployer) est dans
nova_agent_watcher.systemd.deployer.

Exemple d'utilisation:
    from nova_agent_watcher import FileLogger
    from nova_agent_watcher.systemd import (
        DbusServiceManager,
        Unit,
        UnitActivator,
        UnitPlacer,
    )

    logger = FileLogger()
    manager = DbusServiceManager(logger)
    unit = Unit(name="50-eth0.network", content="[Match]\\nName=eth0\\n")

    UnitPlacer(logger).place(unit, "/")
    manager.daemon_reload()
    UnitActivator(manager, logger).activate([unit])
"""

from nova_agent_watcher.systemd.base import (
    NETWORK_GROUP,
    SYSTEM_GROUP,
    TRANSIENT_DESCRIPTION,
    ServiceManager,
    TransientUnit,
    Unit,
)
from nova_agent_watcher.systemd.validators import (
    UNIT_TYPES,
    validate_unit_name,
)
from nova_agent_watcher.systemd.placement import UnitPlacer
from nova_agent_watcher.systemd.dbus_manager import DbusServiceManager
from nova_agent_watcher.systemd.executor import SystemctlServiceManager
from nova_agent_watcher.systemd.activation import (
    DEFAULT_NETWORK_SERVICE,
    UnitActivator,
    separate_network_units,
)
from nova_agent_watcher.systemd.transient import execute_script, script_unit

__all__ = [
    # Descripteurs
    "Unit",
    "TransientUnit",
    "NETWORK_GROUP",
    "SYSTEM_GROUP",
    "TRANSIENT_DESCRIPTION",
    "UNIT_TYPES",
    "validate_unit_name",
    # Placement
    "UnitPlacer",
    # Gestionnaires de services
    "ServiceManager",
    "DbusServiceManager",
    "SystemctlServiceManager",
    # Activation
    "DEFAULT_NETWORK_SERVICE",
    "UnitActivator",
    "separate_network_units",
    # Unités transitoires
    "execute_script",
    "script_unit",
]
