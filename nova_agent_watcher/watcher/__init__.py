"""Module de surveillance des fichiers de configuration.

Ce module fournit:
- PathChangeDispatcher: Boucle de surveillance (watchdog) et dispatch
- build_registry: Table fixe chemin surveillé -> handler
- NetConfigSynthesizer: Traduction de /etc/conf.d/net en unités .network
- RunMaterializer: Déploiement différé dans une unité transitoire
"""

from nova_agent_watcher.watcher.synthesis import (
    INTERFACE_PATTERN,
    NetConfigSynthesizer,
    find_interfaces,
)
from nova_agent_watcher.watcher.materializer import RunMaterializer
from nova_agent_watcher.watcher.registry import (
    NET_CONFIG_PATH,
    Handler,
    WatchRegistry,
    build_registry,
)
from nova_agent_watcher.watcher.dispatcher import (
    ChangeEvent,
    PathChangeDispatcher,
    QueueingEventHandler,
    WatchErrorEvent,
)

__all__ = [
    # Synthèse
    "INTERFACE_PATTERN",
    "NetConfigSynthesizer",
    "find_interfaces",
    # Matérialisation
    "RunMaterializer",
    # Table des handlers
    "NET_CONFIG_PATH",
    "Handler",
    "WatchRegistry",
    "build_registry",
    # Dispatcher
    "ChangeEvent",
    "WatchErrorEvent",
    "QueueingEventHandler",
    "PathChangeDispatcher",
]
