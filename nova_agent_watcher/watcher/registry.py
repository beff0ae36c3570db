"""Table fixe des fichiers surveillés et de leurs handlers."""

from types import MappingProxyType
from typing import Callable, Mapping

from nova_agent_watcher.cloudconfig.document import CloudConfig
from nova_agent_watcher.commands.base import CommandExecutor
from nova_agent_watcher.logging.base import Logger
from nova_agent_watcher.watcher.synthesis import NetConfigSynthesizer


Handler = Callable[[str], CloudConfig]
WatchRegistry = Mapping[str, Handler]

NET_CONFIG_PATH = "/etc/conf.d/net"


def build_registry(
    translator: str,
    executor: CommandExecutor,
    logger: Logger
) -> WatchRegistry:
    """
    Construit la table chemin surveillé -> handler.

    Les chemins sont relatifs à la racine surveillée (--watch-dir).
    La table est en lecture seule : ajouter un chemin demande un
    redémarrage.

    Args:
        translator: Script de traduction réseau
        executor: Exécuteur de commandes
        logger: Instance de Logger pour le logging

    Returns:
        Table immuable
    """
    net = NetConfigSynthesizer(translator, executor, logger)
    return MappingProxyType({
        NET_CONFIG_PATH: net.synthesize,
    })
