"""Synthèse d'un document cloud-config depuis /etc/conf.d/net.

Chaque interface `ethN` citée dans le fichier source est traduite en
unité systemd-networkd par un script externe, appelé une seule fois
par interface :

    <translator> eth0 /etc/conf.d/net  ->  texte de 50-eth0.network
"""

import re
from pathlib import Path

from nova_agent_watcher.cloudconfig.document import CloudConfig
from nova_agent_watcher.commands.base import CommandExecutor
from nova_agent_watcher.errors.exceptions import TranslationError
from nova_agent_watcher.logging.base import Logger
from nova_agent_watcher.systemd.base import Unit


INTERFACE_PATTERN = re.compile(r"eth\d+", re.ASCII)
NETWORK_UNIT_NAME = "50-{interface}.network"


def find_interfaces(text: str) -> list[str]:
    """
    Extrait les interfaces citées, sans doublon.

    Args:
        text: Contenu du fichier source

    Returns:
        Interfaces dans l'ordre de première apparition
    """
    return list(dict.fromkeys(INTERFACE_PATTERN.findall(text)))


class NetConfigSynthesizer:
    """Traduit un fichier de configuration réseau en document cloud-config.

    Attributes:
        translator: Chemin du script de traduction.
        executor: Exécuteur de commandes.
        logger: Instance de Logger pour le logging.
    """

    def __init__(
        self,
        translator: str,
        executor: CommandExecutor,
        logger: Logger
    ) -> None:
        """
        Initialise le synthétiseur.

        Args:
            translator: Chemin du script de traduction
            executor: Exécuteur de commandes
            logger: Instance de Logger pour le logging
        """
        self.translator = translator
        self.executor = executor
        self.logger = logger

    def translate(self, interface: str, path: str) -> Unit:
        """
        Traduit une interface en unité .network.

        Args:
            interface: Interface réseau (ex: "eth0")
            path: Fichier source

        Returns:
            Unité 50-<interface>.network

        Raises:
            TranslationError: Si le script échoue
        """
        result = self.executor.run(
            [self.translator, interface, path],
            combine_output=True,
        )
        if not result.success:
            raise TranslationError(
                interface, result.return_code, result.output
            )
        return Unit(
            name=NETWORK_UNIT_NAME.format(interface=interface),
            content=result.stdout,
        )

    def synthesize(self, path: str) -> CloudConfig:
        """
        Construit le document cloud-config d'un fichier source.

        Tout ou rien : la première traduction en échec interrompt
        la synthèse.

        Args:
            path: Fichier source

        Returns:
            Document contenant une unité par interface

        Raises:
            OSError: Si le fichier est illisible
            TranslationError: Si une traduction échoue
        """
        try:
            # Seuls les noms ethN comptent : octets non UTF-8 remplacés
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            self.logger.log_error(f"Lecture impossible de {path}: {e}")
            raise

        config = CloudConfig()
        for interface in find_interfaces(text):
            config = config.with_unit(self.translate(interface, path))
        self.logger.log_info(
            f"{len(config.units)} unité(s) réseau générée(s) depuis {path}"
        )
        return config
