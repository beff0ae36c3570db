"""Activation d'un lot d'unités après placement."""

from typing import Iterable

from nova_agent_watcher.logging.base import Logger
from nova_agent_watcher.systemd.base import NETWORK_GROUP, ServiceManager, Unit


DEFAULT_NETWORK_SERVICE = "systemd-networkd.service"


def separate_network_units(
    units: Iterable[Unit]
) -> tuple[list[Unit], list[Unit]]:
    """
    Sépare les unités réseau des autres unités.

    L'ordre relatif est conservé dans chaque sous-ensemble.

    Args:
        units: Unités à répartir

    Returns:
        Couple (unités réseau, autres unités)
    """
    network_units: list[Unit] = []
    other_units: list[Unit] = []
    for unit in units:
        if unit.group == NETWORK_GROUP:
            network_units.append(unit)
        else:
            other_units.append(unit)
    return network_units, other_units


class UnitActivator:
    """Redémarre les unités d'un lot.

    Les unités réseau ne sont pas redémarrées une à une : elles sont
    lues par systemd-networkd, qui est redémarré une seule fois pour
    tout le lot. Les autres unités sont ensuite redémarrées chacune
    dans l'ordre du lot. La première erreur interrompt la séquence,
    sans retour arrière.

    Attributes:
        manager: Gestionnaire de services.
        logger: Instance de Logger pour le logging.
        network_service: Unité du sous-système réseau.
    """

    def __init__(
        self,
        manager: ServiceManager,
        logger: Logger,
        network_service: str = DEFAULT_NETWORK_SERVICE
    ) -> None:
        """
        Initialise l'activateur.

        Args:
            manager: Gestionnaire de services
            logger: Instance de Logger pour le logging
            network_service: Unité à redémarrer pour les unités réseau
        """
        self.manager = manager
        self.logger = logger
        self.network_service = network_service

    def activate(self, units: Iterable[Unit]) -> None:
        """
        Active un lot d'unités.

        Args:
            units: Unités déjà placées sur disque

        Raises:
            ServiceManagerError: Au premier redémarrage en échec
        """
        network_units, other_units = separate_network_units(units)
        if network_units:
            self.logger.log_info(
                f"{len(network_units)} unité(s) réseau: redémarrage de "
                f"{self.network_service}"
            )
            self.manager.restart_unit(self.network_service)

        for unit in other_units:
            self.manager.restart_unit(unit.name)
