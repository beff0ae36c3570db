"""Client D-Bus du gestionnaire systemd (org.freedesktop.systemd1).

Les liaisons pydbus et GLib (PyGObject) ne sont importées qu'au
premier appel : la construction du client et les tests n'exigent pas
de bus système.

Exemple d'utilisation:
    from nova_agent_watcher import FileLogger
    from nova_agent_watcher.systemd import DbusServiceManager

    logger = FileLogger()
    manager = DbusServiceManager(logger)
    manager.restart_unit("systemd-networkd.service")
"""

from contextlib import contextmanager
from typing import Iterator, Sequence

from nova_agent_watcher.errors.exceptions import ServiceManagerError
from nova_agent_watcher.logging.base import Logger
from nova_agent_watcher.systemd.base import ServiceManager, TransientUnit


SYSTEMD_BUS_NAME = "org.freedesktop.systemd1"
SYSTEMD_OBJECT_PATH = "/org/freedesktop/systemd1"


def _load_bindings():
    """Importe pydbus.SystemBus et gi.repository.GLib."""
    from gi.repository import GLib
    from pydbus import SystemBus
    return SystemBus, GLib


def transient_properties(unit: TransientUnit, glib) -> list:
    """
    Construit la liste a(sv) des propriétés d'une unité transitoire.

    Args:
        unit: Unité transitoire
        glib: Module gi.repository.GLib (pour GLib.Variant)

    Returns:
        Liste de couples (nom, GLib.Variant)
    """
    # (chemin, argv, ignorer un code retour non nul)
    exec_start = [(unit.argv[0], list(unit.argv), False)]
    return [
        ("Description", glib.Variant("s", unit.description)),
        ("ExecStart", glib.Variant("a(sasb)", exec_start)),
    ]


class DbusServiceManager(ServiceManager):
    """Implémentation D-Bus du gestionnaire de services.

    Une connexion au bus système est ouverte pour chaque opération
    puis refermée : un redémarrage de systemd entre deux appels
    n'affecte que l'appel en cours.

    Attributes:
        logger: Instance de Logger pour le logging.
    """

    def __init__(self, logger: Logger) -> None:
        """
        Initialise le client D-Bus.

        Args:
            logger: Instance de Logger pour le logging
        """
        self.logger = logger

    @contextmanager
    def _manager(self, operation: str) -> Iterator[tuple]:
        """
        Ouvre une connexion dédiée à une opération.

        Args:
            operation: Libellé de l'opération pour les messages d'erreur

        Yields:
            Couple (proxy du manager systemd, module GLib)

        Raises:
            ServiceManagerError: Si la connexion ou l'appel échoue
        """
        try:
            system_bus, glib = _load_bindings()
        except ImportError as e:
            self.logger.log_error(f"Liaisons D-Bus indisponibles: {e}")
            raise ServiceManagerError(
                "Liaisons D-Bus indisponibles (installez l'extra [dbus] "
                f"ou utilisez backend = \"systemctl\"): {e}"
            ) from e
        try:
            with system_bus() as bus:
                manager = bus.get(SYSTEMD_BUS_NAME, SYSTEMD_OBJECT_PATH)
                yield manager, glib
        except glib.Error as e:
            self.logger.log_error(f"Erreur D-Bus ({operation}): {e}")
            raise ServiceManagerError(
                f"Échec de l'opération systemd {operation}: {e}"
            ) from e

    def enable_unit_files(
        self,
        paths: Sequence[str],
        runtime: bool = False,
        force: bool = True
    ) -> None:
        """
        Active des fichiers d'unité (EnableUnitFiles).

        Args:
            paths: Chemins des fichiers d'unité
            runtime: Activation éphémère (/run)
            force: Remplacer les liens symboliques en conflit
        """
        with self._manager("EnableUnitFiles") as (manager, _):
            _, changes = manager.EnableUnitFiles(
                list(paths), runtime, force
            )
        for change_type, source, destination in changes:
            self.logger.log_info(
                f"Activation: {change_type} {source} -> {destination}"
            )

    def daemon_reload(self) -> None:
        """Recharge la configuration systemd (Reload)."""
        with self._manager("Reload") as (manager, _):
            manager.Reload()
        self.logger.log_info("Systemd rechargé avec succès.")

    def restart_unit(self, name: str) -> str:
        """
        Redémarre une unité (RestartUnit, mode "replace").

        Args:
            name: Nom de l'unité

        Returns:
            Chemin D-Bus du job
        """
        self.logger.log_info(f"Redémarrage de l'unité {name}")
        with self._manager("RestartUnit") as (manager, _):
            job = manager.RestartUnit(name, "replace")
        self.logger.log_info(f"Redémarrage terminé avec '{job}'")
        return job

    def start_unit(self, name: str) -> str:
        """
        Démarre une unité (StartUnit, mode "replace").

        Args:
            name: Nom de l'unité

        Returns:
            Chemin D-Bus du job
        """
        with self._manager("StartUnit") as (manager, _):
            job = manager.StartUnit(name, "replace")
        self.logger.log_info(f"Unité {name} démarrée ('{job}').")
        return job

    def start_transient_unit(
        self,
        unit: TransientUnit,
        mode: str = "replace"
    ) -> str:
        """
        Crée et démarre une unité transitoire (StartTransientUnit).

        Args:
            unit: Description de l'unité transitoire
            mode: Mode du job

        Returns:
            Chemin D-Bus du job
        """
        self.logger.log_info(
            f"Création de l'unité systemd transitoire '{unit.name}'"
        )
        with self._manager("StartTransientUnit") as (manager, glib):
            job = manager.StartTransientUnit(
                unit.name, mode, transient_properties(unit, glib), []
            )
        return job
