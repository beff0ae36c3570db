"""Descripteurs d'unités et interface du gestionnaire de services."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from nova_agent_watcher.systemd.validators import validate_unit_name


NETWORK_GROUP = "network"
SYSTEM_GROUP = "system"

# Unités consommées par systemd-networkd plutôt que par PID 1
NETWORK_UNIT_TYPES = frozenset({"network", "netdev", "link"})

TRANSIENT_DESCRIPTION = (
    "Unit generated and executed by coreos-cloudinit on behalf of user"
)


@dataclass(frozen=True)
class Unit:
    """Unité systemd à placer sur disque.

    Attributes:
        name: Nom du fichier d'unité, suffixe compris
            (ex: "50-eth0.network").
        content: Contenu brut du fichier d'unité.
        runtime: True pour une unité éphémère (/run), False pour
            une unité persistante (/etc).
        enable: Activer le fichier d'unité après placement.
    """

    name: str
    content: str = ""
    runtime: bool = False
    enable: bool = False

    def __post_init__(self) -> None:
        """Valide le nom de l'unité."""
        validate_unit_name(self.name)

    @property
    def type(self) -> str:
        """Suffixe du nom en minuscules, sans le point ("" si absent)."""
        _, dot, suffix = self.name.rpartition(".")
        return suffix.lower() if dot else ""

    @property
    def group(self) -> str:
        """Groupe de placement : "network" ou "system".

        Toujours recalculé depuis le nom.
        """
        if self.type in NETWORK_UNIT_TYPES:
            return NETWORK_GROUP
        return SYSTEM_GROUP


@dataclass(frozen=True)
class TransientUnit:
    """Unité transitoire créée en mémoire par le gestionnaire.

    Attributes:
        name: Nom de l'unité (suffixe .service).
        argv: Commande ExecStart (argv[0] est le chemin exécuté).
        description: Description de l'unité.
    """

    name: str
    argv: tuple[str, ...]
    description: str = TRANSIENT_DESCRIPTION

    def __post_init__(self) -> None:
        """Valide le nom et la commande."""
        validate_unit_name(self.name)
        if not self.argv:
            raise ValueError("'argv' est requis")
        object.__setattr__(self, "argv", tuple(self.argv))


class ServiceManager(ABC):
    """Interface du gestionnaire de services systemd.

    Chaque opération ouvre sa propre connexion, l'utilise puis la
    libère. Les opérations rendent la main dès que systemd a accepté
    le job, sans attendre l'état final de l'unité.

    Toutes les opérations lèvent ServiceManagerError si systemd est
    injoignable ou refuse la demande.
    """

    @abstractmethod
    def enable_unit_files(
        self,
        paths: Sequence[str],
        runtime: bool = False,
        force: bool = True
    ) -> None:
        """
        Active des fichiers d'unité.

        Args:
            paths: Chemins des fichiers d'unité
            runtime: Activation éphémère (/run)
            force: Remplacer les liens symboliques en conflit
        """
        pass

    @abstractmethod
    def daemon_reload(self) -> None:
        """Demande à systemd de relire les définitions d'unités."""
        pass

    @abstractmethod
    def restart_unit(self, name: str) -> str:
        """
        Redémarre une unité en mode "replace".

        Args:
            name: Nom de l'unité

        Returns:
            Référence du job créé
        """
        pass

    @abstractmethod
    def start_unit(self, name: str) -> str:
        """
        Démarre une unité en mode "replace".

        Args:
            name: Nom de l'unité

        Returns:
            Référence du job créé
        """
        pass

    @abstractmethod
    def start_transient_unit(
        self,
        unit: TransientUnit,
        mode: str = "replace"
    ) -> str:
        """
        Crée et démarre une unité transitoire.

        Args:
            unit: Description de l'unité transitoire
            mode: Mode du job ("replace", "fail", ...)

        Returns:
            Référence du job créé
        """
        pass
