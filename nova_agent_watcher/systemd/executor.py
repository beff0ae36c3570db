"""Gestionnaire de services via systemctl et systemd-run."""

import subprocess  # nosec B404
from typing import Sequence

from nova_agent_watcher.errors.exceptions import ServiceManagerError
from nova_agent_watcher.logging.base import Logger
from nova_agent_watcher.systemd.base import ServiceManager, TransientUnit
from nova_agent_watcher.systemd.validators import validate_unit_name


class SystemctlServiceManager(ServiceManager):
    """Implémentation du gestionnaire de services par sous-processus.

    Même contrat que DbusServiceManager, en passant par systemctl et
    systemd-run : chaque opération lance son propre processus.
    Sélectionnée par `backend = "systemctl"` dans la section [systemd].

    Attributes:
        logger: Instance de Logger pour le logging.
    """

    def __init__(self, logger: Logger) -> None:
        """
        Initialise le gestionnaire.

        Args:
            logger: Instance de Logger pour le logging
        """
        self.logger = logger

    def _run(self, cmd: list[str]) -> subprocess.CompletedProcess:
        """
        Exécute une commande systemd.

        Args:
            cmd: Commande complète

        Returns:
            Résultat de la commande

        Raises:
            ServiceManagerError: Si la commande échoue ou est introuvable
        """
        try:
            return subprocess.run(  # nosec B603
                cmd, check=True, capture_output=True, text=True
            )
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip()
            self.logger.log_error(
                f"Erreur lors de l'exécution de {' '.join(cmd)}: {detail}"
            )
            raise ServiceManagerError(
                f"{cmd[0]} {cmd[1]} en échec (code {e.returncode}): "
                f"{detail}"
            ) from e
        except OSError as e:
            self.logger.log_error(f"{cmd[0]} indisponible: {e}")
            raise ServiceManagerError(
                f"{cmd[0]} indisponible: {e}"
            ) from e

    def _run_systemctl(self, args: list[str]) -> subprocess.CompletedProcess:
        return self._run(["systemctl"] + args)

    def enable_unit_files(
        self,
        paths: Sequence[str],
        runtime: bool = False,
        force: bool = True
    ) -> None:
        """
        Active des fichiers d'unité (systemctl enable).

        Args:
            paths: Chemins des fichiers d'unité
            runtime: Activation éphémère (--runtime)
            force: Remplacer les liens en conflit (--force)
        """
        args = ["enable"]
        if runtime:
            args.append("--runtime")
        if force:
            args.append("--force")
        args.extend(paths)
        self._run_systemctl(args)
        self.logger.log_info(f"Fichiers d'unité activés: {list(paths)}")

    def daemon_reload(self) -> None:
        """Recharge la configuration systemd (daemon-reload)."""
        self._run_systemctl(["daemon-reload"])
        self.logger.log_info("Systemd rechargé avec succès.")

    def restart_unit(self, name: str) -> str:
        """
        Redémarre une unité sans attendre la fin du job.

        Args:
            name: Nom de l'unité

        Returns:
            Sortie de systemctl
        """
        validate_unit_name(name)
        self.logger.log_info(f"Redémarrage de l'unité {name}")
        result = self._run_systemctl(
            ["restart", "--no-block", "--job-mode=replace", name]
        )
        output = result.stdout.strip()
        self.logger.log_info(f"Redémarrage terminé avec '{output}'")
        return output

    def start_unit(self, name: str) -> str:
        """
        Démarre une unité sans attendre la fin du job.

        Args:
            name: Nom de l'unité

        Returns:
            Sortie de systemctl
        """
        validate_unit_name(name)
        result = self._run_systemctl(
            ["start", "--no-block", "--job-mode=replace", name]
        )
        self.logger.log_info(f"Unité {name} démarrée.")
        return result.stdout.strip()

    def start_transient_unit(
        self,
        unit: TransientUnit,
        mode: str = "replace"
    ) -> str:
        """
        Crée et démarre une unité transitoire (systemd-run).

        systemd-run soumet toujours son job en mode "fail" : le mode
        demandé est seulement journalisé.

        Args:
            unit: Description de l'unité transitoire
            mode: Mode du job demandé

        Returns:
            Sortie de systemd-run
        """
        self.logger.log_info(
            f"Création de l'unité systemd transitoire '{unit.name}' "
            f"(mode {mode})"
        )
        result = self._run([
            "systemd-run",
            "--no-block",
            f"--unit={unit.name}",
            f"--description={unit.description}",
            "--",
            *unit.argv,
        ])
        return (result.stdout + result.stderr).strip()
