"""Exécuteur de commandes Linux via subprocess.

Ce module fournit LinuxCommandExecutor, une implémentation concrète
de CommandExecutor qui utilise subprocess pour exécuter des commandes
sur un système Linux.

Example :
    Capture de la sortie combinée d'un script de traduction :

        from nova_agent_watcher.commands import LinuxCommandExecutor

        executor = LinuxCommandExecutor(logger=logger)
        result = executor.run(
            ["./scripts/gentoo-to-networkd", "eth0", "/etc/conf.d/net"],
            combine_output=True,
        )
        print(result.stdout)
"""

import os
import subprocess  # nosec B404
import time
from typing import Dict, List, Optional

from nova_agent_watcher.commands.base import (
    CommandExecutor,
    CommandResult,
)
from nova_agent_watcher.logging.base import Logger


class LinuxCommandExecutor(CommandExecutor):
    """Exécuteur de commandes Linux via subprocess.

    Aucune exception n'est levée pour un code retour non nul, un
    timeout ou un exécutable introuvable : l'échec est décrit par le
    CommandResult retourné (success=False).

    Attributes:
        _logger: Logger optionnel.
        _default_env: Variables d'environnement par défaut.
        _default_timeout: Timeout par défaut en secondes.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        default_env: Optional[Dict[str, str]] = None,
        default_timeout: Optional[int] = None,
    ) -> None:
        """Initialise l'exécuteur de commandes.

        Args:
            logger: Logger optionnel.
            default_env: Variables d'environnement par défaut
                (fusionnées avec os.environ).
            default_timeout: Timeout par défaut en secondes.
        """
        self._logger = logger
        self._default_env = default_env
        self._default_timeout = default_timeout

    def _build_env(
        self,
        env: Optional[Dict[str, str]] = None,
    ) -> Optional[Dict[str, str]]:
        """Construit l'environnement d'exécution.

        Fusionne os.environ, default_env et env spécifique.
        Retourne None si aucun environnement personnalisé
        (subprocess utilisera os.environ par défaut).

        Args:
            env: Variables d'environnement spécifiques.

        Returns:
            Dictionnaire d'environnement ou None.
        """
        if self._default_env is None and env is None:
            return None
        merged = os.environ.copy()
        if self._default_env:
            merged.update(self._default_env)
        if env:
            merged.update(env)
        return merged

    def _resolve_timeout(
        self,
        timeout: Optional[int] = None,
    ) -> Optional[int]:
        """Détermine le timeout effectif (l'appel prime sur le défaut)."""
        if timeout is not None:
            return timeout
        return self._default_timeout

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_debug(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def run(
        self,
        command: List[str],
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
        timeout: Optional[int] = None,
        combine_output: bool = False,
    ) -> CommandResult:
        """Exécute une commande et retourne le résultat.

        Args:
            command: Commande sous forme de liste.
            env: Variables d'environnement supplémentaires.
            cwd: Répertoire de travail.
            timeout: Timeout en secondes (prioritaire).
            combine_output: Fusionner stderr dans stdout, dans
                l'ordre d'écriture du processus.

        Returns:
            CommandResult avec les sorties capturées.
        """
        effective_env = self._build_env(env)
        effective_timeout = self._resolve_timeout(timeout)
        command_line = " ".join(command)

        self._log(f"Exécution : {command_line}")

        start = time.monotonic()
        try:
            proc = subprocess.run(  # nosec B603
                command,
                stdout=subprocess.PIPE,
                stderr=(
                    subprocess.STDOUT if combine_output
                    else subprocess.PIPE
                ),
                text=True,
                errors="replace",
                env=effective_env,
                cwd=cwd,
                timeout=effective_timeout,
            )
            duration = time.monotonic() - start
            if proc.returncode != 0:
                self._log_error(
                    f"Code retour {proc.returncode} : {command_line}"
                )
            return CommandResult(
                command=command,
                return_code=proc.returncode,
                stdout=proc.stdout or "",
                stderr=proc.stderr or "",
                success=proc.returncode == 0,
                duration=duration,
            )
        except subprocess.TimeoutExpired as e:
            duration = time.monotonic() - start
            self._log_error(
                f"Timeout après {effective_timeout}s : {command_line}"
            )
            return CommandResult(
                command=command,
                return_code=-1,
                stdout=_as_text(e.stdout),
                stderr=_as_text(e.stderr),
                success=False,
                duration=duration,
            )
        except OSError as e:
            duration = time.monotonic() - start
            self._log_error(f"Erreur système : {e}")
            return CommandResult(
                command=command,
                return_code=-1,
                stdout="",
                stderr=str(e),
                success=False,
                duration=duration,
            )


def _as_text(data) -> str:
    # TimeoutExpired expose des bytes même en mode texte
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data
