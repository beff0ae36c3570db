"""Module d'exécution de commandes système.

Classes:
    CommandResult: Résultat immuable d'une exécution.
    CommandExecutor: Interface abstraite des exécuteurs.
    LinuxCommandExecutor: Implémentation via subprocess.
"""

from nova_agent_watcher.commands.base import CommandExecutor, CommandResult
from nova_agent_watcher.commands.runner import LinuxCommandExecutor

__all__ = [
    "CommandResult",
    "CommandExecutor",
    "LinuxCommandExecutor",
]
