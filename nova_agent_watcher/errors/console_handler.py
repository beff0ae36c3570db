"""
    ConsoleErrorHandler
"""
import sys

from nova_agent_watcher.errors.base import ErrorHandler
from nova_agent_watcher.errors.exceptions import (ApplicationError,
                                                  ConfigurationError,
                                                  ServiceManagerError,
                                                  WatchError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs fatales sur stderr.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche une piste de solution adaptée au type
    d'erreur.
    """

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur avec un message destiné à l'opérateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, ApplicationError):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _handle_known_error(self, error: ApplicationError) -> None:
        """Affiche le type, le message et une suggestion de solution.

        Args:
            error: L'exception métier à traiter.
        """
        self._print(f"{type(error).__name__}: {str(error)}")

        if isinstance(error, ConfigurationError):
            self._print("Solution : Vérifiez votre fichier de configuration.")
        elif isinstance(error, ServiceManagerError):
            self._print(
                "Solution : Vérifiez que systemd est joignable "
                "(exécution en root requise)."
            )
        elif isinstance(error, WatchError):
            self._print(
                "Solution : Redémarrez l'agent ; la surveillance "
                "n'est plus active."
            )
        else:
            self._print("Solution : Consultez les logs pour plus de détails.")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        self._print(f"Erreur inattendue: {str(error)}")
        self._print(f"Type: {type(error).__name__}")

    @staticmethod
    def _print(message: str) -> None:
        print(message, file=sys.stderr)
