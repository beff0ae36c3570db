"""
    LoggerErrorHandler
"""
from nova_agent_watcher.errors.base import ErrorHandler
from nova_agent_watcher.errors.exceptions import ApplicationError
from nova_agent_watcher.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs via le Logger injecté au constructeur.
    Un préfixe optionnel situe l'erreur (ex: le chemin de l'événement).
    """

    def __init__(self, logger: Logger, prefix: str = "") -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            prefix: Texte placé devant chaque message.
        """
        self.logger = logger
        self.prefix = prefix

    def handle(self, error: Exception) -> None:
        """Log l'erreur, en distinguant erreurs connues et inattendues.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, (ApplicationError, OSError)):
            message = f"{type(error).__name__}: {str(error)}"
        else:
            message = (
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
        self.logger.log_error(f"{self.prefix}{message}")
