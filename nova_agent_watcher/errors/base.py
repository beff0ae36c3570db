"""Traitement des erreurs remontées à la frontière du programme."""

import sys
from abc import ABC, abstractmethod
from typing import NoReturn


class ErrorHandler(ABC):
    """Stratégie de traitement d'une erreur (console, journal...)."""

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain:
    """Transmet chaque erreur à tous les handlers, dans l'ordre d'ajout.

    La CLI commence par la console seule, puis ajoute le journal une
    fois la configuration du logging chargée.
    """

    def __init__(self, *handlers: ErrorHandler) -> None:
        """
        Initialise la chaîne.

        Args:
            handlers: Handlers initiaux
        """
        self.handlers: list[ErrorHandler] = list(handlers)

    def add_handler(self, handler: ErrorHandler) -> None:
        """Ajoute un handler en fin de chaîne."""
        self.handlers.append(handler)

    def handle(self, error: Exception) -> None:
        """Transmet l'erreur à chaque handler."""
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(self, error: Exception, exit_code: int = 1) -> NoReturn:
        """Traite une erreur fatale puis termine le processus.

        Args:
            error: L'exception fatale.
            exit_code: Code de sortie (défaut: 1).
        """
        self.handle(error)
        sys.exit(exit_code)
