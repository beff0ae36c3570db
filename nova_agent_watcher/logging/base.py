"""Interface de journalisation de l'agent.

Les composants reçoivent un Logger injecté ; les tests passent un
MagicMock à la place.
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Journal de l'agent, un message texte par appel."""

    @abstractmethod
    def log_debug(self, message: str) -> None:
        """Détail de fonctionnement (événements ignorés, commandes)."""
        pass

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Étape normale du traitement."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Échec sans conséquence sur la surveillance."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Échec d'une opération."""
        pass
