"""
Module contenant les exceptions personnalisées de nova-agent-watcher.

Les erreurs du système de fichiers restent des OSError standard ;
seules les erreurs propres à l'agent sont définies ici.
"""


class ApplicationError(Exception):
    """Exception de base pour toute l'application."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration absent, illisible ou invalide."""
    pass


class ValidationError(ApplicationError):
    """Exception de base pour toutes les validations."""
    pass


class CloudConfigError(ValidationError):
    """Document cloud-config mal formé."""
    pass


class TranslationError(ApplicationError):
    """Échec de la commande externe de traduction réseau.

    Attributes:
        interface: Interface réseau en cours de traduction (ex: "eth0").
        return_code: Code retour de la commande.
        output: Sortie combinée (stdout + stderr) de la commande.
    """

    def __init__(
        self,
        interface: str,
        return_code: int,
        output: str = ""
    ) -> None:
        self.interface = interface
        self.return_code = return_code
        self.output = output
        super().__init__(
            f"Traduction de {interface} en échec "
            f"(code retour {return_code}): {output.strip()}"
        )


class ServiceManagerError(ApplicationError):
    """Gestionnaire de services injoignable ou job refusé."""
    pass


class HandlerNotFoundError(ApplicationError):
    """Aucun handler enregistré pour le chemin modifié."""
    pass


class WatchError(ApplicationError):
    """Erreur du canal de surveillance, fatale au processus."""
    pass
