"""Modèles Pydantic de la configuration de l'agent.

Toutes les clés sont optionnelles : un fichier absent ou vide donne
la configuration par défaut. Les clés inconnues sont refusées.

Exemple de fichier TOML:
    [watcher]
    translator = "/usr/lib/nova-agent/gentoo-to-networkd"

    [systemd]
    backend = "systemctl"

    [logging]
    level = "DEBUG"
    file = "/var/log/nova-agent-watcher.log"
"""

from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nova_agent_watcher.config.loader import ConfigLoader, FileConfigLoader
from nova_agent_watcher.errors.exceptions import FileConfigurationError


class WatcherSettings(BaseModel):
    """Section [watcher] : synthèse de la configuration réseau."""

    model_config = ConfigDict(extra="forbid")

    translator: str = "./scripts/gentoo-to-networkd"


class DeploySettings(BaseModel):
    """Section [deploy] : ré-invocation de l'outil de déploiement."""

    model_config = ConfigDict(extra="forbid")

    command: str = "/usr/bin/coreos-cloudinit"
    root: str = "/"
    temp_prefix: str = "rackspace-cloudinit-"

    @field_validator("root")
    @classmethod
    def root_must_be_absolute(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("La racine de déploiement doit être absolue")
        return v


class SystemdSettings(BaseModel):
    """Section [systemd] : accès au gestionnaire de services."""

    model_config = ConfigDict(extra="forbid")

    backend: Literal["dbus", "systemctl"] = "dbus"
    network_service: str = "systemd-networkd.service"


class LoggingSettings(BaseModel):
    """Section [logging]."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    file: str = ""
    format: str = "%(asctime)s - %(levelname)s - %(message)s"


class AgentSettings(BaseModel):
    """Configuration complète de l'agent."""

    model_config = ConfigDict(extra="forbid")

    watcher: WatcherSettings = Field(default_factory=WatcherSettings)
    deploy: DeploySettings = Field(default_factory=DeploySettings)
    systemd: SystemdSettings = Field(default_factory=SystemdSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_settings(
    config_path: Optional[Union[str, Path]] = None,
    loader: Optional[ConfigLoader] = None
) -> AgentSettings:
    """
    Charge la configuration de l'agent.

    Args:
        config_path: Fichier TOML ou JSON ; None pour les valeurs
            par défaut
        loader: Chargeur injectable (FileConfigLoader par défaut)

    Returns:
        Configuration validée

    Raises:
        FileConfigurationError: Si le fichier est absent, illisible
            ou ne respecte pas le schéma
    """
    if config_path is None:
        return AgentSettings()

    loader = loader or FileConfigLoader()
    # TOMLDecodeError, JSONDecodeError et pydantic.ValidationError
    # dérivent de ValueError
    try:
        return loader.load(config_path, schema=AgentSettings)
    except (OSError, ValueError) as e:
        raise FileConfigurationError(
            f"Configuration invalide ({config_path}): {e}"
        ) from e
