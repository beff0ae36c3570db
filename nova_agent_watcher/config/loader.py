"""Lecture du fichier de configuration de l'agent (--config)."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TypeVar, Union

from pydantic import BaseModel


ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigLoader(ABC):
    """Source de configuration validée par un modèle Pydantic.

    Injectable dans load_settings() pour les tests.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type[ModelT]
    ) -> ModelT:
        """
        Charge et valide une configuration.

        Args:
            config_path: Chemin du fichier de configuration
            schema: Modèle Pydantic de la configuration

        Returns:
            Instance validée du modèle

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si le fichier ou son contenu est invalide
        """
        pass


class FileConfigLoader(ConfigLoader):
    """Fichier TOML ou JSON, choisi d'après l'extension."""

    def load(
        self,
        config_path: Union[str, Path],
        schema: type[ModelT]
    ) -> ModelT:
        """
        Lit le fichier puis le valide avec le modèle.

        Un fichier vide donne les valeurs par défaut du modèle.

        Args:
            config_path: Fichier .toml ou .json
            schema: Modèle Pydantic de la configuration

        Returns:
            Instance validée du modèle

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si l'extension n'est pas supportée ou si le
                contenu est invalide (TOMLDecodeError, JSONDecodeError
                et pydantic.ValidationError en dérivent)
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )
        return schema.model_validate(self._read(path))

    @staticmethod
    def _read(path: Path) -> Any:
        suffix = path.suffix.lower()
        if suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f)
        if suffix == ".json":
            text = path.read_text(encoding="utf-8")
            return json.loads(text) if text.strip() else {}
        raise ValueError(
            f"Extension non supportée: {suffix}. Utilisez .toml ou .json"
        )
