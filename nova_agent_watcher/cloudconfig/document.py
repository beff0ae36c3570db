"""Document cloud-config limité aux unités systemd."""

from dataclasses import dataclass
from typing import Any

import yaml

from nova_agent_watcher.errors.exceptions import CloudConfigError
from nova_agent_watcher.systemd.base import Unit


HEADER = "#cloud-config"


class _UnitDumper(yaml.SafeDumper):
    """Dumper YAML qui écrit les textes multi-lignes en bloc littéral."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar(
            "tag:yaml.org,2002:str", data, style="|"
        )
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_UnitDumper.add_representer(str, _represent_str)


@dataclass(frozen=True)
class CloudConfig:
    """Document déclaratif : liste ordonnée d'unités.

    Le document est immuable ; with_unit() retourne une copie
    augmentée.

    Attributes:
        units: Unités dans l'ordre d'insertion.
    """

    units: tuple[Unit, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "units", tuple(self.units))

    def with_unit(self, unit: Unit) -> "CloudConfig":
        """
        Retourne un nouveau document avec une unité en plus.

        Args:
            unit: Unité ajoutée en fin de document

        Returns:
            Nouveau document
        """
        return CloudConfig(units=self.units + (unit,))

    def to_dict(self) -> dict[str, Any]:
        """Représentation cloud-config sous forme de dictionnaire."""
        units = []
        for unit in self.units:
            entry: dict[str, Any] = {
                "name": unit.name,
                "content": unit.content,
            }
            if unit.runtime:
                entry["runtime"] = True
            if unit.enable:
                entry["enable"] = True
            units.append(entry)
        return {"coreos": {"units": units}}

    def to_yaml(self) -> str:
        """
        Sérialise le document au format cloud-config.

        Returns:
            Texte YAML précédé de l'en-tête #cloud-config
        """
        body = yaml.dump(
            self.to_dict(),
            Dumper=_UnitDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        return f"{HEADER}\n{body}"

    def __str__(self) -> str:
        return self.to_yaml()

    @classmethod
    def from_yaml(cls, text: str) -> "CloudConfig":
        """
        Analyse un document cloud-config.

        Les clés autres que `coreos.units` sont ignorées.

        Args:
            text: Texte YAML

        Returns:
            Document analysé

        Raises:
            CloudConfigError: Si le YAML ou la structure des unités
                est invalide
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise CloudConfigError(f"YAML invalide: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise CloudConfigError(
                "Le document doit être un dictionnaire YAML"
            )

        coreos = data.get("coreos") or {}
        if not isinstance(coreos, dict):
            raise CloudConfigError("'coreos' doit être un dictionnaire")
        raw_units = coreos.get("units") or []
        if not isinstance(raw_units, list):
            raise CloudConfigError("'coreos.units' doit être une liste")

        return cls(units=tuple(_parse_unit(raw) for raw in raw_units))


def _parse_unit(raw: Any) -> Unit:
    """Construit une Unit depuis une entrée de `coreos.units`."""
    if not isinstance(raw, dict):
        raise CloudConfigError(f"Unité invalide: {raw!r}")

    name = raw.get("name")
    content = raw.get("content", "")
    runtime = raw.get("runtime", False)
    enable = raw.get("enable", False)

    if not isinstance(name, str):
        raise CloudConfigError(f"Nom d'unité manquant: {raw!r}")
    if not isinstance(content, str):
        raise CloudConfigError(
            f"'content' doit être un texte pour {name}"
        )
    if not isinstance(runtime, bool) or not isinstance(enable, bool):
        raise CloudConfigError(
            f"'runtime' et 'enable' doivent être booléens pour {name}"
        )

    try:
        return Unit(
            name=name, content=content, runtime=runtime, enable=enable
        )
    except ValueError as e:
        raise CloudConfigError(str(e)) from e
