"""Exécution ponctuelle de scripts dans des unités transitoires."""

import os

from nova_agent_watcher.systemd.base import ServiceManager, TransientUnit


SCRIPT_UNIT_PREFIX = "coreos-cloudinit-"
SCRIPT_INTERPRETER = "/bin/bash"


def script_unit(script_path: str) -> TransientUnit:
    """
    Décrit l'unité transitoire qui exécute un script.

    Args:
        script_path: Chemin du script bash

    Returns:
        Unité transitoire nommée d'après le script
    """
    name = f"{SCRIPT_UNIT_PREFIX}{os.path.basename(script_path)}.service"
    return TransientUnit(name=name, argv=(SCRIPT_INTERPRETER, script_path))


def execute_script(manager: ServiceManager, script_path: str) -> str:
    """
    Exécute un script via une unité transitoire.

    Args:
        manager: Gestionnaire de services
        script_path: Chemin du script bash

    Returns:
        Nom de l'unité transitoire créée

    Raises:
        ServiceManagerError: Si systemd refuse l'unité
    """
    unit = script_unit(script_path)
    manager.start_transient_unit(unit, "replace")
    return unit.name
