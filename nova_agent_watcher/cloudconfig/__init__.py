"""Module du document de configuration déclarative (cloud-config).

Seul le sous-ensemble `coreos.units` est lu et écrit.
"""

from nova_agent_watcher.cloudconfig.document import CloudConfig, HEADER

__all__ = [
    "CloudConfig",
    "HEADER",
]
