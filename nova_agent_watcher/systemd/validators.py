"""Fonctions de validation pour les noms d'unités systemd."""

import re


# Nom d'unité systemd : lettres, chiffres, points, tirets, underscores,
# ':', '@' (instances) et '\' (échappements)
_UNIT_NAME_RE = re.compile(r'^[a-zA-Z0-9][a-zA-Z0-9:._@\\-]*$')

# Suffixes connus de systemd et systemd-networkd
UNIT_TYPES = frozenset({
    "service", "socket", "device", "mount", "automount", "swap",
    "target", "path", "timer", "slice", "scope",
    "network", "netdev", "link",
})


def validate_unit_name(name: str) -> str:
    """Valide un nom d'unité systemd complet (avec son suffixe).

    Accepte les caractères : lettres, chiffres, points, tirets,
    underscores, deux-points, '@' et '\\'. Le premier caractère doit
    être alphanumérique et le suffixe doit être un type d'unité connu.

    Args:
        name: Nom d'unité à valider (ex: "50-eth0.network").

    Returns:
        Le nom validé.

    Raises:
        ValueError: Si le nom est invalide.
    """
    if not name:
        raise ValueError("Le nom d'unité ne peut pas être vide")
    if '..' in name or '/' in name:
        raise ValueError(
            f"Nom d'unité invalide (traversée interdite) : {name!r}"
        )
    if not _UNIT_NAME_RE.match(name):
        raise ValueError(
            f"Nom d'unité invalide : {name!r}"
        )
    _, dot, suffix = name.rpartition(".")
    if not dot or suffix.lower() not in UNIT_TYPES:
        raise ValueError(
            f"Nom d'unité invalide (type inconnu) : {name!r}"
        )
    return name
