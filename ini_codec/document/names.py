"""Normalisation des noms de sections et de clés."""

from ini_codec.errors.exceptions import InvalidNameError

#: Section implicite des paires placées avant tout en-tête.
ROOT_SECTION = "root"


def normalize_name(name: str) -> str:
    """Retourne la forme stockée d'un nom de section ou de clé.

    Les noms sont insensibles à la casse : seule la forme en
    minuscules est conservée.
    """
    return name.lower()


def validate_name(name: str, kind: str) -> str:
    """Normalise un nom fourni par l'appelant et refuse les noms vides.

    Args:
        name: Nom de section ou de clé.
        kind: "section" ou "key", pour le message d'erreur.

    Returns:
        Nom normalisé.

    Raises:
        TypeError: Si le nom n'est pas une chaîne.
        InvalidNameError: Si le nom est vide une fois débarrassé des
            espaces, ou s'il ne pourrait pas être relu tel quel.
    """
    if not isinstance(name, str):
        raise TypeError(f"{kind} name must be a str, got {type(name).__name__}")
    if not name.strip():
        raise InvalidNameError(f"empty {kind} name")
    if name != name.strip() or "\n" in name or "\r" in name:
        raise InvalidNameError(
            f"{kind} name {name!r} has surrounding whitespace or a newline"
        )
    if kind == "key" and "=" in name:
        raise InvalidNameError(f"key name {name!r} contains '='")
    if kind == "key" and name[0] in ";#":
        raise InvalidNameError(
            f"key name {name!r} would be read back as a comment"
        )
    return normalize_name(name)
