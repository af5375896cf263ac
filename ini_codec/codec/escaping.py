"""Règles de guillemets et d'échappement des valeurs INI.

Écriture : une valeur contenant un espace blanc, un guillemet, une
barre oblique inverse ou l'un des caractères ``= ; # [ ]`` est placée
entre guillemets doubles, avec échappement de ``"``, ``\\``, du saut de
ligne, du retour chariot et de la tabulation.

Lecture : une valeur entourée du même guillemet (``"`` ou ``'``) perd
ses guillemets puis est décodée ; une séquence inconnue est conservée
telle quelle, barre oblique comprise.
"""

QUOTES = ('"', "'")

#: Caractères (hors espaces blancs) imposant des guillemets à l'écriture.
RESERVED_CHARS = frozenset('"\'\\=;#[]')

_ENCODE = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_DECODE = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
}


def needs_quoting(value: str) -> bool:
    """Indique si une valeur doit être écrite entre guillemets."""
    return any(char.isspace() or char in RESERVED_CHARS for char in value)


def escape_value(value: str) -> str:
    """Retourne la valeur entre guillemets doubles, échappée."""
    return '"' + "".join(_ENCODE.get(char, char) for char in value) + '"'


def format_value(value: str) -> str:
    """Retourne la forme écrite d'une valeur : brute ou échappée."""
    if needs_quoting(value):
        return escape_value(value)
    return value


def unescape_value(inner: str, quote: str) -> str:
    """Décode les séquences d'échappement d'une valeur entre guillemets.

    Args:
        inner: Texte situé entre les guillemets.
        quote: Guillemet englobant ; seul celui-ci peut être échappé.

    Returns:
        Texte décodé.
    """
    decoded: list[str] = []
    index = 0
    length = len(inner)
    while index < length:
        char = inner[index]
        if char != "\\" or index + 1 == length:
            # Une barre oblique finale isolée reste littérale
            decoded.append(char)
            index += 1
            continue
        following = inner[index + 1]
        if following in _DECODE:
            decoded.append(_DECODE[following])
        elif following == quote:
            decoded.append(quote)
        else:
            decoded.append(char + following)
        index += 2
    return "".join(decoded)


def parse_value(raw: str) -> str:
    """Interprète la partie droite d'une ligne ``clé=valeur``.

    Args:
        raw: Texte après le premier ``=``, déjà débarrassé des espaces.

    Returns:
        La valeur décodée si elle est entourée de guillemets
        identiques, sinon le texte brut sans aucun décodage.
    """
    if len(raw) >= 2 and raw[0] in QUOTES and raw[-1] == raw[0]:
        return unescape_value(raw[1:-1], raw[0])
    return raw
