"""
Nettoyage des entrees utilisateur.

Fonctions pures appelees par la couche HTTP avant tout appel a une API
externe. Aucune ne leve d'exception: une entree inutilisable donne une
chaine vide ou None.
"""

import html
import math
import re
from typing import Any, Optional

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_QUERY_FORBIDDEN = re.compile(r"[<>{}\[\]\\]")

MAX_INPUT_LENGTH = 1000
MAX_QUERY_LENGTH = 200


def sanitize_input(value: Any) -> str:
    """Echappe le HTML et retire les caracteres de controle (texte libre)."""
    if not isinstance(value, str):
        return ""
    cleaned = _CONTROL_CHARS.sub("", value)
    return html.escape(cleaned, quote=True)[:MAX_INPUT_LENGTH]


def sanitize_search_query(query: Any) -> str:
    """
    Nettoie une requete de recherche destinee a une API externe.

    Plus permissif que sanitize_input: les accents et la ponctuation
    usuelle sont conserves, seuls les caracteres de controle et
    <>{}[]\\ sont retires.
    """
    if not isinstance(query, str):
        return ""
    cleaned = _CONTROL_CHARS.sub("", query)
    cleaned = _QUERY_FORBIDDEN.sub("", cleaned)
    return cleaned[:MAX_QUERY_LENGTH].strip()


def escape_igdb_query(query: Any) -> str:
    """Echappe une chaine pour l'inclure entre guillemets dans une requete IGDB."""
    if not isinstance(query, str):
        return ""
    # Troncature avant echappement: jamais d'antislash isole en fin de chaine
    query = query[:MAX_QUERY_LENGTH].strip()
    # Antislash d'abord, sinon les guillemets echappes seraient doubles
    escaped = query.replace("\\", "\\\\").replace('"', '\\"')
    escaped = escaped.replace(";", "").replace("\0", "")
    return escaped.strip()


def sanitize_number(
    value: Any,
    minimum: int = 0,
    maximum: Optional[int] = None,
) -> Optional[int]:
    """
    Convertit une valeur en entier borne.

    Returns:
        L'entier tronque puis borne a [minimum, maximum], ou None si la
        valeur n'est pas numerique.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    result = max(math.floor(number), minimum)
    if maximum is not None:
        result = min(result, maximum)
    return result


def sanitize_page(value: Any, maximum: int = 500) -> int:
    """
    Numero de page pour une API paginee.

    Toute valeur non numerique ou hors de [1, maximum] est ramenee a 1.
    """
    page = sanitize_number(value, minimum=0)
    if page is None or not 1 <= page <= maximum:
        return 1
    return page
