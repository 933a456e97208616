"""
Classifications officielles par age (CSA pour films/series, PEGI pour jeux).

Les codes renvoyes par les API externes (CSA francais, MPAA americain,
TV Parental Guidelines, PEGI numerique IGDB) sont convertis vers un
enum interne ordonne par age minimum.
"""

from enum import Enum
from typing import Any, Iterable, Optional


class OfficialRating(str, Enum):
    """
    Classification interne.

    La valeur est le code stocke et serialise; min_age donne l'ordinal
    utilise pour comparer deux classifications.
    """

    TOUS_PUBLICS = "TOUS_PUBLICS"
    CSA_10 = "CSA_10"
    CSA_12 = "CSA_12"
    CSA_16 = "CSA_16"
    CSA_18 = "CSA_18"
    PEGI_3 = "PEGI_3"
    PEGI_7 = "PEGI_7"
    PEGI_12 = "PEGI_12"
    PEGI_16 = "PEGI_16"
    PEGI_18 = "PEGI_18"

    @property
    def min_age(self) -> int:
        """Age minimum recommande."""
        return _MIN_AGE[self]

    @property
    def label(self) -> str:
        """Libelle francais affiche sur le badge."""
        return _LABELS[self]


_MIN_AGE: dict[OfficialRating, int] = {
    OfficialRating.TOUS_PUBLICS: 0,
    OfficialRating.CSA_10: 10,
    OfficialRating.CSA_12: 12,
    OfficialRating.CSA_16: 16,
    OfficialRating.CSA_18: 18,
    OfficialRating.PEGI_3: 3,
    OfficialRating.PEGI_7: 7,
    OfficialRating.PEGI_12: 12,
    OfficialRating.PEGI_16: 16,
    OfficialRating.PEGI_18: 18,
}

_LABELS: dict[OfficialRating, str] = {
    OfficialRating.TOUS_PUBLICS: "Tous publics",
    OfficialRating.CSA_10: "-10",
    OfficialRating.CSA_12: "-12",
    OfficialRating.CSA_16: "-16",
    OfficialRating.CSA_18: "-18",
    OfficialRating.PEGI_3: "PEGI 3",
    OfficialRating.PEGI_7: "PEGI 7",
    OfficialRating.PEGI_12: "PEGI 12",
    OfficialRating.PEGI_16: "PEGI 16",
    OfficialRating.PEGI_18: "PEGI 18",
}

# Codes connus -> classification interne (cles en majuscules)
CERTIFICATION_MAPPING: dict[str, OfficialRating] = {
    # CSA (France)
    "U": OfficialRating.TOUS_PUBLICS,
    "TP": OfficialRating.TOUS_PUBLICS,
    "TOUS PUBLICS": OfficialRating.TOUS_PUBLICS,
    "10": OfficialRating.CSA_10,
    "-10": OfficialRating.CSA_10,
    "12": OfficialRating.CSA_12,
    "-12": OfficialRating.CSA_12,
    "16": OfficialRating.CSA_16,
    "-16": OfficialRating.CSA_16,
    "18": OfficialRating.CSA_18,
    "-18": OfficialRating.CSA_18,
    # MPAA (Etats-Unis)
    "G": OfficialRating.TOUS_PUBLICS,
    "PG": OfficialRating.CSA_10,
    "PG-13": OfficialRating.CSA_12,
    "R": OfficialRating.CSA_16,
    "NC-17": OfficialRating.CSA_18,
    # TV Parental Guidelines (Etats-Unis)
    "TV-Y": OfficialRating.TOUS_PUBLICS,
    "TV-G": OfficialRating.TOUS_PUBLICS,
    "TV-Y7": OfficialRating.CSA_10,
    "TV-PG": OfficialRating.CSA_10,
    "TV-14": OfficialRating.CSA_12,
    "TV-MA": OfficialRating.CSA_16,
}

# Valeur "rating" IGDB (categorie PEGI) -> classification interne
PEGI_MAPPING: dict[int, OfficialRating] = {
    1: OfficialRating.PEGI_3,
    2: OfficialRating.PEGI_7,
    3: OfficialRating.PEGI_12,
    4: OfficialRating.PEGI_16,
    5: OfficialRating.PEGI_18,
}

IGDB_PEGI_CATEGORY = 2


def map_certification(code: Any) -> Optional[OfficialRating]:
    """
    Convertit un code de certification externe en classification interne.

    Fonction totale: tout code inconnu (ou qui n'est pas une chaine)
    donne None, jamais d'exception.
    """
    if not isinstance(code, str):
        return None
    return CERTIFICATION_MAPPING.get(code.strip().upper())


def pegi_rating(age_ratings: Optional[Iterable[Any]]) -> Optional[OfficialRating]:
    """
    Extrait la classification PEGI d'une liste age_ratings IGDB.

    Chaque element expose category et rating (objet ou dict).
    Le premier element de categorie PEGI est retenu.
    """
    if not age_ratings:
        return None
    for entry in age_ratings:
        category = _attr(entry, "category")
        if category == IGDB_PEGI_CATEGORY:
            return PEGI_MAPPING.get(_attr(entry, "rating"))
    return None


def _attr(entry: Any, name: str) -> Any:
    if isinstance(entry, dict):
        return entry.get(name)
    return getattr(entry, name, None)
