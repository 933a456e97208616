"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- OfficialRating : Classification officielle par age (CSA, PEGI)
- map_certification : Conversion d'un code externe vers OfficialRating
- pegi_rating : Extraction de la classification PEGI depuis IGDB
"""

from src.core.value_objects.rating import (
    OfficialRating,
    map_certification,
    pegi_rating,
)

__all__ = [
    "OfficialRating",
    "map_certification",
    "pegi_rating",
]
