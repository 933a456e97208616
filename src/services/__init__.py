"""
Couche application (services).

Orchestration au-dessus des ports du domaine:
- MediaLookupService : fiche d'un media a partir de son identifiant de route
"""

from src.services.media_lookup import MediaLookupService

__all__ = ["MediaLookupService"]
