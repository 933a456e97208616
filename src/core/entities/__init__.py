"""
Business entities representing core domain concepts.

Exports:
- MediaItem: Canonical media DTO (movie, TV show, game, book)
- MediaType: Kind of media
- CastMember: Credited actor
- PagedResult: One page of upstream results
"""

from src.core.entities.media import CastMember, MediaItem, MediaType, PagedResult

__all__ = [
    "CastMember",
    "MediaItem",
    "MediaType",
    "PagedResult",
]
