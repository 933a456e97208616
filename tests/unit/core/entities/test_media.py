"""
Tests pour les entites media (MediaItem, PagedResult).

Verifie la serialisation camelCase, les valeurs par defaut et l'immuabilite.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.core.entities.media import CastMember, MediaItem, MediaType, PagedResult
from src.core.value_objects.rating import OfficialRating


class TestMediaItem:
    def test_only_id_title_type_required(self):
        item = MediaItem(id="808", title="Shrek", type=MediaType.MOVIE)
        assert item.poster_url is None
        assert item.genres == []
        assert item.cast is None
        assert item.official_rating is None

    def test_missing_required_field(self):
        with pytest.raises(PydanticValidationError):
            MediaItem(id="808", type=MediaType.MOVIE)

    def test_json_uses_camel_case(self):
        item = MediaItem(
            id="808",
            title="Shrek",
            type=MediaType.MOVIE,
            tmdb_id=808,
            poster_url="https://image.tmdb.org/t/p/w342/abc.jpg",
            synopsis_fr="Un ogre...",
            official_rating=OfficialRating.TOUS_PUBLICS,
            expert_age_rec=0,
            cast=[CastMember(name="Mike Myers", character="Shrek")],
        )
        data = item.to_json()
        assert data["tmdbId"] == 808
        assert data["posterUrl"] == "https://image.tmdb.org/t/p/w342/abc.jpg"
        assert data["synopsisFr"] == "Un ogre..."
        assert data["officialRating"] == "TOUS_PUBLICS"
        assert data["expertAgeRec"] == 0
        assert data["type"] == "MOVIE"
        assert data["cast"] == [{"name": "Mike Myers", "character": "Shrek", "photo": None}]

    def test_populate_by_alias(self):
        item = MediaItem.model_validate(
            {"id": "1", "title": "Tetris", "type": "GAME", "igdbId": 1, "gameModes": ["Solo"]}
        )
        assert item.igdb_id == 1
        assert item.game_modes == ["Solo"]

    def test_frozen(self):
        item = MediaItem(id="1", title="X", type=MediaType.BOOK)
        with pytest.raises(PydanticValidationError):
            item.title = "Y"


class TestPagedResult:
    def test_defaults(self):
        page = PagedResult[MediaItem]()
        assert page.items == []
        assert page.page == 1
        assert page.total_pages == 0

    def test_json(self):
        page = PagedResult[MediaItem](
            items=[MediaItem(id="1", title="X", type=MediaType.TV)],
            page=2,
            total_pages=5,
            total_results=99,
        )
        data = page.to_json()
        assert data["totalPages"] == 5
        assert data["totalResults"] == 99
        assert data["items"][0]["title"] == "X"
