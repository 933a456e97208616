"""
Tests for GoogleBooksClient - Google Books API client.

Uses respx to mock httpx calls and verifies:
- Search parameters (key, langRestrict, maxResults, startIndex)
- Pagination derived from startIndex / maxResults / totalItems
- Volume transformation (https images, ISBN-13 preferred, age estimate)
- Missing key raises ConfigError without any network call
"""

import httpx
import pytest
import respx

from src.adapters.api.google_books_client import GoogleBooksClient
from src.core.entities.media import MediaType
from src.core.errors import ConfigError, UpstreamError, ValidationError
from src.core.ports.api_clients import IBookCatalog
from src.core.value_objects.rating import OfficialRating
from tests.fixtures.google_books_responses import (
    GOOGLE_BOOKS_EMPTY_RESPONSE,
    GOOGLE_BOOKS_SEARCH_RESPONSE,
    GOOGLE_BOOKS_VOLUME,
)

VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"


@pytest.fixture
def books_client() -> GoogleBooksClient:
    return GoogleBooksClient(api_key="test_books_key")


class TestGoogleBooksInterface:
    def test_implements_interface(self, books_client: GoogleBooksClient):
        assert isinstance(books_client, IBookCatalog)
        assert books_client.source == "google_books"
        assert books_client.enabled is True


class TestGoogleBooksSearch:
    @pytest.mark.asyncio
    @respx.mock
    async def test_search_sends_expected_params(self, books_client: GoogleBooksClient):
        route = respx.get(VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_SEARCH_RESPONSE)
        )

        await books_client.search_books("Le Petit Prince")

        params = route.calls.last.request.url.params
        assert params["q"] == "Le Petit Prince"
        assert params["key"] == "test_books_key"
        assert params["langRestrict"] == "fr"
        assert params["maxResults"] == "20"
        assert params["orderBy"] == "relevance"
        assert params["printType"] == "books"
        assert "startIndex" not in params

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_pagination(self, books_client: GoogleBooksClient):
        route = respx.get(VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_SEARCH_RESPONSE)
        )

        result = await books_client.search_books("Le Petit Prince", start_index=40)

        assert route.calls.last.request.url.params["startIndex"] == "40"
        assert result.page == 3
        assert result.total_pages == 3
        assert result.total_results == 45

    @pytest.mark.asyncio
    @respx.mock
    async def test_max_results_capped_at_40(self, books_client: GoogleBooksClient):
        route = respx.get(VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_EMPTY_RESPONSE)
        )

        await books_client.search_books("chats", max_results=100)

        assert route.calls.last.request.url.params["maxResults"] == "40"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_transforms_volumes(self, books_client: GoogleBooksClient):
        respx.get(VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_SEARCH_RESPONSE)
        )

        result = await books_client.search_books("Le Petit Prince")

        book = result.items[0]
        assert book.type == MediaType.BOOK
        assert book.id == "zyTCAlFPjgYC"
        assert book.external_id == "zyTCAlFPjgYC"
        assert book.author == "Antoine de Saint-Exupéry"
        assert book.isbn == "9782070612758"
        assert book.poster_url == "https://books.google.com/books/content?id=zyTCAlFPjgYC&zoom=1"
        assert book.original_title == "Le Petit Prince: Avec des aquarelles de l'auteur"
        assert book.official_rating == OfficialRating.TOUS_PUBLICS
        assert book.expert_age_rec == 9
        assert book.page_count == 96

        minimal = result.items[1]
        assert minimal.poster_url == "/placeholder-book.jpg"
        assert minimal.language == "fr"
        assert minimal.author is None
        assert minimal.isbn is None
        assert minimal.expert_age_rec == 10

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_search_without_items_key(self, books_client: GoogleBooksClient):
        respx.get(VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_EMPTY_RESPONSE)
        )

        result = await books_client.search_books("zzzzqqq")

        assert result.items == []
        assert result.total_pages == 0

    @pytest.mark.asyncio
    async def test_invalid_order_by(self, books_client: GoogleBooksClient):
        with pytest.raises(ValidationError):
            await books_client.search_books("chats", order_by="oldest")

    @pytest.mark.asyncio
    @respx.mock
    async def test_childrens_search_adds_subject(self, books_client: GoogleBooksClient):
        route = respx.get(VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_EMPTY_RESPONSE)
        )

        await books_client.search_childrens_books("dragons")

        assert route.calls.last.request.url.params["q"] == "dragons subject:jeunesse"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_by_isbn_strips_separators(self, books_client: GoogleBooksClient):
        route = respx.get(VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_SEARCH_RESPONSE)
        )

        book = await books_client.search_by_isbn("978-2-07-061275-8")

        params = route.calls.last.request.url.params
        assert params["q"] == "isbn:9782070612758"
        assert params["maxResults"] == "1"
        assert book is not None
        assert book.title == "Le Petit Prince"


class TestGoogleBooksDetails:
    @pytest.mark.asyncio
    @respx.mock
    async def test_get_book_details(self, books_client: GoogleBooksClient):
        respx.get(f"{VOLUMES_URL}/zyTCAlFPjgYC").mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_VOLUME)
        )

        book = await books_client.get_book_details("zyTCAlFPjgYC")

        assert book.title == "Le Petit Prince"
        assert book.publisher == "Gallimard Jeunesse"
        assert book.info_link == "http://books.google.fr/books?id=zyTCAlFPjgYC&source=gbs_api"

    @pytest.mark.asyncio
    @respx.mock
    async def test_unknown_volume_raises_upstream_404(self, books_client: GoogleBooksClient):
        respx.get(f"{VOLUMES_URL}/unknown").mock(return_value=httpx.Response(404))

        with pytest.raises(UpstreamError) as exc_info:
            await books_client.get_book_details("unknown")

        assert exc_info.value.http_status == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "volume_id", ["", "   ", "a/b", "abc?key=x", "abc#frag", "a b", "..", "abc%2F"]
    )
    @respx.mock
    async def test_invalid_volume_id(self, books_client: GoogleBooksClient, volume_id: str):
        route = respx.get(url__startswith=VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_VOLUME)
        )

        with pytest.raises(ValidationError):
            await books_client.get_book_details(volume_id)

        assert not route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_volume_id_with_dash_and_underscore(self, books_client: GoogleBooksClient):
        route = respx.get(f"{VOLUMES_URL}/ab-C_12").mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_VOLUME)
        )

        await books_client.get_book_details("ab-C_12")

        assert route.called


class TestGoogleBooksConfig:
    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_key_raises_config_error_without_request(self):
        route = respx.get(VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_EMPTY_RESPONSE)
        )
        client = GoogleBooksClient(api_key=None)

        with pytest.raises(ConfigError) as exc_info:
            await client.search_books("Le Petit Prince")

        assert exc_info.value.variables == ("GOOGLE_BOOKS_API_KEY",)
        assert exc_info.value.http_status == 503
        assert not route.called


class TestGoogleBooksSelections:
    @pytest.mark.asyncio
    @respx.mock
    async def test_popular_childrens_books(self, books_client: GoogleBooksClient):
        route = respx.get(VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_SEARCH_RESPONSE)
        )

        result = await books_client.get_popular_childrens_books()

        assert route.calls.last.request.url.params["q"] == "subject:jeunesse"
        assert len(result.items) == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_by_category(self, books_client: GoogleBooksClient):
        route = respx.get(VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_EMPTY_RESPONSE)
        )

        await books_client.search_books_by_category("bande dessinée", max_results=10)

        params = route.calls.last.request.url.params
        assert params["q"] == "subject:bande dessinée"
        assert params["maxResults"] == "10"

    @pytest.mark.asyncio
    @respx.mock
    async def test_unknown_isbn_returns_none(self, books_client: GoogleBooksClient):
        respx.get(VOLUMES_URL).mock(
            return_value=httpx.Response(200, json=GOOGLE_BOOKS_EMPTY_RESPONSE)
        )

        assert await books_client.search_by_isbn("0000000000") is None
