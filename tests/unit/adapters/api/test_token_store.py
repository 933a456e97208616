"""
Tests du store de token IGDB.
"""

from src.adapters.api.token_store import EXPIRY_MARGIN_SECONDS, IGDBTokenStore


class TestIGDBTokenStore:
    def test_empty_store_is_invalid(self, token_store: IGDBTokenStore):
        assert token_store.is_valid() is False
        assert token_store.token is None

    def test_store_applies_margin(self, token_store: IGDBTokenStore, fake_clock):
        token_store.store("abc", 3600)
        assert token_store.expires_at == fake_clock.now + 3600 - EXPIRY_MARGIN_SECONDS
        assert token_store.is_valid() is True

    def test_expires_at_margin(self, token_store: IGDBTokenStore, fake_clock):
        token_store.store("abc", 3600)
        fake_clock.advance(3600 - EXPIRY_MARGIN_SECONDS - 1)
        assert token_store.is_valid() is True
        fake_clock.advance(1)
        assert token_store.is_valid() is False

    def test_new_token_replaces_old(self, token_store: IGDBTokenStore):
        token_store.store("old", 100)
        token_store.store("new", 7200)
        assert token_store.token == "new"

    def test_clear(self, token_store: IGDBTokenStore):
        token_store.store("abc", 3600)
        token_store.clear()
        assert token_store.is_valid() is False
        assert token_store.expires_at == 0.0

    def test_independent_instances(self):
        a, b = IGDBTokenStore(), IGDBTokenStore()
        a.store("abc", 3600)
        assert b.token is None
