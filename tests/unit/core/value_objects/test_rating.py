"""
Tests pour les classifications officielles (CSA, PEGI).

Verifie que map_certification est totale (jamais d'exception) et que
les codes CSA, MPAA et TV Parental Guidelines sont correctement convertis.
"""

import pytest

from src.core.value_objects.rating import (
    CERTIFICATION_MAPPING,
    OfficialRating,
    map_certification,
    pegi_rating,
)


class TestMapCertification:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("U", OfficialRating.TOUS_PUBLICS),
            ("TP", OfficialRating.TOUS_PUBLICS),
            ("Tous publics", OfficialRating.TOUS_PUBLICS),
            ("-12", OfficialRating.CSA_12),
            ("16", OfficialRating.CSA_16),
            ("PG", OfficialRating.CSA_10),
            ("PG-13", OfficialRating.CSA_12),
            ("NC-17", OfficialRating.CSA_18),
            ("tv-ma", OfficialRating.CSA_16),
            (" TV-Y7 ", OfficialRating.CSA_10),
        ],
    )
    def test_known_codes(self, code, expected):
        assert map_certification(code) == expected

    @pytest.mark.parametrize("code", ["", "XYZ", "NR", "15", None, 12, ["U"]])
    def test_unknown_codes_return_none(self, code):
        assert map_certification(code) is None

    def test_every_mapped_code_round_trips(self):
        for code, rating in CERTIFICATION_MAPPING.items():
            assert map_certification(code) is rating


class TestOfficialRating:
    def test_min_age(self):
        assert OfficialRating.TOUS_PUBLICS.min_age == 0
        assert OfficialRating.CSA_12.min_age == 12
        assert OfficialRating.PEGI_7.min_age == 7

    def test_labels(self):
        assert OfficialRating.TOUS_PUBLICS.label == "Tous publics"
        assert OfficialRating.PEGI_18.label == "PEGI 18"

    def test_value_is_serialised_code(self):
        assert OfficialRating("CSA_16") is OfficialRating.CSA_16


class TestPegiRating:
    def test_first_pegi_entry(self):
        ratings = [{"category": 1, "rating": 9}, {"category": 2, "rating": 2}]
        assert pegi_rating(ratings) == OfficialRating.PEGI_7

    def test_no_pegi_entry(self):
        assert pegi_rating([{"category": 1, "rating": 9}]) is None
        assert pegi_rating([]) is None
        assert pegi_rating(None) is None

    def test_unknown_pegi_value(self):
        assert pegi_rating([{"category": 2, "rating": 42}]) is None
