import math

import pytest

from src.models import ShopRecord
from src.processors.normalizer import (
    normalize_address,
    normalize_coordinate,
    normalize_name,
    normalize_phone,
    normalize_shop,
    normalize_shops,
    normalize_website,
    prepare_for_output,
)


class TestNormalizeName:
    def test_trims_and_collapses_whitespace(self):
        assert normalize_name("  Shop   Name  ") == "Shop Name"

    def test_decodes_html_entities(self):
        assert normalize_name("Tom &amp; Jerry&#39;s &quot;Boards&quot;") == 'Tom & Jerry\'s "Boards"'

    def test_straightens_curly_quotes(self):
        assert normalize_name("Rob‘s “Deck” Shop’s") == "Rob's \"Deck\" Shop's"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_name_uses_sentinel(self, value):
        assert normalize_name(value) == "Unknown Skateshop"


class TestNormalizePhone:
    @pytest.mark.parametrize("raw", [
        "5551234567",
        "555-123-4567",
        "555.123.4567",
        "(555) 123-4567",
        "15551234567",
        "+1 555 123 4567",
    ])
    def test_formats_north_american_numbers(self, raw):
        assert normalize_phone(raw) == "(555) 123-4567"

    def test_international_number_passes_through_trimmed(self):
        assert normalize_phone("  +44 20 7946 0958 ") == "+44 20 7946 0958"

    def test_eleven_digits_without_leading_one_is_unchanged(self):
        assert normalize_phone("25551234567") == "25551234567"

    def test_missing_phone(self):
        assert normalize_phone(None) is None
        assert normalize_phone("") is None


class TestNormalizeWebsite:
    @pytest.mark.parametrize("raw,expected", [
        ("example.com", "https://example.com"),
        ("www.example.com", "https://www.example.com"),
        ("https://example.com", "https://example.com"),
        ("http://example.com", "http://example.com"),
        ("https://example.com/", "https://example.com"),
        ("HTTPS://Example.COM/Shop", "https://example.com/Shop"),
        ("  example.com/about  ", "https://example.com/about"),
        ("https://example.com:443/", "https://example.com"),
        ("https://example.com:8080/store", "https://example.com:8080/store"),
        ("https://example.com/store?id=5", "https://example.com/store?id=5"),
        ("https://skate_shop.example.com/", "https://skate_shop.example.com"),
        ("https://example.com./", "https://example.com."),
    ])
    def test_normalizes_valid_urls(self, raw, expected):
        assert normalize_website(raw) == expected

    @pytest.mark.parametrize("raw", [
        None,
        "",
        "abc",
        "not a url",
        "http://",
        "https://",
        "https://localhost",
        "http://foo bar.com",
        "https://example.com:notaport",
        "https://exa<mple.com",
        "https://shop|board.com",
    ])
    def test_rejects_unusable_urls(self, raw):
        assert normalize_website(raw) is None

    @pytest.mark.parametrize("raw", [
        "example.com",
        "www.Example.com/",
        "HTTP://SHOP.example.com/Path/To Page",
        "https://example.com:8080/store?id=5#hours",
        "https://xn--skt-0na.com/",
    ])
    def test_is_idempotent(self, raw):
        once = normalize_website(raw)
        assert once is not None
        assert normalize_website(once) == once


class TestNormalizeAddress:
    def test_collapses_whitespace_and_expands_suffix(self):
        assert normalize_address("123  Main   St") == "123 Main St."

    def test_normalizes_comma_spacing(self):
        assert normalize_address("LA,CA") == "LA, CA"
        assert normalize_address("1 Elm Ave ,  Portland , OR") == "1 Elm Ave., Portland, OR"

    def test_does_not_double_existing_period(self):
        assert normalize_address("456 Oak Ave., Los Angeles") == "456 Oak Ave., Los Angeles"

    def test_only_whole_words_are_expanded(self):
        assert normalize_address("1 Stanford Dr") == "1 Stanford Dr."

    def test_abbreviation_match_is_case_sensitive(self):
        assert normalize_address("9 main st") == "9 main st"

    def test_missing_address(self):
        assert normalize_address(None) is None


class TestNormalizeCoordinate:
    def test_rounds_to_six_places(self):
        assert normalize_coordinate(34.12345678) == 34.123457
        assert normalize_coordinate(-118.87654321) == -118.876543

    @pytest.mark.parametrize("value", ["invalid", None, float("nan"), True])
    def test_non_numeric_is_none(self, value):
        assert normalize_coordinate(value) is None


def test_normalize_shop_keeps_internal_fields():
    shop = ShopRecord(
        name="  Shop &amp; Co ",
        lat=34.0000001,
        lng=-118.0,
        phone="555.123.4567",
        website="shop.com/",
        source="osm",
        osm_id=42,
        osm_type="node",
    )
    result = normalize_shop(shop)

    assert result.name == "Shop & Co"
    assert result.lat == 34.0
    assert result.phone == "(555) 123-4567"
    assert result.website == "https://shop.com"
    assert result.source == "osm"
    assert result.osm_id == 42


def test_normalize_shops_handles_every_record():
    shops = [
        ShopRecord(name="  Shop A  ", lat=34.0, lng=-118.0),
        ShopRecord(name="  Shop B  ", lat=35.0, lng=-119.0),
    ]
    result = normalize_shops(shops)
    assert [s.name for s in result] == ["Shop A", "Shop B"]
    assert normalize_shops([]) == []


class TestPrepareForOutput:
    def test_removes_internal_metadata(self):
        shop = ShopRecord(
            id=1,
            name="Shop",
            address="123 Main",
            lat=34.0,
            lng=-118.0,
            is_independent=True,
            source="osm",
            osm_id=99,
            google_place_id="abc",
            types=["store"],
            merged_from=["osm", "manual"],
        )
        output = prepare_for_output([shop])[0]

        assert output == {
            "id": 1,
            "name": "Shop",
            "address": "123 Main",
            "lat": 34.0,
            "lng": -118.0,
            "isIndependent": True,
        }

    def test_omits_absent_optional_fields(self):
        shop = ShopRecord(id=1, name="Shop", address=None, lat=34.0, lng=-118.0, is_independent=True)
        output = prepare_for_output([shop])[0]

        assert "address" not in output
        assert "website" not in output
        assert "phone" not in output
        assert "chainName" not in output
        assert None not in output.values()

    def test_includes_chain_name_only_for_chains(self):
        chain = ShopRecord(id=2, name="Zumiez", lat=34.0, lng=-118.0, is_independent=False, chain_name="Zumiez")
        output = prepare_for_output([chain])[0]

        assert output["isIndependent"] is False
        assert output["chainName"] == "Zumiez"

    def test_keeps_contact_fields_when_present(self):
        shop = ShopRecord(
            id=3, name="Shop", lat=34.0, lng=-118.0, is_independent=True,
            website="https://shop.com", phone="(555) 123-4567", photo="images/3.jpg",
        )
        output = prepare_for_output([shop])[0]

        assert output["website"] == "https://shop.com"
        assert output["phone"] == "(555) 123-4567"
        assert output["photo"] == "images/3.jpg"
        assert not math.isnan(output["lat"])
