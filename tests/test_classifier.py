import pytest

from src.models import ShopRecord
from src.processors.classifier import (
    calculate_confidence,
    classify_shop,
    classify_shops,
    detect_potential_chains,
    match_chain_by_website,
)
from src.processors.deduplicator import extract_city


def place(name, types=None, website=None):
    return ShopRecord(name=name, types=types or [], website=website, source="google-places")


class TestCalculateConfidence:
    def test_known_chain_by_name(self):
        result = calculate_confidence(place("Zumiez", []))
        assert result.level == "high"
        assert result.reason == "Known chain: Zumiez"

    def test_known_chain_by_website(self):
        result = calculate_confidence(place("Mall Location", [], "https://www.zumiez.com/store/123"))
        assert result.level == "high"
        assert result.reason == "Known chain: Zumiez"

    def test_skateboard_shop_type(self):
        result = calculate_confidence(place("Anything", ["skateboard_shop"]))
        assert result.level == "high"
        assert result.reason == "Has skateboard_shop type"

    def test_skate_park_with_store(self):
        result = calculate_confidence(place("Food Court", ["skateboard_park", "store"]))
        assert result.level == "very_high"

    def test_skate_park_alone_is_excluded(self):
        result = calculate_confidence(place("City Skatepark", ["skateboard_park"]))
        assert result.level == "exclude"
        assert result.reason == "No store type"

    def test_store_with_skate_name(self):
        result = calculate_confidence(place("Uprise Skateshop", ["store"]))
        assert result.level == "good"
        assert result.reason == "Store with skate-related name"

    def test_skate_name_matching_skip_pattern(self):
        result = calculate_confidence(place("Great Skate Hockey", ["store"]))
        assert result.level == "exclude"
        assert result.reason == "Name matches skip pattern"

    def test_hockey_store_is_excluded(self):
        result = calculate_confidence(place("Pure Hockey", ["sporting_goods_store"]))
        assert result.level == "exclude"
        assert result.reason == "Name matches skip pattern"

    def test_store_with_skate_website(self):
        result = calculate_confidence(place("Rec", ["store"], "https://recskate.com"))
        assert result.level == "good"
        assert result.reason == "Store with skate-related website"

    def test_skate_website_matching_skip_pattern(self):
        result = calculate_confidence(place("Blades", ["store"], "https://www.iceskatepro.com"))
        assert result.level == "exclude"
        assert result.reason == "Website matches skip pattern"

    def test_excluded_type(self):
        result = calculate_confidence(place("Macy's", ["department_store", "store"]))
        assert result.level == "exclude"
        assert result.reason == "Has excluded type"

    def test_generic_store_needs_review(self):
        result = calculate_confidence(place("Main Street Outfitters", ["store"]))
        assert result.level == "review"
        assert result.reason == "Store type but no clear skateboard indicator"

    def test_no_store_type(self):
        result = calculate_confidence(place("Some Office", ["point_of_interest"]))
        assert result.level == "exclude"
        assert result.reason == "No store type"

    def test_hockey_store_with_generic_store_type(self):
        result = calculate_confidence(place("Pure Hockey", ["store"]))
        assert result.level == "exclude"
        assert result.reason == "Name matches skip pattern"

    def test_skate_park_rule_wins_over_skate_name(self):
        result = calculate_confidence(place("Food Court Skatepark", ["skateboard_park", "store"]))
        assert result.level == "very_high"

    def test_unnamed_skate_park_without_store_type(self):
        result = calculate_confidence(ShopRecord(name=None, types=["skateboard_park"]))
        assert result.level == "exclude"
        assert result.reason == "No store type"

    def test_missing_types_and_name(self):
        result = calculate_confidence(ShopRecord(name=None))
        assert result.level == "exclude"


class TestClassifyShop:
    @pytest.mark.parametrize("name,chain", [
        ("Zumiez Mall Location", "Zumiez"),
        ("ZUMIEZ Store", "Zumiez"),
        ("Vans Store", "Vans"),
        ("Vans", "Vans"),
        ("Tactics Boardshop", "Tactics"),
        ("CCS Skate Shop", "CCS"),
        ("Tilly's", "Tilly's"),
        ("Tillys", "Tilly's"),
        ("PacSun", "PacSun"),
    ])
    def test_known_chain_names(self, name, chain):
        result = classify_shop(ShopRecord(name=name))
        assert result.is_independent is False
        assert result.chain_name == chain

    @pytest.mark.parametrize("name", ["Local Skate Shop", "Vanguard Skateboards", "Tacticsville Boards"])
    def test_independent_names(self, name):
        result = classify_shop(ShopRecord(name=name))
        assert result.is_independent is True
        assert result.chain_name is None

    def test_chain_by_website_domain(self):
        result = classify_shop(ShopRecord(name="Some Store", website="https://www.zumiez.com"))
        assert result.is_independent is False
        assert result.chain_name == "Zumiez"

    def test_chain_by_subdomain(self):
        assert match_chain_by_website("https://stores.vans.com/ca/la") == "Vans"
        assert match_chain_by_website("https://notvans.com") is None

    def test_preserves_existing_chain_classification(self):
        shop = ShopRecord(name="Some Store", is_independent=False, chain_name="Custom Chain")
        result = classify_shop(shop)
        assert result.is_independent is False
        assert result.chain_name == "Custom Chain"

    def test_chain_flag_without_name_gets_placeholder(self):
        result = classify_shop(ShopRecord(name="Some Store", is_independent=False))
        assert result.chain_name == "Unknown Chain"

    def test_does_not_mutate_input(self):
        shop = ShopRecord(name="Zumiez")
        classify_shop(shop)
        assert shop.is_independent is None

    def test_chain_name_present_exactly_for_chains(self):
        shops = [
            ShopRecord(name="Zumiez"),
            ShopRecord(name="Local Skate Shop"),
            ShopRecord(name="Some Store", is_independent=False),
            ShopRecord(name="Another", chain_name="Custom"),
            ShopRecord(name="Indie", is_independent=True),
        ]
        for result in classify_shops(shops):
            assert (result.is_independent is False) == (result.chain_name is not None)


class TestDetectPotentialChains:
    def test_same_name_in_multiple_cities(self):
        shops = [
            ShopRecord(name="Cool Skate", address="123 Main, Los Angeles, CA"),
            ShopRecord(name="Cool Skate", address="456 Oak, San Francisco, CA"),
            ShopRecord(name="Other Shop", address="789 Pine, Seattle, WA"),
        ]
        result = detect_potential_chains(shops)

        assert len(result) == 1
        assert result[0].name == "cool skate"
        assert result[0].location_count == 2
        assert result[0].cities == ["los angeles", "san francisco"]

    def test_same_city_is_not_a_chain(self):
        shops = [
            ShopRecord(name="Cool Skate", address="123 Main, Los Angeles, CA"),
            ShopRecord(name="Cool Skate", address="456 Oak, Los Angeles, CA"),
        ]
        assert detect_potential_chains(shops) == []

    def test_sorted_by_location_count(self):
        shops = [
            ShopRecord(name="Two Shop", address="1 A, Austin, TX"),
            ShopRecord(name="Two Shop", address="2 B, Dallas, TX"),
            ShopRecord(name="Three Shop", address="1 A, Denver, CO"),
            ShopRecord(name="Three Shop", address="2 B, Boulder, CO"),
            ShopRecord(name="Three Shop", address="3 C, Aurora, CO"),
        ]
        result = detect_potential_chains(shops)

        assert [c.name for c in result] == ["three shop", "two shop"]
        assert result[0].location_count == 3

    def test_cities_agree_with_deduplicator(self):
        shops = [
            ShopRecord(name="Ramp Co", address="12 Pine St, Portland, OR 97201"),
            ShopRecord(name="Ramp Co", address="4 Main St, Salem, OR"),
        ]
        result = detect_potential_chains(shops)

        assert result[0].cities == [extract_city(shop.address) for shop in shops]
