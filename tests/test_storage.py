import json
from datetime import date

from src.models import ConfidenceResult, RoutedShop, ShopRecord
from src.storage import (
    build_output_document,
    load_id_set,
    load_json,
    save_json,
    to_review_dict,
)


def test_save_json_creates_directories(tmp_path):
    path = tmp_path / "nested" / "out.json"
    save_json(str(path), {"a": 1})

    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert json.loads(text) == {"a": 1}
    assert load_json(str(path)) == {"a": 1}


def test_load_json_missing_file_returns_default(tmp_path):
    assert load_json(str(tmp_path / "missing.json"), default=[]) == []


class TestLoadIdSet:
    def test_missing_file(self, tmp_path):
        assert load_id_set(str(tmp_path / "missing.json")) == set()

    def test_reads_ids(self, tmp_path):
        path = tmp_path / "approved.json"
        path.write_text('["ChIJabc", "osm/node/1"]', encoding="utf-8")
        assert load_id_set(str(path)) == {"ChIJabc", "osm/node/1"}

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "removed.json"
        path.write_text('{"ids": []}', encoding="utf-8")
        assert load_id_set(str(path)) == set()

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "removed.json"
        path.write_text("[not json", encoding="utf-8")
        assert load_id_set(str(path)) == set()


def test_build_output_document():
    shops = [
        {"id": 1, "name": "A", "lat": 34.0, "lng": -118.0, "isIndependent": True, "website": "https://a.example.com"},
        {"id": 2, "name": "B", "lat": 35.0, "lng": -118.0, "isIndependent": False, "chainName": "Zumiez",
         "phone": "(555) 123-4567"},
    ]
    document = build_output_document(shops, today=date(2026, 3, 1))

    assert document["lastUpdated"] == "2026-03-01"
    assert document["shops"] is shops
    assert document["stats"] == {
        "total": 2,
        "independent": 1,
        "chain": 1,
        "withWebsite": 1,
        "withPhone": 1,
        "withPhoto": 0,
    }


def test_to_review_dict_adds_review_context():
    shop = ShopRecord(
        id="google-abc", name="Main Street Outfitters", lat=34.0, lng=-118.0,
        is_independent=True, google_place_id="abc", types=["store"],
    )
    record = to_review_dict(RoutedShop(shop, ConfidenceResult("review", "Store type but no clear skateboard indicator")))

    assert record["googlePlaceId"] == "abc"
    assert record["types"] == ["store"]
    assert record["confidenceReason"] == "Store type but no clear skateboard indicator"
    assert "source" not in record
