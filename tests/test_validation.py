from src.models import RegionBounds
from src.validation import summarize, validate_shops_data

US_BOUNDS = RegionBounds(min_lat=24.5, max_lat=49.5, min_lng=-125.0, max_lng=-66.5)


def document(*shops):
    return {"shops": list(shops), "lastUpdated": "2026-01-01", "version": "1.0.0"}


def shop(id, name, lat=34.0, lng=-118.0, **kwargs):
    record = {"id": id, "name": name, "lat": lat, "lng": lng, "isIndependent": True}
    record.update(kwargs)
    return record


def messages(issues):
    return [issue.message for issue in issues]


def test_clean_document_passes():
    data = document(
        shop(1, "Uprise Skateshop", website="https://uprise.example.com", phone="(555) 123-4567"),
        shop(2, "Zumiez", lat=35.0, isIndependent=False, chainName="Zumiez"),
    )
    results = validate_shops_data(data, US_BOUNDS)

    assert not results.has_errors
    assert results.warnings == []


def test_missing_shops_array():
    results = validate_shops_data({"lastUpdated": "2026-01-01"}, US_BOUNDS)
    assert messages(results.errors) == ['Missing "shops" array in file']


def test_missing_metadata_is_a_warning():
    results = validate_shops_data({"shops": []}, US_BOUNDS)

    assert not results.has_errors
    assert 'Missing "lastUpdated" field' in messages(results.warnings)
    assert 'Missing "version" field' in messages(results.warnings)


def test_missing_required_fields():
    results = validate_shops_data(document({"id": 1, "name": "No Coords", "isIndependent": True}), US_BOUNDS)

    assert "Missing required field: lat" in messages(results.errors)
    assert "Missing required field: lng" in messages(results.errors)


def test_chain_name_must_match_independence():
    data = document(
        shop(1, "Chain Without Name", isIndependent=False),
        shop(2, "Indie With Chain Name", lat=35.0, chainName="Oops"),
    )
    results = validate_shops_data(data, US_BOUNDS)
    assert len(results.errors) == 2


def test_null_island_is_an_error():
    results = validate_shops_data(document(shop(1, "Nowhere", lat=0, lng=0)), US_BOUNDS)

    assert "Coordinates appear to be null island (0,0)" in messages(results.errors)
    assert "Coordinates outside region bounds" in messages(results.warnings)


def test_non_numeric_coordinates():
    results = validate_shops_data(document(shop(1, "Bad", lat="34.0")), US_BOUNDS)
    assert "Invalid latitude (not a number)" in messages(results.errors)


def test_url_checks():
    data = document(
        shop(1, "No Scheme", website="example.com"),
        shop(2, "FTP", lat=35.0, website="ftp://example.com"),
    )
    results = validate_shops_data(data, US_BOUNDS)

    assert "Invalid website URL format" in messages(results.errors)
    assert "Website has non-HTTP protocol" in messages(results.warnings)


def test_unformatted_phone_is_a_warning():
    results = validate_shops_data(document(shop(1, "Intl", phone="+44 20 7946 0958")), US_BOUNDS)

    assert not results.has_errors
    assert "Phone not in standard format (XXX) XXX-XXXX" in messages(results.warnings)


def test_duplicate_ids():
    data = document(shop(1, "A"), shop(1, "B", lat=35.0))
    results = validate_shops_data(data, US_BOUNDS)
    assert "Found 1 duplicate IDs: 1" in messages(results.errors)


def test_similar_names_nearby_are_flagged():
    data = document(
        shop(1, "Cool Skate Shop", lat=34.0001, lng=-118.0001),
        shop(2, "Cool Skate Shop!", lat=34.0002, lng=-118.0002),
        shop(3, "Something Else", lat=34.0003, lng=-118.0003),
    )
    results = validate_shops_data(data, US_BOUNDS)

    assert not results.has_errors
    assert [issue.shop_id for issue in results.warnings] == [2]


def test_summarize():
    data = document(
        shop(1, "A", website="https://a.example.com"),
        shop(2, "B", isIndependent=False, chainName="Zumiez"),
    )
    stats = summarize(data)

    assert stats["total"] == 2
    assert stats["independent_pct"] == 50.0
    assert stats["website_pct"] == 50.0
    assert summarize({"shops": []}) == {"total": 0}
