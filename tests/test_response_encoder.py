from Autocomplete.Business.ResponseEncoder import ResponseEncoder
from Autocomplete.Model.Resource import Resource
from Autocomplete.Model.Suggestion import Suggestion


def test_all_optional_fields_absent_encode_as_null():
    encoded = ResponseEncoder.EncodeSuggestions([Suggestion("cat")])
    assert encoded.records == [{"value": "cat", "description": None, "icon": None, "styleNames": None}]
    assert encoded.resources == {}


def test_missing_value_encodes_as_null():
    encoded = ResponseEncoder.EncodeSuggestions([Suggestion(None, "desc")])
    assert encoded.records[0]["value"] is None
    assert encoded.records[0]["description"] == "desc"


def test_null_style_names_are_skipped_in_order():
    encoded = ResponseEncoder.EncodeSuggestions([Suggestion("cat", style_names=["a", None, "b"])])
    assert encoded.records[0]["styleNames"] == ["a", "b"]


def test_empty_style_names_stay_an_empty_list():
    encoded = ResponseEncoder.EncodeSuggestions([Suggestion("cat", style_names=[])])
    assert encoded.records[0]["styleNames"] == []


def test_icons_get_positional_keys_and_are_registered():
    cat_icon = Resource("https://cdn.example.org/cat.png", "image/png")
    car_icon = Resource("https://cdn.example.org/car.png")
    suggestions = [Suggestion("cat", icon=cat_icon), Suggestion("cab"), Suggestion("car", icon=car_icon)]
    encoded = ResponseEncoder.EncodeSuggestions(suggestions)
    assert [r["icon"] for r in encoded.records] == ["icon0", None, "icon2"]
    assert encoded.resources == {"icon0": cat_icon, "icon2": car_icon}
    assert encoded.resource_urls() == {
        "icon0": "https://cdn.example.org/cat.png",
        "icon2": "https://cdn.example.org/car.png",
    }


def test_records_are_index_aligned():
    suggestions = [Suggestion(f"s{i}", f"d{i}") for i in range(4)]
    encoded = ResponseEncoder.EncodeSuggestions(suggestions)
    assert len(encoded) == 4
    assert [r["value"] for r in encoded.records] == ["s0", "s1", "s2", "s3"]
    assert [r["description"] for r in encoded.records] == ["d0", "d1", "d2", "d3"]


def test_empty_input():
    encoded = ResponseEncoder.EncodeSuggestions([])
    assert encoded.records == []
    assert encoded.resources == {}
