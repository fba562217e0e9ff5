"""Tests for src/models/document.py — default-on-mismatch decoding."""

from typing import Optional

from pydantic import Field

from src.models.document import Count, ExternalDocument, JsonArray, JsonObject, Number, Text


class _Sample(ExternalDocument):
    name: Text = "unnamed"
    count: Count = 0
    ratio: Number = 0.5
    tags: JsonArray = Field(default_factory=list)
    meta: JsonObject = Field(default_factory=dict)
    note: Optional[Text] = None


class TestNonObjectInput:
    def test_none_decodes_to_defaults(self):
        sample = _Sample.model_validate(None)
        assert sample.name == "unnamed"
        assert sample.count == 0

    def test_list_decodes_to_defaults(self):
        assert _Sample.model_validate([1, 2, 3]) == _Sample()

    def test_string_decodes_to_defaults(self):
        assert _Sample.model_validate("tickets") == _Sample()


class TestFieldMismatch:
    def test_number_for_text_falls_back(self):
        assert _Sample.model_validate({"name": 12}).name == "unnamed"

    def test_string_for_count_falls_back(self):
        assert _Sample.model_validate({"count": "12"}).count == 0

    def test_bool_for_count_falls_back(self):
        assert _Sample.model_validate({"count": True}).count == 0

    def test_float_for_count_falls_back(self):
        assert _Sample.model_validate({"count": 3.0}).count == 0

    def test_int_for_number_accepted(self):
        assert _Sample.model_validate({"ratio": 2}).ratio == 2.0

    def test_bool_for_number_falls_back(self):
        assert _Sample.model_validate({"ratio": False}).ratio == 0.5

    def test_object_for_array_falls_back(self):
        assert _Sample.model_validate({"tags": {"a": 1}}).tags == []

    def test_array_for_object_falls_back(self):
        assert _Sample.model_validate({"meta": ["a"]}).meta == {}

    def test_mismatch_on_one_field_keeps_others(self):
        sample = _Sample.model_validate({"name": None, "count": 4})
        assert sample.name == "unnamed"
        assert sample.count == 4

    def test_null_for_optional_kept(self):
        assert _Sample.model_validate({"note": None}).note is None


class TestValidInput:
    def test_matching_types_kept(self):
        sample = _Sample.model_validate(
            {"name": "disk", "count": 3, "ratio": 0.25, "tags": ["x"], "meta": {"k": "v"}, "note": "n"}
        )
        assert sample.name == "disk"
        assert sample.count == 3
        assert sample.ratio == 0.25
        assert sample.tags == ["x"]
        assert sample.meta == {"k": "v"}
        assert sample.note == "n"

    def test_unknown_keys_ignored(self):
        sample = _Sample.model_validate({"name": "disk", "extra": True})
        assert not hasattr(sample, "extra")
