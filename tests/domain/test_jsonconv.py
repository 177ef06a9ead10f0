"""Tests for JSON object <-> string conversion."""

import math

import pytest

from strext.domain.jsonconv import convert_json_hash_to_string, convert_json_string_to_hash


class TestStringToHash:
    def test_none(self) -> None:
        assert convert_json_string_to_hash(None) is None

    def test_object(self) -> None:
        assert convert_json_string_to_hash('{"a": 1, "b": "two"}') == {"a": 1, "b": "two"}

    def test_nested(self) -> None:
        parsed = convert_json_string_to_hash('{"outer": {"inner": [1, 2]}}')
        assert parsed == {"outer": {"inner": [1, 2]}}

    @pytest.mark.parametrize("text", ["", "not json", "{'a': 1}", '{"a": }'])
    def test_invalid_json(self, text: str) -> None:
        assert convert_json_string_to_hash(text) is None

    @pytest.mark.parametrize("text", ['{"a": NaN}', '{"a": Infinity}', '{"a": -Infinity}'])
    def test_non_standard_constants(self, text: str) -> None:
        assert convert_json_string_to_hash(text) is None

    @pytest.mark.parametrize("text", ["[" * 100_000, '{"a": ' * 100_000])
    def test_too_deep(self, text: str) -> None:
        assert convert_json_string_to_hash(text) is None

    @pytest.mark.parametrize("text", ["[1, 2]", '"text"', "42", "null", "true"])
    def test_non_object_top_level(self, text: str) -> None:
        assert convert_json_string_to_hash(text) is None


class TestHashToString:
    def test_none(self) -> None:
        assert convert_json_hash_to_string(None) is None

    def test_pretty_printed(self) -> None:
        assert convert_json_hash_to_string({"a": 1}) == '{\n  "a": 1\n}'

    def test_custom_indent(self) -> None:
        assert convert_json_hash_to_string({"a": 1}, indent=4) == '{\n    "a": 1\n}'

    def test_non_ascii_kept(self) -> None:
        assert "北京" in convert_json_hash_to_string({"city": "北京"})

    def test_ensure_ascii_escapes(self) -> None:
        out = convert_json_hash_to_string({"city": "北京"}, ensure_ascii=True)
        assert "\\u5317" in out

    def test_unserialisable_value(self) -> None:
        assert convert_json_hash_to_string({"obj": object()}) is None

    def test_nan_rejected(self) -> None:
        assert convert_json_hash_to_string({"x": math.nan}) is None

    def test_circular_reference(self) -> None:
        mapping: dict = {}
        mapping["self"] = mapping
        assert convert_json_hash_to_string(mapping) is None

    def test_too_deep(self) -> None:
        mapping: dict = {}
        for _ in range(100_000):
            mapping = {"a": mapping}
        assert convert_json_hash_to_string(mapping) is None


class TestRoundTrip:
    def test_flat_mapping(self) -> None:
        original = {"name": "strext", "count": 3, "ratio": 0.5, "label": "你好"}
        text = convert_json_hash_to_string(original)
        assert text is not None
        assert convert_json_string_to_hash(text) == original
