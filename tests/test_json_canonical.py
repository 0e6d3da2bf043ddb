"""Tests for JSON canonical serialization."""

import pytest

from sumforge.core.json_canonical import canonical_json_dumps, canonical_json_loads
from sumforge.core.module_version import ModuleVersion
from sumforge.core.sumfile import parse_sum
from sumforge.config import SumforgeConfig


class TestCanonicalJson:
    """Tests for canonical JSON."""

    def test_sorted_keys(self):
        """JSON should have sorted keys."""
        assert canonical_json_dumps({"z": 1, "a": 2}) == '{"a":2,"z":1}'

    def test_indent(self):
        result = canonical_json_dumps({"a": 1}, indent=True)
        assert result == '{\n  "a": 1\n}'

    def test_to_dict_objects(self):
        """Objects with to_dict should serialize through it."""
        result = canonical_json_dumps({"mod": ModuleVersion("a", "v1")})
        assert result == '{"mod":{"path":"a","version":"v1"}}'

    def test_hash_entries(self):
        f = parse_sum("go.sum", b"a v1/go.mod h1:x=\n")
        data = canonical_json_loads(canonical_json_dumps(f.hashes))
        assert data == [
            {"gomod": True, "hash": "h1:x=", "offset": 0, "path": "a", "version": "v1"}
        ]

    def test_pydantic_models(self):
        data = canonical_json_loads(canonical_json_dumps(SumforgeConfig()))
        assert data["default_file"] == "go.sum"

    def test_sets_sorted(self):
        assert canonical_json_dumps({"s": {"b", "a"}}) == '{"s":["a","b"]}'

    def test_unserializable(self):
        with pytest.raises(TypeError):
            canonical_json_dumps({"x": object()})
