"""Tests for formatting, fingerprints, and comparison."""

import pytest

from sumforge.core.module_version import ModuleVersion
from sumforge.core.sumfile import (
    Hash,
    SumFile,
    compute_sum_hash,
    diff_sum_files,
    format_sum,
    parse_sum,
)
from sumforge.core.sumfile.format import is_canonical
from sumforge.core.sumfile.hash import compute_file_hash


CANONICAL = (
    b"golang.org/x/text v0.3.0 h1:abc123=\n"
    b"golang.org/x/text v0.3.0/go.mod h1:def456=\n"
    b"rsc.io/quote v1.5.2 h1:ghi789=\n"
    b"rsc.io/quote v1.5.2/go.mod h1:jkl012=\n"
)


class TestFormatSum:
    """Tests for format_sum."""

    def test_format(self):
        f = SumFile(
            hashes=[
                Hash(ModuleVersion("golang.org/x/text", "v0.3.0"), "h1:abc123=", False),
                Hash(ModuleVersion("golang.org/x/text", "v0.3.0"), "h1:def456=", True),
                Hash(ModuleVersion("rsc.io/quote", "v1.5.2"), "h1:ghi789=", False),
            ]
        )
        assert format_sum(f) == (
            b"golang.org/x/text v0.3.0 h1:abc123=\n"
            b"golang.org/x/text v0.3.0/go.mod h1:def456=\n"
            b"rsc.io/quote v1.5.2 h1:ghi789=\n"
        )

    def test_empty(self):
        assert format_sum(SumFile()) == b""

    def test_all_dropped(self):
        f = parse_sum("go.sum", b"a v1 h1:x=\n")
        f.drop_all(ModuleVersion("a", "v1"))
        assert format_sum(f) == b""

    def test_does_not_mutate(self):
        f = parse_sum("go.sum", b"a v1 h1:x=\nb v1 h1:y=\n")
        f.drop_all(ModuleVersion("a", "v1"))
        format_sum(f)
        assert len(f.hashes) == 2

    def test_roundtrip(self):
        """Canonical input should format back to identical bytes."""
        assert format_sum(parse_sum("go.sum", CANONICAL)) == CANONICAL

    def test_normalizes_spacing(self):
        data = b"\n  a   v1/go.mod\th1:x=  \n\n"
        assert format_sum(parse_sum("go.sum", data)) == b"a v1/go.mod h1:x=\n"

    def test_adds_trailing_newline(self):
        assert format_sum(parse_sum("go.sum", b"a v1 h1:x=")) == b"a v1 h1:x=\n"

    def test_invalid_utf8_roundtrip(self):
        """Bytes that are not valid UTF-8 should be written back unchanged."""
        data = b"a v1 h1:\xff\xfe=\nb\xc3 v2/go.mod h1:y=\n"
        assert format_sum(parse_sum("go.sum", data)) == data

    def test_method_matches_function(self):
        f = parse_sum("go.sum", CANONICAL)
        assert f.format() == format_sum(f)
        assert SumFile.parse("go.sum", CANONICAL).hashes == f.hashes

    def test_is_canonical(self):
        assert is_canonical(CANONICAL, parse_sum("go.sum", CANONICAL))
        loose = b"a  v1 h1:x=\n"
        assert not is_canonical(loose, parse_sum("go.sum", loose))


class TestSumHash:
    """Tests for fingerprints."""

    def test_deterministic(self):
        a = parse_sum("go.sum", CANONICAL)
        b = parse_sum("go.sum", CANONICAL)
        assert compute_sum_hash(a) == compute_sum_hash(b)

    def test_ignores_layout(self):
        loose = b"\n" + CANONICAL.replace(b" h1:", b"   h1:")
        assert compute_sum_hash(parse_sum("go.sum", loose)) == compute_sum_hash(
            parse_sum("go.sum", CANONICAL)
        )

    def test_changes_with_content(self):
        f = parse_sum("go.sum", CANONICAL)
        before = compute_sum_hash(f)
        f.drop_all(ModuleVersion("rsc.io/quote", "v1.5.2"))
        assert compute_sum_hash(f) != before

    def test_file_hash_matches_canonical(self, tmp_path):
        path = tmp_path / "go.sum"
        path.write_bytes(CANONICAL)
        digest = compute_file_hash(path)
        assert len(digest) == 16
        assert digest == compute_sum_hash(parse_sum("go.sum", CANONICAL))

    def test_file_hash_sees_layout(self, tmp_path):
        """Raw file hashes should differ when only spacing differs."""
        path = tmp_path / "go.sum"
        path.write_bytes(b"\n" + CANONICAL)
        assert compute_file_hash(path) != compute_sum_hash(parse_sum("go.sum", CANONICAL))


class TestDiffSumFiles:
    """Tests for comparing files."""

    def test_identical(self):
        a = parse_sum("a", CANONICAL)
        b = parse_sum("b", CANONICAL)
        assert diff_sum_files(a, b).is_empty

    def test_added_and_removed(self):
        old = parse_sum("old", b"a v1 h1:x=\nb v1 h1:y=\n")
        new = parse_sum("new", b"b v1 h1:y=\nc v1 h1:z=\n")
        diff = diff_sum_files(old, new)
        assert [h.to_line() for h in diff.added] == ["c v1 h1:z="]
        assert [h.to_line() for h in diff.removed] == ["a v1 h1:x="]

    def test_order_insensitive(self):
        old = parse_sum("old", b"a v1 h1:x=\nb v1 h1:y=\n")
        new = parse_sum("new", b"b v1 h1:y=\na v1 h1:x=\n")
        assert diff_sum_files(old, new).is_empty

    def test_dropped_entries_excluded(self):
        old = parse_sum("old", b"a v1 h1:x=\n")
        new = parse_sum("new", b"a v1 h1:x=\n")
        new.drop_all(ModuleVersion("a", "v1"))
        diff = diff_sum_files(old, new)
        assert len(diff.removed) == 1
        assert diff.to_dict()["removed"][0]["path"] == "a"
