"""Tests for lookup(), the longest-match table search."""

from __future__ import annotations

from dateglot.translate import LookupResult, lookup

CANONICAL = ("A", "B", "C")


class TestLookup:
    """Test lookup() matching rules."""

    def test_exact_match(self) -> None:
        assert lookup(["lun", "mar", "mié"], "mar 3", 0, CANONICAL) == LookupResult(
            0, 0, "mar", "B"
        )

    def test_longest_match_wins(self) -> None:
        """A longer entry beats a shorter entry that is its prefix."""
        found = lookup(["Ma", "Mar", "Ap"], "Mar 3", 0, CANONICAL)
        assert found.local == "Mar"
        assert found.canonical == "B"

    def test_longest_match_independent_of_order(self) -> None:
        found = lookup(["Mar", "Ma", "Ap"], "Mar 3", 0, CANONICAL)
        assert found.local == "Mar"
        assert found.canonical == "A"

    def test_equal_length_first_in_table_wins(self) -> None:
        """Two entries of equal length matching the same text: first wins."""
        found = lookup(["ab", "AB", "x"], "ab", 0, CANONICAL)
        assert found.canonical == "A"

    def test_case_insensitive(self) -> None:
        found = lookup(["lunes"], "LuNeS", 0, ("Monday",))
        assert found.local == "LuNeS"
        assert found.canonical == "Monday"

    def test_casefold_comparison(self) -> None:
        """Full case folding, not ASCII lowering."""
        found = lookup(["ÉTÉ"], "été", 0, ("Summer",))
        assert found.canonical == "Summer"

    def test_leading_whitespace_skipped(self) -> None:
        assert lookup(["a"], "x  \ta", 1, ("A",)) == LookupResult(4, 3, "a", "A")

    def test_no_match(self) -> None:
        assert lookup(["lun"], "  xyz", 0, ("Mon",)) == LookupResult(2, 2, "", "")

    def test_empty_candidates_never_match(self) -> None:
        assert lookup(["", ""], "abc", 0, ("A", "B")) == LookupResult(0, 0, "", "")

    def test_empty_candidate_does_not_shadow_match(self) -> None:
        found = lookup(["", "abc"], "abc", 0, ("A", "B"))
        assert found.canonical == "B"

    def test_candidate_longer_than_value(self) -> None:
        found = lookup(["abcd"], "abc", 0, ("A",))
        assert found.canonical == ""

    def test_offset_at_end(self) -> None:
        assert lookup(["a"], "abc", 3, ("A",)) == LookupResult(3, 0, "", "")

    def test_matched_text_keeps_value_case(self) -> None:
        found = lookup(["oct"], "OCT 27", 0, ("Oct",))
        assert found.local == "OCT"
        assert found.offset + len(found.local) == 3
