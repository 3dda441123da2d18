"""
tests/unit/test_fuzzy_set.py
============================
Tests for generic fuzzy sets: membership, cuts and level sets.
"""
import pytest
from goalgen.core.exceptions import DegreeOutOfRange
from goalgen.logic.fuzzy import FuzzySet


@pytest.fixture
def ripe():
    return FuzzySet([("banana", 0.9), ("apple", 0.4), ("lime", 0.1), ("pear", 0.4)])


class TestMembership:
    def test_absent_is_zero(self, ripe):
        assert ripe.membership("kiwi") == 0.0
        assert "kiwi" not in ripe

    def test_assign_zero_removes(self, ripe):
        ripe.assign("apple", 0)
        assert "apple" not in ripe
        assert len(ripe) == 3
        assert "apple" not in list(ripe)

    def test_remove_missing_is_noop(self, ripe):
        ripe.remove("kiwi")
        assert len(ripe) == 4

    def test_rejects_bad_degree(self, ripe):
        with pytest.raises(DegreeOutOfRange):
            ripe.assign("kiwi", 1.5)

    def test_insertion_order(self, ripe):
        assert list(ripe) == ["banana", "apple", "lime", "pear"]


class TestCutsAndLevels:
    def test_level_set_sorted_distinct(self, ripe):
        assert ripe.level_set() == [0.1, 0.4, 0.9]

    def test_empty_level_set(self):
        assert FuzzySet().level_set() == []

    def test_cut_is_crisp(self, ripe):
        cut = ripe.cut(0.4)
        assert set(cut) == {"banana", "apple", "pear"}
        assert all(cut.membership(e) == 1.0 for e in cut)

    def test_cuts_shrink(self, ripe):
        levels = ripe.level_set()
        for low, high in zip(levels, levels[1:]):
            assert set(ripe.cut(high)) <= set(ripe.cut(low))

    def test_copy_is_independent(self, ripe):
        clone = ripe.copy()
        clone.assign("banana", 0.2)
        assert ripe.membership("banana") == 0.9
        assert clone != ripe

    def test_equality(self):
        assert FuzzySet([("a", 0.5)]) == FuzzySet([("a", 0.5), ("b", 0)])
