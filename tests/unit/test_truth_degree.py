"""
tests/unit/test_truth_degree.py
===============================
Tests for the truth-degree algebra and the exception hierarchy it raises.
"""
import math

import pytest
from goalgen.core.exceptions import DegreeOutOfRange, GoalGenError
from goalgen.core.types import FALSE, NEUTRAL, TRUE, Modality, TruthDegree, snorm, tnorm

DEGREES = [0.0, 0.1, 0.25, 0.5, 0.7, 0.9, 1.0]


class TestConstruction:
    def test_accepts_unit_interval(self):
        for v in DEGREES:
            assert float(TruthDegree(v)) == v

    def test_accepts_int_and_bool(self):
        assert TruthDegree(1) == 1.0
        assert TruthDegree(True).is_true()
        assert TruthDegree(False).is_false()

    @pytest.mark.parametrize("bad", [-0.01, 1.0001, 2, math.nan, math.inf, "high", None])
    def test_rejects_out_of_range(self, bad):
        with pytest.raises(DegreeOutOfRange):
            TruthDegree(bad)

    def test_out_of_range_is_value_error_with_context(self):
        with pytest.raises(ValueError) as exc_info:
            TruthDegree(1.5)
        assert isinstance(exc_info.value, GoalGenError)
        assert exc_info.value.context["value"] == 1.5

    def test_never_clamped(self):
        with pytest.raises(DegreeOutOfRange):
            TruthDegree(-1e-12)

    def test_identity_passthrough(self):
        t = TruthDegree(0.3)
        assert TruthDegree(t) is t

    def test_constants(self):
        assert TRUE == 1.0 and FALSE == 0.0 and NEUTRAL == 0.5


class TestAlgebra:
    @pytest.mark.parametrize("a", DEGREES)
    def test_double_negation(self, a):
        assert TruthDegree(a).negated().negated() == pytest.approx(a)

    @pytest.mark.parametrize("a", DEGREES)
    @pytest.mark.parametrize("b", DEGREES)
    def test_norms_are_min_max(self, a, b):
        assert tnorm(a, b) == min(a, b)
        assert snorm(a, b) == max(a, b)

    @pytest.mark.parametrize("a", DEGREES)
    def test_units(self, a):
        assert tnorm(a, 1.0) == a
        assert snorm(a, 0.0) == a

    def test_empty_norms(self):
        assert tnorm().is_true()
        assert snorm().is_false()

    def test_norms_return_degrees(self):
        assert isinstance(tnorm(0.2, 0.4, 0.3), TruthDegree)
        assert isinstance(snorm(0.2), TruthDegree)

    def test_predicates(self):
        assert TruthDegree(0.7).is_at_least_as_true_as(0.7)
        assert not TruthDegree(0.6).is_at_least_as_true_as(0.7)
        assert not TruthDegree(0.99).is_true()
        assert not TruthDegree(0.01).is_false()

    def test_distance(self):
        assert TruthDegree(0.2).distance(0.9) == pytest.approx(0.7)

    def test_total_order(self):
        values = [TruthDegree(v) for v in (0.9, 0.1, 0.5)]
        assert sorted(values) == [0.1, 0.5, 0.9]

    def test_rendering(self):
        assert str(TruthDegree(0.5)) == "0.5"
        assert repr(TruthDegree(1)) == "TruthDegree(1.0)"


class TestModality:
    def test_four_modalities(self):
        assert [m.value for m in Modality] == ["K", "B", "D", "O"]
