"""
tests/unit/test_fact_base.py
============================
Tests for facts, fact sets, fact bases and possibilistic fact bases.
"""
import pytest
from goalgen.core.exceptions import PropositionalTypeError
from goalgen.core.metrics import EntailmentCounter
from goalgen.agent.facts import (
    TRUE_FACT,
    Fact,
    FactBase,
    FactSet,
    PossibilisticFactBase,
    as_fact,
)
from goalgen.logic.formula import FALSE, TRUE, Atom, atom, conj, disj, neg, xor
from goalgen.logic.interpretation import Interpretation


class TestFact:
    def test_syntactic_identity(self, p, q):
        assert Fact(conj(p, q)) == Fact(conj(p, q))
        assert Fact(conj(p, q)) != Fact(conj(q, p))

    def test_requires_formula(self):
        with pytest.raises(PropositionalTypeError):
            Fact("p")

    def test_as_fact(self, p):
        assert as_fact("p") == Fact(p)
        assert as_fact(Fact(p)) == Fact(p)

    def test_negated(self, p):
        assert Fact(p).negated() == Fact(neg(p))
        assert Fact(neg(p)).negated() == Fact(p)

    def test_true_fact(self):
        assert TRUE_FACT.formula == TRUE


class TestFactSet:
    def test_tell_zero_removes(self, p, q):
        fs = FactSet([(p, 0.6), (q, 1.0)])
        fs.tell(p, 0.0)
        assert fs.membership(p) == 0.0
        assert Fact(p) not in list(fs)
        assert len(fs) == 1

    def test_tell_defaults_to_one(self, p):
        fs = FactSet()
        fs.tell(p)
        assert fs.membership(p) == 1.0

    def test_untell(self, p):
        fs = FactSet([(p, 0.6)])
        fs.untell(p)
        assert p not in fs

    def test_truth_is_fuzzy_implication(self, p, q):
        fs = FactSet([(p, 0.8), (q, 0.3)])
        itp = Interpretation({Atom("p"): 0.0, Atom("q"): 0.0})
        assert fs.truth(itp) == pytest.approx(0.2)
        assert FactSet().truth(itp) == 1.0

    def test_consistency(self, p):
        assert FactSet([(p, 1.0), (neg(p), 0.6)]).consistency() == pytest.approx(0.4)
        assert FactSet([(p, 1.0), (neg(p), 1.0)]).consistency() == 0.0
        assert FactSet().consistency() == 1.0

    def test_cut_and_levels(self, graded_base, p):
        assert graded_base.level_set() == [0.4, 0.7, 0.9]
        cut = graded_base.cut(0.7)
        assert len(cut) == 2
        assert cut.membership(p) == 1.0

    def test_atoms(self, graded_base):
        assert graded_base.atoms() == {Atom("p"), Atom("q"), Atom("r")}

    def test_interpretation_reads_literals(self, p, q, r):
        fs = FactSet([(p, 0.8), (neg(q), 0.3), (r, 0.6), (neg(r), 0.2), (disj(atom("s"), atom("t")), 1.0)])
        itp = fs.interpretation()
        assert itp.truth(Atom("p")) == 0.8
        assert itp.truth(Atom("q")) == pytest.approx(0.7)
        assert itp.truth(Atom("r")) == pytest.approx(0.7)
        assert itp.truth(Atom("s")) == 0.5

    def test_satisfying_interpretation(self, p, q):
        fs = FactSet([(p, 1.0), (neg(q), 1.0)])
        itp = fs.satisfying_interpretation(step=0.5)
        assert itp.truth(Atom("p")) == 1.0
        assert itp.truth(Atom("q")) == 0.0
        assert fs.truth(itp) == 1.0

    def test_satisfying_interpretation_step(self, p):
        with pytest.raises(ValueError):
            FactSet([(p, 1.0)]).satisfying_interpretation(step=0)

    def test_equality_and_str(self, p, q):
        fs = FactSet([(p, 1.0), (q, 0.5)])
        assert fs == FactSet([(p, 1), (q, 0.5)])
        assert str(fs) == "{ p, q : 0.5 }"


class TestFactBase:
    def test_models(self, p, q):
        base = FactBase([(p, 1.0), (disj(neg(p), q), 1.0)])
        assert base.models(q) == 1.0
        assert base.models(neg(q)) == 0.0

    def test_models_graded(self, p):
        assert FactBase([(p, 0.8)]).models(p) == pytest.approx(0.8)

    def test_models_constants(self):
        assert FactBase().models(TRUE) == 1.0
        assert FactBase().models(FALSE) == 0.0

    def test_counter_counts_models_calls(self, p, counter):
        base = FactBase([(p, 1.0)], counter=counter)
        base.models(p)
        base.models(neg(p))
        assert counter.value == 2

    def test_cut_shares_counter(self, p, counter):
        base = PossibilisticFactBase([(p, 0.5)], counter=counter)
        assert base.cut(0.5).counter is counter

    def test_no_counter_counts_nothing(self, p):
        assert FactBase([(p, 1.0)]).counter is None


class TestPossibilisticFactBase:
    def test_necessity(self, graded_base, p, q, r):
        assert graded_base.necessity(p) == 0.9
        assert graded_base.necessity(q) == 0.7
        assert graded_base.necessity(r) == 0.4
        assert graded_base.necessity(neg(p)) == 0.0

    def test_necessity_tautology(self, graded_base, q):
        assert graded_base.necessity(disj(q, neg(q))) == 1.0

    def test_necessity_of_constant(self, graded_base):
        assert graded_base.necessity(atom("0.35")) == 0.35

    def test_possibility(self, graded_base, p, q):
        assert graded_base.possibility(neg(p)) == pytest.approx(0.1)
        assert graded_base.possibility(q) == 1.0
        assert graded_base.possibility(atom("0.2")) == 0.2

    def test_duality(self, graded_base, p, q, r):
        for f in [p, neg(p), q, conj(p, r), disj(neg(q), r), xor(p, r)]:
            assert graded_base.possibility(f) == pytest.approx(
                1.0 - graded_base.necessity(neg(f))
            )

    def test_cut_level_monotonicity(self, graded_base, p, q, r):
        levels = graded_base.level_set()
        for f in [p, q, r, conj(p, q), disj(q, r), conj(q, r)]:
            for low, high in zip(levels, levels[1:]):
                if graded_base.cut(high).models(f).is_true():
                    assert graded_base.cut(low).models(f).is_true()

    def test_necessity_counts_entailment_checks(self, p, r, counter):
        base = PossibilisticFactBase([(p, 0.9), (r, 0.4)], counter=counter)
        base.necessity(r)
        assert counter.value == 3

    def test_simplify_removes_redundant(self, p, q):
        base = PossibilisticFactBase([(p, 0.9), (disj(p, q), 0.5), (q, 0.3)])
        base.simplify()
        assert base == PossibilisticFactBase([(p, 0.9), (q, 0.3)])

    def test_simplify_keeps_stronger_consequence(self, p, q):
        base = PossibilisticFactBase([(p, 0.4), (disj(p, q), 0.8)])
        assert base.simplified() == base

    def test_simplify_idempotent(self, p, q):
        base = PossibilisticFactBase([(p, 0.9), (conj(p, q), 0.6), (q, 0.5), (disj(p, q), 0.2)])
        once = base.simplified()
        assert once.simplified() == once
        assert len(once) < len(base)

    def test_simplified_leaves_receiver(self, p, q):
        base = PossibilisticFactBase([(p, 0.9), (disj(p, q), 0.5)])
        base.simplified()
        assert len(base) == 2

    def test_simplify_preserves_necessity(self, p, q, r):
        base = PossibilisticFactBase([(p, 0.9), (disj(p, q), 0.5), (disj(neg(p), r), 0.6)])
        simple = base.simplified()
        for f in [p, q, r, disj(p, q), conj(p, r)]:
            assert simple.necessity(f) == base.necessity(f)
