"""
tests/unit/test_rules.py
========================
Tests for Rule, RuleBuilder and RuleBase.
"""
import pytest
from goalgen.agent.agent import Agent
from goalgen.agent.facts import TRUE_FACT, Fact
from goalgen.agent.rules import Rule, RuleBase, RuleBuilder
from goalgen.core.types import Modality
from goalgen.logic.formula import Atom, atom, conj, disj, neg


class TestRule:
    def test_defaults_are_true(self):
        rule = Rule(consequent=atom("a"))
        assert all(f == TRUE_FACT for f in rule.antecedents.values())

    def test_accepts_formulas_and_names(self):
        rule = Rule(consequent="a", belief=atom("b"))
        assert rule.consequent == Fact(atom("a"))
        assert rule.antecedent(Modality.BELIEF) == Fact(atom("b"))

    def test_structural_equality(self):
        assert Rule("a", belief="b") == Rule(atom("a"), belief=Fact(atom("b")))
        assert Rule("a", belief="b") != Rule("a", knowledge="b")
        assert len({Rule("a"), Rule("a")}) == 1

    def test_unconditional_activation(self, unconditional_desire):
        assert unconditional_desire.activation(Agent()) == 1.0

    def test_activation_is_min_of_lookups(self):
        agent = Agent.load("a", knowledge=[(atom("k"), 0.6)], beliefs=[(atom("b"), 0.8)])
        assert Rule("x", knowledge="k", belief="b").activation(agent) == 0.6
        assert Rule("x", belief="b").activation(agent) == 0.8
        assert Rule("x", belief="k").activation(agent) == 0.0

    def test_str(self):
        assert str(Rule("a", belief="b")) == "if K(1.0) and B(b) and D(1.0) and O(1.0) then a"


class TestRuleBuilder:
    def test_build(self):
        rule = (RuleBuilder()
                .if_knows("k")
                .if_believes("b")
                .if_desires("d")
                .if_obliged("o")
                .then("c")
                .build())
        assert rule == Rule("c", knowledge="k", belief="b", desire="d", obligation="o")

    def test_repeated_conditions_conjoin(self):
        rule = RuleBuilder().if_believes("b").if_believes("e").then("c").build()
        assert rule.belief == Fact(conj("b", "e"))

    def test_negated_condition(self):
        rule = RuleBuilder().if_believes(neg("raining")).then("walk").build()
        assert rule.belief == Fact(neg(atom("raining")))
        assert rule.belief.formula.atoms() == {Atom("raining")}

    def test_names_are_not_parsed(self):
        rule = RuleBuilder().if_believes("~raining").then("walk").build()
        assert rule.belief.formula.is_atomic()
        assert rule.belief.formula.atoms() == {Atom("~raining")}

    def test_missing_consequent(self):
        with pytest.raises(ValueError, match="no consequent"):
            RuleBuilder().if_believes("b").build()


class TestRuleBase:
    def test_duplicates_collapse(self):
        rb = RuleBase([Rule("a"), Rule("a"), Rule("b")])
        assert len(rb) == 2

    def test_insertion_order(self):
        rules = [Rule("c"), Rule("a"), Rule("b")]
        assert list(RuleBase(rules)) == rules

    def test_remove(self):
        rb = RuleBase([Rule("a")])
        rb.remove(Rule("a"))
        rb.remove(Rule("zzz"))
        assert len(rb) == 0

    def test_rejects_non_rules(self):
        with pytest.raises(TypeError):
            RuleBase().add("if b then a")

    def test_consequent_atoms(self):
        rb = RuleBase([Rule(disj("a", "b"), belief="z"), Rule("1.0"), Rule("c")])
        assert rb.consequent_atoms() == {Atom("a"), Atom("b"), Atom("c")}

    def test_equality_ignores_order(self):
        assert RuleBase([Rule("a"), Rule("b")]) == RuleBase([Rule("b"), Rule("a")])

    def test_str(self):
        assert str(RuleBase([Rule("a")])) == "{\n  if K(1.0) and B(1.0) and D(1.0) and O(1.0) then a\n}"
