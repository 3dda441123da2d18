"""
tests/unit/test_validators.py
=============================
Tests for agent-program validation at the load boundary.
"""
import pytest
from goalgen.agent.facts import Fact
from goalgen.agent.rules import Rule
from goalgen.core.config import GoalGenConfig, LogicConfig
from goalgen.core.exceptions import DegreeOutOfRange, InvalidAgentProgram
from goalgen.core.validators import (
    assert_valid_program,
    check_degree,
    validate_desire_vocabulary,
    validate_fact_pairs,
    validate_rule,
    validate_rules,
)
from goalgen.logic.formula import atom, disj


class TestCheckDegree:
    def test_valid(self):
        assert check_degree(0.4) == 0.4

    def test_invalid_carries_label(self):
        with pytest.raises(DegreeOutOfRange) as exc_info:
            check_degree(1.4, "trust")
        assert exc_info.value.context["label"] == "trust"


class TestFactPairs:
    def test_valid_pairs(self):
        assert validate_fact_pairs([(atom("p"), 0.5), (Fact(atom("q")), 1), (atom("r"), True)]) == []

    def test_bad_degree(self):
        errors = validate_fact_pairs([(atom("p"), 1.5), (atom("q"), "high")], "beliefs")
        assert len(errors) == 2
        assert errors[0].startswith("beliefs[0]")

    def test_bad_fact(self):
        errors = validate_fact_pairs([("p", 0.5)])
        assert "not a Fact or Formula" in errors[0]

    def test_not_a_pair(self):
        errors = validate_fact_pairs([atom("p")])
        assert "pair" in errors[0]


class TestRules:
    def test_valid_rule(self):
        assert validate_rule(Rule("a", belief="b")) == []

    def test_constant_consequent(self):
        assert "has no atoms" in validate_rule(Rule("1.0"))[0]

    def test_not_a_rule(self):
        assert validate_rules(["a"], "desires") == ["desires[0]: str is not a Rule"]

    def test_vocabulary_limit(self):
        config = GoalGenConfig(logic=LogicConfig(max_distribution_atoms=2))
        rules = [Rule(disj("a", "b")), Rule("c")]
        assert validate_desire_vocabulary(rules, config)
        assert validate_desire_vocabulary(rules[:1], config) == []


class TestAssertValidProgram:
    def test_collects_all_errors(self):
        with pytest.raises(InvalidAgentProgram) as exc_info:
            assert_valid_program(
                knowledge=[(atom("k"), 2.0)],
                beliefs=[("b", 0.5)],
                desire_rules=[Rule("0.5")],
                obligation_rules=["o"],
            )
        assert len(exc_info.value.errors) == 4

    def test_valid_program(self):
        assert_valid_program([(atom("k"), 1.0)], [], [Rule("a")], [])
