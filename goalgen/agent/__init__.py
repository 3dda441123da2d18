"""goalgen/agent — Fact bases, rules and the deliberating agent."""

from goalgen.agent.agent import Agent
from goalgen.agent.facts import (
    TRUE_FACT,
    Fact,
    FactBase,
    FactSet,
    PossibilisticFactBase,
    as_fact,
)
from goalgen.agent.rules import Rule, RuleBase, RuleBuilder

__all__ = [
    "Agent",
    "Fact",
    "FactBase",
    "FactSet",
    "PossibilisticFactBase",
    "TRUE_FACT",
    "as_fact",
    "Rule",
    "RuleBase",
    "RuleBuilder",
]
