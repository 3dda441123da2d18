"""
tests/conftest.py
==================
Shared pytest fixtures for all GoalGen-Core tests.
"""

import pytest
from goalgen.agent.agent import Agent
from goalgen.agent.facts import PossibilisticFactBase
from goalgen.agent.rules import Rule, RuleBuilder
from goalgen.core.metrics import EntailmentCounter
from goalgen.logic.formula import atom, conj, disj, neg, xor


# ─── ATOMS ────────────────────────────────────────────────────────


@pytest.fixture
def p():
    return atom("p")


@pytest.fixture
def q():
    return atom("q")


@pytest.fixture
def r():
    return atom("r")


@pytest.fixture
def sample_formulas(p, q, r):
    """Formulas over ≤ 5 atoms exercising every operator."""
    s, t = atom("s"), atom("t")
    return [
        p,
        neg(p),
        conj(p, q),
        disj(p, neg(q)),
        xor(p, q),
        neg(xor(p, q)),
        neg(conj(p, disj(q, r))),
        conj(disj(p, q), disj(neg(p), r)),
        disj(conj(p, neg(p)), q),
        xor(conj(p, q), disj(r, s)),
        conj(disj(p, q, r), disj(neg(s), t), neg(conj(p, t))),
        disj(conj(p, q, r, s, t), conj(neg(p), neg(q)), xor(s, t)),
    ]


# ─── FACT BASES ───────────────────────────────────────────────────


@pytest.fixture
def counter():
    return EntailmentCounter()


@pytest.fixture
def graded_base(p, q, r):
    """p : 0.9,  p → q : 0.7,  r : 0.4"""
    return PossibilisticFactBase([
        (p, 0.9),
        (disj(neg(p), q), 0.7),
        (r, 0.4),
    ])


# ─── RULES / AGENTS ───────────────────────────────────────────────


@pytest.fixture
def unconditional_desire():
    """if true then a"""
    return Rule(consequent=atom("a"))


@pytest.fixture
def errand_rules():
    return [
        RuleBuilder().if_believes("raining").then("umbrella").build(),
        RuleBuilder().if_believes(neg("raining")).then("walk").build(),
        RuleBuilder().if_desires("walk").then("shoes").build(),
    ]


@pytest.fixture
def errand_agent(errand_rules):
    return Agent.load(
        "errand",
        beliefs=[(atom("raining"), 0.7)],
        desire_rules=errand_rules,
    )
