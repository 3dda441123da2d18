"""
goalgen/__init__.py — Public API exports
"""

from goalgen.agent.agent import Agent
from goalgen.agent.facts import Fact, FactBase, FactSet, PossibilisticFactBase
from goalgen.agent.rules import Rule, RuleBase, RuleBuilder
from goalgen.core.config import DEFAULT_CONFIG, DeliberationConfig, GoalGenConfig, LogicConfig
from goalgen.core.exceptions import (
    ArityMismatch,
    DegreeOutOfRange,
    FixpointNotReached,
    GoalGenError,
    InvalidAgentProgram,
    PropositionalTypeError,
    TermIndexError,
    VocabularyTooLarge,
)
from goalgen.core.metrics import EntailmentCounter
from goalgen.core.types import FALSE, NEUTRAL, TRUE, Modality, TruthDegree, snorm, tnorm
from goalgen.logic.formula import Atom, Formula, Operator, atom, conj, constant, disj, neg, xor
from goalgen.logic.interpretation import Interpretation
from goalgen.logic.possibility import PossibilityDistribution
from goalgen.version import __version__

__all__ = [
    "Agent",
    "Fact",
    "FactBase",
    "FactSet",
    "PossibilisticFactBase",
    "Rule",
    "RuleBase",
    "RuleBuilder",
    "GoalGenConfig",
    "LogicConfig",
    "DeliberationConfig",
    "DEFAULT_CONFIG",
    "GoalGenError",
    "DegreeOutOfRange",
    "ArityMismatch",
    "TermIndexError",
    "PropositionalTypeError",
    "VocabularyTooLarge",
    "FixpointNotReached",
    "InvalidAgentProgram",
    "EntailmentCounter",
    "TruthDegree",
    "TRUE",
    "FALSE",
    "NEUTRAL",
    "Modality",
    "tnorm",
    "snorm",
    "Atom",
    "Formula",
    "Operator",
    "atom",
    "conj",
    "constant",
    "disj",
    "neg",
    "xor",
    "Interpretation",
    "PossibilityDistribution",
]
