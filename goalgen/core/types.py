"""
goalgen/core/types.py
=====================
Foundation type system for GoalGen-Core.
Every module imports from here. No circular dependencies.

Mathematical basis:
  - TruthDegree is a graded truth value t ∈ [0, 1]
  - Negation is the standard involution  ¬t = 1 − t
  - T-norm  ⊤(a, b) = min(a, b)   (fuzzy AND)
  - S-norm  ⊥(a, b) = max(a, b)   (fuzzy OR)
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

from goalgen.core.exceptions import DegreeOutOfRange


# ─────────────────────────────────────────────
#  TRUTH DEGREES
# ─────────────────────────────────────────────

class TruthDegree(float):
    """A degree of truth in [0, 1].

    Subclassing ``float`` keeps the total numeric order and lets degrees
    mix freely with plain numbers in comparisons:

        TruthDegree(0.8) >= 0.6        → True
        TruthDegree(0.3).negated()     → TruthDegree(0.7)

    Construction outside [0, 1] raises DegreeOutOfRange; values are
    never clamped.
    """

    __slots__ = ()

    def __new__(cls, value: Union[float, int, bool] = 0.0) -> "TruthDegree":
        if isinstance(value, TruthDegree):
            return value
        try:
            v = float(value)
        except (TypeError, ValueError) as exc:
            raise DegreeOutOfRange(value) from exc
        if math.isnan(v) or v < 0.0 or v > 1.0:
            raise DegreeOutOfRange(value)
        return super().__new__(cls, v)

    def negated(self) -> "TruthDegree":
        return TruthDegree(1.0 - float(self))

    def is_true(self) -> bool:
        return float(self) == 1.0

    def is_false(self) -> bool:
        return float(self) == 0.0

    def is_at_least_as_true_as(self, other: Union["TruthDegree", float]) -> bool:
        return float(self) >= float(other)

    def distance(self, other: Union["TruthDegree", float]) -> float:
        return abs(float(self) - float(other))

    def __repr__(self) -> str:
        return f"TruthDegree({float(self)!r})"

    def __str__(self) -> str:
        return repr(float(self))


DegreeLike = Union[TruthDegree, float, int, bool]

TRUE    = TruthDegree(1.0)
FALSE   = TruthDegree(0.0)
NEUTRAL = TruthDegree(0.5)   # truth of an atom with no assigned value


def tnorm(*degrees: DegreeLike) -> TruthDegree:
    """Minimum t-norm. The empty conjunction is TRUE."""
    return TruthDegree(min(degrees, default=1.0))


def snorm(*degrees: DegreeLike) -> TruthDegree:
    """Maximum s-norm. The empty disjunction is FALSE."""
    return TruthDegree(max(degrees, default=0.0))


# ─────────────────────────────────────────────
#  ENUMERATIONS
# ─────────────────────────────────────────────

class Modality(Enum):
    """The four modal operators a rule antecedent can be read under.

    Knowledge:   necessity under the agent's knowledge base
    Belief:      necessity under the agent's belief base
    Desire:      guaranteed possibility under the agent's utility
    Obligation:  justification by the agent's obligation set
    """
    KNOWLEDGE  = "K"
    BELIEF     = "B"
    DESIRE     = "D"
    OBLIGATION = "O"
