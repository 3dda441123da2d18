"""
goalgen/agent/facts.py
======================
Facts and graded fact collections.

    Fact                   — a formula tagged as asserted (syntactic identity)
    FactSet                — fuzzy set of facts
    FactBase               — FactSet + entailment by enumeration
    PossibilisticFactBase  — FactBase read as a possibility distribution

A fact set behaves as a conjunction of fuzzy implications
"membership ⇒ formula":

    truth(ω) = min_φ  max(1 − μ(φ), φ(ω))

and a possibilistic fact base is the level-cut encoding of a
possibility distribution, so that

    N(φ) = max { α : cut(α) ⊨ φ }          Π(φ) = 1 − N(¬φ)
"""

from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from goalgen.core.config import DEFAULT_CONFIG, LogicConfig
from goalgen.core.exceptions import PropositionalTypeError
from goalgen.core.metrics import EntailmentCounter
from goalgen.core.types import FALSE, TRUE, DegreeLike, TruthDegree, snorm, tnorm
from goalgen.logic.formula import TRUE as TRUE_FORMULA
from goalgen.logic.formula import Atom, Formula, as_formula, neg
from goalgen.logic.fuzzy import FuzzySet
from goalgen.logic.interpretation import Interpretation, enumerate_interpretations, sorted_atoms

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
#  FACTS
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class Fact:
    """An asserted formula.

    Two facts are equal iff their formulas are syntactically equal:
    ``a & b`` and ``b & a`` are distinct facts.
    """
    formula: Formula

    def __post_init__(self):
        if not isinstance(self.formula, Formula):
            raise PropositionalTypeError("Formula", self.formula)

    def negated(self) -> "Fact":
        return Fact(self.formula.negated())

    def __str__(self) -> str:
        return str(self.formula)


FactLike = Union[Fact, Formula, Atom, str]

TRUE_FACT = Fact(TRUE_FORMULA)


def as_fact(value: FactLike) -> Fact:
    """Accept a Fact, or anything ``as_formula`` accepts."""
    if isinstance(value, Fact):
        return value
    return Fact(as_formula(value))


# ─────────────────────────────────────────────
#  FACT SET
# ─────────────────────────────────────────────

class FactSet:
    """A fuzzy set of facts. Membership 0 means absent."""

    def __init__(self, members: Optional[Iterable[Tuple[FactLike, DegreeLike]]] = None):
        self._facts: FuzzySet[Fact] = FuzzySet()
        for fact, mu in members or ():
            self.tell(fact, mu)

    def _derive(self, members: Iterable[Tuple[Fact, TruthDegree]]) -> "FactSet":
        return FactSet(members)

    def copy(self) -> "FactSet":
        return self._derive(self._facts.items())

    # ── Membership ───────────────────────────────────────────────────

    def tell(self, fact: FactLike, degree: DegreeLike = TRUE) -> None:
        """Set the membership of ``fact``; degree 0 removes it."""
        self._facts.assign(as_fact(fact), degree)

    def untell(self, fact: FactLike) -> None:
        self._facts.remove(as_fact(fact))

    def membership(self, fact: FactLike) -> TruthDegree:
        return self._facts.membership(as_fact(fact))

    def level_set(self) -> List[TruthDegree]:
        return self._facts.level_set()

    def cut(self, alpha: DegreeLike) -> "FactSet":
        """Crisp α-cut: the facts with membership ≥ α, each at degree 1."""
        return self._derive(self._facts.cut(alpha).items())

    def items(self) -> Iterator[Tuple[Fact, TruthDegree]]:
        return self._facts.items()

    def atoms(self) -> FrozenSet[Atom]:
        return frozenset().union(*(f.formula.atoms() for f in self._facts))

    def __len__(self) -> int:
        return len(self._facts)

    def __iter__(self) -> Iterator[Fact]:
        return iter(self._facts)

    def __contains__(self, fact: object) -> bool:
        if isinstance(fact, (Formula, Atom, str)):
            fact = as_fact(fact)
        return fact in self._facts

    # ── Semantics ────────────────────────────────────────────────────

    def truth(self, itp: Interpretation) -> TruthDegree:
        t = TRUE
        for fact, mu in self._facts.items():
            t = tnorm(t, snorm(mu.negated(), fact.formula.truth(itp)))
        return t

    def consistency(self) -> TruthDegree:
        """Best truth over crisp interpretations (a lower bound)."""
        t = FALSE
        for itp in enumerate_interpretations(self.atoms()):
            t = snorm(t, self.truth(itp))
            if t.is_true():
                break
        return t

    def interpretation(self) -> Interpretation:
        """Fuzzy interpretation read off the literal facts of the set.

        For each atom a, μ(a) and 1 − μ(¬a) both estimate its truth;
        the estimate is taken from whichever literal is present and
        averaged when both (or neither) are.
        """
        itp = Interpretation()
        for a in sorted_atoms(self.atoms()):
            positive = Formula(atom=a)
            mu_pos = self.membership(positive)
            mu_neg = self.membership(neg(positive)).negated()
            if (mu_pos.is_false() and mu_neg.is_true()) or (not mu_pos.is_false() and not mu_neg.is_true()):
                itp.assign(a, 0.5 * (mu_pos + mu_neg))
            elif mu_pos.is_false():
                itp.assign(a, mu_neg)
            else:
                itp.assign(a, mu_pos)
        return itp

    def satisfying_interpretation(self, step: float = 0.1) -> Interpretation:
        """Grid search over fuzzy assignments for the one maximizing ``truth``.

        Every atom ranges over {0, step, 2·step, …, 1}; the first best
        assignment found wins. The search visits (1/step + 1)^n points.
        """
        if not 0.0 < step <= 1.0:
            raise ValueError(f"Grid step {step} not in (0, 1]")
        atoms = sorted_atoms(self.atoms())
        grid = [round(i * step, 10) for i in range(math.floor(1.0 / step + 1e-9) + 1)]

        best: Tuple[float, ...] = (0.0,) * len(atoms)
        best_truth = FALSE
        for point in itertools.product(grid, repeat=len(atoms)):
            t = self.truth(Interpretation(dict(zip(atoms, point))))
            if t > best_truth:
                best, best_truth = point, t
                if t.is_true():
                    break
        return Interpretation(dict(zip(atoms, best)))

    # ── Rendering ────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FactSet):
            return NotImplemented
        return self._facts == other._facts

    __hash__ = None

    def __str__(self) -> str:
        parts = [
            str(fact) if mu.is_true() else f"{fact} : {mu}"
            for fact, mu in self._facts.items()
        ]
        return "{ " + ", ".join(parts) + " }"

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self}"


# ─────────────────────────────────────────────
#  FACT BASE
# ─────────────────────────────────────────────

class FactBase(FactSet):
    """A fact set with graded entailment.

    Args:
        members: Initial (fact, degree) pairs.
        counter: Optional EntailmentCounter incremented by every
                 ``models`` call on this base and on its cuts.
        config:  LogicConfig whose ``enumeration_warn_atoms`` applies to
                 entailment checks (DEFAULT_CONFIG.logic when omitted).
    """

    def __init__(
        self,
        members: Optional[Iterable[Tuple[FactLike, DegreeLike]]] = None,
        counter: Optional[EntailmentCounter] = None,
        config: Optional[LogicConfig] = None,
    ):
        super().__init__(members)
        self._counter = counter
        self._config = config or DEFAULT_CONFIG.logic

    def _derive(self, members: Iterable[Tuple[Fact, TruthDegree]]) -> "FactBase":
        return type(self)(members, counter=self._counter, config=self._config)

    @property
    def counter(self) -> Optional[EntailmentCounter]:
        return self._counter

    def models(self, fact: FactLike) -> TruthDegree:
        """Degree to which the base entails ``fact``.

        min over crisp ω of the combined vocabulary of
        max(1 − truth(ω), fact(ω)), stopping as soon as it reaches 0.
        """
        if self._counter is not None:
            self._counter.increment()
        formula = as_fact(fact).formula
        t = TRUE
        atoms = self.atoms() | formula.atoms()
        for itp in enumerate_interpretations(atoms, self._config.enumeration_warn_atoms):
            t = tnorm(t, snorm(self.truth(itp).negated(), formula.truth(itp)))
            if t.is_false():
                break
        return t


class PossibilisticFactBase(FactBase):
    """A fact base whose degrees are necessity levels."""

    def necessity(self, fact: FactLike) -> TruthDegree:
        """Highest α whose α-cut entails ``fact`` to degree 1 (0 if none).

        Cut levels are scanned ascending; the scan stops at the first
        level whose cut fails to entail, since cuts only shrink.
        """
        fact = as_fact(fact)
        value = fact.formula.constant_value()
        if value is not None:
            return value
        t = FALSE
        for alpha in self.level_set():
            if self.cut(alpha).models(fact).is_true():
                t = alpha
            else:
                break
        if self.models(fact).is_true():
            t = TRUE
        return t

    def possibility(self, fact: FactLike) -> TruthDegree:
        fact = as_fact(fact)
        value = fact.formula.constant_value()
        if value is not None:
            return value
        return self.necessity(fact.negated()).negated()

    def simplified(self) -> "PossibilisticFactBase":
        """A copy without redundant facts.

        A fact is redundant when the rest of the base already makes it
        necessary at least to its own degree. Each removal restarts the
        scan over the reduced base.
        """
        base = self.copy()
        removed = True
        while removed:
            removed = False
            for fact, mu in base.items():
                rest = base.copy()
                rest.untell(fact)
                if rest.necessity(fact).is_at_least_as_true_as(mu):
                    logger.debug(f"Dropping redundant fact {fact} : {mu}")
                    base = rest
                    removed = True
                    break
        return base

    def simplify(self) -> None:
        """Replace this base's contents with ``simplified()``."""
        self._facts = self.simplified()._facts
