"""
goalgen/logic/interpretation.py
===============================
Interpretations: assignments of truth degrees to atoms.

A crisp interpretation assigns only 0 or 1. Exhaustive reasoning
enumerates all 2^n crisp interpretations of a vocabulary; the order
is fixed (atoms sorted by name, first atom toggling fastest) so that
world number w has bit i set iff atom i is true.
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, Tuple

from goalgen.core.config import DEFAULT_CONFIG
from goalgen.core.exceptions import GoalGenError, PropositionalTypeError
from goalgen.core.types import FALSE, NEUTRAL, TRUE, DegreeLike, TruthDegree
from goalgen.logic.formula import Atom, Formula, conj, neg

logger = logging.getLogger(__name__)


class Interpretation:
    """Atom → truth-degree map. Unassigned atoms are 0.5 ("unknown")."""

    def __init__(self, assignments: Optional[Mapping[Atom, DegreeLike]] = None):
        self._truth: Dict[Atom, TruthDegree] = {}
        for a, t in (assignments or {}).items():
            self.assign(a, t)

    def assign(self, atom: Atom, value: DegreeLike) -> None:
        if not isinstance(atom, Atom):
            raise PropositionalTypeError("Atom", atom)
        self._truth[atom] = TruthDegree(value)

    def truth(self, atom: Atom) -> TruthDegree:
        value = atom.constant_value()
        if value is not None:
            return value
        return self._truth.get(atom, NEUTRAL)

    def atoms(self) -> FrozenSet[Atom]:
        return frozenset(self._truth)

    def items(self) -> Iterator[Tuple[Atom, TruthDegree]]:
        return iter(sorted(self._truth.items()))

    def is_crisp(self) -> bool:
        return all(t.is_true() or t.is_false() for t in self._truth.values())

    def refinements(self) -> Iterator["Interpretation"]:
        """All crisp interpretations over this interpretation's atoms."""
        return enumerate_interpretations(self._truth)

    def distance(self, other: "Interpretation") -> float:
        """Sum of per-atom degree distances over a common vocabulary."""
        if not isinstance(other, Interpretation):
            raise PropositionalTypeError("Propositional interpretation", other)
        if self.atoms() != other.atoms():
            raise GoalGenError(
                "Cannot calculate distance between interpretations "
                "not on the same universe of discourse",
                context={"left": sorted(a.name for a in self.atoms()),
                         "right": sorted(a.name for a in other.atoms())},
            )
        return sum(t.distance(other.truth(a)) for a, t in self._truth.items())

    def minterm(self) -> Optional[Formula]:
        """Conjunction of the literals true in this (crisp) interpretation."""
        literals = [
            Formula(atom=a) if t.is_true() else neg(Formula(atom=a))
            for a, t in sorted(self._truth.items())
        ]
        if not literals:
            return None
        if len(literals) == 1:
            return literals[0]
        return conj(*literals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interpretation):
            return NotImplemented
        return self._truth == other._truth

    __hash__ = None  # mutable

    def __str__(self) -> str:
        body = ", ".join(f"{a} → {t}" for a, t in self.items())
        return f"({body})"

    def __repr__(self) -> str:
        return f"Interpretation{self}"


def sorted_atoms(atoms: Iterable[Atom]) -> Tuple[Atom, ...]:
    return tuple(sorted(set(atoms)))


def interpretation_at(atoms: Tuple[Atom, ...], index: int) -> Interpretation:
    """The crisp interpretation numbered ``index`` over ``atoms``."""
    itp = Interpretation()
    for i, a in enumerate(atoms):
        itp.assign(a, TRUE if index >> i & 1 else FALSE)
    return itp


def enumerate_interpretations(
    atoms: Iterable[Atom], warn_atoms: Optional[int] = None
) -> Iterator[Interpretation]:
    """Yield all 2^n crisp interpretations of ``atoms``.

    The empty vocabulary has exactly one (empty) interpretation. A
    warning is logged when n exceeds ``warn_atoms`` (by default
    ``DEFAULT_CONFIG.logic.enumeration_warn_atoms``).
    """
    ordered = sorted_atoms(atoms)
    n = len(ordered)
    limit = DEFAULT_CONFIG.logic.enumeration_warn_atoms if warn_atoms is None else warn_atoms
    if n > limit:
        logger.warning(
            f"Enumerating 2^{n} interpretations: vocabulary is beyond "
            "the practical range of exhaustive reasoning."
        )
    for w in range(1 << n):
        yield interpretation_at(ordered, w)
