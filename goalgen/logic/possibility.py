"""
goalgen/logic/possibility.py
============================
Explicit possibility distributions over a finite vocabulary.

A distribution π stores one degree per crisp interpretation (world)
of its atoms, indexed so that world w has bit i set iff atom i
(sorted by name) is true. Measures over a formula φ:

    Π(φ) = max { π(ω) : ω ⊨ φ }          possibility
    N(φ) = 1 − max { π(ω) : ω ⊭ φ }      necessity
    Δ(φ) = min { π(ω) : ω ⊨ φ }          guaranteed possibility

Distributions are immutable: ``with_degrees`` builds a new one.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from goalgen.core.config import DEFAULT_CONFIG
from goalgen.core.exceptions import ArityMismatch, PropositionalTypeError, VocabularyTooLarge
from goalgen.core.types import FALSE, TRUE, DegreeLike, TruthDegree, snorm, tnorm
from goalgen.logic.formula import Atom, Formula
from goalgen.logic.interpretation import Interpretation, interpretation_at, sorted_atoms


class PossibilityDistribution:
    """One truth degree per world of a fixed vocabulary.

    Args:
        atoms:     The vocabulary. Duplicates collapse; order is by name.
        degree:    Initial degree of every world (default 1: all possible).
        degrees:   Explicit per-world degrees, overriding ``degree``.
        max_atoms: Vocabulary limit (2^n worlds are stored).

    Raises:
        VocabularyTooLarge: if the vocabulary exceeds ``max_atoms``.
        ArityMismatch:      if ``degrees`` does not have 2^n entries.
    """

    def __init__(
        self,
        atoms: Iterable[Atom] = (),
        degree: DegreeLike = TRUE,
        *,
        degrees: Optional[Sequence[DegreeLike]] = None,
        max_atoms: Optional[int] = None,
    ):
        self._atoms: Tuple[Atom, ...] = sorted_atoms(atoms)
        limit = DEFAULT_CONFIG.logic.max_distribution_atoms if max_atoms is None else max_atoms
        if len(self._atoms) > limit:
            raise VocabularyTooLarge(len(self._atoms), limit)
        size = 1 << len(self._atoms)
        if degrees is None:
            self._degrees: Tuple[TruthDegree, ...] = (TruthDegree(degree),) * size
        else:
            if len(degrees) != size:
                raise ArityMismatch("possibility distribution", size, len(degrees))
            self._degrees = tuple(TruthDegree(d) for d in degrees)

    # ── Structure ────────────────────────────────────────────────────

    @property
    def atoms(self) -> Tuple[Atom, ...]:
        return self._atoms

    @property
    def degrees(self) -> Tuple[TruthDegree, ...]:
        return self._degrees

    def __len__(self) -> int:
        return len(self._degrees)

    def level_set(self) -> List[TruthDegree]:
        """Distinct world degrees, ascending (0 included when present)."""
        return sorted(set(self._degrees))

    def interpretations(self) -> Iterator[Interpretation]:
        for w in range(len(self._degrees)):
            yield interpretation_at(self._atoms, w)

    def index(self, itp: Interpretation) -> int:
        if not isinstance(itp, Interpretation):
            raise PropositionalTypeError("Propositional interpretation", itp)
        w = 0
        for i, a in enumerate(self._atoms):
            if itp.truth(a).is_true():
                w |= 1 << i
        return w

    def with_degrees(self, degrees: Sequence[DegreeLike]) -> "PossibilityDistribution":
        return PossibilityDistribution(self._atoms, degrees=degrees, max_atoms=len(self._atoms))

    # ── Measures ─────────────────────────────────────────────────────

    def possibility(self, target: Union[Interpretation, Formula]) -> TruthDegree:
        """π(ω) for a world, Π(φ) for a formula."""
        if isinstance(target, Interpretation):
            return self._degrees[self.index(target)]
        f = self._formula(target)
        t = FALSE
        for itp, d in self._worlds():
            if t.is_true():
                break
            if f.truth(itp).is_true():
                t = snorm(t, d)
        return t

    def necessity(self, formula: Formula) -> TruthDegree:
        f = self._formula(formula)
        t = FALSE
        for itp, d in self._worlds():
            if t.is_true():
                break
            if f.truth(itp).is_false():
                t = snorm(t, d)
        return t.negated()

    def guaranteed_possibility(self, formula: Formula) -> TruthDegree:
        """Least degree among the models of ``formula`` (1 when it has none)."""
        f = self._formula(formula)
        t = TRUE
        for itp, d in self._worlds():
            if t.is_false():
                break
            if f.truth(itp).is_true():
                t = tnorm(t, d)
        return t

    def _worlds(self) -> Iterator[Tuple[Interpretation, TruthDegree]]:
        for w, d in enumerate(self._degrees):
            yield interpretation_at(self._atoms, w), d

    @staticmethod
    def _formula(formula: object) -> Formula:
        if not isinstance(formula, Formula):
            raise PropositionalTypeError("Propositional formula", formula)
        return formula

    # ── Rendering ────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PossibilityDistribution):
            return NotImplemented
        return self._atoms == other._atoms and self._degrees == other._degrees

    __hash__ = None

    def __str__(self) -> str:
        lines = [
            f"World #{w} = {interpretation_at(self._atoms, w)},\tu({w}) = {d}"
            for w, d in enumerate(self._degrees)
        ]
        return "{\n" + "\n".join(lines) + "\n}"

    def __repr__(self) -> str:
        names = ", ".join(a.name for a in self._atoms)
        return f"PossibilityDistribution(atoms=[{names}], worlds={len(self._degrees)})"
