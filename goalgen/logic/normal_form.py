"""
goalgen/logic/normal_form.py
============================
Disjunctive normal form and two-level minimization.

Two representations live here:

1. ``Conjunction`` — a conjunction of literals over a fixed atom vector,
   encoded as one sign per atom (+1 positive, −1 negated, 0 absent).
   ``dnf_terms`` converts any formula to a set of these:
       DNF(literal)  = {literal}
       DNF(P ∨ Q)    = DNF(P) ∪ DNF(Q)
       DNF(P ∧ Q)    = { Pᵢ ∧ Qⱼ }   (pairs with clashing signs are dropped)
   Constants are carried as a ``bound`` (the min of the constant
   conjuncts), so the conversion stays exact under fuzzy semantics.

2. ``BooleanTerm`` — a Quine–McCluskey cube: one value per variable in
   {0, 1, don't-care}. Two cubes combine iff they differ in the truth
   value of exactly one variable. ``minimize_terms`` computes the prime
   implicants and selects a cover; this builds the compact goal formulas
   elected by the agent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from goalgen.core.exceptions import ArityMismatch, GoalGenError
from goalgen.core.types import TRUE, TruthDegree
from goalgen.logic.formula import FALSE as FALSE_FORMULA
from goalgen.logic.formula import TRUE as TRUE_FORMULA
from goalgen.logic.formula import Atom, Formula, Operator, conj, constant, disj, neg
from goalgen.logic.interpretation import Interpretation, enumerate_interpretations, sorted_atoms

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
#  CONJUNCTIONS OF LITERALS
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class Conjunction:
    """A conjunction of literals over a fixed atom vector."""
    atoms: Tuple[Atom, ...]
    signs: Tuple[int, ...]
    bound: TruthDegree = TRUE

    def __post_init__(self):
        object.__setattr__(self, "bound", TruthDegree(self.bound))
        if len(self.signs) != len(self.atoms):
            raise ArityMismatch("conjunction", len(self.atoms), len(self.signs))
        if any(s not in (-1, 0, 1) for s in self.signs):
            raise GoalGenError("Conjunction signs must be -1, 0 or +1", context={"signs": self.signs})

    @classmethod
    def empty(cls, atoms: Tuple[Atom, ...]) -> "Conjunction":
        return cls(atoms, (0,) * len(atoms))

    @classmethod
    def of_literal(cls, atoms: Tuple[Atom, ...], literal: Formula) -> Optional["Conjunction"]:
        """The one-literal conjunction, or None for a constant-false literal."""
        if not literal.is_literal():
            raise GoalGenError("Literal required", context={"formula": str(literal)})
        positive = literal.is_atomic()
        a = literal.atom if positive else literal.children[0].atom
        value = a.constant_value()
        if value is not None:
            bound = value if positive else value.negated()
            if bound.is_false():
                return None
            return cls(atoms, (0,) * len(atoms), bound)
        if a not in atoms:
            raise GoalGenError(f"Atom '{a}' outside the conjunction vocabulary")
        signs = tuple((1 if positive else -1) if x == a else 0 for x in atoms)
        return cls(atoms, signs)

    def sign(self, atom: Atom) -> int:
        for a, s in zip(self.atoms, self.signs):
            if a == atom:
                return s
        return 0

    def conjoin(self, other: "Conjunction") -> Optional["Conjunction"]:
        """self ∧ other, or None when the result is self-contradictory."""
        if self.atoms != other.atoms:
            raise GoalGenError("Cannot conjoin conjunctions over different vocabularies")
        signs = []
        for s, t in zip(self.signs, other.signs):
            if s * t < 0:
                return None
            signs.append(s or t)
        bound = min(self.bound, other.bound)
        if bound.is_false():
            return None
        return Conjunction(self.atoms, tuple(signs), bound)

    def formula(self) -> Formula:
        literals: List[Formula] = [
            Formula(atom=a) if s > 0 else neg(Formula(atom=a))
            for a, s in zip(self.atoms, self.signs) if s != 0
        ]
        if not self.bound.is_true():
            literals.append(constant(self.bound))
        if not literals:
            return TRUE_FORMULA
        if len(literals) == 1:
            return literals[0]
        return conj(*literals)

    def __str__(self) -> str:
        return str(self.formula())


class DisjunctiveNormalForm:
    """An ordered set of conjunctions read as their disjunction."""

    def __init__(self, conjunctions: Iterable[Conjunction] = ()):
        self._terms: Dict[Conjunction, None] = {}
        self.update(conjunctions)

    def add(self, conjunction: Conjunction) -> None:
        self._terms[conjunction] = None

    def update(self, conjunctions: Iterable[Conjunction]) -> None:
        for c in conjunctions:
            self.add(c)

    def formula(self) -> Formula:
        """Disjunction of the terms; the empty disjunction is 0.0 (false)."""
        clauses = [c.formula() for c in self._terms]
        if not clauses:
            return FALSE_FORMULA
        if len(clauses) == 1:
            return clauses[0]
        return disj(*clauses)

    def __iter__(self) -> Iterator[Conjunction]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, conjunction: object) -> bool:
        return conjunction in self._terms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DisjunctiveNormalForm):
            return NotImplemented
        return set(self._terms) == set(other._terms)

    __hash__ = None

    def __str__(self) -> str:
        return " | ".join(str(c) for c in self._terms) or str(FALSE_FORMULA)


def dnf_terms(phi: Formula) -> DisjunctiveNormalForm:
    """Convert ``phi`` into a DisjunctiveNormalForm over its own atoms."""
    atoms = sorted_atoms(phi.atoms())
    return _dnf(phi, atoms)


def _dnf(phi: Formula, atoms: Tuple[Atom, ...]) -> DisjunctiveNormalForm:
    phi = phi.de_morgan()
    if phi.operator is Operator.XOR:
        a, b = phi.children
        phi = disj(conj(a, neg(b)), conj(neg(a), b))

    result = DisjunctiveNormalForm()
    if phi.is_literal():
        c = Conjunction.of_literal(atoms, phi)
        if c is not None:
            result.add(c)
        return result

    left = _dnf(phi.children[0], atoms)
    right = _dnf(phi.children[1], atoms)
    if phi.operator is Operator.OR:
        result.update(left)
        result.update(right)
        return result

    # AND: Cartesian product, dropping self-contradictory pairings
    for lc in left:
        for rc in right:
            c = lc.conjoin(rc)
            if c is not None:
                result.add(c)
    return result


# ─────────────────────────────────────────────
#  QUINE–McCLUSKEY TERMS
# ─────────────────────────────────────────────

FALSE_BIT = 0
TRUE_BIT = 1
DONT_CARE = 2


@dataclass(frozen=True)
class BooleanTerm:
    """A cube over ordered variables: each position is 0, 1 or don't-care."""
    variables: Tuple[Atom, ...]
    values:    Tuple[int, ...]

    def __post_init__(self):
        if len(self.values) != len(self.variables):
            raise ArityMismatch("term", len(self.variables), len(self.values))
        if any(v not in (FALSE_BIT, TRUE_BIT, DONT_CARE) for v in self.values):
            raise GoalGenError("Term values must be 0, 1 or don't-care", context={"values": self.values})

    @classmethod
    def from_interpretation(cls, itp: Interpretation) -> "BooleanTerm":
        """The minterm of a crisp interpretation (variables sorted by name)."""
        variables = sorted_atoms(itp.atoms())
        values = tuple(TRUE_BIT if itp.truth(a).is_true() else FALSE_BIT for a in variables)
        return cls(variables, values)

    def combine(self, other: "BooleanTerm") -> Optional["BooleanTerm"]:
        """Merge two terms differing in exactly one variable's truth value."""
        if self.variables != other.variables:
            raise GoalGenError("Cannot combine terms over different variables")
        diff = -1
        for i, (a, b) in enumerate(zip(self.values, other.values)):
            if a == b:
                continue
            if diff != -1 or DONT_CARE in (a, b):
                return None
            diff = i
        if diff == -1:
            return None
        values = list(self.values)
        values[diff] = DONT_CARE
        return BooleanTerm(self.variables, tuple(values))

    def covers(self, other: "BooleanTerm") -> bool:
        """True when every assignment matching ``other`` also matches self."""
        return all(a == DONT_CARE or a == b for a, b in zip(self.values, other.values))

    def formula(self) -> Formula:
        literals = [
            Formula(atom=x) if v == TRUE_BIT else neg(Formula(atom=x))
            for x, v in zip(self.variables, self.values) if v != DONT_CARE
        ]
        if not literals:
            return TRUE_FORMULA
        if len(literals) == 1:
            return literals[0]
        return conj(*literals)

    def __str__(self) -> str:
        marks = {FALSE_BIT: "0", TRUE_BIT: "1", DONT_CARE: "X"}
        return "{" + " ".join(f"{x}={marks[v]}" for x, v in zip(self.variables, self.values)) + "}"


def prime_implicants(terms: Sequence[BooleanTerm]) -> List[BooleanTerm]:
    """Repeatedly combine terms until no pair merges; return the survivors."""
    current = list(dict.fromkeys(terms))
    primes: Dict[BooleanTerm, None] = {}
    while current:
        merged: Dict[BooleanTerm, None] = {}
        used = set()
        for i, a in enumerate(current):
            for b in current[i + 1:]:
                c = a.combine(b)
                if c is not None:
                    merged[c] = None
                    used.add(a)
                    used.add(b)
        for t in current:
            if t not in used:
                primes[t] = None
        current = list(merged)
    return list(primes)


def minimize_terms(terms: Sequence[BooleanTerm]) -> List[BooleanTerm]:
    """A small set of prime implicants covering every input term.

    Essential primes are taken first; the remainder is covered greedily,
    preferring the prime that covers most uncovered terms (first wins ties).
    """
    minterms = list(dict.fromkeys(terms))
    if not minterms:
        return []
    primes = prime_implicants(minterms)

    cover: List[BooleanTerm] = []
    for m in minterms:
        covering = [p for p in primes if p.covers(m)]
        if len(covering) == 1 and covering[0] not in cover:
            cover.append(covering[0])

    uncovered = [m for m in minterms if not any(p.covers(m) for p in cover)]
    while uncovered:
        best = max(primes, key=lambda p: sum(1 for m in uncovered if p.covers(m)))
        cover.append(best)
        uncovered = [m for m in uncovered if not best.covers(m)]

    logger.debug(f"Minimized {len(minterms)} term(s) to {len(cover)} prime implicant(s)")
    return cover


def terms_formula(terms: Sequence[BooleanTerm]) -> Formula:
    """Disjunction of the terms' formulas; no terms → 0.0 (false)."""
    clauses = list(dict.fromkeys(t.formula() for t in terms))
    if not clauses:
        return FALSE_FORMULA
    if TRUE_FORMULA in clauses:
        return TRUE_FORMULA
    if len(clauses) == 1:
        return clauses[0]
    return disj(*clauses)


def minimal_dnf(phi: Formula) -> Formula:
    """Minimized DNF of ``phi`` read off its crisp models.

    Only crisp truth counts here: a world where ``phi`` takes an
    intermediate degree is not a model.
    """
    models = [
        BooleanTerm.from_interpretation(itp)
        for itp in enumerate_interpretations(phi.atoms())
        if phi.truth(itp).is_true()
    ]
    return terms_formula(minimize_terms(models))
