"""
goalgen/logic/formula.py
========================
Propositional atoms, operators and formulas.

Formulas are immutable value trees: a node is either atomic or an
operator applied to a tuple of children. Equality and hashing are
structural (syntactic), never semantic:

    a & b  ==  a & b      → True
    a & b  ==  b & a      → False   (logically equivalent, different facts)

Truth functions (Zadeh connectives):
    NOT  → 1 − t
    AND  → min(t₀, t₁)
    OR   → max(t₀, t₁)
    XOR  → max(min(¬t₀, t₁), min(t₀, ¬t₁))

An atom whose name is a number in [0, 1] ("1.0", "0.5") is a
constant: it evaluates to its own value under every interpretation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import TYPE_CHECKING, FrozenSet, Optional, Tuple, Union

from goalgen.core.exceptions import (
    ArityMismatch,
    PropositionalTypeError,
    TermIndexError,
)
from goalgen.core.types import DegreeLike, TruthDegree

if TYPE_CHECKING:
    from goalgen.logic.interpretation import Interpretation
    from goalgen.logic.normal_form import DisjunctiveNormalForm


# ─────────────────────────────────────────────
#  OPERATORS
# ─────────────────────────────────────────────

class Operator(Enum):
    """Propositional connectives: (symbol, arity)."""
    NOT = ("~", 1)
    AND = ("&", 2)
    OR  = ("|", 2)
    XOR = ("+", 2)

    def __init__(self, symbol: str, arity: int):
        self.symbol = symbol
        self.arity = arity

    def truth(self, *degrees: DegreeLike) -> TruthDegree:
        """Compose the children's truth degrees."""
        if len(degrees) != self.arity:
            raise ArityMismatch(self.symbol, self.arity, len(degrees))
        t = [TruthDegree(d) for d in degrees]
        if self is Operator.NOT:
            return t[0].negated()
        if self is Operator.AND:
            return TruthDegree(min(t[0], t[1]))
        if self is Operator.OR:
            return TruthDegree(max(t[0], t[1]))
        # XOR
        return TruthDegree(max(
            min(t[0].negated(), t[1]),
            min(t[0], t[1].negated()),
        ))

    def __str__(self) -> str:
        return self.symbol


# ─────────────────────────────────────────────
#  ATOMS
# ─────────────────────────────────────────────

@dataclass(frozen=True, order=True)
class Atom:
    """A named propositional symbol. Equality and ordering by name."""
    name: str

    @property
    def is_constant(self) -> bool:
        return self.constant_value() is not None

    def constant_value(self) -> Optional[TruthDegree]:
        """The truth value denoted by a numeric name, else None."""
        try:
            v = float(self.name)
        except ValueError:
            return None
        if not math.isfinite(v) or v < 0.0 or v > 1.0:
            return None
        return TruthDegree(v)

    def __str__(self) -> str:
        return self.name


# ─────────────────────────────────────────────
#  FORMULAS
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class Formula:
    """Immutable propositional formula.

    Exactly one of ``atom`` / ``operator`` is set. Use the module-level
    constructors (``atom``, ``neg``, ``conj``, ``disj``, ``xor``,
    ``constant``) rather than the raw initializer.
    """
    atom:     Optional[Atom]           = None
    operator: Optional[Operator]       = None
    children: Tuple["Formula", ...]    = ()

    def __post_init__(self):
        if self.operator is None:
            if not isinstance(self.atom, Atom):
                raise PropositionalTypeError("Atom", self.atom)
            if self.children:
                raise ArityMismatch(str(self.atom), 0, len(self.children))
            return
        if self.atom is not None:
            raise PropositionalTypeError("Operator node without atom", self.atom)
        if len(self.children) != self.operator.arity:
            raise ArityMismatch(self.operator.symbol, self.operator.arity, len(self.children))
        for child in self.children:
            if not isinstance(child, Formula):
                raise PropositionalTypeError("Formula", child)

    # ── Structure ────────────────────────────────────────────────────

    def is_atomic(self) -> bool:
        return self.operator is None

    def is_constant(self) -> bool:
        return self.operator is None and self.atom.is_constant

    def constant_value(self) -> Optional[TruthDegree]:
        if self.operator is not None:
            return None
        return self.atom.constant_value()

    def is_literal(self) -> bool:
        if self.is_atomic():
            return True
        return self.operator is Operator.NOT and self.children[0].is_atomic()

    def is_conjunction(self) -> bool:
        """True for a literal or an AND-tree whose leaves are literals."""
        if self.is_literal():
            return True
        return (
            self.operator is Operator.AND
            and self.children[0].is_conjunction()
            and self.children[1].is_conjunction()
        )

    def term(self, i: int) -> "Formula":
        arity = self.operator.arity if self.operator else 0
        if i < 0 or i >= arity:
            raise TermIndexError(i, arity)
        return self.children[i]

    def atoms(self) -> FrozenSet[Atom]:
        """Non-constant atoms occurring in the formula."""
        if self.operator is None:
            return frozenset() if self.atom.is_constant else frozenset([self.atom])
        return frozenset().union(*(c.atoms() for c in self.children))

    # ── Semantics ────────────────────────────────────────────────────

    def truth(self, interpretation: "Interpretation") -> TruthDegree:
        from goalgen.logic.interpretation import Interpretation

        if not isinstance(interpretation, Interpretation):
            raise PropositionalTypeError("Propositional interpretation", interpretation)
        return self._truth(interpretation)

    def _truth(self, interpretation: "Interpretation") -> TruthDegree:
        if self.operator is None:
            value = self.atom.constant_value()
            if value is not None:
                return value
            return interpretation.truth(self.atom)
        return self.operator.truth(*(c._truth(interpretation) for c in self.children))

    # ── Syntactic transformations ────────────────────────────────────

    def negated(self) -> "Formula":
        """¬φ, cancelling an outermost negation instead of stacking it."""
        if self.operator is Operator.NOT:
            return self.children[0]
        return Formula(operator=Operator.NOT, children=(self,))

    def de_morgan(self) -> "Formula":
        """Push one outermost negation down a level."""
        if self.operator is not Operator.NOT:
            return self
        inner = self.children[0]
        if inner.operator is Operator.NOT:
            return inner.children[0]
        if inner.operator is Operator.AND:
            return disj(neg(inner.children[0]), neg(inner.children[1]))
        if inner.operator is Operator.OR:
            return conj(neg(inner.children[0]), neg(inner.children[1]))
        if inner.operator is Operator.XOR:
            a, b = inner.children
            return disj(conj(a, b), conj(neg(a), neg(b)))
        return self

    def nnf(self) -> "Formula":
        """Negation normal form over {AND, OR, literals}; XOR is expanded."""
        phi = self.de_morgan()
        if phi.operator is Operator.XOR:
            a, b = phi.children
            phi = disj(conj(a, neg(b)), conj(neg(a), b))
        if phi.is_literal():
            return phi
        return Formula(operator=phi.operator, children=tuple(c.nnf() for c in phi.children))

    def right_associate(self) -> "Formula":
        """((a ∘ b) ∘ c) → (a ∘ (b ∘ c)) for a repeated binary operator."""
        if self.operator is None or self.operator is Operator.NOT:
            return self
        left, right = self.children
        if left.operator is self.operator:
            return Formula(
                operator=self.operator,
                children=(
                    left.children[0],
                    Formula(operator=self.operator, children=(left.children[1], right)).right_associate(),
                ),
            )
        return self

    def dnf_terms(self) -> "DisjunctiveNormalForm":
        """The set of conjunctions whose disjunction is equivalent to this formula."""
        from goalgen.logic.normal_form import dnf_terms

        return dnf_terms(self)

    def dnf(self) -> "Formula":
        """Disjunctive normal form. An empty disjunction is the constant 0.0."""
        return self.dnf_terms().formula()

    # ── Rendering ────────────────────────────────────────────────────

    def __str__(self) -> str:
        if self.operator is None:
            return str(self.atom)
        if self.operator.arity == 1:
            return f"{self.operator}{self.children[0]}"
        return f"({self.children[0]} {self.operator} {self.children[1]})"

    def __repr__(self) -> str:
        return f"Formula({self!s})"


# ─────────────────────────────────────────────
#  CONSTRUCTORS
# ─────────────────────────────────────────────

FormulaLike = Union[Formula, Atom, str]


def as_formula(value: FormulaLike) -> Formula:
    """Accept a Formula, an Atom or an atom name.

    Names are not parsed: ``"~p"`` is an atom named ``~p``, use ``neg("p")``.
    """
    if isinstance(value, Formula):
        return value
    if isinstance(value, Atom):
        return Formula(atom=value)
    if isinstance(value, str):
        return Formula(atom=Atom(value))
    raise PropositionalTypeError("Formula", value)


def atom(name: str) -> Formula:
    return Formula(atom=Atom(name))


def constant(value: DegreeLike) -> Formula:
    """Constant-truth formula, e.g. constant(1) → 1.0."""
    return Formula(atom=Atom(str(float(TruthDegree(value)))))


def neg(phi: FormulaLike) -> Formula:
    return Formula(operator=Operator.NOT, children=(as_formula(phi),))


def _fold(op: Operator, operands: Tuple[FormulaLike, ...]) -> Formula:
    # right-nested: a ∘ (b ∘ (c ∘ d))
    formulas = [as_formula(f) for f in operands]
    return reduce(
        lambda acc, f: Formula(operator=op, children=(f, acc)),
        reversed(formulas[:-1]),
        formulas[-1],
    )


def conj(first: FormulaLike, second: FormulaLike, *more: FormulaLike) -> Formula:
    return _fold(Operator.AND, (first, second) + more)


def disj(first: FormulaLike, second: FormulaLike, *more: FormulaLike) -> Formula:
    return _fold(Operator.OR, (first, second) + more)


def xor(first: FormulaLike, second: FormulaLike) -> Formula:
    return Formula(operator=Operator.XOR, children=(as_formula(first), as_formula(second)))


TRUE  = constant(1.0)
FALSE = constant(0.0)
