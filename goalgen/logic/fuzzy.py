"""
goalgen/logic/fuzzy.py
======================
Generic fuzzy sets: element → membership degree in [0, 1].

Absent elements have membership 0, and assigning membership 0
removes an element, so "present" and "non-zero" always coincide.

    α-cut      A_α = { x : A(x) ≥ α }           (crisp, membership 1)
    level set  Λ(A) = sorted { A(x) : A(x) > 0 }
"""

from __future__ import annotations

from typing import Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from goalgen.core.types import FALSE, TRUE, DegreeLike, TruthDegree

E = TypeVar("E")


class FuzzySet(Generic[E]):
    """A fuzzy subset of an arbitrary hashable universe.

    Iteration follows insertion order, which keeps every algorithm
    built on top of it deterministic.
    """

    def __init__(self, members: Optional[Iterable[Tuple[E, DegreeLike]]] = None):
        self._members: Dict[E, TruthDegree] = {}
        for element, mu in members or ():
            self.assign(element, mu)

    def membership(self, element: E) -> TruthDegree:
        return self._members.get(element, FALSE)

    def assign(self, element: E, mu: DegreeLike) -> None:
        mu = TruthDegree(mu)
        if mu.is_false():
            self._members.pop(element, None)
        else:
            self._members[element] = mu

    def remove(self, element: E) -> None:
        self._members.pop(element, None)

    def items(self) -> Iterator[Tuple[E, TruthDegree]]:
        return iter(list(self._members.items()))

    def level_set(self) -> List[TruthDegree]:
        return sorted(set(self._members.values()))

    def cut(self, alpha: DegreeLike) -> "FuzzySet[E]":
        alpha = TruthDegree(alpha)
        return FuzzySet((e, TRUE) for e, mu in self._members.items() if mu >= alpha)

    def copy(self) -> "FuzzySet[E]":
        return FuzzySet(self._members.items())

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._members))

    def __contains__(self, element: object) -> bool:
        return element in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FuzzySet):
            return NotImplemented
        return self._members == other._members

    __hash__ = None

    def __repr__(self) -> str:
        body = ", ".join(f"{e!r}: {mu}" for e, mu in self._members.items())
        return f"FuzzySet({{{body}}})"
