"""
goalgen/agent/rules.py
======================
Modal rules and rule bases.

A rule generates its consequent to the degree its four modal
antecedents hold for an agent:

    activation = ⊤( K(κ), B(β), D(δ), O(ο) )

where K/B are necessities under knowledge/beliefs, D is guaranteed
possibility under the utility distribution, and O is justification by
the obligation set. Antecedents left unspecified are the constant 1.0
and never constrain activation.

This module provides:
    1. Rule        — immutable rule, structural equality
    2. RuleBuilder — fluent API to construct rules programmatically
    3. RuleBase    — set of rules with deterministic iteration
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, Iterator, Optional

from goalgen.agent.facts import TRUE_FACT, Fact, FactLike, as_fact
from goalgen.core.types import Modality, TruthDegree, tnorm
from goalgen.logic.formula import Atom, conj

if TYPE_CHECKING:
    from goalgen.agent.agent import Agent

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
#  RULE
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class Rule:
    """if K(knowledge) and B(belief) and D(desire) and O(obligation) then consequent.

    Formulas and atom names are accepted wherever a Fact is expected.
    Two rules are equal iff all five facts are syntactically equal.
    """
    consequent: Fact
    knowledge:  Fact = TRUE_FACT
    belief:     Fact = TRUE_FACT
    desire:     Fact = TRUE_FACT
    obligation: Fact = TRUE_FACT

    def __post_init__(self):
        for name in ("consequent", "knowledge", "belief", "desire", "obligation"):
            object.__setattr__(self, name, as_fact(getattr(self, name)))

    @property
    def antecedents(self) -> Dict[Modality, Fact]:
        return {
            Modality.KNOWLEDGE:  self.knowledge,
            Modality.BELIEF:     self.belief,
            Modality.DESIRE:     self.desire,
            Modality.OBLIGATION: self.obligation,
        }

    def antecedent(self, modality: Modality) -> Fact:
        return self.antecedents[modality]

    def activation(self, agent: "Agent") -> TruthDegree:
        """Degree to which ``agent``'s mental state triggers this rule."""
        return tnorm(
            agent.knows(self.knowledge),
            agent.believes(self.belief),
            agent.desires(self.desire),
            agent.must(self.obligation),
        )

    def __str__(self) -> str:
        return (
            f"if K({self.knowledge}) and B({self.belief}) "
            f"and D({self.desire}) and O({self.obligation}) "
            f"then {self.consequent}"
        )


# ─────────────────────────────────────────────
#  RULE BUILDER  (fluent API)
# ─────────────────────────────────────────────


class RuleBuilder:
    """Fluent builder for Rule.

    Repeated conditions under the same modality are conjoined.

    Example:
        rule = (RuleBuilder()
                .if_believes("raining")
                .if_believes(neg("umbrella"))
                .if_desires("dry")
                .then("stay_home")
                .build())
    """

    def __init__(self):
        self._antecedents: Dict[Modality, Fact] = {}
        self._consequent: Optional[Fact] = None

    def _require(self, modality: Modality, fact: FactLike) -> "RuleBuilder":
        fact = as_fact(fact)
        existing = self._antecedents.get(modality)
        if existing is not None:
            fact = Fact(conj(existing.formula, fact.formula))
        self._antecedents[modality] = fact
        return self

    def if_knows(self, fact: FactLike) -> "RuleBuilder":
        return self._require(Modality.KNOWLEDGE, fact)

    def if_believes(self, fact: FactLike) -> "RuleBuilder":
        return self._require(Modality.BELIEF, fact)

    def if_desires(self, fact: FactLike) -> "RuleBuilder":
        return self._require(Modality.DESIRE, fact)

    def if_obliged(self, fact: FactLike) -> "RuleBuilder":
        return self._require(Modality.OBLIGATION, fact)

    def then(self, fact: FactLike) -> "RuleBuilder":
        self._consequent = as_fact(fact)
        return self

    def build(self) -> Rule:
        if self._consequent is None:
            raise ValueError("Rule has no consequent.")
        return Rule(
            consequent=self._consequent,
            knowledge=self._antecedents.get(Modality.KNOWLEDGE, TRUE_FACT),
            belief=self._antecedents.get(Modality.BELIEF, TRUE_FACT),
            desire=self._antecedents.get(Modality.DESIRE, TRUE_FACT),
            obligation=self._antecedents.get(Modality.OBLIGATION, TRUE_FACT),
        )


# ─────────────────────────────────────────────
#  RULE BASE
# ─────────────────────────────────────────────

class RuleBase:
    """A set of rules. Duplicates collapse; iteration is insertion order."""

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: Dict[Rule, None] = {}
        for rule in rules:
            self.add(rule)

    def add(self, rule: Rule) -> None:
        if not isinstance(rule, Rule):
            raise TypeError(f"Rule required, got {type(rule).__name__}")
        if rule in self._rules:
            logger.debug(f"Duplicate rule ignored: {rule}")
        self._rules[rule] = None

    def remove(self, rule: Rule) -> None:
        """Remove ``rule`` if present."""
        self._rules.pop(rule, None)

    def consequent_atoms(self) -> FrozenSet[Atom]:
        """Atoms occurring in any consequent: the desire vocabulary."""
        return frozenset().union(*(r.consequent.formula.atoms() for r in self._rules))

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule: object) -> bool:
        return rule in self._rules

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleBase):
            return NotImplemented
        return set(self._rules) == set(other._rules)

    __hash__ = None

    def __str__(self) -> str:
        return "{\n" + ",\n".join(f"  {r}" for r in self._rules) + "\n}"
