"""
goalgen/agent/agent.py
======================
The agent: a graded mental state and the deliberation algorithms over it.

Mental state:
    knowledge, beliefs   — PossibilisticFactBase
    obligations, goals   — FactSet
    utility              — PossibilityDistribution over desire-consequent atoms
    desire / obligation rules — RuleBase

Modal lookups used by rule activation:
    knows(φ)    = N_knowledge(φ)
    believes(φ) = N_beliefs(φ)
    desires(φ)  = Δ_utility(φ)          (guaranteed possibility)
    must(φ)     = justify(obligations, φ)

Every update builds a new structure and swaps it in, then re-runs the
cascade  utility → obligations → goals.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from goalgen.agent.facts import Fact, FactLike, FactSet, PossibilisticFactBase, as_fact
from goalgen.agent.rules import Rule, RuleBase
from goalgen.core.config import DEFAULT_CONFIG, GoalGenConfig
from goalgen.core.exceptions import FixpointNotReached
from goalgen.core.metrics import EntailmentCounter
from goalgen.core.types import FALSE, TRUE, DegreeLike, TruthDegree, snorm
from goalgen.core.validators import assert_valid_program, check_degree
from goalgen.logic.formula import Formula, disj
from goalgen.logic.normal_form import BooleanTerm, minimize_terms, terms_formula
from goalgen.logic.possibility import PossibilityDistribution

logger = logging.getLogger(__name__)


class Agent:
    """A possibilistic BDI-style agent.

    Usage:
        agent = Agent.load(
            "walker",
            beliefs=[(atom("sunny"), 0.7)],
            desire_rules=[RuleBuilder().if_believes("sunny").then("walk").build()],
        )
        agent.goals                       # { walk }
        agent.update_beliefs(neg("sunny"), 0.9)

    A single instance must not be driven from several threads at once;
    separate instances share nothing but an optional EntailmentCounter.
    """

    def __init__(
        self,
        name: str = "New Agent",
        config: Optional[GoalGenConfig] = None,
        counter: Optional[EntailmentCounter] = None,
        *,
        knowledge: Iterable[Tuple[FactLike, DegreeLike]] = (),
        beliefs: Iterable[Tuple[FactLike, DegreeLike]] = (),
        desire_rules: Iterable[Rule] = (),
        obligation_rules: Iterable[Rule] = (),
    ):
        self._name = name
        self._config = config or DEFAULT_CONFIG
        self._counter = counter
        self._knowledge = self._fact_base(knowledge)
        self._beliefs = self._fact_base(beliefs)
        self._desire_rules = RuleBase(desire_rules)
        self._obligation_rules = RuleBase(obligation_rules)
        self._obligations = FactSet()
        self._utility = PossibilityDistribution(degree=FALSE)
        self._goals = FactSet()
        self._deliberate()

    @classmethod
    def load(
        cls,
        name: str,
        knowledge: Sequence[Tuple[FactLike, DegreeLike]] = (),
        beliefs: Sequence[Tuple[FactLike, DegreeLike]] = (),
        desire_rules: Sequence[Rule] = (),
        obligation_rules: Sequence[Rule] = (),
        *,
        config: Optional[GoalGenConfig] = None,
        counter: Optional[EntailmentCounter] = None,
        validate: bool = True,
    ) -> "Agent":
        """Build an agent from already-parsed facts and rules.

        Raises:
            InvalidAgentProgram: if ``validate`` and any input is malformed.
        """
        config = config or DEFAULT_CONFIG
        if validate:
            assert_valid_program(knowledge, beliefs, desire_rules, obligation_rules, config)
        logger.debug(
            f"Loading agent '{name}': {len(knowledge)} known, {len(beliefs)} believed, "
            f"{len(desire_rules)} desire rule(s), {len(obligation_rules)} obligation rule(s)"
        )
        return cls(
            name,
            config=config,
            counter=counter,
            knowledge=knowledge,
            beliefs=beliefs,
            desire_rules=desire_rules,
            obligation_rules=obligation_rules,
        )

    def _fact_base(
        self, members: Iterable[Tuple[FactLike, DegreeLike]] = ()
    ) -> PossibilisticFactBase:
        return PossibilisticFactBase(members, counter=self._counter, config=self._config.logic)

    # ─── READ ACCESS ───────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> GoalGenConfig:
        return self._config

    @property
    def counter(self) -> Optional[EntailmentCounter]:
        return self._counter

    @property
    def knowledge(self) -> PossibilisticFactBase:
        return self._knowledge

    @property
    def beliefs(self) -> PossibilisticFactBase:
        return self._beliefs

    @property
    def obligations(self) -> FactSet:
        return self._obligations

    @property
    def utility(self) -> PossibilityDistribution:
        return self._utility

    @property
    def goals(self) -> FactSet:
        return self._goals

    @property
    def desire_rules(self) -> RuleBase:
        return self._desire_rules

    @property
    def obligation_rules(self) -> RuleBase:
        return self._obligation_rules

    # ─── MODAL LOOKUPS ─────────────────────────────────────────────

    def knows(self, fact: FactLike) -> TruthDegree:
        return self._knowledge.necessity(fact)

    def believes(self, fact: FactLike) -> TruthDegree:
        return self._beliefs.necessity(fact)

    def desires(self, fact: FactLike) -> TruthDegree:
        fact = as_fact(fact)
        value = fact.formula.constant_value()
        if value is not None:
            return value
        return self._utility.guaranteed_possibility(fact.formula)

    def must(self, fact: FactLike) -> TruthDegree:
        return self.justify(self._obligations, fact)

    @staticmethod
    def justify(facts: FactSet, fact: FactLike) -> TruthDegree:
        """Degree to which ``facts`` supports ``fact``.

        A member fact is supported at its membership. Otherwise a
        literal is unsupported (0) and a compound formula combines the
        support of its parts through its operator.
        """
        fact = as_fact(fact)
        phi = fact.formula
        value = phi.constant_value()
        if value is not None:
            return value
        mu = facts.membership(fact)
        if not mu.is_false():
            return mu
        if phi.is_literal():
            return FALSE
        return phi.operator.truth(*(Agent.justify(facts, Fact(c)) for c in phi.children))

    # ─── TRIGGERS ──────────────────────────────────────────────────

    def update_beliefs(self, fact: FactLike, trust: DegreeLike) -> None:
        """Revise the beliefs with ``fact`` held to degree ``trust``.

        1. contradiction c = N(¬fact)
        2. keep each ψ : t with t > c, rescaled to 1 − (1 − t) / (1 − c)
        3. add ψ ∨ fact at the prior N(ψ) unless already entailed
        4. add fact at ``trust`` unless already entailed
        5. simplify, swap in, re-run the cascade
        """
        fact = as_fact(fact)
        trust = check_degree(trust, "trust")
        previous = self._beliefs
        contradiction = previous.necessity(fact.negated())

        revised = self._fact_base()
        for psi, t in previous.items():
            if not contradiction.is_at_least_as_true_as(t):
                revised.tell(psi, 1.0 - t.negated() / contradiction.negated())

        for psi, _ in previous.items():
            t = previous.necessity(psi)
            disjunction = Fact(disj(psi.formula, fact.formula))
            if not revised.necessity(disjunction).is_at_least_as_true_as(t):
                revised.tell(disjunction, t)

        if not revised.necessity(fact).is_at_least_as_true_as(trust):
            revised.tell(fact, trust)

        revised.simplify()
        logger.debug(
            f"Agent '{self._name}' revised by {fact} : {trust} "
            f"(contradiction {contradiction}) → {revised}"
        )
        self._beliefs = revised
        self._deliberate()

    def tell(self, fact: FactLike, truth: DegreeLike) -> None:
        """Report ``fact`` to degree ``truth``.

        Knowledge is left unchanged; the deliberation cascade still runs.
        """
        fact = as_fact(fact)
        truth = check_degree(truth, "truth")
        logger.debug(f"Agent '{self._name}' told {fact} : {truth}; knowledge unchanged")
        self._deliberate()

    def replace_rules(
        self,
        desire_rules: Optional[Iterable[Rule]] = None,
        obligation_rules: Optional[Iterable[Rule]] = None,
    ) -> None:
        """Swap in new rule bases (None keeps the current one) and re-deliberate."""
        if desire_rules is not None:
            self._desire_rules = RuleBase(desire_rules)
        if obligation_rules is not None:
            self._obligation_rules = RuleBase(obligation_rules)
        self._deliberate()

    # ─── DELIBERATION ──────────────────────────────────────────────

    def _deliberate(self) -> None:
        self.update_desires()
        self.update_obligations()
        self.update_goals()

    def _not_converged(self, phase: str, iterations: int) -> None:
        if self._config.deliberation.strict_convergence:
            raise FixpointNotReached(phase, iterations)
        logger.warning(
            f"Agent '{self._name}': {phase} update did not converge within "
            f"{iterations} iterations; keeping the last state."
        )

    def apply_rules(self, rule_base: RuleBase, previous: Optional[FactSet] = None) -> FactSet:
        """One pass over ``rule_base``.

        Each consequent is told at the max of its rules' activations and
        of its justification by ``previous`` (the agent's obligations when
        omitted). Nothing told during the pass feeds back into the pass,
        so the result does not depend on rule order.
        """
        previous = self._obligations if previous is None else previous
        result = FactSet()
        for rule in rule_base:
            c = rule.consequent
            t = rule.activation(self)
            result.tell(c, snorm(t, result.membership(c), self.justify(previous, c)))
        return result

    def update_desires(self) -> None:
        """Recompute the utility distribution over the desire-consequent atoms.

        Starts from all-zero utility. Each pass fixes every rule's
        activation (reading the previous pass's utility), then sets each
        world to the max activation of the rules whose consequent it
        satisfies. Stops when a pass changes no world.
        """
        rules = list(self._desire_rules)
        self._utility = PossibilityDistribution(
            self._desire_rules.consequent_atoms(),
            FALSE,
            max_atoms=self._config.logic.max_distribution_atoms,
        )
        worlds = list(self._utility.interpretations())
        cap = self._config.deliberation.max_desire_iterations

        for n in range(1, cap + 1):
            activations: Dict[Rule, TruthDegree] = {r: r.activation(self) for r in rules}
            degrees: List[TruthDegree] = []
            for itp in worlds:
                t = FALSE
                for r in rules:
                    if t.is_true():
                        break
                    if r.consequent.formula.truth(itp).is_true():
                        t = snorm(t, activations[r])
                degrees.append(t)
            updated = self._utility.with_degrees(degrees)
            changed = updated != self._utility
            self._utility = updated
            if not changed:
                logger.debug(f"Agent '{self._name}': utility stable after {n} pass(es)")
                return
        self._not_converged("desire", cap)

    def update_obligations(self) -> None:
        """Recompute the obligations from the empty set up to a fixpoint."""
        self._obligations = FactSet()
        cap = self._config.deliberation.max_obligation_iterations
        for n in range(1, cap + 1):
            updated = self.apply_rules(self._obligation_rules, self._obligations)
            changed = updated != self._obligations
            self._obligations = updated
            if not changed:
                logger.debug(f"Agent '{self._name}': obligations stable after {n} pass(es)")
                return
        self._not_converged("obligation", cap)

    def update_goals(self) -> None:
        """Elect a goal: the most desirable formula possible enough.

        γ runs over the belief levels descending (just 1 when there are
        no beliefs), δ over the utility levels descending. φ_δ is the
        minimized disjunction of the minterms of the worlds with utility
        ≥ δ; the first φ_δ with Π_beliefs(φ_δ) ≥ γ becomes the only goal.
        A tautological φ_δ is never elected.
        """
        goals = FactSet()
        gammas = sorted(self._beliefs.level_set(), reverse=True) or [TRUE]
        deltas = sorted(self._utility.level_set(), reverse=True)
        worlds = list(zip(self._utility.interpretations(), self._utility.degrees))

        candidates: List[Tuple[TruthDegree, Formula]] = []
        for delta in deltas:
            terms = [BooleanTerm.from_interpretation(itp) for itp, u in worlds if u >= delta]
            phi = terms_formula(minimize_terms(terms))
            if not phi.is_constant():
                candidates.append((delta, phi))

        possibility: Dict[Formula, TruthDegree] = {}
        for gamma in gammas:
            for delta, phi in candidates:
                if phi not in possibility:
                    possibility[phi] = self._beliefs.possibility(phi)
                if possibility[phi].is_at_least_as_true_as(gamma):
                    goals.tell(phi)
                    self._goals = goals
                    logger.debug(
                        f"Agent '{self._name}' elected goal {phi} (γ={gamma}, δ={delta})"
                    )
                    return
        self._goals = goals
        logger.debug(f"Agent '{self._name}': no goal elected")

    # ─── RENDERING ─────────────────────────────────────────────────

    def summary(self) -> str:
        """One line per part of the mental state, for logging / CLI output."""
        goal = next(iter(self._goals), None)
        lines = [
            f"Agent '{self._name}'",
            f"  Knowledge:    {len(self._knowledge)} fact(s)",
            f"  Beliefs:      {len(self._beliefs)} fact(s), levels {[float(d) for d in self._beliefs.level_set()]}",
            f"  Rules:        {len(self._desire_rules)} desire, {len(self._obligation_rules)} obligation",
            f"  Obligations:  {self._obligations}",
            f"  Utility:      {len(self._utility.atoms)} atom(s), levels {[float(d) for d in self._utility.level_set()]}",
            f"  Goal:         {goal if goal is not None else '—'}",
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return (
            f"agent({self._name})\n{{"
            f"\n  knowledge\n  {self._knowledge}"
            f"\n  beliefs\n  {self._beliefs}"
            f"\n  obligation rules\n  {self._obligation_rules}"
            f"\n  desire rules\n  {self._desire_rules}"
            f"\n  obligations\n  {self._obligations}"
            f"\n  utility\n  {self._utility}"
            f"\n  goals\n  {self._goals}"
            "\n}"
        )

    def __repr__(self) -> str:
        return f"Agent({self._name!r})"
