"""
goalgen/core/validators.py
==========================
Input validation for agent programs handed over by an external loader.

Validates:
    - (fact, degree) pairs for knowledge / belief initialization
    - Rules (well-formed facts, non-constant consequents)
    - Desire vocabulary size against the distribution limit

These validators run at API boundaries (Agent.load), not in the
reasoning loops. ``validate_*`` functions return a list of error
strings; ``assert_*`` functions raise InvalidAgentProgram.
"""
from __future__ import annotations

import math
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from goalgen.core.config import DEFAULT_CONFIG, GoalGenConfig
from goalgen.core.exceptions import DegreeOutOfRange, InvalidAgentProgram
from goalgen.core.types import DegreeLike, TruthDegree


# ─── DEGREES ──────────────────────────────────────────────────────

def check_degree(value: Any, label: str = "degree") -> TruthDegree:
    """Coerce ``value`` to a TruthDegree or raise DegreeOutOfRange.

    Unlike a clamp, out-of-range input is always an error.
    """
    try:
        return TruthDegree(value)
    except DegreeOutOfRange as exc:
        exc.context["label"] = label
        raise


def _degree_error(value: Any, where: str) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if not isinstance(value, (int, float)):
        return f"{where}: degree {value!r} is not a number"
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        return f"{where}: degree {value} not in [0, 1]"
    return None


# ─── FACTS ────────────────────────────────────────────────────────

def validate_fact_pairs(pairs: Iterable[Tuple[Any, DegreeLike]], section: str = "facts") -> List[str]:
    """Validate (fact, degree) pairs. Returns list of errors."""
    from goalgen.agent.facts import Fact
    from goalgen.logic.formula import Formula

    errors: List[str] = []
    for i, pair in enumerate(pairs):
        where = f"{section}[{i}]"
        try:
            fact, mu = pair
        except (TypeError, ValueError):
            errors.append(f"{where}: expected a (fact, degree) pair, got {pair!r}")
            continue
        if not isinstance(fact, (Fact, Formula)):
            errors.append(f"{where}: {type(fact).__name__} is not a Fact or Formula")
        err = _degree_error(mu, where)
        if err:
            errors.append(err)
    return errors


# ─── RULES ────────────────────────────────────────────────────────

def validate_rule(rule: Any, where: str = "rule") -> List[str]:
    """Validate a single Rule. Returns list of errors.

    Checks:
        1. It is a Rule
        2. The consequent mentions at least one non-constant atom
    """
    from goalgen.agent.rules import Rule

    if not isinstance(rule, Rule):
        return [f"{where}: {type(rule).__name__} is not a Rule"]
    errors: List[str] = []
    if not rule.consequent.formula.atoms():
        errors.append(f"{where}: consequent '{rule.consequent}' has no atoms")
    return errors


def validate_rules(rules: Sequence[Any], section: str = "rules") -> List[str]:
    errors: List[str] = []
    for i, rule in enumerate(rules):
        errors.extend(validate_rule(rule, f"{section}[{i}]"))
    return errors


def validate_desire_vocabulary(rules: Sequence[Any], config: GoalGenConfig = DEFAULT_CONFIG) -> List[str]:
    """The desire-consequent vocabulary must fit a possibility distribution."""
    from goalgen.agent.rules import Rule

    atoms = set()
    for rule in rules:
        if isinstance(rule, Rule):
            atoms |= rule.consequent.formula.atoms()
    limit = config.logic.max_distribution_atoms
    if len(atoms) > limit:
        return [f"desire rules mention {len(atoms)} atoms (limit {limit})"]
    return []


# ─── CONVENIENCE VALIDATORS ──────────────────────────────────────

def assert_valid_program(
    knowledge: Sequence[Tuple[Any, DegreeLike]],
    beliefs: Sequence[Tuple[Any, DegreeLike]],
    desire_rules: Sequence[Any],
    obligation_rules: Sequence[Any],
    config: GoalGenConfig = DEFAULT_CONFIG,
) -> None:
    """Validate a whole agent program and raise InvalidAgentProgram on any violation."""
    errors = (
        validate_fact_pairs(knowledge, "knowledge")
        + validate_fact_pairs(beliefs, "beliefs")
        + validate_rules(desire_rules, "desires")
        + validate_rules(obligation_rules, "obligations")
        + validate_desire_vocabulary(desire_rules, config)
    )
    if errors:
        raise InvalidAgentProgram(
            f"Invalid agent program: {'; '.join(errors)}",
            errors=errors,
        )
