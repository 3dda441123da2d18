"""
goalgen/core/exceptions.py
==========================
Custom exception hierarchy for GoalGen-Core.

All exceptions carry structured context so callers can
programmatically handle different failure modes.

Construction and type errors fail immediately. Logical edge cases
(contradictory conjunctions, empty disjunctions) are data, not errors.
"""

from __future__ import annotations

from typing import Any, List, Optional


class GoalGenError(Exception):
    """Base exception for all GoalGen-Core errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.context = context or {}


class DegreeOutOfRange(GoalGenError, ValueError):
    """Raised when a truth degree is constructed outside [0, 1]."""

    def __init__(self, value: Any):
        super().__init__(
            f"Truth degree {value!r} not in [0, 1]",
            context={"value": value},
        )
        self.value = value


class ArityMismatch(GoalGenError, ValueError):
    """Raised when an operator receives the wrong number of arguments."""

    def __init__(self, operator: str, expected: int, got: int):
        super().__init__(
            f"Operator '{operator}' has arity {expected}, got {got} argument(s)",
            context={"operator": operator, "expected": expected, "got": got},
        )
        self.operator = operator
        self.expected = expected
        self.got = got


class TermIndexError(GoalGenError, IndexError):
    """Raised when a formula sub-term is addressed outside the operator arity."""

    def __init__(self, index: int, arity: int):
        super().__init__(
            f"Term {index} does not exist for an operator of arity {arity}",
            context={"index": index, "arity": arity},
        )
        self.index = index
        self.arity = arity


class PropositionalTypeError(GoalGenError, TypeError):
    """Raised when a non-propositional object reaches a propositional evaluator.

    No coercion is attempted.
    """

    def __init__(self, expected: str, got: Any):
        super().__init__(
            f"{expected} required, got {type(got).__name__}",
            context={"expected": expected, "got": type(got).__name__},
        )
        self.expected = expected


class VocabularyTooLarge(GoalGenError):
    """Raised when a possibility distribution would exceed its atom limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Propositional language too large: {size} atoms (limit {limit})",
            context={"size": size, "limit": limit},
        )
        self.size = size
        self.limit = limit


class FixpointNotReached(GoalGenError):
    """Raised in strict mode when a deliberation loop hits its iteration cap."""

    def __init__(self, phase: str, iterations: int):
        super().__init__(
            f"{phase} update did not converge within {iterations} iterations",
            context={"phase": phase, "iterations": iterations},
        )
        self.phase = phase
        self.iterations = iterations


class InvalidAgentProgram(GoalGenError):
    """Raised when the facts and rules handed to Agent.load are malformed."""

    def __init__(self, message: str, errors: List[str]):
        super().__init__(message, context={"errors": errors})
        self.errors = errors
