"""
goalgen/core/metrics.py
=======================
Entailment-check instrumentation.

Every call to FactBase.models() performs one exhaustive 2^n
enumeration; counting those calls is the standard way to measure the
cost of belief revision. The counter is injected explicitly into the
fact bases (and agents) that should report to it. Nothing is counted
when no counter is supplied, and the count never influences reasoning.
"""

from __future__ import annotations

import threading


class EntailmentCounter:
    """Thread-safe counter of entailment checks.

    One counter may be shared by several agents running in parallel
    threads; increments are serialised with a lock.

    Usage:
        counter = EntailmentCounter()
        agent = Agent("a", counter=counter)
        agent.update_beliefs(fact, 0.7)
        print(counter.value)
    """

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self, amount: int = 1) -> None:
        with self._lock:
            self._value += amount

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> int:
        """Zero the counter and return the value it held."""
        with self._lock:
            value, self._value = self._value, 0
            return value

    def __repr__(self) -> str:
        return f"EntailmentCounter({self.value})"
