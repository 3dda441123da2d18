"""
tests/unit/test_metrics.py
==========================
Tests for the entailment-check counter.
"""
import threading

from goalgen.core.metrics import EntailmentCounter


class TestEntailmentCounter:
    def test_starts_at_zero(self):
        assert EntailmentCounter().value == 0

    def test_increment(self):
        c = EntailmentCounter()
        c.increment()
        c.increment(4)
        assert c.value == 5

    def test_reset_returns_previous(self):
        c = EntailmentCounter()
        c.increment(3)
        assert c.reset() == 3
        assert c.value == 0

    def test_thread_safe(self):
        c = EntailmentCounter()

        def work():
            for _ in range(1000):
                c.increment()

        threads = [threading.Thread(target=work) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert c.value == 8000

    def test_repr(self):
        assert repr(EntailmentCounter()) == "EntailmentCounter(0)"
