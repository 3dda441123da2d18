#!/usr/bin/env python3
"""
scripts/revision_benchmark.py
=============================
Measure the cost of belief revision in entailment checks.

For each vocabulary size n, a fresh agent is revised with a stream of
random formulas over n atoms at random trust levels. Each revision
prints the number of entailment checks it took and the size of the
resulting belief base.

Usage:
    python scripts/revision_benchmark.py --max-atoms 8
    python scripts/revision_benchmark.py --max-atoms 6 --revisions 10 --seed 7 --verbose
"""
import argparse
import logging
import random
import string
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from goalgen.agent.agent import Agent
from goalgen.core.metrics import EntailmentCounter
from goalgen.logic.formula import Formula, atom, conj, disj, neg

logger = logging.getLogger(__name__)


def random_formula(rng: random.Random, atoms, depth_bias: float = 0.5) -> Formula:
    """Random formula over ``atoms``; ``depth_bias`` in (0, 1) sets its expected depth."""
    if rng.random() < depth_bias:
        kind = rng.randrange(3)
        if kind == 0:
            return neg(random_formula(rng, atoms, depth_bias))
        if kind == 1:
            return conj(random_formula(rng, atoms, depth_bias), random_formula(rng, atoms, depth_bias))
        return disj(random_formula(rng, atoms, depth_bias), random_formula(rng, atoms, depth_bias))
    return atom(rng.choice(atoms))


def run(max_atoms: int, revisions: int, depth_bias: float, seed: int) -> None:
    rng = random.Random(seed)
    counter = EntailmentCounter()
    print("n\ti\tchecks\tcard")
    for n in range(1, max_atoms + 1):
        language = list(string.ascii_lowercase[:n])
        agent = Agent(f"bench-{n}", counter=counter)
        for i in range(revisions):
            phi = random_formula(rng, language, depth_bias)
            trust = 0.1 * rng.randrange(10)
            counter.reset()
            agent.update_beliefs(phi, trust)
            logger.debug(f"n={n} i={i}: B <- B * {trust:.1f}/{phi}")
            print(f"{n}\t{i}\t{counter.value}\t{len(agent.beliefs)}")
        logger.info(f"n={n}: final beliefs {agent.beliefs}")


def main():
    parser = argparse.ArgumentParser(description="GoalGen belief-revision benchmark")
    parser.add_argument("--max-atoms",  type=int,   default=8,
                        help="Largest vocabulary size (alphabet letters)")
    parser.add_argument("--revisions",  type=int,   default=20,
                        help="Revisions per vocabulary size")
    parser.add_argument("--depth-bias", type=float, default=0.5,
                        help="Probability of growing a compound node")
    parser.add_argument("--seed",       type=int,   default=0)
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not 1 <= args.max_atoms <= len(string.ascii_lowercase):
        parser.error("--max-atoms must be between 1 and 26")
    if not 0.0 < args.depth_bias < 1.0:
        parser.error("--depth-bias must be in (0, 1)")

    run(args.max_atoms, args.revisions, args.depth_bias, args.seed)


if __name__ == "__main__":
    main()
