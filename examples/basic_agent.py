"""
examples/basic_agent.py
=======================
Minimal GoalGen example: an agent deciding how to run an errand.
"""
import logging
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from goalgen.agent.agent import Agent
from goalgen.agent.rules import RuleBuilder
from goalgen.core.metrics import EntailmentCounter
from goalgen.logic.formula import atom, disj, neg


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    counter = EntailmentCounter()

    desire_rules = [
        RuleBuilder().if_believes("raining").then("umbrella").build(),
        RuleBuilder().if_believes(neg("raining")).then("walk").build(),
        RuleBuilder().if_desires("walk").then("shoes").build(),
    ]
    agent = Agent.load(
        "errand",
        beliefs=[(atom("raining"), 0.7)],
        desire_rules=desire_rules,
        counter=counter,
    )
    print(agent.summary())
    assert atom("umbrella") in agent.goals, "Rain is likely: take the umbrella"

    # The forecast changes: it is quite certainly dry.
    agent.update_beliefs(neg("raining"), 0.9)
    print(agent.summary())
    print(agent)
    assert disj("shoes", "walk") in agent.goals, "Dry weather: go for a walk"
    print(f"Entailment checks performed: {counter.value}")
    print("✓ Basic agent example passed.")


if __name__ == "__main__":
    main()
