"""goalgen/logic — Truth-degree propositional logic layer."""

from goalgen.logic.formula import (
    Atom,
    Formula,
    Operator,
    as_formula,
    atom,
    conj,
    constant,
    disj,
    neg,
    xor,
)
from goalgen.logic.fuzzy import FuzzySet
from goalgen.logic.interpretation import (
    Interpretation,
    enumerate_interpretations,
    interpretation_at,
)
from goalgen.logic.normal_form import (
    BooleanTerm,
    Conjunction,
    DisjunctiveNormalForm,
    dnf_terms,
    minimal_dnf,
    minimize_terms,
    prime_implicants,
)
from goalgen.logic.possibility import PossibilityDistribution

__all__ = [
    "Atom",
    "Formula",
    "Operator",
    "as_formula",
    "atom",
    "conj",
    "constant",
    "disj",
    "neg",
    "xor",
    "FuzzySet",
    "Interpretation",
    "enumerate_interpretations",
    "interpretation_at",
    "BooleanTerm",
    "Conjunction",
    "DisjunctiveNormalForm",
    "dnf_terms",
    "minimal_dnf",
    "minimize_terms",
    "prime_implicants",
    "PossibilityDistribution",
]
