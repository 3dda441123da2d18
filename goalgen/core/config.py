"""
goalgen/core/config.py
======================
Global configuration for GoalGen-Core.
All tunables in one place.
"""
from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class LogicConfig:
    max_distribution_atoms: int = 31    # 2^n worlds must fit in a flat table
    enumeration_warn_atoms: int = 20    # 2^n enumeration above this → log warning


@dataclass
class DeliberationConfig:
    max_desire_iterations:     int  = 100
    max_obligation_iterations: int  = 100
    strict_convergence:        bool = False   # True → raise FixpointNotReached at the cap


@dataclass
class GoalGenConfig:
    logic:        LogicConfig        = field(default_factory=LogicConfig)
    deliberation: DeliberationConfig = field(default_factory=DeliberationConfig)

    @classmethod
    def strict(cls) -> "GoalGenConfig":
        """Config that refuses to keep a non-converged deliberation state."""
        cfg = cls()
        cfg.deliberation.strict_convergence = True
        return cfg


# Singleton default config
DEFAULT_CONFIG = GoalGenConfig()
