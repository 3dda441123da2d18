"""
goalgen/version.py
==================
GoalGen-Core version. ``pyproject.toml`` reads ``__version__`` from here.

    from goalgen.version import __version__, VERSION_INFO
"""

from __future__ import annotations

from typing import NamedTuple

__version__ = "0.2.0"


class VersionInfo(NamedTuple):
    """MAJOR.MINOR.PATCH with an optional pre-release tag (``0.3.0-rc1``)."""
    major: int
    minor: int
    patch: int
    pre_release: str = ""

    @classmethod
    def parse(cls, version: str) -> "VersionInfo":
        release, _, pre_release = version.partition("-")
        major, minor, patch = (int(part) for part in release.split("."))
        return cls(major, minor, patch, pre_release)

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            return f"{base}-{self.pre_release}"
        return base


VERSION_INFO = VersionInfo.parse(__version__)
