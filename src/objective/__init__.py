"""Objective — adjusted Markowitz objective с consistency gate и штрафом латентности."""

from .engine import ObjectiveEngine

__all__ = [
    "ObjectiveEngine",
]
