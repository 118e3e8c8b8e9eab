"""API route modules."""

from . import analysis, training

__all__ = ["analysis", "training"]
