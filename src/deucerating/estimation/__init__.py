"""Estimation dispatch."""

from .dispatcher import EstimationDispatcher, estimate

__all__ = ["EstimationDispatcher", "estimate"]
