"""Exception taxonomy for the tiling engine."""

from __future__ import annotations


class KluringError(Exception):
    """Base class for all errors raised by this package."""


class InvariantViolation(KluringError):
    """Search and commit disagreed about legality.

    Raised when a commit targets an occupied cell, a depleted shape is
    consumed, or a score is written over an occupied cell. The simulation
    instance that raised it must be discarded.
    """
