"""Lineage exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Invariant errors signal broken structure; argument errors signal misuse.
"""

from __future__ import annotations


class EvolveError(Exception):
    """Base exception for all lineage failures."""


class EvolveConfigError(EvolveError):
    """Raised for invalid runtime configuration."""


class EvolveInvariantError(EvolveError):
    """Raised when a structural guarantee of the schema chain is broken."""


class UnrelatedVersionsError(EvolveInvariantError):
    """Raised when two schema versions share no ancestor path."""


class EvolveArgumentError(EvolveError):
    """Raised when a caller passes an invalid argument."""


class InvalidFieldKeyError(EvolveArgumentError):
    """Raised for field or migration names that are not strings."""
