"""Public SDK surface for lineage.

This module provides a stable import path for library users.
It re-exports the schema builders, views, and typed error classes.
"""

from __future__ import annotations

from core.config import EvolveConfig
from core.errors import (
    EvolveArgumentError,
    EvolveConfigError,
    EvolveError,
    EvolveInvariantError,
    InvalidFieldKeyError,
    UnrelatedVersionsError,
)
from core.types import AddField, NoOpDelta, PathStep, RemoveField, RenameField, SetDelta
from schema.resolver import inherits_from, resolve_path
from schema.translator import translate_delta, translate_step
from schema.version import SchemaRegistry, SchemaVersion, empty_schema
from store.ledger import Ledger
from store.view import View, render_ledger

__all__ = [
    "AddField",
    "EvolveArgumentError",
    "EvolveConfig",
    "EvolveConfigError",
    "EvolveError",
    "EvolveInvariantError",
    "InvalidFieldKeyError",
    "Ledger",
    "NoOpDelta",
    "PathStep",
    "RemoveField",
    "RenameField",
    "SchemaRegistry",
    "SchemaVersion",
    "SetDelta",
    "UnrelatedVersionsError",
    "View",
    "empty_schema",
    "inherits_from",
    "render_ledger",
    "resolve_path",
    "translate_delta",
    "translate_step",
]
