"""Shared typed models.

This module defines immutable data models used by the schema chain,
the translator, and the ledger to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, Union

if TYPE_CHECKING:
    from schema.version import SchemaVersion

Direction = Literal["upgrade", "downgrade"]


@dataclass(frozen=True)
class AddField:
    """Migration introducing a new field.

    Attributes:
        name: Field name added by the migration.
    """

    name: str


@dataclass(frozen=True)
class RenameField:
    """Migration renaming an existing field.

    Attributes:
        old_name: Field name before the migration.
        new_name: Field name after the migration.
    """

    old_name: str
    new_name: str


@dataclass(frozen=True)
class RemoveField:
    """Migration dropping a field.

    Attributes:
        name: Field name removed by the migration.
    """

    name: str


Migration = Union[AddField, RenameField, RemoveField]


@dataclass(frozen=True)
class NoOpDelta:
    """Recorded write that has no effect in its version.

    Attributes:
        version: Schema version the delta is expressed in.
    """

    version: SchemaVersion


@dataclass(frozen=True)
class SetDelta:
    """Recorded write of one field value.

    Attributes:
        version: Schema version whose field namespace ``field`` belongs to.
        field: Field name written.
        value: Written value.
    """

    version: SchemaVersion
    field: str
    value: Any


Delta = Union[NoOpDelta, SetDelta]


@dataclass(frozen=True)
class PathStep:
    """One migration step on a resolved version path.

    Attributes:
        version: Version whose migration is applied or undone.
        direction: Upgrade applies the migration, downgrade undoes it.
    """

    version: SchemaVersion
    direction: Direction
