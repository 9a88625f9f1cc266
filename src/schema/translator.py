"""Delta translation across schema migrations.

A recorded write is rewritten one migration at a time along the resolved
path. Each step only looks at its own migration, so a field name freed by
one migration and reused by a later one maps by history order.

Step rules for set deltas:

    migration      upgrade                      downgrade
    AddField(n)    unaffected                   field == n -> no-op
    RemoveField(n) field == n -> no-op          unaffected
    RenameField    field == old -> field = new  field == new -> field = old
"""

from __future__ import annotations

from dataclasses import replace

from core.constants import DIRECTION_DOWNGRADE, DIRECTION_UPGRADE
from core.errors import EvolveInvariantError
from core.types import (
    AddField,
    Delta,
    Direction,
    NoOpDelta,
    RemoveField,
    RenameField,
    SetDelta,
)
from schema.resolver import resolve_path
from schema.version import SchemaVersion


def translate_delta(delta: Delta, target: SchemaVersion) -> Delta:
    """Translate a delta into the field namespace of a target version.

    Args:
        delta: Recorded delta tagged with its own version.
        target: Version to express the delta in.

    Returns:
        Translated delta tagged with ``target``; the input itself when the
        delta is already expressed in ``target``.

    Raises:
        UnrelatedVersionsError: If the versions are on different branches.
    """
    for step in resolve_path(delta.version, target):
        delta = translate_step(delta, step.direction, step.version)
    if delta.version != target:
        raise EvolveInvariantError(
            f"Translated delta ended at version {delta.version.version_id}, "
            f"expected {target.version_id}."
        )
    return delta


def translate_step(delta: Delta, direction: Direction, step_version: SchemaVersion) -> Delta:
    """Apply or undo the migration of one version on a single delta.

    Upgrading through ``step_version`` tags the result with ``step_version``.
    Downgrading through it tags the result with its parent, the version the
    delta is expressed in once the migration is undone.

    Raises:
        EvolveInvariantError: For a root step, unknown direction, migration,
            or delta type.
    """
    migration = step_version.migration
    if migration is None:
        raise EvolveInvariantError("The root schema has no migration to translate through.")
    reached = _reached_version(direction, step_version)
    if isinstance(delta, NoOpDelta):
        return replace(delta, version=reached)
    if not isinstance(delta, SetDelta):
        raise EvolveInvariantError(f"Unknown delta type: {type(delta).__name__}.")
    upgrading = direction == DIRECTION_UPGRADE
    if isinstance(migration, AddField):
        if not upgrading and delta.field == migration.name:
            return NoOpDelta(version=reached)
    elif isinstance(migration, RemoveField):
        if upgrading and delta.field == migration.name:
            return NoOpDelta(version=reached)
    elif isinstance(migration, RenameField):
        if upgrading and delta.field == migration.old_name:
            return replace(delta, version=reached, field=migration.new_name)
        if not upgrading and delta.field == migration.new_name:
            return replace(delta, version=reached, field=migration.old_name)
    else:
        raise EvolveInvariantError(f"Unknown migration type: {type(migration).__name__}.")
    return replace(delta, version=reached)


def _reached_version(direction: Direction, step_version: SchemaVersion) -> SchemaVersion:
    if direction == DIRECTION_UPGRADE:
        return step_version
    if direction == DIRECTION_DOWNGRADE:
        parent = step_version.prev
        if parent is None:
            raise EvolveInvariantError("Cannot downgrade below the root schema.")
        return parent
    raise EvolveInvariantError(f"Unknown translation direction: {direction!r}.")
