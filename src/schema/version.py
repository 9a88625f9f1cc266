"""Schema version arena and migration builders.

Versions are stored in a registry addressed by integer ids. Each version
records its parent id and the migration that produced it from the parent.
Building a schema only appends new versions; existing ones never change.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, Mapping
from uuid import uuid4

from core.constants import ROOT_VERSION_ID
from core.errors import EvolveInvariantError, InvalidFieldKeyError
from core.logging_config import get_logger
from core.types import AddField, Migration, RemoveField, RenameField

if TYPE_CHECKING:
    from store.view import View

_LOGGER = get_logger(__name__)


class SchemaRegistry:
    """Arena of schema versions forming one lineage tree.

    Version 0 is the empty root schema. Every other version has exactly one
    parent with a smaller id, so parent links can never form a cycle.
    """

    def __init__(self) -> None:
        self.lineage_id = uuid4().hex
        self._parents: list[int | None] = [None]
        self._migrations: list[Migration | None] = [None]
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._parents)

    @property
    def root(self) -> SchemaVersion:
        """Return the empty schema of this registry."""
        return SchemaVersion(registry=self, version_id=ROOT_VERSION_ID)

    def derive(self, parent: SchemaVersion, migration: Migration) -> SchemaVersion:
        """Append a version produced by applying a migration to a parent.

        Args:
            parent: Existing version of this registry.
            migration: Migration applied on top of the parent.

        Returns:
            Handle to the new version.

        Raises:
            EvolveInvariantError: If the parent belongs to another registry.
        """
        if parent.registry is not self:
            raise EvolveInvariantError(
                f"Cannot derive from version {parent.version_id} of lineage "
                f"{parent.registry.lineage_id} inside lineage {self.lineage_id}."
            )
        with self._lock:
            version_id = len(self._parents)
            self._parents.append(parent.version_id)
            self._migrations.append(migration)
        _LOGGER.debug(
            "schema_version_created",
            lineage_id=self.lineage_id,
            version_id=version_id,
            parent_id=parent.version_id,
            migration=type(migration).__name__,
        )
        return SchemaVersion(registry=self, version_id=version_id)

    def parent_id(self, version_id: int) -> int | None:
        """Return the parent id of a version, checking arena ordering.

        Raises:
            EvolveInvariantError: If the id is unknown or the chain is corrupted.
        """
        self._check_known(version_id)
        parent_id = self._parents[version_id]
        if version_id == ROOT_VERSION_ID:
            if parent_id is not None:
                raise EvolveInvariantError("Root schema version must not have a parent.")
            return None
        if parent_id is None or not 0 <= parent_id < version_id:
            raise EvolveInvariantError(
                f"Corrupted schema chain: version {version_id} has parent {parent_id}."
            )
        return parent_id

    def migration_of(self, version_id: int) -> Migration | None:
        """Return the migration that produced a version, None for the root."""
        self._check_known(version_id)
        return self._migrations[version_id]

    def _check_known(self, version_id: int) -> None:
        if not 0 <= version_id < len(self._parents):
            raise EvolveInvariantError(
                f"Unknown schema version {version_id} in lineage {self.lineage_id}."
            )


@dataclass(frozen=True)
class SchemaVersion:
    """Immutable handle to one version of a schema lineage.

    Attributes:
        registry: Arena owning the version.
        version_id: Stable index inside the arena.
    """

    registry: SchemaRegistry = field(compare=False, repr=False)
    version_id: int
    lineage_id: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lineage_id", self.registry.lineage_id)

    @property
    def prev(self) -> SchemaVersion | None:
        """Return the predecessor version, None for the root."""
        parent_id = self.registry.parent_id(self.version_id)
        if parent_id is None:
            return None
        return SchemaVersion(registry=self.registry, version_id=parent_id)

    @property
    def migration(self) -> Migration | None:
        """Return the migration that produced this version."""
        return self.registry.migration_of(self.version_id)

    @property
    def depth(self) -> int:
        """Number of migrations between the root and this version."""
        return sum(1 for _ in self.lineage()) - 1

    def lineage(self) -> Iterator[SchemaVersion]:
        """Iterate from this version back to the root, inclusive."""
        version: SchemaVersion | None = self
        while version is not None:
            yield version
            version = version.prev

    def add_field(self, name: str) -> SchemaVersion:
        """Return a child version that adds a field."""
        _require_name(name, "field name")
        return self.registry.derive(self, AddField(name=name))

    def rename_field(self, old_name: str, new_name: str) -> SchemaVersion:
        """Return a child version that renames a field.

        Renaming a field the schema does not contain is accepted.
        """
        _require_name(old_name, "old field name")
        _require_name(new_name, "new field name")
        return self.registry.derive(self, RenameField(old_name=old_name, new_name=new_name))

    def remove_field(self, name: str) -> SchemaVersion:
        """Return a child version that removes a field."""
        _require_name(name, "field name")
        return self.registry.derive(self, RemoveField(name=name))

    def new_instance(self, initial: Mapping[str, Any] | None = None) -> View:
        """Create a fresh instance and return its view in this version.

        Args:
            initial: Optional initial field values, written in iteration order.

        Returns:
            View bound to this version over a new, empty ledger.
        """
        from store.view import new_instance

        return new_instance(self, initial)

    def view_instance(self, existing: View) -> View:
        """Return a view of an existing instance through this version."""
        from store.view import view_instance

        return view_instance(existing, self)


def _require_name(name: object, label: str) -> None:
    """Validate that a migration name is a string.

    Raises:
        InvalidFieldKeyError: If name is not a string.
    """
    if not isinstance(name, str):
        raise InvalidFieldKeyError(
            f"Invalid {label}: expected str, got {type(name).__name__}."
        )


DEFAULT_REGISTRY = SchemaRegistry()
empty_schema = DEFAULT_REGISTRY.root
