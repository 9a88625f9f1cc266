"""Unit tests for the schema version arena and builders."""

from __future__ import annotations

import pytest

from core.errors import EvolveInvariantError, InvalidFieldKeyError
from core.types import AddField, RemoveField, RenameField
from schema.version import SchemaRegistry, empty_schema


def test_empty_schema_has_no_parent_or_migration() -> None:
    """Root schema should have neither a predecessor nor a migration."""
    assert empty_schema.prev is None and empty_schema.migration is None


def test_add_field_links_child_to_receiver() -> None:
    """Builders should return a child whose prev is the receiver."""
    registry = SchemaRegistry()

    child = registry.root.add_field("message")

    assert child.prev == registry.root and child.migration == AddField(name="message")


def test_rename_and_remove_record_their_migrations() -> None:
    """Each builder should encode its call as the child's migration."""
    registry = SchemaRegistry()
    renamed = registry.root.add_field("a").rename_field("a", "b")

    removed = renamed.remove_field("b")

    assert renamed.migration == RenameField(old_name="a", new_name="b") and (
        removed.migration == RemoveField(name="b")
    )


def test_rename_of_missing_field_is_accepted() -> None:
    """Builders should not validate field existence."""
    registry = SchemaRegistry()

    version = registry.root.rename_field("missing", "other")

    assert version.depth == 1


def test_building_never_mutates_existing_versions() -> None:
    """Deriving children should leave the parent untouched."""
    registry = SchemaRegistry()
    parent = registry.root.add_field("a")

    parent.add_field("b")
    parent.remove_field("a")

    assert parent.migration == AddField(name="a") and parent.prev == registry.root


def test_branches_share_the_same_parent() -> None:
    """Multiple children may derive from one version."""
    registry = SchemaRegistry()
    base = registry.root.add_field("a")

    left = base.add_field("l")
    right = base.add_field("r")

    assert left.prev == right.prev == base and left != right


def test_versions_from_different_registries_are_not_equal() -> None:
    """Version identity should include the owning lineage."""
    assert SchemaRegistry().root != SchemaRegistry().root


def test_lineage_walks_back_to_root() -> None:
    """Lineage iteration should yield self first and the root last."""
    registry = SchemaRegistry()
    leaf = registry.root.add_field("a").add_field("b")

    versions = list(leaf.lineage())

    assert versions[0] == leaf and versions[-1] == registry.root and leaf.depth == 2


def test_builders_reject_non_string_names() -> None:
    """Builders should raise for non-string field names."""
    registry = SchemaRegistry()

    with pytest.raises(InvalidFieldKeyError):
        registry.root.add_field(7)  # type: ignore[arg-type]


def test_derive_rejects_parent_from_other_registry() -> None:
    """Registries should only derive from their own versions."""
    registry = SchemaRegistry()

    with pytest.raises(EvolveInvariantError):
        registry.derive(SchemaRegistry().root, AddField(name="a"))


def test_corrupted_parent_index_is_detected() -> None:
    """A parent index that does not precede its child is a broken chain."""
    registry = SchemaRegistry()
    child = registry.root.add_field("a")
    registry._parents[child.version_id] = child.version_id

    with pytest.raises(EvolveInvariantError):
        _ = child.prev


def test_registry_length_counts_root_and_derived_versions() -> None:
    """Registry length should include the root and every derived version."""
    registry = SchemaRegistry()
    base = registry.root.add_field("a")

    base.add_field("l")
    base.add_field("r")

    assert len(registry) == 4
