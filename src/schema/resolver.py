"""Version relationship resolver.

This module computes the ordered migration steps that connect two
versions of the same lineage. Only ancestor/descendant pairs are related.
"""

from __future__ import annotations

from core.constants import DIRECTION_DOWNGRADE, DIRECTION_UPGRADE
from core.errors import EvolveInvariantError, UnrelatedVersionsError
from core.logging_config import get_logger
from core.types import Direction, PathStep
from schema.version import SchemaVersion

_LOGGER = get_logger(__name__)


def inherits_from(descendant: SchemaVersion, ancestor: SchemaVersion) -> bool:
    """Check whether ancestor is reachable from descendant via parent links.

    A version inherits from itself.
    """
    if descendant.lineage_id != ancestor.lineage_id:
        return False
    return any(version == ancestor for version in descendant.lineage())


def resolve_path(source: SchemaVersion, target: SchemaVersion) -> list[PathStep]:
    """Resolve the migration steps translating from source to target.

    Upgrades list every version after source up to and including target,
    oldest first. Downgrades list every version from source back to, but
    excluding, target, newest first.

    Args:
        source: Version a delta is currently expressed in.
        target: Version the delta must be expressed in.

    Returns:
        Ordered path steps; empty when source equals target.

    Raises:
        UnrelatedVersionsError: If neither version inherits from the other.
    """
    if inherits_from(target, source):
        steps = _walk(target, source, DIRECTION_UPGRADE)
        steps.reverse()
        return steps
    if inherits_from(source, target):
        return _walk(source, target, DIRECTION_DOWNGRADE)
    _LOGGER.error(
        "unrelated_versions",
        source_lineage=source.lineage_id,
        source_version=source.version_id,
        target_lineage=target.lineage_id,
        target_version=target.version_id,
    )
    raise UnrelatedVersionsError(
        f"Schema versions {source.version_id} and {target.version_id} are not on a "
        "common ancestor path. Deltas can only be translated within one lineage branch."
    )


def _walk(start: SchemaVersion, stop: SchemaVersion, direction: Direction) -> list[PathStep]:
    """Collect steps from start back towards stop, excluding stop.

    Raises:
        EvolveInvariantError: If the root is reached before stop.
    """
    steps: list[PathStep] = []
    version: SchemaVersion | None = start
    while version != stop:
        if version is None:
            raise EvolveInvariantError(
                f"Schema chain ended before reaching version {stop.version_id}."
            )
        steps.append(PathStep(version=version, direction=direction))
        version = version.prev
    return steps
