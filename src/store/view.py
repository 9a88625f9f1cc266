"""Per-version views over a shared ledger.

A view pairs a ledger handle with a target schema version. Writes append
deltas tagged with the view's version; reads replay the whole ledger,
translating each delta from the version it was recorded in.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.errors import EvolveArgumentError, EvolveInvariantError, InvalidFieldKeyError
from core.logging_config import get_logger
from core.types import Delta, NoOpDelta, SetDelta
from schema.translator import translate_delta
from schema.version import SchemaVersion
from store.ledger import Ledger

_LOGGER = get_logger(__name__)


class View:
    """Read/write lens on one instance through one schema version.

    Views hold no state of their own; any number of them may share a ledger.
    """

    def __init__(self, ledger: Ledger, version: SchemaVersion) -> None:
        if not isinstance(ledger, Ledger):
            raise EvolveArgumentError(
                f"View requires a Ledger handle, got {type(ledger).__name__}."
            )
        self._ledger = ledger
        self._version = version

    @property
    def ledger(self) -> Ledger:
        """Shared ledger backing this view."""
        return self._ledger

    @property
    def version(self) -> SchemaVersion:
        """Schema version whose field namespace this view exposes."""
        return self._version

    def get(self, field: str, default: Any = None) -> Any:
        """Return the current value of a field, or default when absent.

        Raises:
            InvalidFieldKeyError: If field is not a string.
        """
        _require_field_key(field)
        return self.as_dict().get(field, default)

    def set(self, field: str, value: Any) -> None:
        """Record a write of one field through this view's version.

        Raises:
            InvalidFieldKeyError: If field is not a string.
        """
        _require_field_key(field)
        position = self._ledger.append(
            SetDelta(version=self._version, field=field, value=value)
        )
        _LOGGER.debug(
            "delta_appended",
            version_id=self._version.version_id,
            field=field,
            position=position,
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the full field state as seen through this version."""
        return render_ledger(self._ledger, self._version)

    def __contains__(self, field: object) -> bool:
        return isinstance(field, str) and field in self.as_dict()

    def __repr__(self) -> str:
        return f"View(version_id={self._version.version_id}, deltas={len(self._ledger)})"


def render_ledger(ledger: Ledger, version: SchemaVersion) -> dict[str, Any]:
    """Fold a ledger into field state expressed in one version.

    Every delta is translated from its originally recorded version on each
    call; nothing is memoized between reads.

    Args:
        ledger: Ledger to replay; a snapshot is taken at call time.
        version: Version to express the state in.

    Returns:
        Mapping of field name to latest value.

    Raises:
        UnrelatedVersionsError: If a delta was recorded on another branch.
    """
    state: dict[str, Any] = {}
    deltas = ledger.snapshot()
    for delta in deltas:
        _apply_delta(state, translate_delta(delta, version))
    _LOGGER.debug(
        "ledger_rendered",
        version_id=version.version_id,
        delta_count=len(deltas),
        field_count=len(state),
    )
    return state


def new_instance(version: SchemaVersion, initial: Mapping[str, Any] | None = None) -> View:
    """Create an empty ledger and a view on it, then write initial values.

    Args:
        version: Version defining the instance.
        initial: Optional field values, written in mapping iteration order.

    Returns:
        View bound to ``version``.

    Raises:
        EvolveArgumentError: If initial is not a mapping.
        InvalidFieldKeyError: If any initial key is not a string.
    """
    if initial is not None and not isinstance(initial, Mapping):
        raise EvolveArgumentError(
            f"Initial state must be a mapping, got {type(initial).__name__}."
        )
    view = View(Ledger(), version)
    for field, value in (initial or {}).items():
        view.set(field, value)
    _LOGGER.info(
        "instance_created",
        version_id=version.version_id,
        initial_fields=len(initial or {}),
    )
    return view


def view_instance(existing: View, version: SchemaVersion) -> View:
    """Return a view over the same ledger as an existing view.

    The ledger is shared by reference; nothing is copied or translated.

    Raises:
        EvolveArgumentError: If existing is not a view.
    """
    if not isinstance(existing, View):
        raise EvolveArgumentError(
            f"view_instance expects a View, got {type(existing).__name__}. "
            "Pass a view returned by new_instance or view_instance."
        )
    _LOGGER.debug(
        "view_created",
        source_version_id=existing.version.version_id,
        version_id=version.version_id,
    )
    return View(existing.ledger, version)


def _apply_delta(state: dict[str, Any], delta: Delta) -> None:
    if isinstance(delta, SetDelta):
        state[delta.field] = delta.value
    elif not isinstance(delta, NoOpDelta):
        raise EvolveInvariantError(f"Unknown delta type: {type(delta).__name__}.")


def _require_field_key(field: object) -> None:
    """Validate a field key passed by a caller.

    Raises:
        InvalidFieldKeyError: If field is not a string.
    """
    if not isinstance(field, str):
        raise InvalidFieldKeyError(
            f"Field keys must be strings, got {type(field).__name__}."
        )
