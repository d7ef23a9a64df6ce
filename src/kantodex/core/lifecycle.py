"""Seen/caught lifecycle for Pokedex entries.

A Pokemon is always in exactly one of three states::

    UNSEEN  (seen=False, caught=False)
    SEEN    (seen=True,  caught=False)
    CAUGHT  (seen=True,  caught=True)

Two transition policies exist side by side:

- ``toggle``: independent ``toggle_seen`` / ``toggle_caught`` buttons.
  Catching always marks the Pokemon as seen.
- ``cycle``: a single ``advance`` control stepping
  UNSEEN -> SEEN -> CAUGHT -> UNSEEN.

All transitions are pure; persisting the result is up to the caller.
"""

from enum import Enum


class DexStatus(str, Enum):
    """Tracking status of a single Pokemon."""

    UNSEEN = "unseen"
    SEEN = "seen"
    CAUGHT = "caught"

    @classmethod
    def from_flags(cls, seen: bool, caught: bool) -> "DexStatus":
        """Derive the status from stored flags.

        Any caught=True row counts as CAUGHT, including the invalid
        (seen=False, caught=True) pair written by direct API calls.
        """
        if caught:
            return cls.CAUGHT
        if seen:
            return cls.SEEN
        return cls.UNSEEN

    @property
    def seen(self) -> bool:
        return self is not DexStatus.UNSEEN

    @property
    def caught(self) -> bool:
        return self is DexStatus.CAUGHT

    def as_flags(self) -> dict[str, bool]:
        """Get the flag pair to persist for this status."""
        return {"seen": self.seen, "caught": self.caught}


class UnsupportedTransition(Exception):
    """Raised when a policy is asked for an operation it does not expose."""

    def __init__(self, policy: str, operation: str):
        super().__init__(f"Policy '{policy}' does not support '{operation}'")
        self.policy = policy
        self.operation = operation


class LifecyclePolicy:
    """Common interface for transition policies."""

    name: str = ""
    operations: tuple[str, ...] = ()

    def supports(self, operation: str) -> bool:
        return operation in self.operations

    def apply(self, operation: str, status: DexStatus) -> DexStatus:
        """Run a named transition on ``status``."""
        if not self.supports(operation):
            raise UnsupportedTransition(self.name, operation)
        return getattr(self, operation)(status)

    def apply_flags(self, operation: str, seen: bool, caught: bool) -> dict[str, bool]:
        """Run a named transition on raw flags and return the next flags."""
        return self.apply(operation, DexStatus.from_flags(seen, caught)).as_flags()


class TogglePolicy(LifecyclePolicy):
    """Independent seen/caught toggles."""

    name = "toggle"
    operations = ("toggle_seen", "toggle_caught")

    def toggle_seen(self, status: DexStatus) -> DexStatus:
        if status is DexStatus.UNSEEN:
            return DexStatus.SEEN
        # Un-seeing a caught Pokemon clears caught too
        return DexStatus.UNSEEN

    def toggle_caught(self, status: DexStatus) -> DexStatus:
        if status is DexStatus.CAUGHT:
            return DexStatus.SEEN
        return DexStatus.CAUGHT

    def apply_flags(self, operation: str, seen: bool, caught: bool) -> dict[str, bool]:
        # Releasing keeps the stored seen flag, even for a (seen=False, caught=True) row
        if operation == "toggle_caught" and caught:
            return DexStatus.from_flags(seen, False).as_flags()
        return super().apply_flags(operation, seen, caught)


class CyclePolicy(LifecyclePolicy):
    """Single control cycling through all three states."""

    name = "cycle"
    operations = ("advance",)

    _NEXT = {
        DexStatus.UNSEEN: DexStatus.SEEN,
        DexStatus.SEEN: DexStatus.CAUGHT,
        DexStatus.CAUGHT: DexStatus.UNSEEN,
    }

    def advance(self, status: DexStatus) -> DexStatus:
        return self._NEXT[status]


POLICIES: dict[str, LifecyclePolicy] = {
    TogglePolicy.name: TogglePolicy(),
    CyclePolicy.name: CyclePolicy(),
}


def get_policy(name: str) -> LifecyclePolicy:
    """Look up a transition policy by name."""
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown lifecycle policy '{name}', expected one of {sorted(POLICIES)}"
        ) from None
