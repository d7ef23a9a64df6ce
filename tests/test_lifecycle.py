"""Tests for the seen/caught transition policies."""

import pytest

from kantodex.core.lifecycle import (
    CyclePolicy,
    DexStatus,
    TogglePolicy,
    UnsupportedTransition,
    get_policy,
)

ALL_FLAGS = [(False, False), (True, False), (True, True), (False, True)]


class TestDexStatus:
    @pytest.mark.parametrize(
        ("seen", "caught", "expected"),
        [
            (False, False, DexStatus.UNSEEN),
            (True, False, DexStatus.SEEN),
            (True, True, DexStatus.CAUGHT),
            (False, True, DexStatus.CAUGHT),
        ],
    )
    def test_from_flags(self, seen, caught, expected):
        assert DexStatus.from_flags(seen, caught) is expected

    def test_flags_never_caught_without_seen(self):
        for status in DexStatus:
            flags = status.as_flags()
            assert not (flags["caught"] and not flags["seen"])


class TestCyclePolicy:
    def test_example_sequence(self):
        policy = CyclePolicy()
        flags = policy.apply_flags("advance", seen=False, caught=False)
        assert flags == {"seen": True, "caught": False}
        flags = policy.apply_flags("advance", **flags)
        assert flags == {"seen": True, "caught": True}
        flags = policy.apply_flags("advance", **flags)
        assert flags == {"seen": False, "caught": False}

    def test_period_three_and_never_noop(self):
        policy = CyclePolicy()
        status = DexStatus.UNSEEN
        visited = []
        for _ in range(9):
            nxt = policy.advance(status)
            assert nxt is not status
            visited.append(nxt)
            status = nxt
        assert visited == [DexStatus.SEEN, DexStatus.CAUGHT, DexStatus.UNSEEN] * 3

    def test_invalid_stored_pair_advances_to_unseen(self):
        assert CyclePolicy().apply_flags("advance", seen=False, caught=True) == {
            "seen": False,
            "caught": False,
        }

    @pytest.mark.parametrize("operation", ["toggle_seen", "toggle_caught"])
    def test_toggles_not_exposed(self, operation):
        with pytest.raises(UnsupportedTransition):
            CyclePolicy().apply(operation, DexStatus.UNSEEN)


class TestTogglePolicy:
    @pytest.mark.parametrize(("seen", "caught"), [(False, False), (True, False)])
    def test_catching_always_marks_seen(self, seen, caught):
        flags = TogglePolicy().apply_flags("toggle_caught", seen=seen, caught=caught)
        assert flags == {"seen": True, "caught": True}

    def test_releasing_keeps_seen(self):
        flags = TogglePolicy().apply_flags("toggle_caught", seen=True, caught=True)
        assert flags == {"seen": True, "caught": False}

    def test_releasing_stored_unseen_catch_keeps_seen_false(self):
        flags = TogglePolicy().apply_flags("toggle_caught", seen=False, caught=True)
        assert flags == {"seen": False, "caught": False}

    def test_toggle_seen_flips_seen_only(self):
        policy = TogglePolicy()
        assert policy.apply_flags("toggle_seen", seen=False, caught=False) == {
            "seen": True,
            "caught": False,
        }
        assert policy.apply_flags("toggle_seen", seen=True, caught=False) == {
            "seen": False,
            "caught": False,
        }

    def test_unseeing_caught_clears_caught(self):
        flags = TogglePolicy().apply_flags("toggle_seen", seen=True, caught=True)
        assert flags == {"seen": False, "caught": False}

    @pytest.mark.parametrize(("seen", "caught"), ALL_FLAGS)
    @pytest.mark.parametrize("operation", ["toggle_seen", "toggle_caught"])
    def test_never_produces_invalid_pair(self, operation, seen, caught):
        flags = TogglePolicy().apply_flags(operation, seen=seen, caught=caught)
        assert not (flags["caught"] and not flags["seen"])

    def test_advance_not_exposed(self):
        with pytest.raises(UnsupportedTransition) as exc_info:
            TogglePolicy().apply("advance", DexStatus.SEEN)
        assert exc_info.value.policy == "toggle"


def test_get_policy_by_name():
    assert isinstance(get_policy("toggle"), TogglePolicy)
    assert isinstance(get_policy("cycle"), CyclePolicy)


def test_get_policy_unknown():
    with pytest.raises(ValueError, match="Unknown lifecycle policy"):
        get_policy("random")
