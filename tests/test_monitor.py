import pytest

from touchbar_toggler.monitor import DoublePressDetector, ModifierEvent
from touchbar_toggler.toggler import ToggleContext

from fakes import cmd_event


@pytest.fixture
def fired():
    return []


@pytest.fixture
def detector(fired):
    return DoublePressDetector(ToggleContext(), lambda: fired.append(True), threshold=0.3)


def feed_times(detector, times):
    for t in times:
        detector.feed(cmd_event(t))


def test_two_quick_presses_fire_once(detector, fired):
    feed_times(detector, [0.0, 0.2])
    assert len(fired) == 1
    assert detector.context.last_press is None


def test_slow_presses_never_fire(detector, fired):
    feed_times(detector, [0.0, 0.5, 1.0, 1.3, 5.0])
    assert fired == []
    assert detector.context.last_press == 5.0


def test_gap_equal_to_threshold_does_not_fire(fired):
    detector = DoublePressDetector(ToggleContext(), lambda: fired.append(True), threshold=0.25)
    feed_times(detector, [1.0, 1.25])
    assert fired == []
    assert detector.context.last_press == 1.25


def test_third_quick_press_starts_new_window(detector, fired):
    feed_times(detector, [0.0, 0.1, 0.2])
    assert len(fired) == 1
    assert detector.context.last_press == 0.2

    detector.feed(cmd_event(0.35))
    assert len(fired) == 2


def test_four_quick_presses_fire_twice(detector, fired):
    feed_times(detector, [0.0, 0.1, 0.2, 0.3])
    assert len(fired) == 2


def test_events_without_command_are_ignored(detector, fired):
    detector.feed(cmd_event(0.0))
    assert detector.feed(ModifierEvent(0.05, frozenset())) is False
    assert detector.feed(ModifierEvent(0.1, frozenset({"shift"}))) is False
    assert fired == []
    assert detector.context.last_press == 0.0

    assert detector.feed(cmd_event(0.2)) is True
    assert len(fired) == 1


def test_command_with_other_modifiers_counts(detector, fired):
    feed_times(detector, [0.0])
    detector.feed(cmd_event(0.1, "shift"))
    assert len(fired) == 1


def test_stale_press_is_replaced(detector, fired):
    feed_times(detector, [0.0, 0.4, 0.6])
    assert len(fired) == 1
