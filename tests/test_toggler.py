from touchbar_toggler.commands import LAUNCH_FAILED, disable_steps, enable_steps
from touchbar_toggler.toggler import ERROR_TITLE, ToggleContext, TouchBarToggler

from fakes import FakeRunner, FakeSurface


def make_toggler(statuses=None):
    runner = FakeRunner(statuses)
    surface = FakeSurface()
    return TouchBarToggler(ToggleContext(), surface, runner), runner, surface


def test_starts_enabled():
    context = ToggleContext()
    assert context.touchbar_enabled is True
    assert context.last_press is None


def test_first_toggle_disables():
    toggler, runner, surface = make_toggler()
    result = toggler.toggle()

    assert result.ok
    assert result.enabled is False
    assert toggler.context.touchbar_enabled is False
    assert runner.ran == disable_steps()
    assert surface.states == [False]
    assert surface.alerts == []


def test_round_trip_issues_sequences_in_order():
    toggler, runner, surface = make_toggler()
    for _ in range(3):
        toggler.toggle()

    assert runner.ran == disable_steps() + enable_steps() + disable_steps()
    assert surface.states == [False, True, False]

    toggler.toggle()
    assert toggler.context.touchbar_enabled is True


def test_missing_preference_key_is_not_an_error():
    delete = enable_steps()[0]
    toggler, runner, surface = make_toggler({tuple(delete.argv): 1})
    toggler.context.touchbar_enabled = False

    result = toggler.toggle()
    assert result.ok
    assert surface.alerts == []
    assert surface.states == [True]


def test_failed_step_continues_and_alerts_once():
    unload = disable_steps()[1]
    toggler, runner, surface = make_toggler({tuple(unload.argv): 5})

    result = toggler.toggle()

    assert runner.ran == disable_steps()
    assert result.failed == [unload]
    assert [title for title, _ in surface.alerts] == [ERROR_TITLE]
    assert surface.states == []


def test_failure_does_not_roll_back_state():
    statuses = {tuple(s.argv): LAUNCH_FAILED for s in disable_steps()}
    toggler, runner, surface = make_toggler(statuses)

    result = toggler.toggle()

    assert len(result.failed) == len(disable_steps())
    assert toggler.context.touchbar_enabled is False
    assert len(surface.alerts) == 1

    toggler.toggle()
    assert toggler.context.touchbar_enabled is True
    assert runner.ran[len(disable_steps()):] == enable_steps()


def test_last_press_is_optional_float():
    from typing import Optional, get_type_hints

    assert get_type_hints(ToggleContext)["last_press"] == Optional[float]
