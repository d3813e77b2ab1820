import pytest

from proxplex.complex import ProximityComplex
from proxplex.controller import (
    DECREASE, INCREASE, KEY_COMMANDS, RotationState, ThresholdController,
)


@pytest.fixture
def cx(corner_points):
    return ProximityComplex.from_points(corner_points)


def test_step_up_and_down(cx):
    ctl = ThresholdController(cx, step=0.5)
    assert ctl.increase() == pytest.approx(0.5)
    assert ctl.increase() == pytest.approx(1.0)
    assert ctl.increase() == pytest.approx(1.5)
    assert cx.current_threshold() == pytest.approx(1.5)
    assert cx.triangle_count() == 4
    assert ctl.decrease() == pytest.approx(1.0)
    assert cx.edge_count() == 0  # 1.0 не менше за 1.0


def test_clamped_to_range(cx):
    ctl = ThresholdController(cx, step=0.5)
    assert ctl.decrease() == 0.0
    assert cx.current_threshold() == 0.0

    # верхня межа: max distance + step
    assert ctl.upper == pytest.approx(2 ** 0.5 + 0.5)
    for _ in range(10):
        ctl.increase()
    assert cx.current_threshold() == pytest.approx(ctl.upper)
    assert cx.edge_count() == 6


def test_explicit_bounds(cx):
    ctl = ThresholdController(cx, step=1.0, lower=0.2, upper=1.2)
    assert ctl.decrease() == 0.2
    assert ctl.increase() == pytest.approx(1.2)
    with pytest.raises(ValueError):
        ThresholdController(cx, lower=1.0, upper=0.5)
    with pytest.raises(ValueError):
        ThresholdController(cx, step=0.0)


def test_dispatch_and_keys(cx):
    ctl = ThresholdController(cx, step=0.25)
    assert ctl.dispatch(INCREASE) == pytest.approx(0.25)
    assert ctl.dispatch(DECREASE) == pytest.approx(0.0)
    assert ctl.handle_key("Right") == pytest.approx(0.25)
    assert ctl.handle_key("Left") == pytest.approx(0.0)
    assert ctl.handle_key("space") is None
    assert KEY_COMMANDS["Up"] == INCREASE
    with pytest.raises(ValueError):
        ctl.dispatch("reset")


def test_rotation_follows_drag():
    rot = RotationState(sensitivity=0.01)
    rot.move(50, 50)
    assert rot.angles == (0.0, 0.0)  # без натиснутої кнопки нічого не міняється

    rot.press(100, 100)
    assert rot.dragging
    rot.move(150, 80)
    assert rot.angles == pytest.approx((0.5, -0.2))
    rot.move(110, 100)
    assert rot.angles == pytest.approx((0.1, 0.0))
    rot.release()
    assert not rot.dragging

    rot.move(500, 500)
    assert rot.angles == pytest.approx((0.1, 0.0))

    # новий drag стартує з поточних кутів
    rot.press(0, 0)
    rot.move(100, 0)
    assert rot.angles == pytest.approx((1.1, 0.0))


def test_keys_ignored_while_editing(cx):
    ctl = ThresholdController(cx, step=0.25)
    assert ctl.handle_key("Right", editing=True) is None
    assert cx.current_threshold() == 0.0
    assert ctl.handle_key("Right") == pytest.approx(0.25)
