import pytest

from thaw.components.meter import Meter
from thaw.constants import METER_FLOOR
from thaw.systems.meter_ledger import (
    decay,
    ease_toward,
    fresh_meter,
    heal,
    heal_amount,
    is_lost,
    win_points,
)
from tests.helpers import board_from_rows


def test_decay_to_floor_loses_the_round():
    meter = decay(Meter(time=10, max_time=10), 600, 0.01)
    assert meter.time == pytest.approx(5.0)
    assert is_lost(meter)


def test_decay_never_goes_below_floor():
    meter = decay(Meter(time=10, max_time=10), 100_000, 0.01)
    assert meter.time == METER_FLOOR
    assert meter.max_time == 10


def test_partial_decay_keeps_high_water_mark():
    meter = decay(Meter(time=50, max_time=80), 1000, 0.01)
    assert meter.time == pytest.approx(40.0)
    assert meter.max_time == 80
    assert not is_lost(meter)


def test_heal_raises_high_water_mark():
    meter = heal(Meter(time=70, max_time=80), 15.5)
    assert meter.time == pytest.approx(85.5)
    assert meter.max_time == pytest.approx(85.5)


def test_negative_heal_behaves_like_decay():
    assert heal(Meter(time=20, max_time=20), -6).time == pytest.approx(decay(Meter(time=20, max_time=20), 600, 0.01).time)
    assert heal(Meter(time=6, max_time=20), -100).time == METER_FLOOR


def test_is_lost_only_at_floor():
    assert not is_lost(Meter(time=5.0001, max_time=10))
    assert is_lost(Meter(time=5.0, max_time=10))


def test_meter_never_observed_below_floor_across_mixed_updates():
    meter = fresh_meter(12.0)
    for step in range(40):
        meter = decay(meter, 170, 0.01) if step % 3 else heal(meter, -2.5)
        assert meter.time >= METER_FLOOR
    assert is_lost(meter)


def test_heal_amount_is_points_times_constant():
    assert heal_amount(5) == pytest.approx(15.5)
    assert heal_amount(4, heal_per_point=2.0) == pytest.approx(8.0)


def test_ease_toward_moves_a_tenth_and_tracks_max():
    meter = ease_toward(Meter(time=5, max_time=90), 100, 0.1)
    assert meter.time == pytest.approx(14.5)
    assert meter.max_time == meter.time


def test_hundred_ease_steps_converge_exponentially():
    meter = Meter(time=5, max_time=5)
    times = []
    for _ in range(100):
        meter = ease_toward(meter, 100, 0.1)
        times.append(meter.time)
    assert times == sorted(times)
    assert meter.time == pytest.approx(100 - 95 * 0.9 ** 100)
    assert meter.max_time == meter.time


def test_win_points_counts_cleared_cells():
    assert win_points(board_from_rows("#x#", "xxx", "#x#")) == 5
    assert win_points(board_from_rows("##", "##")) == 0
