"""Pure meter and score arithmetic.

Every function returns a new Meter; the RoundSystem stores the result.
"""
from __future__ import annotations

from thaw.components.board import Board
from thaw.components.cell import CellState
from thaw.components.meter import Meter
from thaw.constants import HEAL_PER_POINT, METER_FLOOR


def fresh_meter(initial_time: float) -> Meter:
    return Meter(time=initial_time, max_time=initial_time)


def _settle(meter: Meter, time: float, floor: float) -> Meter:
    if time < floor:
        time = floor
    max_time = meter.max_time if meter.max_time >= time else time
    return Meter(time=time, max_time=max_time)


def decay(meter: Meter, elapsed_ms: float, coefficient: float, *, floor: float = METER_FLOOR) -> Meter:
    """Drain ``elapsed_ms * coefficient`` from the meter, never below ``floor``."""
    return _settle(meter, meter.time - elapsed_ms * coefficient, floor)


def heal(meter: Meter, amount: float, *, floor: float = METER_FLOOR) -> Meter:
    """Add ``amount`` (may be negative) under the same floor/high-water rules as decay."""
    return _settle(meter, meter.time + amount, floor)


def heal_amount(points: int, heal_per_point: float = HEAL_PER_POINT) -> float:
    return points * heal_per_point


def ease_toward(meter: Meter, target: float, fraction: float) -> Meter:
    """One recovery step: move ``fraction`` of the remaining distance, high-water mark follows."""
    time = meter.time + (target - meter.time) * fraction
    return Meter(time=time, max_time=time)


def is_lost(meter: Meter, *, floor: float = METER_FLOOR) -> bool:
    return meter.time <= floor


def win_points(board: Board) -> int:
    """Score earned for winning on ``board``: its CLEARED cell count."""
    return board.count(CellState.CLEARED)
