"""Tunable round configuration.

Module-level values in :mod:`thaw.constants` provide the defaults; callers pass a
``RoundConfig`` (or ``RoundConfig().replace(...)``) to ``create_world`` and the
systems to override them.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum

from thaw.constants import (
    DECAY_COEFFICIENT,
    DEFAULT_PROBABILITY_BIAS,
    HEAL_PER_POINT,
    INITIAL_TIME,
    MAX_GENERATION_ATTEMPTS,
    METER_FLOOR,
    RESTART_EASE_FRACTION,
    RESTART_EASE_STEPS,
    RESTART_STEP_MS,
    WON_FLASH_MS,
    WON_SETTLE_MS,
)


class TileSizing(Enum):
    """Which board dimension the tile side is derived from.

    LONGER_AXIS divides the short viewport side by ``max(width, height) + 2``;
    SHORTER_AXIS divides by ``min(width, height) + 2`` and lets long boards
    overflow the viewport on non-square boards.
    """
    LONGER_AXIS = "longer_axis"
    SHORTER_AXIS = "shorter_axis"


@dataclass(frozen=True, slots=True)
class SizeRange:
    """Inclusive width/height bounds for generated boards."""

    min_width: int
    max_width: int
    min_height: int
    max_height: int

    def __post_init__(self) -> None:
        if self.min_width < 1 or self.min_height < 1:
            raise ValueError(f"size range must start at 1 or more, got {self}")
        if self.min_width > self.max_width or self.min_height > self.max_height:
            raise ValueError(f"size range is empty: {self}")

    @classmethod
    def square(cls, low: int, high: int) -> "SizeRange":
        return cls(low, high, low, high)


SQUARE_SMALL = SizeRange.square(3, 5)
WIDE_RECT = SizeRange(min_width=3, max_width=9, min_height=3, max_height=6)


@dataclass(frozen=True, slots=True)
class RoundConfig:
    size_range: SizeRange = SQUARE_SMALL
    probability_bias: int = DEFAULT_PROBABILITY_BIAS
    max_generation_attempts: int = MAX_GENERATION_ATTEMPTS
    tile_sizing: TileSizing = TileSizing.LONGER_AXIS
    initial_time: float = INITIAL_TIME
    meter_floor: float = METER_FLOOR
    decay_coefficient: float = DECAY_COEFFICIENT
    heal_per_point: float = HEAL_PER_POINT
    won_flash_ms: float = WON_FLASH_MS
    won_settle_ms: float = WON_SETTLE_MS
    restart_ease_steps: int = RESTART_EASE_STEPS
    restart_ease_fraction: float = RESTART_EASE_FRACTION
    restart_step_ms: float = RESTART_STEP_MS

    def __post_init__(self) -> None:
        if self.probability_bias < 0:
            raise ValueError("probability_bias must be >= 0")
        if self.max_generation_attempts < 1:
            raise ValueError("max_generation_attempts must be >= 1")
        if self.initial_time <= self.meter_floor:
            raise ValueError("initial_time must be above meter_floor")
        if self.decay_coefficient < 0:
            raise ValueError("decay_coefficient must be >= 0")
        if self.won_flash_ms < 0 or self.won_settle_ms < 0 or self.restart_step_ms < 0:
            raise ValueError("transition pauses must be >= 0")
        if self.restart_ease_steps < 0:
            raise ValueError("restart_ease_steps must be >= 0")
        if not 0.0 < self.restart_ease_fraction <= 1.0:
            raise ValueError("restart_ease_fraction must be in (0, 1]")

    def replace(self, **changes) -> "RoundConfig":
        return dataclasses.replace(self, **changes)
