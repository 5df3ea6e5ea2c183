"""Round state resource owned by the RoundSystem."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from thaw.components.board import Board
from thaw.components.meter import Meter


class RoundPhase(Enum):
    """Phases of a round; pointer input is accepted only while RUNNING."""
    RUNNING = auto()
    WON_TRANSITION = auto()
    LOST_TRANSITION = auto()
    RESTARTING = auto()


class WonStage(Enum):
    FLASH = auto()    # won indicator shown
    SETTLE = auto()   # indicator cleared, still waiting


@dataclass
class RoundState:
    """Singleton component holding the board, meter, score and phase.

    Timed pauses are expressed as ``phase_deadline_ms`` against ``clock_ms``,
    the accumulated tick time; the tick handler advances them.
    """
    board: Board
    meter: Meter
    score: int = 0
    phase: RoundPhase = RoundPhase.RUNNING
    clock_ms: float = 0.0
    phase_deadline_ms: float = 0.0
    won_stage: Optional[WonStage] = None
    pending_board: Optional[Board] = None
    restart_steps_done: int = 0
    pointer_held: bool = False
    final_score: Optional[int] = None
    rounds_won: int = 0

    @property
    def accepts_input(self) -> bool:
        return self.phase is RoundPhase.RUNNING
