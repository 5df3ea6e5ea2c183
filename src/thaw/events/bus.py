from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere else alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                            # payload: dt=float (seconds)
EVENT_VIEWPORT_RESIZED = "viewport_resized"    # payload: width, height


# ============================================================================
# RAW INPUT (window coordinates, y-up)
# ============================================================================
EVENT_MOUSE_PRESS_RAW = "mouse_press_raw"        # payload: x, y, button, modifiers
EVENT_MOUSE_MOVE_RAW = "mouse_move_raw"          # payload: x, y, dx, dy
EVENT_MOUSE_RELEASE_RAW = "mouse_release_raw"    # payload: x, y, button, modifiers


# ============================================================================
# POINTER INPUT (screen coordinates, y-down)
# ============================================================================
EVENT_POINTER_DOWN = "pointer_down"    # payload: x, y, viewport_width=float|None, viewport_height=float|None
EVENT_POINTER_MOVE = "pointer_move"    # payload: x, y, viewport_width=float|None, viewport_height=float|None
EVENT_POINTER_UP = "pointer_up"        # payload: x=float|None, y=float|None
EVENT_RESTART_REQUEST = "restart_request"  # payload: source=str


# ============================================================================
# BOARD
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"    # payload: board=Board, reason=str, index=int|None
EVENT_CELL_CLEARED = "cell_cleared"      # payload: index=int, row=int, col=int


# ============================================================================
# METER & SCORE
# ============================================================================
EVENT_METER_CHANGED = "meter_changed"    # payload: time=float, max_time=float, reason=str
EVENT_SCORE_CHANGED = "score_changed"    # payload: score=int, delta=int


# ============================================================================
# ROUND FLOW
# ============================================================================
EVENT_PHASE_CHANGED = "phase_changed"      # payload: previous_phase=RoundPhase, new_phase=RoundPhase
EVENT_ROUND_WON = "round_won"              # payload: points=int, score=int, healed=float
EVENT_ROUND_LOST = "round_lost"            # payload: score=int
EVENT_ROUND_STARTED = "round_started"      # payload: board=Board, reason=str


# ============================================================================
# RENDER SINK
# ============================================================================
EVENT_WON_INDICATOR = "won_indicator"      # payload: visible=bool
EVENT_LOST_INDICATOR = "lost_indicator"    # payload: visible=bool, score=int
