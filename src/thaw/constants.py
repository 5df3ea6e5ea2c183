# ============================================================================
# METER & SCORE
# ============================================================================
# The meter never drops below this value while a round is active; reaching it loses the round.
METER_FLOOR = 5.0
INITIAL_TIME = 100.0
# Meter units drained per elapsed millisecond while a round is running.
DECAY_COEFFICIENT = 0.01
# Meter units restored per cleared cell when a round is won.
HEAL_PER_POINT = 3.1

# Recovery after a loss: each step moves the meter this fraction of the remaining
# distance back to INITIAL_TIME, with a short pause between steps.
RESTART_EASE_STEPS = 100
RESTART_EASE_FRACTION = 0.1
RESTART_STEP_MS = 1.0


# ============================================================================
# TRANSITIONS
# ============================================================================
WON_FLASH_MS = 500.0    # "won" indicator visible
WON_SETTLE_MS = 500.0   # indicator cleared, input still frozen


# ============================================================================
# BOARD GENERATION
# ============================================================================
# Each cell draws an integer in [0, CELL_DRAW_MAX]; draws <= bias become EMPTY.
CELL_DRAW_MAX = 9
DEFAULT_PROBABILITY_BIAS = 3
# Bias climbs by one per rejected board, so CELL_DRAW_MAX + 1 attempts always suffice.
MAX_GENERATION_ATTEMPTS = 32


# ============================================================================
# LAYOUT
# ============================================================================
# Tiles of margin kept around the board along the sizing axis (one per side).
BOARD_MARGIN_TILES = 2


# ============================================================================
# WINDOW & COLOURS
# ============================================================================
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 900
WINDOW_TITLE = "Thaw"
UPDATE_RATE = 1 / 60

BACKGROUND_COLOR = (51, 51, 51)       # #333333
FROZEN_COLOR = (196, 222, 240)
FROZEN_EDGE_COLOR = (150, 184, 212)
EMPTY_COLOR = (0, 0, 0)
CLEARED_COLOR = (196, 40, 58)
CLEARED_RIBBON_COLOR = (236, 200, 72)
METER_COLOR = (92, 176, 232)
METER_LOW_COLOR = (226, 72, 62)
WON_OVERLAY_COLOR = (255, 255, 255, 110)
LOST_OVERLAY_COLOR = (20, 24, 40, 200)
TEXT_COLOR = (235, 235, 235)

METER_BAR_HEIGHT = 18
METER_MARGIN = 24
RESTART_BUTTON_SIZE = (220, 56)
