from enum import Enum


class CellState(Enum):
    """State of a single grid position.

    FROZEN cells never change and do not block completion. EMPTY cells are the
    only ones the player can act on; acting on one turns it CLEARED.
    """
    FROZEN = "frozen"
    CLEARED = "cleared"
    EMPTY = "empty"
