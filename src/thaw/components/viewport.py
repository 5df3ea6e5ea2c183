from dataclasses import dataclass

@dataclass(slots=True)
class Viewport:
    """Current drawable area in pixels; updated on window resize."""
    width: float
    height: float

    def is_usable(self) -> bool:
        return self.width > 0 and self.height > 0
