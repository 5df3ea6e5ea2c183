from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class Meter:
    """Depleting time resource.

    max_time is a high-water mark used to scale the meter bar; it only grows
    until a restart resets it together with time.
    """
    time: float
    max_time: float

    @property
    def fraction(self) -> float:
        if self.max_time <= 0:
            return 0.0
        return max(0.0, min(1.0, self.time / self.max_time))
