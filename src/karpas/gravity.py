"""Fixed-interval gravity timer."""

from __future__ import annotations

from .config import GRAVITY_SECONDS


class GravityClock:
    """Accumulate elapsed time and fire once per ``threshold`` seconds.

    When the accumulated time reaches the threshold the clock fires a single
    time and starts again from zero.  Any time beyond the threshold is
    discarded, so a long frame never produces more than one descent.
    """

    def __init__(self, threshold: float = GRAVITY_SECONDS) -> None:
        if threshold <= 0:
            raise ValueError("Gravity threshold must be positive")
        self.threshold = threshold
        self.elapsed = 0.0

    def advance(self, delta: float) -> bool:
        """Add ``delta`` seconds and return ``True`` if the clock fired."""

        if delta < 0:
            raise ValueError("Time cannot run backwards")
        self.elapsed += delta
        if self.elapsed < self.threshold:
            return False
        self.elapsed = 0.0
        return True

    def reset(self) -> None:
        self.elapsed = 0.0
