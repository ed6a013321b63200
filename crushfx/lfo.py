"""Low frequency oscillator reading from the shared sine table."""

from __future__ import annotations

from .calc import DEFAULT_SAMPLE_RATE, MIN_LFO_RATE, TABLE

TABLE_SIZE = len(TABLE)


class LFO:
    """A wave-table oscillator whose accumulator tracks its position."""

    def __init__(self, sample_rate: float = DEFAULT_SAMPLE_RATE) -> None:
        self.sample_rate = sample_rate
        self.rate = MIN_LFO_RATE
        self.accumulator = 0.0

    def peek(self) -> float:
        """Return the table value at the current position and advance."""
        sr_over_length = self.sample_rate / TABLE_SIZE
        if self.accumulator == 0.0:
            read_offset = 0
        else:
            read_offset = int(self.accumulator / sr_over_length) % TABLE_SIZE

        self.accumulator += self.rate
        if self.accumulator > self.sample_rate:
            self.accumulator -= self.sample_rate

        return TABLE[read_offset]