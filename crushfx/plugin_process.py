"""The effect chain and its tempo bookkeeping."""

from __future__ import annotations

from .bitcrusher import BitCrusher
from .calc import DEFAULT_SAMPLE_RATE, seconds_to_buffer
from .limiter import Limiter


class PluginProcess:
    """Owns the child processors, the mix levels and tempo derived sizes."""

    def __init__(self, channels: int, sample_rate: float = DEFAULT_SAMPLE_RATE) -> None:
        self.channels = channels
        self.sample_rate = sample_rate
        self.dry_mix = 0.5
        self.wet_mix = 0.5

        self.bit_crusher = BitCrusher(8, 0.5, 0.5, sample_rate)
        self.limiter = Limiter(10.0, 500.0, 0.6)

        self.tempo = 0.0
        self.time_sig_numerator = 0
        self.time_sig_denominator = 0
        self.full_measure_duration = 1.0
        self.full_measure_samples = 1
        self.half_measure_samples = 1
        self.beat_samples = 1
        self.sixteenth_samples = 1

    def set_tempo(self, tempo: float, numerator: int, denominator: int) -> bool:
        """Sync to a tempo in BPM and time signature; return whether it changed."""
        if (
            self.tempo == tempo
            and self.time_sig_numerator == numerator
            and self.time_sig_denominator == denominator
        ):
            return False
        if tempo <= 0:
            raise ValueError("tempo must be positive")
        if denominator <= 0:
            raise ValueError("time signature denominator must be positive")

        self.time_sig_numerator = numerator
        self.time_sig_denominator = denominator
        self.tempo = tempo

        self.full_measure_duration = (60.0 / tempo) * denominator
        self.full_measure_samples = seconds_to_buffer(
            self.full_measure_duration, self.sample_rate
        )
        self.beat_samples = self.full_measure_samples // denominator
        self.half_measure_samples = self.full_measure_samples // 2
        self.sixteenth_samples = self.full_measure_samples // 16
        return True