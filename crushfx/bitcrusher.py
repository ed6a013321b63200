"""Bit depth reduction with an optional oscillator sweeping the resolution."""

from __future__ import annotations

import math
from collections.abc import MutableSequence

from .calc import DEFAULT_SAMPLE_RATE, MAX_LFO_RATE, MIN_LFO_RATE, cap, scale
from .lfo import LFO

SHRT_MAX = 32767


def _to_short(value: float) -> int:
    """Truncate a float to a signed 16-bit integer, wrapping on overflow."""
    return ((int(value) + 32768) & 0xFFFF) - 32768


class BitCrusher:
    """Reduces the resolution of a signal to between 1 and 16 bits."""

    def __init__(
        self,
        amount: float,
        input_mix: float,
        output_mix: float,
        sample_rate: float = DEFAULT_SAMPLE_RATE,
    ) -> None:
        self.lfo = LFO(sample_rate)
        self.has_lfo = False
        self._lfo_depth = 0.0
        self._lfo_range = 0.0
        self._lfo_max = 0.0
        self._lfo_min = 0.0
        self._bits = 16
        self._amount = amount
        self._temp_amount = amount
        self.amount = amount
        self.input_mix = input_mix
        self.output_mix = output_mix

    @property
    def bits(self) -> int:
        """The current resolution in bits."""
        return self._bits

    @property
    def amount(self) -> float:
        """The crush amount, where 0 is 1 bit and 1 is 16 bits."""
        return self._amount

    @amount.setter
    def amount(self, value: float) -> None:
        temp_ratio = self._temp_amount / max(0.000000001, self._amount)
        self._amount = value
        # keep the relative offset of a moving resolution in place
        self._temp_amount = value * temp_ratio if self.has_lfo else value
        self._cache_lfo()
        self._calc_bits()

    @property
    def input_mix(self) -> float:
        return self._input_mix

    @input_mix.setter
    def input_mix(self, value: float) -> None:
        self._input_mix = cap(value)

    @property
    def output_mix(self) -> float:
        return self._output_mix

    @output_mix.setter
    def output_mix(self, value: float) -> None:
        self._output_mix = cap(value)

    @property
    def lfo_depth(self) -> float:
        return self._lfo_depth

    def set_lfo(self, rate_percentage: float, depth: float) -> None:
        """Enable the oscillator for a rate above 0, disable it otherwise."""
        was_enabled = self.has_lfo
        enabled = rate_percentage > 0.0
        self.has_lfo = enabled

        had_change = was_enabled != enabled or self._lfo_depth != depth

        if enabled:
            self.lfo.rate = MIN_LFO_RATE + rate_percentage * (MAX_LFO_RATE - MIN_LFO_RATE)

        if not enabled and was_enabled:
            self._temp_amount = self._amount
            self._calc_bits()

        if had_change:
            self._lfo_depth = depth
            self._cache_lfo()

    def process(self, samples: MutableSequence[float]) -> MutableSequence[float]:
        """Crush the samples in place and return the same sequence."""
        if self._bits == 16 and not self.has_lfo:
            return samples

        prevent_offset = -1  # an arithmetic shift of -1 stays -1
        for i, sample in enumerate(samples):
            value = _to_short(sample * self._input_mix * SHRT_MAX)
            value &= -1 << (16 - self._bits)
            samples[i] = ((value + prevent_offset) * self._output_mix) / SHRT_MAX

            if self.has_lfo:
                # make the bipolar waveform unipolar
                lfo_value = self.lfo.peek() * 0.5 + 0.5
                self._temp_amount = min(
                    self._lfo_max, self._lfo_min + self._lfo_range * lfo_value
                )
                self._calc_bits()
        return samples

    def _cache_lfo(self) -> None:
        self._lfo_range = self._amount * self._lfo_depth
        self._lfo_max = min(1.0, self._amount + self._lfo_range / 2.0)
        self._lfo_min = max(0.0, self._amount - self._lfo_range / 2.0)

    def _calc_bits(self) -> None:
        self._bits = int(math.floor(scale(self._temp_amount, 1, 15))) + 1