"""Settings of a peak limiter with its derived coefficients."""

from __future__ import annotations


class Limiter:
    """Holds attack, release and threshold and the coefficients they yield."""

    def __init__(
        self, attack: float = 0.15, release: float = 0.50, threshold: float = 0.60
    ) -> None:
        self._attack = float(attack)
        self._release = float(release)
        self._threshold = float(threshold)
        self.trim_setting = 0.60
        self.knee = 0.40
        self.gain = 1.0
        self._recalculate()

    @property
    def attack(self) -> float:
        return self._attack

    @attack.setter
    def attack(self, value: float) -> None:
        self._attack = float(value)
        self._recalculate()

    @property
    def release(self) -> float:
        return self._release

    @release.setter
    def release(self, value: float) -> None:
        self._release = float(value)
        self._recalculate()

    @property
    def threshold(self) -> float:
        return self._threshold

    @threshold.setter
    def threshold(self, value: float) -> None:
        self._threshold = float(value)
        self._recalculate()

    def linear_gain_reduction(self) -> float:
        """Return the current gain reduction as a linear factor."""
        return 1.0 / self.gain if self.gain > 1.0 else 1.0

    def _recalculate(self) -> None:
        if self.knee > 0.5:
            # soft knee
            self.thresh = 10.0 ** (1.0 - 2.0 * self._threshold)
        else:
            # hard knee
            self.thresh = 10.0 ** (2.0 * self._threshold - 2.0)
        self.trim = 10.0 ** (2.0 * self.trim_setting - 1.0)
        self.att = 10.0 ** (-2.0 * self._attack)
        self.rel = 10.0 ** (-2.0 - 3.0 * self._release)