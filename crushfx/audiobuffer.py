"""Multi-channel audio buffers of equal length."""

from __future__ import annotations

from collections.abc import Iterator


class AudioBuffer:
    """Several channels of audio, each of the same length."""

    def __init__(self, channels: int, size: int) -> None:
        if channels < 0 or size < 0:
            raise ValueError("channel count and size must not be negative")
        self.channels = channels
        self.size = size
        self.loopable = False
        self._buffers = [[0.0] * size for _ in range(channels)]

    def channel(self, index: int) -> list[float]:
        """Return the mutable sample list of one channel."""
        if not 0 <= index < self.channels:
            raise IndexError(f"channel {index} out of range")
        return self._buffers[index]

    def __iter__(self) -> Iterator[list[float]]:
        return iter(self._buffers)

    @staticmethod
    def _read_positions(start: int, length: int, loop: bool) -> Iterator[int]:
        position = start
        while True:
            if position >= length:
                if not loop:
                    return
                position = 0
            yield position
            position += 1

    def merge(
        self,
        other: AudioBuffer | None,
        read_offset: int = 0,
        write_offset: int = 0,
        mix_volume: float = 1.0,
    ) -> int:
        """Mix another buffer into this one; return samples written per channel."""
        if other is None or write_offset >= self.size:
            return 0
        if read_offset < 0 or write_offset < 0:
            raise ValueError("offsets must not be negative")

        written = 0
        merged_channels = 0
        for target, source in zip(self._buffers, other._buffers):
            merged_channels += 1
            positions = self._read_positions(read_offset, other.size, other.loopable)
            for i, r in zip(range(write_offset, self.size), positions):
                target[i] += source[r] * mix_volume
                written += 1

        return written // merged_channels if merged_channels else written

    def silence(self) -> None:
        """Fill every channel with silence."""
        for buffer in self._buffers:
            buffer[:] = [0.0] * self.size

    def adjust_volume(self, amp: float) -> None:
        """Multiply every sample by the given amplitude."""
        for buffer in self._buffers:
            buffer[:] = [sample * amp for sample in buffer]

    def is_silent(self) -> bool:
        """Tell whether every sample is zero."""
        return all(sample == 0.0 for buffer in self._buffers for sample in buffer)

    def clone(self) -> AudioBuffer:
        """Return a new buffer holding a copy of the samples."""
        copy = AudioBuffer(self.channels, self.size)
        copy._buffers = [list(buffer) for buffer in self._buffers]
        return copy