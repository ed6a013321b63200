"""Value conversion helpers and shared constants for the effect."""

from __future__ import annotations

import math

ID = 12345678
NAME = "__PLUGIN_NAME__"
VENDOR = "igorski.nl"

DEFAULT_SAMPLE_RATE = 44100.0

PI = 3.141592653589793
TWO_PI = PI * 2.0

# rate of oscillation in Hz
MAX_LFO_RATE = 10.0
MIN_LFO_RATE = 0.1

# one cycle of a sine wave, used by the oscillator
TABLE: tuple[float, ...] = (
    0, 0.0490677, 0.0980171, 0.14673, 0.19509, 0.24298, 0.290285, 0.33689,
    0.382683, 0.427555, 0.471397, 0.514103, 0.55557, 0.595699, 0.634393,
    0.671559, 0.707107, 0.740951, 0.77301, 0.803208, 0.83147, 0.857729,
    0.881921, 0.903989, 0.92388, 0.941544, 0.95694, 0.970031, 0.980785,
    0.989177, 0.995185, 0.998795, 1, 0.998795, 0.995185, 0.989177, 0.980785,
    0.970031, 0.95694, 0.941544, 0.92388, 0.903989, 0.881921, 0.857729,
    0.83147, 0.803208, 0.77301, 0.740951, 0.707107, 0.671559, 0.634393,
    0.595699, 0.55557, 0.514103, 0.471397, 0.427555, 0.382683, 0.33689,
    0.290285, 0.24298, 0.19509, 0.14673, 0.0980171, 0.0490677, 1.22465e-16,
    -0.0490677, -0.0980171, -0.14673, -0.19509, -0.24298, -0.290285,
    -0.33689, -0.382683, -0.427555, -0.471397, -0.514103, -0.55557,
    -0.595699, -0.634393, -0.671559, -0.707107, -0.740951, -0.77301,
    -0.803208, -0.83147, -0.857729, -0.881921, -0.903989, -0.92388,
    -0.941544, -0.95694, -0.970031, -0.980785, -0.989177, -0.995185,
    -0.998795, -1, -0.998795, -0.995185, -0.989177, -0.980785, -0.970031,
    -0.95694, -0.941544, -0.92388, -0.903989, -0.881921, -0.857729,
    -0.83147, -0.803208, -0.77301, -0.740951, -0.707107, -0.671559,
    -0.634393, -0.595699, -0.55557, -0.514103, -0.471397, -0.427555,
    -0.382683, -0.33689, -0.290285, -0.24298, -0.19509, -0.14673,
    -0.0980171, -0.0490677,
)


def seconds_to_buffer(seconds: float, sample_rate: float = DEFAULT_SAMPLE_RATE) -> int:
    """Convert a duration in seconds to a number of samples."""
    return int(seconds * sample_rate)


def milliseconds_to_buffer(
    milliseconds: float, sample_rate: float = DEFAULT_SAMPLE_RATE
) -> int:
    """Convert a duration in milliseconds to a number of samples."""
    return seconds_to_buffer(milliseconds / 1000.0, sample_rate)


def cap(value: float) -> float:
    """Clamp a value to the 0 .. 1 range."""
    return min(1.0, max(0.0, value))


def cap_sample(value: float) -> float:
    """Clamp a sample to the -1 .. 1 range."""
    return min(1.0, max(-1.0, value))


def round_to(value: float, value_to_round_to: float) -> float:
    """Round a value to the nearest multiple of another value."""
    rest = math.fmod(value, value_to_round_to)
    if rest <= value_to_round_to / 2:
        return value - rest
    return value + value_to_round_to - rest


def inverse_normalize(value: float) -> float:
    """Invert a normalized value so that 0 becomes 1 and 1 becomes 0."""
    return 1.0 - value


def scale(value: float, max_value: float, max_compare_value: float) -> float:
    """Scale a value with expected maximum onto another range."""
    ratio = max_compare_value / max_value
    return min(max_value, value) * ratio


def to_bool(value: float) -> bool:
    """Interpret a normalized value as an on/off switch."""
    return value >= 0.5