"""Parameter identifiers, their ranges, display text and the stored component state."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum


class ParamId(IntEnum):
    """Identifiers of every automatable control."""

    BYPASS = 0
    BIT_DEPTH = 1
    BIT_CRUSH_LFO = 2
    BIT_CRUSH_LFO_DEPTH = 3
    WET_MIX = 4
    DRY_MIX = 5


@dataclass(frozen=True)
class Parameter:
    """A ranged parameter; hosts exchange it in normalized 0 .. 1 form."""

    tag: ParamId
    title: str
    units: str
    minimum: float
    maximum: float
    default: float
    step_count: int = 0

    def to_plain(self, normalized: float) -> float:
        """Map a normalized value onto this parameter's plain range."""
        return self.minimum + normalized * (self.maximum - self.minimum)


PARAMETERS: dict[ParamId, Parameter] = {
    parameter.tag: parameter
    for parameter in (
        Parameter(ParamId.BYPASS, "Bypass", "", 0.0, 1.0, 0.0, step_count=1),
        Parameter(ParamId.BIT_DEPTH, "Resolution", "%", 0.0, 1.0, 1.0),
        Parameter(ParamId.BIT_CRUSH_LFO, "Bit crush LFO", "Hz", 0.0, 10.0, 0.0),
        Parameter(ParamId.BIT_CRUSH_LFO_DEPTH, "Bit crush LFO depth", "%", 0.0, 1.0, 0.0),
        Parameter(ParamId.WET_MIX, "Wet mix", "%", 0.0, 1.0, 1.0),
        Parameter(ParamId.DRY_MIX, "Dry mix", "%", 0.0, 1.0, 0.0),
    )
}

_PERCENT_TAGS = frozenset(
    {ParamId.BIT_CRUSH_LFO_DEPTH, ParamId.WET_MIX, ParamId.DRY_MIX}
)


def format_value(tag: int, normalized: float) -> str:
    """Return the display text of a parameter at a normalized value."""
    try:
        param_id = ParamId(tag)
    except ValueError:
        raise ValueError(f"unknown parameter {tag}") from None

    if param_id is ParamId.BIT_DEPTH:
        return f"{int(15 * normalized) + 1} Bits"
    if param_id is ParamId.BIT_CRUSH_LFO:
        plain = PARAMETERS[param_id].to_plain(normalized)
        return f"{plain:.2f} Hz"
    if param_id in _PERCENT_TAGS:
        return "%.2d %%" % int(normalized * 100.0)
    raise ValueError(f"parameter {param_id.name} has no display format")


@dataclass
class ComponentState:
    """The persisted model values of the processor, all normalized."""

    bypass: bool = False
    bit_depth: float = 1.0
    bit_crush_lfo: float = 0.0
    bit_crush_lfo_depth: float = 0.0
    wet_mix: float = 1.0
    dry_mix: float = 0.0


_STATE_FORMAT = struct.Struct("<i5f")


def encode_state(state: ComponentState) -> bytes:
    """Serialize a state as a little-endian int32 bypass flag and five float32s."""
    return _STATE_FORMAT.pack(
        1 if state.bypass else 0,
        state.bit_depth,
        state.bit_crush_lfo,
        state.bit_crush_lfo_depth,
        state.wet_mix,
        state.dry_mix,
    )


def decode_state(data: bytes) -> ComponentState:
    """Read a state written by encode_state; trailing bytes are ignored."""
    if len(data) < _STATE_FORMAT.size:
        raise ValueError(
            f"state needs {_STATE_FORMAT.size} bytes, got {len(data)}"
        )
    bypass, bit_depth, lfo, lfo_depth, wet, dry = _STATE_FORMAT.unpack_from(data)
    return ComponentState(
        bypass=bypass > 0,
        bit_depth=bit_depth,
        bit_crush_lfo=lfo,
        bit_crush_lfo_depth=lfo_depth,
        wet_mix=wet,
        dry_mix=dry,
    )