"""The processor side of the effect: model values, state, buses and bypass."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, MutableSequence, Sequence
from enum import IntEnum

from .calc import DEFAULT_SAMPLE_RATE
from .parameters import ComponentState, ParamId, decode_state, encode_state
from .plugin_process import PluginProcess


class SampleSize(IntEnum):
    """Sample precisions a host may ask the processor to handle."""

    SAMPLE_32 = 0
    SAMPLE_64 = 1


_MODEL_FIELDS: dict[ParamId, str] = {
    ParamId.BIT_DEPTH: "bit_depth",
    ParamId.BIT_CRUSH_LFO: "bit_crush_lfo",
    ParamId.BIT_CRUSH_LFO_DEPTH: "bit_crush_lfo_depth",
    ParamId.WET_MIX: "wet_mix",
    ParamId.DRY_MIX: "dry_mix",
}

MONO = 1
STEREO = 2


class Plugin:
    """Holds the normalized model and forwards it onto the effect chain."""

    def __init__(self) -> None:
        self.model = ComponentState()
        self.process_mode = -1  # not initialized
        self.sample_rate = DEFAULT_SAMPLE_RATE
        self.process = PluginProcess(2, self.sample_rate)
        self.input_channels = STEREO
        self.output_channels = STEREO

    @property
    def bypassed(self) -> bool:
        """Whether the effect passes its input through unchanged."""
        return self.model.bypass

    def setup_processing(self, sample_rate: float, process_mode: int) -> None:
        """Prepare for processing at the given rate, recreating the chain."""
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self.process_mode = process_mode
        self.sample_rate = sample_rate
        self.process = PluginProcess(6, sample_rate)
        self._sync_model()

    def apply_parameter_changes(self, changes: Mapping[int, Sequence[float]]) -> None:
        """Apply the last queued value of each changed parameter."""
        for tag, points in changes.items():
            if not points:
                continue
            value = float(points[-1])
            try:
                param_id = ParamId(tag)
            except ValueError:
                param_id = None

            if param_id is ParamId.BYPASS:
                self.model = dataclasses.replace(self.model, bypass=value > 0.5)
            elif param_id is not None:
                self.model = dataclasses.replace(
                    self.model, **{_MODEL_FIELDS[param_id]: value}
                )
            self._sync_model()

    def get_state(self) -> bytes:
        """Serialize the model values."""
        return encode_state(self.model)

    def set_state(self, data: bytes) -> None:
        """Load model values written by get_state and apply them."""
        self.model = decode_state(data)
        self._sync_model()

    def can_process_sample_size(self, size: int) -> bool:
        """Tell whether samples of the given precision are supported."""
        return size in (SampleSize.SAMPLE_32, SampleSize.SAMPLE_64)

    def set_bus_arrangements(self, inputs: Sequence[int], outputs: Sequence[int]) -> bool:
        """Negotiate channel counts per bus; return whether the request was met."""
        if len(inputs) != 1 or len(outputs) != 1:
            return False

        wanted_in, wanted_out = inputs[0], outputs[0]
        if wanted_in == MONO and wanted_out == MONO:
            if self.input_channels != wanted_in:
                self.input_channels = wanted_in
                self.output_channels = wanted_out
            return True

        if wanted_in == STEREO and wanted_out == STEREO:
            self.input_channels = wanted_in
            self.output_channels = wanted_out
            return True

        # anything other than 1->1 or 2->2 falls back onto stereo
        if self.input_channels != STEREO:
            self.input_channels = STEREO
            self.output_channels = STEREO
        return False

    def bypass(
        self,
        inputs: Sequence[Sequence[float]],
        outputs: Sequence[MutableSequence[float]],
        silent_input: bool,
    ) -> int:
        """Copy input channels into the outputs; return the output silence flags."""
        silent_output = False
        for source, target in zip(inputs, outputs):
            if source is not target:
                length = min(len(source), len(target))
                target[:length] = source[:length]
            silent_output = silent_input
        return (1 << len(outputs)) - 1 if silent_output else 0

    def _sync_model(self) -> None:
        crusher = self.process.bit_crusher
        crusher.amount = self.model.bit_depth
        crusher.set_lfo(self.model.bit_crush_lfo, self.model.bit_crush_lfo_depth)
        self.process.dry_mix = self.model.dry_mix
        self.process.wet_mix = self.model.wet_mix