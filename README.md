# crushfx

The parts of a bit crushing audio effect. The bit crusher lowers the
resolution of a signal to between 1 and 16 bits, and a sine LFO can sweep
that resolution. Around it the package keeps the effect's parameters, their
display text, dry and wet levels, tempo bookkeeping and a binary encoding of
the saved settings. It uses only the standard library.

## Installation

```
pip install crushfx
```

## Modules

- `crushfx.calc`: helpers such as `cap`, `cap_sample`, `scale`, `round_to`,
  `inverse_normalize` and `to_bool`. `seconds_to_buffer` and
  `milliseconds_to_buffer` turn a duration into a number of samples. The
  module also holds the sine table and the LFO rate limits (0.1 to 10 Hz).
- `crushfx.lfo.LFO`: a wave-table sine oscillator with `rate` and
  `accumulator` attributes. `peek()` returns the current table value and
  moves the oscillator forward.
- `crushfx.audiobuffer.AudioBuffer`: audio with several channels of equal
  length. It has `channel(index)`, `merge(other, read_offset, write_offset,
  mix_volume)` (which returns the samples written per channel, and wraps
  around a source whose `loopable` is set), `silence()`,
  `adjust_volume(amp)`, `is_silent()` and `clone()`.
- `crushfx.bitcrusher.BitCrusher`: the resolution-reducing processor.
  `amount`, `input_mix` and `output_mix` are properties, `bits` gives the
  current resolution, `set_lfo(rate_percentage, depth)` turns the
  oscillator on (for a rate above 0) or off, and `process(samples)`
  crushes a mutable sequence in place and returns it.
- `crushfx.limiter.Limiter`: the attack, release and threshold settings,
  the coefficients derived from them, and `linear_gain_reduction()`.
- `crushfx.plugin_process.PluginProcess`: holds a `BitCrusher`, a
  `Limiter`, `dry_mix` and `wet_mix`. `set_tempo(tempo, numerator,
  denominator)` works out the samples per measure, half measure, beat and
  sixteenth. It returns `False` when nothing changed and raises
  `ValueError` for a tempo or denominator that is not positive.
- `crushfx.parameters`: the `ParamId` identifiers, the `Parameter`
  ranges in `PARAMETERS`, `format_value(tag, normalized)` for display text
  (for example `"9 Bits"`, `"5.00 Hz"`, `"50 %"`), and the `ComponentState`
  dataclass with `encode_state` / `decode_state`. The encoding is a
  little-endian int32 bypass flag followed by five float32 values.
- `crushfx.plugin.Plugin`: the top-level effect model. It applies queued
  parameter changes, forwards them to its `PluginProcess`, saves and
  restores its state, reports which `SampleSize` values it supports,
  negotiates mono or stereo buses, and copies input to output when
  bypassed.

## Example

```python
from crushfx.bitcrusher import BitCrusher

crusher = BitCrusher(0.25, 1.0, 1.0, 44100.0)
crusher.set_lfo(0.5, 0.8)

samples = [0.0, 0.25, 0.5, -0.5, 0.9]
crusher.process(samples)  # crushes the samples in place
```

Parameter changes arrive as a mapping from identifier to the queued values.
Only the last value of each queue is used:

```python
from crushfx.plugin import Plugin
from crushfx.parameters import ParamId

plugin = Plugin()
plugin.apply_parameter_changes({ParamId.BIT_DEPTH: [0.5], ParamId.DRY_MIX: [0.1, 0.2]})
blob = plugin.get_state()

restored = Plugin()
restored.set_state(blob)
assert restored.model == plugin.model
```

## What it does not do

- `PluginProcess` does not run the full chain over audio buffers. It keeps
  the dry and wet levels but does not mix them, and the limiter is applied
  to no signal. Audio passes only through `BitCrusher.process` or through
  `Plugin.bypass`.
- `Limiter` only computes its coefficients. It has no processing step.
- There is no host integration, editor window or command-line tool. The
  package is a library to be driven from Python code.

## Running the tests

```
pip install crushfx[test]
pytest
```