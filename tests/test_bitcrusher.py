import pytest

from crushfx.bitcrusher import BitCrusher
from crushfx.calc import MAX_LFO_RATE, MIN_LFO_RATE


def test_full_amount_is_sixteen_bits():
    crusher = BitCrusher(1.0, 1.0, 1.0)
    assert crusher.bits == 16


def test_zero_amount_is_one_bit():
    crusher = BitCrusher(0.0, 1.0, 1.0)
    assert crusher.bits == 1


def test_amount_above_one_is_capped_at_sixteen_bits():
    crusher = BitCrusher(8, 0.5, 0.5)
    assert crusher.bits == 16


def test_bits_grow_with_amount():
    bits = [BitCrusher(a / 10, 1.0, 1.0).bits for a in range(11)]
    assert bits == sorted(bits)
    assert bits[0] < bits[-1]


def test_mixes_are_capped():
    crusher = BitCrusher(0.5, 2.0, -1.0)
    assert crusher.input_mix == 1.0
    assert crusher.output_mix == 0.0


def test_sixteen_bits_without_lfo_leaves_signal_untouched():
    crusher = BitCrusher(1.0, 1.0, 1.0)
    samples = [0.1, -0.4, 0.75, 0.0]
    result = crusher.process(samples)
    assert result == [0.1, -0.4, 0.75, 0.0]


def test_process_works_in_place():
    crusher = BitCrusher(0.2, 1.0, 1.0)
    samples = [0.3, -0.3]
    result = crusher.process(samples)
    assert result is samples


def test_low_resolution_quantizes_output():
    crusher = BitCrusher(0.0, 1.0, 1.0)
    samples = [i / 100 - 1.0 for i in range(200)]
    crusher.process(samples)
    assert len(set(samples)) <= 2 ** crusher.bits


def test_zero_output_mix_silences():
    crusher = BitCrusher(0.3, 1.0, 0.0)
    samples = [0.5, -0.5, 0.25]
    crusher.process(samples)
    assert all(s == 0.0 for s in samples)


def test_set_lfo_enables_and_sets_rate():
    crusher = BitCrusher(0.5, 1.0, 1.0)
    crusher.set_lfo(1.0, 0.5)
    assert crusher.has_lfo
    assert crusher.lfo.rate == pytest.approx(MAX_LFO_RATE)
    assert crusher.lfo_depth == 0.5


def test_set_lfo_zero_rate_disables():
    crusher = BitCrusher(0.5, 1.0, 1.0)
    crusher.set_lfo(0.0, 0.5)
    assert not crusher.has_lfo
    assert crusher.lfo.rate == pytest.approx(MIN_LFO_RATE)


def test_turning_lfo_off_restores_resolution():
    crusher = BitCrusher(0.5, 1.0, 1.0)
    expected = crusher.bits
    crusher.set_lfo(1.0, 1.0)
    crusher.process([0.2] * 5000)
    crusher.set_lfo(0.0, 1.0)
    assert crusher.bits == expected


def test_lfo_sweeps_resolution_within_range():
    crusher = BitCrusher(0.5, 1.0, 1.0)
    crusher.set_lfo(1.0, 1.0)
    seen = set()
    for _ in range(50):
        crusher.process([0.2] * 200)
        seen.add(crusher.bits)
    assert all(1 <= b <= 16 for b in seen)
    assert len(seen) > 1