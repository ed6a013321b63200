import pytest

from crushfx.audiobuffer import AudioBuffer


def _filled(channels, size, value):
    buffer = AudioBuffer(channels, size)
    for samples in buffer:
        samples[:] = [value] * size
    return buffer


def test_new_buffer_is_silent():
    buffer = AudioBuffer(2, 16)
    assert buffer.is_silent()
    assert len(buffer.channel(0)) == 16
    assert buffer.loopable is False


def test_channel_out_of_range():
    buffer = AudioBuffer(2, 4)
    with pytest.raises(IndexError):
        buffer.channel(2)
    with pytest.raises(IndexError):
        buffer.channel(-1)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        AudioBuffer(-1, 4)


def test_merge_adds_scaled_samples():
    target = AudioBuffer(2, 8)
    source = _filled(2, 8, 1.0)
    written = target.merge(source, 0, 0, 0.5)
    assert written == 8
    assert target.channel(0) == [0.5] * 8
    assert target.channel(1) == [0.5] * 8


def test_merge_with_write_offset_leaves_head_untouched():
    target = AudioBuffer(1, 8)
    source = _filled(1, 8, 1.0)
    written = target.merge(source, 0, 3, 1.0)
    assert written == 8 - 3
    assert target.channel(0)[:3] == [0.0] * 3
    assert target.channel(0)[3:] == [1.0] * 5


def test_merge_stops_at_source_end_unless_loopable():
    target = AudioBuffer(1, 8)
    source = _filled(1, 3, 1.0)
    assert target.merge(source, 0, 0, 1.0) == 3
    assert target.channel(0)[3:] == [0.0] * 5

    looped_target = AudioBuffer(1, 8)
    source.loopable = True
    assert looped_target.merge(source, 0, 0, 1.0) == 8
    assert looped_target.channel(0) == [1.0] * 8


def test_merge_only_common_channels():
    target = AudioBuffer(3, 4)
    source = _filled(1, 4, 1.0)
    assert target.merge(source, 0, 0, 1.0) == 4
    assert target.channel(0) == [1.0] * 4
    assert target.channel(1) == [0.0] * 4
    assert target.channel(2) == [0.0] * 4


def test_merge_nothing_to_write():
    target = AudioBuffer(1, 4)
    assert target.merge(None, 0, 0, 1.0) == 0
    assert target.merge(_filled(1, 4, 1.0), 0, 4, 1.0) == 0
    assert target.is_silent()


def test_merge_negative_offset_rejected():
    target = AudioBuffer(1, 4)
    with pytest.raises(ValueError):
        target.merge(_filled(1, 4, 1.0), -1, 0, 1.0)


def test_silence_clears_contents():
    buffer = _filled(2, 4, 0.3)
    assert not buffer.is_silent()
    buffer.silence()
    assert buffer.is_silent()
    assert len(buffer.channel(1)) == 4


def test_adjust_volume_scales_and_reverts():
    buffer = _filled(2, 4, 0.3)
    buffer.adjust_volume(2.0)
    buffer.adjust_volume(0.5)
    assert buffer.channel(0) == pytest.approx([0.3] * 4)
    buffer.adjust_volume(0.0)
    assert buffer.is_silent()


def test_clone_is_independent_copy():
    buffer = _filled(2, 4, 0.3)
    buffer.loopable = True
    copy = buffer.clone()
    assert copy.channel(0) == buffer.channel(0)
    assert copy.channels == buffer.channels and copy.size == buffer.size
    assert copy.loopable is False
    copy.channel(0)[0] = 0.9
    assert buffer.channel(0)[0] == 0.3