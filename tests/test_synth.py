import random

import pytest

from synce.synth import AudioSynth, WaveType


def _synth(text, seed=None):
    synth = AudioSynth(random.Random(seed) if seed is not None else None)
    synth.load_hex_ast(text)
    return synth


def test_zero_chunk_decodes_to_base_values():
    (node,) = _synth("\x00\x00\x0f\x00").nodes
    assert node.type is WaveType.SINE
    assert node.frequency == 220.0
    assert node.amplitude == pytest.approx(1.0)
    assert node.duration == pytest.approx(0.1)
    assert node.phase == 0


def test_one_node_per_four_characters_with_padding():
    synth = _synth("\x01\x00\x00\x00\x02\x00")
    assert [n.type for n in synth.nodes] == [WaveType.SQUARE, WaveType.TRIANGLE]
    assert synth.nodes[1].duration == pytest.approx(0.1)


def test_shape_code_wraps_modulo_five():
    synth = _synth("\x05\x00\x00\x00\x09\x00\x00\x00")
    assert [n.type for n in synth.nodes] == [WaveType.SINE, WaveType.NOISE]


def test_generate_sample_count_matches_duration():
    synth = _synth("\x00\x00\x0f\x00\x03\x00\x0f\x01")
    synth.generate()
    assert len(synth.output) == 4410 * 3


def test_samples_stay_within_amplitude():
    synth = _synth("".join(chr(shape) + "\x00\x0f\x00" for shape in range(5)), seed=1)
    synth.generate()
    assert synth.output
    assert all(abs(s) <= 1.0 + 1e-9 for s in synth.output)


def test_square_wave_takes_only_two_levels():
    synth = _synth("\x01\x00\x0f\x00")
    synth.generate()
    assert set(synth.output) == {1.0, -1.0}


def test_sine_starts_at_zero():
    synth = _synth("\x00\x00\x0f\x00")
    synth.generate()
    assert synth.output[0] == 0.0


def test_noise_is_reproducible_with_seed():
    first = _synth("\x04\x00\x0f\x00", seed=7)
    second = _synth("\x04\x00\x0f\x00", seed=7)
    first.generate()
    second.generate()
    assert first.output == second.output


def test_play_reports_one_frame_per_tenth_second(capsys):
    synth = _synth("\x00\x00\x0f\x01")
    synth.generate()
    synth.play()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "[Synth Playback Start]"
    assert lines[-1] == "[Synth Playback Done]"
    assert lines[1] == "Frame[0] = 0"
    assert len(lines) - 2 == 2