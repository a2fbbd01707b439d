import pytest

from pongus.utils import center_text, fail, round_half


class _FixedRenderer:
    def __init__(self, width):
        self.width = width
        self.calls = []

    def measure_text(self, text, font_size):
        self.calls.append((text, font_size))
        return (self.width, font_size)


def test_round_half_rounds_half_up():
    assert round_half(2.5) == 3.0


def test_round_half_rounds_down_below_half():
    assert round_half(2.4) == 2.0


def test_round_half_negative_half():
    assert round_half(-0.5) == 0.0


def test_round_half_whole_numbers_unchanged():
    for value in (0.0, 1.0, 59.0, -4.0):
        assert round_half(value) == value


def test_fail_exits_with_code_and_message(capsys):
    with pytest.raises(SystemExit) as info:
        fail("boom happened", -1)
    assert info.value.code == -1
    assert "boom happened" in capsys.readouterr().err


def test_center_text_centres_measured_width():
    renderer = _FixedRenderer(120.0)
    x = center_text(renderer, "Play", 70, 1280)
    assert x + 120.0 / 2 == pytest.approx(1280 / 2)
    assert renderer.calls == [("Play", 70)]


def test_center_text_wider_text_starts_further_left():
    narrow = center_text(_FixedRenderer(50.0), "a", 40, 800)
    wide = center_text(_FixedRenderer(300.0), "a", 40, 800)
    assert wide < narrow