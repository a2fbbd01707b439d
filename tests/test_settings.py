import json

import pytest

from pongus.settings import Settings, load_settings, parse_color


def _write(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_parse_color_red_is_opaque():
    assert parse_color("ff0000") == (255, 0, 0, 255)


def test_parse_color_accepts_hex_prefix():
    assert parse_color("0x00ff00") == (0, 255, 0, 255)


def test_parse_color_alpha_always_full():
    for text in ("000000", "123456", "abcdef"):
        assert parse_color(text)[3] == 255


def test_parse_color_rejects_garbage():
    with pytest.raises(ValueError):
        parse_color("zzzzzz")


def test_parse_color_rejects_too_long():
    with pytest.raises(ValueError):
        parse_color("ff00ff00ff")


def test_parse_color_rejects_non_string():
    with pytest.raises(TypeError):
        parse_color(0xFF0000)


def test_load_settings_reads_all_fields(tmp_path):
    path = _write(
        tmp_path,
        {
            "PaddleColor": "ff0000",
            "BallColor": "0000ff",
            "BackgroundMusic": "music.ogg",
            "fps": 144,
        },
    )
    settings = load_settings(path)
    assert settings == Settings(
        paddle_color=(255, 0, 0, 255),
        ball_color=(0, 0, 255, 255),
        fps=144.0,
        background_music="music.ogg",
    )


def test_load_settings_missing_key(tmp_path):
    path = _write(tmp_path, {"PaddleColor": "ff0000", "BallColor": "0000ff", "fps": 60})
    with pytest.raises(KeyError):
        load_settings(path)


def test_load_settings_invalid_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_settings(path)