import logging

import pygame

from falling_blocks.visualization import human_play
from falling_blocks.visualization.human_play import _start_music, build_parser, config_from_args
from falling_blocks.visualization.session import SessionConfig


def test_defaults_match_session_config():
    config = config_from_args(build_parser().parse_args([]))
    assert config == SessionConfig()


def test_arguments_reach_session_config():
    args = build_parser().parse_args(
        ["--fps", "30", "--width", "1024", "--height", "768", "--seed", "11", "--music-dir", "tracks"]
    )
    config = config_from_args(args)
    assert config.frame_duration == 1.0 / 30
    assert config.window_size == (1024, 768)
    assert config.random_seed == 11
    assert config.music_dir == "tracks"


def test_no_music_dir_means_no_player(monkeypatch):
    def fail():
        raise AssertionError("mixer should not be touched")

    monkeypatch.setattr(pygame.mixer, "init", fail)
    assert _start_music(SessionConfig()) is None


def test_missing_music_folder_is_logged(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(pygame.mixer, "init", lambda: None)
    config = SessionConfig(music_dir=str(tmp_path / "missing"))
    with caplog.at_level(logging.ERROR, logger=human_play.__name__):
        assert _start_music(config) is None
    assert "Music disabled" in caplog.text


def test_missing_audio_device_is_logged(tmp_path, monkeypatch, caplog):
    def no_device():
        raise pygame.error("No available audio device")

    monkeypatch.setattr(pygame.mixer, "init", no_device)
    config = SessionConfig(music_dir=str(tmp_path))
    with caplog.at_level(logging.WARNING, logger=human_play.__name__):
        assert _start_music(config) is None
    assert "No audio device" in caplog.text
