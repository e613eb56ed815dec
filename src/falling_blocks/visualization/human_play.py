from __future__ import annotations

import argparse
import logging
import time
from typing import Optional

import pygame

from falling_blocks.game import ROWS
from .music import MusicFolderError, MusicPlayer
from .renderer import Renderer
from .session import Session, SessionConfig


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks")
    p.add_argument("--music-dir", type=str, default=None, help="folder of tracks to shuffle")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--width", type=int, default=800)
    p.add_argument("--height", type=int, default=600)
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def _start_music(config: SessionConfig) -> Optional[MusicPlayer]:
    if config.music_dir is None:
        return None
    try:
        pygame.mixer.init()
        return MusicPlayer(config.music_dir, seed=config.random_seed)
    except MusicFolderError as e:
        logger.error("Music disabled: %s", e)
    except pygame.error as e:
        logger.warning("No audio device, music disabled: %s", e)
    return None


def run(config: Optional[SessionConfig] = None) -> None:
    config = config or SessionConfig()
    pygame.init()
    try:
        screen = pygame.display.set_mode(config.window_size)
        pygame.display.set_caption("Falling Blocks")
        session = Session(config)
        renderer = Renderer(config.window_size, ROWS)
        music = _start_music(config)

        elapsed = 0.0
        last = time.perf_counter()
        running = True
        while running:
            now = time.perf_counter()
            elapsed += now - last
            last = now
            if elapsed <= config.frame_duration:
                time.sleep(config.frame_duration - elapsed)
                continue

            for event in pygame.event.get():
                if not session.handle_event(event):
                    running = False
            session.update(config.frame_duration)
            if music is not None:
                music.ensure_play()
            renderer.draw(screen, session.game.current_composite_board())
            elapsed -= config.frame_duration
    finally:
        pygame.quit()


def config_from_args(args: argparse.Namespace) -> SessionConfig:
    return SessionConfig(
        frame_duration=1.0 / args.fps,
        window_size=(args.width, args.height),
        music_dir=args.music_dir,
        random_seed=args.seed,
    )


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level, format="[FALLING_BLOCKS] %(asctime)s - %(name)s - %(message)s")
    run(config_from_args(args))


if __name__ == "__main__":  # pragma: no cover
    main()
