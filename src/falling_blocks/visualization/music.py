from __future__ import annotations

import logging
import os
import random
from typing import List, Optional

import pygame


logger = logging.getLogger(__name__)


class MusicFolderError(RuntimeError):
    pass


def list_tracks(folder: str) -> List[str]:
    try:
        names = sorted(os.listdir(folder))
    except OSError as e:
        raise MusicFolderError(f"Folder not found for music loading: {folder}") from e
    paths = [os.path.join(folder, name) for name in names]
    return [p for p in paths if os.path.isfile(p)]


class MusicPlayer:
    """Keeps a random track from a folder playing on pygame's music channel."""

    def __init__(self, folder: str, volume: float = 1.0, seed: Optional[int] = None) -> None:
        self.tracks = list_tracks(folder)
        self.volume = volume
        self.rng = random.Random(seed)
        logger.info("Loaded %d music tracks from %s", len(self.tracks), folder)

    def ensure_play(self) -> None:
        if not self.tracks:
            return
        if pygame.mixer.music.get_busy():
            return
        track = self.rng.choice(self.tracks)
        logger.info("Playing %s", track)
        try:
            pygame.mixer.music.load(track)
            pygame.mixer.music.set_volume(self.volume)
            pygame.mixer.music.play()
        except pygame.error as e:
            logger.warning("Skipping unplayable track %s: %s", track, e)
            self.tracks.remove(track)
