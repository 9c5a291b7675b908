"""Images, fonts and sounds used by the game, and playback of the sounds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Optional, Union

import pygame

from ballz import config

IMAGE_FILES = {
    "border": config.BORDER_IMAGE,
    "speed": config.SPEED_IMAGE,
    "return": config.RETURN_IMAGE,
    "replay": config.REPLAY_IMAGE,
    "menu": config.MENU_IMAGE,
    "frame_full": config.FULL_FRAME_IMAGE,
    "frame_half": config.HALF_FRAME_IMAGE,
    "frame_low": config.LOW_FRAME_IMAGE,
    "pause": config.PAUSE_IMAGE,
    "note": config.NOTE_IMAGE,
    "perfect": config.PERFECT_IMAGE,
    "shop": config.SHOP_IMAGE,
    "help": config.HELP_IMAGE,
}

FONT_FILES = {
    "arial_small": (config.ARIAL_FONT, 15),
    "arial_medium": (config.ARIAL_FONT, 30),
    "arial_large": (config.ARIAL_FONT, 45),
    "pixel_small": (config.PIXEL_FONT, 10),
    "pixel_medium": (config.PIXEL_FONT, 25),
    "pixel_large": (config.PIXEL_FONT, 40),
    "pixel_huge": (config.PIXEL_FONT, 75),
}

SOUND_FILES = {
    "background": config.BACKGROUND_SOUND,
    "end": config.END_SOUND,
    "extra": config.EXTRA_SOUND,
    "coin": config.COIN_SOUND,
    "cheat": config.CHEAT_SOUND,
    "perfect": config.PERFECT_SOUND,
    "record": config.RECORD_SOUND,
}


@dataclass
class Resources:
    """Loaded assets. Missing images and sounds are ``None``."""

    images: dict[str, Optional[pygame.Surface]] = field(default_factory=dict)
    fonts: dict[str, pygame.font.Font] = field(default_factory=dict)
    sounds: dict[str, Optional["pygame.mixer.Sound"]] = field(default_factory=dict)
    audio: bool = False

    def play(self, sound: Union[str, Enum], volume: float, loop: bool = False) -> bool:
        """Play a sound by name; True when it actually started."""
        key = sound.value if isinstance(sound, Enum) else sound
        clip = self.sounds[key]
        if clip is None or not self.audio:
            return False
        channel = clip.play(loops=-1 if loop else 0)
        if channel is None:
            return False
        channel.set_volume(max(0.0, min(1.0, float(volume))))
        return True

    def stop_all(self) -> None:
        """Stop every sound that is playing."""
        if self.audio:
            pygame.mixer.stop()


def _load_image(path: Path) -> Optional[pygame.Surface]:
    if not path.is_file():
        return None
    return pygame.image.load(str(path))


def _load_font(path: Path, size: int) -> pygame.font.Font:
    if path.is_file():
        return pygame.font.Font(str(path), size)
    return pygame.font.Font(None, size)


def load_resources(
    base_dir: Union[str, "PathLike[str]"] = config.RESOURCE_DIR,
) -> Resources:
    """Load every asset from ``base_dir``, falling back to the default font."""
    base = Path(base_dir)
    pygame.font.init()
    audio = True
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.set_num_channels(max(pygame.mixer.get_num_channels(), 7))
    except pygame.error:
        audio = False

    images = {key: _load_image(base / name) for key, name in IMAGE_FILES.items()}
    fonts = {key: _load_font(base / name, size) for key, (name, size) in FONT_FILES.items()}
    sounds: dict[str, Optional[pygame.mixer.Sound]] = {}
    for key, name in SOUND_FILES.items():
        path = base / name
        sounds[key] = pygame.mixer.Sound(str(path)) if audio and path.is_file() else None
    return Resources(images, fonts, sounds, audio)