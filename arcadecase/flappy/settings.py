"""Constants of the flappy game and loading of its media files."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import pygame

PathLike = Union[str, Path]

GRAPHICS_PATH = Path("graphics")
SOUNDS_PATH = Path("sounds")
FONTS_PATH = Path("fonts")

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
VIRTUAL_WIDTH = 512
VIRTUAL_HEIGHT = 288
BIRD_WIDTH = 39.0
BIRD_HEIGHT = 28.0
LOG_WIDTH = 70.0
LOG_HEIGHT = 288.0
LOGS_GAP = 90.0
GROUND_HEIGHT = 16.0
BACKGROUND_LOOPING_POINT = 1157.0
MAIN_SCROLL_SPEED = 100.0
BACK_SCROLL_SPEED = MAIN_SCROLL_SPEED / 2
GRAVITY = 980.0
JUMP_TAKEOFF_SPEED = GRAVITY / 6.0
TIME_TO_SPAWN_LOGS = 1.5
MEDIUM_TEXT_SIZE = 18
HUGE_TEXT_SIZE = 56
FLAPPY_TEXT_SIZE = 28

TEXTURES = {
    "bird": "bird.png",
    "background": "background.png",
    "ground": "ground.png",
    "log": "log.png",
}
SOUNDS = {
    "jump": "jump.wav",
    "explosion": "explosion.wav",
    "hurt": "hurt.wav",
    "score": "score.wav",
}
MUSIC = "marios_way.ogg"
FONTS = {"font": "font.ttf", "flappy": "flappy.ttf"}


class AssetError(RuntimeError):
    """A media file could not be loaded."""


@dataclass
class Assets:
    """Textures, sounds, font files and music of the game."""

    textures: Dict[str, Any] = field(default_factory=dict)
    sounds: Dict[str, Any] = field(default_factory=dict)
    fonts: Dict[str, Path] = field(default_factory=dict)
    music: Optional[Path] = None
    _font_cache: Dict[Tuple[str, int], Any] = field(default_factory=dict, repr=False)

    def play(self, name: str) -> None:
        """Play the named sound effect."""
        self.sounds[name].play()

    def font(self, name: str, size: int):
        """Return the named font at the given size, loading it once."""
        key = (name, size)
        if key not in self._font_cache:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font_cache[key] = pygame.font.Font(str(self.fonts[name]), size)
        return self._font_cache[key]

    def play_music(self) -> None:
        """Start the background music, looping forever."""
        if self.music is None:
            return
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(str(self.music))
        pygame.mixer.music.play(loops=-1)


def _locate(root: Path, folder: Path, filename: str, kind: str) -> Path:
    path = root / folder / filename
    if not path.is_file():
        raise AssetError(f"Error loading {kind} {(folder / filename).as_posix()}")
    return path


def _load_textures(root: Path) -> Dict[str, Any]:
    textures = {}
    for name, filename in TEXTURES.items():
        path = _locate(root, GRAPHICS_PATH, filename, "texture")
        try:
            textures[name] = pygame.image.load(str(path))
        except pygame.error as exc:
            raise AssetError(
                f"Error loading texture {(GRAPHICS_PATH / filename).as_posix()}"
            ) from exc
    return textures


def _load_sounds(root: Path) -> Tuple[Dict[str, Any], Path]:
    sounds = {}
    for name, filename in SOUNDS.items():
        path = _locate(root, SOUNDS_PATH, filename, "sound")
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        try:
            sounds[name] = pygame.mixer.Sound(str(path))
        except pygame.error as exc:
            raise AssetError(f"Error loading sound {(SOUNDS_PATH / filename).as_posix()}") from exc
    music = _locate(root, SOUNDS_PATH, MUSIC, "music")
    return sounds, music


def _load_fonts(root: Path) -> Dict[str, Path]:
    return {name: _locate(root, FONTS_PATH, filename, "font") for name, filename in FONTS.items()}


def load_assets(asset_dir: PathLike = ".") -> Assets:
    """Load textures, then sounds, then fonts from ``asset_dir``."""
    root = Path(asset_dir)
    textures = _load_textures(root)
    sounds, music = _load_sounds(root)
    fonts = _load_fonts(root)
    return Assets(textures=textures, sounds=sounds, fonts=fonts, music=music)