"""Drawing of text with a drop shadow."""

from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple, Union

import pygame

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
SHADOW_COLOR: Color = (0, 0, 0)
SHADOW_OFFSET = 2


@lru_cache(maxsize=None)
def _load_font(path: Optional[str], size: int):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _render_block(face, text: str, color: Color) -> pygame.Surface:
    images = [face.render(line, True, color) for line in text.split("\n")]
    line_height = face.get_linesize()
    width = max(image.get_width() for image in images)
    height = line_height * (len(images) - 1) + images[-1].get_height()
    block = pygame.Surface((max(width, 1), max(height, 1)), pygame.SRCALPHA)
    for row, image in enumerate(images):
        block.blit(image, (0, row * line_height))
    return block


def render_text(
    target: pygame.Surface,
    x: float,
    y: float,
    text: str,
    size: int,
    font: Union[str, Path, None] = None,
    color: Color = WHITE,
    center: bool = False,
) -> pygame.Rect:
    """Draw ``text`` with a black shadow and return the area of the text itself.

    ``font`` is a font file, or None for pygame's default font. With ``center``
    the text is centred on (x, y) instead of starting there.
    """
    face = _load_font(None if font is None else str(font), size)
    image = _render_block(face, text, color)
    shadow = _render_block(face, text, SHADOW_COLOR)
    left, top = x, y
    if center:
        left -= round(image.get_width() / 2)
        top -= round(image.get_height() / 2)
    left, top = round(left), round(top)
    target.blit(shadow, (left + SHADOW_OFFSET, top + SHADOW_OFFSET))
    return target.blit(image, (left, top))