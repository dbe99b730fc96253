import io
import os

# Headless SDL; must be set before pygame initialises any subsystem
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from acpacman.audio import AudioContext


def patterned(size):
    """Atlas where every pixel differs from its neighbours."""
    w, h = size
    surf = pygame.Surface(size, pygame.SRCALPHA)
    for y in range(h):
        for x in range(w):
            surf.set_at((x, y), (x % 256, y % 256, (x * 7 + y * 13) % 256, 255))
    return surf


def png_bytes(surf):
    buf = io.BytesIO()
    pygame.image.save(surf, buf, "atlas.png")
    return buf.getvalue()


def pixels(surf):
    return pygame.image.tobytes(surf, "RGBA")


@pytest.fixture
def characters_atlas():
    return patterned((300, 64))


@pytest.fixture
def audio():
    ctx = AudioContext()
    try:
        ctx.open()
    except pygame.error as e:
        pytest.skip(f"no audio driver: {e}")
    yield ctx
    ctx.close()
