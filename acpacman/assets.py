"""
Asset bundle builder.

Turns the embedded PNG sprite sheets, the TTF font and the MP3 clips from
``acpacman.resources`` into ready-to-use pygame objects. Loading is eager and
all-or-nothing: the first bad resource raises and no bundle is returned.
"""

import io
import logging
from dataclasses import dataclass

import pygame

from . import config, resources
from .audio import Stream
from .errors import ContextBindingError, DecodeError
from .sprites import SpriteRect, extract_all

log = logging.getLogger(__name__)


# ── Sprite geometry ───────────────────────────────────────────────────────────
# atlas -> sprites packed in it (name, width, height, x, y)
SPRITE_TABLE = {
    "characters": (
        SpriteRect("pacman", 61, 64, 0, 0),
        SpriteRect("ghost1", 56, 64, 66, 0),
        SpriteRect("ghost2", 56, 64, 125, 0),
        SpriteRect("ghost3", 56, 64, 185, 0),
        SpriteRect("ghost4", 56, 64, 244, 0),
    ),
    "powers": (
        SpriteRect("life", 64, 64, 0, 0),
        SpriteRect("invincibility", 64, 64, 67, 0),
    ),
    "walls": (
        SpriteRect("inactive_corner", 12, 12, 0, 0),
        SpriteRect("inactive_side", 40, 12, 12, 0),
        SpriteRect("active_corner", 12, 12, 52, 0),
        SpriteRect("active_side", 40, 12, 64, 0),
    ),
}

# Decode order; attribute names in acpacman.resources
ATLAS_DATA = {"characters": "CHARACTERS_PNG", "powers": "POWERS_PNG", "walls": "WALLS_PNG"}

SOUND_TABLE = (
    ("beginning", "BEGINNING_MP3"),
    ("chomp",     "CHOMP_MP3"),
    ("death",     "DEATH_MP3"),
    ("eat_flask", "EAT_FLASK_MP3"),
    ("eat_ghost", "EAT_GHOST_MP3"),
    ("extra_pac", "EXTRA_PAC_MP3"),
)


# ── Bundles ───────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Characters:
    pacman: pygame.Surface
    ghost1: pygame.Surface
    ghost2: pygame.Surface
    ghost3: pygame.Surface
    ghost4: pygame.Surface

    def ghosts(self):
        return (self.ghost1, self.ghost2, self.ghost3, self.ghost4)


@dataclass(frozen=True)
class Powers:
    life: pygame.Surface
    invincibility: pygame.Surface


@dataclass(frozen=True)
class Walls:
    active_corner: pygame.Surface
    active_side: pygame.Surface
    inactive_corner: pygame.Surface
    inactive_side: pygame.Surface


class ArcadeFont:
    """Scalable font parsed once from TTF bytes; faces are built per point size."""

    def __init__(self, data, size=config.FONT_SIZE):
        self._data = bytes(data)
        self._faces = {}
        # SDL_ttf reads the font lazily; rendering once forces the parse
        self.face(size).render("0", True, (0, 0, 0))

    def face(self, size):
        f = self._faces.get(size)
        if f is None:
            f = self._faces[size] = pygame.font.Font(io.BytesIO(self._data), size)
        return f

    def render(self, text, color, size=config.FONT_SIZE, antialias=True):
        return self.face(size).render(text, antialias, color)


@dataclass(frozen=True)
class Assets:
    arcade_font: ArcadeFont
    skin: pygame.Surface
    characters: Characters
    powers: Powers
    walls: Walls


@dataclass(frozen=True)
class Sounds:
    beginning: Stream
    chomp: Stream
    death: Stream
    eat_flask: Stream
    eat_ghost: Stream
    extra_pac: Stream

    def streams(self):
        return (self.beginning, self.chomp, self.death,
                self.eat_flask, self.eat_ghost, self.extra_pac)


# ── Decode steps ──────────────────────────────────────────────────────────────
def _decode_image(name, data):
    try:
        img = pygame.image.load(io.BytesIO(data), f"{name}.png")
    except (pygame.error, ValueError) as e:
        raise DecodeError(name, f"bad PNG data ({e})") from e
    if pygame.display.get_surface() is not None:
        img = img.convert_alpha()
    log.debug("decoded %s %dx%d", name, *img.get_size())
    return img


def _parse_font(name, data):
    try:
        return ArcadeFont(data)
    # pygame.error subclasses RuntimeError
    except (RuntimeError, OSError, ValueError) as e:
        raise DecodeError(name, f"bad TTF data ({e})") from e


def _load_atlas(name):
    atlas = _decode_image(name, getattr(resources, ATLAS_DATA[name]))
    return extract_all(atlas, SPRITE_TABLE[name])


def _decode_sound(name, data, ctx):
    if not ctx.is_open():
        raise ContextBindingError(name, "audio context is not open")
    try:
        sound = pygame.mixer.Sound(file=io.BytesIO(data))
    except pygame.error as e:
        raise DecodeError(name, f"bad MP3 data ({e})") from e
    log.debug("decoded %s %.2fs", name, sound.get_length())
    return Stream(name, sound, ctx.bind(name))


# ── Loaders ───────────────────────────────────────────────────────────────────
def load_assets():
    """Decode the skin, the font and every sprite sheet into an Assets bundle."""
    if not pygame.font.get_init():
        pygame.font.init()

    skin = _decode_image("skin", resources.SKIN_PNG)
    font = _parse_font("arcade_font", resources.ARCADE_TTF)
    characters = Characters(**_load_atlas("characters"))
    powers = Powers(**_load_atlas("powers"))
    walls = Walls(**_load_atlas("walls"))

    log.info("assets loaded: %d sprites", sum(len(v) for v in SPRITE_TABLE.values()))
    return Assets(
        arcade_font=font,
        skin=skin,
        characters=characters,
        powers=powers,
        walls=walls,
    )


def load_sounds(ctx):
    """Decode every clip and bind it to ``ctx``, an open AudioContext owned by the caller."""
    streams = {name: _decode_sound(name, getattr(resources, attr), ctx)
               for name, attr in SOUND_TABLE}
    log.info("sounds loaded: %s", ", ".join(streams))
    return Sounds(**streams)
