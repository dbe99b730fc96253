"""Embedded font, image and sound data.

Every resource is read into a bytes constant once, at import time; the
loaders in ``acpacman.assets`` only ever see these constants.
"""

from importlib.resources import files

_ROOT = files(__name__)

def _embed(*parts):
    return _ROOT.joinpath(*parts).read_bytes()

# Images
SKIN_PNG       = _embed("images", "skin.png")
CHARACTERS_PNG = _embed("images", "characters.png")
POWERS_PNG     = _embed("images", "powers.png")
WALLS_PNG      = _embed("images", "walls.png")

# Fonts
ARCADE_TTF = _embed("fonts", "arcade.ttf")

# Sounds
BEGINNING_MP3 = _embed("sounds", "beginning.mp3")
CHOMP_MP3     = _embed("sounds", "chomp.mp3")
DEATH_MP3     = _embed("sounds", "death.mp3")
EAT_FLASK_MP3 = _embed("sounds", "eat_flask.mp3")
EAT_GHOST_MP3 = _embed("sounds", "eat_ghost.mp3")
EXTRA_PAC_MP3 = _embed("sounds", "extra_pac.mp3")
