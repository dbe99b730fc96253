"""Pac-Man-style arcade game on pygame."""

from .assets import Assets, Sounds, load_assets, load_sounds
from .audio import AudioContext
from .errors import AssetError, ContextBindingError, DecodeError, OutOfBoundsError
from .sprites import get_sprite

__version__ = "1.0.0"
