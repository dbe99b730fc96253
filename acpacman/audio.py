import logging

import pygame

from . import config
from .errors import ContextBindingError

log = logging.getLogger(__name__)


class AudioContext:
    """Caller-owned handle on the pygame mixer.

    Every stream bound to the context gets a reserved mixer channel of its
    own, so starting one stream never cuts another off. Keep the context
    open for as long as any of its streams may play.
    """

    def __init__(self, frequency=config.MIX_FREQ, size=config.MIX_SIZE,
                 channels=config.MIX_CHANNELS, buffer=config.MIX_BUFFER):
        self.frequency = frequency
        self.size = size
        self.channels = channels
        self.buffer = buffer
        self._open = False
        self._owns_mixer = False
        self._bound = 0

    def open(self):
        if not pygame.mixer.get_init():
            pygame.mixer.init(self.frequency, self.size, self.channels, self.buffer)
            self._owns_mixer = True
        self._open = True
        self._bound = 0
        log.debug("audio context open: %s", pygame.mixer.get_init())
        return self

    def close(self):
        # A mixer started by someone else outlives this context
        if self._open and self._owns_mixer:
            pygame.mixer.quit()
        self._open = False
        self._owns_mixer = False
        self._bound = 0

    def is_open(self):
        return self._open and pygame.mixer.get_init() is not None

    def bind(self, name):
        if not self.is_open():
            raise ContextBindingError(name, "audio context is not open")
        idx = self._bound
        try:
            if pygame.mixer.get_num_channels() < idx + 1:
                pygame.mixer.set_num_channels(idx + 1)
            pygame.mixer.set_reserved(idx + 1)
            channel = pygame.mixer.Channel(idx)
        except pygame.error as e:
            raise ContextBindingError(name, str(e)) from e
        self._bound += 1
        return channel

    def __enter__(self):
        return self.open()

    def __exit__(self, *exc):
        self.close()


class Stream:
    """One fully decoded clip on its own channel. Replays never re-decode."""

    def __init__(self, name, sound, channel):
        self.name = name
        self.sound = sound
        self.channel = channel

    def play(self, loops=0):
        self.channel.play(self.sound, loops)

    def rewind(self):
        self.channel.stop()
        self.play()

    def stop(self):
        self.channel.stop()

    def is_playing(self):
        return bool(self.channel.get_busy())

    def get_length(self):
        return self.sound.get_length()

    def __repr__(self):
        return f"Stream({self.name!r}, {self.get_length():.2f}s)"
