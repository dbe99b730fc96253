import logging

import pygame

from . import config
from .assets import load_assets, load_sounds
from .audio import AudioContext
from .data import new_data

log = logging.getLogger(__name__)

MAZE_TOP = config.HUD_H + 8


class Game:
    def __init__(self, screen, assets, sounds=None, audio=None):
        self.screen = screen
        self.assets = assets
        self.sounds = sounds
        self.audio = audio
        self.data = new_data()
        self.clock = pygame.time.Clock()
        self.frame = 0
        self.running = False

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def draw_walls(self, y):
        w = self.assets.walls
        corner, side = (w.active_corner, w.active_side) if self.data.invincible else (w.inactive_corner, w.inactive_side)
        x = 0
        while x < config.WIN_W:
            self.screen.blit(corner, (x, y))
            x += corner.get_width()
            self.screen.blit(side, (x, y))
            x += side.get_width()

    def draw(self):
        a, d = self.assets, self.data
        self.screen.fill(config.BK)
        self.screen.blit(a.skin, (0, 0))

        self.draw_walls(MAZE_TOP)
        x, y = 16, MAZE_TOP + 20
        for spr in (a.characters.pacman,) + a.characters.ghosts():
            self.screen.blit(spr, (x, y))
            x += spr.get_width() + 4
        x, y = 16, y + 72
        for spr in (a.powers.life, a.powers.invincibility):
            self.screen.blit(spr, (x, y))
            x += spr.get_width() + 4
        self.draw_walls(y + 72)

        self.screen.blit(a.arcade_font.render(f"SCORE: {d.score}", config.WH), (10, 10))
        self.screen.blit(a.arcade_font.render(f"LIVES: {d.lives}", config.YL), (config.WIN_W - 130, 10))
        pygame.display.flip()

    def run(self, max_frames=None):
        self.running = True
        if self.sounds is not None:
            self.sounds.beginning.play()
        while self.running:
            self.handle_events()
            self.draw()
            self.clock.tick(config.FPS)
            self.frame += 1
            if max_frames is not None and self.frame >= max_frames:
                break
        self.running = False
        log.debug("stopped after %d frames", self.frame)

    def close(self):
        if self.audio is not None:
            self.audio.close()
        pygame.quit()


def new_game():
    """Open the window and the mixer and load every bundle. AssetError propagates."""
    pygame.mixer.pre_init(config.MIX_FREQ, config.MIX_SIZE, config.MIX_CHANNELS, config.MIX_BUFFER)
    pygame.init()
    pygame.display.set_caption(config.CAPTION)
    screen = pygame.display.set_mode((config.WIN_W, config.WIN_H))

    assets = load_assets()

    audio = sounds = None
    if not config.MUTE:
        try:
            audio = AudioContext().open()
        except pygame.error as e:
            log.warning("no audio device (%s), running muted", e)
        if audio is not None:
            sounds = load_sounds(audio)
    return Game(screen, assets, sounds, audio)
