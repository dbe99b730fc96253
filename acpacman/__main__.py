import logging
import sys

import pygame

from . import config
from .errors import AssetError
from .game import new_game
from .logger import setup_logging

log = logging.getLogger("acpacman")


def main():
    setup_logging(config.LOG_LEVEL)
    log.info("starting")
    try:
        game = new_game()
    except AssetError:
        # Every bundle field is required; there is no fallback art or sound
        log.exception("failed to load game assets")
        pygame.quit()
        return 1

    try:
        game.run()
    finally:
        game.close()
    log.info("bye")
    return 0


if __name__ == "__main__":
    sys.exit(main())
