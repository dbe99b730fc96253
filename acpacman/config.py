import os

# ── Display ───────────────────────────────────────────────────────────────────
TILE   = 16
COLS   = 28
ROWS   = 31
HUD_H  = 48
WIN_W  = COLS * TILE
WIN_H  = ROWS * TILE + HUD_H + 32
CAPTION = "PAC-MAN"

# ── Audio (mixer pre-init) ────────────────────────────────────────────────────
MIX_FREQ     = 44100
MIX_SIZE     = -16
MIX_CHANNELS = 2
MIX_BUFFER   = 512

# ── Text ──────────────────────────────────────────────────────────────────────
FONT_SIZE = 20

# Colors
BK = (0, 0, 0)
WH = (255, 255, 255)
YL = (255, 255, 0)


# ── Environment overrides (game shell only) ───────────────────────────────────
def env_int(name, default):
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default

def env_flag(name, default=False):
    v = os.getenv(name)
    if v is None: return default
    return v.strip().lower() in ("1", "true", "yes", "on")

FPS       = env_int("PACMAN_FPS", 60)
MUTE      = env_flag("PACMAN_MUTE")
LOG_LEVEL = os.getenv("PACMAN_LOG_LEVEL", "INFO")
