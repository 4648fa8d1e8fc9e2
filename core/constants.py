"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.
Anything a designer might want to tweak at runtime is mirrored in
``data/tuning.toml``; the values here are the defaults systems fall back
to when the tuning file is missing a key.

Unit System
-----------
All positions and sizes are in **view pixels** of the fixed 960×540
design surface.  There is no camera: one room fills the view.

    Distance / position     px
    Speed                   px/s
    Time (real)             s   (the host hands us ms, converted once)
    Time (game)             min (game-minutes of the current day)
    Danger                  %   (0 … DANGER_LIMIT)

Game Time Scale
~~~~~~~~~~~~~~~
``GAME_MINUTES_PER_SECOND`` game-minutes pass per real second, so a
full day lasts 1440 / 3 = 480 real seconds (8 minutes).
"""

# ── View ────────────────────────────────────────────────────────────
VIEW_W = 960
VIEW_H = 540

# ── Game-time conversion ────────────────────────────────────────────
MINUTES_PER_DAY: int = 24 * 60
GAME_MINUTES_PER_SECOND: float = 3.0
START_MINUTES: float = 7 * 60 + 30     # 07:30 on day 1
CAUGHT_MINUTES: float = 6 * 60 + 30    # 06:30 after being dragged home
TIME_BUCKET_MINUTES: int = 15          # status refresh granularity

# Wizard schedule: away during [NPC_LEAVES, NPC_RETURNS)
NPC_LEAVES: int = 9 * 60
NPC_RETURNS: int = 15 * 60

# Frame clamp: a stalled frame never advances more than this
MAX_FRAME_MS: float = 120.0

# ── Danger meter ────────────────────────────────────────────────────
DANGER_LIMIT: float = 100.0
DANGER_RISE_RATE: float = 14.0         # %/s while exposed
DANGER_FALL_RATE: float = 20.0         # %/s otherwise
SAFE_ROOM: str = "cottage"

# ── Player ──────────────────────────────────────────────────────────
PLAYER_W = 24
PLAYER_H = 40
PLAYER_SPEED: float = 138.0            # px/s (2.3 px per frame at 60 fps)
STEP_PHASE: float = 0.16               # animation phase per moving tick

# ── Interaction ─────────────────────────────────────────────────────
REACH_MARGIN: float = 14.0             # px added on every side of the player
MESSAGE_LOG_SIZE: int = 14

# ── Render palette (VGA-ish tones) ──────────────────────────────────
PAL = {
    "sky1":   (106, 126, 168),
    "sky2":   (142, 160, 191),
    "grass1": (77, 122, 66),
    "grass2": (111, 150, 76),
    "path1":  (143, 122, 76),
    "path2":  (178, 151, 98),
    "dirt":   (95, 75, 47),
    "wood1":  (108, 74, 42),
    "wood2":  (138, 98, 52),
    "stone1": (108, 108, 105),
    "stone2": (143, 143, 136),
    "water1": (32, 77, 121),
    "water2": (58, 120, 168),
    "candle": (255, 203, 110),
    "shadow": (36, 33, 24),
    "ui_text": (244, 233, 207),
}
