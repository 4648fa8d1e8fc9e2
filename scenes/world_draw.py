"""scenes/world_draw.py — Rendering helpers for the world scene.

All pure-draw functions live here so that WorldScene.draw() stays thin.
Every function receives the data it needs as parameters — no implicit
coupling to the scene object beyond what is explicitly passed.

Room art is code-rendered in two layers:

    backdrop  static, painted once per room ``scene`` key and cached
    props     state-dependent bits (gate colour, spellbook) drawn per frame
"""

from __future__ import annotations
import pygame
from core.app import App
from core.constants import VIEW_W, VIEW_H, PAL
from components import StoryFlags, MessageLog
from logic.interact import nearby_interactable
from logic.quests import objective_text
from logic import status


# ── Primitives ─────────────────────────────────────────────────────

def _col(c) -> pygame.Color:
    """Palette key, '#rrggbb' string or RGB tuple → Color."""
    if isinstance(c, str) and c in PAL:
        return pygame.Color(*PAL[c])
    if isinstance(c, str):
        return pygame.Color(c)
    return pygame.Color(*c)


def px_rect(surface: pygame.Surface, x, y, w, h, c):
    pygame.draw.rect(surface, _col(c), (round(x), round(y), round(w), round(h)))


def dither_rect(surface: pygame.Surface, x, y, w, h, ca, cb, step: int = 4):
    """Checkerboard fill, the VGA stand-in for a gradient."""
    a, b = _col(ca), _col(cb)
    for yy in range(int(y), int(y + h), step):
        for xx in range(int(x), int(x + w), step):
            colour = a if ((xx + yy) // step) % 2 else b
            pygame.draw.rect(surface, colour, (xx, yy, step, step))


def fill_alpha(surface: pygame.Surface, rgba: tuple, rect=None):
    """Blend a translucent rectangle (whole surface by default)."""
    x, y, w, h = rect if rect else (0, 0, *surface.get_size())
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill(rgba)
    surface.blit(overlay, (x, y))


def sky_ground(surface: pygame.Surface, sky1, sky2, ground1, ground2):
    top, bottom = _col(sky1), _col(sky2)
    sky_h = int(VIEW_H * 0.52)
    for y in range(sky_h):
        t = min(1.0, y / (VIEW_H * 0.5))
        pygame.draw.line(surface, top.lerp(bottom, t), (0, y), (VIEW_W, y))
    dither_rect(surface, 0, VIEW_H // 2, VIEW_W, VIEW_H // 2, ground1, ground2, 6)


# ── Room backdrops ─────────────────────────────────────────────────

def _paint_yard(s: pygame.Surface):
    sky_ground(s, "sky1", "sky2", "grass1", "grass2")
    dither_rect(s, 260, 190, 430, 320, "path1", "path2", 8)
    px_rect(s, 0, 390, 240, 150, "water1")
    dither_rect(s, 8, 400, 220, 130, "water1", "water2", 8)
    # cottage
    px_rect(s, 40, 92, 250, 160, "stone2")
    px_rect(s, 24, 62, 284, 56, "wood2")
    px_rect(s, 126, 152, 58, 92, "wood1")
    # well
    px_rect(s, 390, 255, 130, 74, "stone2")
    px_rect(s, 420, 218, 70, 46, "wood2")
    # manor road gate
    px_rect(s, 760, 68, 140, 88, "stone1")
    px_rect(s, 790, 92, 80, 56, "wood1")
    # garden, woodpile, cart
    px_rect(s, 590, 246, 230, 142, "dirt")
    px_rect(s, 730, 370, 145, 68, "wood2")
    px_rect(s, 910, 450, 125, 65, "wood1")


def _paint_cottage(s: pygame.Surface):
    sky_ground(s, "#3e2e21", "#5b4029", "#6f4b2f", "#8b6138")
    dither_rect(s, 80, 90, 800, 390, "#9a7443", "#6e4e30", 8)
    px_rect(s, 160, 90, 220, 90, "wood1")
    px_rect(s, 590, 90, 220, 90, "wood1")
    px_rect(s, 640, 206, 95, 74, "shadow")
    px_rect(s, 220, 204, 44, 30, "#dbc59d")
    px_rect(s, 760, 312, 68, 92, "stone2")
    px_rect(s, 388, 522, 184, 18, "wood2")


def _paint_forest(s: pygame.Surface):
    sky_ground(s, "#4f6a6f", "#6a8b7d", "#3f6634", "#547c41")
    dither_rect(s, 260, 0, 420, 540, "path1", "path2", 8)
    px_rect(s, 430, 12, 100, 60, "stone2")
    px_rect(s, 118, 60, 126, 150, "#30522f")
    px_rect(s, 426, 90, 146, 150, "#315733")
    px_rect(s, 708, 86, 146, 168, "#355f35")
    px_rect(s, 500, 355, 64, 42, "wood2")


def _paint_beach(s: pygame.Surface):
    sky_ground(s, "#6888a9", "#8fb6d1", "#c0a573", "#d7bf88")
    dither_rect(s, 0, 38, VIEW_W, 205, "water1", "water2", 8)
    px_rect(s, 610, 368, 122, 92, "stone1")
    px_rect(s, 220, 398, 94, 30, "wood1")


def _paint_cliff(s: pygame.Surface):
    sky_ground(s, "#6f7d91", "#94a2b1", "#8a7c65", "#a3947a")
    px_rect(s, 0, 340, 220, 200, "water1")
    px_rect(s, 260, 80, 220, 160, "stone1")
    px_rect(s, 580, 300, 280, 180, "stone1")
    px_rect(s, 318, 252, 110, 62, "stone2")
    px_rect(s, 760, 258, 38, 48, "#8fae64")


def _paint_ruins(s: pygame.Surface):
    sky_ground(s, "#62736f", "#7f8d84", "#687457", "#7d8a66")
    px_rect(s, 110, 80, 220, 140, "stone1")
    px_rect(s, 630, 90, 220, 140, "stone1")
    px_rect(s, 380, 120, 190, 90, "stone2")
    px_rect(s, 160, 250, 130, 70, "stone2")
    px_rect(s, 445, 278, 66, 50, "dirt")


def _paint_manor(s: pygame.Surface):
    sky_ground(s, "#5f7285", "#7f95a8", "#738252", "#86965d")
    px_rect(s, 660, 80, 250, 360, "stone1")
    px_rect(s, 620, 220, 40, 220, "stone2")
    px_rect(s, 740, 166, 12, 22, "stone2")


def _paint_tower(s: pygame.Surface):
    sky_ground(s, "#50495f", "#6b6078", "#5b5263", "#70657c")
    px_rect(s, 120, 120, 220, 120, "#47414d")
    px_rect(s, 620, 130, 220, 120, "#4f4655")
    px_rect(s, 458, 184, 68, 48, "wood1")


BACKDROPS = {
    "yard": _paint_yard,
    "cottage": _paint_cottage,
    "forest": _paint_forest,
    "beach": _paint_beach,
    "cliff_pass": _paint_cliff,
    "ruins": _paint_ruins,
    "manor_gate": _paint_manor,
    "tower": _paint_tower,
}


def paint_backdrop(scene_key: str) -> pygame.Surface:
    """Render a room's static art to a fresh view-sized surface."""
    surf = pygame.Surface((VIEW_W, VIEW_H))
    painter = BACKDROPS.get(scene_key)
    if painter is None:
        sky_ground(surf, "sky1", "sky2", "grass1", "grass2")
    else:
        painter(surf)
    return surf


def draw_room_props(surface: pygame.Surface, world, scene_key: str):
    """State-dependent room details drawn over the cached backdrop."""
    flags = world.res(StoryFlags) or StoryFlags()
    if scene_key == "manor_gate":
        px_rect(surface, 690, 120, 160, 120,
                "#657a66" if flags.gate_unlocked else "shadow")
        px_rect(surface, 700, 50, 140, 30,
                "stone2" if flags.gate_unlocked else "wood1")
    elif scene_key == "tower":
        if not status.holds(world, "spellbook"):
            px_rect(surface, 470, 190, 45, 34, "#d0b06d")


# ── Player sprite ──────────────────────────────────────────────────

def draw_player(surface: pygame.Surface, world, box_w: float, box_h: float):
    pose = status.player_pose(world)
    if pose is None:
        return
    px, py, facing, step = pose
    t = int(step) % 2
    # pseudo-perspective: sprites lower on screen are drawn larger
    y_ratio = max(0.0, min(1.0, py / VIEW_H))
    scale = 0.76 + y_ratio * 0.45
    w = round(24 * scale)
    h = round(40 * scale)
    x = round(px + box_w / 2 - w / 2)
    y = round(py + box_h - h + 2)

    fill_alpha(surface, (0, 0, 0, 90), (x + 5, y + h - 4, max(1, w - 10), 4))
    px_rect(surface, x + 6, y + 4, w - 12, 10, "#e6c69c")
    px_rect(surface, x + 4, y + 14, w - 8, h - 16, "#6c4a2a")
    px_rect(surface, x + 3 + t, y + h - 8, 7, 8, "#3d2a19")
    px_rect(surface, x + w - 10 - t, y + h - 8, 7, 8, "#3d2a19")

    if facing == "left":
        px_rect(surface, x - 2, y + 20, 6, 8, "#8f5e37")
    elif facing == "right":
        px_rect(surface, x + w - 4, y + 20, 6, 8, "#8f5e37")
    elif facing == "up":
        px_rect(surface, x + 8, y + 2, w - 16, 3, "#5b3f27")
    else:
        px_rect(surface, x + 8, y + h - 2, w - 16, 3, "#5b3f27")


# ── Overlays ───────────────────────────────────────────────────────

def draw_time_overlay(surface: pygame.Surface, tints):
    for rgba in tints:
        fill_alpha(surface, rgba)


def draw_interaction_hint(surface: pygame.Surface, app: App):
    obj = nearby_interactable(app.world)
    if obj is None:
        return
    fill_alpha(surface, (12, 10, 8, 190), (18, 18, 350, 34))
    app.draw_text(surface, f"Press E: {obj.label}", 28, 26, PAL["ui_text"])


def draw_hud(surface: pygame.Surface, app: App):
    world = app.world
    sw = surface.get_width()
    text = PAL["ui_text"]
    font = app.font_sm

    lines = [
        status.room_name(world),
        status.clock_text(world),
        f"Manannan: {status.npc_status_text(world)}",
        status.danger_text(world),
    ]
    y = 10
    for line in lines:
        app.draw_text_bg(surface, line, sw - 300, y, text, font=font)
        y += 18

    app.draw_text_bg(surface, f"Goal: {objective_text(world)}", 20, 60,
                     (255, 220, 150), font=font)

    labels = status.inventory_labels(world)
    inv = ", ".join(labels) if labels else "(empty)"
    app.draw_text_bg(surface, f"Items: {inv}", 20, VIEW_H - 28, text, font=font)


def draw_message_log(surface: pygame.Surface, app: App, count: int = 4):
    log = app.world.res(MessageLog)
    if log is None:
        return
    y = VIEW_H - 50
    for i, line in enumerate(log.recent(count)):
        shade = max(110, 244 - i * 40)
        app.draw_text_bg(surface, line, 20, y, (shade, shade, shade - 20),
                         font=app.font_sm)
        y -= 18


def draw_win_banner(surface: pygame.Surface, app: App):
    flags = app.world.res(StoryFlags)
    if flags is None or not flags.won:
        return
    fill_alpha(surface, (0, 0, 0, 115), (210, 220, 540, 110))
    app.draw_text(surface, "The Spellbook Is Yours", 290, 240, PAL["ui_text"],
                  font=app.font_lg)
    app.draw_text(surface, "Slip away before Manannan returns.", 320, 290,
                  PAL["ui_text"])
