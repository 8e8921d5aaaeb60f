"""
draw_manager.py
---------------
Procedural renderer for the saloon playfield.

Responsibilities:
- Draw the room (planks, posters, bar, door, floor, chandelier)
- Layer enemies behind / in front of the cover furniture
- Draw feedback particles, the hit flash and the wave banner
- Draw the HUD and the title / game-over overlays

The renderer only reads a SessionSnapshot; it never touches the session.
Nothing is loaded from disk, every shape is a pygame.draw call.
"""

import math

import pygame

from saloon.core.debug.debug_logger import DebugLogger
from saloon.core.runtime.game_settings import Display, Playfield, UIRegions, Debug
from saloon.core.utils.geometry import clamp
from saloon.entities.entity_types import CoverType, ParticleKind
from saloon.scenes.scene_state import SessionMode


# ===========================================================
# Palette
# ===========================================================

GOLD = (255, 215, 0)
TAN = (222, 184, 135)
BLACK = (0, 0, 0)
SKIN = (200, 132, 74)

OUTFITS = (
    {"shirt": (74, 55, 40), "pants": (58, 35, 24), "hat": (44, 24, 16), "band": (139, 0, 0)},
    {"shirt": (30, 58, 30), "pants": (19, 34, 19), "hat": (14, 26, 14), "band": (218, 165, 32)},
    {"shirt": (61, 26, 26), "pants": (43, 16, 16), "hat": (28, 10, 10), "band": (65, 105, 225)},
)

BOTTLE_COLORS = ((46, 123, 68), (139, 26, 26), (218, 165, 32), (26, 58, 122), (107, 58, 107))
BOTTLE_XS = (22, 60, 100, 148, 192, 250, 295, 345, 390, 432)


class SaloonRenderer:
    """Draws one SessionSnapshot onto the logical game surface."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        pygame.font.init()
        self.fonts = {
            "title": pygame.font.SysFont("georgia", 60, bold=True),
            "large": pygame.font.SysFont("georgia", 48, bold=True),
            "medium": pygame.font.SysFont("georgia", 30, bold=True),
            "hud": pygame.font.SysFont("georgia", 22, bold=True),
            "body": pygame.font.SysFont("georgia", 19),
            "small": pygame.font.SysFont("georgia", 14, bold=True),
            "tiny": pygame.font.SysFont("georgia", 12, bold=True),
        }
        self._background = None
        DebugLogger.init_entry("SaloonRenderer")

    # ===========================================================
    # Entry Point
    # ===========================================================

    def draw(self, surface, snapshot):
        """Render a full frame for the snapshot's mode."""
        self._draw_scene(surface, snapshot)

        if snapshot.mode is SessionMode.NOT_STARTED:
            self._draw_intro(surface)
        elif snapshot.mode is SessionMode.ENDED:
            self._draw_game_over(surface, snapshot)
        else:
            self._draw_game(surface, snapshot)

    # ===========================================================
    # Screens
    # ===========================================================

    def _draw_intro(self, surface):
        self._fill_alpha(surface, BLACK, 0.74)
        cx, cy = Display.WIDTH / 2, Display.HEIGHT / 2

        self._text(surface, "SALOON", "title", GOLD, (cx, cy - 110), outline=(61, 31, 0))
        self._text(surface, "SHOOTOUT", "title", GOLD, (cx, cy - 42), outline=(61, 31, 0))
        self._text(surface, "Shoot the outlaws before they shoot you!", "body", TAN, (cx, cy + 10))
        self._text(surface, "Tap enemies  |  6 rounds  |  Tap RELOAD", "body", TAN, (cx, cy + 36))

        self._button(surface, UIRegions.START_BUTTON, "ENTER THE BAR")

    def _draw_game_over(self, surface, snapshot):
        self._fill_alpha(surface, BLACK, 0.76)
        cx, height = Display.WIDTH / 2, Display.HEIGHT

        self._text(surface, "GAME OVER", "large", (204, 17, 17), (cx, height * 0.32), outline=BLACK)
        self._text(surface, f"Score: {snapshot.score}", "medium", GOLD, (cx, height * 0.44))
        self._text(surface, f"Wave:  {snapshot.wave}", "medium", GOLD, (cx, height * 0.52))
        if snapshot.best_score > 0:
            self._text(surface, f"Best: {snapshot.best_score}", "body", TAN, (cx, height * 0.59))

        self._button(surface, UIRegions.RESTART_BUTTON, "PLAY AGAIN")

    def _draw_game(self, surface, snapshot):
        # Painter's order: covered enemies, cover, entering enemies on top
        for enemy in snapshot.covered_enemies:
            self._draw_enemy(surface, enemy, snapshot.time)
        for cover in snapshot.covers:
            self._draw_cover(surface, cover)
        for enemy in snapshot.entering_enemies:
            self._draw_enemy(surface, enemy, snapshot.time)

        self._draw_particles(surface, snapshot.particles)

        if snapshot.hit_flash > 0:
            self._fill_alpha(surface, (200, 0, 0), snapshot.hit_flash * 0.58)

        if snapshot.banner_alpha > 0:
            banner = self._render_text(f"WAVE {snapshot.wave}", "large", GOLD, outline=BLACK)
            banner.set_alpha(round(snapshot.banner_alpha * 255))
            surface.blit(banner, banner.get_rect(center=(Display.WIDTH / 2, Display.HEIGHT / 2)))

        self._draw_hud(surface, snapshot)

        if Debug.HITBOX_VISIBLE:
            for enemy in snapshot.enemies:
                if enemy.hittable:
                    pygame.draw.rect(surface, (0, 255, 0), pygame.Rect(enemy.hitbox), Debug.HITBOX_LINE_WIDTH)

    # ===========================================================
    # Scenery
    # ===========================================================

    def _draw_scene(self, surface, snapshot):
        if self._background is None:
            self._background = self._build_background()
        surface.blit(self._background, (0, 0))
        self._draw_door(surface, snapshot.door_swing)

    def _build_background(self):
        """Static room layers, built once."""
        DebugLogger.trace("Building background cache", category="render")
        width = Display.WIDTH
        bg = pygame.Surface((Display.WIDTH, Display.HEIGHT))

        # Wall planks
        for i in range(9):
            color = (122, 94, 34) if i % 2 == 0 else (107, 80, 24)
            bg.fill(color, (0, i * 52, width, 52))
            bg.fill((74, 53, 14), (0, i * 52 + 50, width, 3))

        for x, y in ((48, 60), (192, 44), (336, 68)):
            self._draw_wanted(bg, x, y)

        # Bar counter and shelf
        bg.fill((139, 69, 19), (0, 300, width, 64))
        bg.fill((160, 86, 42), (0, 300, width, 10))
        bg.fill((92, 46, 8), (0, 357, width, 7))
        bg.fill((107, 58, 16), (0, 278, width, 24))
        self._draw_bottles(bg, 284)

        # Floor boards
        for i in range(10):
            color = (122, 62, 26) if i % 2 == 0 else (107, 52, 21)
            bg.fill(color, (0, 490 + i * 24, width, 24))
            bg.fill((74, 36, 16), (0, 490 + i * 24 + 22, width, 2))

        # Chandelier
        cx = width // 2
        pygame.draw.line(bg, (139, 105, 20), (cx, 0), (cx, 38), 3)
        pygame.draw.circle(bg, (218, 165, 32), (cx, 42), 22)
        pygame.draw.circle(bg, (184, 134, 11), (cx, 42), 14)
        for j in range(-2, 3):
            pygame.draw.circle(bg, (255, 140, 0), (cx + j * 11, 31), 4)
            pygame.draw.circle(bg, GOLD, (cx + j * 11, 28), 2)

        return bg

    def _draw_wanted(self, surface, x, y):
        pygame.draw.rect(surface, (222, 184, 122), (x, y, 62, 82))
        pygame.draw.rect(surface, (122, 69, 16), (x, y, 62, 82), 2)
        self._text(surface, "WANTED", "tiny", (139, 0, 0), (x + 31, y + 10))
        pygame.draw.circle(surface, (200, 160, 112), (x + 31, y + 38), 13)
        surface.fill((44, 24, 16), (x + 17, y + 23, 28, 5))
        surface.fill((44, 24, 16), (x + 20, y + 16, 22, 10))

    def _draw_bottles(self, surface, shelf_y):
        for i, bx in enumerate(BOTTLE_XS):
            color = BOTTLE_COLORS[i % len(BOTTLE_COLORS)]
            surface.fill(color, (bx, shelf_y + 4, 14, 28))
            surface.fill(color, (bx + 4, shelf_y - 2, 6, 8))
            surface.fill(TAN, (bx + 4, shelf_y - 7, 6, 6))

    def _draw_door(self, surface, door_swing):
        """Saloon doors; panels narrow while `door_swing` decays after a spawn."""
        cx, cy = Playfield.DOOR_CX, Playfield.DOOR_CY
        w, h = Playfield.DOOR_W, Playfield.DOOR_H

        pygame.draw.rect(surface, (74, 44, 8), (cx - w / 2 - 4, cy - h / 2 - 4, w + 8, h + 8))
        self._text(surface, "SALOON", "small", GOLD, (cx, cy - h / 2 - 14))
        pygame.draw.rect(surface, (26, 10, 0), (cx - w / 2, cy - h / 2, w, h))

        squeeze = 1 - math.sin(door_swing * math.pi) * 0.35
        panel_w = (w / 2 - 2) * squeeze
        pygame.draw.rect(surface, (139, 69, 19), (cx - 1 - panel_w, cy - h / 2, panel_w, h))
        pygame.draw.rect(surface, (122, 62, 16), (cx + 2, cy - h / 2, panel_w, h))
        pygame.draw.circle(surface, (218, 165, 32), (round(cx - 6 * squeeze), round(cy)), 5)
        pygame.draw.circle(surface, (218, 165, 32), (round(cx + 6 * squeeze), round(cy)), 5)

    def _draw_cover(self, surface, cover):
        if cover.cover_type == CoverType.BARREL:
            self._draw_barrel(surface, cover)
        else:
            self._draw_table(surface, cover)

    def _draw_barrel(self, surface, cover):
        rect = pygame.Rect(cover.rect)
        pygame.draw.ellipse(surface, (139, 69, 19), rect)
        for offset in (-0.4, 0, 0.4):
            ring_y = cover.y + offset * cover.h * 0.35
            ring = pygame.Rect(0, 0, cover.w - 12, 18)
            ring.center = (round(cover.x), round(ring_y))
            pygame.draw.ellipse(surface, (92, 46, 8), ring, 4)

    def _draw_table(self, surface, cover):
        x, y, w, h = cover.rect
        top_h = h * 0.38
        pygame.draw.rect(surface, (139, 105, 20), (x, y, w, top_h))
        pygame.draw.rect(surface, (160, 120, 32), (x, y, w, 5))
        for leg_x in (x + 6, x + w - 19):
            pygame.draw.rect(surface, (107, 74, 16), (leg_x, y + top_h - 2, 13, h - top_h + 2))
        for gx, gy in ((cover.x - 22, y + 12), (cover.x + 12, y + 11)):
            self._circle_alpha(surface, (180, 220, 255), 0.55, (gx, gy), 7)

    # ===========================================================
    # Enemies
    # ===========================================================

    def _draw_enemy(self, surface, enemy, now):
        outfit = OUTFITS[enemy.outfit % len(OUTFITS)]

        # Draw on a scratch surface so a wounded enemy can flicker as a whole
        sprite = pygame.Surface((100, 150), pygame.SRCALPHA)
        ox, oy = 50, 80
        x, y = ox, oy

        pygame.draw.ellipse(sprite, (0, 0, 0, 72), (x - 22, y + 51, 44, 14))

        if enemy.phase == "entering":
            leg = 6 if enemy.walk_frame == 0 else -6
            sprite.fill(outfit["pants"], (x - 10, y + 27, 10, 30))
            sprite.fill(outfit["pants"], (x + 1, y + 27, 10, 30))
            sprite.fill((26, 8, 0), (x - 12 + leg, y + 53, 13, 8))
            sprite.fill((26, 8, 0), (x - 1 - leg, y + 53, 13, 8))

        sprite.fill(outfit["shirt"], (x - 14, y + 6, 28, 28))
        pygame.draw.circle(sprite, SKIN, (x, y - 8), 15)
        pygame.draw.circle(sprite, (17, 17, 17), (x - 5, y - 10), 2)
        pygame.draw.circle(sprite, (17, 17, 17), (x + 5, y - 10), 2)
        pygame.draw.line(sprite, (17, 17, 17), (x - 9, y - 16), (x - 3, y - 13), 2)
        pygame.draw.line(sprite, (17, 17, 17), (x + 3, y - 13), (x + 9, y - 16), 2)
        pygame.draw.ellipse(sprite, (92, 48, 16), (x - 10, y - 4, 10, 6))
        pygame.draw.ellipse(sprite, (92, 48, 16), (x, y - 4, 10, 6))

        # Hat
        sprite.fill(outfit["hat"], (x - 23, y - 20, 46, 7))
        sprite.fill(outfit["hat"], (x - 15, y - 42, 30, 24))
        sprite.fill(outfit["band"], (x - 15, y - 22, 30, 5))

        if enemy.phase in ("warning", "peeking", "shooting"):
            sprite.fill((85, 85, 85), (x - 28, y + 12, 22, 7))
            sprite.fill((51, 51, 51), (x - 38, y + 13, 12, 4))

        if enemy.max_hp > 1:
            for i in range(enemy.max_hp):
                color = (255, 51, 51) if i < enemy.hp else (68, 68, 68)
                pygame.draw.circle(sprite, color, (x - 8 + i * 16, y - 58), 5)

        if enemy.phase == "retreating":
            sprite.set_alpha(round((0.7 + math.sin(now * 20) * 0.3) * 255))

        surface.blit(sprite, (round(enemy.x - ox), round(enemy.y - oy)))

        if enemy.phase == "warning":
            pulse = 0.55 + abs(math.sin(now * 14.3)) * 0.45
            mark = self._render_text("!", "hud", GOLD)
            mark.set_alpha(round(pulse * 255))
            surface.blit(mark, mark.get_rect(center=(enemy.x, enemy.y - 70)))

    # ===========================================================
    # Particles
    # ===========================================================

    def _draw_particles(self, surface, particles):
        for p in particles:
            if p.kind == ParticleKind.BLOOD:
                self._circle_alpha(surface, (139, 0, 0), clamp(p.life / 0.7, 0, 1), (p.x, p.y), 3)

            elif p.kind == ParticleKind.HOLE:
                alpha = clamp(p.life * 0.25, 0, 0.85)
                self._circle_alpha(surface, (17, 17, 17), alpha, (p.x, p.y), 5)
                for a in range(6):
                    angle = a / 6 * math.tau
                    start = (p.x + math.cos(angle) * 5, p.y + math.sin(angle) * 5)
                    end = (p.x + math.cos(angle) * 14, p.y + math.sin(angle) * 14)
                    pygame.draw.line(surface, (34, 34, 34), start, end)

            elif p.kind == ParticleKind.HIT:
                self._circle_alpha(surface, (255, 85, 85), p.life_ratio, (p.x, p.y), 14)

            elif p.kind == ParticleKind.FLASH:
                alpha = min(p.life_ratio, 0.9)
                self._circle_alpha(surface, (255, 238, 136), alpha, (p.x, p.y), 32)
                self._circle_alpha(surface, (255, 255, 255), alpha, (p.x, p.y), 16)

            elif p.kind == ParticleKind.ENEMY_FLASH:
                self._circle_alpha(surface, (255, 187, 68), min(p.life_ratio, 0.85), (p.x, p.y), 12)

    # ===========================================================
    # HUD
    # ===========================================================

    def _draw_hud(self, surface, snapshot):
        width, height = Display.WIDTH, Display.HEIGHT

        score = self._render_text(f"SCORE: {snapshot.score}", "hud", GOLD, outline=BLACK)
        surface.blit(score, score.get_rect(topleft=(12, 14)))
        wave = self._render_text(f"WAVE {snapshot.wave}", "hud", GOLD, outline=BLACK)
        surface.blit(wave, wave.get_rect(topright=(width - 12, 14)))

        for i in range(snapshot.max_lives):
            color = (220, 20, 60) if i < snapshot.lives else (30, 30, 30)
            self._draw_heart(surface, 26 + i * 32, 58, color)

        self._draw_cylinder(surface, snapshot)

        if snapshot.reloading:
            self._fill_rect_alpha(surface, BLACK, 0.55, (width / 2 - 90, height - 94, 180, 38))
            pygame.draw.rect(
                surface, (139, 69, 19),
                (width / 2 - 88, height - 92, 176 * snapshot.reload_progress, 34),
                border_radius=6
            )
            self._text(surface, "RELOADING...", "small", GOLD, (width / 2, height - 75))
        elif snapshot.ammo == 0:
            prompt = self._render_text("TAP TO RELOAD!", "small", (255, 51, 51))
            prompt.set_alpha(round((0.6 + abs(math.sin(snapshot.time * 3.6)) * 0.4) * 255))
            surface.blit(prompt, prompt.get_rect(center=(width / 2, height - 78)))

    def _draw_heart(self, surface, cx, cy, color):
        pygame.draw.circle(surface, color, (cx - 6, cy - 4), 7)
        pygame.draw.circle(surface, color, (cx + 6, cy - 4), 7)
        pygame.draw.polygon(surface, color, ((cx - 13, cy - 2), (cx + 13, cy - 2), (cx, cy + 12)))

    def _draw_cylinder(self, surface, snapshot):
        """Six-shooter ammo readout plus the reload button under it."""
        button = pygame.Rect(UIRegions.RELOAD_BUTTON)
        cx, cy, radius = button.centerx, button.top - 70, 26

        pygame.draw.circle(surface, (34, 34, 34), (cx, cy), radius + 7)
        pygame.draw.circle(surface, (85, 85, 85), (cx, cy), radius + 7, 2)
        for i in range(snapshot.max_ammo):
            angle = i / snapshot.max_ammo * math.tau - math.pi / 2
            chamber = (cx + math.cos(angle) * radius, cy + math.sin(angle) * radius)
            color = GOLD if i < snapshot.ammo else (42, 42, 42)
            pygame.draw.circle(surface, color, chamber, 8)
            pygame.draw.circle(surface, (136, 136, 136), chamber, 8, 1)
        pygame.draw.circle(surface, (153, 153, 153), (cx, cy), 5)

        self._text(surface, f"{snapshot.ammo}/{snapshot.max_ammo}", "tiny", GOLD, (cx, cy + radius + 18))

        fill = (68, 68, 68) if snapshot.ammo == snapshot.max_ammo else (139, 0, 0)
        pygame.draw.rect(surface, fill, button, border_radius=6)
        self._text(surface, "RELOAD", "tiny", GOLD, button.center)

    # ===========================================================
    # Primitives
    # ===========================================================

    def _button(self, surface, region, label):
        rect = pygame.Rect(region)
        pygame.draw.rect(surface, (107, 42, 0), rect.move(2, 4), border_radius=10)
        pygame.draw.rect(surface, (160, 64, 16), rect, border_radius=10)
        pygame.draw.rect(surface, GOLD, rect, 2, border_radius=10)
        self._text(surface, label, "hud", GOLD, rect.center)

    def _render_text(self, text, font_key, color, outline=None):
        font = self.fonts[font_key]
        face = font.render(text, True, color)
        if outline is None:
            return face

        w, h = face.get_size()
        composed = pygame.Surface((w + 4, h + 4), pygame.SRCALPHA)
        edge = font.render(text, True, outline)
        for dx, dy in ((0, 2), (4, 2), (2, 0), (2, 4)):
            composed.blit(edge, (dx, dy))
        composed.blit(face, (2, 2))
        return composed

    def _text(self, surface, text, font_key, color, center, outline=None):
        rendered = self._render_text(text, font_key, color, outline)
        surface.blit(rendered, rendered.get_rect(center=(round(center[0]), round(center[1]))))

    @staticmethod
    def _fill_alpha(surface, color, alpha):
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill((*color, round(clamp(alpha, 0, 1) * 255)))
        surface.blit(overlay, (0, 0))

    @staticmethod
    def _fill_rect_alpha(surface, color, alpha, rect):
        rect = pygame.Rect(rect)
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill((*color, round(clamp(alpha, 0, 1) * 255)))
        surface.blit(overlay, rect.topleft)

    @staticmethod
    def _circle_alpha(surface, color, alpha, center, radius):
        if alpha <= 0:
            return
        size = radius * 2 + 2
        dot = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(dot, (*color, round(clamp(alpha, 0, 1) * 255)), (size // 2, size // 2), radius)
        surface.blit(dot, (round(center[0] - size // 2), round(center[1] - size // 2)))
