"""
HeartCatch - pygame renderer.

Draws a SessionSnapshot. All numbers shown come from games.HeartCatch.display.
"""
import math
from typing import Tuple

import pygame

from games.HeartCatch import config, display
from models.heartcatch import SessionPhase, SessionSnapshot

Color = Tuple[int, int, int]


def draw_heart(screen: pygame.Surface, color: Color, center: Tuple[int, int], size: int) -> None:
    """Two circles and a triangle make a heart."""
    cx, cy = center
    r = max(2, size // 2)
    pygame.draw.circle(screen, color, (cx - r // 2 - 1, cy - r // 3), r // 2 + 1)
    pygame.draw.circle(screen, color, (cx + r // 2 + 1, cy - r // 3), r // 2 + 1)
    pygame.draw.polygon(screen, color, [
        (cx - r - 1, cy - r // 4),
        (cx + r + 1, cy - r // 4),
        (cx, cy + r),
    ])


def draw_broken_heart(screen: pygame.Surface, color: Color, center: Tuple[int, int], size: int) -> None:
    draw_heart(screen, color, center, size)
    cx, cy = center
    r = max(2, size // 2)
    pygame.draw.lines(screen, config.BACKGROUND_COLOR, False, [
        (cx, cy - r // 2), (cx - r // 4, cy), (cx + r // 4, cy + r // 4), (cx, cy + r),
    ], 2)


def _draw_pickup(screen: pygame.Surface, kind: str, center: Tuple[int, int], size: int) -> None:
    color = config.POWER_UP_COLORS[kind]
    cx, cy = center
    if kind == 'letter':
        rect = pygame.Rect(0, 0, size, int(size * 0.7))
        rect.center = center
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, config.PLAYFIELD_BORDER_COLOR, rect, 2)
        pygame.draw.lines(screen, config.PLAYFIELD_BORDER_COLOR, False,
                          [rect.topleft, rect.center, rect.topright], 2)
    elif kind == 'magnet':
        pygame.draw.arc(screen, color, pygame.Rect(cx - size // 2, cy - size // 2, size, size),
                        math.pi, 2 * math.pi, 5)
    else:
        pygame.draw.circle(screen, color, center, size // 2)
        pygame.draw.line(screen, (34, 139, 34), (cx, cy + size // 2), (cx, cy + size), 3)


def render_session(screen: pygame.Surface, snapshot: SessionSnapshot) -> None:
    """Render one frame of a session."""
    width, height = screen.get_size()
    field = display.playfield_rect(width, height)
    unit = max(8, field[2] // 25)

    screen.fill(config.BACKGROUND_COLOR)
    pygame.draw.rect(screen, config.PLAYFIELD_BORDER_COLOR, pygame.Rect(field), 2)

    if snapshot.phase == SessionPhase.PLAYING:
        for heart in snapshot.collectibles:
            if heart.y < 0:
                continue
            center = display.to_screen(heart.x, heart.y, field)
            color = config.HEART_COLORS[heart.kind.value]
            if heart.kind.value == 'broken':
                draw_broken_heart(screen, color, center, unit)
            else:
                draw_heart(screen, color, center, unit)

        for pickup in snapshot.pickups:
            if pickup.y < 0:
                continue
            _draw_pickup(screen, pickup.kind.value,
                         display.to_screen(pickup.x, pickup.y, field), unit)

    # Basket
    bx, by = display.to_screen(snapshot.player_x, config.CATCH_BAND[0], field)
    basket_w = int(config.CATCH_RADIUS * 2 / config.FIELD_WIDTH * field[2])
    pygame.draw.rect(screen, config.BASKET_COLOR,
                     pygame.Rect(bx - basket_w // 2, by, basket_w, unit // 2 + 4),
                     border_radius=6)

    _render_hud(screen, snapshot, width)

    banner = display.phase_banner(snapshot)
    if banner:
        font = pygame.font.Font(None, 96 if snapshot.phase == SessionPhase.COUNTDOWN else 64)
        text = font.render(banner, True, config.PLAYFIELD_BORDER_COLOR)
        screen.blit(text, text.get_rect(center=(width // 2, height // 2)))
        if snapshot.phase == SessionPhase.COUNTDOWN:
            hint = pygame.font.Font(None, 32).render(
                "Catch hearts with LEFT / RIGHT!   pink=5  sparkle=10  gift=25  broken=-10",
                True, config.TEXT_COLOR)
            screen.blit(hint, hint.get_rect(center=(width // 2, height // 2 + 70)))


def _render_hud(screen: pygame.Surface, snapshot: SessionSnapshot, width: int) -> None:
    font_large = pygame.font.Font(None, 48)
    font_medium = pygame.font.Font(None, 32)

    score = snapshot.score
    text = font_large.render(f"Love: {score.score}", True, config.TEXT_COLOR)
    screen.blit(text, (20, 20))

    # Love meter
    percent = display.love_meter_percent(score.score)
    meter = pygame.Rect(220, 28, 300, 22)
    pygame.draw.rect(screen, (255, 255, 255), meter)
    fill = meter.copy()
    fill.width = meter.width * percent // 100
    pygame.draw.rect(screen, display.meter_color(percent), fill)
    pygame.draw.rect(screen, config.TEXT_COLOR, meter, 2)

    combo = display.combo_label(score.combo)
    if combo:
        text = font_medium.render(combo, True, config.METER_COLORS['high'])
        screen.blit(text, (540, 28))

    power = display.power_up_label(snapshot.active_power_up, snapshot.now)
    if power:
        text = font_medium.render(power, True, config.BASKET_COLOR)
        screen.blit(text, (700, 28))

    urgent = display.timer_is_urgent(snapshot.time_left)
    text = font_large.render(f"{snapshot.time_left}s", True,
                             config.METER_COLORS['high'] if urgent else config.TEXT_COLOR)
    screen.blit(text, (width - text.get_width() - 20, 20))

    if config.SHOW_DEBUG_HUD:
        debug = pygame.font.Font(None, 20).render(
            f"t={snapshot.now:.2f} hearts={len(snapshot.collectibles)} "
            f"pickups={len(snapshot.pickups)} x={snapshot.player_x:.0f}",
            True, config.TEXT_COLOR)
        screen.blit(debug, (20, 60))
