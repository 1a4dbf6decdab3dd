"""
Screen renderers for the Valentine app.

Each screen is drawn from an AppSnapshot; the game screen hands its
session snapshot to the HeartCatch renderer.
"""
import math
from typing import Tuple

import pygame

from games.HeartCatch.renderer import draw_heart, draw_broken_heart, render_session
from models import AppSnapshot, Screen
from valentine import config, display

Color = Tuple[int, int, int]


def _blit_centered(screen: pygame.Surface, text: str, size: int, color: Color, y: int) -> int:
    font = pygame.font.Font(None, size)
    surface = font.render(text, True, color)
    rect = surface.get_rect(center=(screen.get_width() // 2, y))
    screen.blit(surface, rect)
    return rect.bottom


def _to_pixels(screen: pygame.Surface, x: float, y: float) -> Tuple[int, int]:
    return int(x / 100.0 * screen.get_width()), int(y / 30.0 * screen.get_height())


def render_proposal(screen: pygame.Surface, snapshot: AppSnapshot) -> None:
    screen.fill(config.BACKGROUND_COLOR)
    for i, (x, y) in enumerate(display.falling_decorations(snapshot.now)):
        draw_heart(screen, (255, 182, 193) if i % 2 else (255, 105, 180),
                   _to_pixels(screen, x, y), 18)

    center_y = screen.get_height() // 2
    scale = display.heartbeat_scale(snapshot.now)
    draw_heart(screen, config.ACCENT_COLOR, (screen.get_width() // 2, center_y - 150),
               int(90 * scale))

    _blit_centered(screen, "Will you be my Valentine?", 72, config.TEXT_COLOR, center_y - 40)

    y = center_y + 40
    for label, description, selected in display.proposal_menu(snapshot.menu_index):
        font = pygame.font.Font(None, 48)
        text = font.render(f"{label}  {description}", True,
                           config.SELECTED_TEXT_COLOR if selected else config.TEXT_COLOR)
        rect = text.get_rect(center=(screen.get_width() // 2, y))
        if selected:
            pygame.draw.rect(screen, config.ACCENT_COLOR, rect.inflate(40, 16), border_radius=10)
        screen.blit(text, rect)
        y += 64

    _blit_centered(screen, "UP/DOWN to choose, ENTER to answer, Q to quit", 28,
                   config.MUTED_TEXT_COLOR, screen.get_height() - 30)


def render_no(screen: pygame.Surface, snapshot: AppSnapshot) -> None:
    screen.fill(config.NO_BACKGROUND_COLOR)
    for x, y in display.falling_decorations(snapshot.now, count=30, speed=8.0):
        px, py = _to_pixels(screen, x, y)
        pygame.draw.line(screen, (120, 140, 200), (px, py), (px, py + 14), 2)

    center_y = screen.get_height() // 2
    draw_broken_heart(screen, (102, 102, 102), (screen.get_width() // 2, center_y - 120), 90)
    _blit_centered(screen, "Oh no...", 72, (230, 230, 250), center_y)
    _blit_centered(screen, "Maybe you pressed the wrong button?", 36, (200, 200, 220), center_y + 60)
    remaining = display.no_screen_remaining(snapshot.screen_since, snapshot.now)
    _blit_centered(screen, f"Asking again in {math.ceil(remaining)}...", 28,
                   (150, 150, 180), center_y + 110)


def render_celebration(screen: pygame.Surface, snapshot: AppSnapshot) -> None:
    screen.fill(config.CELEBRATION_BACKGROUND_COLOR)
    width = screen.get_width()
    for i in range(8):
        frame = display.firework_frame(snapshot.now, i)
        cx = int(width * (0.1 + i * 0.1))
        cy = 60 + (i * 37) % 120
        radius = 8 + frame * 10
        color = ((255, 215, 0), (255, 105, 180), (220, 20, 60), (156, 39, 176))[i % 4]
        for k in range(8):
            angle = k * math.pi / 4
            end = (cx + int(math.cos(angle) * radius), cy + int(math.sin(angle) * radius))
            pygame.draw.line(screen, color, (cx, cy), end, 2)

    center_y = screen.get_height() // 2
    draw_heart(screen, config.ACCENT_COLOR, (width // 2, center_y - 60),
               int(110 * display.heartbeat_scale(snapshot.now)))
    _blit_centered(screen, display.outcome_title(snapshot.last_final_score), 72,
                   config.ACCENT_COLOR, center_y + 60)
    _blit_centered(screen, display.outcome_message(snapshot.last_final_score), 36,
                   config.TEXT_COLOR, center_y + 120)
    _blit_centered(screen, "Press Q to quit", 28, config.MUTED_TEXT_COLOR,
                   screen.get_height() - 30)


def render_gameover(screen: pygame.Surface, snapshot: AppSnapshot) -> None:
    screen.fill(config.GAMEOVER_BACKGROUND_COLOR)
    center_y = screen.get_height() // 2
    _blit_centered(screen, display.outcome_title(snapshot.last_final_score), 64,
                   (205, 133, 63), center_y - 80)
    _blit_centered(screen, display.outcome_message(snapshot.last_final_score), 36,
                   config.MUTED_TEXT_COLOR, center_y - 20)
    for i in range(3):
        draw_broken_heart(screen, config.MUTED_TEXT_COLOR,
                          (screen.get_width() // 2 + (i - 1) * 60, center_y + 50), 36)
    if snapshot.retry_ready:
        _blit_centered(screen, "Press ENTER to try again", 40, (205, 133, 63), center_y + 120)
    _blit_centered(screen, "Or press Q to quit", 28, (92, 64, 51), center_y + 170)


def render_app(screen: pygame.Surface, snapshot: AppSnapshot) -> None:
    """Draw whichever screen the snapshot says is showing."""
    if snapshot.screen == Screen.PROPOSAL:
        render_proposal(screen, snapshot)
    elif snapshot.screen == Screen.NO:
        render_no(screen, snapshot)
    elif snapshot.screen == Screen.GAME and snapshot.session is not None:
        render_session(screen, snapshot.session)
    elif snapshot.celebrating:
        render_celebration(screen, snapshot)
    else:
        render_gameover(screen, snapshot)


def open_display(resolution: Tuple[int, int], fullscreen: bool, caption: str) -> pygame.Surface:
    """Open the window (or the whole screen) the launchers draw into."""
    if fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode(resolution)
    pygame.display.set_caption(caption)
    return screen
