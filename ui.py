import logging

import pygame

from config import W, H, BAR_H, BG, BAR_BG, WHITE, GRAY, RED, YELLOW
from controls import Command
from core import GameSession

logger = logging.getLogger(__name__)

BUTTON_W, BUTTON_H = 120, 38
BUTTON_GAP = 16


class DisplayInitError(RuntimeError):
    """The window or fonts could not be created; the game cannot run without them."""


class Fonts:
    def __init__(self, small, font, big):
        self.small = small
        self.font = font
        self.big = big


def create_window(caption="Ramp Pong"):
    try:
        pygame.init()
        screen = pygame.display.set_mode((W, H + BAR_H))
        pygame.display.set_caption(caption)
    except pygame.error as e:
        raise DisplayInitError(f"cannot open a {W}x{H + BAR_H} window: {e}") from e
    logger.info("window %dx%d opened (driver %s)", W, H + BAR_H, pygame.display.get_driver())
    return screen


def load_fonts():
    try:
        return Fonts(
            small=pygame.font.SysFont("consolas", 18),
            font=pygame.font.SysFont("consolas", 26),
            big=pygame.font.SysFont("consolas", 72),
        )
    except pygame.error as e:
        raise DisplayInitError(f"cannot load fonts: {e}") from e


def button_rects():
    """Start, pause and restart buttons, left-aligned in the control bar."""
    y = H + (BAR_H - BUTTON_H) // 2
    rects = {}
    x = BUTTON_GAP
    for cmd in (Command.START, Command.PAUSE, Command.RESTART):
        rects[cmd] = pygame.Rect(x, y, BUTTON_W, BUTTON_H)
        x += BUTTON_W + BUTTON_GAP
    return rects


def hit_test(rects, pos):
    for cmd, rect in rects.items():
        if rect.collidepoint(pos):
            return cmd
    return None


def draw_field(screen, session: GameSession):
    field = pygame.Rect(0, 0, W, H)
    screen.fill(BG, field)
    draw_paddle(screen, session.player)
    draw_paddle(screen, session.bot)
    draw_ball(screen, session.ball)


def draw_paddle(screen, paddle):
    pygame.draw.rect(screen, WHITE, (round(paddle.x), round(paddle.y), round(paddle.width), round(paddle.height)))


def draw_ball(screen, ball):
    pygame.draw.circle(screen, WHITE, (round(ball.pos.x), round(ball.pos.y)), round(ball.r))


def draw_button(screen, font, rect, text, active=False):
    bg = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    bg.fill((255, 255, 255, 26 if not active else 70))
    screen.blit(bg, rect.topleft)
    pygame.draw.rect(screen, WHITE if active else GRAY, rect, 2, border_radius=12)
    surf = font.render(text, True, WHITE if active else (210, 210, 210))
    screen.blit(surf, surf.get_rect(center=rect.center))


def draw_controls(screen, fonts: Fonts, session: GameSession, rects, hover=None):
    screen.fill(BAR_BG, pygame.Rect(0, H, W, BAR_H))
    pygame.draw.line(screen, GRAY, (0, H), (W, H), 2)
    labels = {
        Command.START: "Start",
        Command.PAUSE: session.pause_label,
        Command.RESTART: "Restart",
    }
    for cmd, rect in rects.items():
        draw_button(screen, fonts.small, rect, labels[cmd], active=(cmd is hover))
    t = fonts.font.render(session.time_text, True, WHITE)
    screen.blit(t, t.get_rect(midright=(W - BUTTON_GAP, H + BAR_H // 2)))


def draw_overlay(screen, big, msg, color):
    panel = pygame.Surface((W, H), pygame.SRCALPHA)
    panel.fill((0, 0, 0, 150))
    screen.blit(panel, (0, 0))
    if msg:
        t = big.render(msg, True, color)
        screen.blit(t, t.get_rect(center=(W // 2, H // 2)))


def draw_debug(screen, small, session: GameSession, fps):
    ball = session.ball
    lines = [
        (f"FPS: {fps:5.1f}   state:{session.state.value}   frame:{session.frame}", GRAY),
        (f"BALL  x={ball.pos.x:7.1f} y={ball.pos.y:7.1f}", WHITE),
        (f"      vx={ball.vel.x:+6.2f} vy={ball.vel.y:+6.2f}", WHITE),
        (f"PLYR  x={session.player.x:7.1f}", WHITE),
        (f"BOT   x={session.bot.x:7.1f} move={session.ai.last_move:+d}", WHITE),
    ]
    y = 30
    for text, col in lines:
        surf = small.render(text, True, col)
        screen.blit(surf, (14, y))
        y += 20


def render(screen, fonts: Fonts, session: GameSession, rects, hover=None, fps=0.0, show_debug=False):
    draw_field(screen, session)
    if session.game_over:
        draw_overlay(screen, fonts.big, "Game Over", RED)
    elif session.paused:
        draw_overlay(screen, fonts.big, "Paused", YELLOW)
    if show_debug:
        draw_debug(screen, fonts.small, session, fps)
    draw_controls(screen, fonts, session, rects, hover)
