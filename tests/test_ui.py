import pygame
import pytest

import ui
from config import W, H, BAR_H
from controls import Command
from core import GameSession, Vec2
from conftest import FixedRandom


@pytest.fixture(scope="module")
def fonts():
    pygame.init()
    yield ui.load_fonts()
    pygame.quit()


@pytest.fixture
def screen(fonts):
    return pygame.Surface((W, H + BAR_H))


def test_buttons_sit_in_control_bar():
    rects = ui.button_rects()
    assert list(rects) == [Command.START, Command.PAUSE, Command.RESTART]
    for rect in rects.values():
        assert rect.top >= H
        assert rect.bottom <= H + BAR_H
    start, pause, restart = rects.values()
    assert not start.colliderect(pause)
    assert not pause.colliderect(restart)


def test_hit_test():
    rects = ui.button_rects()
    assert ui.hit_test(rects, rects[Command.PAUSE].center) is Command.PAUSE
    assert ui.hit_test(rects, (W // 2, H // 2)) is None


def test_render_draws_ball_and_paddles(screen, fonts):
    session = GameSession(rng=FixedRandom(0.1))
    ui.render(screen, fonts, session, ui.button_rects())
    assert screen.get_at((400, 300))[:3] == (255, 255, 255)
    assert screen.get_at((400, 585))[:3] == (255, 255, 255)
    assert screen.get_at((10, 15))[:3] == (255, 255, 255)
    assert screen.get_at((100, 300))[:3] == (0, 0, 0)


def test_game_over_banner_only_when_over(screen, fonts):
    session = GameSession(rng=FixedRandom(0.1))
    session.start()
    ui.render(screen, fonts, session, ui.button_rects())
    assert screen.get_at((400, 300))[:3] == (255, 255, 255)

    session.ball.pos = Vec2(100, 598)
    session.ball.vel = Vec2(0, 4)
    session.tick()
    assert session.game_over
    ui.render(screen, fonts, session, ui.button_rects())
    # the dark overlay dims the paddle
    assert screen.get_at((400, 585))[:3] != (255, 255, 255)

    session.restart()
    ui.render(screen, fonts, session, ui.button_rects())
    assert screen.get_at((400, 585))[:3] == (255, 255, 255)


def test_debug_overlay_renders(screen, fonts):
    session = GameSession()
    ui.render(screen, fonts, session, ui.button_rects(), fps=59.9, show_debug=True)


def test_create_window_fails_fast(monkeypatch):
    def broken(*args, **kwargs):
        raise pygame.error("no video device")

    monkeypatch.setattr(pygame.display, "set_mode", broken)
    with pytest.raises(ui.DisplayInitError) as exc:
        ui.create_window()
    assert isinstance(exc.value.__cause__, pygame.error)
    pygame.quit()
