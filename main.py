import logging
import sys

import pygame

from config import FPS
from controls import command_for_key
from core import GameSession
from ui import DisplayInitError, create_window, load_fonts, button_rects, hit_test, render

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def handle_event(e, session: GameSession, rects):
    """Route one pygame event. Returns False when the game should quit."""
    if e.type == pygame.QUIT:
        return False
    if e.type == pygame.KEYDOWN:
        if e.key == pygame.K_ESCAPE:
            return False
        if not session.input.key_down(e.key):
            cmd = command_for_key(e.key)
            if cmd is not None:
                session.post(cmd)
    elif e.type == pygame.KEYUP:
        session.input.key_up(e.key)
    elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
        cmd = hit_test(rects, e.pos)
        if cmd is not None:
            session.post(cmd)
    elif e.type == pygame.WINDOWFOCUSLOST:
        session.input.clear()
    return True


def main(session=None):
    screen = create_window()
    fonts = load_fonts()
    clock = pygame.time.Clock()
    session = session if session is not None else GameSession()
    rects = button_rects()
    show_debug = False

    logger.info("ready: click Start or press Enter")
    running = True
    while True:
        for e in pygame.event.get():
            if e.type == pygame.KEYDOWN and e.key == pygame.K_F3:
                show_debug = not show_debug
                continue
            if not handle_event(e, session, rects):
                running = False
                break
        if not running:
            break

        hover = hit_test(rects, pygame.mouse.get_pos())
        render(screen, fonts, session, rects, hover=hover, fps=clock.get_fps(), show_debug=show_debug)
        pygame.display.flip()

        session.tick()
        clock.tick(FPS)

    pygame.quit()
    logger.info("bye")


def run():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    try:
        main()
    except DisplayInitError:
        logger.exception("cannot start the game")
        pygame.quit()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
