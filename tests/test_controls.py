import pygame
import pytest

from controls import Command, InputState, command_for_key


@pytest.mark.parametrize("key", [pygame.K_LEFT, pygame.K_a])
def test_left_keys(key):
    state = InputState()
    assert state.key_down(key)
    assert state.left and not state.right
    assert state.direction() == -1
    assert state.key_up(key)
    assert not state.left
    assert state.direction() == 0


@pytest.mark.parametrize("key", [pygame.K_RIGHT, pygame.K_d])
def test_right_keys(key):
    state = InputState()
    state.key_down(key)
    assert state.right
    assert state.direction() == 1


def test_both_held_cancel():
    state = InputState()
    state.key_down(pygame.K_a)
    state.key_down(pygame.K_RIGHT)
    assert state.direction() == 0


def test_unknown_key_ignored():
    state = InputState()
    assert not state.key_down(pygame.K_x)
    assert not state.left and not state.right


def test_repeated_key_down_is_idempotent():
    state = InputState()
    state.key_down(pygame.K_LEFT)
    state.key_down(pygame.K_LEFT)
    state.key_up(pygame.K_LEFT)
    assert not state.left


def test_clear():
    state = InputState()
    state.key_down(pygame.K_LEFT)
    state.key_down(pygame.K_d)
    state.clear()
    assert state.direction() == 0


def test_shortcut_keys():
    assert command_for_key(pygame.K_RETURN) is Command.START
    assert command_for_key(pygame.K_SPACE) is Command.PAUSE
    assert command_for_key(pygame.K_p) is Command.PAUSE
    assert command_for_key(pygame.K_r) is Command.RESTART
    assert command_for_key(pygame.K_x) is None
