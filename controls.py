"""Keyboard state and control commands.

Key events only flip flags here; the session reads the flags once per tick.
Button clicks and shortcut keys become ``Command`` values that the session
queues and applies on the next tick boundary.
"""
import enum
import logging

from config import LEFT_KEYS, RIGHT_KEYS, START_KEYS, PAUSE_KEYS, RESTART_KEYS

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    START = "start"
    PAUSE = "pause"
    RESTART = "restart"


KEY_COMMANDS = {}
for _key in START_KEYS:
    KEY_COMMANDS[_key] = Command.START
for _key in PAUSE_KEYS:
    KEY_COMMANDS[_key] = Command.PAUSE
for _key in RESTART_KEYS:
    KEY_COMMANDS[_key] = Command.RESTART


def command_for_key(key):
    return KEY_COMMANDS.get(key)


class InputState:
    __slots__ = ("left", "right")

    def __init__(self):
        self.left = False
        self.right = False

    def key_down(self, key) -> bool:
        """Mark a movement key as held. Returns True if the key is recognised."""
        return self._set(key, True)

    def key_up(self, key) -> bool:
        return self._set(key, False)

    def _set(self, key, pressed):
        if key in LEFT_KEYS:
            self.left = pressed
        elif key in RIGHT_KEYS:
            self.right = pressed
        else:
            return False
        logger.debug("key %s %s", key, "down" if pressed else "up")
        return True

    def clear(self):
        self.left = False
        self.right = False

    def direction(self) -> int:
        """-1, 0 or +1; both held cancel out."""
        return int(self.right) - int(self.left)
