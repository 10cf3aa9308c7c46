import enum
import logging
import random
from collections import deque
from dataclasses import dataclass

from ai import OpponentAI
from config import DEFAULT_SETTINGS, Settings
from controls import Command, InputState

logger = logging.getLogger(__name__)


class Vec2:
    __slots__ = ("x", "y")
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)
    def __add__(self, o): return Vec2(self.x + o.x, self.y + o.y)
    def __eq__(self, o): return isinstance(o, Vec2) and self.x == o.x and self.y == o.y
    def __repr__(self): return f"Vec2({self.x!r}, {self.y!r})"
    def copy(self): return Vec2(self.x, self.y)


@dataclass
class Paddle:
    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self):
        return self.x + self.width / 2

    def spans(self, x):
        return self.x <= x <= self.x + self.width

    def clamp_to(self, surface_w):
        self.x = clamp(self.x, 0.0, surface_w - self.width)


@dataclass
class Ball:
    pos: Vec2
    vel: Vec2
    r: float

    @property
    def top(self):
        return self.pos.y - self.r

    @property
    def bottom(self):
        return self.pos.y + self.r


class SessionState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


def clamp(v, a, b):
    # lower bound wins when the range is empty
    return max(a, min(b, v))


def nudge(v, amount):
    """Push a velocity component ``amount`` further from zero (0 goes negative)."""
    return v + amount if v > 0 else v - amount


def ramp_speed(v, inc, max_speed):
    sign = 1.0 if v > 0 else -1.0
    return sign * min(abs(v) + inc, max_speed)


def format_time(total_seconds):
    minutes, seconds = divmod(int(total_seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


def player_paddle(s: Settings):
    return Paddle(s.width / 2 - s.player_paddle_w / 2, s.height - s.player_y_offset, s.player_paddle_w, s.paddle_h)


def ai_paddle(s: Settings):
    p = Paddle(s.width / 2 - s.ai_paddle_w / 2, s.ai_y, s.ai_paddle_w, s.paddle_h)
    p.clamp_to(s.width)
    return p


def reset_round(ball: Ball, player: Paddle, bot: Paddle, s: Settings):
    player.x = s.width / 2 - s.player_paddle_w / 2
    bot.x = s.width / 2 - s.ai_paddle_w / 2
    bot.clamp_to(s.width)
    ball.pos = Vec2(s.width / 2, s.height / 2)
    ball.vel = Vec2(s.ball_start_speed, -s.ball_start_speed)


def serve(ball: Ball, s: Settings, rng=random):
    # always up, left or right at random
    vx = s.ball_start_speed if rng.random() < 0.5 else -s.ball_start_speed
    ball.vel = Vec2(vx, -s.ball_start_speed)


def wall_collide_ball(ball: Ball, surface_w):
    if ball.pos.x + ball.r > surface_w or ball.pos.x - ball.r < 0:
        ball.vel.x = -ball.vel.x
        return True
    return False


def hits_player(ball: Ball, player: Paddle):
    return ball.bottom >= player.y and player.spans(ball.pos.x)


def hits_bot(ball: Ball, bot: Paddle):
    return ball.top <= bot.y + bot.height and bot.spans(ball.pos.x)


def out_of_bounds(ball: Ball, surface_h):
    return ball.pos.y < 0 or ball.pos.y > surface_h


class GameSession:
    """Owns the whole game: entities, state machine, clock and speed ramp.

    ``tick()`` is the only scheduler entry point. It first applies queued
    commands, then advances the simulation one frame if the game is running.
    The elapsed-time clock and the speed ramp are derived from the frame
    counter instead of separate timers.
    """

    def __init__(self, settings: Settings = DEFAULT_SETTINGS, ai=None, rng=None):
        self.settings = settings
        self.rng = rng if rng is not None else random.Random()
        self.ai = ai if ai is not None else OpponentAI(settings.ai_step, settings.ai_dead_zone)
        self.input = InputState()
        self.commands = deque()

        self.player = player_paddle(settings)
        self.bot = ai_paddle(settings)
        self.ball = Ball(Vec2(settings.width / 2, settings.height / 2),
                         Vec2(settings.ball_start_speed, -settings.ball_start_speed),
                         settings.ball_r)
        self.state = SessionState.IDLE
        self.elapsed_seconds = 0
        self.frame = 0

    # -- derived display values --

    @property
    def running(self):
        return self.state is SessionState.RUNNING

    @property
    def paused(self):
        return self.state is SessionState.PAUSED

    @property
    def game_over(self):
        return self.state is SessionState.OVER

    @property
    def in_progress(self):
        return self.state in (SessionState.RUNNING, SessionState.PAUSED)

    @property
    def pause_label(self):
        return "Resume" if self.paused else "Pause"

    @property
    def time_text(self):
        return f"Time: {format_time(self.elapsed_seconds)}"

    # -- commands --

    def post(self, command):
        if not isinstance(command, Command):
            raise TypeError(f"expected a Command, got {command!r}")
        self.commands.append(command)

    def dispatch(self, command):
        if command is Command.START:
            self.start()
        elif command is Command.PAUSE:
            self.toggle_pause()
        elif command is Command.RESTART:
            self.restart()

    def _drain_commands(self):
        while self.commands:
            self.dispatch(self.commands.popleft())

    # -- state machine --

    def reset(self):
        reset_round(self.ball, self.player, self.bot, self.settings)
        self.ai.reset()
        self.elapsed_seconds = 0
        self.frame = 0
        self.state = SessionState.IDLE

    def start(self):
        if self.in_progress:
            return False
        self.reset()
        serve(self.ball, self.settings, self.rng)
        self.state = SessionState.RUNNING
        logger.info("game started, ball vx=%+.1f vy=%+.1f", self.ball.vel.x, self.ball.vel.y)
        return True

    def stop(self):
        if self.in_progress:
            logger.info("game stopped after %s", format_time(self.elapsed_seconds))
            self.state = SessionState.IDLE

    def toggle_pause(self):
        if self.state is SessionState.RUNNING:
            self.state = SessionState.PAUSED
            logger.info("game paused at %s", format_time(self.elapsed_seconds))
        elif self.state is SessionState.PAUSED:
            self.state = SessionState.RUNNING
            if self.settings.resync_on_resume:
                self.frame = 0
            logger.info("game resumed")
        else:
            return False
        return True

    def restart(self):
        logger.info("restarting")
        self.stop()
        return self.start()

    def _end(self):
        self.stop()
        self.state = SessionState.OVER
        logger.info("game over at %s, ball y=%.1f", format_time(self.elapsed_seconds), self.ball.pos.y)

    # -- simulation --

    def tick(self):
        self._drain_commands()
        if self.state is not SessionState.RUNNING:
            return
        self.step()
        if self.state is SessionState.RUNNING:
            self._advance_frame()

    def step(self):
        s = self.settings
        ball = self.ball

        self.player.x += self.input.direction() * s.player_step
        self.player.clamp_to(s.width)

        self.ai.update(self.bot, ball, s.width)

        ball.pos = ball.pos + ball.vel

        wall_collide_ball(ball, s.width)

        if hits_player(ball, self.player):
            ball.vel.y = -abs(ball.vel.y)
            ball.vel.x = nudge(ball.vel.x, s.hit_nudge)
            logger.debug("player hit at x=%.1f", ball.pos.x)

        if hits_bot(ball, self.bot):
            ball.vel.y = abs(ball.vel.y)
            ball.vel.x = nudge(ball.vel.x, s.hit_nudge)
            logger.debug("opponent hit at x=%.1f", ball.pos.x)

        if out_of_bounds(ball, s.height):
            self._end()

    def _advance_frame(self):
        s = self.settings
        self.frame += 1
        if self.frame % s.clock_frames == 0:
            self.elapsed_seconds += 1
        if self.frame % s.ramp_frames == 0:
            self.ramp()

    def ramp(self):
        s = self.settings
        v = self.ball.vel
        v.x = ramp_speed(v.x, s.speed_increase, s.max_speed)
        v.y = ramp_speed(v.y, s.speed_increase, s.max_speed)
        logger.debug("speed ramp: vx=%+.2f vy=%+.2f", v.x, v.y)
