from dataclasses import dataclass

import pygame

W, H = 800, 600
BAR_H = 60

BG = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (235, 70, 70)
GRAY = (130, 130, 130)
YELLOW = (245, 220, 80)
BAR_BG = (18, 20, 24)

FPS = 60

PLAYER_PADDLE_W = 100
AI_PADDLE_W = 850
PADDLE_H = 10
PLAYER_Y_OFFSET = 20
AI_Y = 10

BALL_R = 10
BALL_START_SPEED = 4.0
MAX_SPEED = 8.0
SPEED_INCREASE = 0.2
HIT_NUDGE = 0.2

PLAYER_STEP = 8
AI_STEP = 4
AI_DEAD_ZONE = 4

CLOCK_FRAMES = 60
RAMP_FRAMES = 120
RESYNC_ON_RESUME = True

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
PAUSE_KEYS = (pygame.K_SPACE, pygame.K_p)
RESTART_KEYS = (pygame.K_r,)


@dataclass(frozen=True)
class Settings:
    width: int = W
    height: int = H
    player_paddle_w: float = PLAYER_PADDLE_W
    ai_paddle_w: float = AI_PADDLE_W
    paddle_h: float = PADDLE_H
    player_y_offset: float = PLAYER_Y_OFFSET
    ai_y: float = AI_Y
    ball_r: float = BALL_R
    ball_start_speed: float = BALL_START_SPEED
    max_speed: float = MAX_SPEED
    speed_increase: float = SPEED_INCREASE
    hit_nudge: float = HIT_NUDGE
    player_step: float = PLAYER_STEP
    ai_step: float = AI_STEP
    ai_dead_zone: float = AI_DEAD_ZONE
    clock_frames: int = CLOCK_FRAMES
    ramp_frames: int = RAMP_FRAMES
    resync_on_resume: bool = RESYNC_ON_RESUME

    def __post_init__(self):
        for name in ("width", "height", "player_paddle_w", "ai_paddle_w", "paddle_h", "ball_r"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        for name in ("clock_frames", "ramp_frames"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1 frame, got {getattr(self, name)!r}")


DEFAULT_SETTINGS = Settings()
