from config import AI_STEP, AI_DEAD_ZONE


class OpponentAI:
    """Moves the top paddle a fixed step toward the ball's x each tick.

    Inside the dead-zone the paddle holds still so it does not jitter
    around the ball.
    """

    def __init__(self, step=AI_STEP, dead_zone=AI_DEAD_ZONE):
        self.step = step
        self.dead_zone = dead_zone
        self.last_move = 0

    def reset(self):
        self.last_move = 0

    def decide(self, paddle_center, ball_x):
        if paddle_center - ball_x > self.dead_zone:
            return -1
        if ball_x - paddle_center > self.dead_zone:
            return 1
        return 0

    def update(self, bot, ball, surface_w):
        self.last_move = self.decide(bot.center_x, ball.pos.x)
        bot.x += self.last_move * self.step
        bot.clamp_to(surface_w)
        return self.last_move
