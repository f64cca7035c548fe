"""Dimensions, speeds and rules of the pong table."""

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
TABLE_WIDTH = 432
TABLE_HEIGHT = 243
PADDLE_WIDTH = 5
PADDLE_HEIGHT = 20
PADDLE_X_OFFSET = 10
PADDLE_Y_OFFSET = 30
PADDLE_SPEED = 200
BALL_SIZE = 4
MID_LINE_WIDTH = 2
FPS = 60.0
IA_PLAYER_1 = True
IA_PLAYER_2 = True
MAX_POINTS = 5

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)