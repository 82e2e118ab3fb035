# --- Arena ---
WIDTH, HEIGHT = 800, 600
FPS = 60

# --- Balls ---
N_BALL = 50           # balls spawned by the desktop app
DEFAULT_BALLS = 2     # balls spawned by a bare World()
MIN_BALL_SIZE = 5
MAX_BALL_SIZE = 15
MIN_BALL_SPEED = 1
MAX_BALL_SPEED = 2
MAX_SPAWN_ATTEMPTS = 10000

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)

BACKGROUND_COLOR = BLACK
HUD_COLOR = WHITE
