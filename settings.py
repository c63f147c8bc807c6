# settings.py

# World
MAP_SIZE = 20
TILE_SIZE = 32
FOV_RADIUS = 3

# Window / display
HUD_HEIGHT = 56
WINDOW_WIDTH = MAP_SIZE * TILE_SIZE
WINDOW_HEIGHT = MAP_SIZE * TILE_SIZE + HUD_HEIGHT
FPS = 60
TICKS_PER_SECOND = 8
# Ticks a single slow frame may catch up on
MAX_TICKS_PER_UPDATE = 2
TITLE = "Dungeon Dash"

# Map generation odds (rolled per cell, later rules override earlier ones)
WALL_CHANCE = 0.10
COIN_CHANCE = 0.05
KEY_CHANCE = 0.02
DOOR_CHANCE = 0.02

# Player / enemies
PLAYER_START = (1, 1)
PLAYER_START_HEALTH = 3
ENEMY_SPAWNS = ((15, 15),)
ENEMY_DAMAGE = 1

# Scoring
COIN_VALUE = 10
WIN_SCORE = 100

# Colors
COLOR_BG = (0, 0, 0)
COLOR_FOG = (0, 0, 0)
COLOR_FLOOR = (68, 68, 68)
COLOR_WALL = (153, 153, 153)
COLOR_COIN = (255, 215, 0)
COLOR_KEY = (173, 216, 230)
COLOR_DOOR = (165, 42, 42)
COLOR_PLAYER = (0, 255, 0)
COLOR_ENEMY = (255, 0, 0)
COLOR_HUD_BG = (20, 20, 26)
COLOR_HUD_TEXT = (230, 230, 220)

# Audio
ASSETS_DIR = "assets"
SOUND_VOLUME = 0.3

# Save
SAVE_KEY = "dungeonGameSave"
