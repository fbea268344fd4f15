# settings.py
# Central place for constants so the game feel can be tweaked safely.
#
# Everything below is measured per FRAME, not per second. The simulation
# advances one fixed step per rendered frame, so changing FPS changes the
# game speed. Re-tune the physics numbers if you ever switch to dt-scaling.

# Window / render
WINDOW_WIDTH = 960
WINDOW_HEIGHT = 540
FPS = 60

# World
WORLD_WIDTH = 5000
GROUND_Y = 450
GRAVITY = 0.8             # units per frame^2

# Player
PLAYER_WIDTH = 32
PLAYER_HEIGHT = 58
PLAYER_START_X = 120
PLAYER_SPEED = 4.2        # units per frame
JUMP_SPEED = 13.5         # upward impulse
RESPAWN_FRAMES = 45
RESPAWN_MIN_X = 60        # respawned player never starts left of this
RESPAWN_CAMERA_OFFSET = 50

# Combat
BULLET_WIDTH = 10
BULLET_HEIGHT = 4
BULLET_SPEED = 8.5
BULLET_Y_OFFSET = 22      # from the player's top edge
BULLET_BACK_OFFSET = 8    # bullet spawn distance behind the left edge when facing left
BULLET_CULL_MARGIN = 80   # bullets leaving the view by more than this are dropped
SHOOT_COOLDOWN_FRAMES = 12
KILL_SCORE = 100

# Mega blast (area clear)
MEGA_COOLDOWN_FRAMES = 600
MEGA_FLASH_FRAMES = 10
MEGA_MARGIN = 10

# Enemies
ENEMY_WIDTH = 34
ENEMY_HEIGHT = 48
ENEMY_MIN_SPEED = 1.2
ENEMY_SPEED_RANGE = 1.2   # speed is MIN..MIN+RANGE, always walking left
ENEMY_SPAWN_MARGIN = 80   # distance past the right edge of the view
ENEMY_SPAWN_JITTER = 300
ENEMY_SPAWN_EDGE = 40     # keep spawns this far from the world's right edge
ENEMY_CULL_MARGIN = 100
SPAWN_MIN_FRAMES = 40
SPAWN_MAX_FRAMES = 74

# Camera
CAMERA_LEAD = 0.35        # player sits at 35% of the view width

# Player name / save data
MAX_PLAYER_NAME = 20
DEFAULT_PLAYER_NAME = "Player"
PLAYER_NAME_KEY = "jungle_gun_player_name_v1"
HIGH_SCORE_KEY = "jungle_gun_high_score_v1"
SAVE_FILE = "save.json"
