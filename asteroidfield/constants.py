"""Game-wide tuning values: window size, radii, spawning, effects and audio paths."""

# Window
WINDOW_WIDTH = 1600
WINDOW_HEIGHT = 1200

# Game object radii
SHIP_RADIUS = 16.0
BULLET_RADIUS = 6.0
WEAPON_PICKUP_RADIUS = 25.0
MIN_ASTEROID_RADIUS = 20.0
ASTEROID_RADIUS_RANGE = 25

# Asteroid generation
INITIAL_ASTEROID_COUNT = 12
MIN_ASTEROID_COUNT = 12
MAX_ASTEROID_SPAWN_OFFSET = 2400
BASE_ASTEROID_SPEED = 2.0
ASTEROID_SPEED_RANGE = 15
ASTEROID_SPEED_DIVISOR = 3.0
ASTEROID_VELOCITY_RANGE = 200
ASTEROID_VELOCITY_DIVISOR = 50.0
ASTEROID_SPAWN_MARGIN = 40
ASTEROID_SPAWN_MIN_X = 20

# Ship
SHIP_START_X = 800.0
SHIP_START_Y = 1160.0

# Bullet
BULLET_VELOCITY_INFLUENCE = 0.5
BULLET_ANGLE_OFFSET = 90.0
BULLET_POSITION_OFFSET = 28.0
BULLET_SCALE_MULTIPLIER = 8.0

# Weapon pickup
WEAPON_SPAWN_INTERVAL = 10.0
WEAPON_SCALE = 2.0
WEAPON_SPAWN_MARGIN = 50
WEAPON_SPAWN_HEIGHT_MIN = 100
WEAPON_SPAWN_HEIGHT_MAX = 1000

# Weapon pickup animation
BOB_SPEED = 3.0
BOB_AMPLITUDE = 10.0
MAX_LIFETIME = 30.0

# Scaling
ASTEROID_SCALE_MULTIPLIER = 2.0

# Math
PI = 3.14159
DEGREES_TO_RADIANS = PI / 180.0

# UI
GAME_OVER_LINE_HEIGHT = 8.0
GAME_OVER_LINE_Y = 1192.0

# Weapon rarity weights
RIFLE_SPAWN_RATE = 45.0
REVOLVER_SPAWN_RATE = 30.0
SHOTGUN_SPAWN_RATE = 15.0
ROCKET_SPAWN_RATE = 7.0
FLAMETHROWER_SPAWN_RATE = 3.0

# Glow effects
GLOW_PULSE_SPEED = 2.0
GLOW_MIN_ALPHA = 0.3
GLOW_MAX_ALPHA = 0.8
GLOW_OUTER_RADIUS = 40.0
GLOW_INNER_RADIUS = 25.0

# Explosions and scoring
EXPLOSION_RADIUS = 400.0
ASTEROID_SCORE_POINTS = 10

# Ship movement
SHIP_ACCELERATION = 0.4
SHIP_FRICTION = 0.92
SHIP_MAX_SPEED = 12.0

# Boundary checks
BOUNDARY_OFFSET = 50.0

# Explosion effects
EXPLOSION_TOTAL_DURATION = 2.0
EXPLOSION_STAGE_THRESHOLD = 0.1
EXPLOSION_PARTICLE_COUNT = 25
EXPLOSION_PARTICLE_MIN_SPEED = 50.0
EXPLOSION_PARTICLE_MAX_SPEED = 200.0
EXPLOSION_PARTICLE_MIN_LIFE = 0.8
EXPLOSION_PARTICLE_MAX_LIFE = 1.5
EXPLOSION_PARTICLE_MIN_SIZE = 1.5
EXPLOSION_PARTICLE_MAX_SIZE = 4.0

# Audio
SOUNDTRACK_PATH = "assets/music/soundtrack.mp3"
LASER_SOUND_PATH = "assets/music/shoot.mp3"
DESTRUCTION_SOUND_PATH = "assets/music/destruction.mp3"
EXPLOSION_SOUND_PATH = "assets/music/explosion.mp3"
DEATH_SOUND_PATH = "assets/music/death.mp3"
DEFAULT_MUSIC_VOLUME = 1.0
DEFAULT_LASER_VOLUME = 1.0
DEFAULT_DESTRUCTION_VOLUME = 1.0
DEFAULT_EXPLOSION_VOLUME = 1.0
DEFAULT_DEATH_VOLUME = 1.0