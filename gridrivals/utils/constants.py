"""Game configuration constants."""

# Grid dimensions
MAP_WIDTH = 100
MAP_HEIGHT = 100

# Roster
MIN_AGENTS = 2
MAX_AGENTS = 4
HUMAN_SEATS = (0,)  # Agent 0 is human-controlled by convention

# Terrain sampling (cumulative thresholds on one uniform draw)
GRASS_THRESHOLD = 0.60
FOREST_THRESHOLD = 0.75
MOUNTAIN_THRESHOLD = 0.85  # Anything above is water

# Resource placement (grass and forest only)
RESOURCE_PROB = 0.10
GOLD_THRESHOLD = 0.40
FOOD_THRESHOLD = 0.70  # Anything above is weapon

# Starting agent stats
STARTING_GOLD = 0
STARTING_FOOD = 10
STARTING_WEAPON = 1
STARTING_HEALTH = 100

# Combat
ATTACK_WEAPON_FACTOR = 10
DEFENSE_WEAPON_FACTOR = 5
DEFENSE_EXPERIENCE_DIVISOR = 2
COMBAT_EXPERIENCE = 2  # Attacker gain per exchange, win or lose
ELIMINATION_BONUS_EXPERIENCE = 10
PICKUP_EXPERIENCE = 1

# Scripted decision weights
RESOURCE_SCORE = 10
FAVORABLE_FIGHT_SCORE = 20
UNFAVORABLE_FIGHT_SCORE = -20
AGGRESSION_MULTIPLIER = 2

# Drivers
SCRIPTED_TURN_DELAY = 0.5  # Seconds between scripted turns
VIEWPORT_WIDTH = 21
VIEWPORT_HEIGHT = 11

# Testing
RNG_SEED_DEFAULT = 42  # Default seed for testing
