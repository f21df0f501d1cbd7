VALUED_POSITIONS = ("QB", "RB", "WR", "TE", "K", "DEF", "PICK")

# Positions ranked into depth charts for scarcity
SCARCITY_POSITIONS = ("QB", "RB", "WR", "TE")

# Positions whose value does not move with age
AGELESS_POSITIONS = {"K", "DEF", "PICK"}

PEAK_AGES = {"QB": 30, "RB": 25, "TE": 27}
DEFAULT_PEAK_AGE = 26

# (max years relative to peak, multiplier); older than the last step is late career
AGE_CURVE = (
    (-5, 1.10),   # very young, high upside
    (-3, 1.075),  # entering prime
    (-1, 1.04),   # near prime
    (2, 1.0),     # in prime
    (4, 0.88),    # starting decline
    (6, 0.72),    # declining
)
LATE_CAREER_MULTIPLIER = 0.55

# Scarcity by depth-chart rank
ELITE_RANK = 5
ELITE_MULTIPLIER = 1.15
STARTER_RANK = 10
STARTER_MULTIPLIER = 1.08
UPPER_HALF_MULTIPLIER = 1.04
BELOW_REPLACEMENT_MULTIPLIER = 0.92
DEEP_BENCH_MULTIPLIER = 0.85
DEFAULT_REPLACEMENT_RANK = 12

# (min years of control, multiplier); dynasty format only
CONTRACT_STEPS = ((4, 1.1), (3, 1.05), (2, 1.0))
SHORT_CONTRACT_MULTIPLIER = 0.9
DEFAULT_CONTRACT_YEARS = 2

# QB format adjustment is measured against the 1QB multiplier
QB_BASELINE_MULTIPLIER = 0.85

# Draft picks
PICK_YEARLY_DISCOUNT = 0.9
PICK_ROUND_MULTIPLIERS = {1: 1.0, 2: 0.5, 3: 0.25}
LATE_ROUND_PICK_MULTIPLIER = 0.15
PICK_CONFIDENCE = 95

# (max ranking standard deviation, confidence)
CONFIDENCE_STEPS = ((2, 95), (5, 85), (10, 75), (20, 65))
MIN_CONFIDENCE = 55

# Strategy multipliers
REBUILDER_PICK_MULTIPLIER = 1.15
CONTENDER_PICK_MULTIPLIER = 0.9

# Max boost from a desperate positional need
NEEDS_WEIGHT = 0.2

# Fairness bands: |fairness - 50| thresholds
FAIR_BAND = 5
SLIGHT_BAND = 12

# Age gap (years) before the younger side gets a rebuilding note
YOUTH_GAP_YEARS = 3
