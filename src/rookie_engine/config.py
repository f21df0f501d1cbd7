VALID_POSITIONS = ("QB", "RB", "WR", "TE")

# Share of the overall score carried by trait grades vs. measurables
POSITION_WEIGHTS = {
    "QB": {"trait": 0.80, "measurables": 0.20},
    "RB": {"trait": 0.55, "measurables": 0.45},
    "WR": {"trait": 0.65, "measurables": 0.35},
    "TE": {"trait": 0.65, "measurables": 0.35},
}

# Record field names as they appear in the rookie dataset
TRAIT_FIELDS = ("iq", "routeRunning", "vision", "ballSkills")
REQUIRED_FIELDS = ("id", "name", "year", "position") + TRAIT_FIELDS

TRAIT_MIN = 0
TRAIT_MAX = 10

# Rookie attribute -> whether a lower raw value is more favorable
MEASURABLES = {
    "height_in": False,
    "weight_lb": False,
    "forty": True,
    "breakout_age": True,
}

# Score used when there is no discriminating signal
NEUTRAL_SCORE = 50.0

RANK_MODES = ("all", "year")
