"""
Column names and coding tables for the lung-cancer survey dataset.
"""

AGE = "age"
GENDER = "gender"
OUTCOME = "lung_cancer"

# Explicit level orderings. Do not rely on alphabetical factor levels.
GENDER_CODES = {"F": 0, "M": 1}
OUTCOME_CODES = {"NO": 0, "YES": 1}
CATEGORICAL_CODES = {GENDER: GENDER_CODES, OUTCOME: OUTCOME_CODES}

# Survey answers are 1 = no, 2 = yes.
ORDINAL_LEVELS = (1, 2)

SURVEY_INDICATORS = [
    "smoking",
    "yellow_fingers",
    "anxiety",
    "peer_pressure",
    "chronic_disease",
    "fatigue",
    "allergy",
    "wheezing",
    "alcohol_consuming",
    "coughing",
    "shortness_of_breath",
    "swallowing_difficulty",
    "chest_pain",
]

DEFAULT_BINS = 10
DEFAULT_INTERACTION = (AGE, "smoking")
DEFAULT_ALPHA = 0.05
VIF_THRESHOLD = 10.0
LOWESS_FRAC = 2.0 / 3.0
