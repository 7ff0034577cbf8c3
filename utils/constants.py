"""
Constants for overlay decision support.
"""

# Default tolerance for floating-point comparisons
EPSILON = 1e-10

# Envelope safety margins
SAFE_ENV_EXPAND_FACTOR = 3  # Grid cells added around an envelope under a fixed precision model
FLOATING_ENV_EXPAND_FRACTION = 0.1  # Fraction of the smaller envelope side under a floating model

# Relative tolerance for the result area sanity heuristic
AREA_HEURISTIC_TOLERANCE = 0.1

# Appended to the diagnostic label of edges in the result area
RESULT_AREA_LABEL_SUFFIX = " Res"

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
