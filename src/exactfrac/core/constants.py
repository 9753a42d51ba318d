import numpy as np

# Numerators, denominators and whole parts are stored as signed 64 bit integers.
INT_MIN: int = int(np.iinfo(np.int64).min)
INT_MAX: int = int(np.iinfo(np.int64).max)

DEFAULT_PRECISION: float = 1.0e-12

# Upper bound on continued fraction terms, applied regardless of the requested precision.
MAX_CONTINUED_FRACTION_ITERATIONS: int = 64
