"""Fixed numeric constants shared by the clip strategies."""

import math

PI = math.pi
HALF_PI = math.pi / 2.0
TAU = 2.0 * math.pi

# Angular tolerance (radians) for date-line and pole tests
EPSILON = 1e-6

DEGREES = 180.0 / math.pi
RADIANS = math.pi / 180.0
