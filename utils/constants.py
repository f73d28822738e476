"""Grid geometry and editing constants."""

import numpy as np

# Transform grid (must be a power of two)
GRID_SIZE = 512

# ITU-R BT.601 luminance weights (R, G, B)
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)

# Brush limits
BRUSH_RADIUS_MIN = 1
BRUSH_RADIUS_MAX = 50
BRUSH_STRENGTH_MIN = 1.0
BRUSH_STRENGTH_MAX = 5.0

# Mask cells above this weight count as "active"
ACTIVE_THRESHOLD = 0.1

# Preset falloff widths (grid units)
LOW_HIGH_FALLOFF = 20.0
BAND_FALLOFF = 15.0
NOTCH_FALLOFF = 5.0
NOTCH_FEATHER = 10.0

# Stripe-removal presets
STRIPE_OFFSET = 30
STRIPE_NOTCH_RADIUS = 20
