"""
Dragonboat Constants

Fixed numbers shared by the layout generator, the balance engine and the
assignment state.
"""

# =============================================================================
# BALANCE
# =============================================================================

# Left/right tolerance band in percentage points. A boat whose port share
# exceeds its starboard share by more than this is "Port heavy" (and vice
# versa). Fixed, not user-configurable.
BALANCE_TOLERANCE_PCT = 3.0

# Floor for the largest seat moment when normalizing the leverage heatmap.
MOMENT_EPSILON = 1e-6

# Ratio reported for each side when nobody sits on either side.
EVEN_SPLIT_PCT = 50.0


# =============================================================================
# LAYOUT
# =============================================================================

DEFAULT_NUM_ROWS = 10
MIN_NUM_ROWS = 4
MAX_NUM_ROWS = 13
DEFAULT_ROW_SPACING = 1.0

DRUMMER_SEAT_ID = "drummer"
STEER_SEAT_ID = "steer"
ALTERNATE_SEAT_PREFIX = "alternate"

# Reserve positions carried by every lineup
DEFAULT_NUM_ALTERNATES = 4


# =============================================================================
# UNITS
# =============================================================================

KG_TO_LB = 2.20462262185
