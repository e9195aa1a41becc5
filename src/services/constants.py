"""
Constants shared by the cycle prediction, risk and statistics services.
"""

# Fallback length for cycles without an end date or a declared length
DEFAULT_CYCLE_LENGTH = 28

# Accepted range for the cycle length declared on a profile
MIN_PROFILE_CYCLE_LENGTH = 21
MAX_PROFILE_CYCLE_LENGTH = 35

# Ovulation is assumed a fixed number of days before the next period
LUTEAL_PHASE_DAYS = 14

# Fertile window bounds relative to ovulation (inclusive)
FERTILE_DAYS_BEFORE_OVULATION = 5
FERTILE_DAYS_AFTER_OVULATION = 1

# Inside the fertile window, days from ovulation still counted as high risk
HIGH_RISK_MAX_DAYS_FROM_OVULATION = 1

# Cycle-length samples within this many days of the mean count as regular
REGULARITY_TOLERANCE_DAYS = 2
