"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LOCALE = "en_US"

# Compiled patterns kept by the parser cache.
PATTERN_CACHE_SIZE = 256

# Two-digit years ("yy") resolve into [TWO_DIGIT_YEAR_BASE, TWO_DIGIT_YEAR_BASE + 99].
TWO_DIGIT_YEAR_BASE = 2000

MICROSECONDS_PER_MINUTE = 60_000_000

# Longest digit run accepted for a year field
MAX_YEAR_DIGITS = 19
