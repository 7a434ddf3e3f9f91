"""
Chara engine configuration
"""

import os

# Mahadasha cycles generated when the caller does not ask for a number
DEFAULT_NUMBER_OF_CYCLES = int(os.getenv("CHARA_DEFAULT_CYCLES", "2"))

# Upper bound accepted from callers (each cycle spans up to 144 years)
MAX_NUMBER_OF_CYCLES = int(os.getenv("CHARA_MAX_CYCLES", "10"))

# Deepest tree accepted from callers (3 = pratyantardasha)
MAX_LEVELS = 3

# Logging
LOG_LEVEL = os.getenv("CHARA_LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("CHARA_LOG_JSON", "true").lower() in ("1", "true", "yes")
