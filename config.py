"""
TallyUp Calculator Configuration Settings
"""
import os

# Application Settings
APP_NAME = "TallyUp Calculator"
VERSION = "1.0.0"

# Display Settings
MAX_INPUT_LENGTH = 15        # raw characters before switching to exponential notation
MAX_DECIMALS = 10            # decimal places kept by the formatter
EXPONENT_DIGITS = 6          # fractional digits of the exponential mantissa
SCIENTIFIC_UPPER = 1e15      # |value| at or above this is shown in exponential form
SCIENTIFIC_LOWER = 1e-10     # non-zero |value| below this is shown in exponential form
THOUSANDS_SEPARATOR = ","
THOUSANDS_THRESHOLD = 1000

# Arithmetic Settings
SIGNIFICANT_DIGITS = 15

# Sentinel strings shown in place of non-representable results
ERROR_TEXT = "Error"
POSITIVE_INFINITY_TEXT = "Infinity"
NEGATIVE_INFINITY_TEXT = "-Infinity"

# History Settings
MAX_HISTORY_ITEMS = 100
DEFAULT_HISTORY_LIMIT = 10

# Web Portal settings
WEB_HOST = os.getenv("TALLYUP_WEB_HOST", "127.0.0.1")
WEB_PORT = int(os.getenv("TALLYUP_WEB_PORT", "8888"))

# Logging settings
LOG_LEVEL = os.getenv("TALLYUP_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
