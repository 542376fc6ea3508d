"""
Centralized constants for the csvsniff package.
"""

# ==============================================================================
# LOGGING
# ==============================================================================
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# ==============================================================================
# STAGE 1: NEWLINE DETECTION
# ==============================================================================
# Declaration order doubles as the tie-break order.
NEWLINE_CANDIDATES = ["\r\n", "\n\r", "\n", "\r"]
NEWLINE_MIN_LINES = 5

# ==============================================================================
# STAGE 2: QUOTE / DELIMITER GUESSING
# ==============================================================================
QUOTE_CHARS = ("'", '"')

ASCII_TABLE_SIZE = 127
CONSISTENCY_START = 1.0
CONSISTENCY_STEP = 0.01
CONSISTENCY_FLOOR = 0.8
PREFERRED_DELIMITERS = [",", "\t", ";", " ", ":", "|"]

# ==============================================================================
# STAGE 3: PARSING
# ==============================================================================
ESCAPE_CHAR = "\\"

# ==============================================================================
# STAGE 4: HEADER VOTING
# ==============================================================================
HEADER_TYPE_MISMATCH_VOTE = 2
HEADER_LENGTH_TOLERANCE = 2

# ==============================================================================
# DATAFRAME
# ==============================================================================
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# ==============================================================================
# CLI
# ==============================================================================
SNIFF_SAMPLE_SIZE = 64 * 1024
PREVIEW_ROWS = 5
