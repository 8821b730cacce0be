"""
Common constants used across the jsonsalve library.
"""

# Marker shown in place of the offending character when an error sits at
# the very end of the text
END_OF_INPUT = "(end of input)"

# Characters of context kept on each side of an error offset
DEFAULT_CONTEXT_WIDTH = 50

DEFAULT_INDENT_SIZE = 2

# Byte thresholds for human readable sizes
KILOBYTE = 1024
MEGABYTE = 1024 * 1024

# Non-standard constants Python's json module accepts but JSON forbids
NON_STANDARD_CONSTANTS = ("NaN", "Infinity", "-Infinity")
