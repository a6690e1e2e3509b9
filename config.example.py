# config.example.py
# Configuration template for rmprint
# Copy this file to config.py, adjust it, and pass it with --config config.py
# Any setting left out falls back to its default.

# ============================================================================
# DEBUG CALLS
# ============================================================================

# Calls removed when they stand alone as a statement.
# Bare names ("print") match `print(...)`; dotted rules ("pprint.pprint")
# match the qualifier exactly as written - aliases are NOT resolved, so
# `import pprint as pp; pp.pprint(x)` is kept unless "pp.pprint" is listed.
DEBUG_CALLS = [
    "print",
    "logging.debug",
    "pprint.pprint",
    "pprint.pp",
    "pprint.pformat",     # Returns a string; only removed as a bare statement
    # "sys.stdout.write",
    # "ic",               # icecream
]

# ============================================================================
# COMMENTED-OUT CODE
# ============================================================================

# Remove comment lines that contain commented-out debug calls
SCRUB_COMMENTS = True

# Substrings that mark a comment line for removal.
# Default: one "name(" marker per DEBUG_CALLS entry, e.g. "print(".
# Note this is a plain text match: a comment that merely mentions
# "print(" in prose is removed too.
# COMMENT_MARKERS = ["print(", "pprint.pprint(", "logging.debug("]

# ============================================================================
# OUTPUT
# ============================================================================

# Longest run of blank lines kept after cleaning.
# 1 collapses every gap to a single blank line; use 2 to keep PEP 8
# spacing between top-level definitions.
MAX_BLANK_LINES = 1

# ============================================================================
# DIRECTORY WALKING
# ============================================================================

# Directory names skipped when a directory is given on the command line
SKIP_DIRS = [
    ".git", ".hg", ".svn",
    ".venv", "venv",
    "__pycache__", "node_modules",
    ".tox", ".nox", ".mypy_cache", ".pytest_cache",
    "build", "dist", ".eggs",
]
