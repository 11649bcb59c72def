"""
Central configuration for ignore file processing
"""

# Name of the ignore file looked up in every directory
IGNORE_FILENAME = ".gitignore"

# Built-in exclusions applied at the search root before any ignore file.
# Version control metadata only; everything else comes from ignore files.
DEFAULT_EXCLUSIONS = [
    ".git/",
    ".svn/",
    ".hg/",
    ".bzr/",
]

COMMENT_PREFIX = "#"
NEGATION_PREFIX = "!"

# Limits for security and performance
MAX_IGNORE_FILE_SIZE = 1024 * 1024  # 1MB
MAX_PATTERNS_PER_FILE = 10000
