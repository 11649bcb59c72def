"""
fuzzyfind - recursive fuzzy file name search honouring gitignore-style rules
"""

__version__ = "0.3.0"

from .config import SearchConfig
from .errors import FuzzyFindError, UserInputError
from .finder import Finder, find
from .matcher import matches

__all__ = [
    '__version__',
    'SearchConfig',
    'FuzzyFindError',
    'UserInputError',
    'Finder',
    'find',
    'matches',
]
