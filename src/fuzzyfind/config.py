"""
Search configuration
"""

import os
from dataclasses import dataclass, field
from typing import List

from .ignore.constants import IGNORE_FILENAME
from .paths import normalize_path

_TRUE_VALUES = ('true', '1', 'yes', 'on')


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class SearchConfig:
    """Options shared by the traversal engine, rule engine and matcher"""
    insensitive: bool = False
    verbose: bool = False
    root: str = "."
    ignore_filename: str = IGNORE_FILENAME
    use_defaults: bool = True

    # Patterns applied at the root after the built-in defaults
    extra_patterns: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate configuration values"""
        if not self.ignore_filename or '/' in self.ignore_filename or os.sep in self.ignore_filename:
            raise ValueError(
                f"Ignore filename must be a bare file name, got {self.ignore_filename!r}"
            )
        self.root = self.root or "."
        self.extra_patterns = list(self.extra_patterns)

    @property
    def display_root(self) -> str:
        """Prefix for printed paths; empty when searching the current directory"""
        return normalize_path(self.root.rstrip('/') or '/')

    @classmethod
    def from_env(cls, **overrides) -> 'SearchConfig':
        """
        Build a config from FUZZYFIND_* environment variables

        Keyword arguments override anything read from the environment.
        """
        values = {
            'ignore_filename': os.environ.get('FUZZYFIND_IGNORE_FILENAME', IGNORE_FILENAME),
            'use_defaults': _env_flag('FUZZYFIND_USE_DEFAULTS', True),
            'insensitive': _env_flag('FUZZYFIND_INSENSITIVE', False),
        }
        values.update(overrides)
        return cls(**values)
