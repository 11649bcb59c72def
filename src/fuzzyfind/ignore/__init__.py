"""
Ignore file processing for fuzzyfind

This package provides hierarchical gitignore-style exclusion:
- Ignore files discovered at every directory level
- Immutable rule sets extended per directory, never rewritten
- Last-match-wins precedence with negation support
"""

from .constants import IGNORE_FILENAME, DEFAULT_EXCLUSIONS
from .file_loader import IgnoreFileLoader, IgnoreFileInfo
from .rule_set import IgnoreRule, RuleSet
from .registry import RuleSetRegistry

__all__ = [
    'IGNORE_FILENAME',
    'DEFAULT_EXCLUSIONS',
    'IgnoreFileLoader',
    'IgnoreFileInfo',
    'IgnoreRule',
    'RuleSet',
    'RuleSetRegistry',
]
