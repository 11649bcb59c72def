"""
Immutable rule sets for hierarchical ignore handling

A RuleSet is an ordered tuple of compiled rules. Extending a RuleSet with a
newly discovered ignore file returns a new RuleSet holding the parent's
rules followed by the new ones; the parent is never modified, so directories
still referring to it keep their results.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Tuple, TYPE_CHECKING

from pathspec.patterns import GitWildMatchPattern

from .constants import DEFAULT_EXCLUSIONS, NEGATION_PREFIX
from .file_loader import IgnoreFileLoader
from ..errors import IgnoreFileUnreadable, MalformedPatternError
from ..paths import relative_to_base
from ..utils import get_logger

if TYPE_CHECKING:
    from ..config import SearchConfig

logger = get_logger(__name__)


@dataclass(frozen=True)
class IgnoreRule:
    """A single compiled ignore pattern"""
    pattern: str
    base: str
    regex: re.Pattern = field(compare=False, repr=False)
    negated: bool = False
    dir_only: bool = False
    anchored: bool = False

    @classmethod
    def compile(cls, pattern: str, base: str = "", insensitive: bool = False) -> 'IgnoreRule':
        """
        Compile one pattern line

        Args:
            pattern: Pattern text as read from the ignore file
            base: Directory holding the ignore file, relative to the search root
            insensitive: Compile for case-insensitive matching

        Raises:
            MalformedPatternError: If the pattern cannot be compiled
        """
        try:
            regex, include = GitWildMatchPattern.pattern_to_regex(pattern)
        except ValueError as e:
            raise MalformedPatternError(pattern, str(e)) from e
        if regex is None:
            raise MalformedPatternError(pattern, "pattern matches nothing")

        body = pattern[1:] if pattern.startswith(NEGATION_PREFIX) else pattern
        dir_only = body.endswith('/')
        anchored = '/' in body.rstrip('/')

        flags = re.IGNORECASE if insensitive else 0
        try:
            compiled = re.compile(regex, flags)
        except re.error as e:
            raise MalformedPatternError(pattern, str(e)) from e

        return cls(
            pattern=pattern,
            base=base,
            regex=compiled,
            negated=not include,
            dir_only=dir_only,
            anchored=anchored,
        )

    def matches(self, path: str, is_directory: bool) -> bool:
        """
        Check a normalized path (relative to the search root) against this rule
        """
        relative = relative_to_base(path, self.base)
        if not relative:
            return False
        # Directories carry a trailing slash so dir-only regexes can see them
        if is_directory:
            relative += '/'
        return self.regex.match(relative) is not None


@dataclass(frozen=True)
class RuleSet:
    """Ordered, immutable collection of ignore rules"""
    rules: Tuple[IgnoreRule, ...] = ()
    sources: Tuple[Path, ...] = ()

    @classmethod
    def new_default(cls, config: Optional['SearchConfig'] = None) -> 'RuleSet':
        """
        Rule set used at the search root before any ignore file is read

        Holds the built-in version control exclusions (unless disabled)
        followed by any extra patterns from the configuration.
        """
        insensitive = config.insensitive if config else False
        patterns = []
        if config is None or config.use_defaults:
            patterns.extend(DEFAULT_EXCLUSIONS)
        if config is not None:
            patterns.extend(config.extra_patterns)
        return cls(rules=tuple(_compile_all(patterns, "", insensitive)))

    def extend(self, ignore_file_path, config: Optional['SearchConfig'] = None,
               base: str = "") -> 'RuleSet':
        """
        Build a child rule set from an ignore file

        Args:
            ignore_file_path: Path of the ignore file to read
            config: Search configuration (case sensitivity, filename)
            base: Directory holding the ignore file, relative to the search root

        Returns:
            A new RuleSet with this set's rules followed by the file's rules,
            or self when the file contributes nothing usable

        Raises:
            IgnoreFileNotFound: If the ignore file does not exist
        """
        insensitive = config.insensitive if config else False
        loader = IgnoreFileLoader(Path(ignore_file_path).name)

        try:
            info = loader.load_file(Path(ignore_file_path))
        except IgnoreFileUnreadable as e:
            logger.debug(f"Skipping ignore file: {e}")
            return self

        for error in info.errors:
            logger.debug(f"{info.path}:{error.line}: {error.message}")
        for warning in info.warnings:
            logger.debug(f"{info.path}:{warning.line}: {warning.message}")

        new_rules = tuple(_compile_all(info.valid_patterns, base, insensitive))
        if not new_rules:
            return self

        logger.debug(f"Loaded {len(new_rules)} patterns from {info.path}")
        return RuleSet(
            rules=self.rules + new_rules,
            sources=self.sources + (info.path,),
        )

    def is_excluded(self, path: str, is_directory: bool,
                    config: Optional['SearchConfig'] = None) -> bool:
        """
        Decide whether a path is excluded

        The last rule matching the path decides; a negated rule re-includes.
        Paths no rule matches are not excluded.

        Args:
            path: Normalized path relative to the search root
            is_directory: Whether the path names a directory
            config: Unused; case sensitivity is fixed when rules are compiled
        """
        rule = self.match(path, is_directory)
        if rule is None:
            return False
        return not rule.negated

    def match(self, path: str, is_directory: bool) -> Optional[IgnoreRule]:
        """Return the rule that decides path, if any"""
        for rule in reversed(self.rules):
            if rule.matches(path, is_directory):
                return rule
        return None

    @property
    def patterns(self) -> Tuple[str, ...]:
        """Raw pattern text in precedence order"""
        return tuple(rule.pattern for rule in self.rules)

    def __len__(self) -> int:
        return len(self.rules)


def _compile_all(patterns: Iterable[str], base: str, insensitive: bool) -> Iterable[IgnoreRule]:
    for pattern in patterns:
        try:
            yield IgnoreRule.compile(pattern, base, insensitive)
        except MalformedPatternError as e:
            logger.debug(f"Skipping {e}")
