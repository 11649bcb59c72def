"""
File loader for parsing and validating ignore files
"""

from pathlib import Path
from typing import List, Dict, Optional, Tuple
from dataclasses import dataclass, field

from pathspec.patterns import GitWildMatchPattern

from .constants import (
    IGNORE_FILENAME, COMMENT_PREFIX, NEGATION_PREFIX,
    MAX_IGNORE_FILE_SIZE, MAX_PATTERNS_PER_FILE,
)
from ..errors import IgnoreFileNotFound, IgnoreFileUnreadable


@dataclass
class ValidationError:
    """Represents a validation error in an ignore file"""
    line: int
    pattern: str
    message: str


@dataclass
class ValidationWarning:
    """Represents a validation warning in an ignore file"""
    line: int
    pattern: str
    message: str


@dataclass
class IgnoreFileInfo:
    """Information about a loaded ignore file"""
    path: Path
    patterns: List[str]
    valid_patterns: List[str]
    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[ValidationWarning] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """Check if file has no errors"""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if file has warnings"""
        return len(self.warnings) > 0


def parse_line(line: str) -> Optional[str]:
    """
    Reduce one raw ignore file line to its pattern text.

    Returns None for blank lines and comments. Trailing whitespace is
    dropped unless escaped with a backslash.
    """
    line = line.rstrip('\n\r')
    stripped = line.rstrip()
    if stripped.endswith('\\') and len(line) > len(stripped):
        stripped += ' '
    stripped = stripped.lstrip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None
    return stripped


def validate_pattern(pattern: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a single pattern

    Args:
        pattern: Pattern to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        regex, _include = GitWildMatchPattern.pattern_to_regex(pattern)
    except ValueError as e:
        return False, str(e)
    if regex is None:
        return False, "Pattern matches nothing"
    return True, None


class IgnoreFileLoader:
    """
    Handles loading, parsing, and validating ignore files
    """

    def __init__(self, ignore_filename: str = IGNORE_FILENAME):
        """
        Initialize loader

        Args:
            ignore_filename: Name of ignore files to look for
        """
        self.ignore_filename = ignore_filename

    def path_for(self, directory: str) -> Path:
        """Location of the ignore file inside a directory"""
        return Path(directory) / self.ignore_filename

    def load_file(self, file_path: Path) -> IgnoreFileInfo:
        """
        Load and validate an ignore file

        Args:
            file_path: Path to the ignore file

        Returns:
            IgnoreFileInfo with patterns and validation results

        Raises:
            IgnoreFileNotFound: If there is no ignore file at file_path
            IgnoreFileUnreadable: If the file exists but cannot be used
        """
        file_path = Path(file_path)
        info = IgnoreFileInfo(
            path=file_path,
            patterns=[],
            valid_patterns=[],
            stats={
                'total_lines': 0,
                'empty_lines': 0,
                'comment_lines': 0,
                'pattern_lines': 0,
            }
        )

        if not file_path.is_file():
            raise IgnoreFileNotFound(f"No ignore file at {file_path}")

        try:
            file_size = file_path.stat().st_size
        except OSError as e:
            raise IgnoreFileUnreadable(f"Cannot stat {file_path}: {e}") from e

        if file_size > MAX_IGNORE_FILE_SIZE:
            raise IgnoreFileUnreadable(
                f"File too large: {file_path} is {file_size} bytes (max: {MAX_IGNORE_FILE_SIZE})"
            )

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise IgnoreFileUnreadable(f"Error reading {file_path}: {e}") from e

        info.stats['total_lines'] = len(lines)

        for line_num, line in enumerate(lines, 1):
            pattern = parse_line(line)

            if pattern is None:
                if line.strip():
                    info.stats['comment_lines'] += 1
                else:
                    info.stats['empty_lines'] += 1
                continue

            info.stats['pattern_lines'] += 1
            info.patterns.append(pattern)

            is_valid, validation_msg = validate_pattern(pattern)
            if is_valid:
                info.valid_patterns.append(pattern)
            else:
                info.errors.append(ValidationError(
                    line=line_num,
                    pattern=pattern,
                    message=validation_msg or "Invalid pattern"
                ))

            for warning_msg in self._check_pattern_warnings(pattern):
                info.warnings.append(ValidationWarning(
                    line=line_num,
                    pattern=pattern,
                    message=warning_msg
                ))

        if len(info.valid_patterns) > MAX_PATTERNS_PER_FILE:
            info.errors.append(ValidationError(
                line=0,
                pattern="",
                message=f"Too many patterns: {len(info.valid_patterns)} (max: {MAX_PATTERNS_PER_FILE})"
            ))
            info.valid_patterns = info.valid_patterns[:MAX_PATTERNS_PER_FILE]

        return info

    def _check_pattern_warnings(self, pattern: str) -> List[str]:
        """
        Check pattern for potential issues that aren't errors

        Args:
            pattern: Pattern to check

        Returns:
            List of warning messages
        """
        warnings = []
        body = pattern[1:] if pattern.startswith(NEGATION_PREFIX) else pattern

        # Backslashes are escapes in ignore files, not separators
        if '\\' in body and not body.startswith('\\'):
            warnings.append(
                "Pattern contains backslash. Use forward slashes for paths."
            )

        if body in ['*', '**', '**/*']:
            warnings.append(
                "Very broad pattern - will exclude every entry below this directory"
            )

        return warnings
