"""
Directory traversal driving the rule engine and the matcher
"""

import os
import sys
from dataclasses import dataclass, asdict
from typing import Iterator, List, Optional, TextIO

from .config import SearchConfig
from .errors import UserInputError, RootNotReadable, InvalidPathEncoding
from .ignore import RuleSetRegistry
from .matcher import matches
from .paths import normalize_path, join_relative, fold_case, ensure_text
from .utils import get_logger

logger = get_logger(__name__)


@dataclass
class PendingDirectory:
    """A directory waiting to be listed, with the rule set it inherits"""
    path: str
    relative: str
    rule_index: int


@dataclass
class FindStats:
    """Counters collected during one search"""
    directories: int = 0
    entries: int = 0
    excluded: int = 0
    matches: int = 0
    skipped: int = 0
    ignore_files: int = 0


class Finder:
    """
    Depth-first search of a directory tree for fuzzily matching paths

    Pending directories live on an explicit stack. Each one carries the index
    of its rule set in the registry; a directory with its own ignore file gets
    a new rule set appended and passes the new index to its children.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.registry: Optional[RuleSetRegistry] = None
        self.stats = FindStats()

    def prepare_term(self, term: str) -> str:
        """
        Validate and case-fold the search term

        Raises:
            UserInputError: If the term is empty
        """
        if not term:
            raise UserInputError("No valid input given.")
        return fold_case(term, self.config.insensitive)

    def iter_matches(self, term: str) -> Iterator[str]:
        """
        Yield every path under the root matching term

        Raises:
            UserInputError: If the term is empty (before any filesystem access)
            RootNotReadable: If the root is not a readable directory
        """
        logger.debug(f"Looking for: {term}, insensitive: {self.config.insensitive}")
        search = self.prepare_term(term)

        root = self.config.root
        if not os.path.isdir(root):
            raise RootNotReadable(f"Cannot search {root}: not a readable directory")

        self.stats = FindStats()
        self.registry = RuleSetRegistry(self.config)
        stack: List[PendingDirectory] = [PendingDirectory(root, "", 0)]

        while stack:
            current = stack.pop()
            yield from self._process_directory(current, search, stack)

        self.stats.ignore_files = self.registry.get_stats()['ignore_files']
        logger.debug(f"Search finished: {asdict(self.stats)}")

    def run(self, term: str, out: Optional[TextIO] = None) -> int:
        """
        Print every matching path, one per line

        Returns:
            Number of paths printed
        """
        out = out or sys.stdout
        count = 0
        for path in self.iter_matches(term):
            print(path, file=out)
            count += 1
        return count

    def _process_directory(self, current: PendingDirectory, search: str,
                           stack: List[PendingDirectory]) -> Iterator[str]:
        self.stats.directories += 1
        rule_index = self.registry.extend(current.rule_index, current.path, current.relative)
        rule_set = self.registry[rule_index]
        display_root = self.config.display_root

        try:
            with os.scandir(current.path) as it:
                entries = list(it)
        except OSError as e:
            if not current.relative:
                raise RootNotReadable(f"Cannot search {current.path}: {e.strerror or e}") from e
            logger.debug(f"Skipping unreadable directory {current.path}: {e}")
            self.stats.skipped += 1
            return

        for entry in entries:
            self.stats.entries += 1
            try:
                name = ensure_text(entry.name)
                is_dir = entry.is_dir()
            except InvalidPathEncoding as e:
                logger.debug(str(e))
                self.stats.skipped += 1
                continue
            except OSError as e:
                logger.debug(f"Skipping {entry.path}: {e}")
                self.stats.skipped += 1
                continue

            relative = join_relative(current.relative, name)
            if rule_set.is_excluded(relative, is_dir, self.config):
                self.stats.excluded += 1
                continue

            # Only the part below the root is matched; the root prefix is for output
            candidate = fold_case(relative, self.config.insensitive)
            if matches(candidate, search, self.config.verbose):
                self.stats.matches += 1
                yield normalize_path(join_relative(display_root, relative))

            if is_dir:
                stack.append(PendingDirectory(entry.path, relative, rule_index))


def find(term: str, config: Optional[SearchConfig] = None,
         out: Optional[TextIO] = None) -> int:
    """Search with a fresh Finder and print matches; returns the match count"""
    return Finder(config).run(term, out)
