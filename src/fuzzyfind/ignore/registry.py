"""
Registry of rule sets created during one traversal
"""

from typing import Dict, List, Optional, TYPE_CHECKING

from .constants import IGNORE_FILENAME
from .file_loader import IgnoreFileLoader
from .rule_set import RuleSet
from ..errors import IgnoreFileNotFound
from ..utils import get_logger

if TYPE_CHECKING:
    from ..config import SearchConfig

logger = get_logger(__name__)


class RuleSetRegistry:
    """
    Append-only arena of rule sets addressed by index

    Directories waiting on the traversal stack hold an index rather than the
    rule set itself. Entries are never replaced or removed, so an index stays
    valid for the whole run.
    """

    def __init__(self, config: Optional['SearchConfig'] = None,
                 root_rule_set: Optional[RuleSet] = None):
        """
        Initialize registry

        Args:
            config: Search configuration
            root_rule_set: Rule set stored at index 0 (defaults to RuleSet.new_default)
        """
        self.config = config
        self.ignore_filename = config.ignore_filename if config else IGNORE_FILENAME
        self._loader = IgnoreFileLoader(self.ignore_filename)
        if root_rule_set is None:
            root_rule_set = RuleSet.new_default(config)
        self._rule_sets: List[RuleSet] = [root_rule_set]

    def __getitem__(self, index: int) -> RuleSet:
        return self._rule_sets[index]

    def __len__(self) -> int:
        return len(self._rule_sets)

    def add(self, rule_set: RuleSet) -> int:
        """Append a rule set and return its index"""
        self._rule_sets.append(rule_set)
        return len(self._rule_sets) - 1

    def extend(self, index: int, directory: str, base: str = "") -> int:
        """
        Apply the ignore file in a directory on top of an existing rule set

        Args:
            index: Index of the inherited rule set
            directory: Filesystem path of the directory being processed
            base: The directory relative to the search root

        Returns:
            Index of the rule set to use for the directory; the inherited
            index when the directory has no usable ignore file
        """
        ignore_path = self._loader.path_for(directory)
        parent = self._rule_sets[index]
        try:
            child = parent.extend(ignore_path, self.config, base)
        except IgnoreFileNotFound:
            return index

        if child is parent:
            return index

        logger.debug(f"Found a {self.ignore_filename}: {directory}")
        return self.add(child)

    def get_stats(self) -> Dict[str, int]:
        """
        Get registry statistics

        Returns:
            Dictionary with registry stats
        """
        return {
            'rule_sets': len(self._rule_sets),
            # Every entry after the root came from exactly one ignore file
            'ignore_files': len(self._rule_sets) - 1,
            'max_rules': max(len(rs) for rs in self._rule_sets),
        }
