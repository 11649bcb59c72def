"""
Word-boundary fuzzy matching of search terms against path strings.

The candidate is split into words (runs of alphanumeric characters). The
term's characters must appear in order, and each word can only contribute a
prefix: once a character inside a word fails to match, the rest of that word
is skipped. The term cursor is kept across words, so "fbar" matches
"foo-bar" by taking "f" from "foo" and "bar" from "bar".
"""

from .utils import get_logger

logger = get_logger(__name__)


def matches(candidate: str, term: str, verbose: bool = False) -> bool:
    """
    Check whether term fuzzily matches candidate.

    Args:
        candidate: Path string to test (already case-folded if needed)
        term: Non-empty search term (already case-folded if needed)
        verbose: Log the comparison at DEBUG level

    Returns:
        True as soon as every term character has been consumed
    """
    if not term:
        raise ValueError("Search term must not be empty")

    if verbose:
        logger.debug(f"Matching {candidate} against {term}")

    cursor = 0
    matching_current_word = True

    for char in candidate:
        is_alphanumeric = char.isalnum()
        if not is_alphanumeric:
            # Potentially starting a new word
            matching_current_word = True

        if not matching_current_word:
            continue

        if char == term[cursor]:
            cursor += 1
            if cursor == len(term):
                return True
        elif is_alphanumeric:
            matching_current_word = False

    return False
