import logging
import sys
from collections import Counter

from text_helpers import trim

log = logging.getLogger(__name__)


def load_counts(input_filepath):
    """
    Reads the purchase log line by line and counts the occurrences of each item.

    Each line is trimmed and blank lines are skipped. Item names are kept exactly
    as they appear after trimming, so "Apples" and "apples" are two items.
    Lines end at "\n" only, and bytes that are not valid UTF-8 are carried
    through as surrogate escapes instead of stopping the load.

    Args:
        input_filepath (str | Path): Path to the purchase log (one item per line).

    Returns:
        dict: item name -> count, ordered by item name.
    """
    item_counts = Counter()

    log.info(f"Reading purchase log: {input_filepath}")
    try:
        with open(input_filepath, 'r', encoding='utf-8', errors='surrogateescape', newline='\n') as infile:
            for i, line in enumerate(infile):
                item = trim(line)
                if not item:
                    log.debug(f"Skipping blank line {i + 1}")
                    continue
                item_counts[item] += 1
    except FileNotFoundError:
        log.critical(f"Could not open {input_filepath}: file not found.")
        sys.exit(1)
    except OSError as e:
        log.critical(f"Could not read {input_filepath}: {e}")
        sys.exit(1)

    counts = dict(sorted(item_counts.items()))
    log.info(f"Loaded {sum(counts.values())} purchases of {len(counts)} distinct items.")
    return counts
