"""
Read-only queries over the item -> count mapping: single-item lookup with
prefix suggestions, the full sorted listing and the text histogram.

Every function here returns text or plain data; printing is left to the menu.
"""
from text_helpers import trim, fold, parse_leading_int

SORT_BY_NAME = 1
SORT_BY_FREQUENCY = 2

NAME_WIDTH = 18
COUNT_WIDTH = 5
TABLE_HEADER = "Item               Count"
TABLE_SEPARATOR = "-" * 26
HISTOGRAM_NAME_WIDTH = 12
DEFAULT_BAR_CHAR = '*'


# --- Lookup ---

def lookup_item(counts: dict, query: str):
    """
    Case-insensitive lookup of one item.

    Returns a tuple (match, suggestions):
      - match is (name, count) for the first item, in name order, whose
        lowercased name equals the lowercased query; otherwise None.
      - suggestions lists the items whose lowercased name starts with the
        lowercased query (only filled in when there is no exact match).
    """
    wanted = fold(trim(query))

    for name, count in sorted(counts.items()):
        if fold(name) == wanted:
            return (name, count), []

    suggestions = [name for name in sorted(counts) if fold(name).startswith(wanted)]
    return None, suggestions


def format_found(name: str, count: int) -> str:
    unit = "time" if count == 1 else "times"
    return f"Great news! '{name}' was purchased {count} {unit}."


def describe_lookup(counts: dict, query: str) -> str:
    """Builds the message shown for a lookup, including any suggestions."""
    shown = trim(query)
    match, suggestions = lookup_item(counts, query)
    if match:
        return format_found(*match)
    if suggestions:
        lines = [f'I couldn\'t find "{shown}" exactly. Did you mean:']
        lines.extend(f"  - {name}" for name in suggestions)
        return "\n".join(lines)
    return f'No items match "{shown}".'


# --- Full listing ---

def parse_sort_mode(text: str) -> int:
    """Anything other than 1 or 2 falls back to sorting by name."""
    choice = parse_leading_int(text)
    if choice not in (SORT_BY_NAME, SORT_BY_FREQUENCY):
        return SORT_BY_NAME
    return choice


def sorted_entries(counts: dict, sort_mode: int = SORT_BY_NAME) -> list:
    """Snapshot of (name, count) pairs sorted by name, or by count highest first."""
    entries = list(counts.items())
    if sort_mode == SORT_BY_FREQUENCY:
        entries.sort(key=lambda entry: entry[1], reverse=True)
    else:
        entries.sort(key=lambda entry: entry[0])
    return entries


def render_table(entries: list) -> str:
    lines = [TABLE_HEADER, TABLE_SEPARATOR]
    for name, count in entries:
        lines.append(f"{name:<{NAME_WIDTH}}{count:>{COUNT_WIDTH}}")
    return "\n".join(lines)


# --- Histogram ---

def parse_bar_char(text: str) -> str:
    """First character typed, or '*' when the reply is empty."""
    return text[0] if text else DEFAULT_BAR_CHAR


def render_histogram(counts: dict, bar_char: str = DEFAULT_BAR_CHAR) -> str:
    lines = []
    for name, count in sorted(counts.items()):
        lines.append(f"{name:<{HISTOGRAM_NAME_WIDTH}} {bar_char * count}")
    return "\n".join(lines)
