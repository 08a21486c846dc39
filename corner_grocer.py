#!/usr/bin/env python
"""
Corner Grocer tracker.

Reads the daily purchase log, counts how many times each item was bought,
saves a backup of those counts, then offers a menu to look up one item, list
every count or draw a text histogram.
"""
import argparse
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from backup_writer import write_backup, export_summary_yaml
from grocer_menu import GroceryTracker
from log_loader import load_counts

# --- Configuration ---
DEFAULT_INPUT_FILE = "CS210_Project_Three_Input_File.txt"
DEFAULT_BACKUP_FILE = "frequency.dat"
INPUT_FILE_ENV = "GROCER_INPUT_FILE"
BACKUP_FILE_ENV = "GROCER_BACKUP_FILE"


# --- Logging Setup ---
def setup_logging(log_dir: Path = None, level=logging.INFO):
    """Sets up console logging on stderr and, when log_dir is given, a log file."""
    log = logging.getLogger()
    if log.hasHandlers():
        log.handlers.clear()

    log.setLevel(level)

    # stdout carries the menu, so diagnostics go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    log.addHandler(console_handler)

    log_filename = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_filename = log_dir / f"corner_grocer_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        file_handler = logging.FileHandler(log_filename, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        log.addHandler(file_handler)

    return log, log_filename


def build_parser():
    parser = argparse.ArgumentParser(
        description="Count grocery purchases from a daily log, back up the counts and browse them from a menu.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--input-file",
        type=Path,
        default=None,
        help=f"Purchase log, one item per line. Falls back to ${INPUT_FILE_ENV}, then '{DEFAULT_INPUT_FILE}'."
    )
    parser.add_argument(
        "--backup-file",
        type=Path,
        default=None,
        help=f"Where to write the 'name count' backup. Falls back to ${BACKUP_FILE_ENV}, then '{DEFAULT_BACKUP_FILE}'."
    )
    parser.add_argument(
        "--summary-yaml",
        type=Path,
        default=None,
        help="Also write a YAML summary of the counts to this path."
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for a timestamped log file. Console logging only when omitted."
    )
    parser.add_argument(
        "-v", "--verbose",
        action='store_const', dest='log_level', const=logging.DEBUG, default=logging.INFO,
        help="Enable verbose (DEBUG) logging."
    )
    return parser


def resolve_paths(args):
    """Command line wins, then the environment (including .env), then the built-in names."""
    input_file = args.input_file or Path(os.environ.get(INPUT_FILE_ENV) or DEFAULT_INPUT_FILE)
    backup_file = args.backup_file or Path(os.environ.get(BACKUP_FILE_ENV) or DEFAULT_BACKUP_FILE)
    return input_file, backup_file


def main(argv=None, input_func=input, output_func=print):
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)

    log, log_filename = setup_logging(args.log_dir, args.log_level)
    if log_filename:
        log.info(f"Full log will be saved to: {log_filename}")

    input_file, backup_file = resolve_paths(args)

    counts = load_counts(input_file)
    write_backup(counts, backup_file)
    if args.summary_yaml:
        export_summary_yaml(counts, args.summary_yaml, source=input_file, backup=backup_file)

    # item names may hold raw log bytes; write them back out unchanged
    if output_func is print and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")

    tracker = GroceryTracker(counts, input_func=input_func, output_func=output_func)
    try:
        tracker.run()
    except KeyboardInterrupt:
        log.warning("Interrupted, exiting.")
        return 130

    log.debug("Session finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
