import logging
from enum import Enum

import report_engine
from text_helpers import parse_leading_int

log = logging.getLogger(__name__)

MENU_TEXT = (
    "\nWhat would you like to do?\n"
    "1) Find purchases for one item\n"
    "2) See the full purchase list\n"
    "3) View a purchase histogram\n"
    "4) Exit the program\n"
    "Enter a number (1-4): "
)
INVALID_CHOICE_TEXT = "Hmm, that's not 1-4. Give it another shot."
FAREWELL_TEXT = "Thanks for hanging out! Goodbye!"
CONTINUE_PROMPT = "\nPress Enter to return to the menu..."

CHOICE_LOOKUP = 1
CHOICE_LIST = 2
CHOICE_HISTOGRAM = 3
CHOICE_EXIT = 4
VALID_CHOICES = (CHOICE_LOOKUP, CHOICE_LIST, CHOICE_HISTOGRAM, CHOICE_EXIT)


class MenuState(Enum):
    MENU_DISPLAYED = 1
    DISPATCHING = 2
    AWAITING_CONTINUE = 3
    TERMINATED = 4


class GroceryTracker:
    """
    Owns the item counts for one session and runs the interactive menu.

    input_func and output_func default to input() and print(); tests pass in
    their own so the menu can run without a terminal. End of input while the
    menu is waiting is treated as choosing Exit.
    """

    def __init__(self, counts: dict, input_func=input, output_func=print):
        self.counts = dict(counts)
        self._input = input_func
        self._output = output_func
        self.state = MenuState.MENU_DISPLAYED
        self._pending_choice = None

    def _write(self, text: str = "", end: str = "\n"):
        self._output(text, end=end)

    def _read(self, prompt: str) -> str:
        self._write(prompt, end="")
        return self._input()

    def read_choice(self):
        """Shows the menu and returns 1-4, or None for anything else."""
        try:
            line = self._read(MENU_TEXT)
        except EOFError:
            log.info("End of input reached at the menu, exiting.")
            self._write()
            return CHOICE_EXIT
        choice = parse_leading_int(line)
        if choice not in VALID_CHOICES:
            log.debug(f"Rejected menu input: {line!r}")
            return None
        return choice

    def step(self, choice=None):
        """
        Advances the menu by one transition and returns the new state.

        In MENU_DISPLAYED the choice is read from input unless one is passed in.
        """
        if self.state == MenuState.MENU_DISPLAYED:
            if choice is None:
                choice = self.read_choice()
            if choice not in VALID_CHOICES:
                self._write(INVALID_CHOICE_TEXT)
                return self.state
            self._pending_choice = choice
            self.state = MenuState.DISPATCHING

        elif self.state == MenuState.DISPATCHING:
            choice = self._pending_choice
            if choice == CHOICE_EXIT:
                self._write(FAREWELL_TEXT)
                self.state = MenuState.TERMINATED
            else:
                self.dispatch(choice)
                self.state = MenuState.AWAITING_CONTINUE

        elif self.state == MenuState.AWAITING_CONTINUE:
            try:
                self._read(CONTINUE_PROMPT)
            except EOFError:
                self._write()
            self.state = MenuState.MENU_DISPLAYED

        return self.state

    def dispatch(self, choice: int):
        if choice == CHOICE_LOOKUP:
            self.lookup_single_item()
        elif choice == CHOICE_LIST:
            self.display_all_counts()
        elif choice == CHOICE_HISTOGRAM:
            self.display_histogram()

    def run(self):
        """Keeps showing the menu until the user picks Exit."""
        while self.state != MenuState.TERMINATED:
            self.step()

    # --- Menu actions ---

    def _read_reply(self, prompt: str) -> str:
        try:
            return self._read(prompt)
        except EOFError:
            self._write()
            return ""

    def lookup_single_item(self):
        query = self._read_reply("Enter item name (e.g. Apples): ")
        self._write(report_engine.describe_lookup(self.counts, query))

    def display_all_counts(self):
        reply = self._read_reply("Sort by: 1) Name  2) Frequency (highest first)\nYour choice: ")
        sort_mode = report_engine.parse_sort_mode(reply)
        entries = report_engine.sorted_entries(self.counts, sort_mode)
        self._write()
        self._write(report_engine.render_table(entries))

    def display_histogram(self):
        reply = self._read_reply("Pick a character for the bars (press Enter for '*'): ")
        bar_char = report_engine.parse_bar_char(reply)
        self._write("\nHere's your histogram!")
        histogram = report_engine.render_histogram(self.counts, bar_char)
        if histogram:
            self._write(histogram)
