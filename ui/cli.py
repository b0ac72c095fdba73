# # Command-line interface (text-based play)
import logging
import sys

from game.board import Board
from game.errors import GuessValidationError
from game.ruleset import ADVANCED_RULES, REGULAR_RULES, Ruleset

logger = logging.getLogger(__name__)

RULES_TEXT = f"""\
Welcome to Mastermind!
You are trying to guess a secret code of colors.
Depending on the options chosen, the code may contain duplicate colors or blanks.

Guess the code and your guess will be graded with pegs.
A black peg means one of your colors is correct and in the correct position.
A white peg means one of your colors is correct but in the wrong position.
Four white pegs mean you have every color right, but in the wrong order.

"Regular Mastermind" has a code of {REGULAR_RULES['code_length']} with {REGULAR_RULES['num_colors']} colors to choose from.
"Advanced Mastermind" has a code of {ADVANCED_RULES['code_length']} with {ADVANCED_RULES['num_colors']} colors to choose from.
You have {REGULAR_RULES['max_attempts']} guesses. Have fun!

Colors are the integers 1-{ADVANCED_RULES['num_colors']}, blanks are 0.
Separate them with spaces or commas, e.g. "1 2 3 4".
Black pegs are shown as 2 and white pegs as 1.
"""


class ConsoleIO:
    """
    Line based operator I/O over a pair of text streams.

    The streams are owned by the caller; nothing here opens or closes them.
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def display(self, message: str = "") -> None:
        print(message, file=self.stdout, flush=True)

    def request_raw_line(self, prompt: str | None = None) -> str:
        """
        Read one line, stripped of surrounding whitespace.

        Read failures are reported and retried. End of input raises EOFError.
        """
        if prompt:
            self.display(prompt)
        while True:
            try:
                line = self.stdin.readline()
            except OSError as e:
                logger.warning("Reading input failed: %s", e)
                self.display("ERROR: There was an error reading the input.")
                continue
            if line == "":
                raise EOFError("No more input.")
            return line.strip()

    def request_choice(self, prompt: str, valid_options) -> int:
        """Ask `prompt` until the operator enters one of `valid_options`."""
        valid_options = set(valid_options)
        while True:
            answer = self.request_raw_line(prompt)
            try:
                choice = int(answer)
            except ValueError:
                choice = None
            if choice in valid_options:
                return choice
            self.display("Please input one of the given options.")


def choose_rules(console: ConsoleIO) -> Ruleset:
    """Ask for the variant and its options. Raises ConfigurationError."""
    is_regular = (
        console.request_choice(
            "Regular Mastermind (1) or Advanced Mastermind (2)?", {1, 2}
        )
        == 1
    )
    allow_blanks = console.request_choice("Allow blanks (1) or no (0)?", {0, 1}) == 1
    allow_duplicates = (
        console.request_choice("Allow doubles (1) or no (0)?", {0, 1}) == 1
    )
    return Ruleset.for_variant(is_regular, allow_blanks, allow_duplicates)


def gameloop(console: ConsoleIO = None, rng=None) -> Board:
    """
    Play one full game against the operator.

    Args:
        console (ConsoleIO, optional): Defaults to stdin/stdout.
        rng (random.Random, optional): Source for the secret code.
    Returns:
        Board: The finished board.
    """
    console = console or ConsoleIO()

    if console.request_choice("Print the rules (1) or not (0)?", {0, 1}) == 1:
        console.display(RULES_TEXT)

    rules = choose_rules(console)
    logger.info("Starting game with %s", rules.describe())

    b = Board(rules=rules)
    b.initialize_game(rng=rng)

    console.display("Enter your guess!")
    while not b.is_over:
        user_input = console.request_raw_line()

        try:
            clue = b.make_guess(user_input)
        except GuessValidationError as e:
            logger.debug("Rejected guess %r: %s", user_input, e)
            console.display(e.hint())
            continue

        console.display(f"{b.guesses[-1]} {clue}")

    console.display("\n")
    if b.is_won:
        console.display(f"You win! Score: {b.score}")
    else:
        console.display(f"Too many guesses... Here is the solution: {b.reveal_code()}")

    return b
