import logging
from enum import Enum

from .errors import GameNotStartedError, GameOverError
from .guess import Guess
from .ruleset import DEFAULT_RULES
from .secret_code import Code

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class Board:
    """Main game board class — manages gameplay, secret code, and guess history."""

    def __init__(self, rules=None, code=None):
        """
        Initialize the board with a given ruleset.

        Args:
            rules (Ruleset, optional): Defaults to DEFAULT_RULES.
            code (list[int], optional): Fixed secret code instead of a
            random one, mainly for tests.
        """
        self.rules = rules or DEFAULT_RULES
        self.secret_code = Code(code, rules=self.rules)
        self.guesses = []
        self.current_attempt = 0
        self.max_attempts = self.rules.max_attempts
        self.status = GameStatus.IN_PROGRESS

    @property
    def is_over(self):
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def is_won(self):
        return self.status is GameStatus.WON

    @property
    def score(self):
        """Number of guesses taken, or None unless the game was won."""
        return self.current_attempt if self.is_won else None

    def initialize_game(self, rng=None):
        """Set up a new game: generate a secret code and reset state."""
        self.secret_code = Code(rules=self.rules)
        self.secret_code.generate_random(rng=rng)
        self.guesses = []
        self.current_attempt = 0
        self.status = GameStatus.IN_PROGRESS

    def make_guess(self, guess_input):
        """
        Validate, score and record one guess.

        Args:
            guess_input (str | list): Raw line, tokens or symbols.
        Returns:
            Clue: The feedback for the guess.
        Raises:
            GameOverError: The game has already ended.
            GameNotStartedError: No secret code has been set.
            GuessValidationError: The guess is invalid; state is unchanged.
        """
        if self.is_over:
            raise GameOverError(f"The game is already {self.status.value}.")
        if not self.secret_code.is_valid:
            raise GameNotStartedError(
                "No secret code yet; call initialize_game() first."
            )

        new_guess = Guess(guess_input, rules=self.rules)
        new_guess.validate(strict=True)

        clue = self.secret_code.compare_with(new_guess)
        new_guess.apply_clue(clue)
        self.guesses.append(new_guess)
        self.current_attempt += 1

        self.check_game_over()
        return clue

    def check_game_over(self):
        """Update the status after the latest guess."""
        last_guess = self.guesses[-1]
        if last_guess.clue.is_solved(self.rules.code_length):
            self.status = GameStatus.WON
        elif self.current_attempt >= self.max_attempts:
            self.status = GameStatus.LOST

        if self.is_over:
            logger.debug(
                "Game %s after %d guesses", self.status.value, self.current_attempt
            )

    def get_feedback_history(self):
        """Return the full history of guesses and clues."""
        return [(g.get_guess(), g.clue) for g in self.guesses]

    def reveal_code(self):
        """Return the secret code (used at the end of the game)."""
        return self.secret_code.as_string()

    def remaining_attempts(self):
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self.current_attempt)

    def render(self) -> str:
        """Text representation of the board, one row per guess."""
        width = len(str(self.max_attempts))
        rows = []
        for i, guess in enumerate(self.guesses, start=1):
            symbols = " ".join(str(s) for s in guess.get_guess())
            rows.append(f"{i:>{width}}: {symbols}  ||  {guess.clue}")
        return "\n".join(rows)
