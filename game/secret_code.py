import logging
import random

from .clue import score
from .errors import ConfigurationError
from .ruleset import DEFAULT_RULES

logger = logging.getLogger(__name__)


class Code:
    """
        Represents the secret code for the Mastermind game.
    Attributes:
        sequence (tuple[int, ...]): The symbols of the code, fixed once set.
        rules (Ruleset): The ruleset for validation.
        is_valid (bool): Whether the code is valid according to the rules."""

    def __init__(self, sequence=None, rules=None):
        """
        Initialize a Code instance.

        Args:
            sequence (list[int] or None): The symbols of the code.
            rules (Ruleset or None): Defines length, colors, blanks and
            duplicates.
        """

        self.rules = rules or DEFAULT_RULES
        self.sequence = tuple(sequence) if sequence is not None else ()

        self.is_valid = False
        if self.sequence:
            self.is_valid = self.validate()

    def generate_random(self, rng=None):
        """
        Generate a random valid code according to the rules.

        Symbols are drawn uniformly from the permitted range. Without
        duplicates, a symbol already in the code is rejected and drawn
        again; the ruleset guarantees enough distinct symbols exist.

        Args:
            rng (random.Random or None): Source of randomness. Defaults to
            the module level generator.
        """

        rng = rng or random
        low = self.rules.lowest_symbol
        high = self.rules.highest_symbol
        allow_dup = self.rules.allow_duplicates

        sequence = []
        while len(sequence) < self.rules.code_length:
            symbol = rng.randint(low, high)
            if allow_dup or symbol not in sequence:
                sequence.append(symbol)

        self.sequence = tuple(sequence)

        # Validate the generated code
        if not self.validate(strict=False):
            raise ConfigurationError("Generated code violates rules constraints.")
        self.is_valid = True
        logger.debug("Generated secret code for %s", self.rules.describe())

    def validate(self, strict: bool = True) -> bool:
        """
        Validate the current code (length, symbols, duplicates).

        Args:
            strict (bool): If True, raise ValueError with an explanatory
            message when validation fails. If False, return False on failure.

        Returns:
            bool: True if the code sequence is valid; False if invalid and
            strict is False.
        """

        def fail(msg: str) -> bool:
            if strict:
                raise ValueError(msg)
            return False

        if len(self.sequence) != self.rules.code_length:
            return fail(
                f"Code length must be {self.rules.code_length}, "
                f"but got {len(self.sequence)}."
            )

        if not self.rules.allow_duplicates and len(set(self.sequence)) != len(
            self.sequence
        ):
            return fail("Duplicates are not allowed in this ruleset.")

        for symbol in self.sequence:
            if symbol not in self.rules.symbols:
                return fail(
                    f"Invalid symbol {symbol!r}. Allowed: "
                    f"{self.rules.lowest_symbol} to {self.rules.highest_symbol}."
                )

        return True

    def compare_with(self, guess):
        """
        Compare this secret code with a Guess and compute its clue.

        Args:
            guess (Guess or list[int]): The guess to score.

        Returns:
            Clue: EXACT and PRESENT counts.
        """
        sequence = guess.sequence if hasattr(guess, "sequence") else guess
        return score(sequence, self.sequence)

    def as_string(self):
        """
        Return the code formatted like a clue, e.g. '[1, 4, 4, 2]'.
        """
        return str(list(self.sequence))

    def __eq__(self, other):
        if isinstance(other, Code):
            return self.sequence == other.sequence
        if isinstance(other, list):
            return list(self.sequence) == other
        return False

    def __str__(self):
        return self.as_string()


def generate_solution(rules=None, rng=None) -> list[int]:
    """Return a fresh random solution sequence for `rules`."""
    code = Code(rules=rules)
    code.generate_random(rng=rng)
    return list(code.sequence)
