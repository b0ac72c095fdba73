"""
Clue scoring for a single (guess, solution) pair.

Markers:
  - EXACT   (shown as 2): correct symbol in the correct position
  - PRESENT (shown as 1): correct symbol in the wrong position

Algorithm (two passes over multisets):
  1) Exact pass counts matching positions and tallies the solution symbols
     that were not matched.
  2) Present pass consumes one tally for each unmatched guess symbol that
     still has one left, so repeated symbols never count twice.
"""

from __future__ import annotations

import logging
from collections import Counter
from enum import IntEnum
from typing import Sequence

logger = logging.getLogger(__name__)


class Marker(IntEnum):
    PRESENT = 1
    EXACT = 2


class Clue:
    """
    Feedback for one guess, as counts of EXACT and PRESENT markers.

    Attributes:
        exact (int): Correct symbol, correct position.
        present (int): Correct symbol, wrong position.
    """

    def __init__(self, exact: int = 0, present: int = 0):
        self.exact = exact
        self.present = present

    def markers(self) -> list[int]:
        """Display values, EXACT markers before PRESENT markers."""
        return [int(Marker.EXACT)] * self.exact + [int(Marker.PRESENT)] * self.present

    def is_solved(self, code_length: int) -> bool:
        return self.exact == code_length

    def __len__(self):
        return self.exact + self.present

    def __eq__(self, other):
        if isinstance(other, Clue):
            return (self.exact, self.present) == (other.exact, other.present)
        if isinstance(other, tuple):
            return (self.exact, self.present) == other
        return NotImplemented

    def __hash__(self):
        return hash((self.exact, self.present))

    def __repr__(self):
        return f"Clue(exact={self.exact}, present={self.present})"

    def __str__(self):
        return str(self.markers())


def score(guess: Sequence[int], solution: Sequence[int]) -> Clue:
    """
    Compute the clue for `guess` against `solution`.

    Preconditions:
      - len(guess) == len(solution)

    Examples:
      score([1, 2, 1, 2], [1, 1, 2, 2]) -> Clue(exact=2, present=2)
      score([4, 3, 2, 1], [1, 2, 3, 4]) -> Clue(exact=0, present=4)
    """
    if len(guess) != len(solution):
        raise ValueError(
            f"Guess and solution must be the same length "
            f"({len(guess)} != {len(solution)})."
        )

    # Pass 1: exact matches; leftovers of both sides go on to pass 2.
    exact = 0
    unmatched_guess = []
    remaining = Counter()
    for g, s in zip(guess, solution):
        if g == s:
            exact += 1
        else:
            unmatched_guess.append(g)
            remaining[s] += 1

    # Pass 2: each leftover solution symbol can satisfy one guess symbol.
    present = 0
    for g in unmatched_guess:
        if remaining[g] > 0:
            present += 1
            remaining[g] -= 1

    clue = Clue(exact, present)
    logger.debug("Scored %s -> %r", list(guess), clue)
    return clue
