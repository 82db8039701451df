"""Two-dice roll and the rule that decides a game.

A game is won when both dice show the same face.
"""

import random

from ..models import GameResult

DICE_FACES = 6


def roll_die(rng: random.Random | None = None) -> int:
    """Roll one fair six-sided die."""
    rng = rng or random
    return rng.randint(1, DICE_FACES)


def is_game_won(dice_1: int, dice_2: int) -> GameResult:
    if dice_1 == dice_2:
        return GameResult.WON
    return GameResult.LOST


class DiceRoller:
    """Rolls the pair of dice for one game.

    Args:
        rng: Optional random source, e.g. a seeded ``random.Random``.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def roll(self) -> tuple[int, int]:
        return roll_die(self._rng), roll_die(self._rng)
