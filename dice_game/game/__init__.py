from .dice import DICE_FACES, DiceRoller, is_game_won, roll_die

__all__ = ["DICE_FACES", "DiceRoller", "is_game_won", "roll_die"]
