from typing import Annotated
from fastapi import Depends
from .game import DiceRoller
from .services.game_manager import GameManager

# one shared random source for the process
_roller_instance: DiceRoller | None = None


def get_dice_roller() -> DiceRoller:
    """Get the singleton DiceRoller instance."""
    global _roller_instance
    if _roller_instance is None:
        _roller_instance = DiceRoller()
    return _roller_instance


def get_game_manager(roller: Annotated[DiceRoller, Depends(get_dice_roller)]) -> GameManager:
    return GameManager(roller)


GameManagerDep = Annotated[GameManager, Depends(get_game_manager)]
