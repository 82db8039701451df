from .game_manager import GameManager
from . import statistics

__all__ = ["GameManager", "statistics"]
