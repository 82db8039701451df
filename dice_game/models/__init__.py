from .user import User, UserBase
from .game import Game, GameBase, GameResult

__all__ = ["User", "UserBase", "Game", "GameBase", "GameResult"]
