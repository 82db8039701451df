from .user import Token, TokenData, UserCreate, UserPublic, UserResponse, UserUpdateNickname, UserUpdateResponse
from .game import GamePublic, MessageResponse, GameCreatedResponse, PlayerGames, PlayerGamesResponse
from .statistics import PlayerRate, PlayersResponse, RankedPlayer, Ranking, RankingResponse, ExtremePlayerResponse

__all__ = [
    "Token",
    "TokenData",
    "UserCreate",
    "UserPublic",
    "UserResponse",
    "UserUpdateNickname",
    "UserUpdateResponse",
    "GamePublic",
    "MessageResponse",
    "GameCreatedResponse",
    "PlayerGames",
    "PlayerGamesResponse",
    "PlayerRate",
    "PlayersResponse",
    "RankedPlayer",
    "Ranking",
    "RankingResponse",
    "ExtremePlayerResponse",
]
