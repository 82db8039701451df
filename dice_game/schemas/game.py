from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..models import Game, GameResult


class GamePublic(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    dice_1: int
    dice_2: int
    game_won: str = Field(alias="gameWon")
    user_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_db(cls, game: Game) -> "GamePublic":
        return cls(
            id=game.id,
            dice_1=game.dice_1,
            dice_2=game.dice_2,
            game_won=GameResult(game.game_won).value,
            user_id=game.user_id,
            created_at=game.created_at,
            updated_at=game.updated_at,
        )


class MessageResponse(BaseModel):
    message: str


class GameCreatedResponse(BaseModel):
    message: str
    data: GamePublic


class PlayerGames(BaseModel):
    games: list[GamePublic]
    successRate: str


class PlayerGamesResponse(BaseModel):
    message: str
    data: PlayerGames | None = None
