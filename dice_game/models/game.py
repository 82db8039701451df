from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

import sqlalchemy as sa
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .user import User


class GameResult(str, Enum):
    WON = "Won"
    LOST = "Lost"


class GameBase(SQLModel):
    dice_1: int = Field(ge=1, le=6)
    dice_2: int = Field(ge=1, le=6)
    # stored as "Won" / "Lost" rather than the member names
    game_won: GameResult = Field(
        sa_type=sa.Enum(
            GameResult,
            name="game_result",
            values_callable=lambda results: [r.value for r in results],
        )
    )
    user_id: int = Field(foreign_key="user.id", index=True)


class Game(GameBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    user: "User" = Relationship(back_populates="games")
