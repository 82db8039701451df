from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from ..config import ANONYMOUS_NICKNAME

if TYPE_CHECKING:
    from .game import Game


class UserBase(SQLModel):
    email: str = Field(unique=True, index=True)
    nickname: str | None = Field(default=None, unique=True, index=True)
    disabled: bool = Field(default=False)


class User(UserBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    hashed_password: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    games: list["Game"] = Relationship(
        back_populates="user", sa_relationship_kwargs={"order_by": "Game.id"}
    )

    @property
    def display_name(self) -> str:
        return self.nickname or ANONYMOUS_NICKNAME
