from pydantic import BaseModel, Field

from ..models import User


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    email: str | None = None


class UserCreate(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=8, max_length=72)
    nickname: str | None = Field(default=None, max_length=50)


class UserPublic(BaseModel):
    id: int
    email: str
    nickname: str | None
    disabled: bool

    @classmethod
    def from_db(cls, user: User) -> "UserPublic":
        return cls(id=user.id, email=user.email, nickname=user.nickname, disabled=user.disabled)


class UserResponse(BaseModel):
    message: str
    data: UserPublic


class UserUpdateNickname(BaseModel):
    nickname: str | None = Field(default=None, max_length=50)


class UserUpdateResponse(BaseModel):
    message: str
    user_id: int
    nickname: str
