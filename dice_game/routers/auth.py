from datetime import timedelta
from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.exc import IntegrityError
from dice_game.database import SessionDep
from dice_game.models import User
from dice_game.schemas import Token, UserCreate, UserPublic, UserResponse
from dice_game.auth import authenticate_user, create_access_token, get_password_hash
from dice_game.auth.utils import get_user_by_email, get_user_by_nickname
from dice_game.config import ACCESS_TOKEN_EXPIRE_MINUTES

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, session: SessionDep):
    if get_user_by_email(session, user.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )
    if user.nickname and get_user_by_nickname(session, user.nickname):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Nickname already taken",
        )

    db_user = User(
        email=user.email,
        nickname=user.nickname or None,
        hashed_password=get_password_hash(user.password),
    )
    session.add(db_user)
    try:
        session.commit()
    except IntegrityError as e:
        # a concurrent registration took the email or nickname first
        session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email or nickname already taken",
        ) from e
    session.refresh(db_user)
    return UserResponse(message="User registered successfully", data=UserPublic.from_db(db_user))


@router.post("/token")
async def login_for_access_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()], session: SessionDep
) -> Token:
    user = authenticate_user(session, form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    access_token_expires = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": user.email}, expires_delta=access_token_expires
    )
    return Token(access_token=access_token, token_type="bearer")
