from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import bcrypt
import jwt
from passlib.context import CryptContext
from sqlmodel import Session, select
from dice_game.models import User
from dice_game.config import SECRET_KEY, ALGORITHM


# passlib 1.7.4 reads bcrypt.__about__, which bcrypt 4.1 removed; pyproject pins
# bcrypt<5 because 5.x also breaks passlib's own bcrypt self-test.
# https://github.com/pyca/bcrypt/issues/684#issuecomment-2430047176
@dataclass
class SolveBugBcryptWarning:
    __version__: str = getattr(bcrypt, "__version__")


setattr(bcrypt, "__about__", SolveBugBcryptWarning())
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


def get_user_by_email(session: Session, email: str):
    statement = select(User).where(User.email == email)
    return session.exec(statement).first()


def get_user_by_nickname(session: Session, nickname: str):
    statement = select(User).where(User.nickname == nickname)
    return session.exec(statement).first()


def authenticate_user(session: Session, email: str, password: str):
    user = get_user_by_email(session, email)
    if not user:
        return False
    if not verify_password(password, user.hashed_password):
        return False
    return user


def create_access_token(data: dict, expires_delta: timedelta | None = None):
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=15)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
