import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from dice_game.auth import create_access_token, get_password_hash
from dice_game.database import get_session
from dice_game.dependencies import get_dice_roller
from dice_game.game import DiceRoller
from dice_game.main import app
from dice_game.models import Game, GameResult, User


class FixedRoller(DiceRoller):
    """Hands out queued rolls instead of random ones."""

    def __init__(self, rolls=None):
        super().__init__()
        self.rolls = list(rolls or [])

    def roll(self):
        if self.rolls:
            return self.rolls.pop(0)
        return super().roll()


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="roller")
def roller_fixture():
    return FixedRoller()


@pytest.fixture(name="client")
def client_fixture(session, roller):
    def override_get_session():
        return session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_dice_roller] = lambda: roller
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(name="make_user")
def make_user_fixture(session):
    counter = {"n": 0}

    def make_user(nickname=None, disabled=False):
        counter["n"] += 1
        user = User(
            email=f"player{counter['n']}@example.com",
            nickname=nickname,
            disabled=disabled,
            hashed_password=get_password_hash("secret-password"),
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return make_user


@pytest.fixture(name="add_games")
def add_games_fixture(session):
    def add_games(user, won=0, lost=0):
        for _ in range(won):
            session.add(Game(dice_1=3, dice_2=3, game_won=GameResult.WON, user_id=user.id))
        for _ in range(lost):
            session.add(Game(dice_1=1, dice_2=2, game_won=GameResult.LOST, user_id=user.id))
        session.commit()
        session.refresh(user)

    return add_games


@pytest.fixture(name="auth_headers")
def auth_headers_fixture():
    def auth_headers(user):
        token = create_access_token({"sub": user.email})
        return {"Authorization": f"Bearer {token}"}

    return auth_headers
