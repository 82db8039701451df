import logging

import pydantic
from sqlmodel import Session

from ..errors import AuthorizationError, NotFoundError, ValidationError
from ..game import DiceRoller, is_game_won
from ..models import Game, GameBase, User

log = logging.getLogger(__name__)

# largest id a signed 64-bit INTEGER column can hold
MAX_USER_ID = 2**63 - 1


class GameManager:
    def __init__(self, roller: DiceRoller | None = None):
        self.roller = roller or DiceRoller()

    @staticmethod
    def get_user(session: Session, user_id: int) -> User:
        if not 1 <= user_id <= MAX_USER_ID:
            raise NotFoundError()
        user = session.get(User, user_id)
        if not user:
            raise NotFoundError()
        return user

    @staticmethod
    def authorize(caller: User, user_id: int) -> None:
        if caller.id != user_id:
            log.warning("User %s refused access to games of user %s", caller.id, user_id)
            raise AuthorizationError()

    @staticmethod
    def validate_game(data: dict) -> GameBase:
        try:
            return GameBase.model_validate(data)
        except pydantic.ValidationError as e:
            errors: dict[str, list[str]] = {}
            for error in e.errors():
                field = ".".join(str(part) for part in error["loc"])
                errors.setdefault(field, []).append(error["msg"])
            raise ValidationError(errors=errors) from e

    def create_game(self, session: Session, caller: User, user_id: int) -> Game:
        self.get_user(session, user_id)

        dice_1, dice_2 = self.roller.roll()
        validated = self.validate_game(
            {
                "dice_1": dice_1,
                "dice_2": dice_2,
                "game_won": is_game_won(dice_1, dice_2),
                "user_id": user_id,
            }
        )
        self.authorize(caller, user_id)

        game = Game(**validated.model_dump())
        session.add(game)
        session.commit()
        session.refresh(game)
        log.info("User %s rolled %d and %d: %s", user_id, dice_1, dice_2, game.game_won.value)
        return game

    def player_games(self, session: Session, caller: User, user_id: int) -> User:
        user = self.get_user(session, user_id)
        self.authorize(caller, user_id)
        return user

    def destroy_player_games(self, session: Session, caller: User, user_id: int) -> int:
        """Delete every game of the user and return how many were removed."""
        user = self.get_user(session, user_id)
        self.authorize(caller, user_id)

        games = list(user.games)
        if not games:
            return 0

        for game in games:
            session.delete(game)
        session.commit()
        session.refresh(user)
        log.info("Deleted %d games of user %s", len(games), user_id)
        return len(games)
