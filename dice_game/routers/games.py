from fastapi import APIRouter, status
from dice_game.auth import CurrentUser
from dice_game.database import SessionDep
from dice_game.dependencies import GameManagerDep
from dice_game.schemas import (
    GameCreatedResponse,
    GamePublic,
    MessageResponse,
    PlayerGames,
    PlayerGamesResponse,
)
from dice_game.services import statistics

router = APIRouter(prefix="/games", tags=["games"])

NO_GAMES_YET = "The player has not played any games yet"


@router.post("/{user_id}", response_model=GameCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_game(user_id: int, session: SessionDep, current_user: CurrentUser, manager: GameManagerDep):
    game = manager.create_game(session, current_user, user_id)
    return GameCreatedResponse(message="game created successfully", data=GamePublic.from_db(game))


@router.get("/{user_id}", response_model=PlayerGamesResponse, response_model_exclude_none=True)
def show_player_games(user_id: int, session: SessionDep, current_user: CurrentUser, manager: GameManagerDep):
    user = manager.player_games(session, current_user, user_id)
    if not user.games:
        return PlayerGamesResponse(message=NO_GAMES_YET)

    rate = statistics.calculate_player_success_rate(user)
    return PlayerGamesResponse(
        message="Games found",
        data=PlayerGames(
            games=[GamePublic.from_db(game) for game in user.games],
            successRate=statistics.format_success_rate(rate),
        ),
    )


@router.delete("/{user_id}", response_model=MessageResponse)
def destroy_player_games(user_id: int, session: SessionDep, current_user: CurrentUser, manager: GameManagerDep):
    if not manager.destroy_player_games(session, current_user, user_id):
        return MessageResponse(message=NO_GAMES_YET)
    return MessageResponse(message="The games of the player have been deleted")
