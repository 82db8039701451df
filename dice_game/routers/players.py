from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import IntegrityError
from dice_game.auth import CurrentUser
from dice_game.auth.utils import get_user_by_nickname
from dice_game.database import SessionDep
from dice_game.dependencies import GameManagerDep
from dice_game.schemas import PlayerRate, PlayersResponse, UserUpdateNickname, UserUpdateResponse
from dice_game.services import statistics

router = APIRouter(prefix="/players", tags=["players"])

NO_GAMES = "No games for this player"


@router.get("", response_model=PlayersResponse)
def list_players(session: SessionDep, current_user: CurrentUser):
    """Every registered user with their success rate."""
    data = [
        PlayerRate(
            nickname=stats.user.display_name,
            successRate=(
                statistics.format_success_rate(stats.success_rate)
                if stats.has_played
                else NO_GAMES
            ),
        )
        for stats in statistics.list_players(session)
    ]
    return PlayersResponse(message="Players and success rates found", data=data)


@router.patch("/{user_id}", response_model=UserUpdateResponse)
def change_nickname(
    user_id: int,
    update: UserUpdateNickname,
    session: SessionDep,
    current_user: CurrentUser,
    manager: GameManagerDep,
):
    user = manager.get_user(session, user_id)
    manager.authorize(current_user, user_id)

    nickname = update.nickname or None
    if nickname:
        owner = get_user_by_nickname(session, nickname)
        if owner and owner.id != user.id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Nickname already taken",
            )

    user.nickname = nickname
    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Nickname already taken",
        ) from e
    session.refresh(user)
    return UserUpdateResponse(
        message="Nickname updated successfully",
        user_id=user.id,
        nickname=user.display_name,
    )
