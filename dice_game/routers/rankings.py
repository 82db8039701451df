from fastapi import APIRouter
from dice_game.auth import CurrentUser
from dice_game.database import SessionDep
from dice_game.schemas import ExtremePlayerResponse, RankedPlayer, Ranking, RankingResponse
from dice_game.services import statistics
from dice_game.services.statistics import PlayerStats

router = APIRouter(tags=["ranking"])

NOT_PLAYED = "The player has not played yet"


def _ranked(stats: PlayerStats) -> RankedPlayer:
    return RankedPlayer(
        nickname=stats.user.display_name,
        successRate=(
            statistics.format_success_rate(stats.success_rate)
            if stats.has_played
            else NOT_PLAYED
        ),
        gamesPlayed=stats.games_played,
    )


@router.get("/ranking", response_model=RankingResponse)
def ranking(session: SessionDep, current_user: CurrentUser):
    players, average = statistics.ranking(session)
    return RankingResponse(
        message="Players and success rates found",
        data=Ranking(
            players=[_ranked(stats) for stats in players],
            averageSuccessRate=statistics.format_success_rate(average),
        ),
    )


@router.get("/winner", response_model=ExtremePlayerResponse)
def show_winner(session: SessionDep, current_user: CurrentUser):
    winner = _ranked(statistics.get_winner(session))
    return ExtremePlayerResponse(
        message=f"The best player is {winner.nickname} with a success rate of {winner.successRate}",
        data=winner,
    )


@router.get("/loser", response_model=ExtremePlayerResponse)
def show_loser(session: SessionDep, current_user: CurrentUser):
    loser = _ranked(statistics.get_loser(session))
    return ExtremePlayerResponse(
        message=f"The worst player is {loser.nickname} with a success rate of {loser.successRate}",
        data=loser,
    )
