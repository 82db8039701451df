from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from sqlmodel import Session, func, select

from ..errors import EmptyResultError
from ..models import Game, GameResult, User

TWO_PLACES = Decimal("0.01")
NO_PLAYERS_MESSAGE = "No players have played yet"


@dataclass
class PlayerStats:
    user: User
    games_played: int
    success_rate: Decimal | None

    @property
    def has_played(self) -> bool:
        return self.games_played > 0


def _percentage(won: int, played: int) -> Decimal:
    rate = Decimal(won) * 100 / Decimal(played)
    return rate.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_success_rate(rate: Decimal) -> str:
    return f"{rate:.2f}%"


def calculate_player_success_rate(user: User) -> Decimal | None:
    """Percentage of the user's games that were won, or None without games."""
    played = len(user.games)
    if played == 0:
        return None
    won = sum(1 for game in user.games if game.game_won == GameResult.WON)
    return _percentage(won, played)


def calculate_general_success_rate(session: Session) -> Decimal:
    played = session.exec(select(func.count()).select_from(Game)).one()
    if played == 0:
        return Decimal("0.00")
    won = session.exec(
        select(func.count()).select_from(Game).where(Game.game_won == GameResult.WON)
    ).one()
    return _percentage(won, played)


def player_stats(user: User) -> PlayerStats:
    return PlayerStats(
        user=user,
        games_played=len(user.games),
        success_rate=calculate_player_success_rate(user),
    )


def list_players(session: Session) -> list[PlayerStats]:
    users = session.exec(select(User).order_by(User.id)).all()
    if not users:
        raise EmptyResultError("No players have been played yet")
    return [player_stats(user) for user in users]


def ranking(session: Session) -> tuple[list[PlayerStats], Decimal]:
    """Players sorted by success rate, best first, then everyone who never played.

    Equal rates are ordered by fewer games played first. Returns the ordered
    stats together with the success rate over every game on record.
    """
    stats = [player_stats(user) for user in session.exec(select(User).order_by(User.id)).all()]
    played = [s for s in stats if s.has_played]
    not_played = [s for s in stats if not s.has_played]
    if not played:
        raise EmptyResultError(NO_PLAYERS_MESSAGE)

    played.sort(key=lambda s: (-s.success_rate, s.games_played))
    return played + not_played, calculate_general_success_rate(session)


def _extreme_player(session: Session, better) -> PlayerStats:
    chosen: PlayerStats | None = None
    for user in session.exec(select(User).order_by(User.id)).all():
        stats = player_stats(user)
        if not stats.has_played:
            continue
        if chosen is None or better(stats.success_rate, chosen.success_rate):
            chosen = stats

    if chosen is None:
        raise EmptyResultError(NO_PLAYERS_MESSAGE)
    return chosen


def get_winner(session: Session) -> PlayerStats:
    return _extreme_player(session, lambda rate, best: rate > best)


def get_loser(session: Session) -> PlayerStats:
    return _extreme_player(session, lambda rate, worst: rate < worst)
