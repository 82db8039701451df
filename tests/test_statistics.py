from decimal import Decimal

import pytest

from dice_game.errors import EmptyResultError
from dice_game.services import statistics


def test_player_without_games_has_no_rate(make_user):
    user = make_user("Rookie")
    assert statistics.calculate_player_success_rate(user) is None


def test_player_rate_rounds_to_two_decimals(make_user, add_games):
    user = make_user("Third")
    add_games(user, won=1, lost=2)
    assert statistics.calculate_player_success_rate(user) == Decimal("33.33")

    other = make_user("TwoThirds")
    add_games(other, won=2, lost=1)
    assert statistics.calculate_player_success_rate(other) == Decimal("66.67")


def test_player_rate_bounds(make_user, add_games):
    winner = make_user("Always")
    loser = make_user("Never")
    add_games(winner, won=4)
    add_games(loser, lost=4)
    assert statistics.calculate_player_success_rate(winner) == Decimal("100.00")
    assert statistics.calculate_player_success_rate(loser) == Decimal("0.00")


def test_general_rate_without_games_is_zero(session, make_user):
    make_user("Idle")
    assert statistics.calculate_general_success_rate(session) == Decimal("0.00")


def test_general_rate_counts_every_game(session, make_user, add_games):
    add_games(make_user("A"), won=1, lost=1)
    add_games(make_user("B"), won=0, lost=2)
    assert statistics.calculate_general_success_rate(session) == Decimal("25.00")


def test_format_success_rate():
    assert statistics.format_success_rate(Decimal("12.5")) == "12.50%"
    assert statistics.format_success_rate(Decimal("0.00")) == "0.00%"


def test_list_players_needs_users(session):
    with pytest.raises(EmptyResultError):
        statistics.list_players(session)


def test_ranking_orders_by_rate_then_games_played(session, make_user, add_games):
    idle = make_user("Idle")
    busy_half = make_user("BusyHalf")
    half = make_user("Half")
    best = make_user("Best")
    worst = make_user("Worst")
    add_games(busy_half, won=2, lost=2)
    add_games(half, won=1, lost=1)
    add_games(best, won=3, lost=1)
    add_games(worst, lost=3)

    players, average = statistics.ranking(session)

    assert [s.user.nickname for s in players] == ["Best", "Half", "BusyHalf", "Worst", idle.nickname]
    assert players[-1].success_rate is None
    assert average == Decimal("46.15")


def test_ranking_without_players_raises(session, make_user):
    make_user("Idle")
    with pytest.raises(EmptyResultError, match="No players have played yet"):
        statistics.ranking(session)


def test_winner_and_loser(session, make_user, add_games):
    make_user("Idle")
    first = make_user("First")
    second = make_user("Second")
    third = make_user("Third")
    add_games(first, won=1, lost=1)
    add_games(second, won=3, lost=1)
    add_games(third, won=1, lost=3)

    assert statistics.get_winner(session).user.id == second.id
    assert statistics.get_loser(session).user.id == third.id


def test_winner_ties_keep_the_first_player(session, make_user, add_games):
    first = make_user("First")
    second = make_user("Second")
    add_games(first, won=1, lost=1)
    add_games(second, won=2, lost=2)

    assert statistics.get_winner(session).user.id == first.id
    assert statistics.get_loser(session).user.id == first.id


def test_extremes_need_someone_who_played(session, make_user):
    make_user("Idle")
    with pytest.raises(EmptyResultError):
        statistics.get_winner(session)
    with pytest.raises(EmptyResultError):
        statistics.get_loser(session)
