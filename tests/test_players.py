def test_list_players_with_rates(client, make_user, add_games, auth_headers):
    admin = make_user("Admin")
    player = make_user()
    add_games(player, won=1, lost=1)

    response = client.get("/players", headers=auth_headers(admin))
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Players and success rates found"
    assert body["data"] == [
        {"nickname": "Admin", "successRate": "No games for this player"},
        {"nickname": "Anonymous", "successRate": "50.00%"},
    ]


def test_list_players_requires_a_token(client, make_user):
    make_user()
    response = client.get("/players")
    assert response.status_code == 401


def test_change_nickname(client, make_user, auth_headers):
    user = make_user("Old")

    response = client.patch(f"/players/{user.id}", json={"nickname": "New"}, headers=auth_headers(user))
    assert response.status_code == 200
    assert response.json() == {
        "message": "Nickname updated successfully",
        "user_id": user.id,
        "nickname": "New",
    }


def test_clearing_nickname_makes_player_anonymous(client, make_user, auth_headers):
    user = make_user("Named")

    response = client.patch(f"/players/{user.id}", json={"nickname": None}, headers=auth_headers(user))
    assert response.status_code == 200
    assert response.json()["nickname"] == "Anonymous"


def test_change_nickname_to_a_taken_one(client, make_user, auth_headers):
    make_user("Taken")
    user = make_user("Mine")

    response = client.patch(f"/players/{user.id}", json={"nickname": "Taken"}, headers=auth_headers(user))
    assert response.status_code == 400
    assert response.json()["message"] == "Nickname already taken"


def test_change_nickname_of_another_user(client, make_user, auth_headers):
    caller = make_user()
    target = make_user("Target")

    response = client.patch(f"/players/{target.id}", json={"nickname": "Hacked"}, headers=auth_headers(caller))
    assert response.status_code == 401


def test_change_nickname_of_unknown_user(client, make_user, auth_headers):
    caller = make_user()

    response = client.patch("/players/9999", json={"nickname": "Ghost"}, headers=auth_headers(caller))
    assert response.status_code == 422
    assert response.json()["message"] == "User not found"


def test_nickname_clash_at_commit_is_a_bad_request(client, session, make_user, auth_headers, monkeypatch):
    make_user("Taken")
    user = make_user("Mine")
    monkeypatch.setattr("dice_game.routers.players.get_user_by_nickname", lambda session, nickname: None)

    response = client.patch(f"/players/{user.id}", json={"nickname": "Taken"}, headers=auth_headers(user))
    assert response.status_code == 400
    assert response.json() == {"message": "Nickname already taken"}
    session.refresh(user)
    assert user.nickname == "Mine"


def test_change_nickname_of_out_of_range_user(client, make_user, auth_headers):
    caller = make_user()

    response = client.patch(f"/players/{2**70}", json={"nickname": "Huge"}, headers=auth_headers(caller))
    assert response.status_code == 422
    assert response.json()["message"] == "User not found"
