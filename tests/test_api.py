"""
API Tests - routers, status codes and role gates over an in-memory database
"""
from clubhouse.auth.security import decode_access_token


def _add_player(client, headers, payload, **overrides):
    body = dict(payload)
    body.update(overrides)
    response = client.post("/players/add", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["message"]


def _add_match(client, headers, payload):
    response = client.post("/matches/add", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestServer:
    """Landing page and health check"""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_landing_page(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Manchester Shitty" in response.text
        assert "sessionStorage" in response.text
        assert "/users/login" in response.text
        assert 'data-endpoint="/players"' in response.text


class TestUsersAPI:
    """Signup and login"""

    def test_signup_and_login(self, client):
        response = client.post("/users/signup", json={
            "email": "fan@example.com", "password": "blue-moon", "role": "Coach"
        })
        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "fan@example.com"
        assert body["role"] == "Coach"
        assert "password" not in body

        response = client.post("/users/login", json={"email": "fan@example.com", "password": "blue-moon"})
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User authenticated"
        identity = decode_access_token(body["token"])
        assert identity.email == "fan@example.com"
        assert identity.role.value == "Coach"

    def test_signup_duplicate_email(self, client):
        payload = {"email": "fan@example.com", "password": "blue-moon"}
        assert client.post("/users/signup", json=payload).status_code == 201
        response = client.post("/users/signup", json=payload)
        assert response.status_code == 400
        assert response.json() == {
            "status": "error",
            "message": "User with email fan@example.com already exists",
        }

    def test_signup_invalid_email(self, client):
        response = client.post("/users/signup", json={"email": "nope", "password": "x"})
        assert response.status_code == 400
        assert response.json()["status"] == "error"

    def test_login_failures(self, client):
        client.post("/users/signup", json={"email": "fan@example.com", "password": "blue-moon"})

        response = client.post("/users/login", json={"email": "fan@example.com", "password": "wrong"})
        assert response.status_code == 401
        assert response.json()["message"] == "Incorrect password."

        response = client.post("/users/login", json={"email": "ghost@example.com", "password": "x"})
        assert response.status_code == 401
        assert response.json()["message"] == "User not found."

    def test_list_users_is_public(self, client):
        client.post("/users/signup", json={"email": "fan@example.com", "password": "blue-moon"})
        response = client.get("/users")
        assert response.status_code == 200
        assert [u["email"] for u in response.json()] == ["fan@example.com"]
        assert "password" not in response.json()[0]

    def test_password_limit_counts_bytes(self, client):
        """40 two-byte characters are 80 bytes, past the bcrypt limit"""
        response = client.post("/users/signup", json={"email": "fan@example.com", "password": "é" * 40})
        assert response.status_code == 400
        assert response.json()["message"] == "Password cannot be longer than 72 bytes"

        response = client.post("/users/signup", json={"email": "fan@example.com", "password": "é" * 36})
        assert response.status_code == 201

    def test_signup_may_pick_admin_role(self, client):
        """Signup is open: the requested role is stored as sent"""
        client.post("/users/signup", json={
            "email": "boss@example.com", "password": "blue-moon", "role": "Admin"
        })
        response = client.post("/users/login", json={"email": "boss@example.com", "password": "blue-moon"})
        assert response.status_code == 200
        assert response.json()["role"] == "Admin"


class TestPlayersAPI:
    """Squad endpoints"""

    def test_missing_token(self, client):
        response = client.get("/players")
        assert response.status_code == 401
        assert response.json()["message"] == "Authorization token is missing"

    def test_invalid_token(self, client):
        response = client.get("/players", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    def test_add_and_list(self, client, coach_headers, user_headers, sample_player_payload):
        response = client.post("/players/add", json=sample_player_payload, headers=coach_headers)
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        assert body["message"]["number"] == 9
        assert body["message"]["imageUrl"] == "https://example.com/haaland.png"

        _add_player(client, coach_headers, sample_player_payload, name="Jack Grealish", number=10)

        response = client.get("/players", headers=user_headers)
        assert response.status_code == 200
        assert [p["number"] for p in response.json()] == [9, 10]

    def test_add_denied_for_player_role(self, client, player_headers, sample_player_payload):
        response = client.post("/players/add", json=sample_player_payload, headers=player_headers)
        assert response.status_code == 403
        assert response.json()["message"] == "You do not have the permission to add a player"

    def test_duplicate_number(self, client, admin_headers, sample_player_payload):
        _add_player(client, admin_headers, sample_player_payload)
        response = client.post("/players/add", json=sample_player_payload, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Player with number 9 already exists"

    def test_validation_errors(self, client, admin_headers, sample_player_payload):
        body = dict(sample_player_payload, name="")
        response = client.post("/players/add", json=body, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Name is required"

        body = dict(sample_player_payload, birthdate="2999-01-01")
        response = client.post("/players/add", json=body, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Birthdate cannot be in the future"

        body = {k: v for k, v in sample_player_payload.items() if k != "position"}
        response = client.post("/players/add", json=body, headers=admin_headers)
        assert response.status_code == 400
        assert "position" in response.json()["message"]

    def test_get_by_id_not_found(self, client, user_headers):
        response = client.get("/players/42", headers=user_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Player with id 42 not found"

    def test_update_with_stats(self, client, coach_headers, sample_player_payload):
        """Stats sent with a player update are written too"""
        player = _add_player(client, coach_headers, sample_player_payload)
        stats = client.post(
            f"/stats/add/{player['id']}", json={"appearances": 10, "goals": 8}, headers=coach_headers
        ).json()

        response = client.put(
            f"/players/update/{player['id']}",
            json={"position": "Centre forward", "stat": {"id": stats["id"], "goals": 12}},
            headers=coach_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["position"] == "Centre forward"
        assert body["stat"]["goals"] == 12
        assert body["stat"]["appearances"] == 10

    def test_delete_removes_stats(self, client, admin_headers, coach_headers, sample_player_payload):
        player = _add_player(client, coach_headers, sample_player_payload)
        client.post(f"/stats/add/{player['id']}", json={"goals": 1}, headers=coach_headers)

        response = client.delete(f"/players/delete/{player['id']}", headers=coach_headers)
        assert response.status_code == 403

        response = client.delete(f"/players/delete/{player['id']}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["id"] == player["id"]
        assert client.get("/stats", headers=admin_headers).json() == []

    def test_unknown_stats_leaves_player_unchanged(self, client, coach_headers, sample_player_payload):
        """A missing stat id rejects the whole update"""
        player = _add_player(client, coach_headers, sample_player_payload)

        response = client.put(
            f"/players/update/{player['id']}",
            json={"position": "Winger", "stat": {"id": 999, "goals": 1}},
            headers=coach_headers,
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Stats with id 999 not found"

        response = client.get(f"/players/{player['id']}", headers=coach_headers)
        assert response.json()["position"] == "Striker"

    def test_unknown_team(self, client, admin_headers, sample_player_payload):
        response = client.post("/players/add", json=dict(sample_player_payload, teamId=999),
                               headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Team with id 999 not found"

        player = _add_player(client, admin_headers, sample_player_payload)
        response = client.put(f"/players/update/{player['id']}", json={"teamId": 999},
                              headers=admin_headers)
        assert response.status_code == 404
        assert client.get(f"/players/{player['id']}", headers=admin_headers).json()["teamId"] is None

    def test_out_of_range_numbers(self, client, admin_headers, sample_player_payload):
        """Values past the INTEGER column range are rejected, not stored"""
        response = client.post("/players/add", json=dict(sample_player_payload, number=2**63),
                               headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"].startswith("number:")

        response = client.get(f"/players/{2**63}", headers=admin_headers)
        assert response.status_code == 404

    def test_null_number_on_update(self, client, admin_headers, sample_player_payload):
        player = _add_player(client, admin_headers, sample_player_payload)
        response = client.put(f"/players/update/{player['id']}", json={"number": None},
                              headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Number is required"


class TestCoachesAPI:

    def test_list_is_public(self, client):
        response = client.get("/coaches")
        assert response.status_code == 200
        assert response.json() == []

    def test_add_update_delete(self, client, admin_headers):
        home = client.post("/teams/add", json={"name": "Manchester Shitty"}, headers=admin_headers).json()
        assert home["id"] == 1

        response = client.post("/coaches/add", json={"name": "Pep Guardiola", "job": "Head coach"},
                               headers=admin_headers)
        assert response.status_code == 201
        coach = response.json()
        assert coach["teamId"] == 1

        response = client.put(f"/coaches/update/{coach['id']}", json={"job": "Manager"},
                              headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["job"] == "Manager"

        response = client.delete(f"/coaches/delete/{coach['id']}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"status": "success", "message": "Coach deleted successfully"}
        assert client.get("/coaches").json() == []

    def test_add_denied_for_coach(self, client, coach_headers):
        response = client.post("/coaches/add", json={"name": "Juanma Lillo", "job": "Assistant"},
                               headers=coach_headers)
        assert response.status_code == 403
        assert response.json()["message"] == "Only admin has the permission to add a coach"

    def test_update_missing_coach(self, client, admin_headers):
        response = client.put("/coaches/update/99", json={"job": "Manager"}, headers=admin_headers)
        assert response.status_code == 404

    def test_missing_home_team(self, client, admin_headers):
        """Coaches default to the home team, which has to exist"""
        response = client.post("/coaches/add", json={"name": "Pep Guardiola", "job": "Head coach"},
                               headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Team with id 1 not found"
        assert client.get("/coaches").json() == []

    def test_unknown_team(self, client, admin_headers):
        response = client.post("/coaches/add",
                               json={"name": "Pep Guardiola", "job": "Head coach", "teamId": 999},
                               headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Team with id 999 not found"


class TestTeamsAPI:
    """League table"""

    def test_table_ordered_by_points(self, client, admin_headers, user_headers):
        client.post("/teams/add", json={"name": "Arsenal", "points": 89}, headers=admin_headers)
        client.post("/teams/add", json={"name": "Manchester Shitty", "points": 91}, headers=admin_headers)

        response = client.get("/teams", headers=user_headers)
        assert response.status_code == 200
        assert [t["name"] for t in response.json()] == ["Manchester Shitty", "Arsenal"]

    def test_add_denied_for_coach(self, client, coach_headers):
        response = client.post("/teams/add", json={"name": "Arsenal"}, headers=coach_headers)
        assert response.status_code == 403
        assert response.json()["message"] == "Only admin has the permission to add a team"

    def test_negative_points(self, client, admin_headers):
        response = client.post("/teams/add", json={"name": "Arsenal", "points": -3}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Points cannot be negative."

    def test_update_standings(self, client, admin_headers):
        team = client.post("/teams/add", json={"name": "Arsenal"}, headers=admin_headers).json()
        response = client.put(
            f"/teams/update/{team['id']}", json={"goalsFor": 91, "goalsAgainst": 29}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["goalsFor"] == 91
        assert response.json()["points"] == 0

    def test_delete_detaches_players(self, client, admin_headers, sample_player_payload):
        team = client.post("/teams/add", json={"name": "Academy"}, headers=admin_headers).json()
        player = _add_player(client, admin_headers, sample_player_payload, teamId=team["id"])

        response = client.delete(f"/teams/delete/{team['id']}", headers=admin_headers)
        assert response.status_code == 200

        response = client.get(f"/players/{player['id']}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["teamId"] is None


class TestMatchesAPI:
    """Fixtures and match squads"""

    def test_add_match(self, client, admin_headers, sample_match_payload):
        match = _add_match(client, admin_headers, sample_match_payload)
        assert match["homeTeamName"] == "Manchester Shitty"
        assert match["homeScore"] is None
        assert match["players"] == []

    def test_add_denied_for_coach(self, client, coach_headers, sample_match_payload):
        response = client.post("/matches/add", json=sample_match_payload, headers=coach_headers)
        assert response.status_code == 403
        assert response.json()["message"] == "Only admin has the permission to add a match"

    def test_missing_location(self, client, admin_headers, sample_match_payload):
        response = client.post("/matches/add", json=dict(sample_match_payload, location=""),
                               headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Location is required"

    def test_enter_result(self, client, admin_headers, user_headers, sample_match_payload):
        match = _add_match(client, admin_headers, sample_match_payload)
        response = client.put(f"/matches/update/{match['id']}", json={"homeScore": 3, "awayScore": 1},
                              headers=admin_headers)
        assert response.status_code == 200

        matches = client.get("/matches", headers=user_headers).json()
        assert (matches[0]["homeScore"], matches[0]["awayScore"]) == (3, 1)

    def test_add_players_to_match(self, client, admin_headers, coach_headers,
                                  sample_match_payload, sample_player_payload):
        match = _add_match(client, admin_headers, sample_match_payload)
        p1 = _add_player(client, coach_headers, sample_player_payload)
        p2 = _add_player(client, coach_headers, sample_player_payload, name="Kevin De Bruyne", number=17)

        response = client.post(f"/matches/{match['id']}/players",
                               json={"player_ids": [p1["id"], p2["id"]]}, headers=coach_headers)
        assert response.status_code == 201
        results = response.json()
        assert len(results) == 2
        assert len(results[-1]["players"]) == 2

        # public
        response = client.get(f"/matches/{match['id']}/players")
        assert response.status_code == 200
        assert sorted(p["number"] for p in response.json()) == [9, 17]

    def test_player_ids_must_be_array(self, client, admin_headers, sample_match_payload):
        match = _add_match(client, admin_headers, sample_match_payload)
        response = client.post(f"/matches/{match['id']}/players", json={"player_ids": 3},
                               headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "player_ids must be an array"

    def test_add_players_denied_for_player_role(self, client, admin_headers, player_headers,
                                                sample_match_payload):
        match = _add_match(client, admin_headers, sample_match_payload)
        response = client.post(f"/matches/{match['id']}/players", json={"player_ids": [1]},
                               headers=player_headers)
        assert response.status_code == 403

    def test_players_of_missing_match(self, client):
        response = client.get("/matches/99/players")
        assert response.status_code == 404
        assert response.json()["message"] == "Match not found"

    def test_delete_match(self, client, admin_headers, user_headers, sample_match_payload):
        match = _add_match(client, admin_headers, sample_match_payload)
        response = client.delete(f"/matches/delete/{match['id']}", headers=admin_headers)
        assert response.status_code == 200
        assert client.get("/matches", headers=user_headers).json() == []

    def test_list_requires_token(self, client):
        response = client.get("/matches")
        assert response.status_code == 401
        assert response.json()["message"] == "Authorization token is missing"

    def test_update_denied_for_coach(self, client, admin_headers, coach_headers, sample_match_payload):
        match = _add_match(client, admin_headers, sample_match_payload)
        response = client.put(f"/matches/update/{match['id']}", json={"homeScore": 2},
                              headers=coach_headers)
        assert response.status_code == 403
        assert response.json()["message"] == "Only admin has the permission to update a match"

    def test_update_missing_match(self, client, admin_headers):
        response = client.put("/matches/update/99", json={"homeScore": 2}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Match not found"


class TestStatsAPI:

    def test_one_stats_row_per_player(self, client, coach_headers, sample_player_payload):
        player = _add_player(client, coach_headers, sample_player_payload)

        response = client.post(f"/stats/add/{player['id']}", json={"goals": 2}, headers=coach_headers)
        assert response.status_code == 201
        assert response.json()["playerId"] == player["id"]
        assert response.json()["appearances"] == 0

        response = client.post(f"/stats/add/{player['id']}", json={"goals": 2}, headers=coach_headers)
        assert response.status_code == 400
        assert response.json()["message"] == f"Player with id {player['id']} already has stats"

    def test_stats_for_missing_player(self, client, coach_headers):
        response = client.post("/stats/add/42", json={}, headers=coach_headers)
        assert response.status_code == 404

    def test_remove_admin_only(self, client, admin_headers, coach_headers, sample_player_payload):
        player = _add_player(client, coach_headers, sample_player_payload)
        stats = client.post(f"/stats/add/{player['id']}", json={}, headers=coach_headers).json()

        response = client.delete(f"/stats/delete/{stats['id']}", headers=coach_headers)
        assert response.status_code == 403
        assert response.json()["message"] == "You are not authorized to remove stats"

        response = client.delete(f"/stats/delete/{stats['id']}", headers=admin_headers)
        assert response.status_code == 200

    def test_negative_goals(self, client, coach_headers, sample_player_payload):
        player = _add_player(client, coach_headers, sample_player_payload)
        response = client.post(f"/stats/add/{player['id']}", json={"goals": -1}, headers=coach_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Goals cannot be negative."

    def test_list_requires_token(self, client):
        response = client.get("/stats")
        assert response.status_code == 401
        assert response.json()["message"] == "Authorization token is missing"

    def test_update_missing_stats(self, client, coach_headers):
        response = client.put("/stats/update/999", json={"goals": 1}, headers=coach_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Stats with id 999 not found"

    def test_update_denied_for_player_role(self, client, coach_headers, player_headers,
                                           sample_player_payload):
        player = _add_player(client, coach_headers, sample_player_payload)
        stats = client.post(f"/stats/add/{player['id']}", json={}, headers=coach_headers).json()

        response = client.put(f"/stats/update/{stats['id']}", json={"goals": 1}, headers=player_headers)
        assert response.status_code == 403
        assert response.json()["message"] == "You are not authorized to update stats"
