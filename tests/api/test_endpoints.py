"""End-to-end tests of the v1 HTTP API."""

from app.db.repositories.user import UserRepository

API = "/api/v1"


def _signup(client, email="ada@example.com", password="secret"):
    response = client.post(f"{API}/auth/signup", json={ "email": email, "password": password })
    assert response.status_code == 201
    return response.json()


def _bearer(token: str) -> dict:
    return { "Authorization": f"Bearer {token}" }


class TestHealth:
    def test_root(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_ping(self, client):
        body = client.get(f"{API}/auth/ping").json()
        assert body["status"] == "ok"
        assert body["timestamp"] > 0


class TestAuth:
    def test_signup_session_logout(self, client):
        auth = _signup(client)
        assert auth["user_key"] == f"user-{auth['user']['id']}"
        assert "password_hash" not in auth["user"]

        session = client.get(f"{API}/auth/session", headers=_bearer(auth["token"])).json()
        assert session["user"]["email"] == "ada@example.com"

        assert client.post(f"{API}/auth/logout", headers=_bearer(auth["token"])).json() == { "ok": True }
        assert client.get(f"{API}/auth/session", headers=_bearer(auth["token"])).json() is None

    def test_logout_with_body_token(self, client):
        auth = _signup(client)
        client.post(f"{API}/auth/logout", json={ "token": auth["token"] })
        assert client.get(f"{API}/auth/session", headers=_bearer(auth["token"])).json() is None

    def test_session_without_token(self, client):
        assert client.get(f"{API}/auth/session").json() is None

    def test_me_requires_session(self, client):
        assert client.get(f"{API}/auth/me").status_code == 401

    def test_duplicate_signup(self, client):
        _signup(client)
        response = client.post(f"{API}/auth/signup", json={ "email": "ADA@example.com", "password": "x" })
        assert response.status_code == 409

    def test_concurrent_duplicate_signup(self, client, monkeypatch):
        _signup(client)
        monkeypatch.setattr(UserRepository, "exists_by_email", lambda self, email: False)
        response = client.post(f"{API}/auth/signup", json={ "email": "ada@example.com", "password": "x" })
        assert response.status_code == 409

    def test_login_errors(self, client):
        _signup(client)
        wrong = client.post(f"{API}/auth/login", json={ "email": "ada@example.com", "password": "nope" })
        missing = client.post(f"{API}/auth/login", json={ "email": "bob@example.com", "password": "x" })
        assert wrong.status_code == 401
        assert missing.status_code == 404

    def test_token_form(self, client):
        _signup(client)
        response = client.post(f"{API}/auth/token", data={ "username": "ada@example.com", "password": "secret" })
        assert response.status_code == 200
        body = response.json()
        assert body["access_token"] == body["token"]
        assert body["token_type"] == "bearer"


class TestPassport:
    def test_exposure_then_passport(self, client):
        client.put(f"{API}/passport/profiles/walker", json={ "nickname": "W" })
        logged = client.post(f"{API}/passport/exposures", json={
            "user_key": "walker", "lat": 45.0, "lon": 9.0, "location_name": "Park", "pm25": 5, "no2": 10,
        })
        assert logged.status_code == 201
        assert logged.json()["streak"] == 1

        passport = client.get(f"{API}/passport/walker").json()
        assert passport["profile"]["nickname"] == "W"
        assert passport["profile"]["points"] == logged.json()["points"]
        assert len(passport["exposures"]) == 1
        assert passport["latest"]["id"] == logged.json()["exposure_id"]
        assert passport["average_score"] == logged.json()["score"]

    def test_unknown_passport(self, client):
        passport = client.get(f"{API}/passport/nobody").json()
        assert passport["profile"] is None
        assert passport["exposures"] == []

    def test_insights(self, client):
        assert client.get(f"{API}/passport/nobody/insights").json() is None

        client.post(f"{API}/passport/exposures", json={
            "user_key": "walker", "lat": 45.0, "lon": 9.0, "location_name": "Park",
        })
        insights = client.get(f"{API}/passport/walker/insights").json()
        assert insights["sample_count"] == 1
        assert len(insights["trend"]) == 1

    def test_timestamp_beyond_year_9999_rejected(self, client):
        response = client.post(f"{API}/passport/exposures", json={
            "user_key": "walker", "lat": 45.0, "lon": 9.0, "location_name": "Park", "timestamp": 253402300800000,
        })
        assert response.status_code == 422
        assert client.get(f"{API}/passport/walker").json()["profile"] is None

    def test_invalid_exposure(self, client):
        response = client.post(f"{API}/passport/exposures", json={
            "user_key": "walker", "lat": 123.0, "lon": 9.0, "location_name": "Park",
        })
        assert response.status_code == 422


class TestHealthProfiles:
    def test_conditions_require_profile(self, client):
        response = client.patch(f"{API}/health-profiles/nobody/conditions",
                                json={ "has_respiratory_condition": True, "conditions": ["asthma"] })
        assert response.status_code == 404

    def test_save_and_status(self, client):
        body = { "age": "adult", "activity_level": "light", "outdoor_exposure": "low" }
        assert client.put(f"{API}/health-profiles/u1", json=body).json()["is_new"] is True
        assert client.put(f"{API}/health-profiles/u1", json=body).json()["is_new"] is False

        status = client.get(f"{API}/health-profiles/u1/status").json()
        assert status["exists"] is True
        assert status["is_complete"] is True

        assert client.delete(f"{API}/health-profiles/u1").json()["success"] is True
        assert client.get(f"{API}/health-profiles/u1").json() is None


class TestAirHistory:
    def test_store_and_deduplicate(self, client):
        reading = { "user_key": "u1", "lat": 45.0, "lng": 9.0, "location_name": "Park", "aqi": 42,
                    "risk_level": "low", "source": "test" }
        first = client.post(f"{API}/air-history/readings", json=reading)
        second = client.post(f"{API}/air-history/readings", json=reading)

        assert first.status_code == 201
        assert second.status_code == 200
        assert second.json() == { "id": first.json()["id"], "created": False }

        history = client.get(f"{API}/air-history/u1").json()
        assert len(history) == 1
        assert client.get(f"{API}/air-history/u1/summary").json()["total"]["count"] == 1
        assert client.get(f"{API}/air-history/u1/last").json()["needs_refresh"] is False
