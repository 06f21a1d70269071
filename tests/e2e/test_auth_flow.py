"""End-to-end tests for the signup and login flow."""

from tests.harness import create_client_fixture

# E2E client fixture
client = create_client_fixture()


def _signup(client, name="Ada", email="ada@example.com"):
    return client.post("/auth/signup", json={"name": name, "email": email})


class TestSignup:
    """POST /auth/signup."""

    def test_signup_returns_user_and_token(self, client):
        # Act
        response = _signup(client, email="Ada@Example.com")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["token"]
        user = data["user"]
        assert user["name"] == "Ada"
        assert user["email"] == "ada@example.com"
        assert user["balance"] == 213.19
        assert user["firstEarnAt"] is None
        assert user["votingStreak"] == 0
        assert user["votingDaysCount"] == 0
        assert user["lastVotedAt"] is None
        assert user["lastVoteDateReset"] is None

    def test_missing_fields(self, client):
        response = client.post("/auth/signup", json={"name": "Ada"})

        assert response.status_code == 400
        assert response.json() == {"error": "Name and email are required"}

    def test_email_taken(self, client):
        _signup(client)

        response = _signup(client, name="Other", email="ADA@example.com")

        assert response.status_code == 400
        assert response.json() == {
            "error": "Email already registered",
            "reason": "email_taken",
        }


class TestLogin:
    """POST /auth/login and GET /auth/me."""

    def test_login_and_me(self, client):
        # Arrange
        signed_up = _signup(client).json()

        # Act
        login = client.post("/auth/login", json={"email": "ada@example.com"})
        me = client.get(
            "/auth/me",
            headers={"Authorization": f"Bearer {login.json()['token']}"},
        )

        # Assert
        assert login.status_code == 200
        assert login.json()["user"]["id"] == signed_up["user"]["id"]
        assert me.status_code == 200
        assert me.json() == signed_up["user"]

    def test_login_requires_email(self, client):
        response = client.post("/auth/login", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Email is required"}

    def test_login_unknown_email(self, client):
        response = client.post("/auth/login", json={"email": "nobody@example.com"})

        assert response.status_code == 404
        assert response.json() == {"error": "Account not found"}


class TestProtectedEndpoints:
    """Routes that need a session token."""

    def test_auth_is_checked_before_the_body(self, client):
        """Posting without a token or a body is a 401, not a body error."""
        for path in ("/videos/W5PRZuaQ3VM/vote", "/withdrawals"):
            response = client.post(path)

            assert response.status_code == 401, path
            assert response.json() == {"error": "Unauthorized"}

    def test_auth_is_checked_before_a_malformed_body(self, client):
        response = client.post(
            "/withdrawals", json={"amount": {"not": "a number"}, "method": 5}
        )

        assert response.status_code == 401

    def test_missing_token(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_tampered_token(self, client):
        token = _signup(client).json()["token"]

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}x"})

        assert response.status_code == 401

    def test_wrong_scheme(self, client):
        token = _signup(client).json()["token"]

        response = client.get("/auth/me", headers={"Authorization": f"Token {token}"})

        assert response.status_code == 401

    def test_every_account_route_requires_auth(self, client):
        requests = [
            ("get", "/balance"),
            ("get", "/transactions"),
            ("get", "/daily-votes"),
            ("get", "/withdrawals"),
            ("post", "/withdrawals"),
            ("post", "/videos/W5PRZuaQ3VM/vote"),
        ]

        for method, path in requests:
            kwargs = {"json": {}} if method == "post" else {}
            response = getattr(client, method)(path, **kwargs)
            assert response.status_code == 401, path


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
