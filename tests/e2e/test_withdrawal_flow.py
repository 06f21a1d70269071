"""End-to-end tests for balance and withdrawals."""

from tests.conftest import make_video
from tests.harness import create_client_fixture

# E2E client fixture with a fixed-reward video
client = create_client_fixture(videos=[make_video()])


def _auth(client):
    token = client.post(
        "/auth/signup", json={"name": "Ada", "email": "ada@example.com"}
    ).json()["token"]
    return {"Authorization": f"Bearer {token}"}


class TestBalance:
    """GET /balance."""

    def test_fresh_account(self, client):
        headers = _auth(client)

        response = client.get("/balance", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["balance"] == 213.19
        assert data["daysUntilWithdrawal"] == 20
        assert data["withdrawalEligible"] is False
        assert data["pendingWithdrawal"] is None


class TestWithdrawals:
    """POST /withdrawals and GET /withdrawals."""

    def test_before_any_earnings(self, client):
        headers = _auth(client)

        response = client.post(
            "/withdrawals", json={"amount": 10, "method": "paypal"}, headers=headers
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "You have not earned any money yet",
            "reason": "no_earnings_yet",
        }

    def test_during_cooldown(self, client):
        # Arrange
        headers = _auth(client)
        client.post("/videos/test-video/vote", json={"voteType": "like"}, headers=headers)

        # Act
        response = client.post(
            "/withdrawals", json={"amount": "10", "method": "paypal"}, headers=headers
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {
            "error": "You can withdraw in 20 day(s)",
            "reason": "cooldown_not_elapsed",
            "daysRemaining": 20,
        }
        assert client.get("/withdrawals", headers=headers).json() == []
        assert client.get("/balance", headers=headers).json()["user"]["balance"] == 214.69

    def test_missing_fields(self, client):
        headers = _auth(client)

        response = client.post("/withdrawals", json={"method": "paypal"}, headers=headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Amount and method are required"}
