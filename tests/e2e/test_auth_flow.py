"""End-to-end tests for registration and sessions."""

from tests.e2e.api import act_as, register


class TestAuthFlow:
    """Register, log in, inspect and end a session."""

    def test_register_sets_http_only_cookie(self, client):
        """Registering starts a session via an httponly cookie."""
        response = client.post(
            "/api/auth/register",
            json={
                "username": "alice",
                "email": "alice@example.com",
                "password": "hunter22",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "alice"
        assert data["kudos"] == 0
        assert data["can_view_immediately"] is False
        assert "password_hash" not in data
        set_cookie = response.headers["set-cookie"]
        assert "auth_token=" in set_cookie
        assert "HttpOnly" in set_cookie

    def test_me_returns_current_user(self, client):
        """The cookie identifies the user on later requests."""
        act_as(client, register(client, "alice"))

        response = client.get("/api/auth/me")

        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    def test_me_without_cookie_is_unauthorized(self, client):
        """No cookie means 401 with a message envelope."""
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json() == {"message": "Not authenticated"}

    def test_me_with_garbage_cookie_is_unauthorized(self, client):
        """A cookie that isn't a valid token is treated as no session."""
        act_as(client, "garbage")

        assert client.get("/api/auth/me").status_code == 401

    def test_login_and_logout(self, client):
        """Logging in sets the cookie, logging out clears it."""
        register(client, "alice")
        act_as(client, None)

        login = client.post(
            "/api/auth/login", json={"username": "alice", "password": "hunter22"}
        )
        assert login.status_code == 200
        assert login.json()["username"] == "alice"
        assert client.get("/api/auth/me").status_code == 200

        logout = client.post("/api/auth/logout")
        assert logout.status_code == 200
        assert logout.json() == {"message": "Logged out"}
        assert "auth_token" in logout.headers["set-cookie"]

    def test_login_with_wrong_password(self, client):
        """Bad credentials are 401."""
        register(client, "alice")

        response = client.post(
            "/api/auth/login", json={"username": "alice", "password": "wrong-one"}
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid username or password"}

    def test_duplicate_registration_is_bad_request(self, client):
        """A taken username is 400."""
        register(client, "alice")

        response = client.post(
            "/api/auth/register",
            json={
                "username": "alice",
                "email": "other@example.com",
                "password": "hunter22",
            },
        )

        assert response.status_code == 400
        assert "already exists" in response.json()["message"]

    def test_short_password_is_bad_request(self, client):
        """Request validation errors are reported as 400."""
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "a@example.com", "password": "123"},
        )

        assert response.status_code == 400
        assert "message" in response.json()

    def test_health(self, client):
        """Health check reports the service as up."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
