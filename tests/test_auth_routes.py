def test_signup_returns_token_and_public_profile(client):
    response = client.post("/auth/signup", json={"name": "Alice", "email": "alice@example.com", "password": "password123"})

    assert response.status_code == 200
    body = response.json()
    assert body["token"]
    assert body["user"]["email"] == "alice@example.com"
    assert body["user"]["name"] == "Alice"
    assert "passwordHash" not in body["user"]
    assert body["user"]["createdAt"].endswith("Z")


def test_signup_normalizes_email(client):
    response = client.post("/auth/signup", json={"name": "Alice", "email": "  Alice@Example.COM ", "password": "password123"})

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "alice@example.com"


def test_duplicate_signup_conflicts(client):
    payload = {"name": "Alice", "email": "alice@example.com", "password": "password123"}
    client.post("/auth/signup", json=payload)

    response = client.post("/auth/signup", json={**payload, "email": "ALICE@example.com"})

    assert response.status_code == 409
    assert response.json() == {"error": "User with this email already exists"}


def test_signup_rejects_short_password(client):
    response = client.post("/auth/signup", json={"name": "Alice", "email": "alice@example.com", "password": "short"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_signup_rejects_password_over_72_bytes(client):
    response = client.post("/auth/signup", json={"name": "Alice", "email": "alice@example.com", "password": "x" * 80})

    assert response.status_code == 400
    assert "at most 72 bytes" in response.json()["error"]
    assert client.post("/auth/login", json={"email": "alice@example.com", "password": "x" * 80}).status_code == 401


def test_signin_rejects_password_over_72_bytes(client, register):
    new_user = client.post("/auth/signin", json={"name": "Alice", "email": "alice@example.com", "password": "x" * 80})

    assert new_user.status_code == 400
    assert "at most 72 bytes" in new_user.json()["error"]

    register("bob@example.com")
    existing_user = client.post("/auth/signin", json={"email": "bob@example.com", "password": "x" * 80})

    assert existing_user.status_code == 401
    assert existing_user.json() == {"error": "Invalid email or password"}


def test_login_with_valid_credentials(client, register):
    user = register("alice@example.com", name="Alice")

    response = client.post("/auth/login", json={"email": "alice@example.com", "password": "password123"})

    assert response.status_code == 200
    assert response.json()["user"]["id"] == user["user"]["id"]


def test_login_failures_are_indistinguishable(client, register):
    register("alice@example.com")

    wrong_password = client.post("/auth/login", json={"email": "alice@example.com", "password": "nope-nope"})
    unknown_email = client.post("/auth/login", json={"email": "nobody@example.com", "password": "password123"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid email or password"}


def test_signin_registers_then_logs_in(client):
    first = client.post("/auth/signin", json={"name": "Alice", "email": "alice@example.com", "password": "password123"})
    second = client.post("/auth/signin", json={"email": "alice@example.com", "password": "password123"})

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["user"]["id"] == second.json()["user"]["id"]


def test_signin_requires_name_for_new_user(client):
    response = client.post("/auth/signin", json={"email": "new@example.com", "password": "password123"})

    assert response.status_code == 400
    assert response.json() == {"error": "Name is required for new user registration"}


def test_signin_with_wrong_password_for_existing_user(client, register):
    register("alice@example.com")

    response = client.post("/auth/signin", json={"email": "alice@example.com", "password": "wrong-password"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}


def test_me_returns_caller(client, register):
    body = register("alice@example.com", name="Alice")

    response = client.get("/auth/me", headers={"Authorization": f"Bearer {body['token']}"})

    assert response.status_code == 200
    assert response.json()["id"] == body["user"]["id"]
    assert response.json()["name"] == "Alice"


def test_health_and_root(client):
    assert client.get("/health").text == "OK"

    info = client.get("/").json()
    assert info["name"] == "Personal Manager API"
