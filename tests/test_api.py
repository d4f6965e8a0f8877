from conftest import signup_and_login, verification_token_for


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_signup_verify_login_and_bookmark_lifecycle(client):
    credentials = {"email": "a@x.com", "password": "pw"}

    resp = client.post("/auth/signup", json=credentials)
    assert resp.status_code == 201
    assert resp.json() == {"message": "User created successfully!"}

    resp = client.post("/auth/login", json=credentials)
    assert resp.status_code == 403
    assert resp.json() == {"statusCode": 403, "error": "Forbidden", "message": "Need to verify email"}

    token = verification_token_for(client, "a@x.com")
    resp = client.get(f"/auth/verify-email?token={token}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Email is verified!"}

    resp = client.post("/auth/login", json=credentials)
    assert resp.status_code == 200
    headers = {"Authorization": f"Bearer {resp.json()['accessToken']}"}

    resp = client.post("/bookmarks", json={"title": "t", "link": "https://e.com"}, headers=headers)
    assert resp.status_code == 201
    bookmark = resp.json()
    assert bookmark["id"] == 1
    assert bookmark["title"] == "t"
    assert bookmark["link"] == "https://e.com"
    assert bookmark["description"] is None
    assert "userId" in bookmark and "createdAt" in bookmark

    resp = client.get("/bookmarks", headers=headers)
    assert resp.status_code == 200
    assert len(resp.json()) == 1

    resp = client.delete("/bookmarks/1", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["id"] == 1

    resp = client.get("/bookmarks/1", headers=headers)
    assert resp.status_code == 404
    assert resp.json() == {"statusCode": 404, "error": "Not Found", "message": "Resource not found!"}


def test_signup_with_taken_email_is_forbidden(client):
    body = {"email": "a@x.com", "password": "pw"}
    assert client.post("/auth/signup", json=body).status_code == 201

    resp = client.post("/auth/signup", json=body)
    assert resp.status_code == 403
    assert resp.json()["message"] == "Credentials taken"


def test_signup_validation_errors(client):
    resp = client.post("/auth/signup", json={"email": "", "password": "123"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["statusCode"] == 400
    assert body["error"] == "Bad Request"
    assert any(message.startswith("email") for message in body["message"])

    resp = client.post("/auth/signup", json={"email": "a@x.com", "password": ""})
    assert resp.status_code == 400
    assert any(message.startswith("password") for message in resp.json()["message"])

    assert client.post("/auth/signup").status_code == 400
    assert client.post("/auth/login", json={"email": "not-an-email", "password": "pw"}).status_code == 400


def test_verify_email_with_missing_or_wrong_token(client):
    assert client.get("/auth/verify-email?token").status_code == 403
    assert client.get("/auth/verify-email").status_code == 403
    assert client.get("/auth/verify-email?token=123456").status_code == 403


def test_login_with_wrong_password_or_unknown_user(client):
    signup_and_login(client, "a@x.com", "pw")

    resp = client.post("/auth/login", json={"email": "a@x.com", "password": "nope"})
    assert resp.status_code == 403
    assert "accessToken" not in resp.json()

    resp = client.post("/auth/login", json={"email": "ghost@x.com", "password": "pw"})
    assert resp.status_code == 403
    assert resp.json()["message"] == "Credentials incorrect"


def test_protected_routes_require_bearer_token(client):
    for method, path in (("get", "/users/me"), ("get", "/bookmarks"), ("patch", "/users")):
        resp = client.request(method.upper(), path)
        assert resp.status_code == 401
        assert resp.json()["statusCode"] == 401

    resp = client.get("/users/me", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401


def test_get_and_edit_current_user(client):
    headers = signup_and_login(client, "a@x.com")

    resp = client.get("/users/me", headers=headers)
    assert resp.status_code == 200
    me = resp.json()
    assert me["email"] == "a@x.com"
    assert me["isEmailVerified"] is True
    assert "passwordHash" not in me and "password_hash" not in me

    resp = client.patch("/users", json={"firstName": "firstName", "lastName": "lastName"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["firstName"] == "firstName"
    assert resp.json()["lastName"] == "lastName"
    assert resp.json()["email"] == "a@x.com"


def test_bookmarks_are_private_to_their_owner(client):
    alice = signup_and_login(client, "alice@x.com")
    bob = signup_and_login(client, "bob@x.com")

    resp = client.post("/bookmarks", json={"title": "mine", "link": "https://a.com"}, headers=alice)
    bookmark_id = resp.json()["id"]

    assert client.get(f"/bookmarks/{bookmark_id}", headers=bob).status_code == 403
    assert client.put(f"/bookmarks/{bookmark_id}", json={"title": "x"}, headers=bob).status_code == 403
    assert client.delete(f"/bookmarks/{bookmark_id}", headers=bob).status_code == 403
    assert client.get("/bookmarks", headers=bob).json() == []

    assert client.put("/bookmarks/999", json={"title": "x"}, headers=alice).status_code == 403
    assert client.delete("/bookmarks/999", headers=alice).status_code == 403


def test_edit_bookmark_applies_partial_update(client):
    headers = signup_and_login(client, "a@x.com")
    created = client.post(
        "/bookmarks",
        json={"title": "t", "description": "d", "link": "https://e.com"},
        headers=headers,
    ).json()

    resp = client.put(f"/bookmarks/{created['id']}", json={"link": "https://new.com"}, headers=headers)
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["link"] == "https://new.com"
    assert updated["title"] == "t"
    assert updated["description"] == "d"

    fetched = client.get(f"/bookmarks/{created['id']}", headers=headers).json()
    assert fetched["link"] == "https://new.com"


def test_create_bookmark_requires_title_and_link(client):
    headers = signup_and_login(client, "a@x.com")
    resp = client.post("/bookmarks", json={"title": "t"}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Bad Request"


def test_unknown_route_uses_error_shape(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json() == {"statusCode": 404, "error": "Not Found", "message": "Not Found"}


def test_out_of_range_bookmark_id_is_rejected(client):
    headers = signup_and_login(client, "a@x.com")
    path = "/bookmarks/99999999999999999999"

    responses = [
        client.get(path, headers=headers),
        client.put(path, json={"title": "x"}, headers=headers),
        client.delete(path, headers=headers),
    ]
    for resp in responses:
        assert resp.status_code == 400
        assert resp.json()["error"] == "Bad Request"


def test_edit_current_user_without_body_keeps_profile(client):
    headers = signup_and_login(client, "a@x.com")
    client.patch("/users", json={"firstName": "Ada"}, headers=headers)

    resp = client.patch("/users", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["firstName"] == "Ada"
    assert resp.json()["email"] == "a@x.com"
