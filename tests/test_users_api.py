"""HTTP contract for /user."""

import uuid

from tests.utils import auth_header


def register(client, payload) -> dict:
    response = client.post("/user", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestRegister:
    def test_created_user_includes_token(self, client, user_payload):
        response = client.post("/user", json=user_payload())

        assert response.status_code == 201
        body = response.json()
        assert uuid.UUID(body["id"])
        assert body["name"] == "Pedro Picapiedra"
        assert body["email"] == "pedro@picapiedra.org"
        assert body["token"]
        assert body["is_active"] is True
        assert body["created"] is not None
        assert body["last_login"] is not None
        assert body["phones"] == [{"number": "987654321", "citycode": "2", "countrycode": "56"}]
        assert "password" not in body

    def test_duplicate_email_is_bad_request(self, client, user_payload):
        register(client, user_payload("a@x.com"))

        response = client.post("/user", json=user_payload("a@x.com"))

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "DuplicateEmailException"

    def test_invalid_email_is_bad_request(self, client, user_payload):
        response = client.post("/user", json=user_payload("not-an-email"))

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "ValidationError"
        assert error["details"]["errors"][0]["field"] == "email"

    def test_weak_password_is_bad_request(self, client, user_payload):
        response = client.post("/user", json=user_payload(password="short"))

        assert response.status_code == 400

    def test_missing_field_is_bad_request(self, client, user_payload):
        payload = user_payload()
        del payload["name"]

        assert client.post("/user", json=payload).status_code == 400


class TestAuthentication:
    def test_missing_token(self, client):
        response = client.get(f"/user/{uuid.uuid4()}")

        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.get(f"/user/{uuid.uuid4()}", headers=auth_header("bogus"))

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"


class TestRead:
    def test_get_own_user(self, client, user_payload):
        created = register(client, user_payload())

        response = client.get(f"/user/{created['id']}", headers=auth_header(created["token"]))

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]
        assert response.json()["email"] == "pedro@picapiedra.org"

    def test_any_authenticated_user_can_read(self, client, user_payload):
        target = register(client, user_payload("target@example.com"))
        caller = register(client, user_payload("caller@example.com"))

        response = client.get(f"/user/{target['id']}", headers=auth_header(caller["token"]))

        assert response.status_code == 200
        assert response.json()["email"] == "target@example.com"

    def test_unknown_id_is_not_found(self, client, user_payload):
        created = register(client, user_payload())

        response = client.get(f"/user/{uuid.uuid4()}", headers=auth_header(created["token"]))

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "EntityNotFoundException"


class TestReplace:
    def test_owner_replaces_user(self, client, user_payload):
        created = register(client, user_payload())
        payload = user_payload(
            "pedro.updated@picapiedra.org",
            name="Pedro Picapiedra Updated",
            phones=[{"number": "123123123", "citycode": "2", "countrycode": "56"}],
        )

        response = client.put(f"/user/{created['id']}", json=payload, headers=auth_header(created["token"]))

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Pedro Picapiedra Updated"
        assert body["email"] == "pedro.updated@picapiedra.org"
        assert body["phones"][0]["number"] == "123123123"
        assert body["modified"] is not None

    def test_resubmitting_own_email_succeeds(self, client, user_payload):
        created = register(client, user_payload("a@x.com"))

        response = client.put(
            f"/user/{created['id']}", json=user_payload("a@x.com"), headers=auth_header(created["token"])
        )

        assert response.status_code == 200

    def test_other_users_email_is_bad_request(self, client, user_payload):
        register(client, user_payload("a@x.com"))
        other = register(client, user_payload("b@x.com"))

        response = client.put(
            f"/user/{other['id']}", json=user_payload("a@x.com"), headers=auth_header(other["token"])
        )

        assert response.status_code == 400

    def test_non_owner_is_forbidden(self, client, user_payload):
        target = register(client, user_payload("target@example.com"))
        caller = register(client, user_payload("caller@example.com"))

        response = client.put(
            f"/user/{target['id']}", json=user_payload("x@example.com"), headers=auth_header(caller["token"])
        )

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "ForbiddenException"


class TestPatch:
    def test_patch_changes_only_given_fields(self, client, user_payload):
        created = register(client, user_payload())

        response = client.patch(
            f"/user/{created['id']}",
            json={"name": "Pedro Picapiedra Partial"},
            headers=auth_header(created["token"]),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Pedro Picapiedra Partial"
        assert body["email"] == "pedro@picapiedra.org"
        assert len(body["phones"]) == 1
        assert body["modified"] is not None

    def test_patch_validates_present_fields(self, client, user_payload):
        created = register(client, user_payload())

        response = client.patch(
            f"/user/{created['id']}", json={"email": "broken"}, headers=auth_header(created["token"])
        )

        assert response.status_code == 400

    def test_non_owner_is_forbidden(self, client, user_payload):
        target = register(client, user_payload("target@example.com"))
        caller = register(client, user_payload("caller@example.com"))

        response = client.patch(
            f"/user/{target['id']}", json={"name": "Hijacked"}, headers=auth_header(caller["token"])
        )

        assert response.status_code == 403


class TestDelete:
    def test_owner_deletes_user(self, client, user_payload):
        created = register(client, user_payload())
        headers = auth_header(created["token"])

        response = client.delete(f"/user/{created['id']}", headers=headers)

        assert response.status_code == 204
        assert client.get(f"/user/{created['id']}", headers=headers).status_code == 404

    def test_non_owner_is_forbidden(self, client, user_payload):
        target = register(client, user_payload("target@example.com"))
        caller = register(client, user_payload("caller@example.com"))

        response = client.delete(f"/user/{target['id']}", headers=auth_header(caller["token"]))

        assert response.status_code == 403

    def test_non_owner_on_missing_id_is_forbidden_not_not_found(self, client, user_payload):
        caller = register(client, user_payload())

        response = client.delete(f"/user/{uuid.uuid4()}", headers=auth_header(caller["token"]))

        assert response.status_code == 403


class TestServiceEndpoints:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_request_id_header_is_returned(self, client):
        response = client.get("/health")

        assert response.headers.get("X-Request-ID")
