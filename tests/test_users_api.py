from sqlalchemy.exc import OperationalError

from app.data.database import get_db
from app.repos.user_repo import UserRepo


def create(client, name="Ann", email="ann@x.com"):
    resp = client.post("/users", json={"name": name, "email": email})
    assert resp.status_code == 201
    return resp.json()


def test_list_empty(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_then_list(client):
    body = create(client)
    assert body["name"] == "Ann"
    assert body["email"] == "ann@x.com"
    assert isinstance(body["id"], int)

    users = client.get("/users").json()
    assert users == [{"id": body["id"], "name": "Ann", "email": "ann@x.com"}]


def test_create_assigns_unique_ids(client):
    first = create(client, "Ann", "ann@x.com")
    second = create(client, "Bob", "bob@x.com")
    assert first["id"] != second["id"]
    assert len(client.get("/users").json()) == 2


def test_trailing_slash_accepted(client):
    resp = client.post("/users/", json={"name": "Ann", "email": "ann@x.com"})
    assert resp.status_code == 201
    assert len(client.get("/users/").json()) == 1


def test_duplicate_email_allowed(client):
    create(client, "Ann", "same@x.com")
    create(client, "Bob", "same@x.com")
    assert len(client.get("/users").json()) == 2


def test_create_rejects_missing_fields(client, count_users):
    for payload in ({"name": "Ann"}, {"email": "ann@x.com"}, {"name": "", "email": "ann@x.com"},
                    {"name": "Ann", "email": ""}, {}):
        resp = client.post("/users", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"message": "Name and email are required"}
    assert count_users() == 0


def test_create_rejects_malformed_body(client, count_users):
    resp = client.post("/users", content="not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert "message" in resp.json()
    assert count_users() == 0


def test_update_changes_only_target(client):
    ann = create(client, "Ann", "ann@x.com")
    bob = create(client, "Bob", "bob@x.com")

    resp = client.put(f"/users/{ann['id']}", json={"name": "Annie", "email": "annie@x.com"})
    assert resp.status_code == 200
    assert resp.json() == {
        "id": ann["id"],
        "name": "Annie",
        "email": "annie@x.com",
        "message": "User updated successfully",
    }

    users = {u["id"]: u for u in client.get("/users").json()}
    assert users[ann["id"]]["name"] == "Annie"
    assert users[bob["id"]] == bob


def test_update_with_same_values_is_not_404(client):
    ann = create(client)
    resp = client.put(f"/users/{ann['id']}", json={"name": "Ann", "email": "ann@x.com"})
    assert resp.status_code == 200


def test_update_missing_user_returns_404(client):
    ann = create(client)
    resp = client.put("/users/9999", json={"name": "X", "email": "x@x.com"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "User with id 9999 not found"}
    assert client.get("/users").json() == [ann]


def test_update_rejects_empty_fields(client):
    ann = create(client)
    resp = client.put(f"/users/{ann['id']}", json={"name": "", "email": "new@x.com"})
    assert resp.status_code == 400
    assert client.get("/users").json() == [ann]


def test_update_rejects_non_integer_id(client):
    resp = client.put("/users/abc", json={"name": "X", "email": "x@x.com"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid user id"}


def test_out_of_range_id_is_not_found(client, count_users):
    create(client)
    for huge in ("99999999999999999999", "9223372036854775808", "2147483648"):
        resp = client.put(f"/users/{huge}", json={"name": "X", "email": "x@x.com"})
        assert resp.status_code == 404
        assert resp.json() == {"message": f"User with id {huge} not found"}

        resp = client.delete(f"/users/{huge}")
        assert resp.status_code == 404
        assert resp.json() == {"message": f"User with id {huge} not found"}
    assert count_users() == 1


def test_non_positive_id_is_not_found(client):
    assert client.delete("/users/0").status_code == 404
    assert client.put("/users/-1", json={"name": "X", "email": "x@x.com"}).status_code == 404


def test_out_of_range_id_still_validates_body_first(client):
    resp = client.put("/users/99999999999999999999", json={"name": "", "email": "x@x.com"})
    assert resp.status_code == 400


def test_delete_then_delete_again(client):
    ann = create(client)
    resp = client.delete(f"/users/{ann['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"id": ann["id"], "message": "User deleted successfully"}
    assert client.get("/users").json() == []

    resp = client.delete(f"/users/{ann['id']}")
    assert resp.status_code == 404
    assert resp.json()["message"] == f"User with id {ann['id']} not found"


def test_delete_missing_leaves_storage_unchanged(client):
    ann = create(client)
    assert client.delete("/users/12345").status_code == 404
    assert client.get("/users").json() == [ann]


def test_full_scenario(client):
    created = client.post("/users", json={"name": "Ann", "email": "ann@x.com"})
    assert created.status_code == 201
    user_id = created.json()["id"]

    updated = client.put(f"/users/{user_id}", json={"name": "Annie", "email": "ann@x.com"})
    assert updated.status_code == 200
    names = {u["id"]: u["name"] for u in client.get("/users").json()}
    assert names[user_id] == "Annie"

    assert client.delete(f"/users/{user_id}").status_code == 200
    assert user_id not in {u["id"] for u in client.get("/users").json()}
    assert client.delete(f"/users/{user_id}").status_code == 404


def _broken(*args, **kwargs):
    raise OperationalError("SELECT 1", {}, Exception("connection refused"))


def test_storage_failure_maps_to_500(client, monkeypatch):
    monkeypatch.setattr(UserRepo, "list_users", _broken)
    monkeypatch.setattr(UserRepo, "create_user", _broken)
    monkeypatch.setattr(UserRepo, "update_user", _broken)
    monkeypatch.setattr(UserRepo, "delete_user", _broken)

    responses = [
        client.get("/users"),
        client.post("/users", json={"name": "Ann", "email": "ann@x.com"}),
        client.put("/users/1", json={"name": "Ann", "email": "ann@x.com"}),
        client.delete("/users/1"),
    ]
    for resp in responses:
        assert resp.status_code == 500
        body = resp.json()
        assert body["message"] == "Database operation failed"
        assert "connection refused" in body["error"]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "database": "connected"}


def test_index_page_served(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]


class _BrokenSession:
    def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("could not connect to server"))

    def close(self):
        pass


def test_health_reports_503_when_database_down(app, client):
    def broken_db():
        yield _BrokenSession()

    app.dependency_overrides[get_db] = broken_db
    resp = client.get("/health")
    assert resp.status_code == 503
    assert "could not connect to server" in resp.json()["detail"]


def test_index_page_keeps_single_error_timer(client):
    page = client.get("/").text
    assert "clearTimeout(errorTimer)" in page
