from __future__ import annotations

import pytest

from conftest import BASE_URL
from hr_admin_portal.api.client import ApiClient, ApiConfig
from hr_admin_portal.core.exceptions import ApiError, SessionExpiredError


def _client(http, token="tok-1"):
    hits = []
    client = ApiClient(
        ApiConfig(base_url=BASE_URL + "/", timeout=3, extra_headers={"X-Client": "portal"}),
        token_provider=lambda: token,
        http_session=http,
        on_unauthorized=lambda: hits.append(True),
    )
    return client, hits


def test_sends_bearer_token_and_drops_empty_params(http):
    http.add("GET", "/users", {"data": []})
    client, _ = _client(http)

    client.get("/users", params={"page": 2, "search": "", "status": None, "isHalfDay": False})

    call = http.calls[0]
    assert call["headers"]["Authorization"] == "Bearer tok-1"
    assert call["headers"]["X-Client"] == "portal"
    assert call["params"] == {"page": "2", "isHalfDay": "false"}
    assert call["timeout"] == 3


def test_no_token_means_no_authorization_header(http):
    http.add("POST", "/auth/login", {"access_token": "x"})
    client, _ = _client(http, token=None)

    client.post("/auth/login", {"email": "a@b.co", "password": "p"})

    assert "Authorization" not in http.calls[0]["headers"]
    assert http.calls[0]["json"] == {"email": "a@b.co", "password": "p"}


def test_explicit_token_overrides_provider(http):
    http.add("POST", "/auth/logout", None, status=204)
    client, _ = _client(http, token=None)

    assert client.post("/auth/logout", {}, token="old") is None
    assert http.calls[0]["headers"]["Authorization"] == "Bearer old"


@pytest.mark.parametrize("status", [401, 403])
def test_unauthorized_triggers_forced_logout(http, status):
    http.add("GET", "/roles", {"message": "Unauthorized"}, status=status)
    client, hits = _client(http)

    with pytest.raises(SessionExpiredError):
        client.get("/roles")
    assert hits == [True]


def test_unauthorized_on_login_does_not_force_logout(http):
    http.add("POST", "/auth/login", {"message": "Invalid credentials"}, status=401)
    client, hits = _client(http)

    with pytest.raises(ApiError) as exc:
        client.post("/auth/login", {"email": "a@b.co", "password": "bad"})

    assert not isinstance(exc.value, SessionExpiredError)
    assert exc.value.status_code == 401
    assert exc.value.message == "Invalid credentials"
    assert hits == []


def test_error_message_from_validation_list(http):
    http.add("POST", "/roles", {"message": ["name must be longer", "other"]}, status=400)
    client, _ = _client(http)

    with pytest.raises(ApiError, match="name must be longer") as exc:
        client.post("/roles", {})
    assert exc.value.payload == {"message": ["name must be longer", "other"]}


def test_network_failure_becomes_api_error(http, network_error):
    http.fail_with = network_error
    client, hits = _client(http)

    with pytest.raises(ApiError) as exc:
        client.get("/users")
    assert exc.value.status_code == 0
    assert hits == []


def test_verbs_hit_expected_urls(http):
    for method in ("PUT", "PATCH", "DELETE"):
        http.add(method, "/roles/r1", {"data": {}})
    client, _ = _client(http)

    client.put("/roles/r1", {"a": 1})
    client.patch("/roles/r1")
    client.delete("/roles/r1")

    assert [c["method"] for c in http.calls] == ["PUT", "PATCH", "DELETE"]
    assert http.calls[1]["json"] == {}
    assert client.url_for("/roles") == BASE_URL + "/roles"


def test_multipart_upload_leaves_content_type_to_requests(http):
    http.add("POST", "/tours/t1/documents", {"data": {"uploaded": 1}})
    client, _ = _client(http)

    files = {"document": ("plan.pdf", b"%PDF-1.4", "application/pdf")}
    assert client.post_form("/tours/t1/documents", files) == {"data": {"uploaded": 1}}

    call = http.last("POST", "/tours/t1/documents")
    assert call["files"] is files
    assert call["json"] is None
    assert "Content-Type" not in call["headers"]
    assert call["headers"]["Authorization"] == "Bearer tok-1"
