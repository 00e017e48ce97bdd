"""
Error envelope tests.

Every failure is rendered as
{"success": false, "error": {"code", "message", "details"?}, "timestamp"}
with the HTTP status matching the error kind.
"""

import pytest

from test_fixtures import auth, unique_user
from app.exceptions import (
    CategoryInUseError,
    ConflictError,
    DuplicateNameError,
    ForbiddenError,
    NotFoundError,
    ServiceError,
    ServiceValidationError,
    UnauthorizedError,
)


def _assert_envelope(response, status_code, code):
    assert response.status_code == status_code
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == code
    assert body["error"]["message"]
    assert "timestamp" in body
    return body


@pytest.mark.parametrize(
    "error_cls, status_code, code",
    [
        (ServiceValidationError, 400, "BAD_REQUEST"),
        (UnauthorizedError, 401, "UNAUTHORIZED"),
        (ForbiddenError, 403, "FORBIDDEN"),
        (NotFoundError, 404, "NOT_FOUND"),
        (ConflictError, 409, "CONFLICT"),
        (DuplicateNameError, 409, "DUPLICATE_NAME"),
        (CategoryInUseError, 409, "CATEGORY_IN_USE"),
    ],
)
def test_error_kinds(error_cls, status_code, code):
    error = error_cls(details={"id": "x"})
    assert isinstance(error, ServiceError)
    assert error.http_status == status_code
    assert error.to_dict() == {"code": code, "message": error.message, "details": {"id": "x"}}


def test_missing_identity_is_401(client):
    body = _assert_envelope(client.get("/api/ingredients"), 401, "UNAUTHORIZED")
    assert "X-User-ID" in body["error"]["message"]

    _assert_envelope(client.get("/api/ingredients", headers={"X-User-ID": "  "}), 401, "UNAUTHORIZED")


def test_unknown_resource_is_404(client):
    user = unique_user()
    body = _assert_envelope(client.get("/api/shopping-lists/missing", headers=auth(user)), 404, "NOT_FOUND")
    assert body["error"]["details"]["list_id"] == "missing"

    _assert_envelope(client.get("/api/recipes/missing", headers=auth(user)), 404, "NOT_FOUND")


def test_other_users_resource_is_404(client):
    owner, intruder = unique_user("owner"), unique_user("intruder")
    response = client.post("/api/shopping-lists", json={"name": "Mine"}, headers=auth(owner))
    list_id = response.json()["data"]["id"]

    _assert_envelope(client.get(f"/api/shopping-lists/{list_id}", headers=auth(intruder)), 404, "NOT_FOUND")


def test_bad_input_is_400(client):
    user = unique_user()
    _assert_envelope(
        client.post("/api/ingredients", json={"name": "Milk", "expiryDate": "soon"}, headers=auth(user)),
        400,
        "BAD_REQUEST",
    )
    _assert_envelope(client.get("/api/today-menu", params={"date": "tomorrow"}, headers=auth(user)), 400, "BAD_REQUEST")
    _assert_envelope(client.get("/api/recipe-categories/colour", headers=auth(user)), 400, "BAD_REQUEST")


def test_schema_violation_is_422(client):
    user = unique_user()
    body = _assert_envelope(
        client.post("/api/ingredients", json={"quantity": 1}, headers=auth(user)),
        422,
        "VALIDATION_ERROR",
    )
    assert isinstance(body["error"]["details"], list)

    _assert_envelope(
        client.post("/api/ingredients", json={"name": "Milk", "quantity": -1}, headers=auth(user)),
        422,
        "VALIDATION_ERROR",
    )


def test_category_in_use_is_409(client):
    user = unique_user()
    response = client.post("/api/ingredient-categories", json={"name": "Snacks"}, headers=auth(user))
    category_id = response.json()["data"]["id"]
    client.post("/api/ingredients", json={"name": "Crisps", "categoryId": category_id}, headers=auth(user))

    body = _assert_envelope(
        client.delete(f"/api/ingredient-categories/{category_id}", headers=auth(user)),
        409,
        "CATEGORY_IN_USE",
    )
    assert body["error"]["details"]["item_count"] == 1


def test_unknown_route_is_404_envelope(client):
    _assert_envelope(client.get("/api/nowhere", headers=auth(unique_user())), 404, "HTTP_404")
