"""
Tests for shopping lists.

Shopping List Flow:
===================
1. User creates a list (optionally with items)
2. Items are added, checked off, repriced or removed; every change
   rewrites the item collection and recomputes the total price
3. The list is completed and moves to the history
4. A share code can be issued for any owned list

Example:
- add Tomatoes 3.50, add Eggs 6.00  -> total 9.50
- check Tomatoes                    -> total stays 9.50
- remove Eggs                       -> total 3.50
"""

from datetime import timedelta

import pytest

from test_fixtures import FROZEN_NOW, auth, unique_user
from app.exceptions import NotFoundError, ServiceValidationError
from domain.models import ShoppingList
from domain.schemas.shopping_schemas import (
    ShoppingItemCreate,
    ShoppingItemUpdate,
    ShoppingListCreate,
    ShoppingListUpdate,
)
from services.shopping_service import ShoppingService, SHARE_CODE_LENGTH


def test_total_follows_item_changes(db_session, clock):
    service = ShoppingService(db_session, clock)
    user = unique_user()
    shopping_list = service.create(user, ShoppingListCreate())
    assert shopping_list.name == "Shopping List"
    assert shopping_list.total_price == 0

    tomatoes = service.add_item(user, shopping_list.id, ShoppingItemCreate(name="Tomatoes", price=3.5))
    eggs = service.add_item(user, shopping_list.id, ShoppingItemCreate(name="Eggs", amount="12", price=6))
    assert service.get(user, shopping_list.id).total_price == 9.5

    checked = service.update_item(user, shopping_list.id, tomatoes.id, ShoppingItemUpdate(checked=True))
    assert checked.checked is True
    current = service.get(user, shopping_list.id)
    assert current.total_price == 9.5
    assert [i.name for i in current.items] == ["Tomatoes", "Eggs"]

    after_remove = service.remove_item(user, shopping_list.id, eggs.id)
    assert after_remove.total_price == 3.5
    assert [i.id for i in after_remove.items] == [tomatoes.id]


def test_total_is_rounded_to_cents(db_session, clock):
    service = ShoppingService(db_session, clock)
    user = unique_user()
    created = service.create(
        user,
        ShoppingListCreate(items=[{"name": "a", "price": 0.1}, {"name": "b", "price": 0.2}]),
    )
    assert created.total_price == 0.3
    assert all(i.id for i in created.items)


def test_update_item_keeps_unsupplied_fields(db_session, clock):
    service = ShoppingService(db_session, clock)
    user = unique_user()
    shopping_list = service.create(user, ShoppingListCreate(name="Weekend"))
    item = service.add_item(user, shopping_list.id, ShoppingItemCreate(name="Flour", amount="1kg", price=2))

    updated = service.update_item(user, shopping_list.id, item.id, ShoppingItemUpdate(name="", price=2.5))

    assert updated.name == "Flour"
    assert updated.amount == "1kg"
    assert updated.price == 2.5
    assert service.get(user, shopping_list.id).total_price == 2.5


def test_missing_items_and_lists(db_session, clock):
    service = ShoppingService(db_session, clock)
    user = unique_user()
    shopping_list = service.create(user, ShoppingListCreate())

    with pytest.raises(NotFoundError):
        service.update_item(user, shopping_list.id, "nope", ShoppingItemUpdate(checked=True))
    with pytest.raises(NotFoundError):
        service.remove_item(user, shopping_list.id, "nope")
    with pytest.raises(NotFoundError):
        service.get(unique_user("intruder"), shopping_list.id)
    with pytest.raises(ServiceValidationError):
        service.add_item(user, shopping_list.id, ShoppingItemCreate(name="  "))


def test_replace_items_and_rename(db_session, clock):
    service = ShoppingService(db_session, clock)
    user = unique_user()
    shopping_list = service.create(user, ShoppingListCreate(items=[{"name": "Milk", "price": 1}]))

    updated = service.update(
        user,
        shopping_list.id,
        ShoppingListUpdate(name="Party", items=[{"name": "Chips", "price": 2}, {"name": "Soda", "price": 1.25}]),
    )

    assert updated.name == "Party"
    assert [i.name for i in updated.items] == ["Chips", "Soda"]
    assert updated.total_price == 3.25


def test_item_changes_are_persisted(db_session, clock):
    """The whole document is rewritten, so a fresh read sees the change"""
    service = ShoppingService(db_session, clock)
    user = unique_user()
    shopping_list = service.create(user, ShoppingListCreate())
    item = service.add_item(user, shopping_list.id, ShoppingItemCreate(name="Salt", price=1))
    service.update_item(user, shopping_list.id, item.id, ShoppingItemUpdate(checked=True))

    db_session.expire_all()
    stored = db_session.get(ShoppingList, shopping_list.id)
    assert stored.items[0]["checked"] is True
    assert stored.total_price == 1


def test_current_list_and_completion(db_session, clock):
    service = ShoppingService(db_session, clock)
    user = unique_user()

    placeholder = service.get_current(user)
    assert placeholder.id is None
    assert placeholder.items == []

    shopping_list = service.create(user, ShoppingListCreate(items=[{"name": "Rice", "price": 4}]))
    assert service.get_current(user).id == shopping_list.id

    completed = service.complete(user, shopping_list.id)
    assert completed.completed_at == clock.now()
    assert service.get_current(user).id is None

    history = service.history(user)
    assert history.total == 1
    assert history.items[0].item_count == 1
    assert history.items[0].total_price == 4


def test_history_date_range(db_session, clock):
    service = ShoppingService(db_session, clock)
    user = unique_user()
    early = service.create(user, ShoppingListCreate(name="Early"))
    service.complete(user, early.id)
    clock.advance(days=5)
    late = service.create(user, ShoppingListCreate(name="Late"))
    service.complete(user, late.id)

    everything = service.history(user)
    assert [s.name for s in everything.items] == ["Late", "Early"]

    day = (clock.now() - timedelta(days=5)).strftime("%Y-%m-%d")
    only_early = service.history(user, start_date=day, end_date=day)
    assert [s.name for s in only_early.items] == ["Early"]

    with pytest.raises(ServiceValidationError):
        service.history(user, start_date="yesterday")


def test_list_filter_by_completion(db_session, clock):
    service = ShoppingService(db_session, clock)
    user = unique_user()
    done = service.create(user, ShoppingListCreate(name="Done"))
    service.create(user, ShoppingListCreate(name="Open"))
    service.complete(user, done.id)

    assert [s.name for s in service.list(user, completed=True).items] == ["Done"]
    assert [s.name for s in service.list(user, completed=False).items] == ["Open"]
    assert service.list(user).total == 2


def test_share_code(db_session, clock):
    service = ShoppingService(db_session, clock)
    user = unique_user()
    shopping_list = service.create(user, ShoppingListCreate())

    link = service.share(user, shopping_list.id)

    assert len(link.share_code) == SHARE_CODE_LENGTH
    assert link.share_code.isalnum()
    assert link.share_url.endswith(link.share_code)


def test_delete_list(db_session, clock):
    service = ShoppingService(db_session, clock)
    user = unique_user()
    shopping_list = service.create(user, ShoppingListCreate())

    service.delete(user, shopping_list.id)

    with pytest.raises(NotFoundError):
        service.get(user, shopping_list.id)
    assert service.list(user).total == 0


def test_shopping_endpoints(client):
    user = unique_user()
    response = client.get("/api/shopping-lists/current", headers=auth(user))
    assert response.status_code == 200
    assert response.json()["data"]["id"] is None

    response = client.post("/api/shopping-lists", json={"name": "Weekly"}, headers=auth(user))
    assert response.status_code == 201
    list_id = response.json()["data"]["id"]

    response = client.post(
        f"/api/shopping-lists/{list_id}/items",
        json={"name": "Tomatoes", "price": 3.5},
        headers=auth(user),
    )
    item_id = response.json()["data"]["id"]
    client.post(
        f"/api/shopping-lists/{list_id}/items",
        json={"name": "Eggs", "price": 6.0},
        headers=auth(user),
    )

    response = client.put(
        f"/api/shopping-lists/{list_id}/items/{item_id}",
        json={"checked": True},
        headers=auth(user),
    )
    assert response.json()["data"]["checked"] is True

    response = client.get(f"/api/shopping-lists/{list_id}", headers=auth(user))
    assert response.json()["data"]["totalPrice"] == 9.5

    response = client.post(f"/api/shopping-lists/{list_id}/complete", headers=auth(user))
    assert response.json()["data"]["completedAt"] is not None

    response = client.get("/api/shopping-lists/history", headers=auth(user))
    page = response.json()["data"]
    assert page["total"] == 1
    assert page["items"][0]["itemCount"] == 2
    assert page["has_next"] is False


def test_timestamps_follow_the_service_clock(db_session, clock):
    service = ShoppingService(db_session, clock)
    user = unique_user()
    older = service.create(user, ShoppingListCreate(name="Older"))
    assert older.created_at == clock.now()

    clock.advance(hours=2)
    newer = service.create(user, ShoppingListCreate(name="Newer"))
    service.add_item(user, older.id, ShoppingItemCreate(name="Salt"))

    assert service.get_current(user).id == newer.id
    touched = service.get(user, older.id)
    assert touched.created_at == FROZEN_NOW
    assert touched.updated_at == clock.now()
