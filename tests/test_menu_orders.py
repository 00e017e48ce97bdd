"""
Tests for the daily menu planner and family meal orders.
"""

import pytest

from test_fixtures import auth, days_from_today, make_recipe, unique_user
from app.exceptions import NotFoundError, ServiceValidationError
from domain.schemas.menu_schemas import OrderCreate
from services.menu_service import MenuService
from services.order_service import OrderService


# =============================================================================
# MENU
# =============================================================================


def test_empty_day_is_not_persisted(db_session, clock):
    service = MenuService(db_session, clock)
    menu = service.get_menu(unique_user())

    assert menu.id is None
    assert menu.date == "2024-03-15"
    assert menu.recipes == []


def test_adding_same_recipe_twice_is_a_noop(db_session, clock):
    service = MenuService(db_session, clock)
    user = unique_user()
    recipe = make_recipe(db_session, user, "Mapo Tofu")

    first = service.add_recipe(user, recipe.id, "lunch")
    second = service.add_recipe(user, recipe.id, "dinner")

    assert first.id == second.id
    assert len(second.recipes) == 1
    assert second.recipes[0].recipe_name == "Mapo Tofu"
    assert second.recipes[0].meal_type == "lunch"


def test_menu_defaults_to_dinner_and_keeps_insertion_order(db_session, clock):
    service = MenuService(db_session, clock)
    user = unique_user()
    soup = make_recipe(db_session, user, "Soup")
    rice = make_recipe(db_session, user, "Fried Rice")

    service.add_recipe(user, soup.id)
    menu = service.add_recipe(user, rice.id, "breakfast")

    assert [(e.recipe_name, e.meal_type) for e in menu.recipes] == [
        ("Soup", "dinner"),
        ("Fried Rice", "breakfast"),
    ]


def test_menus_are_per_day(db_session, clock):
    service = MenuService(db_session, clock)
    user = unique_user()
    recipe = make_recipe(db_session, user)

    service.add_recipe(user, recipe.id, day=days_from_today(1))

    assert service.get_menu(user).recipes == []
    assert len(service.get_menu(user, days_from_today(1)).recipes) == 1


def test_menu_accepts_public_recipes_only_from_others(db_session, clock):
    service = MenuService(db_session, clock)
    user, chef = unique_user(), unique_user("chef")
    public = make_recipe(db_session, chef, "Public Dish", is_public=True)
    private = make_recipe(db_session, chef, "Secret Dish")

    assert len(service.add_recipe(user, public.id).recipes) == 1
    with pytest.raises(NotFoundError):
        service.add_recipe(user, private.id)


def test_remove_recipe_from_menu(db_session, clock):
    service = MenuService(db_session, clock)
    user = unique_user()
    recipe = make_recipe(db_session, user)
    service.add_recipe(user, recipe.id)

    menu = service.remove_recipe(user, recipe.id)

    assert menu.recipes == []
    with pytest.raises(NotFoundError):
        service.remove_recipe(user, recipe.id)


def test_invalid_meal_type_and_date(db_session, clock):
    service = MenuService(db_session, clock)
    user = unique_user()
    recipe = make_recipe(db_session, user)

    with pytest.raises(ServiceValidationError):
        service.add_recipe(user, recipe.id, "brunch")
    with pytest.raises(ServiceValidationError):
        service.get_menu(user, "2024/03/15")


# =============================================================================
# ORDERS
# =============================================================================


def test_order_lifecycle_and_idempotent_confirm(db_session, clock):
    service = OrderService(db_session, clock)
    user = unique_user()
    recipe = make_recipe(db_session, user, "Dumplings")

    order = service.create_order(
        user, OrderCreate(recipes=[{"recipeId": recipe.id, "recipeName": "Dumplings"}])
    )
    assert order.status == "pending"
    assert order.recipes[0].recipe_id == recipe.id

    confirmed = service.confirm_order(user, order.id)
    again = service.confirm_order(user, order.id)
    assert confirmed.status == "confirmed"
    assert again.status == "confirmed"


def test_order_requires_recipes_and_ownership(db_session, clock):
    service = OrderService(db_session, clock)
    user = unique_user()

    with pytest.raises(ServiceValidationError):
        service.create_order(user, OrderCreate(recipes=[]))

    order = service.create_order(user, OrderCreate(recipes=[{"recipeId": "r1"}]))
    with pytest.raises(NotFoundError):
        service.confirm_order(unique_user("intruder"), order.id)


def test_list_orders_by_status(db_session, clock):
    service = OrderService(db_session, clock)
    user = unique_user()
    first = service.create_order(user, OrderCreate(recipes=[{"recipeId": "r1"}]))
    service.create_order(user, OrderCreate(recipes=[{"recipeId": "r2"}]))
    service.confirm_order(user, first.id)

    assert service.list_orders(user, ["confirmed"]).total == 1
    assert service.list_orders(user, ["pending", "confirmed"]).total == 2
    assert service.list_orders(user).total == 2
    with pytest.raises(ServiceValidationError):
        service.list_orders(user, ["cooking"])


def test_orderable_recipes_include_public(db_session, clock):
    service = OrderService(db_session, clock)
    user, chef = unique_user(), unique_user("chef")
    make_recipe(db_session, user, "Mine")
    make_recipe(db_session, chef, "Shared", is_public=True)
    make_recipe(db_session, chef, "Hidden")

    names = {r.name for r in service.list_orderable_recipes(user).items}
    assert names == {"Mine", "Shared"}


def test_menu_and_order_endpoints(client, db_session):
    user = unique_user()
    recipe = make_recipe(db_session, user, "Noodles")

    response = client.post(
        "/api/today-menu/recipes",
        json={"recipeId": recipe.id, "mealType": "lunch"},
        headers=auth(user),
    )
    assert response.status_code == 200
    assert response.json()["data"]["recipes"][0]["recipeName"] == "Noodles"

    response = client.get("/api/today-menu", headers=auth(user))
    assert response.json()["data"]["date"] == "2024-03-15"

    response = client.delete(f"/api/today-menu/recipes/{recipe.id}", headers=auth(user))
    assert response.json()["data"]["recipes"] == []

    response = client.post(
        "/api/meals/orders",
        json={"recipes": [{"recipeId": recipe.id, "recipeName": "Noodles"}]},
        headers=auth(user),
    )
    assert response.status_code == 201
    order_id = response.json()["data"]["id"]

    response = client.post(f"/api/meals/orders/{order_id}/confirm", headers=auth(user))
    assert response.json()["data"]["status"] == "confirmed"

    response = client.get("/api/meals/orders", params={"status": "pending"}, headers=auth(user))
    assert response.json()["data"]["total"] == 0

    response = client.get("/api/meals/recipes", headers=auth(user))
    assert [r["name"] for r in response.json()["data"]["items"]] == ["Noodles"]
