"""
Tests for the category registry: seeded defaults, user categories,
system-category protection and recipe filter categories.
"""

import pytest

from test_fixtures import auth, unique_user, make_item
from app.exceptions import (
    CategoryInUseError,
    DuplicateNameError,
    ForbiddenError,
    NotFoundError,
    ServiceValidationError,
)
from domain.schemas.category_schemas import (
    IngredientCategoryCreate,
    IngredientCategoryUpdate,
    RecipeCategoryCreate,
)
from domain.seeds import DEFAULT_INGREDIENT_CATEGORIES, DEFAULT_RECIPE_CATEGORIES
from services.category_service import CategoryService


def test_seeding_is_idempotent(db_session):
    service = CategoryService(db_session)
    assert service.seed_defaults() == 0

    user = unique_user()
    categories = service.list_ingredient_categories(user)
    assert len(categories) == len(DEFAULT_INGREDIENT_CATEGORIES)
    assert [c.sort_order for c in categories] == sorted(c.sort_order for c in categories)
    assert all(c.is_system for c in categories)
    assert len(service.list_recipe_categories()) == len(DEFAULT_RECIPE_CATEGORIES)


def test_user_categories_are_private(db_session):
    service = CategoryService(db_session)
    alice, bob = unique_user("alice"), unique_user("bob")

    created = service.create_ingredient_category(alice, IngredientCategoryCreate(name="Snacks"))

    assert created.owner_user_id == alice
    assert created.is_system is False
    assert created.icon == "📦"
    assert any(c.id == created.id for c in service.list_ingredient_categories(alice))
    assert all(c.id != created.id for c in service.list_ingredient_categories(bob))
    with pytest.raises(NotFoundError):
        service.get_ingredient_category(bob, created.id)


def test_duplicate_names_rejected_against_system_and_own(db_session):
    service = CategoryService(db_session)
    user = unique_user()
    service.create_ingredient_category(user, IngredientCategoryCreate(name="Snacks"))

    with pytest.raises(DuplicateNameError):
        service.create_ingredient_category(user, IngredientCategoryCreate(name="Meat"))
    with pytest.raises(DuplicateNameError):
        service.create_ingredient_category(user, IngredientCategoryCreate(name="Snacks"))

    # Another user may reuse the name
    other = service.create_ingredient_category(unique_user(), IngredientCategoryCreate(name="Snacks"))
    assert other.name == "Snacks"


def test_blank_name_rejected(db_session):
    with pytest.raises(ServiceValidationError):
        CategoryService(db_session).create_ingredient_category(
            unique_user(), IngredientCategoryCreate(name="   ")
        )


def test_update_ignores_empty_fields(db_session):
    service = CategoryService(db_session)
    user = unique_user()
    created = service.create_ingredient_category(
        user, IngredientCategoryCreate(name="Snacks", color="#123456", sortOrder=4)
    )

    updated = service.update_ingredient_category(
        user, created.id, IngredientCategoryUpdate(name="", icon="🍪", sortOrder=0)
    )

    assert updated.name == "Snacks"
    assert updated.icon == "🍪"
    assert updated.color == "#123456"
    assert updated.sort_order == 4


def test_system_categories_are_forbidden_even_unused(db_session):
    service = CategoryService(db_session)
    user = unique_user()

    with pytest.raises(ForbiddenError):
        service.update_ingredient_category(user, "cat_meat", IngredientCategoryUpdate(name="Beef"))
    with pytest.raises(ForbiddenError):
        service.delete_ingredient_category(user, "cat_meat")


def test_delete_in_use_category_then_after_clearing(db_session):
    service = CategoryService(db_session)
    user = unique_user()
    category = service.create_ingredient_category(user, IngredientCategoryCreate(name="Snacks"))
    item = make_item(db_session, user, "Crackers", category_id=category.id)

    with pytest.raises(CategoryInUseError):
        service.delete_ingredient_category(user, category.id)

    item.category_id = "cat_other"
    db_session.commit()
    service.delete_ingredient_category(user, category.id)

    assert all(c.id != category.id for c in service.list_ingredient_categories(user))
    with pytest.raises(NotFoundError):
        service.delete_ingredient_category(user, category.id)


def test_recipe_categories_by_type(db_session):
    service = CategoryService(db_session)

    tastes = service.list_recipe_categories_by_type("taste")
    assert [c.id for c in tastes][:2] == ["rc_taste_spicy", "rc_taste_sweet"]
    assert {c.type for c in tastes} == {"taste"}

    with pytest.raises(ServiceValidationError):
        service.list_recipe_categories_by_type("colour")


def test_recipe_category_crud(db_session):
    service = CategoryService(db_session)
    created = service.create_recipe_category(
        RecipeCategoryCreate(type="cuisine", name="Thai", sortOrder=7)
    )
    assert created.is_active is True

    updated = service.update_recipe_category(
        created.id, RecipeCategoryCreate(type="cuisine", name="Thai", isActive=False)
    )
    assert updated.is_active is False
    assert all(c.id != created.id for c in service.list_recipe_categories("cuisine"))

    service.delete_recipe_category(created.id)
    with pytest.raises(NotFoundError):
        service.delete_recipe_category(created.id)


def test_category_endpoints(client):
    user = unique_user()
    response = client.get("/api/ingredient-categories", headers=auth(user))
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"][0]["id"] == "cat_meat"
    assert body["data"][0]["isSystem"] is True

    response = client.post(
        "/api/ingredient-categories", json={"name": "Snacks", "sortOrder": 20}, headers=auth(user)
    )
    assert response.status_code == 201
    category_id = response.json()["data"]["id"]

    response = client.post("/api/ingredient-categories", json={"name": "Snacks"}, headers=auth(user))
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "DUPLICATE_NAME"

    response = client.delete("/api/ingredient-categories/cat_meat", headers=auth(user))
    assert response.status_code == 403

    response = client.delete(f"/api/ingredient-categories/{category_id}", headers=auth(user))
    assert response.status_code == 200

    response = client.get("/api/recipe-categories/difficulty", headers=auth(user))
    assert [c["name"] for c in response.json()["data"]] == ["Easy", "Medium", "Hard"]
