"""
Tests for the recipe library: ownership, visibility, filters, favorites
and cloning public recipes.
"""

import pytest

from test_fixtures import auth, make_recipe, unique_user
from app.exceptions import ForbiddenError, NotFoundError, ServiceValidationError
from domain.schemas.recipe_schemas import RecipeCreate, RecipeUpdate
from services.recipe_service import RecipeService


def _recipe(name="Kung Pao Chicken", **fields) -> RecipeCreate:
    data = {
        "name": name,
        "time": "25 min",
        "difficulty": "medium",
        "tags": ["spicy"],
        "categories": ["rc_taste_spicy", "rc_cuisine_sichuan"],
        "ingredients": [{"name": "chicken", "amount": "300g"}, {"name": "peanuts", "amount": "50g"}],
        "steps": ["Dice chicken", "Stir-fry"],
    }
    data.update(fields)
    return RecipeCreate(**data)


def test_create_and_get(db_session, clock):
    service = RecipeService(db_session, clock)
    user = unique_user()

    created = service.create(user, _recipe())

    fetched = service.get(user, created.id)
    assert fetched.name == "Kung Pao Chicken"
    assert fetched.owner_user_id == user
    assert fetched.is_public is False
    assert fetched.favorite is False
    assert [i.name for i in fetched.ingredients] == ["chicken", "peanuts"]
    assert fetched.steps == ["Dice chicken", "Stir-fry"]


def test_blank_name_rejected(db_session, clock):
    with pytest.raises(ServiceValidationError):
        RecipeService(db_session, clock).create(unique_user(), _recipe(name="  "))


def test_private_recipes_invisible_to_others(db_session, clock):
    service = RecipeService(db_session, clock)
    owner, other = unique_user("owner"), unique_user("other")
    private = service.create(owner, _recipe())
    public = service.create(owner, _recipe("Public Soup", isPublic=True))

    with pytest.raises(NotFoundError):
        service.get(other, private.id)
    assert service.get(other, public.id).name == "Public Soup"


def test_only_owner_can_modify(db_session, clock):
    service = RecipeService(db_session, clock)
    owner, other = unique_user("owner"), unique_user("other")
    public = service.create(owner, _recipe(isPublic=True))

    with pytest.raises(ForbiddenError):
        service.update(other, public.id, RecipeUpdate(name="Hijacked"))
    with pytest.raises(ForbiddenError):
        service.delete(other, public.id)

    updated = service.update(owner, public.id, RecipeUpdate(name="Renamed", isPublic=True))
    assert updated.name == "Renamed"
    assert updated.steps == []


def test_delete_hides_recipe(db_session, clock):
    service = RecipeService(db_session, clock)
    user = unique_user()
    created = service.create(user, _recipe())

    service.delete(user, created.id)

    with pytest.raises(NotFoundError):
        service.get(user, created.id)
    assert service.list_mine(user).total == 0


def test_list_mine_filters(db_session, clock):
    service = RecipeService(db_session, clock)
    user = unique_user()
    make_recipe(db_session, user, "Kung Pao Chicken", difficulty="medium",
                categories=["rc_taste_spicy", "rc_cuisine_sichuan"])
    make_recipe(db_session, user, "Sweet Sour Pork", difficulty="hard",
                categories=["rc_taste_sweet", "rc_cuisine_cantonese"])
    make_recipe(db_session, user, "Boiled Egg", difficulty="easy", favorite=True)
    make_recipe(db_session, unique_user(), "Someone Else's Chicken")

    def names(**filters):
        return sorted(r.name for r in service.list_mine(user, **filters).items)

    assert names() == ["Boiled Egg", "Kung Pao Chicken", "Sweet Sour Pork"]
    assert names(keyword="Chicken") == ["Kung Pao Chicken"]
    assert names(tastes=["rc_taste_sweet"]) == ["Sweet Sour Pork"]
    assert names(cuisines=["rc_cuisine_sichuan"]) == ["Kung Pao Chicken"]
    assert names(difficulty=["easy", "hard"]) == ["Boiled Egg", "Sweet Sour Pork"]
    assert names(favorite=True) == ["Boiled Egg"]


def test_pagination(db_session, clock):
    service = RecipeService(db_session, clock)
    user = unique_user()
    for i in range(5):
        make_recipe(db_session, user, f"Dish {i}")

    first = service.list_mine(user, page=1, page_size=2)
    last = service.list_mine(user, page=3, page_size=2)

    assert first.total == 5
    assert len(first.items) == 2
    assert first.has_next is True
    assert first.has_prev is False
    assert len(last.items) == 1
    assert last.has_next is False


def test_favorite_is_viewer_relative(db_session, clock):
    service = RecipeService(db_session, clock)
    owner, fan = unique_user("owner"), unique_user("fan")
    public = service.create(owner, _recipe(isPublic=True))

    assert service.set_favorite(fan, public.id, True).favorite is True
    assert service.get(owner, public.id).favorite is False
    assert [r.favorite for r in service.list_public(fan).items] == [True]

    # Repeating the mark does not duplicate it
    assert service.set_favorite(fan, public.id, True).favorite is True
    assert service.set_favorite(fan, public.id, False).favorite is False

    assert service.set_favorite(owner, public.id, True).favorite is True
    assert service.get(fan, public.id).favorite is False


def test_clone_public_recipe(db_session, clock):
    service = RecipeService(db_session, clock)
    owner, cook = unique_user("owner"), unique_user("cook")
    public = service.create(owner, _recipe(isPublic=True))

    copy = service.clone_to_mine(cook, public.id)

    assert copy.id != public.id
    assert copy.owner_user_id == cook
    assert copy.is_public is False
    assert [i.name for i in copy.ingredients] == ["chicken", "peanuts"]
    assert service.list_mine(cook).total == 1

    private = service.create(owner, _recipe("Private"))
    with pytest.raises(NotFoundError):
        service.clone_to_mine(cook, private.id)


def test_recipe_endpoints(client):
    owner, fan = unique_user("owner"), unique_user("fan")
    response = client.post(
        "/api/recipes",
        json={"name": "Tomato Egg", "time": "10 min", "isPublic": True,
              "ingredients": [{"name": "tomato"}, {"name": "egg"}]},
        headers=auth(owner),
    )
    assert response.status_code == 201
    recipe_id = response.json()["data"]["id"]

    response = client.get("/api/recipes/public", params={"keyword": "Tomato"}, headers=auth(fan))
    assert response.json()["data"]["total"] == 1

    response = client.put(f"/api/recipes/{recipe_id}/favorite", json={"favorite": True}, headers=auth(fan))
    assert response.json()["data"]["favorite"] is True

    response = client.post(f"/api/recipes/{recipe_id}/clone", headers=auth(fan))
    assert response.status_code == 201
    assert response.json()["data"]["ownerUserId"] == fan

    response = client.get("/api/recipes", headers=auth(fan))
    assert response.json()["data"]["total"] == 1

    response = client.delete(f"/api/recipes/{recipe_id}", headers=auth(fan))
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"
