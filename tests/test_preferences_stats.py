"""
Tests for family preferences and monthly statistics.
"""

from datetime import timedelta

import pytest

from test_fixtures import TODAY, auth, make_item, make_recipe, unique_user
from app.exceptions import NotFoundError, ServiceValidationError
from domain.schemas.menu_schemas import OrderCreate
from domain.schemas.preference_schemas import FamilyMemberInput
from services.order_service import OrderService
from services.preference_service import PreferenceService
from services.stats_service import StatsService, waste_reduction_rate


# =============================================================================
# FAMILY PREFERENCES
# =============================================================================


def test_upsert_creates_then_updates(db_session, clock):
    service = PreferenceService(db_session, clock)
    user = unique_user()

    members = service.upsert_members(
        user,
        [
            FamilyMemberInput(name="Mom", preferences={"tastes": ["spicy"], "allergies": ["peanut"]}),
            FamilyMemberInput(name="Kid"),
        ],
    )
    assert sorted(m.name for m in members) == ["Kid", "Mom"]
    mom = next(m for m in members if m.name == "Mom")
    assert mom.preferences.allergies == ["peanut"]
    assert mom.preferences.dislikes == []

    members = service.upsert_members(
        user, [FamilyMemberInput(id=mom.id, name="Mother", preferences={"dislikes": ["celery"]})]
    )
    mother = next(m for m in members if m.id == mom.id)
    assert mother.name == "Mother"
    assert mother.preferences.dislikes == ["celery"]
    assert mother.preferences.tastes == []
    assert len(members) == 2


def test_upsert_skips_members_of_other_users(db_session, clock):
    service = PreferenceService(db_session, clock)
    owner, intruder = unique_user("owner"), unique_user("intruder")
    (member,) = service.upsert_members(owner, [FamilyMemberInput(name="Dad")])

    result = service.upsert_members(intruder, [FamilyMemberInput(id=member.id, name="Hacked")])

    assert result == []
    assert service.list_members(owner)[0].name == "Dad"


def test_delete_member(db_session, clock):
    service = PreferenceService(db_session, clock)
    user = unique_user()
    (member,) = service.upsert_members(user, [FamilyMemberInput(name="Grandpa")])

    service.delete_member(user, member.id)

    assert service.list_members(user) == []
    with pytest.raises(NotFoundError):
        service.delete_member(user, member.id)


# =============================================================================
# STATISTICS
# =============================================================================


@pytest.mark.parametrize(
    "total, expiring, expected",
    [(0, 0, 0.0), (10, 0, 50.0), (10, 5, 0.0), (10, 8, 0.0), (4, 1, 25.0), (3, 1, 16.67)],
)
def test_waste_reduction_rate(total, expiring, expected):
    assert waste_reduction_rate(total, expiring) == expected


def test_stats_snapshot(db_session, clock):
    user = unique_user()
    make_recipe(db_session, user, "A", favorite=True)
    make_recipe(db_session, user, "B")
    make_item(db_session, user, "Milk", expiry=TODAY + timedelta(days=1))
    for offset in (10, 11, 12):
        make_item(db_session, user, f"Jar {offset}", expiry=TODAY + timedelta(days=offset))

    orders = OrderService(db_session, clock)
    order = orders.create_order(user, OrderCreate(recipes=[{"recipeId": "x"}]))
    orders.confirm_order(user, order.id)
    orders.create_order(user, OrderCreate(recipes=[{"recipeId": "y"}]))

    stats = StatsService(db_session, clock).get_stats(user)

    assert stats.month == "2024-03"
    assert stats.monthly_cooking_count == 1
    assert stats.total_recipes == 2
    assert stats.favorite_recipes == 1
    assert stats.waste_reduction_rate == 25.0


def test_cooking_count_uses_the_service_clock(db_session, clock):
    user = unique_user()
    orders = OrderService(db_session, clock)
    march = orders.create_order(user, OrderCreate(recipes=[{"recipeId": "x"}]))
    orders.confirm_order(user, march.id)
    assert march.created_at == clock.now()

    clock.advance(days=20)
    april = orders.create_order(user, OrderCreate(recipes=[{"recipeId": "y"}]))
    orders.confirm_order(user, april.id)

    stats = StatsService(db_session, clock)
    assert stats.get_stats(user).month == "2024-04"
    assert stats.get_stats(user).monthly_cooking_count == 1
    assert stats.get_stats(user, "2024-03").monthly_cooking_count == 1
    assert stats.get_stats(user, "2024-05").monthly_cooking_count == 0


def test_stats_are_cached_per_month(db_session, clock):
    user = unique_user()
    service = StatsService(db_session, clock)
    first = service.get_stats(user, "2024-03")
    make_recipe(db_session, user, "Late addition")

    again = service.get_stats(user, "2024-03")
    fresh = service.get_stats(user, "2024-04")

    assert first.total_recipes == again.total_recipes == 0
    assert fresh.total_recipes == 1


def test_stats_default_month_and_validation(db_session, clock):
    service = StatsService(db_session, clock)
    assert service.get_stats(unique_user()).month == "2024-03"
    with pytest.raises(ServiceValidationError):
        service.get_stats(unique_user(), "March")


def test_user_endpoints(client):
    user = unique_user()
    response = client.put(
        "/api/user/preferences",
        json={"members": [{"name": "Mom", "preferences": {"tastes": ["sour"]}}]},
        headers=auth(user),
    )
    assert response.status_code == 200
    member_id = response.json()["data"][0]["id"]

    response = client.get("/api/user/preferences", headers=auth(user))
    assert response.json()["data"][0]["preferences"]["tastes"] == ["sour"]

    response = client.delete(f"/api/user/preferences/{member_id}", headers=auth(user))
    assert response.status_code == 200

    response = client.get("/api/user/stats", params={"month": "2024-02"}, headers=auth(user))
    data = response.json()["data"]
    assert data["month"] == "2024-02"
    assert data["monthlyCookingCount"] == 0
    assert data["wasteReductionRate"] == 0
