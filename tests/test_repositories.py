"""
Repository tests against a real (in-memory SQLite) database.

Covers:
- UserRepository: email lookup, counts, account row deletion
- RecipeRepository: filtering, ordering and pagination
- FavoriteRepository: pair lookup and favorites listing
"""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from test_fixtures import (  # noqa: F401
    database,
    db_session,
    make_user,
    make_recipe,
    unique_email,
)
from domain.models import Favorite, Recipe, User
from domain.schemas.recipe_schemas import RecipeFilters
from repositories import FavoriteRepository, RecipeRepository, UserRepository


# =============================================================================
# USER REPOSITORY
# =============================================================================


def test_create_user_normalizes_email(db_session: Session):
    user = make_user(db_session, email="  Mixed.Case@Example.COM ")

    assert user.id is not None
    assert user.email == "mixed.case@example.com"
    assert UserRepository(db_session).get_by_email("MIXED.case@example.com").id == user.id


def test_email_unique_constraint(db_session: Session):
    email = unique_email("dup")
    make_user(db_session, email=email)

    with pytest.raises(IntegrityError):
        make_user(db_session, email=email)
    db_session.rollback()


def test_email_taken_by_other(db_session: Session):
    ada = make_user(db_session)
    tunde = make_user(db_session, profile_type="chef")
    repo = UserRepository(db_session)

    assert repo.email_taken_by_other(tunde.email, ada.id) is True
    assert repo.email_taken_by_other(ada.email, ada.id) is False
    assert repo.email_taken_by_other(unique_email(), ada.id) is False


def test_counts(db_session: Session):
    ada = make_user(db_session)
    tunde = make_user(db_session, profile_type="chef")
    r1 = make_recipe(db_session, ada)
    make_recipe(db_session, ada, name="Efo Riro")
    FavoriteRepository(db_session).add(tunde.id, r1.id)

    repo = UserRepository(db_session)
    assert repo.count_recipes(ada.id) == 2
    assert repo.count_recipes(tunde.id) == 0
    assert repo.count_favorites(tunde.id) == 1
    assert repo.count_favorites(ada.id) == 0


def test_delete_account_rows_removes_owned_data_and_foreign_favorites(db_session: Session):
    ada = make_user(db_session)
    tunde = make_user(db_session, profile_type="chef")
    ada_recipe = make_recipe(db_session, ada)
    tunde_recipe = make_recipe(db_session, tunde, name="Suya")
    fav_repo = FavoriteRepository(db_session)
    fav_repo.add(ada.id, tunde_recipe.id)
    fav_repo.add(tunde.id, ada_recipe.id)

    counts = UserRepository(db_session).delete_account_rows(ada.id)
    db_session.commit()

    assert counts == {"favorites": 2, "recipes": 1, "users": 1}
    assert db_session.query(User).filter(User.id == ada.id).count() == 0
    assert db_session.query(Recipe).filter(Recipe.user_id == ada.id).count() == 0
    assert db_session.query(Favorite).count() == 0
    # Tunde's own recipe survives
    assert db_session.query(Recipe).filter(Recipe.id == tunde_recipe.id).count() == 1


# =============================================================================
# RECIPE REPOSITORY
# =============================================================================


def test_search_filters(db_session: Session):
    owner = make_user(db_session)
    make_recipe(db_session, owner, name="Jollof Rice", category="Nigerian", rating=4.8, cooking_time=60)
    make_recipe(
        db_session,
        owner,
        name="Pad Thai",
        category="Thai",
        rating=4.0,
        cooking_time=25,
        description="Rice noodles",
    )
    make_recipe(db_session, owner, name="Moi Moi", category="Nigerian", rating=3.5, cooking_time=90)
    repo = RecipeRepository(db_session)

    nigerian, total = repo.search(RecipeFilters(category="Nigerian"))
    assert total == 2
    assert {r.name for r in nigerian} == {"Jollof Rice", "Moi Moi"}

    rice, _ = repo.search(RecipeFilters(q="RICE"))
    assert {r.name for r in rice} == {"Jollof Rice", "Pad Thai"}

    good, _ = repo.search(RecipeFilters(min_rating=4.0))
    assert {r.name for r in good} == {"Jollof Rice", "Pad Thai"}

    quick, _ = repo.search(RecipeFilters(max_cooking_time=60))
    assert {r.name for r in quick} == {"Jollof Rice", "Pad Thai"}


def test_search_pagination_newest_first(db_session: Session):
    owner = make_user(db_session)
    created = [make_recipe(db_session, owner, name=f"Recipe {i}") for i in range(12)]
    repo = RecipeRepository(db_session)

    page2, total = repo.search(RecipeFilters(), page=2, limit=5)

    assert total == 12
    assert len(page2) == 5
    # created_at ties are broken by id, newest first
    expected = [r.id for r in reversed(created)][5:10]
    assert [r.id for r in page2] == expected


def test_get_with_author_and_list_by_user(db_session: Session):
    ada = make_user(db_session)
    tunde = make_user(db_session, profile_type="chef")
    r1 = make_recipe(db_session, ada)
    r2 = make_recipe(db_session, ada, name="Akara")
    make_recipe(db_session, tunde, name="Suya")
    repo = RecipeRepository(db_session)

    loaded = repo.get_with_author(r1.id)
    assert loaded.user.id == ada.id
    assert loaded.author_name == "Adaeze Okafor"
    assert repo.get_with_author(99999) is None

    assert [r.id for r in repo.list_by_user(ada.id)] == [r2.id, r1.id]
    assert repo.list_by_user(12345) == []


# =============================================================================
# FAVORITE REPOSITORY
# =============================================================================


def test_favorite_pair_is_unique(db_session: Session):
    user = make_user(db_session)
    recipe = make_recipe(db_session, user)
    repo = FavoriteRepository(db_session)

    repo.add(user.id, recipe.id)
    assert repo.get_pair(user.id, recipe.id) is not None

    with pytest.raises(IntegrityError):
        repo.add(user.id, recipe.id)
    db_session.rollback()


def test_list_recipes_for_user_newest_favorite_first(db_session: Session):
    cook = make_user(db_session)
    fan = make_user(db_session, profile_type="casual")
    first = make_recipe(db_session, cook, name="Ofada Stew")
    second = make_recipe(db_session, cook, name="Puff Puff")
    repo = FavoriteRepository(db_session)
    repo.add(fan.id, first.id)
    repo.add(fan.id, second.id)

    recipes = repo.list_recipes_for_user(fan.id)

    assert [r.id for r in recipes] == [second.id, first.id]
    assert repo.list_recipes_for_user(cook.id) == []
