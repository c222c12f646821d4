"""
Tests for RecipeStore: ordering, ownership checks and the required-field rule.
"""

import threading

import pytest

from errors import Forbidden, InvalidInput, NotFound
from models.account import Account
from models.recipe import RecipeFields
from stores.recipes import RecipeStore
from stores.seed import SEED_RECIPES

ALICE = Account(id="alice", email="alice@x.com", password="p")
BOB = Account(id="bob", email="bob@x.com", password="p")


def _fields(**overrides) -> RecipeFields:
    data = {"title": "T", "image_url": "http://i", "description": "D"}
    data.update(overrides)
    return RecipeFields(**data)


# ── Listing / lookup ──────────────────────────────────────────────────────


class TestListAndGet:
    def setup_method(self):
        self.store = RecipeStore(SEED_RECIPES)

    def test_seed_recipes_present(self):
        recipes = self.store.list()
        assert [r.id for r in recipes] == ["1", "2"]
        assert all(r.owner_id is None for r in recipes)

    def test_get_unknown_id(self):
        with pytest.raises(NotFound):
            self.store.get("missing")

    def test_created_recipe_listed_first(self):
        created = self.store.create(ALICE, _fields())
        assert self.store.list()[0] == created
        second = self.store.create(BOB, _fields(title="Newer"))
        assert [r.id for r in self.store.list()[:2]] == [second.id, created.id]

    def test_filter_by_owner(self):
        mine = self.store.create(ALICE, _fields())
        self.store.create(BOB, _fields())
        assert self.store.list(owner_id="alice") == [mine]

    def test_list_is_a_snapshot(self):
        snapshot = self.store.list()
        self.store.create(ALICE, _fields())
        assert len(snapshot) == 2

    def test_stores_do_not_share_state(self):
        other = RecipeStore(SEED_RECIPES)
        self.store.create(ALICE, _fields())
        assert len(other.list()) == 2


# ── Create ────────────────────────────────────────────────────────────────


class TestCreate:
    def setup_method(self):
        self.store = RecipeStore()

    def test_example_scenario(self):
        created = self.store.create(ALICE, _fields())
        recipes = self.store.list()
        assert len(recipes) == 1
        assert recipes[0].id == created.id
        assert recipes[0].owner_id == "alice"
        assert recipes[0].summary == ""

    def test_get_round_trip(self):
        created = self.store.create(ALICE, _fields(summary="S", description="line1\nline2"))
        assert self.store.get(created.id) == created

    @pytest.mark.parametrize("missing", ["title", "image_url", "description"])
    def test_required_fields(self, missing):
        with pytest.raises(InvalidInput):
            self.store.create(ALICE, _fields(**{missing: ""}))
        with pytest.raises(InvalidInput):
            self.store.create(ALICE, _fields(**{missing: None}))
        assert self.store.list() == []

    def test_ids_are_unique(self):
        a = self.store.create(ALICE, _fields())
        b = self.store.create(ALICE, _fields())
        assert a.id != b.id


# ── Update / remove ───────────────────────────────────────────────────────


class TestOwnership:
    def setup_method(self):
        self.store = RecipeStore(SEED_RECIPES)
        self.recipe = self.store.create(ALICE, _fields())

    def test_owner_can_update(self):
        updated = self.store.update(ALICE, self.recipe.id, _fields(title="New", summary="S"))
        assert updated.id == self.recipe.id
        assert updated.owner_id == "alice"
        assert updated.title == "New"
        assert self.store.get(self.recipe.id) == updated

    def test_update_keeps_position(self):
        self.store.update(ALICE, self.recipe.id, _fields(title="New"))
        assert self.store.list()[0].id == self.recipe.id

    def test_update_clears_omitted_summary(self):
        self.store.update(ALICE, self.recipe.id, _fields(summary="S"))
        updated = self.store.update(ALICE, self.recipe.id, _fields())
        assert updated.summary == ""

    def test_other_account_forbidden(self):
        with pytest.raises(Forbidden):
            self.store.update(BOB, self.recipe.id, _fields(title="Hijack"))
        with pytest.raises(Forbidden):
            self.store.remove(BOB, self.recipe.id)
        assert self.store.get(self.recipe.id).title == "T"

    @pytest.mark.parametrize("seed_id", ["1", "2"])
    def test_seed_recipes_immutable(self, seed_id):
        with pytest.raises(Forbidden):
            self.store.update(ALICE, seed_id, _fields())
        with pytest.raises(Forbidden):
            self.store.remove(ALICE, seed_id)

    def test_update_unknown_id(self):
        with pytest.raises(NotFound):
            self.store.update(ALICE, "missing", _fields())

    def test_not_found_checked_before_fields(self):
        with pytest.raises(NotFound):
            self.store.update(ALICE, "missing", RecipeFields())

    def test_forbidden_checked_before_fields(self):
        with pytest.raises(Forbidden):
            self.store.update(BOB, self.recipe.id, RecipeFields())

    def test_update_with_missing_fields_leaves_record(self):
        with pytest.raises(InvalidInput):
            self.store.update(ALICE, self.recipe.id, _fields(description=""))
        assert self.store.get(self.recipe.id) == self.recipe

    def test_remove_then_not_found(self):
        self.store.remove(ALICE, self.recipe.id)
        with pytest.raises(NotFound):
            self.store.get(self.recipe.id)
        with pytest.raises(NotFound):
            self.store.remove(ALICE, self.recipe.id)
        assert [r.id for r in self.store.list()] == ["1", "2"]

    def test_remove_unknown_id(self):
        with pytest.raises(NotFound):
            self.store.remove(ALICE, "missing")


# ── Concurrent writers ────────────────────────────────────────────────────


def test_concurrent_create_and_remove():
    store = RecipeStore()
    created_ids = []
    ids_lock = threading.Lock()

    def worker(n):
        caller = Account(id=f"user{n}", email=f"u{n}@x.com", password="p")
        for _ in range(50):
            recipe = store.create(caller, _fields())
            with ids_lock:
                created_ids.append(recipe.id)
            store.remove(caller, recipe.id)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.list() == []
    assert len(created_ids) == 8 * 50
    assert len(set(created_ids)) == len(created_ids)
