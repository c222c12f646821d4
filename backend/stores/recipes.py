"""
Recipe store: the recipe records, newest first.

Records with an owner can only be changed by that owner. Records without one
(the seed data) can't be changed by anybody.
"""

import logging
import threading
import uuid
from typing import Iterable, Optional

from errors import Forbidden, InvalidInput, NotFound
from models.account import Account
from models.recipe import Recipe, RecipeFields

logger = logging.getLogger(__name__)

# (attribute, wire name) of the fields a create/update must carry
REQUIRED_FIELDS = (
    ("title", "title"),
    ("image_url", "imageUrl"),
    ("description", "description"),
)


def _check_required(fields: RecipeFields) -> None:
    missing = [wire for attr, wire in REQUIRED_FIELDS if not getattr(fields, attr)]
    if missing:
        raise InvalidInput("Missing fields: " + ", ".join(missing))


class RecipeStore:
    def __init__(self, seed: Iterable[Recipe] = ()):
        self._recipes: dict[str, Recipe] = {}
        self._order: list[str] = []
        self._lock = threading.Lock()
        for recipe in seed:
            self._recipes[recipe.id] = recipe.model_copy()
            self._order.append(recipe.id)

    def _get_owned(self, caller: Account, recipe_id: str) -> Recipe:
        # caller holds the lock
        recipe = self._recipes.get(recipe_id)
        if recipe is None:
            raise NotFound("Recipe not found")
        if recipe.owner_id is None or recipe.owner_id != caller.id:
            logger.warning(
                "Account %s may not modify recipe %s", caller.id, recipe_id
            )
            raise Forbidden("Not allowed")
        return recipe

    def list(self, owner_id: Optional[str] = None) -> list[Recipe]:
        """Return a snapshot of all recipes, optionally only those of one owner."""
        with self._lock:
            recipes = [self._recipes[rid] for rid in self._order]
        if owner_id is not None:
            recipes = [r for r in recipes if r.owner_id == owner_id]
        return recipes

    def get(self, recipe_id: str) -> Recipe:
        with self._lock:
            recipe = self._recipes.get(recipe_id)
        if recipe is None:
            raise NotFound("Recipe not found")
        return recipe

    def create(self, caller: Account, fields: RecipeFields) -> Recipe:
        _check_required(fields)

        with self._lock:
            recipe_id = str(uuid.uuid4())
            while recipe_id in self._recipes:
                recipe_id = str(uuid.uuid4())
            recipe = Recipe(
                id=recipe_id,
                owner_id=caller.id,
                title=fields.title,
                image_url=fields.image_url,
                summary=fields.summary or "",
                description=fields.description,
            )
            self._recipes[recipe_id] = recipe
            self._order.insert(0, recipe_id)

        logger.info("Account %s created recipe %s", caller.id, recipe_id)
        return recipe

    def update(self, caller: Account, recipe_id: str, fields: RecipeFields) -> Recipe:
        """
        Replace every editable field of an owned recipe.

        Checks run in the order NotFound, Forbidden, InvalidInput. Identifier,
        owner and list position are kept.
        """
        with self._lock:
            current = self._get_owned(caller, recipe_id)
            _check_required(fields)
            updated = current.model_copy(update={
                "title": fields.title,
                "image_url": fields.image_url,
                "summary": fields.summary or "",
                "description": fields.description,
            })
            self._recipes[recipe_id] = updated

        logger.info("Account %s updated recipe %s", caller.id, recipe_id)
        return updated

    def remove(self, caller: Account, recipe_id: str) -> None:
        with self._lock:
            self._get_owned(caller, recipe_id)
            del self._recipes[recipe_id]
            self._order.remove(recipe_id)

        logger.info("Account %s deleted recipe %s", caller.id, recipe_id)
