from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from models.account import Account
from models.recipe import Recipe, RecipeFields
from store import current_account, get_recipe_store
from stores.recipes import RecipeStore

router = APIRouter(prefix="/data/recipes", tags=["recipes"])


@router.get("", response_model=list[Recipe])
async def list_recipes(
    owner_id: Optional[str] = Query(default=None, alias="ownerId"),
    recipes: RecipeStore = Depends(get_recipe_store),
):
    """
    Returns every recipe, newest first.
    With ?ownerId=... only that account's recipes are returned.
    """
    return recipes.list(owner_id=owner_id)


@router.get("/{recipe_id}", response_model=Recipe)
async def get_recipe(recipe_id: str, recipes: RecipeStore = Depends(get_recipe_store)):
    return recipes.get(recipe_id)


@router.post("", status_code=201, response_model=Recipe)
async def create_recipe(
    caller: Account = Depends(current_account),
    body: Optional[RecipeFields] = Body(default=None),
    recipes: RecipeStore = Depends(get_recipe_store),
):
    return recipes.create(caller, body or RecipeFields())


@router.put("/{recipe_id}", response_model=Recipe)
async def update_recipe(
    recipe_id: str,
    caller: Account = Depends(current_account),
    body: Optional[RecipeFields] = Body(default=None),
    recipes: RecipeStore = Depends(get_recipe_store),
):
    """Owner-only. Replaces title, imageUrl, summary and description."""
    return recipes.update(caller, recipe_id, body or RecipeFields())


@router.delete("/{recipe_id}", status_code=204)
async def delete_recipe(
    recipe_id: str,
    caller: Account = Depends(current_account),
    recipes: RecipeStore = Depends(get_recipe_store),
):
    recipes.remove(caller, recipe_id)
    return Response(status_code=204)
