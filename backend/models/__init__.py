from models.account import Account
from models.recipe import Recipe, RecipeFields
from models.session import Session

__all__ = ["Account", "Recipe", "RecipeFields", "Session"]
