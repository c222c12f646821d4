"""
Request-scoped access to the in-memory stores.

Each app built by main.create_app() owns one SessionStore and one
RecipeStore on app.state; routes reach them only through these dependencies.
"""

from typing import Optional

from fastapi import Depends, Header, Request

from models.account import Account
from stores.recipes import RecipeStore
from stores.sessions import SessionStore


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_recipe_store(request: Request) -> RecipeStore:
    return request.app.state.recipe_store


def access_token(x_authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    return x_authorization


def current_account(
    token: Optional[str] = Depends(access_token),
    sessions: SessionStore = Depends(get_session_store),
) -> Account:
    """Gate for mutating routes: 401 unless X-Authorization resolves to an account."""
    return sessions.require_auth(token)
