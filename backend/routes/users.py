from typing import Optional

from fastapi import APIRouter, Body, Depends, Response
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from store import access_token, get_session_store
from stores.sessions import SessionStore

router = APIRouter(prefix="/users", tags=["users"])


# ---------- Request / Response schemas ----------

class CredentialsRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    email: str
    access_token: str


# ---------- Endpoints ----------

@router.post("/register", status_code=201, response_model=AuthResponse)
async def register(
    body: Optional[CredentialsRequest] = Body(default=None),
    sessions: SessionStore = Depends(get_session_store),
):
    """Creates an account and returns it with a first access token."""
    body = body or CredentialsRequest()
    account, token = sessions.register(body.email, body.password)
    return AuthResponse(id=account.id, email=account.email, access_token=token)


@router.post("/login", response_model=AuthResponse)
async def login(
    body: Optional[CredentialsRequest] = Body(default=None),
    sessions: SessionStore = Depends(get_session_store),
):
    """Issues a new access token; tokens from earlier logins keep working."""
    body = body or CredentialsRequest()
    account, token = sessions.login(body.email, body.password)
    return AuthResponse(id=account.id, email=account.email, access_token=token)


@router.get("/logout", status_code=204)
async def logout(
    token: Optional[str] = Depends(access_token),
    sessions: SessionStore = Depends(get_session_store),
):
    """Invalidates the X-Authorization token. Always 204, even for junk tokens."""
    sessions.logout(token)
    return Response(status_code=204)
