from datetime import datetime, timezone

from pydantic import BaseModel, Field


class Session(BaseModel):
    token: str
    account_id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
