from pydantic import BaseModel, Field


class Account(BaseModel):
    id: str
    email: str
    password: str = Field(exclude=True)  # verifier's stored form, never serialised
