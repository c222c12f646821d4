from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecipeFields(BaseModel):
    """Create/update body. Required fields are enforced by RecipeStore, not here."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    image_url: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None


class Recipe(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    owner_id: Optional[str] = None   # None for seed data: nobody may edit it
    title: str
    image_url: str
    summary: str = ""
    description: str
