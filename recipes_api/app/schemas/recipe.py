"""
Pydantic models for recipe data.

``RecipeBase`` holds the fields a client controls.  ``RecipeIn`` is
the body accepted by create and update: every field is optional and
falls back to its empty value, because updates replace the whole
record rather than merging into it.  ``Recipe`` is the stored record
returned by every endpoint.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class RecipeBase(BaseModel):
    name: str = Field("", examples=["Homemade Pizza"])
    tags: List[str] = Field(default_factory=list, examples=[["italian", "pizza", "dinner"]])
    ingredients: List[str] = Field(default_factory=list, examples=[["1 1/2 cups warm water", "1 package yeast"]])
    instructions: List[str] = Field(default_factory=list, examples=[["Proof the yeast.", "Knead the dough."]])

    @field_validator("tags", "ingredients", "instructions", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        # JSON null stands for an empty list
        return [] if v is None else v

    @field_validator("name", mode="before")
    @classmethod
    def null_as_blank(cls, v):
        return "" if v is None else v


class RecipeIn(RecipeBase):
    """Request body for creating or replacing a recipe.

    ``id`` is always overwritten by the server.  ``published_at`` is
    ignored on create and copied as‑is on update.
    """

    id: Optional[str] = None
    published_at: Optional[datetime] = None


class Recipe(RecipeBase):
    """A stored recipe."""

    id: str = Field(..., examples=["c0283p3d0cvuglq85lpg"])
    published_at: Optional[datetime] = Field(None, examples=["2021-01-17T19:28:52.803062Z"])
