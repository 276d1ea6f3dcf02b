"""
In‑memory recipe store.

The ``RecipeStore`` keeps every recipe in an insertion‑ordered mapping
keyed by id, which gives constant‑time lookups while preserving the
order in which recipes were loaded or created.  Replacing a record
keeps its position and deleting one leaves the order of the others
untouched.

The store is filled once from a JSON seed file (``load_recipes``) and
afterwards changes only through the methods below.  A single lock
guards every method so that a lookup and the mutation that depends on
it cannot interleave with another request.
"""

from __future__ import annotations

import json
import logging
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Union

from pydantic import ValidationError

from recipes_api.app.core.errors import RecipeNotFoundError, SeedFileError
from recipes_api.app.schemas.recipe import Recipe, RecipeIn

logger = logging.getLogger(__name__)


def load_recipes(path: Union[str, Path]) -> List[Recipe]:
    """Read the seed file at ``path`` and return its recipes in file order.

    The file must contain a JSON array of recipe objects, each with an
    ``id``.  Raises ``SeedFileError`` if the file cannot be read, is
    not valid JSON, is not an array, holds an invalid record or
    repeats an id.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeedFileError(str(path), e.strerror or str(e)) from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SeedFileError(str(path), f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise SeedFileError(str(path), "expected a JSON array of recipes")

    recipes: List[Recipe] = []
    seen = set()
    for position, item in enumerate(data):
        try:
            recipe = Recipe.model_validate(item)
        except ValidationError as e:
            raise SeedFileError(str(path), f"record {position} is invalid: {e}") from e
        if recipe.id in seen:
            raise SeedFileError(str(path), f"duplicate recipe id {recipe.id!r}")
        seen.add(recipe.id)
        recipes.append(recipe)
    return recipes


def new_recipe_id() -> str:
    """Return a fresh opaque recipe identifier."""
    return uuid.uuid4().hex


class RecipeStore:
    """Ordered, lock‑guarded collection of recipes."""

    def __init__(self, recipes: Iterable[Recipe] = ()) -> None:
        self._lock = threading.Lock()
        self._recipes: Dict[str, Recipe] = {}
        for recipe in recipes:
            if recipe.id in self._recipes:
                raise ValueError(f"duplicate recipe id {recipe.id!r}")
            self._recipes[recipe.id] = recipe

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RecipeStore":
        """Build a store from the seed file at ``path``."""
        store = cls(load_recipes(path))
        logger.info("Loaded %d recipes from %s", len(store), path)
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._recipes)

    def __contains__(self, recipe_id: object) -> bool:
        with self._lock:
            return recipe_id in self._recipes

    def all(self) -> List[Recipe]:
        """Return every recipe in store order."""
        with self._lock:
            return list(self._recipes.values())

    def get(self, recipe_id: str) -> Recipe:
        with self._lock:
            try:
                return self._recipes[recipe_id]
            except KeyError:
                raise RecipeNotFoundError(recipe_id) from None

    def search(self, tag: str) -> List[Recipe]:
        """Return recipes carrying ``tag``, compared case‑insensitively.

        An empty ``tag`` matches only recipes that have an empty tag.
        """
        wanted = tag.casefold()
        with self._lock:
            return [
                recipe
                for recipe in self._recipes.values()
                if any(t.casefold() == wanted for t in recipe.tags)
            ]

    def add(self, data: RecipeIn) -> Recipe:
        """Store a new recipe built from ``data`` and return it.

        The id and publication time are assigned here; any values the
        client sent for them are discarded.
        """
        fields = data.model_dump(exclude={"id", "published_at"})
        with self._lock:
            recipe_id = new_recipe_id()
            while recipe_id in self._recipes:
                recipe_id = new_recipe_id()
            recipe = Recipe(id=recipe_id, published_at=datetime.now(timezone.utc), **fields)
            self._recipes[recipe_id] = recipe
        logger.info("Created recipe %s (%s)", recipe.id, recipe.name)
        return recipe

    def replace(self, recipe_id: str, data: RecipeIn) -> Recipe:
        """Replace the recipe stored under ``recipe_id`` with ``data``.

        Every field is taken from ``data``, so omitted fields end up
        empty.  The id always stays ``recipe_id``.
        """
        recipe = Recipe(id=recipe_id, **data.model_dump(exclude={"id"}))
        with self._lock:
            if recipe_id not in self._recipes:
                raise RecipeNotFoundError(recipe_id)
            self._recipes[recipe_id] = recipe
        logger.info("Updated recipe %s", recipe_id)
        return recipe

    def remove(self, recipe_id: str) -> None:
        with self._lock:
            try:
                del self._recipes[recipe_id]
            except KeyError:
                raise RecipeNotFoundError(recipe_id) from None
        logger.info("Deleted recipe %s", recipe_id)
