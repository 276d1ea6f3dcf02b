"""
Recipe endpoints for API v1.

These routes expose CRUD operations over the in‑memory recipe store
plus a search by tag.  Every handler receives the store through the
``get_store`` dependency.  Not‑found conditions are raised as
``HTTPException`` and turned into ``{"error": ...}`` bodies by the
handlers registered in ``main``; the same happens to request bodies
that fail validation, which are answered with HTTP 400.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from recipes_api.app.api.deps import get_store
from recipes_api.app.core.errors import RecipeNotFoundError
from recipes_api.app.schemas.common import ErrorResponse, MessageResponse
from recipes_api.app.schemas.recipe import Recipe, RecipeIn
from recipes_api.app.services.recipe_store import RecipeStore

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Invalid recipe ID"}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid input"}}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=RecipeNotFoundError.message)


@router.get("", response_model=List[Recipe])
async def list_recipes(store: RecipeStore = Depends(get_store)) -> List[Recipe]:
    """Return every recipe in the order it was loaded or created."""
    return store.all()


# Declared before ``/{recipe_id}`` so that "search" is not taken for an id.
@router.get("/search", response_model=List[Recipe])
async def search_recipes(
    tag: str = Query("", description="Tag of the recipe, compared case‑insensitively"),
    store: RecipeStore = Depends(get_store),
) -> List[Recipe]:
    """Return recipes having ``tag`` among their tags.

    An unmatched tag yields an empty list, never a 404.
    """
    return store.search(tag)


@router.get("/{recipe_id}", response_model=Recipe, responses=NOT_FOUND)
async def get_recipe(recipe_id: str, store: RecipeStore = Depends(get_store)) -> Recipe:
    try:
        return store.get(recipe_id)
    except RecipeNotFoundError as e:
        raise _not_found() from e


@router.post(
    "",
    response_model=Recipe,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_recipe(recipe_in: RecipeIn, store: RecipeStore = Depends(get_store)) -> Recipe:
    """Create a new recipe.

    The server assigns ``id`` and ``published_at``; values sent by the
    client for either field are ignored.
    """
    return store.add(recipe_in)


@router.put("/{recipe_id}", response_model=Recipe, responses={**BAD_REQUEST, **NOT_FOUND})
async def update_recipe(
    recipe_id: str,
    recipe_in: RecipeIn,
    store: RecipeStore = Depends(get_store),
) -> Recipe:
    """Replace an existing recipe.

    This is a full replace: fields missing from the body become empty.
    The ``id`` in the path wins over any ``id`` in the body.
    """
    try:
        return store.replace(recipe_id, recipe_in)
    except RecipeNotFoundError as e:
        raise _not_found() from e


@router.delete("/{recipe_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_recipe(recipe_id: str, store: RecipeStore = Depends(get_store)) -> MessageResponse:
    try:
        store.remove(recipe_id)
    except RecipeNotFoundError as e:
        raise _not_found() from e
    return MessageResponse(message="Recipe has been deleted")
