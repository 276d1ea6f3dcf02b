"""
Shared FastAPI dependencies.

The recipe store is created by ``create_app`` and kept on
``app.state``; handlers receive it through ``get_store`` instead of
importing a module level global, so each application instance (and
each test) owns its own store.
"""

from fastapi import Request

from recipes_api.app.services.recipe_store import RecipeStore


def get_store(request: Request) -> RecipeStore:
    return request.app.state.store
