"""
Pydantic schema definitions for API payloads.

Request bodies and stored records are both defined here so that the
store and the HTTP layer share a single representation of a recipe.
"""
