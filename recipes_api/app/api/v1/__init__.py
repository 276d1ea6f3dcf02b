"""
Version 1 of the API.

Version 1 is mounted at the root of the application, so its recipe
routes live under ``/recipes``.
"""
