"""
Pytest configuration and fixtures for the Recipes API tests.

This module provides shared fixtures for testing including:
- A seed file written to a temporary directory
- A fresh application (and therefore a fresh store) per test
- A test client
"""

import json

import pytest
from fastapi.testclient import TestClient

from recipes_api.app.main import create_app

SEED_RECIPES = [
    {
        "id": "r1",
        "name": "Chocolate Lava Cake",
        "tags": ["Dessert", "chocolate"],
        "ingredients": ["butter", "chocolate", "eggs"],
        "instructions": ["Melt.", "Bake."],
        "published_at": "2021-01-17T19:28:52.803062Z",
    },
    {
        "id": "r2",
        "name": "Homemade Pizza",
        "tags": ["italian", "pizza"],
        "ingredients": ["flour", "yeast", "water"],
        "instructions": ["Knead.", "Bake."],
        "published_at": "2021-01-17T19:28:52.803113Z",
    },
    {
        "id": "r3",
        "name": "Lemon Tart",
        "tags": ["DESSERT", "citrus"],
        "ingredients": ["lemons", "eggs", "sugar"],
        "instructions": ["Blind bake.", "Fill.", "Bake."],
        "published_at": "2021-01-17T19:28:52.803159Z",
    },
    {
        "id": "r4",
        "name": "Plain Rice",
        "tags": [""],
        "ingredients": ["rice", "water"],
        "instructions": ["Boil."],
        "published_at": "2021-01-17T19:28:52.803203Z",
    },
]


@pytest.fixture
def seed_data():
    """Return a fresh copy of the seed records."""
    return json.loads(json.dumps(SEED_RECIPES))


@pytest.fixture
def seed_file(tmp_path, seed_data):
    """Write the seed records to a temporary JSON file."""
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps(seed_data), encoding="utf-8")
    return path


@pytest.fixture
def app(seed_file):
    """Create an application backed by the temporary seed file."""
    return create_app(str(seed_file))


@pytest.fixture
def client(app):
    """Create a test client for making requests."""
    return TestClient(app)


@pytest.fixture
def store(app):
    """The recipe store owned by ``app``."""
    return app.state.store
