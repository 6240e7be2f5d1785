"""Shared fixtures: an in-memory MongoDB store wired into the app."""

import asyncio
import os

os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017/gym_tracker_test")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from api.main import app
from models.database import MongoStore, get_store


EXERCISES = [
    {"id": 3, "name": "Deadlift", "muscleGroup": "Back", "equipment": "Barbell"},
    {"id": 1, "name": "Bench Press", "muscleGroup": "Chest", "equipment": "Barbell"},
    {"id": 2, "name": "Squat", "muscleGroup": "Legs", "equipment": "Barbell"},
]


@pytest.fixture
def store():
    """A store backed by mongomock instead of a live server."""
    return MongoStore(AsyncMongoMockClient(), "gym_tracker_test")


@pytest.fixture
def run():
    """Run a coroutine to completion outside the app's event loop."""
    return asyncio.run


@pytest.fixture
def seeded_exercises(store, run):
    run(store.exercises.insert_many([dict(exercise) for exercise in EXERCISES]))
    return EXERCISES


@pytest.fixture
def client(store):
    """Test client with the store dependency overridden."""
    app.dependency_overrides[get_store] = lambda: store

    test_client = TestClient(app)
    yield test_client

    app.dependency_overrides.clear()
