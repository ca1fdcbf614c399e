# backend/tests/conftest.py
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.game_state import active_games
from app.main import app
from app.schemas.game import GameState, Positions
from app.schemas.room import RoomState
from app.services.save_service import save_store


def _ring_connections():
    """Rooms 1..30 in a simple ring: each room links to the one before and after it."""
    connections = {}
    for room in range(1, 31):
        before = 30 if room == 1 else room - 1
        after = 1 if room == 30 else room + 1
        connections[room] = sorted([before, after])
    connections[31] = []
    connections[32] = []
    return connections


@pytest.fixture
def game_state() -> GameState:
    """
    A small, fully predictable cave. The player starts in room 1 (neighbours 2 and 30).
    Druika in 10, pits in 20 and 25, bats in 15, exit in 5, gift shop in 3.
    """
    rooms = {room: RoomState(text=f"Plain chamber number {room}.", mood="calm") for room in range(1, 31)}
    rooms[31] = RoomState(text="A hidden chamber.", mood="ancient", special="hidden_chamber")
    rooms[32] = RoomState(text="The wizard's sanctum.", mood="magical", special="wizard_sanctum")
    state = GameState(
        positions=Positions(wumpus=10, pit1=20, pit2=25, bat=15, exit=5, gift_shop=3),
        room_connections=_ring_connections(),
        rooms=rooms,
        current_position=1,
        position_history=[1],
        visited_rooms=[1],
    )
    return state


@pytest.fixture(autouse=True)
def quiet_cave():
    """No random whispers unless a test asks for them."""
    with patch("app.game_logic.room_events.CAVE_MESSAGE_CHANCE", 0.0):
        yield


@pytest.fixture(autouse=True)
def clean_stores():
    active_games.clear()
    save_store._slots.clear()
    yield
    active_games.clear()
    save_store._slots.clear()


@pytest.fixture(scope="session")
def test_client():
    """A TestClient running the real app, lifespan included."""
    with TestClient(app) as client:
        yield client
